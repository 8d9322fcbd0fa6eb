from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from .category import Category
from .color import Color
from .common import CamelModel, WriteModel, check_http_url
from .size import Size

class ProductImageIn(WriteModel):
    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        return check_http_url(value)

class ProductBase(WriteModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category_id: str = Field(..., min_length=1)
    color_id: str = Field(..., min_length=1)
    size_id: str = Field(..., min_length=1)
    is_featured: bool = False
    is_archived: bool = False
    images: List[ProductImageIn] = Field(..., min_length=1)

class ProductCreate(ProductBase):
    pass

class ProductUpdate(ProductBase):
    pass

class ProductImage(CamelModel):
    id: str
    product_id: str
    url: str
    created_at: datetime
    updated_at: Optional[datetime] = None

class Product(CamelModel):
    id: str
    store_id: str
    category_id: str
    color_id: str
    size_id: str
    name: str
    price: Decimal
    is_featured: bool
    is_archived: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    images: List[ProductImage] = []

class ProductWithRelations(Product):
    category: Optional[Category] = None
    color: Optional[Color] = None
    size: Optional[Size] = None
