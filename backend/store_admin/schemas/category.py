from pydantic import Field
from typing import Optional
from datetime import datetime

from .billboard import Billboard
from .common import CamelModel, WriteModel

class CategoryBase(WriteModel):
    name: str = Field(..., min_length=1)
    billboard_id: str = Field(..., min_length=1)

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(CategoryBase):
    pass

class Category(CamelModel):
    id: str
    store_id: str
    billboard_id: str
    name: str
    created_at: datetime
    updated_at: Optional[datetime] = None

class CategoryWithBillboard(Category):
    billboard: Optional[Billboard] = None
