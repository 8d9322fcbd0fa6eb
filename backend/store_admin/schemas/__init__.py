# store_admin/schemas/__init__.py

from .common import DeleteResult
from .store import Store, StoreCreate, StoreUpdate
from .billboard import Billboard, BillboardCreate, BillboardUpdate
from .category import Category, CategoryCreate, CategoryUpdate, CategoryWithBillboard
from .color import Color, ColorCreate, ColorUpdate
from .size import Size, SizeCreate, SizeUpdate
from .product import (
    Product,
    ProductCreate,
    ProductUpdate,
    ProductImage,
    ProductImageIn,
    ProductWithRelations
)

__all__ = [
    "DeleteResult",
    "Store", "StoreCreate", "StoreUpdate",
    "Billboard", "BillboardCreate", "BillboardUpdate",
    "Category", "CategoryCreate", "CategoryUpdate", "CategoryWithBillboard",
    "Color", "ColorCreate", "ColorUpdate",
    "Size", "SizeCreate", "SizeUpdate",
    "Product", "ProductCreate", "ProductUpdate", "ProductImage", "ProductImageIn",
    "ProductWithRelations"
]
