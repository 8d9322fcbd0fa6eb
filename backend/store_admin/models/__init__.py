from .base import Base
from .store import Store
from .billboard import Billboard
from .category import Category
from .color import Color
from .size import Size
from .product import Product
from .product_image import ProductImage

__all__ = [
    "Base",
    "Store",
    "Billboard",
    "Category",
    "Color",
    "Size",
    "Product",
    "ProductImage",
]
