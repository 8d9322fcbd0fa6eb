from .store_service import store_service
from .billboard_service import billboard_service
from .category_service import category_service
from .color_service import color_service
from .size_service import size_service
from .product_service import product_service

__all__ = [
    "store_service",
    "billboard_service",
    "category_service",
    "color_service",
    "size_service",
    "product_service",
]
