from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from store_admin import schemas
from store_admin.services.billboard_service import billboard_service
from store_admin.services.category_service import category_service
from store_admin.services.color_service import color_service
from store_admin.services.lifecycle import ResourceLifecycle, StoreLifecycle, missing_reference
from store_admin.services.product_service import product_service
from store_admin.services.size_service import size_service


class BillboardLifecycle(ResourceLifecycle):
    name = "billboard"
    service = billboard_service
    create_schema = schemas.BillboardCreate
    update_schema = schemas.BillboardUpdate
    dependant_name = "categories"


class CategoryLifecycle(ResourceLifecycle):
    name = "category"
    service = category_service
    create_schema = schemas.CategoryCreate
    update_schema = schemas.CategoryUpdate
    dependant_name = "products"

    def reference_errors(self, db: Session, store_id: str, data) -> List[Dict[str, str]]:
        return missing_reference(db, billboard_service, store_id, data.billboard_id, "billboardId", "Billboard")


class ColorLifecycle(ResourceLifecycle):
    name = "color"
    service = color_service
    create_schema = schemas.ColorCreate
    update_schema = schemas.ColorUpdate
    dependant_name = "products"


class SizeLifecycle(ResourceLifecycle):
    name = "size"
    service = size_service
    create_schema = schemas.SizeCreate
    update_schema = schemas.SizeUpdate
    dependant_name = "products"


class ProductLifecycle(ResourceLifecycle):
    name = "product"
    service = product_service
    create_schema = schemas.ProductCreate
    update_schema = schemas.ProductUpdate

    def list(self, db: Session, store_id: str,
             category_id: Optional[str] = None,
             color_id: Optional[str] = None,
             size_id: Optional[str] = None,
             is_featured: Optional[bool] = None):
        """Storefront listing; archived products are never included."""
        return product_service.get_multi(
            db, store_id,
            category_id=category_id,
            color_id=color_id,
            size_id=size_id,
            is_featured=is_featured,
        )

    def reference_errors(self, db: Session, store_id: str, data) -> List[Dict[str, str]]:
        return (
            missing_reference(db, category_service, store_id, data.category_id, "categoryId", "Category")
            + missing_reference(db, color_service, store_id, data.color_id, "colorId", "Color")
            + missing_reference(db, size_service, store_id, data.size_id, "sizeId", "Size")
        )


store_lifecycle = StoreLifecycle()
billboard_lifecycle = BillboardLifecycle()
category_lifecycle = CategoryLifecycle()
color_lifecycle = ColorLifecycle()
size_lifecycle = SizeLifecycle()
product_lifecycle = ProductLifecycle()
