from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin import schemas
from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.services.catalog import product_lifecycle

router = APIRouter()

@router.get("/products/{product_id}", response_model=Optional[schemas.ProductWithRelations])
def read_product(product_id: str, db: Session = Depends(deps.get_db)):
    """
    Get a product with its images, category, color and size.
    """
    return product_lifecycle.get(db, product_id)

@router.get("/{store_id}/products", response_model=List[schemas.ProductWithRelations])
def read_products(
    store_id: str,
    db: Session = Depends(deps.get_db),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    color_id: Optional[str] = Query(None, alias="colorId"),
    size_id: Optional[str] = Query(None, alias="sizeId"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured")
):
    """
    Storefront listing with optional filtering. Archived products are left out.
    """
    return product_lifecycle.list(
        db,
        store_id,
        category_id=category_id,
        color_id=color_id,
        size_id=size_id,
        is_featured=is_featured
    )

@router.get("/{store_id}/products/{product_id}", response_model=Optional[schemas.ProductWithRelations])
def read_store_product(store_id: str, product_id: str, db: Session = Depends(deps.get_db)):
    return product_lifecycle.get_in_store(db, store_id, product_id)

@router.post("/{store_id}/products", response_model=schemas.Product)
def create_product(
    store_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return product_lifecycle.create(db, identity, store_id, payload)

@router.patch("/{store_id}/products/{product_id}", response_model=schemas.Product)
def update_product(
    store_id: str,
    product_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    """
    Replace the product's fields and its entire image set.
    """
    return product_lifecycle.update(db, identity, store_id, product_id, payload)

@router.delete("/{store_id}/products/{product_id}", response_model=schemas.DeleteResult)
def delete_product(
    store_id: str,
    product_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return product_lifecycle.delete(db, identity, store_id, product_id)
