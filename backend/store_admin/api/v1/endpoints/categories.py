from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin import schemas
from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.services.catalog import category_lifecycle

router = APIRouter()

@router.get("/categories/{category_id}", response_model=Optional[schemas.CategoryWithBillboard])
def read_category(category_id: str, db: Session = Depends(deps.get_db)):
    """
    Get a category together with its billboard, or null.
    """
    return category_lifecycle.get(db, category_id)

@router.get("/{store_id}/categories", response_model=List[schemas.CategoryWithBillboard])
def read_categories(store_id: str, db: Session = Depends(deps.get_db)):
    return category_lifecycle.list(db, store_id)

@router.get("/{store_id}/categories/{category_id}", response_model=Optional[schemas.CategoryWithBillboard])
def read_store_category(store_id: str, category_id: str, db: Session = Depends(deps.get_db)):
    return category_lifecycle.get_in_store(db, store_id, category_id)

@router.post("/{store_id}/categories", response_model=schemas.Category)
def create_category(
    store_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return category_lifecycle.create(db, identity, store_id, payload)

@router.patch("/{store_id}/categories/{category_id}", response_model=schemas.Category)
def update_category(
    store_id: str,
    category_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return category_lifecycle.update(db, identity, store_id, category_id, payload)

@router.delete("/{store_id}/categories/{category_id}", response_model=schemas.DeleteResult)
def delete_category(
    store_id: str,
    category_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return category_lifecycle.delete(db, identity, store_id, category_id)
