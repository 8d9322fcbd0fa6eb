from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin import schemas
from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.services.catalog import size_lifecycle

router = APIRouter()

@router.get("/sizes/{size_id}", response_model=Optional[schemas.Size])
def read_size(size_id: str, db: Session = Depends(deps.get_db)):
    return size_lifecycle.get(db, size_id)

@router.get("/{store_id}/sizes", response_model=List[schemas.Size])
def read_sizes(store_id: str, db: Session = Depends(deps.get_db)):
    return size_lifecycle.list(db, store_id)

@router.get("/{store_id}/sizes/{size_id}", response_model=Optional[schemas.Size])
def read_store_size(store_id: str, size_id: str, db: Session = Depends(deps.get_db)):
    return size_lifecycle.get_in_store(db, store_id, size_id)

@router.post("/{store_id}/sizes", response_model=schemas.Size)
def create_size(
    store_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return size_lifecycle.create(db, identity, store_id, payload)

@router.patch("/{store_id}/sizes/{size_id}", response_model=schemas.Size)
def update_size(
    store_id: str,
    size_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return size_lifecycle.update(db, identity, store_id, size_id, payload)

@router.delete("/{store_id}/sizes/{size_id}", response_model=schemas.DeleteResult)
def delete_size(
    store_id: str,
    size_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return size_lifecycle.delete(db, identity, store_id, size_id)
