from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from store_admin import schemas
from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.services.catalog import store_lifecycle

router = APIRouter()

@router.get("/stores", response_model=List[schemas.Store])
def read_stores(
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    """
    Stores owned by the caller, oldest first.
    """
    return store_lifecycle.list_owned(db, identity)

@router.post("/stores", response_model=schemas.Store)
def create_store(
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return store_lifecycle.create(db, identity, payload)

@router.get("/stores/{store_id}", response_model=schemas.Store)
def read_store(
    store_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return store_lifecycle.get_owned(db, identity, store_id)

@router.patch("/stores/{store_id}", response_model=schemas.Store)
def update_store(
    store_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return store_lifecycle.update(db, identity, store_id, payload)

@router.delete("/stores/{store_id}", response_model=schemas.DeleteResult)
def delete_store(
    store_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return store_lifecycle.delete(db, identity, store_id)
