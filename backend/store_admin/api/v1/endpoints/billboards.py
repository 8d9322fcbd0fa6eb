from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin import schemas
from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.services.catalog import billboard_lifecycle

router = APIRouter()

@router.get("/billboards/{billboard_id}", response_model=Optional[schemas.Billboard])
def read_billboard(billboard_id: str, db: Session = Depends(deps.get_db)):
    """
    Public lookup by id alone; answers null when the billboard does not exist.
    """
    return billboard_lifecycle.get(db, billboard_id)

@router.get("/{store_id}/billboards", response_model=List[schemas.Billboard])
def read_billboards(store_id: str, db: Session = Depends(deps.get_db)):
    return billboard_lifecycle.list(db, store_id)

@router.get("/{store_id}/billboards/{billboard_id}", response_model=Optional[schemas.Billboard])
def read_store_billboard(store_id: str, billboard_id: str, db: Session = Depends(deps.get_db)):
    return billboard_lifecycle.get_in_store(db, store_id, billboard_id)

@router.post("/{store_id}/billboards", response_model=schemas.Billboard)
def create_billboard(
    store_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return billboard_lifecycle.create(db, identity, store_id, payload)

@router.patch("/{store_id}/billboards/{billboard_id}", response_model=schemas.Billboard)
def update_billboard(
    store_id: str,
    billboard_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return billboard_lifecycle.update(db, identity, store_id, billboard_id, payload)

@router.delete("/{store_id}/billboards/{billboard_id}", response_model=schemas.DeleteResult)
def delete_billboard(
    store_id: str,
    billboard_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return billboard_lifecycle.delete(db, identity, store_id, billboard_id)
