from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from store_admin import schemas
from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.services.catalog import color_lifecycle

router = APIRouter()

@router.get("/colors/{color_id}", response_model=Optional[schemas.Color])
def read_color(color_id: str, db: Session = Depends(deps.get_db)):
    return color_lifecycle.get(db, color_id)

@router.get("/{store_id}/colors", response_model=List[schemas.Color])
def read_colors(store_id: str, db: Session = Depends(deps.get_db)):
    return color_lifecycle.list(db, store_id)

@router.get("/{store_id}/colors/{color_id}", response_model=Optional[schemas.Color])
def read_store_color(store_id: str, color_id: str, db: Session = Depends(deps.get_db)):
    return color_lifecycle.get_in_store(db, store_id, color_id)

@router.post("/{store_id}/colors", response_model=schemas.Color)
def create_color(
    store_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return color_lifecycle.create(db, identity, store_id, payload)

@router.patch("/{store_id}/colors/{color_id}", response_model=schemas.Color)
def update_color(
    store_id: str,
    color_id: str,
    payload: bytes = Depends(deps.get_raw_body),
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return color_lifecycle.update(db, identity, store_id, color_id, payload)

@router.delete("/{store_id}/colors/{color_id}", response_model=schemas.DeleteResult)
def delete_color(
    store_id: str,
    color_id: str,
    db: Session = Depends(deps.get_db),
    identity: IdentityContext = Depends(deps.get_identity)
):
    return color_lifecycle.delete(db, identity, store_id, color_id)
