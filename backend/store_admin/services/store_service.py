from typing import List, Optional

from sqlalchemy.orm import Session
from store_admin import models, schemas

class StoreService:
    def get(self, db: Session, store_id: str) -> Optional[models.Store]:
        return db.query(models.Store).filter(models.Store.id == store_id).first()

    def get_all_for_user(self, db: Session, user_id: str) -> List[models.Store]:
        return (
            db.query(models.Store)
            .filter(models.Store.user_id == user_id)
            .order_by(models.Store.created_at)
            .all()
        )

    def create(self, db: Session, store: schemas.StoreCreate, user_id: str) -> models.Store:
        db_store = models.Store(user_id=user_id, **store.model_dump())
        db.add(db_store)
        db.commit()
        db.refresh(db_store)
        return db_store

    def update(self, db: Session, db_store: models.Store, store: schemas.StoreUpdate, user_id: str) -> models.Store:
        for field, value in store.model_dump().items():
            setattr(db_store, field, value)
        db_store.user_id = user_id
        db.commit()
        db.refresh(db_store)
        return db_store

    def delete_owned(self, db: Session, store_id: str, user_id: str) -> int:
        count = db.query(models.Store).filter(
            models.Store.id == store_id,
            models.Store.user_id == user_id
        ).delete(synchronize_session=False)
        db.commit()
        return count

    def count_dependants(self, db: Session, store_id: str) -> int:
        return sum(
            db.query(model).filter(model.store_id == store_id).count()
            for model in (
                models.Billboard,
                models.Category,
                models.Color,
                models.Size,
                models.Product,
            )
        )

store_service = StoreService()
