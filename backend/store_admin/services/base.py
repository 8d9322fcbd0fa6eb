from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from store_admin.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class StoreScopedService(Generic[ModelType]):
    """
    CRUD access to a catalog table whose rows belong to exactly one store.

    Lookups come in two flavours: ``get`` by id alone (storefront detail
    pages) and ``get_in_store`` which also filters on ``store_id`` so a
    request scoped to one store never reaches another store's rows.
    """

    model: Type[ModelType]

    def query(self, db: Session):
        return db.query(self.model)

    def get(self, db: Session, obj_id: str) -> Optional[ModelType]:
        return self.query(db).filter(self.model.id == obj_id).first()

    def get_in_store(self, db: Session, store_id: str, obj_id: str) -> Optional[ModelType]:
        return self.query(db).filter(
            self.model.id == obj_id,
            self.model.store_id == store_id
        ).first()

    def get_multi(self, db: Session, store_id: str) -> List[ModelType]:
        return (
            self.query(db)
            .filter(self.model.store_id == store_id)
            .order_by(self.model.created_at.desc())
            .all()
        )

    def create(self, db: Session, store_id: str, obj_in: BaseModel) -> ModelType:
        db_obj = self.model(store_id=store_id, **obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, db_obj: ModelType, obj_in: BaseModel) -> ModelType:
        for field, value in obj_in.model_dump().items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, store_id: str, obj_id: str) -> int:
        count = db.query(self.model).filter(
            self.model.id == obj_id,
            self.model.store_id == store_id
        ).delete(synchronize_session=False)
        db.commit()
        return count

    def count_dependants(self, db: Session, db_obj: ModelType) -> int:
        return 0
