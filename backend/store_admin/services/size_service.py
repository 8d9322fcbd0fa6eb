from sqlalchemy.orm import Session
from store_admin import models
from store_admin.services.base import StoreScopedService

class SizeService(StoreScopedService[models.Size]):
    model = models.Size

    def count_dependants(self, db: Session, db_obj: models.Size) -> int:
        return db.query(models.Product).filter(models.Product.size_id == db_obj.id).count()

size_service = SizeService()
