from sqlalchemy.orm import Session
from store_admin import models
from store_admin.services.base import StoreScopedService

class BillboardService(StoreScopedService[models.Billboard]):
    model = models.Billboard

    def count_dependants(self, db: Session, db_obj: models.Billboard) -> int:
        return db.query(models.Category).filter(models.Category.billboard_id == db_obj.id).count()

billboard_service = BillboardService()
