from sqlalchemy.orm import Session
from store_admin import models
from store_admin.services.base import StoreScopedService

class ColorService(StoreScopedService[models.Color]):
    model = models.Color

    def count_dependants(self, db: Session, db_obj: models.Color) -> int:
        return db.query(models.Product).filter(models.Product.color_id == db_obj.id).count()

color_service = ColorService()
