from sqlalchemy.orm import Session, joinedload
from store_admin import models
from store_admin.services.base import StoreScopedService

class CategoryService(StoreScopedService[models.Category]):
    model = models.Category

    def query(self, db: Session):
        return db.query(models.Category).options(joinedload(models.Category.billboard))

    def count_dependants(self, db: Session, db_obj: models.Category) -> int:
        return db.query(models.Product).filter(models.Product.category_id == db_obj.id).count()

category_service = CategoryService()
