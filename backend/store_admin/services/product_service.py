from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload
from typing import Optional, List
from store_admin import models, schemas
from store_admin.services.base import StoreScopedService

class ProductService(StoreScopedService[models.Product]):
    model = models.Product

    def query(self, db: Session):
        return db.query(models.Product).options(
            selectinload(models.Product.images),
            joinedload(models.Product.category),
            joinedload(models.Product.color),
            joinedload(models.Product.size),
        )

    def get_multi(
            self, db: Session, store_id: str,
            category_id: Optional[str] = None,
            color_id: Optional[str] = None,
            size_id: Optional[str] = None,
            is_featured: Optional[bool] = None
    ) -> List[models.Product]:
        query = self.query(db).filter(models.Product.store_id == store_id)
        if category_id:
            query = query.filter(models.Product.category_id == category_id)
        if color_id:
            query = query.filter(models.Product.color_id == color_id)
        if size_id:
            query = query.filter(models.Product.size_id == size_id)
        if is_featured is not None:
            query = query.filter(models.Product.is_featured == is_featured)
        query = query.filter(models.Product.is_archived == False)
        return query.order_by(models.Product.created_at.desc()).all()

    def create(self, db: Session, store_id: str, product: schemas.ProductCreate) -> models.Product:
        """
        Insert the product together with its images in a single commit.
        """
        data = product.model_dump(exclude={"images"})
        db_product = models.Product(store_id=store_id, **data)
        db_product.images = [
            models.ProductImage(url=image.url, position=position)
            for position, image in enumerate(product.images)
        ]
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
        return db_product

    def update(self, db: Session, db_product: models.Product, product: schemas.ProductUpdate) -> models.Product:
        """
        Overwrite the product's fields and swap its whole image set.

        The old images are removed and the new ones inserted before the
        single commit, so either both steps land or neither does.
        """
        for field, value in product.model_dump(exclude={"images"}).items():
            setattr(db_product, field, value)
        self._delete_images(db, db_product.id)
        self._insert_images(db, db_product.id, product.images)
        db.commit()
        db.expire(db_product)
        return self.get(db, db_product.id)

    def _delete_images(self, db: Session, product_id: str) -> int:
        return db.query(models.ProductImage).filter(
            models.ProductImage.product_id == product_id
        ).delete(synchronize_session=False)

    def _insert_images(self, db: Session, product_id: str, images: List[schemas.ProductImageIn]):
        db.add_all([
            models.ProductImage(product_id=product_id, url=image.url, position=position)
            for position, image in enumerate(images)
        ])
        db.flush()

    def delete(self, db: Session, store_id: str, product_id: str) -> int:
        # Images go first; they have no life outside their product.
        owned = select(models.Product.id).where(
            models.Product.id == product_id,
            models.Product.store_id == store_id
        )
        db.query(models.ProductImage).filter(
            models.ProductImage.product_id.in_(owned)
        ).delete(synchronize_session=False)
        count = db.query(models.Product).filter(
            models.Product.id == product_id,
            models.Product.store_id == store_id
        ).delete(synchronize_session=False)
        db.commit()
        return count

product_service = ProductService()
