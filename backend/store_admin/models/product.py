from sqlalchemy import Boolean, Column, String, ForeignKey, DECIMAL, TIMESTAMP, false
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.models.base import Base, generate_id, utcnow

class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=generate_id)
    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    color_id = Column(String(36), ForeignKey("colors.id"), nullable=False, index=True)
    size_id = Column(String(36), ForeignKey("sizes.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    price = Column(DECIMAL(10, 2), nullable=False)
    is_featured = Column(Boolean, nullable=False, default=False, server_default=false())
    is_archived = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    store = relationship("Store", back_populates="products")
    category = relationship("Category", back_populates="products")
    color = relationship("Color", back_populates="products")
    size = relationship("Size", back_populates="products")
    images = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.position",
    )
