from sqlalchemy import Column, String, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.models.base import Base, generate_id, utcnow

class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=generate_id)
    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    billboard_id = Column(String(36), ForeignKey("billboards.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    store = relationship("Store", back_populates="categories")
    billboard = relationship("Billboard", back_populates="categories")
    products = relationship("Product", back_populates="category")
