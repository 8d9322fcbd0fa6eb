from sqlalchemy import Column, String, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.models.base import Base, generate_id, utcnow

class Color(Base):
    __tablename__ = "colors"

    id = Column(String(36), primary_key=True, default=generate_id)
    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    value = Column(String(64), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    store = relationship("Store", back_populates="colors")
    products = relationship("Product", back_populates="color")
