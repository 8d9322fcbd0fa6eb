from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.models.base import Base, generate_id, utcnow

class Store(Base):
    __tablename__ = "stores"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    user_id = Column(String(255), nullable=False, index=True)
    front_end_store_url = Column(Text, nullable=False)
    stripe_key = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    billboards = relationship("Billboard", back_populates="store")
    categories = relationship("Category", back_populates="store")
    colors = relationship("Color", back_populates="store")
    sizes = relationship("Size", back_populates="store")
    products = relationship("Product", back_populates="store")
