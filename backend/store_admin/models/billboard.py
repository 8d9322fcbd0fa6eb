from sqlalchemy import Column, String, Text, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from store_admin.models.base import Base, generate_id, utcnow

class Billboard(Base):
    __tablename__ = "billboards"

    id = Column(String(36), primary_key=True, default=generate_id)
    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    label = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)

    store = relationship("Store", back_populates="billboards")
    categories = relationship("Category", back_populates="billboard")
