from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from .common import CamelModel, WriteModel, check_http_url

class StoreBase(WriteModel):
    name: str = Field(..., min_length=1)
    front_end_store_url: str
    stripe_key: str = Field(..., min_length=10)

    @field_validator("front_end_store_url")
    @classmethod
    def validate_front_end_store_url(cls, value: str) -> str:
        return check_http_url(value)

class StoreCreate(StoreBase):
    pass

class StoreUpdate(StoreBase):
    pass

class Store(CamelModel):
    id: str
    name: str
    user_id: str
    front_end_store_url: str
    stripe_key: str
    created_at: datetime
    updated_at: Optional[datetime] = None
