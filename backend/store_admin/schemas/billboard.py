from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from .common import CamelModel, WriteModel, check_http_url

class BillboardBase(WriteModel):
    label: str = Field(..., min_length=1)
    image_url: str

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, value: str) -> str:
        return check_http_url(value)

class BillboardCreate(BillboardBase):
    pass

class BillboardUpdate(BillboardBase):
    pass

class Billboard(CamelModel):
    id: str
    store_id: str
    label: str
    image_url: str
    created_at: datetime
    updated_at: Optional[datetime] = None
