from pydantic import Field
from typing import Optional
from datetime import datetime

from .common import CamelModel, WriteModel

class ColorBase(WriteModel):
    name: str = Field(..., min_length=1)
    value: str = Field(..., pattern=r"^#")

class ColorCreate(ColorBase):
    pass

class ColorUpdate(ColorBase):
    pass

class Color(CamelModel):
    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: Optional[datetime] = None
