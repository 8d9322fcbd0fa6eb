from pydantic import Field
from typing import Optional
from datetime import datetime

from .common import CamelModel, WriteModel

class SizeBase(WriteModel):
    name: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)

class SizeCreate(SizeBase):
    pass

class SizeUpdate(SizeBase):
    pass

class Size(CamelModel):
    id: str
    store_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: Optional[datetime] = None
