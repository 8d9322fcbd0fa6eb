import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Set per row in Python; func.now() is fixed for a whole transaction
    return datetime.now(timezone.utc)
