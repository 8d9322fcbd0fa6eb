from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from store_admin.core.config import settings
from store_admin.core.logger import setup_logger
from store_admin.models.base import Base
import store_admin.models

logger = setup_logger("database")

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_base_metadata():
    return Base.metadata


@retry(
    retry=retry_if_exception_type(OperationalError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=4, max=10),
    reraise=True,
)
def init_db(bind=None):
    bind = bind or engine
    logger.info("Creating tables if missing...")
    Base.metadata.create_all(bind=bind)
