from fastapi import Request

from store_admin.core.config import settings
from store_admin.core.identity import HeaderIdentityProvider, IdentityContext
from store_admin.database.database import SessionLocal

identity_provider = HeaderIdentityProvider(settings.IDENTITY_HEADER)

def get_db():
    with SessionLocal() as db:
        yield db

def get_identity(request: Request) -> IdentityContext:
    return identity_provider(request)

async def get_raw_body(request: Request) -> bytes:
    # Decoded later, once the caller is known to own the store
    return await request.body()
