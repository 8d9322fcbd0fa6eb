from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from store_admin.api.v1.api import api_router
from store_admin.core.config import settings
from store_admin.core.errors import CatalogError, PersistenceError, ValidationError
from store_admin.core.logger import setup_logger
from store_admin.database.database import init_db
from store_admin.utils.validation import format_errors

logger = setup_logger("main")


class AdminCORSMiddleware(CORSMiddleware):
    """
    CORS for the admin UI origins. Checkout is left alone: it is called by
    storefronts on arbitrary origins and answers its own preflight.
    """

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["path"].rstrip("/").endswith("/checkout"):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)


app = FastAPI(
    title="Store Admin API",
    description="Multi-store catalog management: billboards, categories, colors, sizes and products",
    version="1.0.0",
)

app.add_middleware(
    AdminCORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError(errors=format_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    error = PersistenceError()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.on_event("startup")
def on_startup():
    logger.info("Starting application...")
    init_db()
    logger.info("Database ready")
