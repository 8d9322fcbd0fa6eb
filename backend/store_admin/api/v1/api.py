from fastapi import APIRouter
from store_admin.api.v1.endpoints import stores, billboards, categories, colors, sizes, products, checkout

api_router = APIRouter()
api_router.include_router(stores.router, tags=["stores"])
api_router.include_router(billboards.router, tags=["billboards"])
api_router.include_router(categories.router, tags=["categories"])
api_router.include_router(colors.router, tags=["colors"])
api_router.include_router(sizes.router, tags=["sizes"])
api_router.include_router(products.router, tags=["products"])
api_router.include_router(checkout.router, tags=["checkout"])
