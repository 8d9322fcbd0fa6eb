from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS, PUT, PATCH, DELETE",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

@router.options("/{store_id}/checkout")
def checkout_preflight(store_id: str):
    # Storefronts call checkout from their own origin
    return JSONResponse(content={}, headers=CORS_HEADERS)
