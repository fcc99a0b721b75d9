from fastapi import APIRouter
from app.api.routes import collections, products, store

api_router = APIRouter()

api_router.include_router(products.router, prefix="/products", tags=["Products"])
api_router.include_router(collections.router, prefix="/collections", tags=["Collections"])
api_router.include_router(store.router, prefix="/store", tags=["Store"])
