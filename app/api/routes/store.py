from fastapi import APIRouter, Depends, HTTPException

from app.api.routes.deps import get_shopify_client
from app.services.storefront_service import get_store_products
from app.shopify.client import ShopifyClient

router = APIRouter()


async def _store(categories: list[str], client: ShopifyClient):
    products = await get_store_products(categories, client)
    if products is None:
        raise HTTPException(status_code=502, detail={"error": "unavailable"})
    return products


@router.get("/")
async def store(client: ShopifyClient = Depends(get_shopify_client)):
    return await _store([], client)


@router.get("/{category}")
async def store_category(category: str, client: ShopifyClient = Depends(get_shopify_client)):
    return await _store([category], client)
