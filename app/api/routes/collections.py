from fastapi import APIRouter, Depends

from app.api.routes.deps import get_shopify_client, unwrap_or_502
from app.shopify.client import ShopifyClient
from app.shopify.collections import fetch_collection_products, fetch_collections

router = APIRouter()


@router.get("/")
async def collections(client: ShopifyClient = Depends(get_shopify_client)):
    return unwrap_or_502(await fetch_collections(client))


@router.get("/{collection_id}/products")
async def collection_products(collection_id: str, client: ShopifyClient = Depends(get_shopify_client)):
    return unwrap_or_502(await fetch_collection_products(collection_id, client))
