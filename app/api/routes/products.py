from fastapi import APIRouter, Depends, HTTPException

from app.api.routes.deps import get_shopify_client, unwrap_or_502
from app.shopify.client import ShopifyClient
from app.shopify.products import fetch_main_products, fetch_products

router = APIRouter()


@router.get("/")
async def products(ids: str | None = None, client: ShopifyClient = Depends(get_shopify_client)):
    return unwrap_or_502(await fetch_products(ids, client))


@router.get("/main")
async def main_products(client: ShopifyClient = Depends(get_shopify_client)):
    # raw Shopify records, not normalized
    return unwrap_or_502(await fetch_main_products(client))


@router.get("/{product_id}")
async def product(product_id: str, client: ShopifyClient = Depends(get_shopify_client)):
    # upstream failures are 502; only an empty match is a 404
    found = unwrap_or_502(await fetch_products(product_id, client))
    if not found:
        raise HTTPException(status_code=404, detail="Product not found")
    return found[0]
