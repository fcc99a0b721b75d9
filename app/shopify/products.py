from typing import Optional

from app.shopify.accessor import run_accessor
from app.shopify.client import ShopifyClient
from app.shopify.models import Product
from app.shopify.normalizer import normalize_products
from app.shopify.results import Result, unwrap_or_none

client = ShopifyClient()

MAIN_PRODUCTS_TAG = "main-products"


async def fetch_products(id=None, shopify_client: Optional[ShopifyClient] = None) -> Result:
    if shopify_client is None:
        shopify_client = client

    urls = shopify_client.urls
    url = urls.products_by_ids(id) if id else urls.products_all
    return await run_accessor(
        shopify_client, url, "products", normalize_products, operation="list_products"
    )


async def list_products(id=None, shopify_client: Optional[ShopifyClient] = None) -> list[Product] | None:
    """
    List every product, or only those matching `id` (sent as `?ids=`), normalized
    and in upstream order. Returns None on any failure.
    """
    return unwrap_or_none(await fetch_products(id, shopify_client))


async def fetch_main_products(shopify_client: Optional[ShopifyClient] = None) -> Result:
    if shopify_client is None:
        shopify_client = client

    return await run_accessor(
        shopify_client,
        shopify_client.urls.products_main,
        "products",
        operation="list_main_products",
        no_cache=True,
        tags=(MAIN_PRODUCTS_TAG,),
    )


async def list_main_products(shopify_client: Optional[ShopifyClient] = None) -> list[dict] | None:
    """Raw (not normalized) records of the main collection, bypassing HTTP caches."""
    return unwrap_or_none(await fetch_main_products(shopify_client))


async def fetch_main_products_normalized(shopify_client: Optional[ShopifyClient] = None) -> Result:
    if shopify_client is None:
        shopify_client = client

    return await run_accessor(
        shopify_client,
        shopify_client.urls.products_main,
        "products",
        normalize_products,
        operation="list_main_products_normalized",
        no_cache=True,
        tags=(MAIN_PRODUCTS_TAG,),
    )


async def list_main_products_normalized(shopify_client: Optional[ShopifyClient] = None) -> list[Product] | None:
    return unwrap_or_none(await fetch_main_products_normalized(shopify_client))
