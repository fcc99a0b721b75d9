from typing import Optional

from app.shopify.accessor import run_accessor
from app.shopify.client import ShopifyClient
from app.shopify.models import Collection, Product
from app.shopify.normalizer import normalize_products, project_collection
from app.shopify.results import Result, unwrap_or_none

client = ShopifyClient()


def _project_collections(records: list) -> list[Collection]:
    return [project_collection(record) for record in records]


async def fetch_collections(shopify_client: Optional[ShopifyClient] = None) -> Result:
    if shopify_client is None:
        shopify_client = client

    return await run_accessor(
        shopify_client,
        shopify_client.urls.collections_all,
        "smart_collections",
        _project_collections,
        operation="list_collections",
    )


async def list_collections(shopify_client: Optional[ShopifyClient] = None) -> list[Collection] | None:
    """All smart collections as {id, title, handle}, or None on failure."""
    return unwrap_or_none(await fetch_collections(shopify_client))


async def fetch_collection_products(id, shopify_client: Optional[ShopifyClient] = None) -> Result:
    if shopify_client is None:
        shopify_client = client

    # id is not validated: an empty or None id goes straight into the URL
    return await run_accessor(
        shopify_client,
        shopify_client.urls.collection_products(id),
        "products",
        operation="list_collection_products",
    )


async def list_collection_products(id, shopify_client: Optional[ShopifyClient] = None) -> list[dict] | None:
    """Raw (not normalized) products of collection `id`, or None on failure."""
    return unwrap_or_none(await fetch_collection_products(id, shopify_client))


async def fetch_collection_products_normalized(id, shopify_client: Optional[ShopifyClient] = None) -> Result:
    if shopify_client is None:
        shopify_client = client

    return await run_accessor(
        shopify_client,
        shopify_client.urls.collection_products(id),
        "products",
        normalize_products,
        operation="list_collection_products_normalized",
    )


async def list_collection_products_normalized(id, shopify_client: Optional[ShopifyClient] = None) -> list[Product] | None:
    return unwrap_or_none(await fetch_collection_products_normalized(id, shopify_client))
