import logging
from typing import Optional, Sequence

from app.shopify.client import ShopifyClient
from app.shopify.collections import list_collection_products, list_collections
from app.shopify.models import Collection, Product
from app.shopify.products import list_products

logger = logging.getLogger(__name__)


def resolve_collection_id(collections: Optional[Sequence[Collection]], handle: str):
    """Id of the first collection whose handle equals `handle` exactly, else None."""
    for collection in collections or []:
        if collection.handle == handle:
            return collection.id
    return None


async def get_store_products(categories: Optional[Sequence[str]] = None, shopify_client: Optional[ShopifyClient] = None):
    """
    Products for the store page.

    With a category path, the first segment is resolved to a collection id and
    that collection's raw products are returned; an unknown handle resolves to
    None, which is still forwarded. Without a category, every product is listed
    normalized.
    """
    collections = await list_collections(shopify_client)

    if categories:
        collection_id = resolve_collection_id(collections, categories[0])
        if collection_id is None:
            logger.info("No collection with handle %r", categories[0])
        return await list_collection_products(collection_id, shopify_client)

    return await list_products(shopify_client=shopify_client)


async def get_product(id, shopify_client: Optional[ShopifyClient] = None) -> Product | None:
    products = await list_products(id, shopify_client)
    if not products:
        return None
    return products[0]
