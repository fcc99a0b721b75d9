from fastapi import HTTPException

from app.shopify.client import ShopifyClient
from app.shopify.results import Err, Result

_client: ShopifyClient | None = None


def get_shopify_client() -> ShopifyClient:
    # Built lazily from settings, then shared read-only by every request
    global _client
    if _client is None:
        _client = ShopifyClient()
    return _client


def unwrap_or_502(result: Result):
    if isinstance(result, Err):
        raise HTTPException(status_code=502, detail={"error": result.kind.value})
    return result.value
