from typing import Any, Callable, Iterable

from app.shopify.client import ShopifyClient
from app.shopify.results import Err, Ok, Result, classify_error


def extract_list(body: Any, key: str) -> list:
    """Pull the record list out of a `{key: [...]}` body."""
    records = body[key]
    if not isinstance(records, list):
        raise TypeError(f"expected a list under {key!r}, got {type(records).__name__}")
    return records


async def run_accessor(
    shopify_client: ShopifyClient,
    url: str,
    key: str,
    transform: Callable[[list], Any] | None = None,
    *,
    operation: str,
    no_cache: bool = False,
    tags: Iterable[str] = (),
) -> Result:
    """
    Fetch `url`, pull `key` out of the body and optionally transform the records.

    Exactly one request is issued. Any exception along the way is logged to the
    client's sink and returned as an Err; nothing is raised.
    """
    try:
        body = await shopify_client.get(url, no_cache=no_cache, tags=tags)
        records = extract_list(body, key)
        value = transform(records) if transform else records
    except Exception as e:
        kind = classify_error(e)
        shopify_client.logger.exception("%s failed (%s) for %s: %s", operation, kind.value, url, e)
        return Err(kind, e)

    return Ok(value)
