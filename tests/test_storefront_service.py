import aiohttp
import pytest

from app.services.storefront_service import get_product, get_store_products, resolve_collection_id
from app.shopify.models import Collection

HOST = "https://shop.example.com"

COLLECTIONS = {
    "smart_collections": [
        {"id": "1", "title": "A", "handle": "a"},
        {"id": "2", "title": "B", "handle": "b"},
    ]
}


def test_resolve_collection_id_matches_handle():
    collections = [Collection(id="1", title="A", handle="a"), Collection(id="2", title="B", handle="b")]

    assert resolve_collection_id(collections, "b") == "2"
    assert resolve_collection_id(collections, "z") is None
    assert resolve_collection_id(collections, "B") is None
    assert resolve_collection_id(None, "a") is None


@pytest.mark.asyncio
async def test_store_with_category_uses_resolved_collection(shopify_client, transport, raw_product):
    transport.reply(COLLECTIONS).reply({"products": [raw_product]})

    products = await get_store_products(["b"], shopify_client)

    assert products == [raw_product]
    assert transport.calls[1]["url"] == f"{HOST}/admin/api/2025-10/collections/2/products.json"


@pytest.mark.asyncio
async def test_store_with_unknown_category_forwards_none(shopify_client, transport):
    transport.reply(COLLECTIONS).reply({"errors": "Not Found"}, status=404)

    products = await get_store_products(["z"], shopify_client)

    assert products is None
    assert transport.calls[1]["url"] == f"{HOST}/admin/api/2025-10/collections/None/products.json"


@pytest.mark.asyncio
async def test_store_with_failed_collections_still_forwards(shopify_client, transport, raw_product):
    transport.fail(aiohttp.ClientConnectionError("refused")).reply({"products": [raw_product]})

    products = await get_store_products(["a"], shopify_client)

    assert products == [raw_product]
    assert transport.calls[1]["url"].endswith("/collections/None/products.json")


@pytest.mark.asyncio
async def test_store_without_category_lists_all_products(shopify_client, transport, raw_product):
    transport.reply(COLLECTIONS).reply({"products": [raw_product]})

    products = await get_store_products(None, shopify_client)

    assert [p.handle for p in products] == ["t"]
    assert transport.calls[1]["url"] == f"{HOST}/admin/api/2023-07/products.json"


@pytest.mark.asyncio
async def test_get_product_returns_first_match(shopify_client, transport, raw_product):
    transport.reply({"products": [raw_product]})

    product = await get_product("1", shopify_client)

    assert product.id == 1
    assert transport.calls[0]["url"].endswith("products.json?ids=1")


@pytest.mark.asyncio
async def test_get_product_none_when_missing_or_failed(shopify_client, transport):
    transport.reply({"products": []}).fail(aiohttp.ClientConnectionError("refused"))

    assert await get_product("404", shopify_client) is None
    assert await get_product("404", shopify_client) is None
