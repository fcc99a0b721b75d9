PRODUCTS_API_VERSION = "2023-07"
MAIN_PRODUCTS_API_VERSION = "2023-10"
COLLECTIONS_API_VERSION = "2023-07"
COLLECTION_PRODUCTS_API_VERSION = "2025-10"

DEFAULT_MAIN_COLLECTION_ID = "672049463622"


class ShopifyUrls:
    """
    Endpoint registry for the Shopify Admin REST API.

    Static endpoints are plain attributes, parametric ones are methods taking the
    record id. The hostname is used as-is (it carries the scheme), so an empty
    hostname yields a host-less URL that only fails once it is fetched.

    The create/update/delete endpoints are kept as a registry only; this layer
    issues GET requests alone.
    """

    def __init__(self, hostname: str, main_collection_id: str = DEFAULT_MAIN_COLLECTION_ID):
        self.hostname = hostname or ""
        self.main_collection_id = main_collection_id

        self.products_all = self._url(PRODUCTS_API_VERSION, "products.json")
        self.products_create = self.products_all
        self.products_main = self._url(
            MAIN_PRODUCTS_API_VERSION,
            f"collections/{main_collection_id}/products.json",
        )

        self.collections_all = self._url(COLLECTIONS_API_VERSION, "smart_collections.json")
        self.collections_create = self.collections_all

    def _url(self, version: str, endpoint: str) -> str:
        # endpoint examples: "products.json", "collections/123/products.json"
        if endpoint.startswith("/"):
            endpoint = endpoint[1:]
        return f"{self.hostname}/admin/api/{version}/{endpoint}"

    def products_by_ids(self, ids) -> str:
        return f"{self.products_all}?ids={ids}"

    def product_update(self, product_id) -> str:
        return self._url(PRODUCTS_API_VERSION, f"products/{product_id}.json")

    def product_delete(self, product_id) -> str:
        return self.product_update(product_id)

    def collection_products(self, collection_id) -> str:
        # id is forwarded verbatim, even when empty or None
        return self._url(COLLECTION_PRODUCTS_API_VERSION, f"collections/{collection_id}/products.json")

    def collection_update(self, collection_id) -> str:
        return self._url(COLLECTIONS_API_VERSION, f"smart_collections/{collection_id}.json")

    def collection_delete(self, collection_id) -> str:
        return self.collection_update(collection_id)
