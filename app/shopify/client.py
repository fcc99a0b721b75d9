import logging
from typing import Any, Callable, Iterable

import aiohttp
from app.config import settings
from app.shopify.urls import DEFAULT_MAIN_COLLECTION_ID, ShopifyUrls

ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"


class ShopifyClient:
    def __init__(
        self,
        access_token: str | None = None,
        hostname: str | None = None,
        main_collection_id: str | None = None,
        logger: logging.Logger | None = None,
        session_factory: Callable[[], aiohttp.ClientSession] | None = None,
    ):
        # Use provided params or fall back to the process settings
        self.access_token = access_token if access_token is not None else settings.SHOPIFY_API_KEY
        self.hostname = hostname if hostname is not None else settings.SHOPIFY_HOSTNAME
        self.urls = ShopifyUrls(
            self.hostname,
            main_collection_id or settings.SHOPIFY_MAIN_COLLECTION_ID or DEFAULT_MAIN_COLLECTION_ID,
        )

        # Diagnostic sink for request and accessor failures
        self.logger = logger or logging.getLogger(__name__)
        self.session_factory = session_factory or aiohttp.ClientSession

    def _headers(self, no_cache: bool) -> dict:
        headers = {ACCESS_TOKEN_HEADER: self.access_token or ""}
        if no_cache:
            headers["Cache-Control"] = "no-cache"
        return headers

    async def get(
        self,
        url: str,
        params: dict | None = None,
        *,
        no_cache: bool = False,
        tags: Iterable[str] = (),
    ) -> Any:
        """
        GET `url` and return the parsed JSON body.

        The status code is only logged: an error body is parsed and returned like
        any other. Transport and JSON errors propagate to the caller.
        """
        tags = tuple(tags)
        self.logger.debug("Shopify GET %s params=%s tags=%s", url, params, tags)

        async with self.session_factory() as session:
            async with session.get(url, headers=self._headers(no_cache), params=params) as resp:
                if resp.status >= 400:
                    text = await resp.text()
                    self.logger.warning("Shopify GET Error %s: %s", resp.status, text)
                return await resp.json(content_type=None)
