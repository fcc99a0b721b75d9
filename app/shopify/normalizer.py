from typing import Iterable

from app.shopify.models import Collection, Product


def normalize_product(raw: dict) -> Product:
    """
    Map one Shopify product record to a Product.

    Variant-derived fields and the image always come from the first element of
    `variants` / `images`; an empty array raises IndexError. Values are copied
    as-is, without validation or coercion.
    """
    variant = raw["variants"][0]
    image = raw["images"][0]

    return Product.model_construct(
        id=raw["id"],
        gql_id=variant["admin_graphql_api_id"],
        title=raw["title"],
        description=raw["body_html"],
        price=variant["price"],
        image=image["src"],
        quantity=variant["inventory_quantity"],
        handle=raw["handle"],
        tags=raw["tags"],
    )


def normalize_products(raws: Iterable[dict]) -> list[Product]:
    return [normalize_product(raw) for raw in raws]


def project_collection(raw: dict) -> Collection:
    return Collection.model_construct(id=raw["id"], title=raw["title"], handle=raw["handle"])
