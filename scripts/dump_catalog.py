import asyncio, sys, os

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(ROOT)

from app.services.storefront_service import get_store_products
from app.shopify.collections import list_collections

async def main(category=None):
    print("=== COLLECTIONS ===")
    collections = await list_collections()
    if collections is None:
        print("Failed to fetch collections (see log)")
    else:
        for collection in collections:
            print(f"  {collection.id}  {collection.handle:<30} {collection.title}")

    print(f"\n=== PRODUCTS ({category or 'all'}) ===")
    products = await get_store_products([category] if category else None)
    if products is None:
        print("Failed to fetch products (see log)")
        return

    print(f"Fetched {len(products)} items")
    if products:
        print("\nSample Product:\n", products[0])

if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
