import asyncio
import httpx
from catalog_sdk.pycatalog import CatalogClient, CatalogAPIError

async def create(client, ac, n):
    try:
        pid = await client.create_product_async(f"Product {n}", f"Concurrently created #{n}",
                                                {"USD": (n * 100, 100)}, client=ac)
        print(f"✅ product {n} created with ID {pid}")
        return pid
    except CatalogAPIError as e:
        print(f"❌ product {n} rejected: {e.message}")
    except httpx.HTTPError as e:
        print(f"❌ product {n} failed with error: {e}")

async def main():
    c = CatalogClient(base_url="http://127.0.0.1:8081")

    print("\n⚡ Creating 20 products concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        ids = await asyncio.gather(*(create(c, ac, n) for n in range(1, 21)))

    created = [i for i in ids if i is not None]
    print(f"\n📦 {len(created)} created, distinct IDs: {len(set(created)) == len(created)}")
    print("🧾 All IDs:", sorted(c.list_products()))

if __name__ == "__main__":
    asyncio.run(main())
