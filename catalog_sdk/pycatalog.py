# catalog_sdk/pycatalog.py
import requests
import httpx
from typing import Optional, Dict, Any, List, Iterable, Tuple

# A price given as (value, multiplier), e.g. (199, 100) for 1.99
PriceTuple = Tuple[int, int]


class CatalogAPIError(Exception):
    """The service answered with success=false."""

    def __init__(self, op: str, message: str):
        self.op = op
        self.message = message
        super().__init__(f"{op}: {message}")


def make_prices(prices: Dict[str, PriceTuple]) -> Dict[str, Dict[str, int]]:
    return {cur: {"value": value, "multiplier": mult} for cur, (value, mult) in prices.items()}


def make_product(name: str, description: str, prices: Dict[str, PriceTuple],
                 tags: Optional[Iterable[str]] = None, product_id: int = 0) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": name,
        "description": description,
        "prices": make_prices(prices),
    }
    if tags:
        payload["tags"] = list(tags)
    if product_id:
        payload["id"] = product_id
    return payload


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:8081", timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # anything with requests.Session's get/post/put works here (e.g. a test client)
        self.session = session if session is not None else requests.Session()

    @staticmethod
    def _unwrap(r) -> Any:
        r.raise_for_status()
        body = r.json()
        if not body.get("success"):
            raise CatalogAPIError(body.get("op", ""), body.get("error", "unknown error"))
        return body.get("data")

    # Products
    def create_product(self, name: str, description: str, prices: Dict[str, PriceTuple],
                       tags: Optional[Iterable[str]] = None) -> int:
        r = self.session.post(f"{self.base_url}/create",
                              json=make_product(name, description, prices, tags),
                              timeout=self.timeout)
        return self._unwrap(r)["id"]

    def update_product(self, product_id: int, name: str, description: str,
                       prices: Dict[str, PriceTuple], tags: Optional[Iterable[str]] = None) -> int:
        r = self.session.put(f"{self.base_url}/update",
                             json=make_product(name, description, prices, tags, product_id),
                             timeout=self.timeout)
        return self._unwrap(r)["id"]

    def list_products(self) -> List[int]:
        r = self.session.get(f"{self.base_url}/list", timeout=self.timeout)
        return self._unwrap(r)

    def get_product(self, product_id: int) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/details/{product_id}", timeout=self.timeout)
        return self._unwrap(r)

    def set_prices(self, product_id: int, prices: Dict[str, PriceTuple]) -> int:
        r = self.session.put(f"{self.base_url}/setprices",
                             json={"id": product_id, "prices": make_prices(prices)},
                             timeout=self.timeout)
        return self._unwrap(r)["id"]

    # Async create (used by the concurrent demo)
    async def create_product_async(self, name: str, description: str, prices: Dict[str, PriceTuple],
                                   tags: Optional[Iterable[str]] = None,
                                   client: Optional[httpx.AsyncClient] = None) -> int:
        payload = make_product(name, description, prices, tags)
        if client is not None:
            r = await client.post(f"{self.base_url}/create", json=payload)
            return self._unwrap(r)["id"]
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            r = await ac.post(f"{self.base_url}/create", json=payload)
            return self._unwrap(r)["id"]
