# catalog/seed.py
import logging
from typing import List

from .errors import CatalogError
from .models import ID, Price, Product
from .store import Store

logger = logging.getLogger(__name__)


def _test_products() -> List[Product]:
    return [
        Product(name="small-prod", description="short-desc",
                prices={"USD": Price(1, 1)}),
        Product(name="Full-prod", description="long description is entered here",
                tags=["Big", "Full", "Giant"],
                prices={
                    "USD": Price(100, 1),
                    "GBP": Price(7528, 100),
                    "HUF": Price(27725, 1),
                }),
    ]


def insert_test_data(store: Store) -> List[ID]:
    """Save the demo products into the store. Returns the IDs that were inserted."""
    ids = []
    for p in _test_products():
        try:
            ids.append(store.save(p))
        except CatalogError as e:
            logger.warning("Failed to insert test product %r: %s", p.name, e)
        else:
            logger.info("Test product inserted (ID=%d)", p.id)
    return ids
