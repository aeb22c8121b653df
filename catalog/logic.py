# catalog/logic.py
from typing import Dict, List

from .errors import ValidationError
from .models import ID, Price, Product
from .store import Store

# This file contains the core logic behind the API calls. Every function validates
# its input before touching the store and raises CatalogError subclasses on failure.


def create_product_logic(store: Store, product: Product) -> ID:
    # Id must not be specified when creating a new product
    if product.id != 0:
        raise ValidationError("ID must not be specified!")
    product.validate()
    return store.save(product)


def update_product_logic(store: Store, product: Product) -> ID:
    """Replace an existing product entirely. Fields left out are not kept."""
    if product.id == 0:
        raise ValidationError("ID must be specified!")
    product.validate()
    return store.save(product)


def list_products_logic(store: Store) -> List[ID]:
    return store.all_ids()


def product_details_logic(store: Store, product_id: ID) -> Product:
    return store.load(product_id)


def set_prices_logic(store: Store, product_id: ID, prices: Dict[str, Price]) -> ID:
    """Merge price points into an existing product.

    Currencies in `prices` are added or overwritten, the others are left intact
    (so USD+GBP merged with GBP+HUF gives USD, the new GBP and HUF). Removing a
    currency needs a full update.

    The load / merge / save sequence is not atomic: a concurrent save of the same
    product landing between the load and the save here is overwritten and lost.
    This is accepted for low-contention admin updates. Making it atomic would need
    a single store primitive (e.g. apply a mutator under the write lock), not a
    lock around these calls.
    """
    if product_id == 0:
        raise ValidationError("ID must be specified!")
    if not prices:
        raise ValidationError("Prices must be specified!")
    for price in prices.values():
        price.validate()

    product = store.load(product_id)
    for currency, price in prices.items():
        product.prices[currency] = Price(price.value, price.multiplier)

    return store.save(product)
