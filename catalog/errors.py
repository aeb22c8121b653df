# catalog/errors.py
# Errors raised by the catalog logic and the store implementations.


class CatalogError(Exception):
    """Base class of all catalog errors."""


class ValidationError(CatalogError):
    """A product or request breaks a field rule. Detected before touching the store."""


class InvalidIdError(CatalogError):
    """No product exists with the referenced ID."""

    def __init__(self, product_id: int = 0):
        self.product_id = product_id
        super().__init__("Invalid Product ID")


class StoreError(CatalogError):
    """Storage failure other than an unknown ID (disk, network...).

    The in-memory store never raises this.
    """
