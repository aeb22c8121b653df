# catalog/store.py
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, List

from .errors import InvalidIdError
from .models import ID, Product

# This file holds the persistence contract and the in-memory store with its lock.


class Store(ABC):
    """Persistence layer where products are kept.

    Implementations decide where and how (memory, files, SQL...). Logic code only
    depends on this interface, so implementations are swappable. InvalidIdError is
    the only error callers may match on; anything else should be a StoreError.
    """

    @abstractmethod
    def all_ids(self) -> List[ID]:
        """Return the IDs of all saved products, in no particular order."""

    @abstractmethod
    def save(self, product: Product) -> ID:
        """Save a product and return its ID.

        If product.id is 0 the product is saved anew and gets a fresh ID (set on the
        product too). Otherwise the stored product with that ID is replaced, or
        InvalidIdError is raised if there is none.
        """

    @abstractmethod
    def load(self, product_id: ID) -> Product:
        """Return the product with the given ID, or raise InvalidIdError."""


class ReadWriteLock:
    """Many readers or one writer. Waiting writers block new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class InMemoryStore(Store):
    """In-memory Store, safe for concurrent use.

    Products are cloned on the way in and on the way out, so nothing a caller holds
    (a saved product or a loaded one) is shared with the stored copies.
    """

    def __init__(self):
        self._products: Dict[ID, Product] = {}
        self._lock = ReadWriteLock()
        self._id_counter: ID = 0

    def all_ids(self) -> List[ID]:
        with self._lock.read():
            return list(self._products.keys())

    def save(self, product: Product) -> ID:
        with self._lock.write():
            if product.id == 0:
                self._id_counter += 1
                product.id = self._id_counter
            elif product.id not in self._products:
                raise InvalidIdError(product.id)

            self._products[product.id] = product.clone()
            return product.id

    def load(self, product_id: ID) -> Product:
        with self._lock.read():
            product = self._products.get(product_id)
            if product is None:
                raise InvalidIdError(product_id)
            return product.clone()
