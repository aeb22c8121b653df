# catalog/models.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import ValidationError

# Every product must carry a price in this currency.
DEFAULT_CURRENCY = "USD"

# Product IDs are plain ints. 0 means "not saved yet".
ID = int


@dataclass
class Price:
    """A price point stored as integers: the real amount is value / multiplier.

    Multiplier should be a small power of 10, e.g. 1.99 is Price(value=199, multiplier=100).
    """
    value: int
    multiplier: int = 1

    def validate(self) -> None:
        if self.value < 0:
            raise ValidationError("Price Value must be non-negative!")
        if self.multiplier < 1:
            raise ValidationError("Price Multiplier must be positive!")


@dataclass
class Product:
    name: str
    description: str
    prices: Dict[str, Price] = field(default_factory=dict)
    tags: Optional[List[str]] = None
    id: ID = 0

    def validate(self) -> None:
        """Check the mandatory fields. The id is not checked."""
        if not self.name:
            raise ValidationError("Name must be specified!")
        if not self.description:
            raise ValidationError("Desc must be specified!")
        if not self.prices:
            raise ValidationError("Prices must be specified!")
        for price in self.prices.values():
            price.validate()
        if DEFAULT_CURRENCY not in self.prices:
            raise ValidationError(f'Price for "{DEFAULT_CURRENCY}" currency must be specified!')

    def clone(self) -> "Product":
        """Return an identical product that shares no mutable state with this one."""
        return Product(
            id=self.id,
            name=self.name,
            description=self.description,
            tags=list(self.tags) if self.tags is not None else None,
            prices={cur: Price(p.value, p.multiplier) for cur, p in self.prices.items()},
        )
