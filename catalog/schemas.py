# catalog/schemas.py
from pydantic import BaseModel, StrictInt, field_validator
from typing import Optional, Dict, Any, List

from .models import Price, Product

# ---------------------------
# Pydantic schemas (wire format)
# ---------------------------
# Missing fields and explicit nulls decode to their zero values, the same way
# the rules in Product.validate() expect them, so "name missing", "name null" and
# "name empty" all give the same error message. Numbers must be real JSON
# integers: "5" or 1.0 are rejected.

class PriceIn(BaseModel):
    value: StrictInt = 0
    multiplier: StrictInt = 0

    @field_validator("value", "multiplier", mode="before")
    @classmethod
    def null_to_zero(cls, v):
        return 0 if v is None else v

class ProductIn(BaseModel):
    id: StrictInt = 0
    name: str = ""
    description: str = ""
    tags: Optional[List[str]] = None
    prices: Dict[str, PriceIn] = {}

    @field_validator("id", "name", "description", "prices", mode="before")
    @classmethod
    def null_to_zero(cls, v, info):
        if v is not None:
            return v
        return {"id": 0, "prices": {}}.get(info.field_name, "")

class SetPricesIn(BaseModel):
    # Other product fields may be present in the body, they are ignored.
    id: StrictInt = 0
    prices: Dict[str, PriceIn] = {}

    @field_validator("id", "prices", mode="before")
    @classmethod
    def null_to_zero(cls, v, info):
        if v is not None:
            return v
        return 0 if info.field_name == "id" else {}

class JSONResp(BaseModel):
    """Wrapper of every JSON response."""
    op: str
    success: bool = False
    error: Optional[str] = None
    data: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

# ---------------------------
# Helpers
# ---------------------------
def _make_prices(prices: Dict[str, PriceIn]) -> Dict[str, Price]:
    return {cur: Price(value=p.value, multiplier=p.multiplier) for cur, p in prices.items()}

def _make_product(p: ProductIn) -> Product:
    return Product(
        id=p.id,
        name=p.name,
        description=p.description,
        tags=list(p.tags) if p.tags is not None else None,
        prices=_make_prices(p.prices),
    )

def _make_product_dict(p: Product) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": p.id,
        "name": p.name,
        "description": p.description,
        "prices": {cur: {"value": v.value, "multiplier": v.multiplier} for cur, v in p.prices.items()},
    }
    # tags are optional and left out when absent
    if p.tags:
        out["tags"] = list(p.tags)
    return out
