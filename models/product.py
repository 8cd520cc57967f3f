# models/product.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from utils.clock import now as current_time, parse_date


# Product model representing an item on sale.
# expiry_date is only consulted when is_expirable, weight (kg) only when is_shippable.
@dataclass
class Product:
    name: str
    price: float
    quantity: int
    is_expirable: bool = False
    expiry_date: Optional[datetime] = None
    is_shippable: bool = False
    weight: float = 0.0

    def __post_init__(self):
        if self.is_expirable and self.expiry_date is None:
            raise ValueError("An expirable product needs an expiry_date.")

    def has_expired(self, now: Optional[datetime] = None) -> bool:
        if not self.is_expirable:
            return False
        if now is None:
            now = current_time()
        # expiring today (or earlier) counts as expired
        return self.expiry_date <= now

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        # {"name", "price", "quantity", optional "expiry_date": "YYYY-MM-DD", optional "weight"}
        # Raises InvalidDateFormat for a malformed expiry_date.
        expiry = data.get("expiry_date")
        weight = data.get("weight")
        return cls(
            name=data["name"],
            price=float(data["price"]),
            quantity=int(data["quantity"]),
            is_expirable=expiry is not None,
            expiry_date=parse_date(expiry) if expiry is not None else None,
            is_shippable=weight is not None,
            weight=float(weight) if weight is not None else 0.0,
        )
