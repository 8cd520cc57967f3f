# models/order.py
from dataclasses import dataclass, field
from datetime import datetime


# Value objects describing a settled checkout.
@dataclass
class ReceiptLine:
    name: str
    qty: int
    unit_price: float
    line_total: float


@dataclass
class ShippingManifest:
    # product name -> summed weight (kg), in order of first appearance
    weights: dict[str, float] = field(default_factory=dict)
    fee: float = 0.0

    @property
    def total_weight(self) -> float:
        return sum(self.weights.values())

    def __bool__(self):
        return bool(self.weights)


@dataclass
class Receipt:
    customer: str
    created_at: datetime
    lines: list[ReceiptLine]
    manifest: ShippingManifest
    subtotal: float
    shipping: float
    total: float
    balance_after: float = 0.0
