# services/shipping_service.py
from typing import Iterable, Tuple

from models.order import ShippingManifest

SHIPPING_RATE_PER_KG = 10.0


class ShippingService:
    # Groups shippable (name, weight) entries by product name and prices
    # the parcel at a flat rate per kilogram.

    def __init__(self, rate_per_kg: float = SHIPPING_RATE_PER_KG):
        self.rate_per_kg = rate_per_kg

    def ship(self, shippables: Iterable[Tuple[str, float]]) -> ShippingManifest:
        # One entry per cart line; lines naming the same product are summed here.
        grouped: dict[str, float] = {}
        total_weight = 0.0
        for name, weight in shippables:
            grouped[name] = grouped.get(name, 0.0) + weight
            total_weight += weight

        return ShippingManifest(weights=grouped, fee=total_weight * self.rate_per_kg)
