# models/cart.py
import logging
from dataclasses import dataclass

from models.product import Product

logger = logging.getLogger("checkout.cart")


# One (product, requested quantity) line. The product is shared with the
# catalog, not owned by the cart.
@dataclass
class CartItem:
    product: Product
    qty: int

    @property
    def line_total(self) -> float:
        return self.product.price * self.qty


class Cart:
    def __init__(self):
        self.items: list[CartItem] = []

    def add(self, product: Product, qty: int = 1) -> bool:
        if qty <= 0:
            raise ValueError("The quantity must be a positive number.")
        if qty > product.quantity:
            logger.warning(f"Error: Not enough stock for {product.name}")
            return False
        self.items.append(CartItem(product, qty))
        return True

    def remove(self, index: int) -> None:
        # out-of-range indexes are ignored
        if 0 <= index < len(self.items):
            del self.items[index]

    def replace(self, index: int, product: Product, qty: int) -> None:
        # no stock check here; the next checkout pass validates the new line
        self.items[index] = CartItem(product, qty)

    def clear(self):
        self.items.clear()

    def get_items(self) -> tuple[CartItem, ...]:
        return tuple(self.items)

    def __len__(self):
        return len(self.items)
