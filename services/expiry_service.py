# services/expiry_service.py
"""
expiry_service.py

Console interaction used when checkout meets an expired cart line.

The customer can:
    1. remove the line from the cart
    2. replace it with a product picked from the replacement catalog

Invalid answers are re-prompted up to max_attempts times per question.
After that the resolver gives up and the caller aborts the checkout.
"""

import logging
from typing import Callable, Optional, Sequence

from models.cart import Cart
from models.product import Product

logger = logging.getLogger("checkout.expiry")

REMOVE = 1
REPLACE = 2
DEFAULT_MAX_ATTEMPTS = 3


class ExpiryResolver:
    def __init__(
        self,
        catalog: Sequence[Product],
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        # read-only view; the products themselves are shared with the caller
        self.catalog = tuple(catalog)
        self.input_fn = input_fn
        self.output = output
        self.max_attempts = max_attempts

    def resolve(self, cart: Cart, index: int) -> bool:
        # Returns True once the cart line at index was removed or replaced,
        # False when the customer ran out of attempts.
        product = cart.items[index].product
        self.output(f"Product '{product.name}' is expired!")
        self.output("Do you want to:")
        self.output("1. Remove it from cart")
        self.output("2. Replace it with another product")

        choice = self._ask_int("Enter choice (1 or 2): ", lambda n: n in (REMOVE, REPLACE))
        if choice is None:
            return self._give_up(product)

        if choice == REMOVE:
            cart.remove(index)
            logger.info(f"Removed expired '{product.name}' at line {index}")
            self.output("Removed expired product.")
            return True

        replacement = self._choose_replacement()
        if replacement is None:
            return self._give_up(product)

        qty = self._ask_int("Enter quantity: ", lambda n: n > 0)
        if qty is None:
            return self._give_up(product)

        cart.replace(index, replacement, qty)
        logger.info(
            f"Replaced expired '{product.name}' at line {index} with '{replacement.name}' x {qty}"
        )
        self.output("Replaced expired product.")
        return True

    def _choose_replacement(self) -> Optional[Product]:
        if not self.catalog:
            self.output("No replacement products available.")
            return None

        self.output("Available products:")
        for number, product in enumerate(self.catalog, start=1):
            self.output(f"{number}. {product.name}")

        count = len(self.catalog)
        number = self._ask_int(
            f"Select replacement product (1-{count}): ", lambda n: 1 <= n <= count
        )
        if number is None:
            return None
        return self.catalog[number - 1]

    def _ask_int(self, prompt: str, is_valid: Callable[[int], bool]) -> Optional[int]:
        for _ in range(self.max_attempts):
            try:
                answer = self.input_fn(prompt)
            except EOFError:
                logger.warning("Input closed while waiting for a choice")
                return None
            try:
                value = int(str(answer).strip())
            except ValueError:
                value = None
            if value is not None and is_valid(value):
                return value
            logger.warning(f"Invalid choice: {answer!r}")
            self.output("Invalid choice. Try again.")
        self.output("Too many invalid choices.")
        return None

    def _give_up(self, product: Product) -> bool:
        self.output("Checkout aborted.")
        logger.warning(f"Expiry resolution for '{product.name}' abandoned")
        return False
