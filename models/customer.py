# models/customer.py
from dataclasses import dataclass


# Customer model holding the balance used to pay at checkout.
@dataclass
class Customer:
    name: str
    balance: float

    def deduct(self, amount: float) -> None:
        self.balance -= amount
