"""Conversation steps and the in-progress order built across messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from pizza_bot.models.menu import Size, Topping


class Step(str, Enum):
    """Stage of the ordering dialogue a session is currently in."""

    GREETING = "greeting"
    MAIN_MENU = "main_menu"
    SIZE_SELECTION = "size_selection"
    TOPPINGS_SELECTION = "toppings_selection"
    ORDER_CONFIRMATION = "order_confirmation"
    CUSTOMER_INFO = "customer_info"


@dataclass
class Order:
    """An order being assembled; ``Order()`` is the empty order."""

    size: Size | None = None
    toppings: list[Topping] = field(default_factory=list)
    address: str | None = None

    def has_topping(self, name: str) -> bool:
        return any(topping.name == name for topping in self.toppings)

    @property
    def total(self) -> Decimal:
        """Size price plus the price of every selected topping."""
        total = self.size.price if self.size else Decimal("0")
        return total + sum((topping.price for topping in self.toppings), Decimal("0"))

    @property
    def topping_names(self) -> str:
        if not self.toppings:
            return "None"
        return ", ".join(topping.name for topping in self.toppings)
