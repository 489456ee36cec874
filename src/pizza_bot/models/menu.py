"""Static pizza menu — sizes and toppings offered by the shop."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Size:
    """A pizza size; ``id`` is the number the customer types to pick it."""

    id: int
    name: str
    price: Decimal


@dataclass(frozen=True)
class Topping:
    """A topping; its 1-based position in the menu is the selection key."""

    name: str
    price: Decimal


@dataclass(frozen=True)
class Menu:
    sizes: tuple[Size, ...]
    toppings: tuple[Topping, ...]

    def size_by_id(self, size_id: int) -> Size | None:
        """Return the size with *size_id*, or ``None`` if there is none."""
        for size in self.sizes:
            if size.id == size_id:
                return size
        return None

    def topping_at(self, position: int) -> Topping | None:
        """Return the topping at 1-based *position*, or ``None`` if out of range."""
        if 1 <= position <= len(self.toppings):
            return self.toppings[position - 1]
        return None


PIZZA_MENU = Menu(
    sizes=(
        Size(id=1, name="Small", price=Decimal("10")),
        Size(id=2, name="Medium", price=Decimal("15")),
        Size(id=3, name="Large", price=Decimal("20")),
    ),
    toppings=(
        Topping(name="Pepperoni", price=Decimal("2")),
        Topping(name="Mushrooms", price=Decimal("1.5")),
        Topping(name="Olives", price=Decimal("1")),
        Topping(name="Extra Cheese", price=Decimal("2.5")),
        Topping(name="Sausage", price=Decimal("2")),
        Topping(name="Bell Peppers", price=Decimal("1")),
    ),
)
