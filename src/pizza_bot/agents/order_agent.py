"""Order-building agents — size, toppings and the confirm/cancel step."""

from __future__ import annotations

import logging
from dataclasses import replace

from pizza_bot.agents.base import AgentResponse, BaseAgent
from pizza_bot.models.menu import PIZZA_MENU, Menu, Topping
from pizza_bot.models.order import Order, Step
from pizza_bot.services import messages

logger = logging.getLogger(__name__)


def parse_number(token: str) -> int | None:
    """Parse a plain ASCII digit string; signs, underscores and non-ASCII digits are rejected."""
    if token.isascii() and token.isdigit():
        return int(token)
    return None


class SizeSelectionAgent(BaseAgent):
    """Reads a size id and moves on to toppings."""

    def __init__(self, menu: Menu = PIZZA_MENU) -> None:
        self._menu = menu

    @property
    def name(self) -> str:
        return "SizeSelectionAgent"

    @property
    def step(self) -> Step:
        return Step.SIZE_SELECTION

    async def handle(self, message: str, order: Order) -> AgentResponse:
        size_id = parse_number(message)
        size = self._menu.size_by_id(size_id) if size_id is not None else None

        if size is None:
            return AgentResponse(
                reply_text=messages.INVALID_SIZE_MESSAGE,
                next_step=Step.SIZE_SELECTION,
                order=order,
            )

        logger.info("Size selected: %s", size.name)
        return AgentResponse(
            reply_text=messages.toppings_selection_message(self._menu),
            next_step=Step.TOPPINGS_SELECTION,
            order=replace(order, size=size, toppings=[]),
        )


class ToppingsSelectionAgent(BaseAgent):
    """Accumulates toppings by menu position until ``done`` or ``none``.

    Several positions may be sent at once (``"1 3 5"``).  Unparseable or
    out-of-range tokens are skipped, and a topping already on the order is
    never added twice.
    """

    requires_size = True

    def __init__(self, menu: Menu = PIZZA_MENU) -> None:
        self._menu = menu

    @property
    def name(self) -> str:
        return "ToppingsSelectionAgent"

    @property
    def step(self) -> Step:
        return Step.TOPPINGS_SELECTION

    async def handle(self, message: str, order: Order) -> AgentResponse:
        choice = message.lower()

        if choice == "done":
            return self._summary(order)

        if choice == "none":
            return self._summary(replace(order, toppings=[]))

        added = self._parse_new_toppings(choice, order)
        if not added:
            return AgentResponse(
                reply_text=messages.TOPPINGS_HELP_MESSAGE,
                next_step=Step.TOPPINGS_SELECTION,
                order=order,
            )

        logger.info("Toppings added: %s", ", ".join(t.name for t in added))
        return AgentResponse(
            reply_text=messages.toppings_added_message(added),
            next_step=Step.TOPPINGS_SELECTION,
            order=replace(order, toppings=order.toppings + added),
        )

    # ── Private helpers ──────────────────────────────────

    def _parse_new_toppings(self, text: str, order: Order) -> list[Topping]:
        """Return toppings named in *text* that are not yet on *order*."""
        added: list[Topping] = []
        for token in text.split():
            position = parse_number(token)
            if position is None:
                continue
            topping = self._menu.topping_at(position)
            if topping is None or order.has_topping(topping.name):
                continue
            if topping not in added:
                added.append(topping)
        return added

    @staticmethod
    def _summary(order: Order) -> AgentResponse:
        return AgentResponse(
            reply_text=messages.order_summary_message(order),
            next_step=Step.ORDER_CONFIRMATION,
            order=order,
        )


class OrderConfirmationAgent(BaseAgent):
    """Waits for ``confirm`` or ``cancel`` after the order summary."""

    requires_size = True

    @property
    def name(self) -> str:
        return "OrderConfirmationAgent"

    @property
    def step(self) -> Step:
        return Step.ORDER_CONFIRMATION

    async def handle(self, message: str, order: Order) -> AgentResponse:
        choice = message.lower()

        if choice == "confirm":
            return AgentResponse(
                reply_text=messages.ADDRESS_REQUEST_MESSAGE,
                next_step=Step.CUSTOMER_INFO,
                order=order,
            )

        if choice == "cancel":
            logger.info("Order cancelled")
            return AgentResponse(
                reply_text=messages.order_cancelled_message(),
                next_step=Step.MAIN_MENU,
                order=Order(),
            )

        return AgentResponse(
            reply_text=messages.CONFIRMATION_REPROMPT,
            next_step=Step.ORDER_CONFIRMATION,
            order=order,
        )
