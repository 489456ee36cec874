"""Checkout agent — collects the delivery address and completes the order."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from pizza_bot.agents.base import AgentResponse, BaseAgent
from pizza_bot.models.order import Order, Step
from pizza_bot.services import messages
from pizza_bot.services.order_reference import generate_order_reference

logger = logging.getLogger(__name__)


class CustomerInfoAgent(BaseAgent):
    """Takes the delivery address and returns the final confirmation.

    Any non-empty text is accepted as the address.  Once the order is
    confirmed the session goes back to the main menu with an empty order,
    ready for the next one.
    """

    requires_size = True

    def __init__(
        self, reference_generator: Callable[[], str] = generate_order_reference
    ) -> None:
        self._generate_reference = reference_generator

    @property
    def name(self) -> str:
        return "CustomerInfoAgent"

    @property
    def step(self) -> Step:
        return Step.CUSTOMER_INFO

    async def handle(self, message: str, order: Order) -> AgentResponse:
        if not message:
            return AgentResponse(
                reply_text=messages.ADDRESS_REQUEST_MESSAGE,
                next_step=Step.CUSTOMER_INFO,
                order=order,
            )

        completed = replace(order, address=message)
        reference = self._generate_reference()
        logger.info(
            "Order %s confirmed: %s pizza, total %s",
            reference,
            completed.size.name,
            messages.format_price(completed.total),
        )
        return AgentResponse(
            reply_text=messages.order_confirmed_message(completed, reference),
            next_step=Step.MAIN_MENU,
            order=Order(),
        )
