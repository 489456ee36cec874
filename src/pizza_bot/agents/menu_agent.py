"""Greeting and main-menu agents — the entry points of every conversation."""

from __future__ import annotations

import logging

from pizza_bot.agents.base import AgentResponse, BaseAgent
from pizza_bot.models.order import Order, Step
from pizza_bot.services import messages

logger = logging.getLogger(__name__)


class GreetingAgent(BaseAgent):
    """Answers the very first message of a session with the main menu."""

    @property
    def name(self) -> str:
        return "GreetingAgent"

    @property
    def step(self) -> Step:
        return Step.GREETING

    async def handle(self, message: str, order: Order) -> AgentResponse:
        return AgentResponse(
            reply_text=messages.main_menu_message(),
            next_step=Step.MAIN_MENU,
            order=order,
        )


class MainMenuAgent(BaseAgent):
    """Handles the four main-menu options.

    Options
    -------
    1 / order    start a new order (size selection)
    2 / menu     show the full menu
    3 / track    order tracking placeholder
    4 / contact  contact details
    """

    @property
    def name(self) -> str:
        return "MainMenuAgent"

    @property
    def step(self) -> Step:
        return Step.MAIN_MENU

    async def handle(self, message: str, order: Order) -> AgentResponse:
        choice = message.lower()

        if choice in ("1", "order"):
            logger.info("Starting a new order")
            return AgentResponse(
                reply_text=messages.size_selection_message(),
                next_step=Step.SIZE_SELECTION,
                order=order,
            )

        if choice in ("2", "menu"):
            reply = messages.full_menu_message()
        elif choice in ("3", "track"):
            reply = messages.TRACKING_MESSAGE
        elif choice in ("4", "contact"):
            reply = messages.CONTACT_MESSAGE
        else:
            reply = messages.MAIN_MENU_REPROMPT

        return AgentResponse(reply_text=reply, next_step=Step.MAIN_MENU, order=order)
