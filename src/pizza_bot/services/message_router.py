"""Message router — dispatches incoming messages to the agent for the current step."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pizza_bot.agents.base import AgentResponse, BaseAgent
from pizza_bot.agents.checkout_agent import CustomerInfoAgent
from pizza_bot.agents.menu_agent import GreetingAgent, MainMenuAgent
from pizza_bot.agents.order_agent import (
    OrderConfirmationAgent,
    SizeSelectionAgent,
    ToppingsSelectionAgent,
)
from pizza_bot.models.order import Step
from pizza_bot.services import messages
from pizza_bot.services.session_manager import Session, SessionManager

logger = logging.getLogger(__name__)

# Typed from any step; always jump back to the main menu.
RESTART_COMMANDS = frozenset({"menu", "start", "restart"})


def default_agents() -> list[BaseAgent]:
    return [
        GreetingAgent(),
        MainMenuAgent(),
        SizeSelectionAgent(),
        ToppingsSelectionAgent(),
        OrderConfirmationAgent(),
        CustomerInfoAgent(),
    ]


class MessageRouter:
    """Central router that decides which agent handles a message.

    Routing logic
    -------------
    * ``menu`` / ``start`` / ``restart`` → main menu, from any step
    * otherwise → the agent registered for ``session.step``
    * unknown step, or a size-dependent step without a size → main menu

    Messages from the same phone number are handled one at a time; messages
    from different numbers do not wait on each other.
    """

    def __init__(
        self,
        session_manager: SessionManager,
        agents: Iterable[BaseAgent] | None = None,
    ) -> None:
        self._session_manager = session_manager
        self._agents: dict[Step, BaseAgent] = {
            agent.step: agent for agent in (agents or default_agents())
        }

    async def route(self, phone: str, message: str) -> AgentResponse:
        """Route a message to the appropriate agent and return its response.

        Parameters
        ----------
        phone:
            The sender's phone number (from WhatsApp metadata).
        message:
            The raw text body of the message.
        """
        session = self._session_manager.get_or_create(phone)
        async with session.lock:
            text = message.strip()

            if text.lower() in RESTART_COMMANDS:
                logger.info("Restart command from %s", phone)
                return self._reset_to_main_menu(session)

            try:
                agent = self._agents.get(Step(session.step))
            except ValueError:
                agent = None
            if agent is None:
                logger.warning(
                    "Unknown step %r for %s, resetting to main menu", session.step, phone
                )
                return self._reset_to_main_menu(session)

            if agent.requires_size and session.order.size is None:
                logger.warning(
                    "No size chosen for %s in step %s, resetting to main menu",
                    phone,
                    session.step,
                )
                return self._reset_to_main_menu(session)

            logger.info("Routing %s → %s", phone, agent.name)
            response = await agent.handle(text, session.order)
            session.step = response.next_step
            session.order = response.order
            return response

    async def handle_message(self, phone: str, message: str) -> str:
        """Route *message* and return only the reply text."""
        response = await self.route(phone, message)
        return response.reply_text

    @staticmethod
    def _reset_to_main_menu(session: Session) -> AgentResponse:
        session.step = Step.MAIN_MENU
        return AgentResponse(
            reply_text=messages.main_menu_message(),
            next_step=Step.MAIN_MENU,
            order=session.order,
        )
