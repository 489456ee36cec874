"""Base agent — abstract interface every step agent must implement."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pizza_bot.models.order import Order, Step


@dataclass
class AgentResponse:
    """Value object returned by an agent after processing a message.

    ``next_step`` and ``order`` are applied to the session by the router;
    agents never touch the session themselves.
    """

    reply_text: str
    next_step: Step
    order: Order


class BaseAgent(ABC):
    """Abstract base class for the per-step conversational agents.

    Every agent receives the whitespace-trimmed message text and the
    session's current order.  It returns an ``AgentResponse`` with the
    reply, the step to move to, and the (possibly new) order.  The order
    passed in is never mutated.
    """

    #: Set on agents for steps that can only be reached once a size is chosen.
    requires_size: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable agent name (used in logs and routing)."""

    @property
    @abstractmethod
    def step(self) -> Step:
        """The conversation step this agent handles."""

    @abstractmethod
    async def handle(self, message: str, order: Order) -> AgentResponse:
        """Process a user message and return a response.

        Parameters
        ----------
        message:
            The text the user sent, with surrounding whitespace removed.
        order:
            The in-progress order for this user's session.
        """
