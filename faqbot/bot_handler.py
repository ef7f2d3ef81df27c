"""Base bot handler interface."""

from abc import ABC, abstractmethod
from enum import Enum


class BotId(str, Enum):
    """Identifiers of the available bots."""

    FAQ = "FAQ"


class BotHandler(ABC):
    """Abstract base class for conversational bot handlers."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the handler before it receives messages."""
        pass

    @abstractmethod
    async def process_message(self, message: str) -> str:
        """Answer a user message.

        Args:
            message: Raw message text

        Returns:
            Reply to show the user, never raises
        """
        pass

    @property
    @abstractmethod
    def bot_id(self) -> BotId:
        """Identifier of this bot."""
        pass
