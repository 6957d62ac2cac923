"""
Port for the external conversation history source.
"""

from abc import ABC, abstractmethod

from chat_terminal.entities.conversation import ConversationRecord


class HistorySourcePort(ABC):
    """Port interface for fetching conversation history."""

    @abstractmethod
    async def fetch_history(self) -> list[ConversationRecord]:
        """
        Fetch the user's conversation history.

        Returns:
            Ordered list of conversation records

        Raises:
            HistoryImportError: If the history cannot be fetched
        """
        pass
