"""
Mocked conversation history source.

Stands in for the browser extension that would read the user's ChatGPT
history; it returns a fixed set of conversations.
"""

import logging
from typing import Optional

from typing_extensions import override

from chat_terminal.entities.conversation import ChatMessage, ConversationRecord
from chat_terminal.ports.history.history_source_port import HistorySourcePort


class MockHistoryAdapter(HistorySourcePort):
    """History source returning canned conversations."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    async def fetch_history(self) -> list[ConversationRecord]:
        self._logger.info("Fetching mocked conversation history")
        return [
            ConversationRecord(
                id="1",
                title="React Component Design",
                project="web-development",
                messages=[
                    ChatMessage(
                        role="user",
                        content="How do I create a reusable React component?",
                    ),
                    ChatMessage(
                        role="assistant",
                        content="To create a reusable React component, you should...",
                    ),
                ],
            ),
            ConversationRecord(
                id="2",
                title="Next.js Routing",
                project="web-development",
                messages=[
                    ChatMessage(role="user", content="How does routing work in Next.js?"),
                    ChatMessage(
                        role="assistant",
                        content="Next.js has a file-system based router built on the concept of pages...",
                    ),
                ],
            ),
            ConversationRecord(
                id="3",
                title="GPT-4 Capabilities",
                project="ai-research",
                messages=[
                    ChatMessage(
                        role="user", content="What can GPT-4 do that GPT-3 cannot?"
                    ),
                    ChatMessage(
                        role="assistant",
                        content="GPT-4 has several improvements over GPT-3, including...",
                    ),
                ],
            ),
        ]
