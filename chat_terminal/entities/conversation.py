"""
Conversation domain entities stored in ``.chat`` files.
"""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CHAT_EXTENSION = ".chat"

Role = Literal["user", "assistant", "system"]

ROLE_LABELS: dict[str, str] = {
    "user": "You",
    "assistant": "ChatGPT",
    "system": "System",
}


def is_chat_file(path: str) -> bool:
    """Whether the path names a conversation file."""
    return path.endswith(CHAT_EXTENSION)


class ChatMessage(BaseModel):
    """A single role-tagged message of a conversation."""

    role: Role
    content: str

    @property
    def label(self) -> str:
        return ROLE_LABELS[self.role]


class Conversation(BaseModel):
    """
    Structured content of a conversation file.

    Extra keys (ids, project labels, timestamps) are accepted and ignored so
    that imported records can be read back.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    messages: list[ChatMessage] = Field(default_factory=list)

    @classmethod
    def from_content(cls, content: str) -> "Conversation":
        """
        Parse file content as a conversation.

        Raises:
            ValueError: If the content is not JSON or does not have the expected shape
        """
        return cls.model_validate_json(content)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ConversationRecord(BaseModel):
    """A conversation as delivered by the history source."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    project: Optional[str] = None
    messages: list[ChatMessage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=_now, alias="updatedAt")

    def to_chat_json(self) -> str:
        """Serialize the record as conversation file content."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
