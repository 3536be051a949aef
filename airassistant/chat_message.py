"""
Chat message module for the Air Quality Assistant.

This module defines the ChatMessage dataclass, a single entry of the
conversation log. Messages are append-only: once in the log they are never
edited or removed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Author(Enum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """
    Represents one message in the conversation.

    Attributes:
        text: Message body, stored exactly as written
        author: Whether the user or the assistant wrote it
        timestamp: When the message was appended to the log
    """

    text: str
    author: Author
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.author is Author.USER

    def to_dict(self) -> dict[str, object]:
        """
        Converts the message to a serializable dictionary.

        Returns:
            A dictionary with text, author and ISO formatted timestamp
        """
        return {
            "text": self.text,
            "author": self.author.value,
            "timestamp": self.timestamp.isoformat(),
        }
