"""Provider-agnostic chat message passed to the model dispatcher."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Role(str, Enum):
    """Message roles understood by the providers."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    """A single role-tagged message.

    Attributes:
        role: Who authored the message
        content: Message text
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": Role(self.role).value, "content": self.content}
