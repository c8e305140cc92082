"""Freeform documents owned by a user."""

from datetime import datetime
from typing import Optional

from backend.src.data_classes.base import CamelModel


class Document(CamelModel):
    """A titled text document.

    Attributes:
        id: Store-assigned identifier
        title: Non-empty title
        content: Free text, empty by default
        user_id: Owner, None for unowned documents
        created_at: Set by the store on creation
        updated_at: Refreshed by the store on every update
    """

    id: str
    title: str
    content: str = ""
    user_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
