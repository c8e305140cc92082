"""Storage interfaces for conversations and documents.

Two interchangeable backends implement these interfaces: an in-memory one and a
SQL one. The backend is chosen once at startup and passed to the services that
need it; callers never know which one is active.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from backend.src.data_classes import Conversation, Document


class StorageError(RuntimeError):
    """A storage backend failed to read or write."""


class ConversationStore(ABC):
    """Persistence for conversations."""

    @abstractmethod
    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        """Return the conversation with the given id, or None if unknown."""

    @abstractmethod
    def save_conversation(self, conversation: Conversation) -> Conversation:
        """Insert or replace a conversation by id.

        ``created_at`` is kept from the first save and ``updated_at`` is
        refreshed on every save.

        Returns:
            The stored conversation with its timestamps
        """

    @abstractmethod
    def list_conversations(self, user_id: Optional[str] = None) -> List[Conversation]:
        """List conversations, most recent activity first.

        Args:
            user_id: Only return conversations owned by this user. Unowned
                conversations never match a filter.
        """

    @abstractmethod
    def delete_conversation(self, conversation_id: str) -> bool:
        """Delete a conversation. Returns whether it existed."""


class DocumentStore(ABC):
    """Persistence for documents."""

    @abstractmethod
    def create_document(
        self, title: str, content: str = "", user_id: Optional[str] = None
    ) -> Document:
        """Create a document and assign it an id."""

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Document]:
        """Return the document with the given id, or None if unknown."""

    @abstractmethod
    def list_documents(self, user_id: Optional[str] = None) -> List[Document]:
        """List documents, most recently updated first.

        Args:
            user_id: Only return documents owned by this user. Unowned
                documents never match a filter.
        """

    @abstractmethod
    def update_document(
        self,
        document_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Document]:
        """Apply the supplied fields to a document and refresh ``updated_at``.

        Returns:
            The updated document, or None if the id is unknown
        """

    @abstractmethod
    def delete_document(self, document_id: str) -> bool:
        """Delete a document. Returns whether it existed."""
