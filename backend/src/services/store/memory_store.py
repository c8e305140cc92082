"""In-memory storage backends.

Data lives in dictionaries owned by the store instance and is lost on restart.
Stored objects are copied on the way in and out so callers never share state
with the store. A lock keeps each operation atomic under threaded servers.
"""

import logging
import threading
from typing import Dict, List, Optional

from backend.src.data_classes import Conversation, Document, next_timestamp
from backend.src.data_classes.conversation import conversation_id_timestamp
from backend.src.services.store.base import ConversationStore, DocumentStore

logger = logging.getLogger(__name__)


class InMemoryConversationStore(ConversationStore):
    """Conversation store backed by a dictionary."""

    def __init__(self) -> None:
        self._conversations: Dict[str, Conversation] = {}
        self.lock = threading.Lock()

    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        with self.lock:
            conversation = self._conversations.get(conversation_id)
            return conversation.model_copy(deep=True) if conversation else None

    def save_conversation(self, conversation: Conversation) -> Conversation:
        with self.lock:
            stored = conversation.model_copy(deep=True)
            existing = self._conversations.get(stored.id)
            stored.updated_at = next_timestamp(existing.updated_at if existing else None)
            if existing is not None and existing.created_at is not None:
                stored.created_at = existing.created_at
            elif stored.created_at is None:
                stored.created_at = stored.updated_at
            self._conversations[stored.id] = stored
            logger.debug(f"Saved conversation {stored.id}")
            return stored.model_copy(deep=True)

    def list_conversations(self, user_id: Optional[str] = None) -> List[Conversation]:
        with self.lock:
            conversations = [
                conversation.model_copy(deep=True)
                for conversation in self._conversations.values()
                if user_id is None or conversation.user_id == user_id
            ]

        # The timestamp in the id stands in for activity time; conversations
        # without any history sort last
        return sorted(
            conversations,
            key=lambda c: (
                bool(c.conversation_history),
                conversation_id_timestamp(c.id),
            ),
            reverse=True,
        )

    def delete_conversation(self, conversation_id: str) -> bool:
        with self.lock:
            return self._conversations.pop(conversation_id, None) is not None


class InMemoryDocumentStore(DocumentStore):
    """Document store backed by a dictionary with sequential ids."""

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}
        self._next_id = 1
        self.lock = threading.Lock()

    def create_document(
        self, title: str, content: str = "", user_id: Optional[str] = None
    ) -> Document:
        with self.lock:
            document_id = str(self._next_id)
            self._next_id += 1
            now = next_timestamp()
            document = Document(
                id=document_id,
                title=title,
                content=content or "",
                user_id=user_id,
                created_at=now,
                updated_at=now,
            )
            self._documents[document_id] = document
            logger.debug(f"Created document {document_id}")
            return document.model_copy(deep=True)

    def get_document(self, document_id: str) -> Optional[Document]:
        with self.lock:
            document = self._documents.get(document_id)
            return document.model_copy(deep=True) if document else None

    def list_documents(self, user_id: Optional[str] = None) -> List[Document]:
        with self.lock:
            documents = [
                document.model_copy(deep=True)
                for document in self._documents.values()
                if user_id is None or document.user_id == user_id
            ]
        return sorted(documents, key=lambda d: d.updated_at, reverse=True)

    def update_document(
        self,
        document_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Document]:
        with self.lock:
            existing = self._documents.get(document_id)
            if existing is None:
                return None

            updates = {"updated_at": next_timestamp(existing.updated_at)}
            if title is not None:
                updates["title"] = title
            if content is not None:
                updates["content"] = content

            updated = existing.model_copy(update=updates, deep=True)
            self._documents[document_id] = updated
            return updated.model_copy(deep=True)

    def delete_document(self, document_id: str) -> bool:
        with self.lock:
            return self._documents.pop(document_id, None) is not None
