"""Storage services package.

This package provides the conversation and document stores:
- ConversationStore / DocumentStore: storage interfaces
- InMemoryConversationStore / InMemoryDocumentStore: process-local storage
- SqlConversationStore / SqlDocumentStore: SQLAlchemy-backed storage

The active backend is picked once at startup by the service factory.
"""

from .base import ConversationStore, DocumentStore, StorageError
from .memory_store import InMemoryConversationStore, InMemoryDocumentStore
from .sql_store import SqlConversationStore, SqlDocumentStore, create_sql_engine

__all__ = [
    "ConversationStore",
    "DocumentStore",
    "StorageError",
    "InMemoryConversationStore",
    "InMemoryDocumentStore",
    "SqlConversationStore",
    "SqlDocumentStore",
    "create_sql_engine",
]
