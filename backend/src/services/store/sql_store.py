"""SQL storage backends built on SQLAlchemy.

Conversations keep their history in a JSON column. Any SQLAlchemy URL works;
production uses Postgres through ``DATABASE_URL`` and the tests use SQLite.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import JSON, Column, DateTime, String, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.src.data_classes import Conversation, Document, next_timestamp
from backend.src.data_classes.base import ensure_utc
from backend.src.services.store.base import (
    ConversationStore,
    DocumentStore,
    StorageError,
)

logger = logging.getLogger(__name__)

Base = declarative_base()


class ConversationRecord(Base):
    __tablename__ = "conversations"

    id = Column(String(64), primary_key=True)
    current_step = Column(String(32), nullable=False, default="chatting")
    initial_description = Column(Text, nullable=False)
    selected_model = Column(String(64), nullable=False, default="gpt-4o")
    conversation_history = Column(JSON, nullable=False, default=list)
    user_id = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)


class DocumentRecord(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
    user_id = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)


def create_sql_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL and make sure the tables exist.

    In-memory SQLite shares a single connection so every session sees the
    same database.
    """
    kwargs: Dict[str, Any] = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)
    Base.metadata.create_all(engine)
    logger.info(f"SQL storage ready ({engine.url.get_backend_name()})")
    return engine


class _SqlStore:
    """Session handling shared by the SQL stores."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @contextmanager
    def session(self, action: str) -> Iterator[Session]:
        """Open a transactional session, wrapping driver errors in StorageError."""
        try:
            with self.session_factory.begin() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Error while trying to {action}: {str(e)}")
            raise StorageError(f"Failed to {action}") from e


class SqlConversationStore(_SqlStore, ConversationStore):
    """Conversation store backed by the ``conversations`` table."""

    @staticmethod
    def _to_conversation(record: ConversationRecord) -> Conversation:
        return Conversation(
            id=record.id,
            current_step=record.current_step,
            initial_description=record.initial_description,
            selected_model=record.selected_model,
            conversation_history=record.conversation_history or [],
            user_id=record.user_id,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )

    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        with self.session("fetch conversation") as session:
            record = session.get(ConversationRecord, conversation_id)
            return self._to_conversation(record) if record else None

    def save_conversation(self, conversation: Conversation) -> Conversation:
        with self.session("save conversation") as session:
            record = session.get(ConversationRecord, conversation.id)
            if record is None:
                updated_at = next_timestamp()
                record = ConversationRecord(
                    id=conversation.id, created_at=conversation.created_at or updated_at
                )
                session.add(record)
            else:
                updated_at = next_timestamp(record.updated_at)

            record.current_step = conversation.current_step.value
            record.initial_description = conversation.initial_description
            record.selected_model = conversation.selected_model.value
            record.conversation_history = [
                entry.model_dump(mode="json") for entry in conversation.conversation_history
            ]
            record.user_id = conversation.user_id
            record.updated_at = updated_at
            session.flush()
            return self._to_conversation(record)

    def list_conversations(self, user_id: Optional[str] = None) -> List[Conversation]:
        with self.session("fetch conversations") as session:
            query = select(ConversationRecord).order_by(ConversationRecord.updated_at.desc())
            if user_id is not None:
                query = query.where(ConversationRecord.user_id == user_id)
            return [self._to_conversation(record) for record in session.scalars(query)]

    def delete_conversation(self, conversation_id: str) -> bool:
        with self.session("delete conversation") as session:
            record = session.get(ConversationRecord, conversation_id)
            if record is None:
                return False
            session.delete(record)
            return True


class SqlDocumentStore(_SqlStore, DocumentStore):
    """Document store backed by the ``documents`` table."""

    @staticmethod
    def _to_document(record: DocumentRecord) -> Document:
        return Document(
            id=record.id,
            title=record.title,
            content=record.content or "",
            user_id=record.user_id,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )

    def create_document(
        self, title: str, content: str = "", user_id: Optional[str] = None
    ) -> Document:
        with self.session("create document") as session:
            now = next_timestamp()
            record = DocumentRecord(
                id=str(uuid.uuid4()),
                title=title,
                content=content or "",
                user_id=user_id,
                created_at=now,
                updated_at=now,
            )
            session.add(record)
            session.flush()
            return self._to_document(record)

    def get_document(self, document_id: str) -> Optional[Document]:
        with self.session("fetch document") as session:
            record = session.get(DocumentRecord, document_id)
            return self._to_document(record) if record else None

    def list_documents(self, user_id: Optional[str] = None) -> List[Document]:
        with self.session("fetch documents") as session:
            query = select(DocumentRecord).order_by(DocumentRecord.updated_at.desc())
            if user_id is not None:
                query = query.where(DocumentRecord.user_id == user_id)
            return [self._to_document(record) for record in session.scalars(query)]

    def update_document(
        self,
        document_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Document]:
        with self.session("update document") as session:
            record = session.get(DocumentRecord, document_id)
            if record is None:
                return None
            if title is not None:
                record.title = title
            if content is not None:
                record.content = content
            record.updated_at = next_timestamp(record.updated_at)
            session.flush()
            return self._to_document(record)

    def delete_document(self, document_id: str) -> bool:
        with self.session("delete document") as session:
            record = session.get(DocumentRecord, document_id)
            if record is None:
                return False
            session.delete(record)
            return True
