"""Document endpoints module.

CRUD over the caller's documents. Creating stamps the caller as owner and
listing is scoped to the caller; the by-id routes are not owner-checked.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, Field, field_validator, model_validator

from backend.src.api.middleware.auth import current_user_id, require_auth
from backend.src.api.middleware.exceptions import NotFoundError, ServiceError
from backend.src.services.store import DocumentStore

logger = logging.getLogger(__name__)

TITLE_REQUIRED_MESSAGE = "Please provide a document title"


# Schema definitions
class DocumentCreateRequest(BaseModel):
    """Document creation request model for validation."""

    title: str = Field(..., description="Document title")
    content: Optional[str] = Field(None, description="Document text, empty if omitted")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v:
            raise ValueError(TITLE_REQUIRED_MESSAGE)
        return v


class DocumentUpdateRequest(BaseModel):
    """Document update request model; only supplied fields are changed."""

    title: Optional[str] = Field(None, description="New title")
    content: Optional[str] = Field(None, description="New document text")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError(TITLE_REQUIRED_MESSAGE)
        return v

    @model_validator(mode="after")
    def validate_has_changes(self) -> "DocumentUpdateRequest":
        if self.title is None and self.content is None:
            raise ValueError("Please provide a title or content to update")
        return self


def init_document_routes(document_store: DocumentStore) -> Blueprint:
    """Initialize document routes with the provided store.

    Args:
        document_store: Store holding the documents

    Returns:
        Blueprint: Flask blueprint with configured document routes.
    """
    documents_bp = Blueprint("documents", __name__)

    @documents_bp.route("/documents", methods=["POST"])
    @require_auth
    @validate()
    def create_document(body: DocumentCreateRequest) -> Tuple[Response, int]:
        """Create a document owned by the caller.

        Args:
            body: Validated request body

        Returns:
            Response with the created document
        """
        try:
            document = document_store.create_document(
                title=body.title, content=body.content or "", user_id=current_user_id()
            )
        except Exception as e:
            logger.error(f"Failed to create document: {str(e)}")
            raise ServiceError(message="Failed to create document")

        logger.info(f"Created document {document.id}")
        return jsonify({"success": True, "document": document.to_json()}), 200

    @documents_bp.route("/documents", methods=["GET"])
    @require_auth
    def list_documents() -> Tuple[Response, int]:
        """Return the caller's documents, most recently updated first."""
        user_id = current_user_id()
        try:
            documents = document_store.list_documents(user_id=user_id)
        except Exception as e:
            logger.error(f"Failed to fetch documents: {str(e)}")
            raise ServiceError(message="Failed to fetch documents")

        logger.info(f"Found {len(documents)} documents for user {user_id}")
        payload: Dict[str, Any] = {
            "success": True,
            "documents": [document.to_json() for document in documents],
        }
        return jsonify(payload), 200

    @documents_bp.route("/documents/<document_id>", methods=["GET"])
    @require_auth
    def get_document(document_id: str) -> Tuple[Response, int]:
        """Return one document."""
        try:
            document = document_store.get_document(document_id)
        except Exception as e:
            logger.error(f"Failed to fetch document {document_id}: {str(e)}")
            raise ServiceError(message="Failed to fetch document")

        if document is None:
            raise NotFoundError(message="Document not found")

        return jsonify({"success": True, "document": document.to_json()}), 200

    @documents_bp.route("/documents/<document_id>", methods=["PUT"])
    @require_auth
    @validate()
    def update_document(document_id: str, body: DocumentUpdateRequest) -> Tuple[Response, int]:
        """Update the title and/or content of a document.

        Args:
            document_id: Id of the document to update
            body: Validated request body

        Returns:
            Response with the updated document
        """
        try:
            document = document_store.update_document(
                document_id, title=body.title, content=body.content
            )
        except Exception as e:
            logger.error(f"Failed to update document {document_id}: {str(e)}")
            raise ServiceError(message="Failed to update document")

        if document is None:
            raise NotFoundError(message="Document not found")

        return jsonify({"success": True, "document": document.to_json()}), 200

    @documents_bp.route("/documents/<document_id>", methods=["DELETE"])
    @require_auth
    def delete_document(document_id: str) -> Tuple[Response, int]:
        """Delete a document."""
        try:
            deleted = document_store.delete_document(document_id)
        except Exception as e:
            logger.error(f"Failed to delete document {document_id}: {str(e)}")
            raise ServiceError(message="Failed to delete document")

        if not deleted:
            raise NotFoundError(message="Document not found")

        return jsonify({"success": True, "message": "Document deleted successfully"}), 200

    return documents_bp
