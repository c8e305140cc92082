"""Integration tests for the document routes."""

import unittest
from unittest.mock import Mock

from backend.app import create_app
from backend.src.services.auth import AnonymousIdentityVerifier
from backend.src.services.llm import ModelDispatcher
from backend.src.services.store import InMemoryConversationStore, InMemoryDocumentStore


class TestDocumentEndpoints(unittest.TestCase):
    """Test cases for document CRUD in degraded (anonymous) auth mode."""

    def setUp(self) -> None:
        """Set up an app where every request runs as the same local user."""
        self.document_store = InMemoryDocumentStore()
        self.app = create_app(
            dispatcher=ModelDispatcher({}),
            conversation_store=InMemoryConversationStore(),
            document_store=self.document_store,
            identity_verifier=AnonymousIdentityVerifier("local-user"),
        )
        self.app.config["TESTING"] = True
        self.client = self.app.test_client()

    def _create(self, **body):
        return self.client.post("/api/documents", json=body)

    def test_create_defaults_content(self) -> None:
        """A document created with a title only has empty content."""
        # Execute
        response = self._create(title="Notes")

        # Assert
        self.assertEqual(response.status_code, 200)
        document = response.get_json()["document"]
        self.assertEqual(document["title"], "Notes")
        self.assertEqual(document["content"], "")
        self.assertEqual(document["userId"], "local-user")
        self.assertEqual(document["createdAt"], document["updatedAt"])

    def test_create_requires_title(self) -> None:
        missing = self._create(content="text")
        empty = self._create(title="")

        self.assertEqual(missing.status_code, 400)
        self.assertEqual(empty.status_code, 400)
        self.assertIn("Please provide a document title", empty.get_json()["error"])
        self.assertEqual(self.document_store.list_documents(), [])

    def test_create_body_must_be_an_object(self) -> None:
        """JSON arrays and null bodies are validation errors."""
        as_array = self.client.post("/api/documents", json=[1, 2])
        as_null = self.client.post(
            "/api/documents", data="null", content_type="application/json"
        )

        for response in (as_array, as_null):
            self.assertEqual(response.status_code, 400)
            self.assertFalse(response.get_json()["success"])
            self.assertEqual(response.get_json()["error"], "Request body must be a JSON object")
        self.assertEqual(self.document_store.list_documents(), [])

    def test_update_then_get(self) -> None:
        """PUT replaces the supplied fields and advances updatedAt."""
        created = self._create(title="Notes").get_json()["document"]

        updated = self.client.put(
            f"/api/documents/{created['id']}", json={"title": "Notes", "content": "hi"}
        )
        fetched = self.client.get(f"/api/documents/{created['id']}")

        self.assertEqual(updated.status_code, 200)
        document = fetched.get_json()["document"]
        self.assertEqual(document["title"], "Notes")
        self.assertEqual(document["content"], "hi")
        stored = self.document_store.get_document(created["id"])
        self.assertGreater(stored.updated_at, stored.created_at)

    def test_update_content_only_keeps_title(self) -> None:
        created = self._create(title="Notes", content="draft").get_json()["document"]

        response = self.client.put(f"/api/documents/{created['id']}", json={"content": "final"})

        document = response.get_json()["document"]
        self.assertEqual(document["title"], "Notes")
        self.assertEqual(document["content"], "final")

    def test_update_validation(self) -> None:
        """An update must change something and cannot blank the title."""
        created = self._create(title="Notes").get_json()["document"]

        nothing = self.client.put(f"/api/documents/{created['id']}", json={})
        blank = self.client.put(f"/api/documents/{created['id']}", json={"title": ""})

        self.assertEqual(nothing.status_code, 400)
        self.assertIn("Please provide a title or content to update", nothing.get_json()["error"])
        self.assertEqual(blank.status_code, 400)

    def test_update_unknown(self) -> None:
        response = self.client.put("/api/documents/999", json={"title": "x"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"], "Document not found")

    def test_list_and_delete(self) -> None:
        first = self._create(title="First").get_json()["document"]
        second = self._create(title="Second").get_json()["document"]
        self.document_store.create_document("Someone else's", user_id="other-user")

        listed = self.client.get("/api/documents").get_json()["documents"]
        deleted = self.client.delete(f"/api/documents/{first['id']}")
        missing = self.client.get(f"/api/documents/{first['id']}")
        again = self.client.delete(f"/api/documents/{first['id']}")

        self.assertEqual([d["id"] for d in listed], [second["id"], first["id"]])
        self.assertEqual(deleted.get_json()["message"], "Document deleted successfully")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(again.status_code, 404)

    def test_storage_failure_is_a_server_error(self) -> None:
        self.document_store.list_documents = Mock(side_effect=RuntimeError("db down"))

        response = self.client.get("/api/documents")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json()["error"], "Failed to fetch documents")


if __name__ == "__main__":
    unittest.main()
