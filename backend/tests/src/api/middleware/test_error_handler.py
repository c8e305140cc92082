"""Unit tests for error formatting and the failure envelope."""

import unittest

from flask import Flask

from backend.src.api.middleware.error_handler import (
    format_validation_errors,
    register_error_handlers,
)
from backend.src.api.middleware.exceptions import NotFoundError, ServiceError


class TestFormatValidationErrors(unittest.TestCase):
    """Test cases for turning pydantic errors into messages."""

    def test_field_errors(self) -> None:
        message = format_validation_errors(
            [
                {"loc": ("message",), "msg": "Field required"},
                {"loc": ("title",), "msg": "Value error, Please provide a document title"},
            ]
        )

        self.assertEqual(
            message, "message: Field required\ntitle: Please provide a document title"
        )

    def test_model_level_error(self) -> None:
        """Errors without a location are shown bare."""
        message = format_validation_errors(
            [{"loc": (), "msg": "Value error, Please provide a title or content to update"}]
        )

        self.assertEqual(message, "Please provide a title or content to update")

    def test_no_errors(self) -> None:
        self.assertEqual(format_validation_errors([]), "Invalid request data")


class TestErrorHandlers(unittest.TestCase):
    """Test cases for the registered Flask error handlers."""

    def setUp(self) -> None:
        """Set up a bare app with routes that raise."""
        self.app = Flask(__name__)
        register_error_handlers(self.app)

        @self.app.route("/missing")
        def missing():
            raise NotFoundError(message="Document not found")

        @self.app.route("/service")
        def service():
            raise ServiceError(message="Failed to update document", details="db down")

        @self.app.route("/crash")
        def crash():
            raise KeyError("boom")

        self.client = self.app.test_client()

    def test_api_error_envelope(self) -> None:
        response = self.client.get("/missing")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.get_json(),
            {"success": False, "error": "Document not found", "status_code": 404},
        )

    def test_details_are_included(self) -> None:
        response = self.client.get("/service")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json()["details"], "db down")

    def test_unhandled_exception_hides_details(self) -> None:
        """Outside debug mode the exception text is not exposed."""
        response = self.client.get("/crash")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.get_json(),
            {"success": False, "error": "Internal server error", "status_code": 500},
        )


if __name__ == "__main__":
    unittest.main()
