"""Error handling middleware for API requests.

This module converts every error raised while handling a request into the
JSON failure envelope ``{"success": false, "error": ...}``.
"""

import logging
import traceback
from typing import Any, Dict, Iterable, List, Tuple

from flask import Flask, Response, current_app
from flask_pydantic.exceptions import JsonBodyParsingError
from flask_pydantic.exceptions import ValidationError as FlaskPydanticValidationError
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from backend.src.api.middleware.exceptions import APIError, ValidationError, error_response

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Turn pydantic error dictionaries into a readable message.

    Args:
        errors: Error dictionaries as produced by ``ValidationError.errors()``

    Returns:
        One ``field: message`` line per error
    """
    lines: List[str] = []
    for error in errors:
        message = str(error.get("msg", "Invalid value"))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        location = ".".join(str(part) for part in error.get("loc", ()))
        lines.append(f"{location}: {message}" if location else message)
    return "\n".join(lines) or "Invalid request data"


def register_error_handlers(app: Flask) -> None:
    """Register error handlers with the Flask application.

    Args:
        app: Flask application
    """

    @app.errorhandler(FlaskPydanticValidationError)
    def handle_request_validation_error(error: FlaskPydanticValidationError) -> Tuple[Response, int]:  # type: ignore
        """Handle request validation errors raised by flask-pydantic.

        Args:
            error: Validation error with per-source error lists

        Returns:
            JSON response with error details
        """
        errors: List[Dict[str, Any]] = []
        for source in ("body_params", "query_params", "path_params", "form_params"):
            errors.extend(getattr(error, source, None) or [])

        message = format_validation_errors(errors)
        logger.warning(f"Validation error: {message}")
        return error_response(message, 400)

    @app.errorhandler(JsonBodyParsingError)
    def handle_json_body_error(error: JsonBodyParsingError) -> Tuple[Response, int]:  # type: ignore
        """Handle request bodies that are valid JSON but not a JSON object.

        Args:
            error: Parsing error raised by flask-pydantic

        Returns:
            JSON response with error details
        """
        logger.warning("Request body is not a JSON object")
        return ValidationError(message="Request body must be a JSON object").to_response()

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_validation_error(error: PydanticValidationError) -> Tuple[Response, int]:  # type: ignore
        """Handle Pydantic validation errors.

        Args:
            error: Validation error from Pydantic

        Returns:
            JSON response with error details
        """
        message = format_validation_errors(error.errors())
        logger.warning(f"Validation error: {message}")
        return error_response(message, 400)

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError) -> Tuple[Response, int]:  # type: ignore
        """Handle custom API errors.

        Args:
            error: Custom API error

        Returns:
            JSON response with error details
        """
        log = logger.error if error.status_code >= 500 else logger.warning
        log(f"API error ({error.__class__.__name__}): {error.message}")
        if error.details:
            log(f"Error details: {error.details}")

        return error.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> Tuple[Response, int]:  # type: ignore
        """Handle routing and protocol errors raised by werkzeug.

        Args:
            error: HTTP exception such as 404 for an unknown route

        Returns:
            JSON response keeping the exception's status code
        """
        status_code = error.code or 500
        logger.warning(f"HTTP error {status_code}: {error.description}")
        return error_response(error.description or error.name, status_code)

    @app.errorhandler(Exception)
    def handle_exception(error: Exception) -> Tuple[Response, int]:  # type: ignore
        """Handle uncaught exceptions.

        Args:
            error: Exception that was raised

        Returns:
            JSON response with error message
        """
        logger.error(f"Unhandled exception: {str(error)}")
        logger.error(traceback.format_exc())

        # Only include detailed error info in debug mode
        details = str(error) if current_app.debug else None
        return error_response("Internal server error", 500, details)
