"""Health check endpoint."""

from typing import Any, Dict, Tuple

from flask import Blueprint, Response, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health() -> Tuple[Response, int]:
    """Report that the API is up. No authentication required."""
    payload: Dict[str, Any] = {"success": True, "message": "API is working"}
    return jsonify(payload), 200
