"""Prompt endpoints module.

This module provides Flask routes for single-shot generation:
1. Prompt enhancement ("super prompts")
2. Travel itinerary generation
3. The model catalogue with per-model availability
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, Field, field_validator

from backend.src.api.middleware.auth import require_auth
from backend.src.api.middleware.exceptions import ModelUnavailableError, ServiceError
from backend.src.data_classes import AIModel, resolve_model
from backend.src.services.chat import ItineraryGenerationError, PromptService
from backend.src.services.llm import (
    ModelConfigurationError,
    ModelDispatcher,
    ModelResponseError,
)

logger = logging.getLogger(__name__)


# Schema definitions
class SuperPromptRequest(BaseModel):
    """Prompt enhancement request model for validation."""

    prompt: str = Field(..., description="Prompt to enhance")
    model: Optional[AIModel] = Field(None, description="Model to use")

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        if not v:
            raise ValueError("Please provide a prompt to enhance")
        return v


class ItineraryRequest(BaseModel):
    """Itinerary request model for validation."""

    description: str = Field(..., description="Free-text description of the trip")
    model: Optional[AIModel] = Field(None, description="Model to use")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v:
            raise ValueError("Please describe your trip")
        return v


class ModelInfo(BaseModel):
    """Catalogue entry for one model."""

    id: AIModel
    name: str
    provider: str
    available: bool


def init_prompt_routes(
    prompt_service: PromptService, dispatcher: ModelDispatcher
) -> Blueprint:
    """Initialize prompt routes with the provided services.

    Args:
        prompt_service: Service for single-shot generation tasks
        dispatcher: Dispatcher queried for model availability

    Returns:
        Blueprint: Flask blueprint with configured prompt routes.
    """
    prompts_bp = Blueprint("prompts", __name__)

    @prompts_bp.route("/craft-super-prompt", methods=["POST"])
    @require_auth
    @validate()
    def craft_super_prompt(body: SuperPromptRequest) -> Tuple[Response, int]:
        """Rewrite the prompt into a structured super prompt.

        Args:
            body: Validated request body

        Returns:
            Response with the enhanced prompt
        """
        try:
            enhanced_prompt = prompt_service.craft_super_prompt(body.prompt, body.model)
        except ModelConfigurationError as e:
            raise ModelUnavailableError(message=str(e))
        except ModelResponseError as e:
            raise ServiceError(message=str(e))
        except Exception as e:
            logger.error(f"Failed to craft super prompt: {str(e)}")
            raise ServiceError(message="Failed to craft super prompt", details=str(e))

        return jsonify({"success": True, "enhancedPrompt": enhanced_prompt}), 200

    @prompts_bp.route("/itinerary", methods=["POST"])
    @require_auth
    @validate()
    def generate_itinerary(body: ItineraryRequest) -> Tuple[Response, int]:
        """Generate a day-by-day travel itinerary.

        Args:
            body: Validated request body

        Returns:
            Response with the structured itinerary
        """
        try:
            itinerary = prompt_service.generate_itinerary(body.description, body.model)
        except ModelConfigurationError as e:
            raise ModelUnavailableError(message=str(e))
        except (ModelResponseError, ItineraryGenerationError) as e:
            raise ServiceError(message=str(e))
        except Exception as e:
            logger.error(f"Failed to generate itinerary: {str(e)}")
            raise ServiceError(message="Failed to generate itinerary", details=str(e))

        return jsonify({"success": True, "itinerary": itinerary.to_json()}), 200

    @prompts_bp.route("/models", methods=["GET"])
    def list_models() -> Tuple[Response, int]:
        """List every supported model and whether it can currently be used."""
        models: List[Dict[str, Any]] = []
        for model in AIModel:
            route = resolve_model(model)
            info = ModelInfo(
                id=model,
                name=route.display_name,
                provider=route.provider.display_name,
                available=dispatcher.is_available(model),
            )
            models.append(info.model_dump(mode="json"))

        return jsonify({"success": True, "models": models}), 200

    return prompts_bp
