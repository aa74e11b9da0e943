"""
Зависимости FastAPI: реестр моделей и настройки, построенные при старте.
"""

from fastapi import Request

from neobase_ai.ai_engine.model_registry import ModelRegistry
from neobase_ai.config import Settings


def get_model_registry(request: Request) -> ModelRegistry:
    """Реестр с учётом настроенных провайдеров (создаётся в lifespan)."""
    return request.app.state.model_registry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
