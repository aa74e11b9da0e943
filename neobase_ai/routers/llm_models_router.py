"""
Роутер каталога LLM-моделей (публичный, без авторизации).

Endpoints:
  GET  /api/v1/llm-models                      — включённые модели
  GET  /api/v1/llm-models/provider/{provider}  — модели провайдера
  GET  /api/v1/llm-models/default/config       — модель по умолчанию
  GET  /api/v1/llm-models/{model_id}           — детали модели
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from neobase_ai.ai_engine.constants import Provider
from neobase_ai.ai_engine.model_registry import ModelRegistry
from neobase_ai.config import Settings
from neobase_ai.errors import ModelNotFoundError, ProviderNotConfiguredError, UnknownProviderError
from neobase_ai.models.llm_models import LLMModel
from neobase_ai.routers.deps import get_model_registry, get_settings

router = APIRouter(prefix="/api/v1/llm-models", tags=["llm-models"])
logger = logging.getLogger(__name__)


def _dump(models: list[LLMModel]) -> list[dict[str, Any]]:
    return [m.model_dump(by_alias=True, mode="json") for m in models]


@router.get("")
async def list_supported_models(
    registry: ModelRegistry = Depends(get_model_registry),
) -> dict:
    """Все включённые модели (провайдеры без ключа уже отключены при старте)."""
    models = registry.list_models(enabled_only=True)
    return {"success": True, "data": {"models": _dump(models), "count": len(models)}}


@router.get("/provider/{provider}")
async def list_models_by_provider(
    provider: str,
    registry: ModelRegistry = Depends(get_model_registry),
) -> dict:
    try:
        prov = Provider.parse(provider)
        models = registry.configured_models(prov)
    except UnknownProviderError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ProviderNotConfiguredError as e:
        raise HTTPException(status_code=403, detail=str(e)) from e

    return {
        "success": True,
        "data": {"provider": prov.value, "models": _dump(models), "count": len(models)},
    }


@router.get("/default/config")
async def get_default_model(
    registry: ModelRegistry = Depends(get_model_registry),
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Модель по умолчанию: из настроек (DEFAULT_LLM_MODEL), если она доступна,
    иначе — первая доступная по приоритету провайдеров.
    """
    model = None
    if settings.default_llm_model:
        model = registry.get_model(settings.default_llm_model)
        if model is None or not model.is_enabled:
            logger.warning(
                "[llm_models] DEFAULT_LLM_MODEL=%s недоступна, выбираем первую доступную",
                settings.default_llm_model,
            )
            model = None
    if model is None:
        model = registry.get_first_available_model()
    if model is None:
        raise HTTPException(status_code=503, detail="No AI provider configured")

    return {
        "success": True,
        "data": {"default_model": model.id, "model_details": model.model_dump(by_alias=True, mode="json")},
    }


@router.get("/{model_id}")
async def get_model_details(
    model_id: str,
    registry: ModelRegistry = Depends(get_model_registry),
) -> dict:
    try:
        model = registry.require_model(model_id)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=404, detail="Model not found") from e

    if not model.is_enabled:
        raise HTTPException(status_code=400, detail="Model is disabled")
    return {"success": True, "data": model.model_dump(by_alias=True, mode="json")}
