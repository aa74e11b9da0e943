"""
Роутер реестра промптов: системный промпт и схема ответа для оркестратора.

Endpoints:
  POST /api/v1/prompts/system                          — промпт + схема по PromptRequest
  GET  /api/v1/prompts/visualization/{database_type}   — промпт визуализации
  GET  /api/v1/prompts/recommendations/{provider}      — промпт + схема рекомендаций
"""

from fastapi import APIRouter, HTTPException

from neobase_ai.ai_engine import prompt_registry
from neobase_ai.errors import UnknownProviderError
from neobase_ai.models.prompt_models import PromptBundle, PromptRequest

router = APIRouter(prefix="/api/v1/prompts", tags=["prompts"])


@router.post("/system", response_model=PromptBundle)
async def get_system_prompt(body: PromptRequest) -> PromptBundle:
    return prompt_registry.build_prompt_bundle(body)


@router.get("/visualization/{database_type}")
async def get_visualization_prompt(database_type: str) -> dict:
    """Неизвестный тип БД — промпт PostgreSQL."""
    return {"prompt": prompt_registry.resolve_visualization_prompt(database_type)}


@router.get("/recommendations/{provider}")
async def get_recommendations_prompt(provider: str) -> dict:
    try:
        prompt = prompt_registry.resolve_recommendations_prompt(provider)
        schema = prompt_registry.resolve_recommendations_schema(provider)
    except UnknownProviderError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"prompt": prompt, "response_schema": schema.model_dump()}
