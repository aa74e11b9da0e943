# Pydantic-модели: каталог LLM, запросы/ответы реестра промптов, ответ LLM

from neobase_ai.models.llm_models import LLMModel
from neobase_ai.models.prompt_models import (
    PromptBundle,
    PromptRequest,
    SchemaDescriptor,
)
from neobase_ai.models.response_models import (
    ActionButton,
    GeneratedQuery,
    LLMResponse,
    Pagination,
    Recommendation,
    RecommendationsResponse,
    parse_llm_response,
    parse_recommendations,
)

__all__ = [
    "LLMModel",
    "PromptBundle",
    "PromptRequest",
    "SchemaDescriptor",
    "ActionButton",
    "GeneratedQuery",
    "LLMResponse",
    "Pagination",
    "Recommendation",
    "RecommendationsResponse",
    "parse_llm_response",
    "parse_recommendations",
]
