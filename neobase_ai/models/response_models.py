"""
Pydantic-модели структурированного ответа LLM (зеркало схем из
neobase_ai.ai_engine.schemas) и разбор сырого текста ответа.
"""

import json
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from neobase_ai.errors import InvalidLLMResponseError


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Pagination(_CamelModel):
    paginated_query: str = ""
    count_query: str = ""


class ActionButton(_CamelModel):
    label: str
    action: str
    is_primary: bool = False


class GeneratedQuery(_CamelModel):
    """Один запрос из ответа LLM."""

    query: str = Field(..., min_length=1)
    query_type: str
    explanation: str = ""
    is_critical: bool = False
    can_rollback: bool = False
    estimate_response_time: float = 0.0
    tables: str | None = None                # SQL-диалекты
    collections: str | None = None           # MongoDB
    pagination: Pagination | None = None
    rollback_query: str = ""
    rollback_dependent_query: str = ""
    example_result_string: str = ""
    validation_schema: str | None = None
    index_options: str | None = None

    @field_validator("estimate_response_time", mode="before")
    @classmethod
    def parse_response_time(cls, value: Any) -> Any:
        # Модели иногда возвращают "78" или "78ms"
        if isinstance(value, str):
            match = re.search(r"\d+(?:\.\d+)?", value)
            return float(match.group(0)) if match else 0.0
        return value

    def example_result(self) -> Any:
        """exampleResultString, разобранный как JSON (None, если невалиден)."""
        if not self.example_result_string:
            return None
        try:
            return json.loads(self.example_result_string)
        except json.JSONDecodeError:
            return None


class LLMResponse(_CamelModel):
    assistant_message: str
    action_buttons: list[ActionButton] = Field(default_factory=list)
    queries: list[GeneratedQuery] = Field(default_factory=list)


class Recommendation(_CamelModel):
    text: str = Field(..., min_length=1)


class RecommendationsResponse(_CamelModel):
    recommendations: list[Recommendation] = Field(default_factory=list)


def _safe_json_loads(text: str) -> dict[str, Any]:
    """
    Парсит JSON, даже если модель обернула его в markdown или добавила текст вокруг.
    """
    if not text or not text.strip():
        raise InvalidLLMResponseError("Empty LLM response")

    candidates = [text.strip()]
    fenced = re.search(r"```(?:json)?\s*(.*?)```", text, re.DOTALL)
    if fenced:
        candidates.append(fenced.group(1).strip())
    braces = re.search(r"\{.*\}", text, re.DOTALL)
    if braces:
        candidates.append(braces.group(0))

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    raise InvalidLLMResponseError("Invalid JSON returned by model")


def parse_llm_response(text: str) -> LLMResponse:
    """Разбирает ответ LLM на запрос пользователя."""
    data = _safe_json_loads(text)
    try:
        return LLMResponse.model_validate(data)
    except ValidationError as e:
        raise InvalidLLMResponseError(f"LLM response does not match schema: {e}") from e


def parse_recommendations(text: str) -> RecommendationsResponse:
    data = _safe_json_loads(text)
    try:
        return RecommendationsResponse.model_validate(data)
    except ValidationError as e:
        raise InvalidLLMResponseError(f"Recommendations do not match schema: {e}") from e
