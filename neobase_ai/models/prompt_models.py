"""
Pydantic-модели реестра промптов: запрос вызывающего сервиса,
дескриптор схемы ответа и итоговый набор (промпт + схема).
"""

import copy
import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neobase_ai.ai_engine.constants import DatabaseType, Provider


class SchemaDescriptor(BaseModel):
    """
    Схема ответа в формате, который принимает провайдер.

    kind="typed"       — payload: dict (типизированный объект, Gemini)
    kind="json-string" — payload: JSON Schema строкой (OpenAI, Claude, Ollama)
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["typed", "json-string"]
    payload: dict[str, Any] | str

    def as_dict(self) -> dict[str, Any]:
        """Схема как dict независимо от вида (json-string разбирается)."""
        if isinstance(self.payload, str):
            return json.loads(self.payload)
        return copy.deepcopy(self.payload)

    def required_fields(self) -> list[str]:
        return list(self.as_dict().get("required") or [])

    def query_required_fields(self) -> list[str]:
        """Обязательные поля элемента queries[] (пусто для схем без queries)."""
        queries = (self.as_dict().get("properties") or {}).get("queries") or {}
        return list((queries.get("items") or {}).get("required") or [])


class PromptRequest(BaseModel):
    """
    Запрос от сервиса оркестрации LLM.

    user_question и schema_context реестр не использует — их подставляет
    вызывающий код в итоговый запрос к провайдеру.
    """

    provider: Provider
    database_type: DatabaseType = Field(default=DatabaseType.POSTGRESQL)
    non_tech_mode: bool = False
    user_question: str = ""
    schema_context: str = ""

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, value: object) -> object:
        # Тот же разбор, что и у resolve_*: регистр и пробелы не важны.
        # UnknownProviderError наследует ValueError, pydantic вернёт ошибку валидации
        if isinstance(value, str):
            return Provider.parse(value)
        return value

    @field_validator("database_type", mode="before")
    @classmethod
    def fallback_database_type(cls, value: object) -> DatabaseType:
        # Неизвестный тип БД не считается ошибкой запроса
        return DatabaseType.parse(value if isinstance(value, (str, DatabaseType)) else None)


class PromptBundle(BaseModel):
    """Системный промпт и схема ответа для исходящего запроса к LLM."""

    provider: Provider
    database_type: DatabaseType
    system_prompt: str
    response_schema: SchemaDescriptor
