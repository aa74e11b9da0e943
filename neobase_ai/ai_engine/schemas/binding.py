"""
Привязка канонической JSON Schema к формату провайдера.

OpenAI, Claude и Ollama получают JSON Schema строкой. Gemini требует
типизированный объект в подмножестве OpenAPI: имена типов в верхнем
регистре, без additionalProperties.
"""

import json
from typing import Any

from neobase_ai.ai_engine.constants import TYPED_SCHEMA_PROVIDERS, Provider
from neobase_ai.models.prompt_models import SchemaDescriptor

# Ключи JSON Schema, которые Gemini принимает
_GEMINI_KEYS = frozenset({"type", "description", "required", "properties", "items", "enum", "nullable"})


def to_gemini_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Рекурсивно переводит JSON Schema в формат genai.Schema."""
    result: dict[str, Any] = {}
    for key, value in schema.items():
        if key not in _GEMINI_KEYS:
            continue
        if key == "type":
            result["type"] = str(value).upper()
        elif key == "properties":
            result["properties"] = {name: to_gemini_schema(sub) for name, sub in value.items()}
        elif key == "items":
            result["items"] = to_gemini_schema(value)
        else:
            result[key] = list(value) if isinstance(value, (list, tuple)) else value
    return result


def bind_schema(provider: Provider, schema: dict[str, Any]) -> SchemaDescriptor:
    if provider in TYPED_SCHEMA_PROVIDERS:
        return SchemaDescriptor(kind="typed", payload=to_gemini_schema(schema))
    return SchemaDescriptor(
        kind="json-string",
        payload=json.dumps(schema, indent=2, ensure_ascii=False),
    )
