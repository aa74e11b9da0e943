"""
Схемы структурированного ответа LLM: каноническая JSON Schema и её
представление для конкретного провайдера.
"""

from neobase_ai.ai_engine.schemas.binding import bind_schema, to_gemini_schema
from neobase_ai.ai_engine.schemas.response_schema import (
    QUERY_REQUIRED_FIELDS,
    build_recommendations_schema,
    build_response_schema,
)

__all__ = [
    "QUERY_REQUIRED_FIELDS",
    "bind_schema",
    "build_recommendations_schema",
    "build_response_schema",
    "to_gemini_schema",
]
