"""
Реестр промптов и схем ответа: выбор по паре (провайдер, тип БД).

Системный промпт зависит только от диалекта БД; провайдер влияет лишь на
формат схемы ответа. Неизвестный тип БД -> PostgreSQL, неизвестный
провайдер -> UnknownProviderError (схемы провайдеров несовместимы,
и неверная схема сломает разбор ответа платного API).
"""

import logging

from neobase_ai.ai_engine.constants import DatabaseType, Provider
from neobase_ai.ai_engine.prompts import (
    clickhouse,
    mongodb,
    mysql,
    non_tech,
    postgresql,
    recommendations,
    spreadsheet,
    yugabytedb,
)
from neobase_ai.ai_engine.schemas import (
    bind_schema,
    build_recommendations_schema,
    build_response_schema,
)
from neobase_ai.models.prompt_models import PromptBundle, PromptRequest, SchemaDescriptor

logger = logging.getLogger(__name__)

# ─── Таблицы промптов ──────────────────────────────────────────────────

_SYSTEM_PROMPTS: dict[DatabaseType, str] = {
    DatabaseType.POSTGRESQL: postgresql.SYSTEM_PROMPT,
    DatabaseType.MYSQL: mysql.SYSTEM_PROMPT,
    DatabaseType.YUGABYTEDB: yugabytedb.SYSTEM_PROMPT,
    DatabaseType.CLICKHOUSE: clickhouse.SYSTEM_PROMPT,
    DatabaseType.MONGODB: mongodb.SYSTEM_PROMPT,
    # Spreadsheet-данные хранятся в PostgreSQL
    DatabaseType.SPREADSHEET: postgresql.SYSTEM_PROMPT + spreadsheet.SPREADSHEET_CONTEXT,
}

_NON_TECH_INSTRUCTIONS: dict[DatabaseType, str] = {
    DatabaseType.POSTGRESQL: postgresql.NON_TECH_INSTRUCTIONS,
    DatabaseType.MYSQL: mysql.NON_TECH_INSTRUCTIONS,
    DatabaseType.YUGABYTEDB: yugabytedb.NON_TECH_INSTRUCTIONS,
    DatabaseType.CLICKHOUSE: clickhouse.NON_TECH_INSTRUCTIONS,
    DatabaseType.MONGODB: mongodb.NON_TECH_INSTRUCTIONS,
    DatabaseType.SPREADSHEET: postgresql.NON_TECH_INSTRUCTIONS,
}

_VISUALIZATION_PROMPTS: dict[DatabaseType, str] = {
    DatabaseType.POSTGRESQL: postgresql.VISUALIZATION_PROMPT,
    DatabaseType.MYSQL: mysql.VISUALIZATION_PROMPT,
    DatabaseType.YUGABYTEDB: yugabytedb.VISUALIZATION_PROMPT,
    DatabaseType.CLICKHOUSE: clickhouse.VISUALIZATION_PROMPT,
    DatabaseType.MONGODB: mongodb.VISUALIZATION_PROMPT,
    DatabaseType.SPREADSHEET: postgresql.VISUALIZATION_PROMPT,
}

_RECOMMENDATIONS_PROMPTS: dict[Provider, str] = {
    Provider.OPENAI: recommendations.RECOMMENDATIONS_PROMPT,
    Provider.GEMINI: recommendations.RECOMMENDATIONS_PROMPT,
    Provider.CLAUDE: recommendations.RECOMMENDATIONS_PROMPT,
    Provider.OLLAMA: recommendations.RECOMMENDATIONS_PROMPT,
}

# Схемы неизменяемы после сборки, поэтому собираются один раз при импорте
_RESPONSE_SCHEMAS: dict[tuple[Provider, DatabaseType], SchemaDescriptor] = {
    (provider, db_type): bind_schema(provider, build_response_schema(db_type))
    for provider in Provider
    for db_type in DatabaseType
}

_RECOMMENDATIONS_SCHEMAS: dict[Provider, SchemaDescriptor] = {
    provider: bind_schema(provider, build_recommendations_schema())
    for provider in Provider
}


def non_tech_instructions(database_type: DatabaseType | str) -> str:
    """Преамбула нетехнического режима + дополнение диалекта."""
    db_type = DatabaseType.parse(database_type)
    return non_tech.NON_TECH_PREAMBLE + _NON_TECH_INSTRUCTIONS[db_type]


# ─── Публичный API ─────────────────────────────────────────────────────

def resolve_system_prompt(
    provider: Provider | str,
    database_type: DatabaseType | str,
    non_tech_mode: bool = False,
) -> str:
    """
    Системный промпт для провайдера и типа БД.

    При non_tech_mode инструкции нетехнического режима ставятся в начало
    (отделены пустой строкой), чтобы иметь приоритет над остальным текстом.

    Raises:
        UnknownProviderError: провайдер не из Provider.
    """
    prov = Provider.parse(provider)
    db_type = DatabaseType.parse(database_type)
    logger.debug(
        "[prompt_registry] system prompt: provider=%s db_type=%s non_tech=%s",
        prov.value, db_type.value, non_tech_mode,
    )

    prompt = _SYSTEM_PROMPTS[db_type]
    if non_tech_mode:
        prompt = non_tech_instructions(db_type) + "\n\n" + prompt

    logger.debug("[prompt_registry] итоговая длина промпта: %d символов", len(prompt))
    return prompt


def resolve_response_schema(
    provider: Provider | str,
    database_type: DatabaseType | str,
) -> SchemaDescriptor:
    """Схема JSON-ответа LLM в формате провайдера."""
    prov = Provider.parse(provider)
    db_type = DatabaseType.parse(database_type)
    # Кэш общий для всех запросов, payload Gemini отдаётся копией
    return _RESPONSE_SCHEMAS[(prov, db_type)].model_copy(deep=True)


def resolve_visualization_prompt(database_type: DatabaseType | str) -> str:
    """Промпт анализа результатов для построения графика."""
    return _VISUALIZATION_PROMPTS[DatabaseType.parse(database_type)]


def resolve_recommendations_prompt(provider: Provider | str) -> str:
    return _RECOMMENDATIONS_PROMPTS[Provider.parse(provider)]


def resolve_recommendations_schema(provider: Provider | str) -> SchemaDescriptor:
    return _RECOMMENDATIONS_SCHEMAS[Provider.parse(provider)].model_copy(deep=True)


def build_prompt_bundle(request: PromptRequest) -> PromptBundle:
    """Системный промпт + схема ответа для запроса оркестратора."""
    return PromptBundle(
        provider=request.provider,
        database_type=request.database_type,
        system_prompt=resolve_system_prompt(
            request.provider, request.database_type, request.non_tech_mode
        ),
        response_schema=resolve_response_schema(request.provider, request.database_type),
    )
