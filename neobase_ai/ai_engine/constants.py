"""
Перечисления провайдеров и типов баз данных.
"""

import logging
from enum import Enum

from neobase_ai.errors import UnknownProviderError

logger = logging.getLogger(__name__)


class Provider(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"
    CLAUDE = "claude"
    OLLAMA = "ollama"

    @classmethod
    def parse(cls, value: "str | Provider") -> "Provider":
        """Строка -> Provider. Неизвестное значение — UnknownProviderError."""
        if isinstance(value, Provider):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise UnknownProviderError(str(value)) from None


class DatabaseType(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    YUGABYTEDB = "yugabytedb"
    CLICKHOUSE = "clickhouse"
    MONGODB = "mongodb"
    SPREADSHEET = "spreadsheet"

    @classmethod
    def parse(cls, value: "str | DatabaseType | None") -> "DatabaseType":
        """Строка -> DatabaseType. Неизвестный тип не ошибка: fallback на PostgreSQL."""
        if isinstance(value, DatabaseType):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            logger.warning(
                "[constants] Неизвестный тип БД '%s', используем postgresql", value
            )
            return cls.POSTGRESQL

    @property
    def is_sql(self) -> bool:
        return self is not DatabaseType.MONGODB


# Порядок выбора провайдера, когда модель явно не задана
PROVIDER_PRIORITY: tuple[Provider, ...] = (
    Provider.OPENAI,
    Provider.GEMINI,
    Provider.CLAUDE,
    Provider.OLLAMA,
)

# Провайдеры, которым схема ответа передаётся типизированным объектом,
# остальные принимают JSON Schema строкой
TYPED_SCHEMA_PROVIDERS = frozenset({Provider.GEMINI})
