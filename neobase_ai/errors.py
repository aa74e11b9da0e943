"""
Исключения реестра промптов и моделей.

Неизвестный тип базы данных ошибкой не считается (fallback на PostgreSQL),
а отсутствие настроенного провайдера возвращается как None, а не исключением.
"""


class NeoBaseAIError(Exception):
    """Базовое исключение пакета."""


class ConfigurationError(NeoBaseAIError):
    """Некорректная конфигурация провайдеров или каталога моделей."""


class UnknownProviderError(ConfigurationError, ValueError):
    """Неизвестный LLM-провайдер. Молча подставлять другой нельзя: схемы ответа различаются."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(
            f"Unknown LLM provider '{provider}'. "
            "Allowed values: 'openai', 'gemini', 'claude', 'ollama'."
        )


class ProviderNotConfiguredError(ConfigurationError):
    """Для провайдера не задан API-ключ (или base URL для Ollama)."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Provider not configured. No API key found for {provider}")


class ModelNotFoundError(NeoBaseAIError, LookupError):
    """Модель с таким ID отсутствует в каталоге."""

    def __init__(self, model_id: str) -> None:
        self.model_id = model_id
        super().__init__(f"Model not found: {model_id}")


class InvalidLLMResponseError(NeoBaseAIError, ValueError):
    """Ответ LLM не удалось разобрать в ожидаемую JSON-структуру."""
