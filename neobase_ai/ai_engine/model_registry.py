"""
Реестр LLM-моделей: фильтрация каталога и выбор модели по умолчанию.

Реестр неизменяем. При старте приложения из базового каталога строится
новый реестр с учётом настроенных ключей провайдеров
(disable_unavailable_providers), и дальше он передаётся через DI
(см. neobase_ai.main / neobase_ai.routers.deps).
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping

from neobase_ai.ai_engine.constants import PROVIDER_PRIORITY, Provider
from neobase_ai.ai_engine.model_catalog import SUPPORTED_LLM_MODELS
from neobase_ai.config import Settings
from neobase_ai.errors import ConfigurationError, ModelNotFoundError, ProviderNotConfiguredError
from neobase_ai.models.llm_models import LLMModel

logger = logging.getLogger(__name__)

# Переменная окружения для каждого провайдера (для подсказок в логах)
_CREDENTIAL_ENV: dict[Provider, str] = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
    Provider.CLAUDE: "CLAUDE_API_KEY",
    Provider.OLLAMA: "OLLAMA_BASE_URL",
}


def validate_catalog(models: Iterable[LLMModel]) -> None:
    """
    Проверяет инварианты каталога.

    Raises:
        ConfigurationError: повторяющийся ID или несколько default на провайдера.
    """
    models = list(models)
    duplicates = [mid for mid, n in Counter(m.id for m in models).items() if n > 1]
    if duplicates:
        raise ConfigurationError(f"Duplicate model ids in catalog: {', '.join(sorted(duplicates))}")

    defaults = Counter(m.provider for m in models if m.is_default)
    overflow = [p.value for p, n in defaults.items() if n > 1]
    if overflow:
        raise ConfigurationError(
            f"More than one default model for provider(s): {', '.join(sorted(overflow))}"
        )


def credentials_from_settings(settings: Settings) -> dict[Provider, bool]:
    """
    Наличие ключа/URL по каждому провайдеру из Settings.

    Значение из одних пробелов считается отсутствующим, как и пустое.
    """
    def _present(value: str | None) -> bool:
        return bool(value and value.strip())

    return {
        Provider.OPENAI: _present(settings.openai_api_key),
        Provider.GEMINI: _present(settings.gemini_api_key),
        Provider.CLAUDE: _present(settings.claude_api_key),
        Provider.OLLAMA: _present(settings.ollama_base_url),
    }


class ModelRegistry:
    """Неизменяемый каталог моделей с операциями выбора."""

    def __init__(
        self,
        models: Iterable[LLMModel] = SUPPORTED_LLM_MODELS,
        *,
        credentials_applied: bool = False,
    ) -> None:
        self._models: tuple[LLMModel, ...] = tuple(models)
        validate_catalog(self._models)
        self._credentials_applied = credentials_applied

    def __len__(self) -> int:
        return len(self._models)

    @property
    def credentials_applied(self) -> bool:
        return self._credentials_applied

    # ─── Старт приложения ─────────────────────────────────────────────

    def disable_unavailable_providers(
        self,
        credentials: Mapping[Provider | str, bool],
    ) -> "ModelRegistry":
        """
        Новый реестр, где модели провайдеров без ключа отключены.

        Применяется один раз при старте; повторный вызов на уже
        отфильтрованном реестре — ConfigurationError.
        """
        if self._credentials_applied:
            raise ConfigurationError("Provider credentials have already been applied to this registry")

        configured = {Provider.parse(p) for p, present in credentials.items() if present}
        models = [
            m if m.provider in configured else m.model_copy(update={"is_enabled": False})
            for m in self._models
        ]
        return ModelRegistry(models, credentials_applied=True)

    # ─── Выборки ──────────────────────────────────────────────────────

    def list_models(
        self,
        provider: Provider | str | None = None,
        enabled_only: bool = False,
    ) -> list[LLMModel]:
        prov = Provider.parse(provider) if provider is not None else None
        return [
            m for m in self._models
            if (prov is None or m.provider == prov) and (not enabled_only or m.is_enabled)
        ]

    def configured_models(self, provider: Provider | str) -> list[LLMModel]:
        """
        Включённые модели провайдера.

        Raises:
            ProviderNotConfiguredError: у провайдера нет ни одной включённой модели.
        """
        prov = Provider.parse(provider)
        models = self.list_models(prov, enabled_only=True)
        if not models:
            raise ProviderNotConfiguredError(prov.value)
        return models

    def get_model(self, model_id: str) -> LLMModel | None:
        for m in self._models:
            if m.id == model_id:
                return m
        return None

    def require_model(self, model_id: str) -> LLMModel:
        model = self.get_model(model_id)
        if model is None:
            raise ModelNotFoundError(model_id)
        return model

    def is_valid_model(self, model_id: str) -> bool:
        """Модель есть в каталоге и включена."""
        model = self.get_model(model_id)
        return model is not None and model.is_enabled

    def get_default_model(self, provider: Provider | str) -> LLMModel | None:
        """
        Модель по умолчанию для провайдера.

        Включённая модель с default=True, иначе первая включённая, иначе None.
        """
        enabled = self.list_models(provider, enabled_only=True)
        for m in enabled:
            if m.is_default:
                return m
        return enabled[0] if enabled else None

    def get_first_available_model(self) -> LLMModel | None:
        """Модель по умолчанию первого доступного провайдера (openai -> gemini -> claude -> ollama)."""
        for provider in PROVIDER_PRIORITY:
            model = self.get_default_model(provider)
            if model is not None:
                return model
        return None

    def available_providers(self) -> list[Provider]:
        return [p for p in PROVIDER_PRIORITY if self.list_models(p, enabled_only=True)]

    # ─── Отчёт ────────────────────────────────────────────────────────

    def log_initialization(self) -> None:
        """Отчёт о доступности моделей по провайдерам (для администратора)."""
        logger.info("=== Инициализация LLM-моделей ===")
        for provider in PROVIDER_PRIORITY:
            total = self.list_models(provider)
            enabled = self.list_models(provider, enabled_only=True)
            if enabled:
                logger.info(
                    "[model_registry] %s: доступно %d/%d моделей, по умолчанию %s",
                    provider.value, len(enabled), len(total), self.get_default_model(provider).id,
                )
                for m in enabled:
                    logger.debug("[model_registry]   %s (%s)", m.display_name, m.id)
            else:
                logger.info(
                    "[model_registry] %s: не настроен (0/%d). Задайте %s",
                    provider.value, len(total), _CREDENTIAL_ENV[provider],
                )

        enabled_total = len(self.list_models(enabled_only=True))
        logger.info("[model_registry] Всего доступно моделей: %d/%d", enabled_total, len(self))
        if enabled_total == 0:
            logger.warning(
                "[model_registry] Нет доступных LLM-моделей. Настройте хотя бы один провайдер: %s",
                ", ".join(_CREDENTIAL_ENV.values()),
            )
