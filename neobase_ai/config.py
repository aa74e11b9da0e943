from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Конфигурация приложения.
    Значения загружаются из переменных окружения или .env.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Ключи провайдеров ───────────────────────────────────────────
    # Провайдер без ключа отключается при старте (ModelRegistry)
    openai_api_key: str | None = None
    gemini_api_key: str | None = None
    claude_api_key: str | None = None
    # Для Ollama вместо ключа задаётся адрес инстанса
    ollama_base_url: str | None = None

    # ── Модель по умолчанию ─────────────────────────────────────────
    # Пусто: первая доступная по приоритету openai -> gemini -> claude -> ollama
    default_llm_model: str = ""

    # ── API ─────────────────────────────────────────────────────────
    # Список через запятую: https://example.com,https://192.168.1.100
    cors_origins: str = "*"
    log_level: str = "INFO"


settings = Settings()
