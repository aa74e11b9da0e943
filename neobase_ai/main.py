import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from neobase_ai import __version__
from neobase_ai.ai_engine.model_registry import ModelRegistry, credentials_from_settings
from neobase_ai.config import Settings, settings as default_settings
from neobase_ai.routers import llm_models_router, prompts_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def resolve_log_level(name: str | None) -> int:
    """Имя уровня из LOG_LEVEL -> числовой уровень; неизвестное имя -> INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    if not isinstance(level, int):
        logger.warning("[main] Неизвестный LOG_LEVEL '%s', используем INFO", name)
        return logging.INFO
    return level


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Сборка приложения. settings передаётся явно в тестах,
    по умолчанию — значения из окружения.
    """
    settings = settings or default_settings
    logging.getLogger("neobase_ai").setLevel(resolve_log_level(settings.log_level))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Реестр моделей строится один раз до приёма запросов:
        провайдеры без ключа отключаются, дальше реестр только читается.
        """
        logger.info("=== NeoBase AI Registry — Запуск ===")
        registry = ModelRegistry().disable_unavailable_providers(
            credentials_from_settings(settings)
        )
        registry.log_initialization()
        app.state.settings = settings
        app.state.model_registry = registry
        logger.info("=== Реестр готов. API принимает запросы. ===")

        yield

        logger.info("=== NeoBase AI Registry — Остановлен ===")

    app = FastAPI(
        title="NeoBase AI Registry",
        description=(
            "Системные промпты, схемы структурированного ответа и каталог "
            "LLM-моделей для генерации запросов к PostgreSQL, MySQL, YugabyteDB, "
            "ClickHouse, MongoDB и spreadsheet-данным."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    cors_origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["system"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(llm_models_router.router)
    app.include_router(prompts_router.router)
    return app


app = create_app()
