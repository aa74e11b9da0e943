import pytest
from fastapi.testclient import TestClient

from neobase_ai.ai_engine.model_registry import ModelRegistry
from neobase_ai.config import Settings
from neobase_ai.main import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "openai_api_key": None,
        "gemini_api_key": None,
        "claude_api_key": None,
        "ollama_base_url": None,
        "default_llm_model": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def base_registry() -> ModelRegistry:
    return ModelRegistry()


@pytest.fixture
def client():
    app = create_app(make_settings(openai_api_key="sk-test", ollama_base_url="http://ollama:11434"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client():
    app = create_app(make_settings())
    with TestClient(app) as test_client:
        yield test_client
