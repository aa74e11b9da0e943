import json
import logging

from fastapi.testclient import TestClient

from neobase_ai.ai_engine import prompt_registry
from neobase_ai.main import create_app, resolve_log_level
from tests.conftest import make_settings


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_supported_models_only_configured_providers(client):
    response = client.get("/api/v1/llm-models")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["count"] == len(data["models"]) > 0
    assert {m["provider"] for m in data["models"]} == {"openai", "ollama"}
    assert all(m["isEnabled"] for m in data["models"])


def test_models_by_provider(client):
    response = client.get("/api/v1/llm-models/provider/openai")
    assert response.status_code == 200
    assert response.json()["data"]["provider"] == "openai"


def test_models_by_unconfigured_provider(client):
    assert client.get("/api/v1/llm-models/provider/gemini").status_code == 403


def test_models_by_unknown_provider(client):
    assert client.get("/api/v1/llm-models/provider/mistral").status_code == 400


def test_model_details(client):
    response = client.get("/api/v1/llm-models/gpt-4o")
    assert response.status_code == 200
    assert response.json()["data"]["displayName"]

    assert client.get("/api/v1/llm-models/claude-sonnet-4").status_code == 400
    assert client.get("/api/v1/llm-models/no-such-model").status_code == 404


def test_default_model_is_first_available(client):
    response = client.get("/api/v1/llm-models/default/config")
    assert response.status_code == 200
    assert response.json()["data"]["default_model"] == "gpt-4o"


def test_default_model_from_settings():
    app = create_app(make_settings(ollama_base_url="http://ollama:11434", default_llm_model="qwen3:latest"))
    with TestClient(app) as client:
        data = client.get("/api/v1/llm-models/default/config").json()["data"]
    assert data["default_model"] == "qwen3:latest"


def test_default_model_from_settings_ignored_when_disabled():
    app = create_app(make_settings(ollama_base_url="http://ollama:11434", default_llm_model="gpt-4o"))
    with TestClient(app) as client:
        data = client.get("/api/v1/llm-models/default/config").json()["data"]
    assert data["default_model"] == "deepseek-r1:latest"


def test_no_provider_configured(unconfigured_client):
    assert unconfigured_client.get("/api/v1/llm-models").json()["data"]["count"] == 0
    assert unconfigured_client.get("/api/v1/llm-models/default/config").status_code == 503


def test_system_prompt_bundle(client):
    response = client.post(
        "/api/v1/prompts/system",
        json={"provider": "claude", "database_type": "mongodb", "non_tech_mode": False},
    )
    assert response.status_code == 200

    body = response.json()
    assert body["system_prompt"] == prompt_registry.resolve_system_prompt("claude", "mongodb")
    assert body["response_schema"]["kind"] == "json-string"
    assert "assistantMessage" in json.loads(body["response_schema"]["payload"])["required"]


def test_system_prompt_gemini_typed_schema(client):
    response = client.post("/api/v1/prompts/system", json={"provider": "gemini", "database_type": "mysql"})
    schema = response.json()["response_schema"]
    assert schema["kind"] == "typed"
    assert schema["payload"]["type"] == "OBJECT"


def test_system_prompt_unknown_provider_rejected(client):
    response = client.post("/api/v1/prompts/system", json={"provider": "mistral"})
    assert response.status_code == 422


def test_visualization_prompt(client):
    response = client.get("/api/v1/prompts/visualization/clickhouse")
    assert response.json()["prompt"] == prompt_registry.resolve_visualization_prompt("clickhouse")


def test_recommendations_prompt(client):
    response = client.get("/api/v1/prompts/recommendations/ollama")
    assert response.status_code == 200
    assert response.json()["response_schema"]["kind"] == "json-string"

    assert client.get("/api/v1/prompts/recommendations/mistral").status_code == 400


def test_system_prompt_accepts_mixed_case_provider(client):
    response = client.post("/api/v1/prompts/system", json={"provider": "Gemini", "database_type": "mongodb"})
    assert response.status_code == 200
    assert response.json()["provider"] == "gemini"
    assert response.json()["response_schema"]["kind"] == "typed"


def test_misspelled_log_level_falls_back_to_info():
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("verbose") == logging.INFO
    assert resolve_log_level(None) == logging.INFO

    create_app(make_settings(log_level="verbose"))
    assert logging.getLogger("neobase_ai").level == logging.INFO
