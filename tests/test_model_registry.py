from collections import Counter

import pytest

from neobase_ai.ai_engine.constants import Provider
from neobase_ai.ai_engine.model_catalog import SUPPORTED_LLM_MODELS
from neobase_ai.ai_engine.model_registry import (
    ModelRegistry,
    credentials_from_settings,
    validate_catalog,
)
from neobase_ai.errors import (
    ConfigurationError,
    ModelNotFoundError,
    ProviderNotConfiguredError,
    UnknownProviderError,
)
from neobase_ai.models.llm_models import LLMModel
from tests.conftest import make_settings


def _model(model_id, provider=Provider.OPENAI, **kwargs):
    return LLMModel(id=model_id, provider=provider, display_name=model_id, **kwargs)


def test_catalog_has_at_most_one_default_per_provider():
    defaults = Counter(m.provider for m in SUPPORTED_LLM_MODELS if m.default)
    assert all(n <= 1 for n in defaults.values())
    assert set(defaults) == set(Provider)


def test_catalog_ids_are_unique():
    ids = [m.id for m in SUPPORTED_LLM_MODELS]
    assert len(ids) == len(set(ids))


def test_validate_catalog_rejects_two_defaults():
    with pytest.raises(ConfigurationError):
        validate_catalog([_model("a", default=True), _model("b", default=True)])


def test_validate_catalog_rejects_duplicate_ids():
    with pytest.raises(ConfigurationError):
        ModelRegistry([_model("a"), _model("a")])


def test_no_credentials_disables_everything(base_registry):
    registry = base_registry.disable_unavailable_providers({})

    assert registry.list_models(enabled_only=True) == []
    assert registry.get_first_available_model() is None
    for provider in Provider:
        assert registry.get_default_model(provider) is None


def test_only_openai_remains_enabled(base_registry):
    registry = base_registry.disable_unavailable_providers({Provider.OPENAI: True})

    enabled = registry.list_models(enabled_only=True)
    assert enabled
    assert {m.provider for m in enabled} == {Provider.OPENAI}
    assert len(registry) == len(SUPPORTED_LLM_MODELS)


def test_string_keys_and_false_values(base_registry):
    registry = base_registry.disable_unavailable_providers({"gemini": True, "claude": False})
    assert registry.available_providers() == [Provider.GEMINI]


def test_unknown_credential_key_is_rejected(base_registry):
    with pytest.raises(UnknownProviderError):
        base_registry.disable_unavailable_providers({"mistral": True})


def test_disable_returns_new_registry(base_registry):
    base_registry.disable_unavailable_providers({})
    assert base_registry.list_models(enabled_only=True) == list(SUPPORTED_LLM_MODELS)
    assert not base_registry.credentials_applied


def test_disable_can_only_be_applied_once(base_registry):
    registry = base_registry.disable_unavailable_providers({Provider.OPENAI: True})
    with pytest.raises(ConfigurationError):
        registry.disable_unavailable_providers({Provider.OPENAI: True})


def test_default_model_for_openai(base_registry):
    model = base_registry.get_default_model("openai")
    assert model is not None
    assert model.id == "gpt-4o"
    assert model.default is True


def test_default_falls_back_to_first_enabled():
    registry = ModelRegistry([
        _model("first"),
        _model("flagged", default=True, is_enabled=False),
        _model("second"),
    ])
    assert registry.get_default_model(Provider.OPENAI).id == "first"


def test_default_prefers_flagged_model():
    registry = ModelRegistry([_model("first"), _model("flagged", default=True)])
    assert registry.get_default_model(Provider.OPENAI).id == "flagged"


def test_first_available_follows_priority(base_registry):
    registry = base_registry.disable_unavailable_providers(
        {Provider.CLAUDE: True, Provider.OLLAMA: True}
    )
    assert registry.get_first_available_model().id == "claude-sonnet-4"

    registry = ModelRegistry().disable_unavailable_providers({Provider.OLLAMA: True})
    assert registry.get_first_available_model().id == "deepseek-r1:latest"


def test_list_models_filters(base_registry):
    gemini = base_registry.list_models(provider="gemini")
    assert gemini
    assert all(m.provider is Provider.GEMINI for m in gemini)
    assert len(base_registry.list_models()) == len(SUPPORTED_LLM_MODELS)


def test_model_lookup(base_registry):
    registry = base_registry.disable_unavailable_providers({Provider.GEMINI: True})

    assert registry.is_valid_model("gemini-2.0-flash")
    assert not registry.is_valid_model("gpt-4o")
    assert not registry.is_valid_model("no-such-model")
    assert registry.get_model("no-such-model") is None
    with pytest.raises(ModelNotFoundError):
        registry.require_model("no-such-model")


def test_credentials_from_settings():
    settings = make_settings(openai_api_key="sk-1", claude_api_key="   ", ollama_base_url="http://ollama:11434")
    assert credentials_from_settings(settings) == {
        Provider.OPENAI: True,
        Provider.GEMINI: False,
        Provider.CLAUDE: False,
        Provider.OLLAMA: True,
    }


def test_llm_model_serializes_camel_case(base_registry):
    data = base_registry.get_model("gpt-4o").model_dump(by_alias=True)
    assert data["displayName"]
    assert data["isEnabled"] is True
    assert "maxCompletionTokens" in data
    assert "inputTokenLimit" in data


def test_initialization_report_warns_without_providers(base_registry, caplog):
    registry = base_registry.disable_unavailable_providers({})
    with caplog.at_level("INFO", logger="neobase_ai"):
        registry.log_initialization()
    assert "OPENAI_API_KEY" in caplog.text
    assert any(r.levelname == "WARNING" for r in caplog.records)


def test_configured_models_requires_credentials(base_registry):
    registry = base_registry.disable_unavailable_providers({Provider.CLAUDE: True})
    assert {m.provider for m in registry.configured_models("claude")} == {Provider.CLAUDE}
    with pytest.raises(ProviderNotConfiguredError):
        registry.configured_models("openai")
