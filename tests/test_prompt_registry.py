import json

import pytest
from pydantic import ValidationError

from neobase_ai.ai_engine import prompt_registry
from neobase_ai.ai_engine.constants import DatabaseType, Provider
from neobase_ai.ai_engine.prompts import non_tech, postgresql, spreadsheet
from neobase_ai.errors import ConfigurationError, UnknownProviderError
from neobase_ai.models.prompt_models import PromptRequest

ALL_PAIRS = [(p, d) for p in Provider for d in DatabaseType]


@pytest.mark.parametrize("provider,db_type", ALL_PAIRS)
def test_every_pair_has_prompt_and_schema(provider, db_type):
    prompt = prompt_registry.resolve_system_prompt(provider, db_type)
    schema = prompt_registry.resolve_response_schema(provider, db_type)

    assert prompt.strip()
    assert "assistantMessage" in schema.required_fields()


@pytest.mark.parametrize("provider,db_type", ALL_PAIRS)
def test_non_tech_mode_prepends_instructions(provider, db_type):
    plain = prompt_registry.resolve_system_prompt(provider, db_type, non_tech_mode=False)
    non_technical = prompt_registry.resolve_system_prompt(provider, db_type, non_tech_mode=True)

    preamble = prompt_registry.non_tech_instructions(db_type)
    assert non_technical == preamble + "\n\n" + plain
    assert non_technical.startswith(non_tech.NON_TECH_PREAMBLE)


def test_spreadsheet_is_postgresql_plus_context():
    for provider in Provider:
        sheet = prompt_registry.resolve_system_prompt(provider, DatabaseType.SPREADSHEET)
        pg = prompt_registry.resolve_system_prompt(provider, DatabaseType.POSTGRESQL)
        assert sheet == pg + spreadsheet.SPREADSHEET_CONTEXT


def test_spreadsheet_non_tech_uses_postgresql_block():
    assert prompt_registry.non_tech_instructions("spreadsheet") == prompt_registry.non_tech_instructions(
        "postgresql"
    )


def test_unknown_database_type_falls_back_to_postgresql():
    assert prompt_registry.resolve_system_prompt("openai", "oracle") == postgresql.SYSTEM_PROMPT
    assert prompt_registry.resolve_visualization_prompt("oracle") == postgresql.VISUALIZATION_PROMPT
    assert prompt_registry.resolve_response_schema("openai", "oracle") == prompt_registry.resolve_response_schema(
        "openai", "postgresql"
    )


@pytest.mark.parametrize("call", [
    lambda: prompt_registry.resolve_system_prompt("mistral", "postgresql"),
    lambda: prompt_registry.resolve_response_schema("mistral", "postgresql"),
    lambda: prompt_registry.resolve_recommendations_prompt("mistral"),
    lambda: prompt_registry.resolve_recommendations_schema(""),
])
def test_unknown_provider_fails_loudly(call):
    with pytest.raises(UnknownProviderError) as exc_info:
        call()
    assert isinstance(exc_info.value, ConfigurationError)


def test_provider_names_are_normalized():
    assert Provider.parse("  OpenAI ") is Provider.OPENAI
    assert prompt_registry.resolve_system_prompt("Claude", "MongoDB") == prompt_registry.resolve_system_prompt(
        Provider.CLAUDE, DatabaseType.MONGODB
    )


def test_json_string_schemas_are_valid_json():
    for provider in (Provider.OPENAI, Provider.CLAUDE, Provider.OLLAMA):
        for db_type in DatabaseType:
            descriptor = prompt_registry.resolve_response_schema(provider, db_type)
            assert descriptor.kind == "json-string"
            assert isinstance(json.loads(descriptor.payload), dict)

        rec = prompt_registry.resolve_recommendations_schema(provider)
        assert rec.kind == "json-string"
        assert json.loads(rec.payload)["required"] == ["recommendations"]


def _walk(schema):
    yield schema
    for sub in (schema.get("properties") or {}).values():
        yield from _walk(sub)
    if "items" in schema:
        yield from _walk(schema["items"])


def test_gemini_schema_is_typed_openapi_subset():
    descriptor = prompt_registry.resolve_response_schema("gemini", "postgresql")
    assert descriptor.kind == "typed"
    assert isinstance(descriptor.payload, dict)

    for node in _walk(descriptor.payload):
        assert node["type"] == node["type"].upper()
        assert "additionalProperties" not in node


def test_claude_mongodb_scenario():
    prompt = prompt_registry.resolve_system_prompt("claude", "mongodb", non_tech_mode=False)
    schema = prompt_registry.resolve_response_schema("claude", "mongodb")

    assert "ObjectId" in prompt
    assert {
        "query", "queryType", "isCritical", "canRollback", "explanation", "estimateResponseTime",
    } <= set(schema.query_required_fields())

    query_props = schema.as_dict()["properties"]["queries"]["items"]["properties"]
    assert "collections" in query_props
    assert "tables" not in query_props


def test_sql_schema_uses_tables():
    schema = prompt_registry.resolve_response_schema("openai", "mysql").as_dict()
    query_props = schema["properties"]["queries"]["items"]["properties"]
    assert "tables" in query_props
    assert "validationSchema" not in query_props


def test_as_dict_returns_a_copy():
    descriptor = prompt_registry.resolve_response_schema("gemini", "clickhouse")
    descriptor.as_dict()["required"].append("tampered")
    assert descriptor.required_fields() == ["assistantMessage"]


@pytest.mark.parametrize("db_type,marker", [
    ("mysql", "MySQL"),
    ("yugabytedb", "YugabyteDB"),
    ("clickhouse", "ClickHouse"),
    ("mongodb", "MongoDB"),
])
def test_visualization_prompt_per_dialect(db_type, marker):
    prompt = prompt_registry.resolve_visualization_prompt(db_type)
    assert marker in prompt.splitlines()[0]


def test_spreadsheet_visualization_uses_postgresql():
    assert prompt_registry.resolve_visualization_prompt("spreadsheet") == postgresql.VISUALIZATION_PROMPT


def test_recommendations_prompt_is_shared():
    prompts = {prompt_registry.resolve_recommendations_prompt(p) for p in Provider}
    assert len(prompts) == 1


def test_build_prompt_bundle_ignores_question_and_context():
    request = PromptRequest(
        provider="ollama",
        database_type="clickhouse",
        non_tech_mode=True,
        user_question="How many events yesterday?",
        schema_context="CREATE TABLE events (...)",
    )
    bundle = prompt_registry.build_prompt_bundle(request)

    assert bundle.system_prompt == prompt_registry.resolve_system_prompt("ollama", "clickhouse", True)
    assert bundle.response_schema == prompt_registry.resolve_response_schema("ollama", "clickhouse")
    assert "How many events yesterday?" not in bundle.system_prompt


def test_prompt_request_unknown_database_type_defaults_to_postgresql():
    request = PromptRequest(provider="openai", database_type="db2")
    assert request.database_type is DatabaseType.POSTGRESQL


def test_changing_a_resolved_schema_does_not_leak_into_next_lookup():
    first = prompt_registry.resolve_response_schema("gemini", "postgresql")
    first.payload["required"].append("tampered")

    second = prompt_registry.resolve_response_schema("gemini", "postgresql")
    assert second.required_fields() == ["assistantMessage"]


def test_changing_recommendations_schema_does_not_leak_into_next_lookup():
    first = prompt_registry.resolve_recommendations_schema("gemini")
    first.payload["required"].clear()

    second = prompt_registry.resolve_recommendations_schema("gemini")
    assert second.required_fields() == ["recommendations"]


def test_prompt_request_normalizes_provider_case():
    request = PromptRequest(provider=" OpenAI ", database_type="mysql")
    assert request.provider is Provider.OPENAI

    bundle = prompt_registry.build_prompt_bundle(request)
    assert bundle.system_prompt == prompt_registry.resolve_system_prompt("openai", "mysql")


def test_prompt_request_rejects_unknown_provider():
    with pytest.raises(ValidationError):
        PromptRequest(provider="mistral")
