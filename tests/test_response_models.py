import json

import pytest

from neobase_ai.errors import InvalidLLMResponseError
from neobase_ai.models.response_models import parse_llm_response, parse_recommendations

REPLY = {
    "assistantMessage": "Here are your latest orders:",
    "actionButtons": [{"label": "Refresh Knowledge Base", "action": "refresh_schema", "isPrimary": True}],
    "queries": [
        {
            "query": "SELECT id, total FROM orders ORDER BY created_at DESC LIMIT 5",
            "queryType": "SELECT",
            "tables": "orders",
            "explanation": "Latest five orders",
            "isCritical": False,
            "canRollback": False,
            "estimateResponseTime": "78",
            "pagination": {"paginatedQuery": "", "countQuery": ""},
            "exampleResultString": '[{"id": "1", "total": "10.50"}]',
        }
    ],
}


def test_parses_plain_json():
    response = parse_llm_response(json.dumps(REPLY))

    assert response.assistant_message == "Here are your latest orders:"
    assert response.action_buttons[0].is_primary is True
    query = response.queries[0]
    assert query.query_type == "SELECT"
    assert query.estimate_response_time == 78.0
    assert query.example_result() == [{"id": "1", "total": "10.50"}]


def test_parses_fenced_json_with_prose():
    text = "Sure! Here you go:\n```json\n" + json.dumps(REPLY) + "\n```\nLet me know."
    response = parse_llm_response(text)
    assert len(response.queries) == 1


def test_message_only_reply():
    response = parse_llm_response('{"assistantMessage": "Which user field should I use: email or ID?"}')
    assert response.queries == []
    assert response.action_buttons == []


def test_mongodb_query_fields():
    reply = {
        "assistantMessage": "Done",
        "queries": [{
            "query": "db.users.find({}).limit(5)",
            "queryType": "FIND",
            "collections": "users",
            "isCritical": False,
            "canRollback": False,
            "estimateResponseTime": 40,
        }],
    }
    query = parse_llm_response(json.dumps(reply)).queries[0]
    assert query.collections == "users"
    assert query.tables is None
    assert query.example_result() is None


@pytest.mark.parametrize("text", ["", "   ", "no json here", '{"queries": []}', "[1, 2, 3]"])
def test_invalid_replies_raise(text):
    with pytest.raises(InvalidLLMResponseError):
        parse_llm_response(text)


def test_parses_recommendations():
    text = json.dumps({"recommendations": [{"text": "Show me the most recent orders"}, {"text": "Top products?"}]})
    result = parse_recommendations(text)
    assert [r.text for r in result.recommendations] == ["Show me the most recent orders", "Top products?"]


def test_recommendations_with_empty_text_rejected():
    with pytest.raises(InvalidLLMResponseError):
        parse_recommendations('{"recommendations": [{"text": ""}]}')
