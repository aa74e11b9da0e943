"""
Каноническая JSON Schema ответа LLM на запрос пользователя.

Одна схема на все провайдеры; различаются только описания полей по диалекту
(SQL или MongoDB). Преобразование в формат конкретного провайдера —
в neobase_ai.ai_engine.schemas.binding.
"""

from typing import Any

from neobase_ai.ai_engine.constants import DatabaseType

# Обязательные поля каждого элемента queries[]
QUERY_REQUIRED_FIELDS: tuple[str, ...] = (
    "query",
    "queryType",
    "explanation",
    "isCritical",
    "canRollback",
    "estimateResponseTime",
)

_EXAMPLE_RESULT_DESCRIPTION = (
    "MUST BE VALID JSON STRING with no additional text. "
    '[{"column1":"value1","column2":"value2"}] or {"result":"1 row affected"}. '
    "Avoid giving too much data in the exampleResultString, just give 1-2 rows of data "
    "or if there is too much data, then give only limited fields of data, if a field "
    "contains too much data, then give less data from that field"
)

_COUNT_QUERY_RULES = (
    "(Only applicable for Fetching, Getting data) RULES FOR countQuery:\n"
    "1. IF the original query has a limit < 50 -> countQuery MUST BE EMPTY STRING\n"
    "2. IF the user explicitly requests a specific number of records "
    '(e.g., "get 60 latest users") -> countQuery should return exactly that number '
    "(using the same filters but with a limit equal to user's requested count)\n"
    "3. OTHERWISE -> provide a COUNT query with EXACTLY THE SAME filter conditions\n\n"
    "EXAMPLES:\n{examples}\n\n"
    "REMEMBER: The purpose of countQuery is ONLY to support pagination for large result "
    "sets. Never include OFFSET in countQuery. If the original query had filter "
    "conditions, the COUNT query MUST include the EXACT SAME conditions."
)

_SQL_COUNT_EXAMPLES = "\n".join([
    '- Original: "SELECT * FROM users LIMIT 5" -> countQuery: ""',
    '- Original: "SELECT * FROM users ORDER BY created_at DESC LIMIT 10" -> countQuery: ""',
    '- Original: "SELECT * FROM users LIMIT 60" -> countQuery: "SELECT COUNT(*) FROM users LIMIT 60"',
    '- User asked: "get 150 latest users" -> countQuery: "SELECT COUNT(*) FROM users LIMIT 150"',
    "- Original: \"SELECT * FROM users WHERE status = 'active'\" -> "
    "countQuery: \"SELECT COUNT(*) FROM users WHERE status = 'active'\"",
])

_MONGODB_COUNT_EXAMPLES = "\n".join([
    '- Original: "db.users.find().limit(5)" -> countQuery: ""',
    '- Original: "db.users.find().sort({created_at: -1}).limit(10)" -> countQuery: ""',
    '- Original: "db.users.find().limit(60)" -> countQuery: "db.users.countDocuments({}).limit(60)"',
    '- User asked: "get 150 latest users" -> countQuery: "db.users.countDocuments({}).limit(150)"',
    "- Original: \"db.users.find({status: 'active'})\" -> "
    "countQuery: \"db.users.countDocuments({status: 'active'})\"",
])

# Описания, зависящие от диалекта
_DIALECT_TEXT: dict[bool, dict[str, str]] = {
    # is_sql=True
    True: {
        "source_field": "tables",
        "source": "Tables being used in the query (comma separated)",
        "query": "DB query to fetch details from database. Final, ready to run, without placeholders.",
        "queryType": "SQL query type (SELECT, UPDATE, INSERT, DELETE, DDL)",
        "paginatedQuery": (
            '(Empty "" if the original query is to find count or already includes COUNT '
            "function) A paginated query of the original query with OFFSET placeholder to "
            "replace with actual value. For SQL, use OFFSET offset_size LIMIT 50. If the "
            "user is asking for fewer than 50 records or the original query contains "
            "LIMIT < 50, then paginatedQuery MUST BE EMPTY STRING."
        ),
        "count_examples": _SQL_COUNT_EXAMPLES,
    },
    False: {
        "source_field": "collections",
        "source": "Collections being used in the query (comma separated)",
        "query": (
            "MongoDB query in mongo shell syntax (db.collection.find/aggregate/...). "
            "Final, ready to run, without placeholders."
        ),
        "queryType": (
            "MongoDB operation type (FIND, AGGREGATE, INSERT, UPDATE, DELETE, "
            "CREATE_COLLECTION, DROP_COLLECTION, CREATE_INDEX)"
        ),
        "paginatedQuery": (
            '(Empty "" if the original query is to find count or already includes '
            "countDocuments operation) A paginated query of the original query with "
            "offset_size placeholder: .skip(offset_size).limit(50). If the original query "
            "contains limit < 50, then paginatedQuery MUST BE EMPTY STRING."
        ),
        "count_examples": _MONGODB_COUNT_EXAMPLES,
    },
}


def _string(description: str | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "string"}
    if description:
        schema["description"] = description
    return schema


def _boolean(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def build_response_schema(database_type: DatabaseType) -> dict[str, Any]:
    """
    Собирает JSON Schema ответа для диалекта.

    Каждый вызов возвращает новый dict, вызывающий код может его изменять.
    """
    text = _DIALECT_TEXT[database_type.is_sql]

    query_properties: dict[str, Any] = {
        "query": _string(text["query"]),
        text["source_field"]: _string(text["source"]),
        "queryType": _string(text["queryType"]),
        "pagination": {
            "type": "object",
            "required": ["paginatedQuery", "countQuery"],
            "properties": {
                "paginatedQuery": _string(text["paginatedQuery"]),
                "countQuery": _string(
                    _COUNT_QUERY_RULES.format(examples=text["count_examples"])
                ),
            },
        },
        "isCritical": _boolean("Indicates if the query is critical (modifies data or schema)."),
        "canRollback": _boolean("Indicates if the operation can be rolled back."),
        "explanation": _string(
            "Description of what the query does. It should be descriptive and helpful "
            "to the user and guide the user with appropriate actions & results."
        ),
        "exampleResultString": _string(_EXAMPLE_RESULT_DESCRIPTION),
        "rollbackQuery": _string(
            "Query to undo this operation (if canRollback=true), default empty. Give 100% "
            "correct, error free rollbackQuery with actual values, if not applicable then "
            "give empty string as rollbackDependentQuery will be used instead"
        ),
        "rollbackDependentQuery": _string(
            "Query to run by the user to get the required data that AI needs in order to "
            "write a successful rollbackQuery"
        ),
        "estimateResponseTime": {
            "type": "number",
            "description": "Estimated time (in milliseconds) to fetch the response.",
        },
    }
    if not database_type.is_sql:
        query_properties["validationSchema"] = _string(
            "JSON schema validator for createCollection operations (if applicable)"
        )
        query_properties["indexOptions"] = _string(
            "Index options for createIndex operations (if applicable)"
        )

    return {
        "type": "object",
        "required": ["assistantMessage"],
        "properties": {
            "assistantMessage": _string(
                "A friendly AI Response/Explanation or clarification question (Must Send "
                "this). Note: This should be Markdown formatted text"
            ),
            "actionButtons": {
                "type": "array",
                "description": (
                    "List of action buttons to display to the user. Use these to suggest "
                    "helpful actions like refreshing schema when schema issues are detected."
                ),
                "items": {
                    "type": "object",
                    "required": ["label", "action", "isPrimary"],
                    "properties": {
                        "label": _string("Display text for the button that the user will see."),
                        "action": _string(
                            "Action identifier that will be processed by the frontend. "
                            "Common actions: refresh_schema etc."
                        ),
                        "isPrimary": _boolean(
                            "Whether this is a primary (highlighted) action button."
                        ),
                    },
                    "additionalProperties": False,
                },
            },
            "queries": {
                "type": "array",
                "description": (
                    "An array of queries that the AI has generated. Return queries only "
                    "when it makes sense to return a query, otherwise return empty array."
                ),
                "items": {
                    "type": "object",
                    "required": list(QUERY_REQUIRED_FIELDS),
                    "properties": query_properties,
                    "additionalProperties": False,
                },
            },
        },
        "additionalProperties": False,
    }


def build_recommendations_schema() -> dict[str, Any]:
    """JSON Schema ответа на запрос рекомендаций вопросов."""
    return {
        "type": "object",
        "required": ["recommendations"],
        "properties": {
            "recommendations": {
                "type": "array",
                "description": "An array of 60 query recommendations (minimum 40 if 60 not possible)",
                "items": {
                    "type": "object",
                    "required": ["text"],
                    "properties": {
                        "text": _string("The recommendation text that users can ask"),
                    },
                    "additionalProperties": False,
                },
            },
        },
        "additionalProperties": False,
    }
