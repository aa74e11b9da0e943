"""
Тексты промптов по диалектам баз данных.

Каждый модуль диалекта экспортирует SYSTEM_PROMPT, VISUALIZATION_PROMPT
и NON_TECH_INSTRUCTIONS. Выбор по провайдеру/диалекту — в
neobase_ai.ai_engine.prompt_registry.
"""
