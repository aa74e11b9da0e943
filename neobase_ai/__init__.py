"""
NeoBase AI: реестр системных промптов, схем ответа и каталога LLM-моделей.
"""

__version__ = "1.0.0"
