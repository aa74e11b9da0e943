"""
Pydantic-модель описания LLM-модели (для каталога и UI).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from neobase_ai.ai_engine.constants import Provider


class LLMModel(BaseModel):
    """
    Описание поддерживаемой модели.

    Неизменяемая: отключение провайдера создаёт копию с is_enabled=False
    (model_copy), исходный каталог не меняется.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1)       # "gpt-4o", "gemini-2.0-flash"
    provider: Provider
    display_name: str
    is_enabled: bool = True                  # разрешена ли модель к использованию
    default: bool | None = None              # модель по умолчанию для провайдера
    api_version: str = ""                    # "v1beta" и т.п. для Gemini
    max_completion_tokens: int = Field(default=4096, ge=1)
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    input_token_limit: int = Field(default=0, ge=0)
    description: str = ""

    @property
    def is_default(self) -> bool:
        return bool(self.default)
