"""Data models for the content writer module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


@dataclass
class WriterConfig:
    """Configuration for the completion client."""
    provider: LLMProvider = LLMProvider.OPENAI
    model: str = ""  # Empty = use default from settings


@dataclass
class CompletionRequest:
    """One system/user prompt pair with its sampling limits."""
    system_prompt: str
    user_prompt: str
    max_tokens: int = 1000
    temperature: float = 0.7
    metadata: dict = field(default_factory=dict)


class GeneratedPost(BaseModel):
    """Structured answer expected from the post generation prompt."""
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)

    @field_validator("title", "content")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _default_tags(cls, value):
        # Models sometimes answer "tags": null
        return value or []
