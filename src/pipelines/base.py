"""Shared plumbing for the generation pipelines.

Every pipeline invocation reads its configuration exactly once through a
ConfigProvider, checks its feature flag, and only then builds a
CompletionClient from the API key found in that configuration.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, Field

from src.common.config import CONFIG_KEYS, OPENAI_API_KEY
from src.common.errors import ConfigurationError
from src.common.logging import setup_logging
from src.content_writer.client import CompletionClient

logger = setup_logging(module_name="pipelines")

ClientFactory = Callable[[str], CompletionClient]


def flag_enabled(config: Mapping[str, str], key: str) -> bool:
    """Only the literal string "true" enables a feature."""
    return config.get(key) == "true"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# === Config providers ===

class StoreConfigProvider:
    """Reads all recognized flags from the content store in one query."""

    def __init__(self, store):
        self.store = store

    def load(self) -> dict[str, str]:
        return self.store.get_config_values(list(CONFIG_KEYS))


class StaticConfigProvider:
    """Fixed configuration, for tests and one-off CLI runs."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self.values = dict(values or {})

    def load(self) -> dict[str, str]:
        return dict(self.values)


# === Results ===

class PipelineResult(BaseModel):
    """Outcome of one pipeline invocation, rendered as the HTTP body."""
    success: bool = False
    message: Optional[str] = None
    error: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **data: Any) -> PipelineResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def noop(cls, message: str) -> PipelineResult:
        """Benign no-op: nothing generated, nothing written."""
        return cls(success=False, message=message)

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}
        if self.message is not None:
            body["message"] = self.message
        if self.error is not None:
            body["error"] = self.error
        for key, value in self.data.items():
            body[key] = _jsonable(value)
        return body


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


# === Base pipeline ===

class Pipeline:
    """One stateless generation workflow.

    Subclasses set `flag_key`/`disabled_message` when they are gated by a
    feature flag and implement `_run`.
    """

    name: str = "pipeline"
    flag_key: Optional[str] = None
    disabled_message: str = ""

    def __init__(
        self,
        store,
        config_provider=None,
        client_factory: Optional[ClientFactory] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.config_provider = config_provider or StoreConfigProvider(store)
        self.client_factory = client_factory or CompletionClient
        self.rng = rng or random.Random()
        self.clock = clock

    def run(self, **kwargs: Any) -> PipelineResult:
        config = self.config_provider.load()
        if self.flag_key and not flag_enabled(config, self.flag_key):
            logger.info("%s skipped: %s", self.name, self.disabled_message)
            return PipelineResult.noop(self.disabled_message)
        return self._run(config, **kwargs)

    def _run(self, config: Mapping[str, str], **kwargs: Any) -> PipelineResult:
        raise NotImplementedError

    def _completion_client(self, config: Mapping[str, str]) -> CompletionClient:
        api_key = config.get(OPENAI_API_KEY)
        if not api_key:
            raise ConfigurationError("OpenAI API key not configured")
        return self.client_factory(api_key)
