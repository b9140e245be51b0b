"""Completion Client — one synchronous chat-completion call per request.

The API key is handed to the constructor; the client never looks it up
itself. No retries, no streaming, transport default timeout.

Usage:
    client = CompletionClient(api_key)
    text = client.complete(system_prompt, user_prompt, max_tokens=150, temperature=0.3)
"""

from __future__ import annotations

from typing import Any

from src.common.config import Settings
from src.common.errors import ConfigurationError, UpstreamError
from src.common.logging import setup_logging

from .models import CompletionRequest, LLMProvider, WriterConfig
from .parsing import parse_json

logger = setup_logging(module_name="content_writer.client")


class CompletionClient:
    """Thin wrapper over the OpenAI (default) or Anthropic chat API."""

    def __init__(
        self,
        api_key: str,
        config: WriterConfig | None = None,
        settings: Settings | None = None,
    ):
        if not api_key:
            raise ConfigurationError("OpenAI API key not configured")
        self._api_key = api_key
        self.config = config or WriterConfig()
        self.settings = settings or Settings.load()
        self._client = None

    @property
    def model(self) -> str:
        if self.config.model:
            return self.config.model
        if self.config.provider == LLMProvider.ANTHROPIC:
            return self.settings.llm.anthropic_model
        return self.settings.llm.openai_model

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> str:
        """Call the configured provider and return the first candidate's text.

        Raises:
            UpstreamError: If the API answers with a non-success status or
                cannot be reached
        """
        if self.config.provider == LLMProvider.ANTHROPIC:
            text = self._call_anthropic(system_prompt, user_prompt, max_tokens, temperature)
        else:
            text = self._call_openai(system_prompt, user_prompt, max_tokens, temperature)
        logger.debug("Completion received (%d chars) from %s", len(text), self.model)
        return text

    def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ) -> Any:
        """Like complete(), but the answer must decode as JSON.

        Raises:
            UpstreamError: On a non-success API status
            ParseError: If the returned text is not valid JSON
        """
        text = self.complete(system_prompt, user_prompt, max_tokens, temperature)
        return parse_json(text)

    def run(self, request: CompletionRequest) -> str:
        """Convenience wrapper taking a prebuilt CompletionRequest."""
        return self.complete(
            request.system_prompt,
            request.user_prompt,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )

    # --- Providers ---

    def _call_openai(
        self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        """Call OpenAI chat completions."""
        import openai

        if self._client is None:
            self._client = openai.OpenAI(api_key=self._api_key, max_retries=0)

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except openai.APIStatusError as e:
            raise UpstreamError(
                f"OpenAI API error: {_status_text(e)}", status_code=e.status_code
            ) from e
        except openai.APIConnectionError as e:
            raise UpstreamError(f"OpenAI API error: {e}") from e

        if not response.choices:
            raise UpstreamError("OpenAI API error: no choices returned")
        return response.choices[0].message.content or ""

    def _call_anthropic(
        self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        """Call Anthropic messages API."""
        import anthropic

        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self._api_key, max_retries=0)

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                system=system_prompt,
                messages=[
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
            )
        except anthropic.APIStatusError as e:
            raise UpstreamError(
                f"Anthropic API error: {_status_text(e)}", status_code=e.status_code
            ) from e
        except anthropic.APIConnectionError as e:
            raise UpstreamError(f"Anthropic API error: {e}") from e

        if not response.content:
            raise UpstreamError("Anthropic API error: empty response")
        return response.content[0].text


def _status_text(error: Any) -> str:
    """Best-effort HTTP reason phrase from an SDK status error."""
    response = getattr(error, "response", None)
    reason = getattr(response, "reason_phrase", "") if response is not None else ""
    return reason or str(getattr(error, "status_code", "")) or str(error)


def client_factory_for(
    settings: Settings,
    provider: str | None = None,
    model: str = "",
):
    """Build an api_key -> CompletionClient factory for the configured provider."""
    config = WriterConfig(provider=LLMProvider(provider or settings.llm.provider), model=model)

    def build(api_key: str) -> CompletionClient:
        return CompletionClient(api_key, config=config, settings=settings)

    return build
