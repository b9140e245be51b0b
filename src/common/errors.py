"""Error taxonomy shared by the pipelines and the HTTP layer."""

from __future__ import annotations


class BlogEngineError(Exception):
    """Base exception for the blog engine."""

    def __init__(self, message: str, code: int = 500, payload: dict | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.payload = payload

    def to_dict(self) -> dict:
        rv = dict(self.payload or ())
        rv["error"] = self.message
        rv["success"] = False
        return rv


class ConfigurationError(BlogEngineError):
    """Missing API key or other required configuration."""


class NotFoundError(BlogEngineError):
    """Referenced post or record does not exist."""

    def __init__(self, message: str = "Blog post not found", payload: dict | None = None):
        super().__init__(message, code=404, payload=payload)


class UpstreamError(BlogEngineError):
    """The completion API answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, code=502)
        self.status_code = status_code


class ParseError(BlogEngineError):
    """The completion text did not match the expected structure."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class PersistenceError(BlogEngineError):
    """The content store rejected a read or write."""


class GenerationError(BlogEngineError):
    """A pipeline failed after passing its preconditions."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
