# Common utilities and shared modules
"""
Shared components used by the pipelines and the HTTP layer:
- Data models (Pydantic schemas)
- Error taxonomy
- Logging configuration
- Project configuration
"""

from .config import settings, PROJECT_ROOT, CONFIG_DIR
from .errors import (
    BlogEngineError,
    ConfigurationError,
    GenerationError,
    NotFoundError,
    ParseError,
    PersistenceError,
    UpstreamError,
)
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "BlogEngineError",
    "ConfigurationError",
    "GenerationError",
    "NotFoundError",
    "ParseError",
    "PersistenceError",
    "UpstreamError",
    "setup_logging",
]
