"""Console logging for the pipelines, the content store and the CLI.

Each module asks for its own named logger (`pipelines.blog_generator`,
`publisher.supabase_store`, `api.functions`, ...). Pipeline runs log the
chosen topic, target post or platform and every skipped platform; prompt
text and completion bodies are never logged. The Flask app logger gets its
own coloured handler in `src.api.configure_logging`.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "blog_engine",
) -> logging.Logger:
    """Return the named logger, attaching one stdout handler on first use.

    Args:
        level: Logging level (default INFO).
        module_name: Dotted area name, e.g. "pipelines.summary_generator".
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
