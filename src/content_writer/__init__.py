# Content Writer — LLM completion client, prompts and response parsing
"""
Content Writer module for the blog generation pipelines.

The client performs exactly one chat-completion call per request. Parsing
of the returned text is kept separate so captured responses can be
tested without a live API.
"""

from .client import CompletionClient, client_factory_for
from .models import CompletionRequest, GeneratedPost, LLMProvider, WriterConfig
from .parsing import clean_completion_text, extract_json_block, parse_generated_post, parse_json

__all__ = [
    "CompletionClient",
    "CompletionRequest",
    "GeneratedPost",
    "LLMProvider",
    "WriterConfig",
    "clean_completion_text",
    "client_factory_for",
    "extract_json_block",
    "parse_generated_post",
    "parse_json",
]
