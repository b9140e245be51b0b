# Pipelines — the four stateless generation workflows
"""
Generation pipelines: post, comment, summary and social-post.

Each invocation loads configuration once, checks its feature flag,
calls the completion API and writes its rows to the content store.
"""

from .base import (
    Pipeline,
    PipelineResult,
    StaticConfigProvider,
    StoreConfigProvider,
    flag_enabled,
)
from .blog_generator import PostGenerator
from .comment_generator import CommentGenerator, select_comment_target
from .social_generator import SocialPostGenerator
from .summary_generator import SummaryGenerator

PIPELINES = {
    PostGenerator.name: PostGenerator,
    CommentGenerator.name: CommentGenerator,
    SummaryGenerator.name: SummaryGenerator,
    SocialPostGenerator.name: SocialPostGenerator,
}

__all__ = [
    "CommentGenerator",
    "PIPELINES",
    "Pipeline",
    "PipelineResult",
    "PostGenerator",
    "SocialPostGenerator",
    "StaticConfigProvider",
    "StoreConfigProvider",
    "SummaryGenerator",
    "flag_enabled",
    "select_comment_target",
]
