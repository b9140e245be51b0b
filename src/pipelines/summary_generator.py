"""Summary Generator — fills a post's summary field once."""

from __future__ import annotations

from typing import Mapping, Optional

from src.common.errors import GenerationError, NotFoundError, PersistenceError, UpstreamError
from src.common.logging import setup_logging
from src.content_writer.parsing import clean_completion_text
from src.content_writer.prompts import build_summary_request

from .base import Pipeline, PipelineResult

logger = setup_logging(module_name="pipelines.summary_generator")


class SummaryGenerator(Pipeline):
    """Not flag-gated; a post that already has a summary is left untouched."""

    name = "summarize-blog"

    def _run(
        self, config: Mapping[str, str], blog_id: Optional[str] = None, **kwargs
    ) -> PipelineResult:
        if not blog_id:
            raise GenerationError("Blog ID is required")

        try:
            post = self.store.get_post(blog_id)
        except PersistenceError as e:
            raise GenerationError(e.message, cause=e) from e
        if post is None:
            raise NotFoundError("Blog post not found")

        if post.has_summary:
            return PipelineResult.noop("Blog already has a summary")

        client = self._completion_client(config)
        try:
            summary = clean_completion_text(client.run(build_summary_request(post)))
            self.store.update_post_summary(post.id, summary)
        except (UpstreamError, PersistenceError) as e:
            raise GenerationError(e.message, cause=e) from e

        logger.info("Summary written for '%s'", post.slug)
        return PipelineResult.ok("Summary generated successfully", summary=summary)
