"""Post Generator — writes one published blog post on a random topic."""

from __future__ import annotations

from typing import Mapping

from src.common.config import BLOG_GENERATION_ENABLED
from src.common.errors import GenerationError, ParseError, PersistenceError, UpstreamError
from src.common.logging import setup_logging
from src.common.models import NewPost, PostStatus
from src.content_writer.parsing import parse_generated_post
from src.content_writer.prompts import BLOG_CATEGORIES, BLOG_TOPICS, build_blog_request
from src.publisher.slugs import unique_slug

from .base import Pipeline, PipelineResult

logger = setup_logging(module_name="pipelines.blog_generator")


class PostGenerator(Pipeline):
    """Generates a blog post and inserts it as published.

    Topic and category are drawn uniformly from fixed pools. The model is
    asked for a JSON {title, content, tags} object which is validated
    before anything is written.
    """

    name = "generate-blog"
    flag_key = BLOG_GENERATION_ENABLED
    disabled_message = "Blog generation is disabled"

    def _run(self, config: Mapping[str, str], **kwargs) -> PipelineResult:
        client = self._completion_client(config)

        topic = self.rng.choice(BLOG_TOPICS)
        category = self.rng.choice(BLOG_CATEGORIES)
        request = build_blog_request(topic, category)
        logger.info("Generating post: topic=%r category=%r", topic, category)

        try:
            generated = parse_generated_post(client.run(request))

            now = self.clock()
            author_id = self.store.resolve_system_author()
            post = self.store.insert_post(
                NewPost(
                    title=generated.title,
                    content=generated.content,
                    slug=unique_slug(generated.title, int(now.timestamp() * 1000)),
                    category=category,
                    tags=generated.tags,
                    status=PostStatus.PUBLISHED,
                    author_id=author_id,
                    published_at=now,
                )
            )
        except (UpstreamError, ParseError, PersistenceError) as e:
            raise GenerationError(e.message, cause=e) from e

        logger.info("Blog post generated: %s", post.slug)
        return PipelineResult.ok("Blog post generated successfully", blog=post)
