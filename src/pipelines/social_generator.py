"""Social Post Generator — one draft per platform for a blog post.

Platforms are processed one after another. A platform whose completion
call or insert fails is logged and skipped; the rest still run.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from src.common.config import SOCIAL_MEDIA_AUTOMATION_ENABLED
from src.common.errors import GenerationError, NotFoundError, PersistenceError, UpstreamError
from src.common.logging import setup_logging
from src.common.models import NewSocialPost, SocialPost, SocialPostStatus
from src.content_writer.parsing import clean_completion_text
from src.content_writer.prompts import PLATFORM_PROFILES, PlatformProfile, build_social_request

from .base import Pipeline, PipelineResult

logger = setup_logging(module_name="pipelines.social_generator")


class SocialPostGenerator(Pipeline):
    name = "generate-social-posts"
    flag_key = SOCIAL_MEDIA_AUTOMATION_ENABLED
    disabled_message = "Social media automation is disabled"

    def __init__(self, *args, platforms: Sequence[PlatformProfile] = PLATFORM_PROFILES, **kwargs):
        super().__init__(*args, **kwargs)
        self.platforms = tuple(platforms)

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

        client = self._completion_client(config)

        generated: list[SocialPost] = []
        for profile in self.platforms:
            platform = profile.platform.value
            try:
                content = clean_completion_text(client.run(build_social_request(post, profile)))
            except UpstreamError as e:
                logger.error("Completion failed for %s: %s", platform, e.message)
                continue

            try:
                social_post = self.store.insert_social_post(
                    NewSocialPost(
                        blog_id=post.id,
                        platform=profile.platform,
                        content=content,
                        status=SocialPostStatus.DRAFT,
                    )
                )
            except PersistenceError as e:
                logger.error("Insert failed for %s: %s", platform, e.message)
                continue
            generated.append(social_post)

        logger.info(
            "Social posts for '%s': %d/%d platforms",
            post.slug, len(generated), len(self.platforms),
        )
        return PipelineResult.ok(
            f"Generated {len(generated)} social media posts",
            posts=generated,
            count=len(generated),
        )
