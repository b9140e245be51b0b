"""Comment Generator — adds one machine-written comment to a recent post."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from src.common.config import COMMENT_BOT_ENABLED
from src.common.errors import GenerationError, PersistenceError, UpstreamError
from src.common.logging import setup_logging
from src.common.models import CommentStatus, NewComment, PostWithCommentCount
from src.content_writer.parsing import clean_completion_text
from src.content_writer.prompts import COMMENTER_NAMES, build_comment_request

from .base import Pipeline, PipelineResult

logger = setup_logging(module_name="pipelines.comment_generator")

CANDIDATE_POSTS = 5
MAX_COMMENTS_BEFORE_SKIP = 3


def select_comment_target(
    candidates: Sequence[PostWithCommentCount],
) -> Optional[PostWithCommentCount]:
    """First candidate with fewer than 3 comments, else the first one.

    Candidates are expected newest first, so the fallback is the most
    recent post.
    """
    if not candidates:
        return None
    for candidate in candidates:
        if candidate.comment_count < MAX_COMMENTS_BEFORE_SKIP:
            return candidate
    return candidates[0]


class CommentGenerator(Pipeline):
    name = "generate-comments"
    flag_key = COMMENT_BOT_ENABLED
    disabled_message = "Comment bot is disabled"

    def _run(self, config: Mapping[str, str], **kwargs) -> PipelineResult:
        client = self._completion_client(config)

        try:
            candidates = self.store.list_recent_published_with_comment_counts(
                limit=CANDIDATE_POSTS
            )
        except PersistenceError as e:
            raise GenerationError(e.message, cause=e) from e

        target = select_comment_target(candidates)
        if target is None:
            logger.info("No published posts to comment on")
            return PipelineResult.noop("No blogs available for commenting")

        author_name = self.rng.choice(COMMENTER_NAMES)
        request = build_comment_request(target.post.title)

        try:
            content = clean_completion_text(client.run(request))
            comment = self.store.insert_comment(
                NewComment(
                    blog_id=target.post.id,
                    author_name=author_name,
                    content=content,
                    is_bot_generated=True,
                    status=CommentStatus.APPROVED,
                )
            )
        except (UpstreamError, PersistenceError) as e:
            raise GenerationError(e.message, cause=e) from e

        logger.info(
            "Comment by %s added to '%s' (%d existing)",
            author_name, target.post.slug, target.comment_count,
        )
        return PipelineResult.ok("Comment generated successfully", comment=comment)
