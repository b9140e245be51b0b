"""Shared test fixtures for the blog engine."""

import itertools
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.errors import PersistenceError, UpstreamError
from src.common.models import (
    Comment,
    ConfigFlag,
    Post,
    PostStatus,
    PostWithCommentCount,
    SocialPost,
    SystemStats,
)

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeContentStore:
    """In-memory stand-in for SupabaseContentStore."""

    def __init__(self, posts=None, comment_counts=None, configs=None):
        self.posts = {p.id: p for p in posts or []}
        self.comment_counts = dict(comment_counts or {})
        self.configs = dict(configs or {})
        self.comments = []
        self.social_posts = []
        self.summary_updates = []
        self.author_resolutions = 0
        self.fail_social_inserts_for = set()
        self._ids = itertools.count(1)

    @property
    def write_count(self) -> int:
        inserted_posts = sum(1 for p in self.posts.values() if p.id.startswith("gen-"))
        return (
            inserted_posts
            + len(self.comments)
            + len(self.social_posts)
            + len(self.summary_updates)
        )

    # configs
    def list_configs(self):
        return [ConfigFlag(key=k, value=v) for k, v in sorted(self.configs.items())]

    def get_config_values(self, keys=None):
        return {k: v for k, v in self.configs.items() if not keys or k in keys}

    def set_config(self, key, value):
        self.configs[key] = value
        return ConfigFlag(key=key, value=value)

    # posts
    def get_post(self, post_id):
        return self.posts.get(post_id)

    def get_published_post_by_slug(self, slug):
        for post in self.posts.values():
            if post.slug == slug and post.status == PostStatus.PUBLISHED:
                return post
        return None

    def list_published_posts(self, category=None, limit=20):
        posts = [
            p for p in self.posts.values()
            if p.status == PostStatus.PUBLISHED and (not category or p.category == category)
        ]
        return posts[:limit]

    def insert_post(self, new_post):
        post = Post(id=f"gen-{next(self._ids)}", **new_post.model_dump())
        self.posts[post.id] = post
        return post

    def update_post_summary(self, post_id, summary):
        self.summary_updates.append((post_id, summary))
        self.posts[post_id] = self.posts[post_id].model_copy(update={"summary": summary})

    def increment_view_count(self, post):
        updated = post.view_count + 1
        self.posts[post.id] = post.model_copy(update={"view_count": updated})
        return updated

    def list_recent_published_with_comment_counts(self, limit=5):
        published = [p for p in self.posts.values() if p.status == PostStatus.PUBLISHED]
        return [
            PostWithCommentCount(post=p, comment_count=self.comment_counts.get(p.id, 0))
            for p in published[:limit]
        ]

    def resolve_system_author(self):
        self.author_resolutions += 1
        return "system-author-id"

    # comments
    def insert_comment(self, new_comment):
        comment = Comment(id=f"c-{next(self._ids)}", **new_comment.model_dump())
        self.comments.append(comment)
        return comment

    def list_approved_comments(self, blog_id):
        return [c for c in self.comments if c.blog_id == blog_id and c.status == "approved"]

    # social posts
    def insert_social_post(self, new_social_post):
        if new_social_post.platform.value in self.fail_social_inserts_for:
            raise PersistenceError("insert rejected")
        social_post = SocialPost(id=f"s-{next(self._ids)}", **new_social_post.model_dump())
        self.social_posts.append(social_post)
        return social_post

    def list_social_posts(self, blog_id):
        return [s for s in self.social_posts if s.blog_id == blog_id]

    def get_stats(self, now=None):
        return SystemStats(
            total_blogs=len(self.posts),
            total_comments=len(self.comments),
            social_posts=len(self.social_posts),
        )


class StubCompletionClient:
    """Records requests and replays canned answers (or raises them)."""

    def __init__(self, responses=None, default="Stub completion"):
        self.responses = list(responses or [])
        self.default = default
        self.requests = []

    def run(self, request):
        self.requests.append(request)
        answer = self.responses.pop(0) if self.responses else self.default
        if isinstance(answer, Exception):
            raise answer
        return answer


def make_post(post_id="p1", **overrides) -> Post:
    data = {
        "id": post_id,
        "title": f"Post {post_id}",
        "content": "Body text about cloud computing.",
        "slug": f"post-{post_id}",
        "category": "Technology",
        "tags": ["cloud", "devops"],
        "status": PostStatus.PUBLISHED,
        "author_id": "author-1",
    }
    data.update(overrides)
    return Post(**data)


@pytest.fixture
def all_enabled_config() -> dict:
    return {
        "blog_generation_enabled": "true",
        "comment_bot_enabled": "true",
        "social_media_automation_enabled": "true",
        "openai_api_key": "sk-test",
    }


@pytest.fixture
def store() -> FakeContentStore:
    return FakeContentStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def upstream_error() -> UpstreamError:
    return UpstreamError("OpenAI API error: Internal Server Error", status_code=500)


@pytest.fixture
def post_factory():
    return make_post


@pytest.fixture
def store_factory():
    return FakeContentStore


@pytest.fixture
def client_for():
    """Build a factory around a StubCompletionClient with given answers."""
    def build(responses=None, default="Stub completion"):
        stub = StubCompletionClient(responses, default=default)

        def factory(api_key):
            factory.api_keys.append(api_key)
            return stub

        factory.api_keys = []
        factory.stub = stub
        return factory

    return build
