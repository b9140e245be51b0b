"""Supabase Content Store — posts, comments, social posts and config flags.

All reads and writes of the generation pipelines and the HTTP layer go
through this class. The Supabase client is created lazily on first use,
so constructing a store never touches the network.

Usage:
    store = SupabaseContentStore()
    flags = store.get_config_values()
    post = store.get_post("8c1f...")
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from src.common.config import Settings, get_supabase_credentials
from src.common.errors import PersistenceError
from src.common.logging import setup_logging
from src.common.models import (
    Comment,
    CommentStatus,
    ConfigFlag,
    NewComment,
    NewPost,
    NewSocialPost,
    Post,
    PostStatus,
    PostWithCommentCount,
    SocialPost,
    SystemStats,
    UserRole,
)

logger = setup_logging(module_name="publisher.supabase_store")

SYSTEM_AUTHOR_PASSWORD = "system-generated"
AUTH_USERS_PAGE_SIZE = 100


class SupabaseContentStore:
    """Table access for the blog engine on top of supabase-py.

    Credentials come from SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY
    unless given explicitly.
    """

    def __init__(
        self,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        settings: Settings | None = None,
    ):
        env_url, env_key = get_supabase_credentials()
        self._supabase_url = supabase_url or env_url
        self._supabase_key = supabase_key or env_key
        self.settings = settings or Settings.load()
        self.tables = self.settings.supabase
        self._client = None  # Lazy init
        self._system_author_id: Optional[str] = None

    def _get_client(self):
        """Lazy-initialize Supabase client."""
        if self._client is not None:
            return self._client
        if not self._supabase_url or not self._supabase_key:
            raise PersistenceError(
                "SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY must be set in .env. "
                "See config/.env.example."
            )
        from supabase import create_client

        self._client = create_client(self._supabase_url, self._supabase_key)
        logger.info("Connected to Supabase: %s", self._supabase_url)
        return self._client

    def _table(self, name: str):
        return self._get_client().table(name)

    @staticmethod
    def _execute(query, action: str):
        """Run a PostgREST query, converting any failure to PersistenceError."""
        try:
            return query.execute()
        except Exception as e:
            logger.error("Supabase %s failed: %s", action, e)
            raise PersistenceError(f"Failed to {action}: {e}") from e

    @staticmethod
    def _first(rows: Optional[list[dict]]) -> Optional[dict]:
        return rows[0] if rows else None

    # --- Configuration flags ---

    def list_configs(self) -> list[ConfigFlag]:
        """All configuration flags ordered by key."""
        result = self._execute(
            self._table(self.tables.configs_table).select("*").order("key"),
            "list configs",
        )
        return [ConfigFlag.model_validate(row) for row in result.data or []]

    def get_config_values(self, keys: Optional[list[str]] = None) -> dict[str, str]:
        """Fetch flags as a key -> value mapping in a single query."""
        query = self._table(self.tables.configs_table).select("key, value")
        if keys:
            query = query.in_("key", list(keys))
        result = self._execute(query, "read configs")
        return {
            row["key"]: row.get("value") or ""
            for row in result.data or []
        }

    def get_config(self, key: str) -> Optional[str]:
        """Value of one flag, or None when the row is absent."""
        result = self._execute(
            self._table(self.tables.configs_table).select("value").eq("key", key).limit(1),
            f"read config '{key}'",
        )
        row = self._first(result.data)
        return row.get("value") if row else None

    def set_config(self, key: str, value: str) -> ConfigFlag:
        """Write a flag value; last write wins."""
        result = self._execute(
            self._table(self.tables.configs_table).upsert(
                {"key": key, "value": value}, on_conflict="key"
            ),
            f"update config '{key}'",
        )
        row = self._first(result.data) or {"key": key, "value": value}
        logger.info("Config updated: %s", key)
        return ConfigFlag.model_validate(row)

    # --- Posts ---

    def get_post(self, post_id: str) -> Optional[Post]:
        result = self._execute(
            self._table(self.tables.posts_table).select("*").eq("id", post_id).limit(1),
            f"read post {post_id}",
        )
        row = self._first(result.data)
        return Post.model_validate(row) if row else None

    def get_published_post_by_slug(self, slug: str) -> Optional[Post]:
        result = self._execute(
            self._table(self.tables.posts_table)
            .select("*")
            .eq("slug", slug)
            .eq("status", PostStatus.PUBLISHED.value)
            .limit(1),
            f"read post '{slug}'",
        )
        row = self._first(result.data)
        return Post.model_validate(row) if row else None

    def list_published_posts(
        self, category: Optional[str] = None, limit: int = 20
    ) -> list[Post]:
        """Published posts, newest first, optionally filtered by category."""
        query = (
            self._table(self.tables.posts_table)
            .select("*")
            .eq("status", PostStatus.PUBLISHED.value)
        )
        if category:
            query = query.eq("category", category)
        result = self._execute(
            query.order("published_at", desc=True).limit(limit),
            "list posts",
        )
        return [Post.model_validate(row) for row in result.data or []]

    def insert_post(self, new_post: NewPost) -> Post:
        result = self._execute(
            self._table(self.tables.posts_table).insert(new_post.to_supabase_dict()),
            f"insert post '{new_post.slug}'",
        )
        row = self._first(result.data)
        if row is None:
            raise PersistenceError(f"Insert of post '{new_post.slug}' returned no row")
        logger.info("Post inserted: %s", new_post.slug)
        return Post.model_validate(row)

    def update_post_summary(self, post_id: str, summary: str) -> None:
        self._execute(
            self._table(self.tables.posts_table).update({"summary": summary}).eq("id", post_id),
            f"update summary of post {post_id}",
        )

    def increment_view_count(self, post: Post) -> int:
        """Read-modify-write of view_count; concurrent readers may lose increments."""
        new_count = post.view_count + 1
        self._execute(
            self._table(self.tables.posts_table)
            .update({"view_count": new_count})
            .eq("id", post.id),
            f"update view count of post {post.id}",
        )
        return new_count

    def list_recent_published_with_comment_counts(
        self, limit: int = 5
    ) -> list[PostWithCommentCount]:
        """Most recently published posts with their comment counts."""
        result = self._execute(
            self._table(self.tables.posts_table)
            .select(f"*, {self.tables.comments_table}(count)")
            .eq("status", PostStatus.PUBLISHED.value)
            .order("published_at", desc=True)
            .limit(limit),
            "list recent posts",
        )
        posts = []
        for row in result.data or []:
            row = dict(row)
            embedded = row.pop(self.tables.comments_table, None)
            posts.append(
                PostWithCommentCount(
                    post=Post.model_validate(row),
                    comment_count=_embedded_count(embedded),
                )
            )
        return posts

    # --- Comments ---

    def insert_comment(self, new_comment: NewComment) -> Comment:
        result = self._execute(
            self._table(self.tables.comments_table).insert(new_comment.to_supabase_dict()),
            f"insert comment on post {new_comment.blog_id}",
        )
        row = self._first(result.data)
        if row is None:
            raise PersistenceError("Comment insert returned no row")
        return Comment.model_validate(row)

    def list_approved_comments(self, blog_id: str) -> list[Comment]:
        result = self._execute(
            self._table(self.tables.comments_table)
            .select("*")
            .eq("blog_id", blog_id)
            .eq("status", CommentStatus.APPROVED.value)
            .order("created_at", desc=True),
            f"list comments of post {blog_id}",
        )
        return [Comment.model_validate(row) for row in result.data or []]

    # --- Social posts ---

    def insert_social_post(self, new_social_post: NewSocialPost) -> SocialPost:
        result = self._execute(
            self._table(self.tables.social_posts_table).insert(
                new_social_post.to_supabase_dict()
            ),
            f"insert {new_social_post.platform.value} post",
        )
        row = self._first(result.data)
        if row is None:
            raise PersistenceError("Social post insert returned no row")
        return SocialPost.model_validate(row)

    def list_social_posts(self, blog_id: str) -> list[SocialPost]:
        result = self._execute(
            self._table(self.tables.social_posts_table)
            .select("*")
            .eq("blog_id", blog_id)
            .order("created_at", desc=True),
            f"list social posts of post {blog_id}",
        )
        return [SocialPost.model_validate(row) for row in result.data or []]

    # --- System author ---

    def resolve_system_author(self) -> str:
        """Return the system user's id, creating the auth user only if absent.

        Lookup is keyed on the configured system author email, so repeated
        calls reuse the same identity.
        """
        if self._system_author_id:
            return self._system_author_id

        email = self.tables.system_author_email.lower()
        admin = self._get_client().auth.admin
        author_id = self._find_auth_user(admin, email)
        if author_id is None:
            try:
                response = admin.create_user({
                    "email": email,
                    "password": SYSTEM_AUTHOR_PASSWORD,
                    "email_confirm": True,
                })
            except Exception as e:
                raise PersistenceError(f"Failed to create system author: {e}") from e
            if response is None or response.user is None:
                raise PersistenceError("Failed to create system author: empty response")
            author_id = response.user.id
            logger.info("Created system author %s", email)
            self._ensure_profile(author_id)

        self._system_author_id = author_id
        return author_id

    @staticmethod
    def _find_auth_user(admin, email: str) -> Optional[str]:
        """Scan the auth user list page by page until a short page is returned."""
        page = 1
        while True:
            try:
                users = admin.list_users(page=page, per_page=AUTH_USERS_PAGE_SIZE) or []
            except Exception as e:
                raise PersistenceError(f"Failed to list auth users: {e}") from e
            for user in users:
                if (getattr(user, "email", "") or "").lower() == email:
                    return user.id
            if len(users) < AUTH_USERS_PAGE_SIZE:
                return None
            page += 1

    def _ensure_profile(self, user_id: str) -> None:
        self._execute(
            self._table(self.tables.profiles_table).upsert(
                {
                    "id": user_id,
                    "full_name": self.tables.system_author_name,
                    "role": UserRole.AUTHOR.value,
                },
                on_conflict="id",
            ),
            "upsert system author profile",
        )

    # --- Aggregates ---

    def _count(self, table: str, **filters: Any) -> int:
        query = self._table(table).select("*", count="exact", head=True)
        for column, value in filters.items():
            if column == "created_since":
                query = query.gte("created_at", value)
            else:
                query = query.eq(column, value)
        result = self._execute(query, f"count {table}")
        return result.count or 0

    def get_stats(self, now: Optional[datetime] = None) -> SystemStats:
        """Aggregate counts for the admin dashboard.

        today_activity counts posts created since local midnight.
        """
        now = now or datetime.now().astimezone()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        posts = self.tables.posts_table
        comments = self.tables.comments_table
        return SystemStats(
            total_blogs=self._count(posts),
            published_blogs=self._count(posts, status=PostStatus.PUBLISHED.value),
            draft_blogs=self._count(posts, status=PostStatus.DRAFT.value),
            total_comments=self._count(comments),
            bot_comments=self._count(comments, is_bot_generated=True),
            social_posts=self._count(self.tables.social_posts_table),
            today_activity=self._count(posts, created_since=midnight.isoformat()),
        )


def _embedded_count(embedded: Any) -> int:
    """Read PostgREST's `table(count)` embed: [{"count": n}]."""
    if isinstance(embedded, list) and embedded:
        first = embedded[0]
        if isinstance(first, dict):
            return int(first.get("count") or 0)
    if isinstance(embedded, dict):
        return int(embedded.get("count") or 0)
    return 0
