"""Shared Pydantic data models for the blog engine.

These models mirror the Supabase tables (`blogs`, `comments`,
`social_media_posts`, `system_configs`, `user_profiles`). Rows returned by
the store are validated through them before leaving the store layer.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# === Enums ===

class PostStatus(str, Enum):
    """Lifecycle of a blog post."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class CommentStatus(str, Enum):
    """Moderation status of a comment."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SocialPlatform(str, Enum):
    """Target platforms for generated social copy."""
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


class SocialPostStatus(str, Enum):
    """Lifecycle of a social media post."""
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"
    FAILED = "failed"


class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    AUTHOR = "author"


# === Table rows ===

class Post(BaseModel):
    """Row of the `blogs` table."""
    id: str
    title: str
    content: str
    summary: Optional[str] = None
    slug: str
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT
    author_id: str = ""
    view_count: int = 0
    like_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None

    @property
    def has_summary(self) -> bool:
        return bool(self.summary)


class Comment(BaseModel):
    """Row of the `comments` table."""
    id: str
    blog_id: str
    author_name: str
    author_email: Optional[str] = None
    content: str
    is_bot_generated: bool = False
    status: CommentStatus = CommentStatus.PENDING
    created_at: Optional[datetime] = None


class SocialPost(BaseModel):
    """Row of the `social_media_posts` table."""
    id: str
    blog_id: str
    platform: SocialPlatform
    content: str
    status: SocialPostStatus = SocialPostStatus.DRAFT
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    engagement_metrics: Any = None
    created_at: Optional[datetime] = None


class ConfigFlag(BaseModel):
    """Row of the `system_configs` table."""
    key: str
    value: str = ""
    description: Optional[str] = None


class UserProfile(BaseModel):
    """Row of the `user_profiles` table."""
    id: str
    full_name: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    role: UserRole = UserRole.AUTHOR


# === Insert payloads ===

class NewPost(BaseModel):
    """Insert payload for a generated or authored post."""
    title: str
    content: str
    slug: str
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT
    author_id: str
    published_at: Optional[datetime] = None

    def to_supabase_dict(self) -> dict:
        """Serialize for Supabase insert, omitting None values."""
        return self.model_dump(mode="json", exclude_none=True)


class NewComment(BaseModel):
    """Insert payload for a comment."""
    blog_id: str
    author_name: str
    author_email: Optional[str] = None
    content: str
    is_bot_generated: bool = False
    status: CommentStatus = CommentStatus.APPROVED

    def to_supabase_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class NewSocialPost(BaseModel):
    """Insert payload for a social media post."""
    blog_id: str
    platform: SocialPlatform
    content: str
    status: SocialPostStatus = SocialPostStatus.DRAFT

    def to_supabase_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


# === Aggregates ===

class PostWithCommentCount(BaseModel):
    """A recent published post together with its number of comments."""
    post: Post
    comment_count: int = 0


class SystemStats(BaseModel):
    """Aggregate counts shown on the admin dashboard."""
    total_blogs: int = 0
    published_blogs: int = 0
    draft_blogs: int = 0
    total_comments: int = 0
    bot_comments: int = 0
    social_posts: int = 0
    today_activity: int = 0
