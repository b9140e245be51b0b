"""Tests for prompt construction and the fixed pools."""

from src.common.models import SocialPlatform
from src.content_writer.prompts import (
    BLOG_CATEGORIES,
    BLOG_SYSTEM_PROMPT,
    BLOG_TOPICS,
    COMMENTER_NAMES,
    PLATFORM_PROFILES,
    build_blog_request,
    build_comment_request,
    build_social_request,
    build_summary_request,
)


class TestPools:
    def test_pool_sizes(self):
        assert len(BLOG_TOPICS) == 10
        assert len(BLOG_CATEGORIES) == 10
        assert len(COMMENTER_NAMES) == 15
        assert len(set(COMMENTER_NAMES)) == 15

    def test_platform_profiles(self):
        limits = {p.platform: p.max_length for p in PLATFORM_PROFILES}
        assert limits == {
            SocialPlatform.TWITTER: 280,
            SocialPlatform.LINKEDIN: 3000,
            SocialPlatform.FACEBOOK: 2000,
            SocialPlatform.INSTAGRAM: 2200,
        }


class TestBlogRequest:
    def test_embeds_topic_and_category(self):
        request = build_blog_request("Cybersecurity Essentials", "Tutorial")
        assert '"Cybersecurity Essentials"' in request.user_prompt
        assert '"Tutorial"' in request.user_prompt
        assert "400-600 words" in request.user_prompt
        assert request.system_prompt == BLOG_SYSTEM_PROMPT

    def test_asks_for_json_fields(self):
        prompt = build_blog_request("x", "y").user_prompt
        for field in ("title", "content", "tags"):
            assert f"- {field}:" in prompt

    def test_limits(self):
        request = build_blog_request("x", "y")
        assert request.max_tokens == 1000
        assert request.temperature == 0.7
        assert request.metadata == {"topic": "x", "category": "y"}


class TestCommentRequest:
    def test_embeds_title(self):
        request = build_comment_request("Why Rust?")
        assert '"Why Rust?"' in request.user_prompt
        assert "1-3 sentences" in request.user_prompt
        assert request.max_tokens == 150
        assert request.temperature == 0.8


class TestSummaryRequest:
    def test_embeds_title_and_body(self, post_factory):
        post = post_factory(title="Edge AI", content="Full body about edge inference.")
        request = build_summary_request(post)
        assert "Title: Edge AI" in request.user_prompt
        assert "Content: Full body about edge inference." in request.user_prompt
        assert "2-3 sentences" in request.user_prompt
        assert request.temperature == 0.3


class TestSocialRequest:
    def test_embeds_post_fields(self, post_factory):
        post = post_factory(title="Edge AI", category="Innovation", tags=["ai", "edge"])
        twitter = PLATFORM_PROFILES[0]
        request = build_social_request(post, twitter)
        prompt = request.user_prompt
        assert "Create a twitter post" in prompt
        assert "Blog Title: Edge AI" in prompt
        assert "Blog Category: Innovation" in prompt
        assert "Blog Tags: ai, edge" in prompt
        assert "Maximum length: 280 characters" in prompt
        assert "call-to-action" in prompt
        assert "2-5" in prompt
        assert request.metadata == {"platform": "twitter"}

    def test_instagram_hashtag_range(self, post_factory):
        instagram = [p for p in PLATFORM_PROFILES if p.platform == SocialPlatform.INSTAGRAM][0]
        prompt = build_social_request(post_factory(), instagram).user_prompt
        assert "3-7" in prompt
        assert "2200" in prompt
