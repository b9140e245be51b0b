"""System and user prompts for the blog generation pipelines.

Length limits (word counts, character ceilings) are communicated to the
model through prompt text only; nothing here enforces them.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.common.models import Post, SocialPlatform

from .models import CompletionRequest

# === Fixed pools ===

BLOG_TOPICS: tuple[str, ...] = (
    "Artificial Intelligence and Machine Learning",
    "Web Development Best Practices",
    "Future of Technology",
    "Digital Marketing Strategies",
    "Cybersecurity Essentials",
    "Cloud Computing Trends",
    "Mobile App Development",
    "Data Science and Analytics",
    "User Experience Design",
    "Blockchain Technology",
)

BLOG_CATEGORIES: tuple[str, ...] = (
    "Technology", "Business", "Science", "Health", "Education",
    "Innovation", "Trends", "Tutorial", "Opinion", "News",
)

COMMENTER_NAMES: tuple[str, ...] = (
    "Alex Johnson", "Sarah Chen", "Mike Rodriguez", "Emma Wilson", "David Kim",
    "Lisa Brown", "Ryan Taylor", "Maya Patel", "James Davis", "Anna Garcia",
    "Chris Lee", "Jessica Wang", "Kevin Murphy", "Rachel Green", "Tom Anderson",
)


@dataclass(frozen=True)
class PlatformProfile:
    """Style directive and length ceiling for one social platform."""
    platform: SocialPlatform
    max_length: int
    style: str
    hashtags: str


PLATFORM_PROFILES: tuple[PlatformProfile, ...] = (
    PlatformProfile(
        platform=SocialPlatform.TWITTER,
        max_length=280,
        style="concise, engaging, with relevant hashtags",
        hashtags="2-5",
    ),
    PlatformProfile(
        platform=SocialPlatform.LINKEDIN,
        max_length=3000,
        style="professional, insightful, thought-leadership focused",
        hashtags="1-3",
    ),
    PlatformProfile(
        platform=SocialPlatform.FACEBOOK,
        max_length=2000,
        style="conversational, engaging, community-focused",
        hashtags="1-3",
    ),
    PlatformProfile(
        platform=SocialPlatform.INSTAGRAM,
        max_length=2200,
        style="visual-focused caption, inspirational, with strategic hashtags",
        hashtags="3-7",
    ),
)

# === System prompts ===

BLOG_SYSTEM_PROMPT = (
    "You are a professional blog writer. Create engaging, informative blog "
    "posts with clear structure and valuable insights."
)

COMMENT_SYSTEM_PROMPT = (
    "You are generating realistic, engaging comments for blog posts. Create "
    "comments that sound natural and add value to the discussion."
)

SUMMARY_SYSTEM_PROMPT = (
    "You are a professional editor who creates concise, engaging summaries "
    "of blog posts."
)

SOCIAL_SYSTEM_PROMPT = (
    "You are a social media expert who creates platform-specific content "
    "that drives engagement and reaches the right audience."
)


def build_blog_request(topic: str, category: str) -> CompletionRequest:
    """Build the request asking for a JSON blog post on `topic`.

    Args:
        topic: Subject drawn from BLOG_TOPICS
        category: Category drawn from BLOG_CATEGORIES

    Returns:
        CompletionRequest expecting a {title, content, tags} JSON object
    """
    user_prompt = f"""\
Write a comprehensive blog post about "{topic}" in the "{category}" category.
The post should be:
- 400-600 words long
- Well-structured with clear sections
- Informative and engaging
- Professional but accessible
- Include practical insights or tips

Format the response as JSON with:
- title: A compelling title
- content: The full blog post content (plain text, no markdown)
- tags: Array of 3-5 relevant tags"""
    return CompletionRequest(
        system_prompt=BLOG_SYSTEM_PROMPT,
        user_prompt=user_prompt,
        max_tokens=1000,
        temperature=0.7,
        metadata={"topic": topic, "category": category},
    )


def build_comment_request(post_title: str) -> CompletionRequest:
    """Build the request for a short plain-text reader comment."""
    user_prompt = f"""\
Generate a thoughtful comment for this blog post titled "{post_title}".
The comment should be:
- 1-3 sentences long
- Constructive and relevant
- Sound like a real person wrote it
- Add value to the discussion
- Be positive but authentic

Just return the comment text, nothing else."""
    return CompletionRequest(
        system_prompt=COMMENT_SYSTEM_PROMPT,
        user_prompt=user_prompt,
        max_tokens=150,
        temperature=0.8,
    )


def build_summary_request(post: Post) -> CompletionRequest:
    """Build the request for a 2-3 sentence summary of the full post."""
    user_prompt = f"""\
Please create a concise summary of this blog post. The summary should be 2-3 sentences long and capture the main points and key insights.

Title: {post.title}

Content: {post.content}

Create a summary that would help readers quickly understand what the blog post is about and its main value."""
    return CompletionRequest(
        system_prompt=SUMMARY_SYSTEM_PROMPT,
        user_prompt=user_prompt,
        max_tokens=150,
        temperature=0.3,
    )


def build_social_request(post: Post, profile: PlatformProfile) -> CompletionRequest:
    """Build the request for one platform's promotional copy.

    Args:
        post: Source blog post (title, body, category and tags are embedded)
        profile: Target platform profile

    Returns:
        CompletionRequest for plain-text social copy
    """
    platform = profile.platform.value
    user_prompt = f"""\
Create a {platform} post for this blog article.

Blog Title: {post.title}
Blog Content: {post.content}
Blog Category: {post.category}
Blog Tags: {", ".join(post.tags)}

Requirements for {platform}:
- Style: {profile.style}
- Maximum length: {profile.max_length} characters
- Include a call-to-action to read the full blog
- Make it engaging and shareable
- Include relevant hashtags ({profile.hashtags} for {platform})

Return only the post content, no additional text or formatting."""
    return CompletionRequest(
        system_prompt=SOCIAL_SYSTEM_PROMPT,
        user_prompt=user_prompt,
        max_tokens=300,
        temperature=0.7,
        metadata={"platform": platform},
    )
