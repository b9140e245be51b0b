"""Reader endpoints: published posts, comments and social copy."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from src.common.errors import BlogEngineError, NotFoundError
from src.common.models import CommentStatus, NewComment

reader_bp = Blueprint("reader", __name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _store():
    return current_app.extensions["blog_engine"].store


def _published_post(slug: str):
    post = _store().get_published_post_by_slug(slug)
    if post is None:
        raise NotFoundError(f"Blog post '{slug}' not found")
    return post


def _text_field(data: dict, key: str) -> str:
    """Trimmed string value of a JSON body field; absent or null reads as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise BlogEngineError(f"'{key}' must be a string", code=400)
    return value.strip()


@reader_bp.route("/blogs", methods=["GET"])
def list_blogs():
    category = request.args.get("category") or None
    limit = request.args.get("limit", DEFAULT_PAGE_SIZE, type=int)
    limit = max(1, min(limit, MAX_PAGE_SIZE))
    posts = _store().list_published_posts(category=category, limit=limit)
    return jsonify({
        "success": True,
        "blogs": [p.model_dump(mode="json") for p in posts],
    })


@reader_bp.route("/blogs/<slug>", methods=["GET"])
def get_blog(slug: str):
    post = _published_post(slug)
    post.view_count = _store().increment_view_count(post)
    return jsonify({"success": True, "blog": post.model_dump(mode="json")})


@reader_bp.route("/blogs/<slug>/comments", methods=["GET"])
def list_comments(slug: str):
    post = _published_post(slug)
    comments = _store().list_approved_comments(post.id)
    return jsonify({
        "success": True,
        "comments": [c.model_dump(mode="json") for c in comments],
    })


@reader_bp.route("/blogs/<slug>/comments", methods=["POST", "OPTIONS"])
def submit_comment(slug: str):
    if request.method == "OPTIONS":
        return "ok", 200
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    name = _text_field(data, "name")
    content = _text_field(data, "content")
    email = _text_field(data, "email")
    if not name or not content:
        raise BlogEngineError("Both 'name' and 'content' are required", code=400)

    post = _published_post(slug)
    comment = _store().insert_comment(
        NewComment(
            blog_id=post.id,
            author_name=name,
            author_email=email or None,
            content=content,
            is_bot_generated=False,
            status=CommentStatus.APPROVED,
        )
    )
    return jsonify({"success": True, "comment": comment.model_dump(mode="json")}), 201


@reader_bp.route("/blogs/<slug>/social-posts", methods=["GET"])
def list_social_posts(slug: str):
    post = _published_post(slug)
    social_posts = _store().list_social_posts(post.id)
    return jsonify({
        "success": True,
        "posts": [s.model_dump(mode="json") for s in social_posts],
    })
