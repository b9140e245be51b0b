"""Pipeline endpoints, one POST route per generation workflow."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from src.common.logging import setup_logging
from src.pipelines import (
    CommentGenerator,
    PostGenerator,
    SocialPostGenerator,
    SummaryGenerator,
)

logger = setup_logging(module_name="api.functions")

functions_bp = Blueprint("functions", __name__)


def _build(pipeline_cls):
    deps = current_app.extensions["blog_engine"]
    return pipeline_cls(
        deps.store,
        config_provider=deps.config_provider,
        client_factory=deps.client_factory,
    )


def _blog_id_from_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data.get("blogId") or data.get("blog_id")


def _invoke(pipeline_cls, **kwargs):
    """Run a pipeline, turning any failure into a 500 with the raw message."""
    if request.method == "OPTIONS":
        return "ok", 200
    pipeline = _build(pipeline_cls)
    try:
        result = pipeline.run(**kwargs)
    except Exception as e:
        logger.exception("Error in %s", pipeline.name)
        message = getattr(e, "message", None) or str(e)
        return jsonify({"success": False, "error": message}), 500
    return jsonify(result.to_response()), 200


@functions_bp.route("/generate-blog", methods=["POST", "OPTIONS"])
def generate_blog():
    return _invoke(PostGenerator)


@functions_bp.route("/generate-comments", methods=["POST", "OPTIONS"])
def generate_comments():
    return _invoke(CommentGenerator)


@functions_bp.route("/summarize-blog", methods=["POST", "OPTIONS"])
def summarize_blog():
    return _invoke(SummaryGenerator, blog_id=_blog_id_from_body())


@functions_bp.route("/generate-social-posts", methods=["POST", "OPTIONS"])
def generate_social_posts():
    return _invoke(SocialPostGenerator, blog_id=_blog_id_from_body())
