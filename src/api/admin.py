"""Admin endpoints: configuration flags and dashboard counts."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from src.common.config import CONFIG_KEYS
from src.common.errors import BlogEngineError

admin_bp = Blueprint("admin", __name__)


def _store():
    return current_app.extensions["blog_engine"].store


@admin_bp.route("/configs", methods=["GET"])
def list_configs():
    configs = _store().list_configs()
    return jsonify({
        "success": True,
        "configs": [c.model_dump(mode="json") for c in configs],
    })


@admin_bp.route("/configs/<key>", methods=["PUT", "OPTIONS"])
def update_config(key: str):
    if request.method == "OPTIONS":
        return "ok", 200
    if key not in CONFIG_KEYS:
        raise BlogEngineError(f"Unknown config key: {key}", code=400)
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    value = data.get("value")
    if not isinstance(value, str):
        raise BlogEngineError("'value' must be a string", code=400)
    flag = _store().set_config(key, value)
    current_app.logger.info("Config %s updated", key)
    return jsonify({"success": True, "config": flag.model_dump(mode="json")})


@admin_bp.route("/stats", methods=["GET"])
def stats():
    return jsonify({"success": True, "stats": _store().get_stats().model_dump()})
