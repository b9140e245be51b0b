"""Flask application exposing the generation pipelines over HTTP."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import colorlog
from flask import Flask, jsonify

from src.common.config import Settings
from src.common.errors import BlogEngineError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@dataclass
class EngineDeps:
    """Collaborators shared by the request handlers of one app."""
    store: object
    config_provider: object = None
    client_factory: object = None


def create_app(
    store=None,
    config_provider=None,
    client_factory=None,
    settings: Optional[Settings] = None,
) -> Flask:
    """Application factory.

    Args:
        store: Content store; defaults to a SupabaseContentStore from env
        config_provider: Flag source; defaults to reading the store per call
        client_factory: Callable api_key -> CompletionClient; defaults to
            the provider named in settings.llm.provider
        settings: Loaded settings; defaults to config/settings.yaml
    """
    settings = settings or Settings.load()
    app = Flask(__name__)
    app.config["DEBUG"] = settings.server.debug
    app.json.sort_keys = False

    if store is None:
        from src.publisher.supabase_store import SupabaseContentStore

        store = SupabaseContentStore(settings=settings)
    if client_factory is None:
        from src.content_writer.client import client_factory_for

        client_factory = client_factory_for(settings)
    app.extensions["blog_engine"] = EngineDeps(
        store=store,
        config_provider=config_provider,
        client_factory=client_factory,
    )

    configure_logging(app)
    register_blueprints(app)
    register_error_handlers(app)

    @app.after_request
    def add_cors_headers(response):
        response.headers.update(CORS_HEADERS)
        return response

    return app


def register_blueprints(app: Flask) -> None:
    from .admin import admin_bp
    from .functions import functions_bp
    from .reader import reader_bp

    app.register_blueprint(functions_bp, url_prefix="/functions/v1")
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(reader_bp, url_prefix="/api")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BlogEngineError)
    def handle_engine_error(e: BlogEngineError):
        return jsonify(e.to_dict()), e.code

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"success": False, "error": "Method not allowed"}), 405


def configure_logging(app: Flask) -> None:
    """Coloured console logging in debug mode."""
    if app.debug:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s[%(asctime)s] %(levelname)-8s%(reset)s %(blue)s%(message)s",
            datefmt="%H:%M:%S",
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
        app.logger.setLevel(logging.DEBUG)
    else:
        app.logger.setLevel(logging.INFO)
