"""CLI entry point for the generation pipelines.

Usage:
    python -m src.pipelines.main generate-blog
    python -m src.pipelines.main generate-comments
    python -m src.pipelines.main summarize-blog --blog-id 8c1f...
    python -m src.pipelines.main generate-social-posts --blog-id 8c1f...
    python -m src.pipelines.main serve --port 5000
"""

from __future__ import annotations

import argparse
import json
import sys

from src.common.config import Settings
from src.common.errors import BlogEngineError
from src.common.logging import setup_logging
from src.content_writer.client import client_factory_for

from . import PIPELINES

logger = setup_logging(module_name="pipelines.main")

NEEDS_BLOG_ID = {"summarize-blog", "generate-social-posts"}


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a blog generation pipeline once")
    parser.add_argument(
        "command",
        choices=sorted(PIPELINES) + ["serve"],
        help="Pipeline to run, or 'serve' to start the HTTP API",
    )
    parser.add_argument("--blog-id", help="Target post id (summarize-blog, generate-social-posts)")
    parser.add_argument(
        "--provider",
        choices=["openai", "anthropic"],
        default=None,
        help="LLM provider (default: from config/settings.yaml)",
    )
    parser.add_argument("--model", default="", help="Override the model name")
    parser.add_argument("--host", default=None, help="Bind host for 'serve'")
    parser.add_argument("--port", type=int, default=None, help="Bind port for 'serve'")
    args = parser.parse_args()

    settings = Settings.load()
    client_factory = client_factory_for(settings, provider=args.provider, model=args.model)

    from src.publisher.supabase_store import SupabaseContentStore

    store = SupabaseContentStore(settings=settings)

    if args.command == "serve":
        from src.api import create_app

        app = create_app(store=store, client_factory=client_factory, settings=settings)
        app.run(
            host=args.host or settings.server.host,
            port=args.port or settings.server.port,
            debug=settings.server.debug,
        )
        return

    if args.command in NEEDS_BLOG_ID and not args.blog_id:
        parser.error(f"{args.command} requires --blog-id")

    pipeline = PIPELINES[args.command](store, client_factory=client_factory)
    kwargs = {"blog_id": args.blog_id} if args.command in NEEDS_BLOG_ID else {}
    try:
        result = pipeline.run(**kwargs)
    except BlogEngineError as e:
        logger.error("%s failed: %s", args.command, e.message)
        print(json.dumps({"success": False, "error": e.message}, ensure_ascii=False))
        sys.exit(1)

    print(json.dumps(result.to_response(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
