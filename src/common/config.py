"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
Feature flags and the OpenAI key are NOT read here: they live in the
`system_configs` table and are fetched per pipeline call.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


# === Recognized system_configs keys ===
BLOG_GENERATION_ENABLED = "blog_generation_enabled"
BLOG_GENERATION_INTERVAL = "blog_generation_interval"
COMMENT_BOT_ENABLED = "comment_bot_enabled"
COMMENT_BOT_INTERVAL = "comment_bot_interval"
SOCIAL_MEDIA_AUTOMATION_ENABLED = "social_media_automation_enabled"
OPENAI_API_KEY = "openai_api_key"

CONFIG_KEYS = (
    BLOG_GENERATION_ENABLED,
    BLOG_GENERATION_INTERVAL,
    COMMENT_BOT_ENABLED,
    COMMENT_BOT_INTERVAL,
    SOCIAL_MEDIA_AUTOMATION_ENABLED,
    OPENAI_API_KEY,
)


class LLMSettings(BaseModel):
    """LLM API settings."""
    provider: str = "openai"
    openai_model: str = "gpt-3.5-turbo"
    anthropic_model: str = "claude-sonnet-4-5-20250929"


class SupabaseSettings(BaseModel):
    """Table names in the hosted Supabase project."""
    posts_table: str = "blogs"
    comments_table: str = "comments"
    social_posts_table: str = "social_media_posts"
    configs_table: str = "system_configs"
    profiles_table: str = "user_profiles"
    system_author_email: str = "system@aiblog.com"
    system_author_name: str = "AI Blog System"


class ServerSettings(BaseModel):
    """Flask server settings."""
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False


class Settings(BaseModel):
    """Top-level application settings."""
    llm: LLMSettings = Field(default_factory=LLMSettings)
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @classmethod
    def load(cls) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


def get_supabase_credentials() -> tuple[str, str]:
    """Get Supabase URL and service key from environment.

    Returns empty strings when unset; the store raises on first use.
    """
    url = os.getenv("SUPABASE_URL", "")
    key = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "") or os.getenv("SUPABASE_SERVICE_KEY", "")
    return url, key


# Singleton settings instance
settings = Settings.load()
