# Publisher — Supabase content store and slug helpers
"""
Publisher module: persistence of posts, comments, social posts and
configuration flags in the hosted Supabase project.
"""

from .slugs import SLUG_PATTERN, slugify, unique_slug
from .supabase_store import SupabaseContentStore

__all__ = [
    "SLUG_PATTERN",
    "SupabaseContentStore",
    "slugify",
    "unique_slug",
]
