import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_GRAPHQL_URL = "https://leetcode.com/graphql"
DEFAULT_CATEGORY_SLUG = "all-code-essentials"
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000,https://bruteforce-app.vercel.app"


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    graphql_url: str = DEFAULT_GRAPHQL_URL
    category_slug: str = DEFAULT_CATEGORY_SLUG
    limit: int = 100
    skip: int = 0
    allowed_origins: List[str] = field(
        default_factory=lambda: _split_origins(DEFAULT_ALLOWED_ORIGINS)
    )
    # None means "whatever urllib does by default".
    upstream_timeout: Optional[float] = None

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build a ``Settings`` from ``LEETSEARCH_*`` environment variables."""
    load_dotenv()
    return Settings(
        graphql_url=os.getenv("LEETSEARCH_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
        category_slug=os.getenv("LEETSEARCH_CATEGORY_SLUG", DEFAULT_CATEGORY_SLUG),
        limit=int(os.getenv("LEETSEARCH_LIMIT", "100")),
        skip=int(os.getenv("LEETSEARCH_SKIP", "0")),
        allowed_origins=_split_origins(
            os.getenv("LEETSEARCH_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
        ),
        upstream_timeout=_optional_float(os.getenv("LEETSEARCH_UPSTREAM_TIMEOUT")),
        host=os.getenv("LEETSEARCH_HOST", "0.0.0.0"),
        port=int(os.getenv("LEETSEARCH_PORT", "8080")),
        log_level=os.getenv("LEETSEARCH_LOG_LEVEL", "INFO").upper(),
    )
