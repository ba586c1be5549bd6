"""
Environment-driven settings for the catalog service.

Values from a local ``.env`` file are loaded first, then ``Settings``
reads everything from the environment once at import time.  Set
variables before importing this module.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # page size used by the list endpoint when ``limit`` is absent or unusable
    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "2"))

    # The key check is off unless REQUIRE_API_KEY is set.
    require_api_key: bool = _as_bool(os.getenv("REQUIRE_API_KEY", "false"))
    api_key: str = os.getenv("API_KEY", "")

    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
