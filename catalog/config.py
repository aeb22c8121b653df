# catalog/config.py
"""
Configuration read from environment variables.

The ``Settings`` dataclass provides defaults for every field; override them
through the environment before importing this module, or build a ``Settings``
by hand and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("CATALOG_HOST", "0.0.0.0")
    port: int = int(os.getenv("CATALOG_PORT", "8081"))

    # Insert the demo products on startup.
    test_data: bool = _env_bool("CATALOG_TEST_DATA", "true")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Comma separated list, e.g. CORS_ORIGINS="http://localhost:5173,http://localhost:3000"
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))


settings = Settings()
