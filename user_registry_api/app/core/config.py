"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in practice only the
listen port is expected to be overridden.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Listen address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path of the interactive Swagger UI.  The OpenAPI document itself is
    # always served at ``/openapi.json``.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
