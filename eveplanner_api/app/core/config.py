"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Tests and
embedding code may construct their own ``Settings`` instance and pass
it to ``create_app`` instead of relying on the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List


# Relative paths in the settings are resolved against the package
# directory (``eveplanner_api/``).
PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "EvePlanner API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite database file.  Relative paths are resolved by
    # ``resolve_path``.
    database_url: str = os.getenv("DATABASE_URL", "eveplanner.db")

    # Directory holding uploaded file bytes, one object per File record.
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    max_upload_size: int = int(os.getenv("MAX_UPLOAD_SIZE", str(50 * 1024 * 1024)))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Directory with the static front‑end.  Mounted at ``/`` when set.
    static_dir: str = os.getenv("STATIC_DIR", "")

    # Remove upload objects that no File record references on startup.
    reconcile_uploads: bool = _env_flag("RECONCILE_UPLOADS", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def resolve_path(value: str) -> str:
    """Return ``value`` as an absolute path.

    Absolute paths are returned unchanged; relative ones are resolved
    against ``PACKAGE_DIR``.
    """
    if os.path.isabs(value):
        return value
    return str((PACKAGE_DIR / value).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
