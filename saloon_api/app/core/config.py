"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Saloon Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Path for the SQLite database.  A relative path is resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "saloons.db")

    # Comma‑separated list of principals allowed to read the audit log.
    # Example: ADMIN_PRINCIPALS="alice,ops-bot".
    admin_principals: str = os.getenv("ADMIN_PRINCIPALS", "")

    # When true, updating a saloon is restricted to its owner in the same
    # way as deleting it or adding services.  Set to false to accept
    # updates from any authenticated caller.
    update_requires_owner: bool = _env_flag("UPDATE_REQUIRES_OWNER", "true")

    # When true, appending a service also stamps the saloon's
    # ``updatedAt``.  Off by default: only updates and ratings touch it.
    service_append_touches_updated_at: bool = _env_flag("SERVICE_APPEND_TOUCHES_UPDATED_AT", "false")

    def admin_principal_list(self) -> List[str]:
        """Return ``admin_principals`` split into a list of non-empty names."""
        return [p.strip() for p in self.admin_principals.split(",") if p.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
