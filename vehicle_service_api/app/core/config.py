"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with no configuration at all, listening on port 3000
with one demo vehicle already registered.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Vehicle Service Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # When enabled, a fresh store starts with vehicle 1 (AP01AB1234).
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
