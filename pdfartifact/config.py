"""Runtime configuration — env-driven.

Centralized config using pydantic-settings. Reads from a .env file and
PDFARTIFACT_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderConfig(BaseSettings):
    """Provider configuration with environment variable overrides.

    All settings can be overridden via PDFARTIFACT_* environment variables
    or a .env file in the working directory.

    Examples
    --------
    Override via environment::

        export PDFARTIFACT_ENVIRONMENT=production
        export PDFARTIFACT_LOG_LEVEL=DEBUG
        export PDFARTIFACT_STATE_PATH=/data/pdf-state.json
        export PDFARTIFACT_STRICT_DELETE=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PDFARTIFACT_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Where the CLI keeps tracked resource identities
    state_path: Path = Path(".pdfartifact/state.json")

    # Surface removal failures other than "file missing" on delete.
    # False restores the silent-ignore behaviour.
    strict_delete: bool = True


# Module-level singleton — import as `from pdfartifact.config import config`
config = ProviderConfig()
