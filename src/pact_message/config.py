"""Library configuration loaded from environment variables or a .env file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Settings", "settings"]

KNOWN_SPEC_VERSIONS = {"1.0.0", "1.1.0", "2.0.0", "3.0.0", "4.0.0"}


def load_env_file(path: Path) -> None:
    """Load key-value pairs from ``path`` into ``os.environ`` if present."""
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


# Load environment variables from a .env file in the project root.
load_env_file(Path(__file__).resolve().parents[2] / ".env")


@dataclass
class Settings:
    """Library settings."""

    log_level: str = ""
    spec_version: str = ""
    json_indent: int = 2

    # Inspection API
    api_host: str = ""
    api_port: int = 8000

    def __post_init__(self):
        """Load values from environment variables after initialization."""
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.spec_version = os.getenv("PACT_SPEC_VERSION", "3.0.0")
        self.json_indent = int(os.getenv("PACT_JSON_INDENT", "2"))
        self.api_host = os.getenv("PACT_API_HOST", "0.0.0.0")
        self.api_port = int(os.getenv("PACT_API_PORT", "8000"))

    def validate(self) -> None:
        """Validate the settings and raise helpful errors.

        Raises:
            ValueError: If the spec version is unknown, the JSON indent is
                negative or the API port is out of range.
        """
        if self.spec_version not in KNOWN_SPEC_VERSIONS:
            raise ValueError(
                f"Unknown pact specification version: {self.spec_version!r}. "
                f"Known versions: {', '.join(sorted(KNOWN_SPEC_VERSIONS))}"
            )

        if self.json_indent < 0:
            raise ValueError(
                f"Invalid PACT_JSON_INDENT value: {self.json_indent}. Must not be negative."
            )

        if not 0 < self.api_port < 65536:
            raise ValueError(
                f"Invalid PACT_API_PORT value: {self.api_port}. Must be between 1 and 65535."
            )


settings = Settings()

# Configure root logging according to the resolved settings.
logging.basicConfig(level=settings.log_level)
