"""Global configuration — env vars and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _default_extensions() -> list[str]:
    return [".py"]


@dataclass
class CosaCodeConfig:
    """Application-wide configuration."""

    max_file_size: int = 1_048_576
    extensions: list[str] = field(default_factory=_default_extensions)
    web_host: str = "127.0.0.1"  # loopback only
    web_port: int = 8471

    @classmethod
    def load(cls) -> CosaCodeConfig:
        """Load config from environment variables."""
        config = cls()

        env_size = os.environ.get("COSACODE_MAX_FILE_SIZE")
        if env_size:
            config.max_file_size = int(env_size)

        env_port = os.environ.get("COSACODE_WEB_PORT")
        if env_port:
            config.web_port = int(env_port)

        env_ext = os.environ.get("COSACODE_EXTENSIONS")
        if env_ext:
            config.extensions = [
                e if e.startswith(".") else f".{e}"
                for e in (part.strip() for part in env_ext.split(","))
                if e
            ]

        return config
