"""Runtime settings read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


class SettingsError(ValueError):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    seed_file: Path | None = None
    seed: str = "web"
    log_level: str = "INFO"


def _port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise SettingsError(f"STOREFRONT_PORT must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))

    seed_file = os.getenv("STOREFRONT_SEED_FILE")
    return Settings(
        host=os.getenv("STOREFRONT_HOST", "0.0.0.0"),
        port=_port(os.getenv("STOREFRONT_PORT", "8080")),
        seed_file=Path(seed_file) if seed_file else None,
        seed=os.getenv("STOREFRONT_SEED", "web"),
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper(),
    )
