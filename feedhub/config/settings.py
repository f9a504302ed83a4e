import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_SOURCES_PATH = Path(__file__).resolve().parent.parent / "data" / "sources.json"


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got: {value}")
    return value


@dataclass(frozen=True)
class Settings:
    sources_path: Path = DEFAULT_SOURCES_PATH
    log_level: str = "INFO"
    feed_timeout: int = 15       # feeds RSS e canais de vídeo (s)
    scrape_timeout: int = 10     # sitemaps e páginas de produto (s)
    scrape_concurrency: int = 5  # páginas raspadas simultaneamente
    cors_origins: Tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls, load_env: bool = True, dotenv_override: bool = True) -> "Settings":
        """Cria Settings lendo variáveis FEEDHUB_* do ambiente (e do .env, se existir)."""
        if load_env:
            load_dotenv(override=dotenv_override)

        origins = os.getenv("FEEDHUB_CORS_ORIGINS", "*")
        return cls(
            sources_path=Path(os.getenv("FEEDHUB_SOURCES_PATH") or DEFAULT_SOURCES_PATH),
            log_level=os.getenv("FEEDHUB_LOG_LEVEL", "INFO").upper(),
            feed_timeout=_env_int("FEEDHUB_FEED_TIMEOUT", 15),
            scrape_timeout=_env_int("FEEDHUB_SCRAPE_TIMEOUT", 10),
            scrape_concurrency=_env_int("FEEDHUB_SCRAPE_CONCURRENCY", 5),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
