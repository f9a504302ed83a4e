"""
Source registry: lista estática de fontes (feeds RSS, sitemaps de produto e
canais de vídeo) carregada de um arquivo JSON.

Formato esperado:

    {
        "news": ["https://site/feed.xml", ...],
        "products": [{"sitemap": "https://loja/sitemap.xml", "domain": "loja.com"}, ...],
        "videos": ["UCxxxxxxxxxxxxxxxxxxxxxx", ...]
    }

O registro é imutável e passado explicitamente para os pipelines.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration error."""

    pass


def _is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ProductSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    sitemap: str
    domain: str
    # legado: presente nos arquivos antigos, não é usado na extração
    xpath: Optional[str] = None

    @field_validator("sitemap")
    @classmethod
    def sitemap_must_be_url(cls, v: str) -> str:
        if not _is_valid_url(v):
            raise ValueError(f"invalid sitemap URL: {v!r}")
        return v

    @field_validator("domain")
    @classmethod
    def domain_not_empty(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("domain cannot be empty")
        return v


class SourceRegistry(BaseModel):
    model_config = ConfigDict(frozen=True)

    news: Tuple[str, ...] = ()
    products: Tuple[ProductSource, ...] = ()
    videos: Tuple[str, ...] = ()

    @field_validator("news")
    @classmethod
    def news_must_be_urls(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        bad = [u for u in v if not _is_valid_url(u)]
        if bad:
            raise ValueError(f"invalid feed URLs: {bad}")
        return v

    @field_validator("videos")
    @classmethod
    def channel_ids_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        cleaned = tuple(c.strip() for c in v)
        if any(not c for c in cleaned):
            raise ValueError("channel id cannot be empty")
        return cleaned


def load_sources(path) -> SourceRegistry:
    """
    Carrega e valida o registro de fontes.

    Raises:
        ConfigError: arquivo ausente, JSON inválido ou formato inesperado.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Sources file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse sources file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Sources file must contain a JSON object: {path}")

    try:
        registry = SourceRegistry(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid sources file {path}: {e}")

    logger.info(
        f"Loaded sources: {len(registry.news)} feeds, "
        f"{len(registry.products)} sitemaps, {len(registry.videos)} channels"
    )
    return registry
