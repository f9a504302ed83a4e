from typing import Annotated, Generic, List, TypeVar
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _require_text(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value


def _require_http_url(value: str) -> str:
    parsed = urlparse(value or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"invalid URL: {value!r}")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_require_text)]
HttpUrlStr = Annotated[str, AfterValidator(_require_http_url)]

# Registros imutáveis, criados a cada request (sem persistência)
_FROZEN = ConfigDict(frozen=True)


class NewsItem(BaseModel):
    model_config = _FROZEN

    title: NonEmptyStr
    link: HttpUrlStr
    description: str = ""
    pubDate: str = ""  # formato original da fonte (não normalizado)
    guid: str = ""
    image: str = ""
    domain: str
    # usado apenas pelo enriquecimento, nunca serializado
    needsImage: bool = Field(default=False, exclude=True)


class Product(BaseModel):
    model_config = _FROZEN

    id: str
    title: NonEmptyStr
    description: str = ""
    image: str = ""
    price: str
    url: HttpUrlStr
    domain: str


class VideoItem(BaseModel):
    model_config = _FROZEN

    id: str
    videoId: NonEmptyStr
    title: NonEmptyStr
    thumbnail: str
    channelName: str = ""
    published: str = ""
    views: str = "0"


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Janela offset/limit calculada sobre o agregado completo."""

    items: List[T]
    hasMore: bool
    total: int
