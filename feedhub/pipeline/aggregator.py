import logging
import unicodedata
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, TypeVar

from feedhub.feeds.base import BaseFeed
from feedhub.models import Page
from feedhub.utils.dates import parse_timestamp

logger = logging.getLogger(__name__)

T = TypeVar("T")

SCRAPE_CONCURRENCY = 5  # páginas de produto buscadas ao mesmo tempo


@contextmanager
def scrape_pool(max_workers: int = SCRAPE_CONCURRENCY) -> Iterator[ThreadPoolExecutor]:
    """Pool compartilhado por todos os sitemaps de uma mesma request."""
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="scrape") as pool:
        yield pool


def gather(feeds: Sequence[BaseFeed[T]]) -> List[T]:
    """
    Busca todas as fontes em paralelo (uma thread por fonte) e achata o resultado.

    A ordem de saída segue a ordem das fontes; uma fonte que levanta exceção
    contribui com lista vazia.
    """
    if not feeds:
        return []

    results: List[List[T]] = [[] for _ in feeds]
    with ThreadPoolExecutor(max_workers=len(feeds), thread_name_prefix="feed") as ex:
        futures = [ex.submit(feed.fetch) for feed in feeds]
        for i, fut in enumerate(futures):
            try:
                results[i] = fut.result() or []
            except Exception as e:
                logger.warning(f"[gather] source {feeds[i]!r} failed: {e}")

    return [item for chunk in results for item in chunk]


def sort_by_published(items: Sequence[T], get_date: Callable[[T], Optional[str]]) -> List[T]:
    """Mais recentes primeiro; datas inválidas vão para o fim mantendo a ordem relativa."""
    def key(item: T):
        ts = parse_timestamp(get_date(item))
        if ts is None:
            return (1, 0.0)
        return (0, -ts)

    # sorted() é estável: empates preservam a ordem de entrada
    return sorted(items, key=key)


def title_key(title: str) -> str:
    normalized = unicodedata.normalize("NFKD", title)
    return "".join(c for c in normalized if not unicodedata.combining(c)).casefold()


def sort_by_title(items: Sequence[T], get_title: Callable[[T], str]) -> List[T]:
    return sorted(items, key=lambda item: title_key(get_title(item)))


def paginate(items: Sequence[T], offset: int, limit: int) -> Page[T]:
    total = len(items)
    return Page(
        items=list(items[offset:offset + limit]),
        hasMore=offset + limit < total,
        total=total,
    )
