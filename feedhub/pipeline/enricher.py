import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from feedhub.feeds import http
from feedhub.feeds.opengraph import find_og_image
from feedhub.models import NewsItem

logger = logging.getLogger(__name__)

_MAX_ENRICH_WORKERS = 30  # uma página de notícias por vez


def fetch_og_image(link: str, timeout: float = http.SCRAPE_TIMEOUT) -> str:
    html = http.fetch_text(link, timeout=timeout)
    if html is None:
        return ""
    return find_og_image(html) or ""


def _enrich(item: NewsItem, timeout: float) -> NewsItem:
    if not item.needsImage:
        return item
    try:
        image = fetch_og_image(item.link, timeout)
    except Exception as e:
        logger.warning(f"[enrich] og:image lookup failed for {item.link}: {e}")
        image = ""
    return item.model_copy(update={"image": image, "needsImage": False})


def enrich_images(items: Sequence[NewsItem], timeout: float = http.SCRAPE_TIMEOUT) -> List[NewsItem]:
    """
    Segunda passada só sobre a página atual: busca og:image dos itens sem imagem.
    Falhas resultam em imagem vazia, nunca em exceção.
    """
    if not any(item.needsImage for item in items):
        return list(items)

    workers = min(len(items), _MAX_ENRICH_WORKERS)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich") as ex:
        return list(ex.map(lambda item: _enrich(item, timeout), items))
