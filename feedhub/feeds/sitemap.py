import base64
import logging
from concurrent.futures import Executor
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from pydantic import ValidationError

from feedhub.config.sources import ProductSource
from feedhub.feeds import http
from feedhub.feeds.base import BaseFeed
from feedhub.feeds.opengraph import extract_page_meta
from feedhub.feeds.pricing import extract_price, selectors_for
from feedhub.models import Product

logger = logging.getLogger(__name__)

MAX_SITEMAP_URLS = 50      # poda por sitemap para limitar o trabalho total
MAX_PAGES_PER_SOURCE = 15  # páginas efetivamente raspadas por sitemap
MAX_TITLE_LEN = 100
MAX_DESCRIPTION_LEN = 200


def product_id(url: str) -> str:
    # determinístico por URL; truncado, então colisões são possíveis
    return base64.b64encode(url.encode("utf-8")).decode("ascii")[:16]


def absolute_image(image: str, domain: str) -> str:
    if not image:
        return ""
    # cobre caminhos relativos e protocol-relative (//cdn...)
    return urljoin(f"https://{domain}/", image)


def parse_sitemap(xml: str, max_urls: int = MAX_SITEMAP_URLS) -> List[str]:
    soup = BeautifulSoup(xml, "html.parser")
    urls: List[str] = []
    for url_tag in soup.find_all("url"):
        loc = url_tag.find("loc")
        if loc is None:
            continue
        value = loc.get_text(strip=True)
        if value:
            urls.append(value)
    return urls[:max_urls]


class ProductSitemapFeed(BaseFeed[Product]):
    def __init__(
        self,
        source: ProductSource,
        scrape_pool: Executor,
        timeout: float = http.SCRAPE_TIMEOUT,
        max_pages: int = MAX_PAGES_PER_SOURCE,
    ):
        self.source = source
        self.scrape_pool = scrape_pool
        self.timeout = timeout
        self.max_pages = max_pages

    def fetch(self) -> List[Product]:
        logger.info(f"[sitemap] processing {self.source.sitemap}")
        xml = http.fetch_text(self.source.sitemap, timeout=self.timeout)
        if xml is None:
            return []

        try:
            urls = parse_sitemap(xml)
        except Exception as e:
            logger.warning(f"[sitemap] could not parse {self.source.sitemap}: {e}")
            return []
        logger.info(f"[sitemap] found {len(urls)} URLs in {self.source.sitemap}")

        # todas as páginas passam pelo pool compartilhado (limite de concorrência)
        futures = [self.scrape_pool.submit(self.scrape, url) for url in urls[: self.max_pages]]
        products: List[Product] = []
        for fut in futures:
            product = fut.result()
            if product is not None:
                products.append(product)
        return products

    def scrape(self, url: str) -> Optional[Product]:
        html = http.fetch_text(url, timeout=self.timeout)
        if html is None:
            return None

        domain = self.source.domain
        try:
            soup = BeautifulSoup(html, "html.parser")
            meta = extract_page_meta(soup)
            # sem título: não é página de produto
            if not meta.title.strip():
                return None
            price = extract_price(soup, selectors_for(domain))
            return Product(
                id=product_id(url),
                title=meta.title[:MAX_TITLE_LEN],
                description=meta.description[:MAX_DESCRIPTION_LEN],
                image=absolute_image(meta.image, domain),
                price=price,
                url=url,
                domain=domain,
            )
        except ValidationError as e:
            logger.debug(f"[scrape] dropped {url}: {e}")
            return None
        except Exception as e:
            logger.warning(f"[scrape] error scraping {url}: {e}")
            return None
