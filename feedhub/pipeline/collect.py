"""Pipelines por domínio: fontes -> fetch paralelo -> normalização -> ordenação -> página."""
from typing import Optional

from feedhub.config import Settings, SourceRegistry
from feedhub.feeds import ProductSitemapFeed, RssFeed, YouTubeChannelFeed
from feedhub.models import NewsItem, Page, Product, VideoItem
from feedhub.pipeline.aggregator import gather, paginate, scrape_pool, sort_by_published, sort_by_title
from feedhub.pipeline.enricher import enrich_images


def news_page(registry: SourceRegistry, offset: int, limit: int,
              settings: Optional[Settings] = None) -> Page[NewsItem]:
    settings = settings or Settings()
    feeds = [RssFeed(url, timeout=settings.feed_timeout) for url in registry.news]

    items = [item for item in gather(feeds) if item.pubDate]
    items = sort_by_published(items, lambda n: n.pubDate)
    page = paginate(items, offset, limit)

    # enriquecimento só na página: custo limitado por request
    enriched = enrich_images(page.items, timeout=settings.scrape_timeout)
    return Page(items=enriched, hasMore=page.hasMore, total=page.total)


def product_page(registry: SourceRegistry, offset: int, limit: int,
                 settings: Optional[Settings] = None) -> Page[Product]:
    settings = settings or Settings()
    with scrape_pool(settings.scrape_concurrency) as pool:
        feeds = [
            ProductSitemapFeed(source, pool, timeout=settings.scrape_timeout)
            for source in registry.products
        ]
        products = gather(feeds)

    products = sort_by_title(products, lambda p: p.title)
    return paginate(products, offset, limit)


def video_page(registry: SourceRegistry, offset: int, limit: int,
               settings: Optional[Settings] = None) -> Page[VideoItem]:
    settings = settings or Settings()
    feeds = [YouTubeChannelFeed(cid, timeout=settings.feed_timeout) for cid in registry.videos]

    videos = sort_by_published(gather(feeds), lambda v: v.published)
    return paginate(videos, offset, limit)
