from .rss import RssFeed
from .sitemap import ProductSitemapFeed
from .youtube import YouTubeChannelFeed

from .base import BaseFeed

__all__ = ["RssFeed", "ProductSitemapFeed", "YouTubeChannelFeed", "BaseFeed"]
