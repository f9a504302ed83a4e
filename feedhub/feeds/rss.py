import logging
from typing import List, Optional
from urllib.parse import urlparse

import feedparser
from pydantic import ValidationError

from feedhub.feeds import http
from feedhub.feeds.base import BaseFeed
from feedhub.models import NewsItem

logger = logging.getLogger(__name__)


class RssFeed(BaseFeed[NewsItem]):
    def __init__(self, url: str, timeout: float = http.FEED_TIMEOUT):
        self.url: str = url
        self.timeout = timeout
        self.domain: str = urlparse(url).hostname or ""

    def fetch(self) -> List[NewsItem]:
        text = http.fetch_text(self.url, timeout=self.timeout)
        if text is None:
            return []

        try:
            feed = feedparser.parse(text)
            if feed.bozo and not feed.entries:
                logger.warning(f"[rss] could not parse {self.url}: {feed.get('bozo_exception')}")
                return []
            items = [self._to_item(entry) for entry in feed.entries]
        except Exception as e:
            logger.warning(f"[rss] error normalizing {self.url}: {e}")
            return []

        return [item for item in items if item is not None]

    def _to_item(self, entry) -> Optional[NewsItem]:
        link = entry.get("link") or ""

        # content:encoded (texto completo) tem prioridade sobre description
        description = ""
        for content in entry.get("content") or []:
            value = (content.get("value") or "").strip()
            if value:
                description = value
                break
        if not description:
            description = entry.get("summary") or ""

        image = ""
        for media in entry.get("media_content") or []:
            if media.get("url"):
                image = media["url"]
                break

        try:
            return NewsItem(
                title=entry.get("title") or "",
                link=link,
                description=description,
                pubDate=entry.get("published") or "",
                guid=entry.get("id") or "",
                image=image,
                domain=self.domain,
                needsImage=not image and bool(link),
            )
        except ValidationError:
            # sem título ou link válido: descartado na fronteira
            return None
