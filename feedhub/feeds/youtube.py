import logging
from typing import List, Optional

import feedparser
from pydantic import ValidationError

from feedhub.feeds import http
from feedhub.feeds.base import BaseFeed
from feedhub.models import VideoItem

logger = logging.getLogger(__name__)


def thumbnail_url(video_id: str) -> str:
    return f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"


class YouTubeChannelFeed(BaseFeed[VideoItem]):
    BASE_URL = "https://www.youtube.com/feeds/videos.xml"

    def __init__(self, channel_id: str, timeout: float = http.FEED_TIMEOUT):
        self.channel_id: str = channel_id
        self.timeout = timeout

    def fetch(self) -> List[VideoItem]:
        text = http.fetch_text(
            self.BASE_URL,
            timeout=self.timeout,
            params={"channel_id": self.channel_id},
        )
        if text is None:
            return []

        try:
            feed = feedparser.parse(text)
            if feed.bozo and not feed.entries:
                logger.warning(f"[videos] could not parse channel {self.channel_id}: {feed.get('bozo_exception')}")
                return []
            videos = [self._to_video(entry) for entry in feed.entries]
        except Exception as e:
            logger.warning(f"[videos] error fetching channel {self.channel_id}: {e}")
            return []

        return [v for v in videos if v is not None]

    def _to_video(self, entry) -> Optional[VideoItem]:
        video_id = entry.get("yt_videoid") or ""
        # media:group > media:community > media:statistics@views
        stats = entry.get("media_statistics") or {}
        try:
            return VideoItem(
                id=entry.get("id") or video_id,
                videoId=video_id,
                title=entry.get("title") or "",
                thumbnail=thumbnail_url(video_id),
                channelName=entry.get("author") or "",
                published=entry.get("published") or "",
                views=stats.get("views") or "0",
            )
        except ValidationError:
            return None
