from typing import Dict, List, Optional, Tuple


def rss_doc(items: List[str]) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/" '
        'xmlns:media="http://search.yahoo.com/mrss/"><channel><title>Feed</title>'
        + "".join(items)
        + "</channel></rss>"
    )


def rss_item(title, link, pub_date: Optional[str], guid=None, description="desc", content=None, image=None) -> str:
    parts = [f"<title>{title}</title>", f"<link>{link}</link>"]
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    parts.append(f"<guid>{guid or link}</guid>")
    parts.append(f"<description>{description}</description>")
    if content:
        parts.append(f"<content:encoded><![CDATA[{content}]]></content:encoded>")
    if image:
        parts.append(f'<media:content url="{image}" medium="image"/>')
    return "<item>" + "".join(parts) + "</item>"


def sitemap_doc(urls: List[str]) -> str:
    entries = "".join(f"<url><loc>{u}</loc><lastmod>2024-01-01</lastmod></url>" for u in urls)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        + entries
        + "</urlset>"
    )


def product_html(title="", description="", image="", body="") -> str:
    head = []
    if title:
        head.append(f'<meta property="og:title" content="{title}">')
    if description:
        head.append(f'<meta property="og:description" content="{description}">')
    if image:
        head.append(f'<meta property="og:image" content="{image}">')
    return f"<html><head>{''.join(head)}</head><body>{body}</body></html>"


def youtube_entry(video_id, title, published, author="Channel", views: Optional[str] = "100") -> str:
    stats = f'<media:statistics views="{views}"/>' if views is not None else ""
    return (
        "<entry>"
        f"<id>yt:video:{video_id}</id>"
        f"<yt:videoId>{video_id}</yt:videoId>"
        "<yt:channelId>UC123</yt:channelId>"
        f"<title>{title}</title>"
        f'<link rel="alternate" href="https://www.youtube.com/watch?v={video_id}"/>'
        f"<author><name>{author}</name><uri>https://www.youtube.com/channel/UC123</uri></author>"
        f"<published>{published}</published>"
        f"<updated>{published}</updated>"
        "<media:group>"
        f"<media:title>{title}</media:title>"
        f'<media:thumbnail url="https://i1.ytimg.com/vi/{video_id}/hqdefault.jpg" width="480" height="360"/>'
        "<media:description>video</media:description>"
        f'<media:community><media:starRating count="10" average="5.00" min="1" max="5"/>{stats}</media:community>'
        "</media:group>"
        "</entry>"
    )


def youtube_doc(entries: List[str]) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" '
        'xmlns:media="http://search.yahoo.com/mrss/" xmlns="http://www.w3.org/2005/Atom">'
        "<title>Channel</title>"
        + "".join(entries)
        + "</feed>"
    )


class FakeWeb:
    """Substitui feedhub.feeds.http.fetch_text: URL -> corpo (None = fonte fora do ar)."""

    def __init__(self):
        self.pages: Dict[str, Optional[str]] = {}
        self.calls: List[Tuple[str, Optional[dict]]] = []

    def add(self, url: str, body: Optional[str]):
        self.pages[url] = body

    def __call__(self, url, timeout=None, headers=None, params=None):
        self.calls.append((url, params))
        if params:
            query = "&".join(f"{k}={v}" for k, v in params.items())
            url = f"{url}?{query}"
        return self.pages.get(url)

    def fetched(self, url: str) -> bool:
        return any(u == url for u, _ in self.calls)
