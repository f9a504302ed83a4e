# feedhub/tests/test_videos.py
from feedhub.feeds import YouTubeChannelFeed
from feedhub.tests.helpers import youtube_doc, youtube_entry

CHANNEL = "UCabc123"
FEED_URL = f"{YouTubeChannelFeed.BASE_URL}?channel_id={CHANNEL}"


def test_maps_entries(web):
    web.add(FEED_URL, youtube_doc([
        youtube_entry("vid001", "First video", "2024-03-01T12:00:00+00:00", author="Tech Channel", views="12345"),
    ]))

    videos = YouTubeChannelFeed(CHANNEL).fetch()
    assert len(videos) == 1
    v = videos[0]
    assert v.id == "yt:video:vid001"
    assert v.videoId == "vid001"
    assert v.title == "First video"
    assert v.thumbnail == "https://i.ytimg.com/vi/vid001/mqdefault.jpg"
    assert v.channelName == "Tech Channel"
    assert v.published == "2024-03-01T12:00:00+00:00"
    assert v.views == "12345"


def test_missing_statistics_defaults_views(web):
    web.add(FEED_URL, youtube_doc([
        youtube_entry("vid002", "No stats", "2024-03-01T12:00:00+00:00", views=None),
    ]))
    assert YouTubeChannelFeed(CHANNEL).fetch()[0].views == "0"


def test_requests_channel_feed(web):
    web.add(FEED_URL, youtube_doc([]))
    YouTubeChannelFeed(CHANNEL).fetch()
    assert web.calls == [(YouTubeChannelFeed.BASE_URL, {"channel_id": CHANNEL})]


def test_failed_channel_returns_empty(web):
    web.add(FEED_URL, None)
    assert YouTubeChannelFeed(CHANNEL).fetch() == []


def test_videos_endpoint_newest_first(make_client, web):
    other = "UCother"
    web.add(FEED_URL, youtube_doc([
        youtube_entry("a1", "Old", "2024-01-01T00:00:00+00:00"),
        youtube_entry("a2", "Newest", "2024-05-01T00:00:00+00:00"),
    ]))
    web.add(f"{YouTubeChannelFeed.BASE_URL}?channel_id={other}", youtube_doc([
        youtube_entry("b1", "Middle", "2024-03-01T00:00:00+00:00"),
    ]))
    client = make_client(videos=[CHANNEL, other, "UCdown"])

    j = client.get("/api/videos").json()
    assert [v["title"] for v in j["items"]] == ["Newest", "Middle", "Old"]
    assert j["total"] == 3
    assert j["hasMore"] is False
