import pytest
import requests

from fx_monitor.fetchers import rss
from fx_monitor.models import Source

FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example FX</title>
    <link>https://example.com</link>
    <description>FX news</description>
    <item>
      <title>Yen slides as BoJ stays dovish</title>
      <link>https://example.com/yen</link>
      <pubDate>Mon, 15 Jan 2024 10:30:00 GMT</pubDate>
      <description>&lt;p&gt;The yen fell against the dollar.&lt;/p&gt;</description>
    </item>
    <item>
      <title>Undated item</title>
      <link>https://example.com/undated</link>
    </item>
  </channel>
</rss>
"""

SOURCE = Source(id="example", name="Example FX", url="https://example.com/rss")


class FakeResponse:
    def __init__(self, status_code=200, content=FEED):
        self.status_code = status_code
        self.content = content

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class TestFetchRssEntries:
    def test_parses_items(self, monkeypatch):
        calls = {}

        def fake_get(url, headers=None, timeout=None):
            calls["url"] = url
            calls["timeout"] = timeout
            return FakeResponse()

        monkeypatch.setattr(rss.requests, "get", fake_get)
        items = rss.fetch_rss_entries(SOURCE, timeout=3)

        assert calls == {"url": SOURCE.url, "timeout": 3}
        assert len(items) == 2
        first = items[0]
        assert first.title == "Yen slides as BoJ stays dovish"
        assert first.link == "https://example.com/yen"
        assert first.pub_date == "Mon, 15 Jan 2024 10:30:00 GMT"
        assert first.iso_date == "2024-01-15T10:30:00+00:00"
        assert "The yen fell against the dollar." in first.content_snippet
        assert items[1].iso_date is None
        assert items[1].pub_date is None

    def test_http_error_is_raised(self, monkeypatch):
        monkeypatch.setattr(rss.requests, "get", lambda url, headers=None, timeout=None: FakeResponse(status_code=503))
        with pytest.raises(requests.HTTPError):
            rss.fetch_rss_entries(SOURCE)

    def test_network_error_is_raised(self, monkeypatch):
        def boom(url, headers=None, timeout=None):
            raise requests.Timeout("timed out")

        monkeypatch.setattr(rss.requests, "get", boom)
        with pytest.raises(requests.Timeout):
            rss.fetch_rss_entries(SOURCE)


def test_entry_content_preferred_over_summary():
    entry = {
        "title": "t",
        "link": "l",
        "summary": "short",
        "content": [{"value": "<p>full body</p>"}],
    }
    raw = rss.entry_to_raw_article(entry)
    assert raw.content == "<p>full body</p>"
    assert raw.content_snippet == "short"
