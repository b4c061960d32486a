import pytest

from fx_monitor.utils.config_loader import ConfigError, load_sources_config, slugify


def _write(tmp_path, text):
    path = tmp_path / "sources.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadSourcesConfig:
    def test_loads_sources(self, tmp_path):
        path = _write(
            tmp_path,
            """
sources:
  - id: fxstreet
    name: FXStreet
    url: https://www.fxstreet.com/rss/news
  - name: CNBC Economy
    url: https://www.cnbc.com/id/20910258/device/rss/rss.html
extra: ignored
""",
        )
        sources = load_sources_config(path)

        assert [s.id for s in sources] == ["fxstreet", "cnbc-economy"]
        assert sources[1].name == "CNBC Economy"
        assert sources[0].url == "https://www.fxstreet.com/rss/news"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_sources_config(tmp_path / "missing.yaml")

    def test_empty_file_has_no_sources(self, tmp_path):
        assert load_sources_config(_write(tmp_path, "")) == []

    def test_null_sources_key_has_no_sources(self, tmp_path):
        assert load_sources_config(_write(tmp_path, "sources:\n")) == []

    @pytest.mark.parametrize("body", ["sources: {}\n", "sources: ''\n", "sources: 0\n"])
    def test_falsy_non_list_sources_rejected(self, tmp_path, body):
        with pytest.raises(ConfigError, match="must be a list"):
            load_sources_config(_write(tmp_path, body))

    @pytest.mark.parametrize(
        "body, message",
        [
            ("sources:\n  - name: A\n", "Missing required fields"),
            ("sources:\n  - name: A\n    url: ftp://example.com/feed\n", "Invalid URL"),
            ("sources:\n  - name: ''\n    url: https://example.com/feed\n", "must not be empty"),
            ("sources: {}\n", "must be a list"),
            ("sources:\n  - just-a-string\n", "must be a mapping"),
            ("- a\n- b\n", "Top-level"),
            ("sources: [\n", "Invalid YAML"),
        ],
    )
    def test_invalid_configs(self, tmp_path, body, message):
        with pytest.raises(ConfigError, match=message):
            load_sources_config(_write(tmp_path, body))

    def test_duplicate_ids_rejected(self, tmp_path):
        body = (
            "sources:\n"
            "  - name: Feed\n    url: https://a.example.com/rss\n"
            "  - name: feed\n    url: https://b.example.com/rss\n"
        )
        with pytest.raises(ConfigError, match="Duplicate source id 'feed'"):
            load_sources_config(_write(tmp_path, body))

    def test_bundled_config_is_valid(self):
        from pathlib import Path

        path = Path(__file__).resolve().parents[1] / "config" / "sources.yaml"
        sources = load_sources_config(path)
        assert sources
        assert len({s.id for s in sources}) == len(sources)


def test_slugify():
    assert slugify("Investing.com Forex News") == "investing-com-forex-news"
