"""
Tests for fetching and rendering the blog post.
"""

import pytest
import requests

from data.posts import PostFetchError, get_post_client, resolve_local_path
from data.service import ERROR, READY, get_blog_post, loading_result, render_markdown


class TestLocalPost:

    def test_bundled_sample_post_loads(self, make_cfg):
        result = get_blog_post(make_cfg())
        assert result.state == READY
        assert result.error is None
        assert "<h1>" in result.html
        assert "<table>" in result.html
        assert not result.is_empty

    def test_absolute_path(self, make_cfg, post_file):
        path = post_file("# Hello\n\nSome **bold** text.\n")
        result = get_blog_post(make_cfg(blog_post_source=path))
        assert result.state == READY
        assert result.text.startswith("# Hello")
        assert "<strong>bold</strong>" in result.html

    def test_missing_file_is_error(self, make_cfg, tmp_path):
        source = str(tmp_path / "nope.md")
        result = get_blog_post(make_cfg(blog_post_source=source))
        assert result.state == ERROR
        assert result.text == ""
        assert result.error.startswith("Failed to load blog post.")
        assert source in result.error
        assert "Not Found (Status: 404)" in result.error

    def test_empty_post(self, make_cfg, post_file):
        result = get_blog_post(make_cfg(blog_post_source=post_file("  \n\n")))
        assert result.state == READY
        assert result.is_empty

    def test_relative_path_resolves_against_app(self):
        path = resolve_local_path("static/posts/sample-post.md")
        assert path.replace("\\", "/").endswith("app/static/posts/sample-post.md")

    def test_no_source_configured(self, make_cfg):
        client = get_post_client(make_cfg(blog_post_source=""))
        with pytest.raises(PostFetchError, match="BLOG_POST_SOURCE"):
            client.fetch()


class TestRemotePost:

    URL = "https://example.com/posts/post.md"

    def test_success_uses_timeout(self, make_cfg, fake_get):
        calls = fake_get(text="## Remote\n")
        result = get_blog_post(make_cfg(blog_post_source=self.URL, blog_fetch_timeout_s=7.0))
        assert result.state == READY
        assert "<h2>Remote</h2>" in result.html
        assert calls == [(self.URL, {"timeout": 7.0})]

    def test_http_error_status(self, make_cfg, fake_get):
        fake_get(404, reason="Not Found")
        result = get_blog_post(make_cfg(blog_post_source=self.URL))
        assert result.state == ERROR
        assert "Could not fetch blog post: Not Found (Status: 404)" in result.error

    def test_network_failure(self, make_cfg, fake_get):
        fake_get(exc=requests.ConnectionError("refused"))
        result = get_blog_post(make_cfg(blog_post_source=self.URL))
        assert result.state == ERROR
        assert "ConnectionError: refused" in result.error

    def test_out_of_range_timeout(self, make_cfg, fake_get):
        fake_get(exc=OverflowError("timestamp out of range for platform time_t"))
        result = get_blog_post(make_cfg(blog_post_source=self.URL, blog_fetch_timeout_s=float("inf")))
        assert result.state == ERROR
        assert "OverflowError" in result.error


class TestLoading:

    def test_loading_result(self, make_cfg):
        result = loading_result(make_cfg())
        assert result.state == "loading"
        assert result.error is None
        assert not result.is_empty


class TestRenderMarkdown:

    def test_external_links_open_new_tab(self):
        html = render_markdown("[site](https://example.com)")
        assert 'href="https://example.com"' in html
        assert 'target="_blank"' in html
        assert 'rel="noopener noreferrer"' in html

    def test_mailto_and_relative_links_untouched(self):
        html = render_markdown("[mail](mailto:me@example.com) and [post](other.md)")
        assert "target=" not in html
        assert "rel=" not in html
