"""
Tests for the static HTML export.
"""

import re

from components.tabs import TAB_ITEMS
from data.service import ERROR, READY, PostResult
from export import build_site, render_page_html


READY_POST = PostResult(state=READY, source="x", text="# Post\n", html="<h1>Post</h1>")


class TestRenderPage:

    def test_exactly_one_tab_checked(self, make_cfg):
        html = render_page_html(make_cfg(), READY_POST, seed=1, year=2024)
        assert len(re.findall(r'class="tab-input" checked>', html)) == 1
        assert '<input type="radio" name="tab" id="tab-about" class="tab-input" checked>' in html

    def test_default_tab_is_checked(self, make_cfg):
        html = render_page_html(make_cfg(default_tab="blog"), READY_POST, seed=1)
        assert 'id="tab-blog" class="tab-input" checked>' in html

    def test_each_panel_once(self, make_cfg):
        html = render_page_html(make_cfg(), READY_POST, seed=1)
        for _, tab in TAB_ITEMS:
            assert html.count(f'data-panel="{tab}"') == 1
            assert html.count(f'id="panel-{tab}"') == 1
            assert f'<label for="tab-{tab}">' in html

    def test_css_shows_only_checked_panel(self, make_cfg):
        html = render_page_html(make_cfg(), READY_POST, seed=1)
        assert ".panel{ display: none; }" in html
        assert "#tab-projects:checked ~ .panels #panel-projects{ display: block; }" in html

    def test_error_state_baked_in(self, make_cfg):
        result = PostResult(state=ERROR, source="x", error="Failed to load blog post. nope")
        html = render_page_html(make_cfg(), result, seed=1)
        assert "Failed to load blog post. nope" in html
        assert '<article class="post">' not in html

    def test_seed_makes_output_stable(self, make_cfg):
        cfg = make_cfg()
        assert render_page_html(cfg, READY_POST, seed=3, year=2024) == render_page_html(
            cfg, READY_POST, seed=3, year=2024
        )


class TestBuildSite:

    def test_writes_index_and_posts(self, make_cfg, tmp_path):
        index = build_site(make_cfg(), tmp_path / "site", seed=1)
        assert index == tmp_path / "site" / "index.html"
        html = index.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert '<article class="post">' in html
        assert (tmp_path / "site" / "posts" / "sample-post.md").is_file()

    def test_missing_post_does_not_fail(self, make_cfg, tmp_path):
        cfg = make_cfg(blog_post_source=str(tmp_path / "missing.md"))
        index = build_site(cfg, tmp_path / "site", seed=1)
        assert "Failed to load blog post." in index.read_text(encoding="utf-8")
