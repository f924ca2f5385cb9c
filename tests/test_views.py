"""
Tests for the panel markup each view contributes.
"""

import pytest

from data.service import ERROR, LOADING, READY, PostResult, render_markdown
from views import about, achievements, blog, experience, projects


PANELS = [about, projects, experience, achievements]


class TestPanels:

    @pytest.mark.parametrize("view", PANELS, ids=lambda v: v.PANEL)
    def test_panel_opens_with_its_marker(self, view):
        html = view.panel_html()
        assert html.startswith(f'<h2 class="section-title" data-panel="{view.PANEL}">')
        assert html.count("data-panel=") == 1

    def test_projects_panel_lists_every_project(self):
        html = projects.panel_html()
        assert html.count('class="project-card ') == 6

    def test_achievements_panel(self):
        html = achievements.panel_html()
        assert "Academic Milestones" in html
        assert html.count('class="achievement-card ') == 5
        assert html.count('class="edu-entry ') == 3

    def test_about_contact_badges(self):
        html = about.panel_html()
        assert "accent-blue" in html
        assert "mailto:" in html


class TestBlogStates:

    def test_loading(self):
        html = blog.panel_html(PostResult(state=LOADING, source="x"))
        assert blog.LOADING_TEXT in html
        assert "<article" not in html
        assert "post-error" not in html

    def test_error_shows_only_error(self):
        result = PostResult(state=ERROR, source="x", error="Failed to load blog post. <boom>")
        html = blog.panel_html(result)
        assert 'class="post-error"' in html
        assert "Failed to load blog post. &lt;boom&gt;" in html
        assert blog.LOADING_TEXT not in html
        assert "<article" not in html

    def test_ready_renders_article(self):
        text = "# Title\n\nBody text.\n"
        result = PostResult(state=READY, source="x", text=text, html=render_markdown(text))
        html = blog.panel_html(result)
        assert '<article class="post"><h1>Title</h1>' in html
        assert blog.LOADING_TEXT not in html
        assert "post-error" not in html

    def test_empty_post_message(self):
        html = blog.panel_html(PostResult(state=READY, source="x", text="  "))
        assert blog.EMPTY_TEXT in html
        assert "<article" not in html

    def test_note_always_shown(self):
        for state in (LOADING, ERROR, READY):
            html = blog.panel_html(PostResult(state=state, source="x", text="hi", html="<p>hi</p>"))
            assert 'class="post-note"' in html
