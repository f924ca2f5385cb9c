"""
End-to-end tests for the Streamlit app via streamlit.testing.

Each run should render exactly one panel, the one whose tab is selected.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from components.tabs import TAB_ITEMS
from views import blog


APP_PATH = str(Path(__file__).resolve().parents[1] / "app" / "app.py")


def panel_markers(at):
    return [m.value for m in at.markdown if "data-panel=" in m.value]


@pytest.fixture
def app_test(clean_env):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


class TestTabs:

    def test_about_is_default(self, app_test):
        markers = panel_markers(app_test)
        assert len(markers) == 1
        assert 'data-panel="about"' in markers[0]

    @pytest.mark.parametrize("label,tab", TAB_ITEMS)
    def test_switching_shows_exactly_one_panel(self, app_test, label, tab):
        app_test.radio(key="tab_label").set_value(label).run()
        assert not app_test.exception
        markers = panel_markers(app_test)
        assert len(markers) == 1
        assert f'data-panel="{tab}"' in markers[0]
        assert app_test.session_state["tab"] == tab

    def test_header_and_footer_on_every_tab(self, app_test):
        bodies = "".join(m.value for m in app_test.markdown)
        assert 'class="hero"' in bodies
        assert 'class="site-footer"' in bodies


class TestBlogTab:

    def test_sample_post_renders(self, app_test):
        app_test.radio(key="tab_label").set_value("📖 Blog").run()
        bodies = [m.value for m in app_test.markdown]
        assert any(b.startswith("# Notes From Poking at ARC-AGI") for b in bodies)
        assert not any(blog.LOADING_TEXT in b for b in bodies)
        assert not any('class="post-error"' in b for b in bodies)

    def test_missing_post_shows_error(self, clean_env, tmp_path):
        clean_env.setenv("BLOG_POST_SOURCE", str(tmp_path / "missing.md"))
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        at.run()
        at.radio(key="tab_label").set_value("📖 Blog").run()
        assert not at.exception
        bodies = [m.value for m in at.markdown]
        errors = [b for b in bodies if 'class="post-error"' in b]
        assert len(errors) == 1
        assert "Failed to load blog post." in errors[0]
        assert not any(blog.LOADING_TEXT in b for b in bodies)
