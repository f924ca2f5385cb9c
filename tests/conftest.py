"""
Pytest fixtures for the portfolio test suite.
"""

import pytest

import config
from config import AppConfig


ENV_VARS = ("BLOG_POST_SOURCE", "BLOG_FETCH_TIMEOUT_S", "DEFAULT_TAB", "HERO_BLOB_COUNT", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    """No portfolio env vars set and no .env loading."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: False)
    return monkeypatch


@pytest.fixture
def make_cfg():
    """Build an AppConfig with test defaults; override any field by keyword."""

    def _make(**overrides):
        values = dict(
            blog_post_source="static/posts/sample-post.md",
            blog_fetch_timeout_s=30.0,
            default_tab="about",
            hero_blob_count=20,
            log_level="INFO",
        )
        values.update(overrides)
        return AppConfig(**values)

    return _make


@pytest.fixture
def post_file(tmp_path):
    """Write a markdown post to a temp file and return its path."""

    def _write(text, name="post.md"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


class FakeResponse:
    def __init__(self, status_code=200, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get to return a canned response (or raise `exc`); records calls."""
    import requests

    calls = []

    def _install(status_code=200, text="", reason="OK", exc=None):
        def _get(url, **kwargs):
            calls.append((url, kwargs))
            if exc is not None:
                raise exc
            return FakeResponse(status_code, text, reason)

        monkeypatch.setattr(requests, "get", _get)
        return calls

    return _install
