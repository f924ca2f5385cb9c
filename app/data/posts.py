from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import requests

from config import AppConfig


log = logging.getLogger(__name__)

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class PostFetchError(RuntimeError):
    pass


def resolve_local_path(source: str) -> str:
    """Relative sources resolve against app/, like the static folder Streamlit serves."""
    if os.path.isabs(source):
        return source
    return os.path.abspath(os.path.join(APP_DIR, source))


@dataclass(frozen=True)
class PostClient:
    cfg: AppConfig

    def fetch(self) -> str:
        """
        Returns the raw markdown text of the blog post.
        One attempt, no retry: any failure raises PostFetchError.
        """
        source = self.cfg.blog_post_source
        if not source:
            raise PostFetchError("No blog post source configured (set BLOG_POST_SOURCE).")

        log.debug("Fetching blog post from %s", source)
        if self.cfg.blog_post_is_remote:
            return self._fetch_http(source)
        return self._read_file(resolve_local_path(source))

    def _fetch_http(self, url: str) -> str:
        try:
            resp = requests.get(url, timeout=self.cfg.blog_fetch_timeout_s)
        except (requests.RequestException, OverflowError) as e:
            raise PostFetchError(f"{type(e).__name__}: {e}") from e

        if not resp.ok:
            raise PostFetchError(f"Could not fetch blog post: {resp.reason} (Status: {resp.status_code})")
        return resp.text

    def _read_file(self, path: str) -> str:
        if not os.path.exists(path):
            raise PostFetchError("Could not fetch blog post: Not Found (Status: 404)")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PostFetchError(f"{type(e).__name__}: {e}") from e


def get_post_client(cfg: AppConfig) -> PostClient:
    return PostClient(cfg=cfg)
