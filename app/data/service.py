from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from config import AppConfig
from data.posts import PostFetchError, get_post_client


log = logging.getLogger(__name__)

LOADING = "loading"
ERROR = "error"
READY = "ready"

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists", "smarty"]


class ExternalLinkProcessor(Treeprocessor):
    """http(s) links in the post open in a new tab, like every other link on the page."""

    def run(self, root):
        for a in root.iter("a"):
            if a.get("href", "").startswith(("http://", "https://")):
                a.set("target", "_blank")
                a.set("rel", "noopener noreferrer")


class ExternalLinkExtension(Extension):
    def extendMarkdown(self, md):
        md.treeprocessors.register(ExternalLinkProcessor(md), "external_links", 5)


@dataclass(frozen=True)
class PostResult:
    state: str  # "loading" | "error" | "ready"
    source: str
    text: str = ""
    html: str = ""
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.state == READY and not self.text.strip()


def render_markdown(text: str) -> str:
    return markdown.markdown(
        text, extensions=[*MARKDOWN_EXTENSIONS, ExternalLinkExtension()], output_format="html"
    )


def loading_result(cfg: AppConfig) -> PostResult:
    return PostResult(state=LOADING, source=cfg.blog_post_source)


def _load(source: str, fn_fetch: Callable[[], str]) -> PostResult:
    try:
        text = fn_fetch()
    except PostFetchError as e:
        log.error("Error fetching blog post: %s", e)
        return PostResult(
            state=ERROR,
            source=source,
            error=(
                f"Failed to load blog post. Please check if '{source}' exists and is accessible. "
                f"Error: {e}"
            ),
        )
    log.debug("Loaded blog post from %s (%d chars)", source, len(text))
    return PostResult(state=READY, source=source, text=text, html=render_markdown(text))


def get_blog_post(cfg: AppConfig) -> PostResult:
    client = get_post_client(cfg)
    return _load(cfg.blog_post_source, fn_fetch=client.fetch)
