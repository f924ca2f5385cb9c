"""
Static export.

Builds a single self-contained index.html from the same HTML builders the
Streamlit views use. Tabs switch with CSS only (hidden radio inputs), so the
exported page needs no server and no JavaScript. The blog post is fetched and
rendered once, at export time.
"""
from __future__ import annotations

import logging
import os
import random
import shutil
from html import escape
from pathlib import Path
from typing import Optional

from components.footer import footer_html
from components.header import hero_blobs, hero_html
from components.styles import APP_DESCRIPTION, APP_TITLE, page_css
from components.tabs import TAB_ITEMS, resolve_tab
from config import AppConfig
from data.content import SITE
from data.posts import APP_DIR
from data.service import PostResult, get_blog_post
from views import about, achievements, blog, experience, projects


log = logging.getLogger(__name__)

POSTS_DIR = os.path.join(APP_DIR, "static", "posts")

TAB_CSS = """
.tab-input{ position: absolute; opacity: 0; pointer-events: none; }
.main{ max-width: 1152px; margin: 0 auto; padding: 64px 16px; }
.tab-bar{
  display: grid; grid-template-columns: repeat(5, 1fr); gap: 4px;
  background: #1F2937; padding: 4px; border-radius: var(--radius);
  margin-bottom: 48px;
}
.tab-bar label{
  text-align: center; padding: 8px; border-radius: 4px; cursor: pointer;
  color: var(--text-muted); transition: background .2s, color .2s;
}
.tab-bar label:hover{ color: #FFFFFF; }
.panel{ display: none; }
"""


def tab_css() -> str:
    """Per-tab rules: the checked radio shows its panel and highlights its label."""
    rules = [TAB_CSS]
    for _, tab in TAB_ITEMS:
        rules.append(f"#tab-{tab}:checked ~ .panels #panel-{tab}{{ display: block; }}")
        rules.append(
            f'#tab-{tab}:checked ~ .tab-bar label[for="tab-{tab}"]{{ background: #374151; color: #FFFFFF; }}'
        )
    return "\n".join(rules)


def panels_html(result: PostResult) -> dict[str, str]:
    return {
        about.PANEL: about.panel_html(SITE),
        projects.PANEL: projects.panel_html(SITE),
        experience.PANEL: experience.panel_html(SITE),
        achievements.PANEL: achievements.panel_html(SITE),
        blog.PANEL: blog.panel_html(result),
    }


def tabs_html(panels: dict[str, str], default_tab: str) -> str:
    checked = resolve_tab(default_tab)
    inputs = "".join(
        f'<input type="radio" name="tab" id="tab-{tab}" class="tab-input"{" checked" if tab == checked else ""}>'
        for _, tab in TAB_ITEMS
    )
    labels = "".join(f'<label for="tab-{tab}">{escape(label)}</label>' for label, tab in TAB_ITEMS)
    sections = "".join(
        f'<section id="panel-{tab}" class="panel">{panels[tab]}</section>' for _, tab in TAB_ITEMS
    )
    return (
        f'<main id="main-content" class="main">'
        f"{inputs}"
        f'<nav class="tab-bar">{labels}</nav>'
        f'<div class="panels">{sections}</div>'
        f"</main>"
    )


def render_page_html(
    cfg: AppConfig,
    result: Optional[PostResult] = None,
    seed: Optional[int] = None,
    year: Optional[int] = None,
) -> str:
    """Full HTML document for the site. Fetches the blog post unless `result` is given."""
    if result is None:
        result = get_blog_post(cfg)
    blobs = hero_blobs(cfg.hero_blob_count, random.Random(seed))
    body = (
        hero_html(SITE, blobs)
        + tabs_html(panels_html(result), cfg.default_tab)
        + footer_html(SITE, year)
    )
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(APP_TITLE)}</title>\n"
        f'<meta name="description" content="{escape(APP_DESCRIPTION)}">\n'
        f"<style>{page_css()}\n{tab_css()}</style>\n"
        "</head>\n"
        "<body>\n"
        f'<div class="page">{body}</div>\n'
        "</body>\n"
        "</html>\n"
    )


def build_site(cfg: AppConfig, out_dir: str | Path, seed: Optional[int] = None) -> Path:
    """Write index.html (and a copy of the local posts) into `out_dir`. Returns the index path."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    result = get_blog_post(cfg)
    if result.error:
        log.warning("Exporting with blog error state: %s", result.error)

    index = out / "index.html"
    index.write_text(render_page_html(cfg, result, seed=seed), encoding="utf-8")
    log.info("Wrote %s", index)

    if os.path.isdir(POSTS_DIR):
        shutil.copytree(POSTS_DIR, out / "posts", dirs_exist_ok=True)
        log.info("Copied posts to %s", out / "posts")
    return index
