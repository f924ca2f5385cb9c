"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.footer import render_footer  # noqa: E402
from components.header import render_header  # noqa: E402
from components.styles import apply_theme  # noqa: E402
from components.tabs import render_tab_bar  # noqa: E402
from config import get_config  # noqa: E402
from data.content import SITE  # noqa: E402

from views import about, achievements, blog, experience, projects  # noqa: E402


VIEWS = {
    "about": about.render,
    "projects": projects.render,
    "experience": experience.render,
    "achievements": achievements.render,
    "blog": blog.render,
}


def main() -> None:
    apply_theme()
    cfg = get_config()
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    render_header(SITE, cfg.hero_blob_count)
    state = render_tab_bar(cfg)

    # Routing only: exactly one panel per run
    view = VIEWS.get(state.tab)
    if view is None:
        st.error("Unknown tab")
    else:
        view(cfg)

    render_footer(SITE)


if __name__ == "__main__":
    main()
