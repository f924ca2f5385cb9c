from __future__ import annotations

from html import escape
from typing import Optional

import streamlit as st

from components.cards import icon_svg


def section_title_html(title: str, panel: str) -> str:
    """
    Every panel opens with one of these. `data-panel` marks which tab the
    rendered content belongs to.
    """
    return f'<h2 class="section-title" data-panel="{panel}">{escape(title)}</h2>'


def box_heading_html(title: str, icon: Optional[str] = None, color: str = "gray") -> str:
    icon_html = f'<span class="accent-{color}" style="color:var(--a-400)">{icon_svg(icon, 22)}</span>' if icon else ""
    return f"<h3>{icon_html}{escape(title)}</h3>"


def render_section_title(title: str, panel: str) -> None:
    st.markdown(section_title_html(title, panel), unsafe_allow_html=True)
