from __future__ import annotations

from html import escape

import streamlit as st

from components.cards import achievement_card_html
from components.narrative import box_heading_html, render_section_title, section_title_html
from components.timeline import education_entry_html
from config import AppConfig
from data.content import SITE, SiteContent


PANEL = "achievements"
TITLE = "My Education & Achievements"


def milestones_html(site: SiteContent) -> str:
    cards = "".join(achievement_card_html(a) for a in site.achievements)
    return f'<div class="panel-box">{box_heading_html("Academic Milestones", "award", "yellow")}{cards}</div>'


def education_html(site: SiteContent) -> str:
    entries = "".join(education_entry_html(e) for e in site.education)
    activities = "".join(
        f'<div class="activity"><h4>{escape(a.title)}</h4><p>{escape(a.description)}</p></div>'
        for a in site.activities
    )
    return (
        f'<div class="panel-box">'
        f'{box_heading_html("My Education", "terminal", "blue")}'
        f"{entries}"
        f'{box_heading_html("Other Activities & Learning", "rocket", "green")}'
        f"{activities}"
        f"</div>"
    )


def panel_html(site: SiteContent = SITE) -> str:
    return section_title_html(TITLE, PANEL) + f'<div class="grid-2">{milestones_html(site)}{education_html(site)}</div>'


def render(cfg: AppConfig) -> None:
    render_section_title(TITLE, PANEL)
    c1, c2 = st.columns(2, gap="large")
    with c1:
        st.markdown(milestones_html(SITE), unsafe_allow_html=True)
    with c2:
        st.markdown(education_html(SITE), unsafe_allow_html=True)
