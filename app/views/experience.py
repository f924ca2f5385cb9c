from __future__ import annotations

from components.narrative import render_section_title, section_title_html
from components.timeline import render_timeline, timeline_html
from config import AppConfig
from data.content import SITE, SiteContent


PANEL = "experience"
TITLE = "My Journey & Experience"


def panel_html(site: SiteContent = SITE) -> str:
    return section_title_html(TITLE, PANEL) + timeline_html(site.experience)


def render(cfg: AppConfig) -> None:
    render_section_title(TITLE, PANEL)
    render_timeline(SITE.experience)
