from __future__ import annotations

from components.cards import project_card_html, render_project_card
from components.narrative import render_section_title, section_title_html
from config import AppConfig
from data.content import SITE, SiteContent


PANEL = "projects"
TITLE = "Things I've Built & Explored"


def panel_html(site: SiteContent = SITE) -> str:
    return section_title_html(TITLE, PANEL) + "".join(project_card_html(p) for p in site.projects)


def render(cfg: AppConfig) -> None:
    render_section_title(TITLE, PANEL)
    for project in SITE.projects:
        render_project_card(project)
