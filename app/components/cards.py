"""
Cards, badges and links.

Every builder returns a single-line HTML string (no blank lines, no deep
indentation) so it survives st.markdown's markdown pass unchanged, and is
reused verbatim by the static export.
"""

from __future__ import annotations

from html import escape
from typing import Optional

import streamlit as st

from data.content import Achievement, Project


# Lucide icon paths (24x24 viewBox, stroke icons).
ICON_PATHS = {
    "github": (
        '<path d="M15 22v-4a4.8 4.8 0 0 0-1-3.5c3 0 6-2 6-5.5.08-1.25-.27-2.48-1-3.5.28-1.15.28-2.35 0-3.5 '
        '0 0-1 0-3 1.5-2.64-.5-5.36-.5-8 0C6 2 5 2 5 2c-.3 1.15-.3 2.35 0 3.5A5.403 5.403 0 0 0 4 9c0 3.5 3 '
        '5.5 6 5.5-.39.49-.68 1.05-.85 1.65-.17.6-.22 1.23-.15 1.85v4"/><path d="M9 18c-4.51 2-5-2-7-2"/>'
    ),
    "linkedin": (
        '<path d="M16 8a6 6 0 0 1 6 6v7h-4v-7a2 2 0 0 0-2-2 2 2 0 0 0-2 2v7h-4v-7a6 6 0 0 1 6-6z"/>'
        '<rect width="4" height="12" x="2" y="9"/><circle cx="4" cy="4" r="2"/>'
    ),
    "mail": '<rect width="20" height="16" x="2" y="4" rx="2"/><path d="m22 7-8.97 5.7a1.94 1.94 0 0 1-2.06 0L2 7"/>',
    "external": '<path d="M15 3h6v6"/><path d="M10 14 21 3"/><path d="M18 13v6a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V8a2 2 0 0 1 2-2h6"/>',
    "chevron-down": '<path d="M19 9l-7 7-7-7"/>',
    "terminal": '<polyline points="4 17 10 11 4 5"/><line x1="12" x2="20" y1="19" y2="19"/>',
    "award": '<circle cx="12" cy="8" r="6"/><path d="M15.477 12.89 17 22l-5-3-5 3 1.523-9.11"/>',
    "rocket": (
        '<path d="M4.5 16.5c-1.5 1.26-2 5-2 5s3.74-.5 5-2c.71-.84.7-2.13-.09-2.91a2.18 2.18 0 0 0-2.91-.09z"/>'
        '<path d="m12 15-3-3a22 22 0 0 1 2-3.95A12.88 12.88 0 0 1 22 2c0 2.72-.78 7.5-6 11a22.35 22.35 0 0 1-4 2z"/>'
    ),
    "brain": '<path d="M12 5a3 3 0 1 0-5.997.125 4 4 0 0 0-2.526 5.77 4 4 0 0 0 .556 6.588A4 4 0 1 0 12 18Z"/><path d="M12 5a3 3 0 1 1 5.997.125 4 4 0 0 1 2.526 5.77 4 4 0 0 1-.556 6.588A4 4 0 1 1 12 18Z"/>',
    "calendar": '<rect width="18" height="18" x="3" y="4" rx="2"/><path d="M16 2v4"/><path d="M8 2v4"/><path d="M3 10h18"/>',
}


def icon_svg(name: str, size: int = 16, css_class: str = "") -> str:
    cls = f' class="{css_class}"' if css_class else ""
    return (
        f'<svg{cls} xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24" '
        f'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
        f"{ICON_PATHS[name]}</svg>"
    )


def is_external(href: str) -> bool:
    return href.startswith(("http://", "https://"))


def link_html(href: str, inner_html: str, css_class: str = "", aria_label: Optional[str] = None) -> str:
    """
    Anchor builder. External (http/https) links always open in a new tab with
    rel="noopener noreferrer"; mailto: and in-page links stay in place.
    """
    attrs = [f'href="{escape(href, quote=True)}"']
    if is_external(href):
        attrs.append('target="_blank"')
        attrs.append('rel="noopener noreferrer"')
    if css_class:
        attrs.append(f'class="{css_class}"')
    if aria_label:
        attrs.append(f'aria-label="{escape(aria_label, quote=True)}"')
    return f"<a {' '.join(attrs)}>{inner_html}</a>"


def badge_html(label: str, color: str, variant: str = "outline", extra_class: str = "") -> str:
    cls = f"badge {variant} accent-{color}"
    if extra_class:
        cls += f" {extra_class}"
    return f'<span class="{cls}">{escape(label)}</span>'


def badge_row_html(labels, color: str, variant: str = "outline", css_class: str = "tech-row") -> str:
    return f'<div class="{css_class}">' + "".join(badge_html(label, color, variant) for label in labels) + "</div>"


def project_card_html(project: Project) -> str:
    c = project.color
    details = "".join(f"<li>{escape(d)}</li>" for d in project.details)

    links = ""
    if project.github_link or project.project_link:
        parts = []
        if project.github_link:
            parts.append(link_html(project.github_link, f"{icon_svg('github')} View Code", "btn btn-code"))
        if project.project_link:
            parts.append(link_html(project.project_link, f"{icon_svg('external')} View Project", "btn btn-project"))
        links = f'<div class="card-links">{"".join(parts)}</div>'

    return (
        f'<div class="project-card accent-{c}">'
        f'<h3 class="project-title">{escape(project.title)}</h3>'
        f'<p class="project-subtitle">{escape(project.subtitle)}</p>'
        f'<p class="project-description">{escape(project.description)}</p>'
        f'<h4 class="card-label">Key Features / Learnings:</h4>'
        f'<ul class="project-details">{details}</ul>'
        f'<h4 class="card-label">Technologies:</h4>'
        f"{badge_row_html(project.technologies, c)}"
        f"{links}"
        f"</div>"
    )


def achievement_card_html(achievement: Achievement) -> str:
    return (
        f'<div class="achievement-card accent-{achievement.color}">'
        f'<span class="achievement-icon">{escape(achievement.icon)}</span>'
        f"<div>"
        f'<h4 class="achievement-title">{escape(achievement.title)}</h4>'
        f'<p class="achievement-description">{escape(achievement.description)}</p>'
        f"</div>"
        f"</div>"
    )


def render_project_card(project: Project) -> None:
    st.markdown(project_card_html(project), unsafe_allow_html=True)
