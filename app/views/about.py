from __future__ import annotations

from html import escape

import streamlit as st

from components.cards import badge_html, icon_svg, link_html
from components.narrative import box_heading_html, render_section_title, section_title_html
from config import AppConfig
from data.content import SITE, Profile, SiteContent


PANEL = "about"
TITLE = "About Me"

# Contact badge colors, in display order.
CONTACT_COLORS = {"mail": "blue", "github": "green", "linkedin": "purple"}


def _contact_badges_html(profile: Profile) -> str:
    by_icon = {link.icon: link for link in profile.links}
    parts = []
    for icon, color in CONTACT_COLORS.items():
        link = by_icon.get(icon)
        if link is None:
            continue
        inner = (
            f'<span class="badge outline accent-{color}">{icon_svg(icon, 12)} {escape(link.label)}</span>'
        )
        parts.append(link_html(link.href, inner, "badge-link"))
    return f'<div class="tech-row">{"".join(parts)}</div>'


def _paragraph_html(segments) -> str:
    out = []
    for text, accent in segments:
        if accent:
            out.append(f'<strong class="accent-{accent}">{escape(text)}</strong>')
        else:
            out.append(escape(text))
    return f"<p>{''.join(out)}</p>"


def intro_html(profile: Profile) -> str:
    prose = "".join(_paragraph_html(p) for p in profile.about_paragraphs)
    return (
        f'<div class="panel-box">'
        f'<div class="about-intro">'
        f'<div class="avatar">{escape(profile.initials)}</div>'
        f"<div>"
        f"<h3>{escape(profile.name)}</h3>"
        f"<p>{escape(profile.bio)}</p>"
        f"{_contact_badges_html(profile)}"
        f"</div>"
        f"</div>"
        f'<div class="about-prose">{prose}</div>'
        f"</div>"
    )


def toolkit_html(site: SiteContent) -> str:
    groups = "".join(
        f'<div class="skill-group accent-{g.color}">'
        f'<h4 class="group-title">{escape(g.title)}</h4>'
        f'<div class="tech-row">{"".join(badge_html(s, g.color, "secondary") for s in g.skills)}</div>'
        f"</div>"
        for g in site.skill_groups
    )
    heading = box_heading_html("My Technical Toolkit", "terminal", "green")
    return f'<div class="panel-box">{heading}{groups}</div>'


def interests_html(site: SiteContent) -> str:
    items = "".join(
        f'<div class="interest accent-{i.color}"><h4>{escape(i.title)}</h4><p>{escape(i.description)}</p></div>'
        for i in site.interests
    )
    heading = box_heading_html("Areas I'm Excited About", "brain", "purple")
    return f'<div class="panel-box">{heading}{items}</div>'


def panel_html(site: SiteContent = SITE) -> str:
    return (
        section_title_html(TITLE, PANEL)
        + intro_html(site.profile)
        + f'<div class="grid-2">{toolkit_html(site)}{interests_html(site)}</div>'
    )


def render(cfg: AppConfig) -> None:
    render_section_title(TITLE, PANEL)
    st.markdown(intro_html(SITE.profile), unsafe_allow_html=True)

    c1, c2 = st.columns(2, gap="large")
    with c1:
        st.markdown(toolkit_html(SITE), unsafe_allow_html=True)
    with c2:
        st.markdown(interests_html(SITE), unsafe_allow_html=True)
