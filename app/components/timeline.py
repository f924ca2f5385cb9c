from __future__ import annotations

from html import escape

import streamlit as st

from components.cards import badge_row_html, icon_svg
from data.content import EducationEntry, ExperienceEntry


def experience_entry_html(entry: ExperienceEntry) -> str:
    c = entry.color
    dot_cls = "timeline-dot upcoming" if entry.upcoming else "timeline-dot"
    calendar = f' <span style="color:var(--a-400)">{icon_svg("calendar", 16)}</span>' if entry.upcoming else ""
    bullets = ""
    if entry.bullets:
        bullets = "<ul>" + "".join(f"<li>{escape(b)}</li>" for b in entry.bullets) + "</ul>"
    return (
        f'<div class="timeline-entry accent-{c}">'
        f'<div class="{dot_cls}"></div>'
        f'<div><span class="period-pill">{escape(entry.period)}</span>{calendar}</div>'
        f'<h3 class="timeline-role">{escape(entry.role)}</h3>'
        f'<p class="timeline-org">{escape(entry.organization)}</p>'
        f'<div class="panel-box timeline-body">'
        f"<p>{escape(entry.summary)}</p>"
        f"{bullets}"
        f"{badge_row_html(entry.tags, c)}"
        f"</div>"
        f"</div>"
    )


def timeline_html(entries) -> str:
    return '<div class="timeline">' + "".join(experience_entry_html(e) for e in entries) + "</div>"


def education_entry_html(entry: EducationEntry) -> str:
    score = f'<span class="edu-score">{escape(entry.score)}</span>' if entry.score else ""
    return (
        f'<div class="edu-entry accent-{entry.color}">'
        f'<div class="edu-head"><h4 class="edu-title">{escape(entry.institution)}</h4>{score}</div>'
        f'<p class="edu-program">{escape(entry.program)}</p>'
        f'<p class="edu-period">{escape(entry.period)}</p>'
        f"</div>"
    )


def render_timeline(entries) -> None:
    st.markdown(timeline_html(entries), unsafe_allow_html=True)
