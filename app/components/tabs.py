from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class TabState:
    tab: str


TAB_ITEMS = [
    ("👤 About", "about"),
    ("💻 Projects", "projects"),
    ("💼 Experience", "experience"),
    ("🏆 Achievements", "achievements"),
    ("📖 Blog", "blog"),
]

TAB_LABELS = dict((tab, label) for label, tab in TAB_ITEMS)


def resolve_tab(value: str | None, default: str = "about") -> str:
    """Map a tab id or its label to a known tab id; anything else is the default."""
    if value in TAB_LABELS:
        return value
    for label, tab in TAB_ITEMS:
        if value == label:
            return tab
    return default if default in TAB_LABELS else "about"


def render_tab_bar(cfg: AppConfig) -> TabState:
    labels = [label for label, _ in TAB_ITEMS]
    idx = labels.index(TAB_LABELS[resolve_tab(cfg.default_tab)])

    label = st.radio(
        "Section",
        labels,
        index=idx,
        horizontal=True,
        label_visibility="collapsed",
        key="tab_label",
    )
    tab = resolve_tab(label, cfg.default_tab)
    st.session_state["tab"] = tab
    return TabState(tab=tab)
