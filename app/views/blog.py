"""
Blog View
=========
Fetches the single markdown post and shows exactly one of three states:
loading, error, or the rendered post.
"""
from __future__ import annotations

from html import escape

import streamlit as st

from components.narrative import render_section_title, section_title_html
from config import AppConfig
from data.content import SITE
from data.service import ERROR, LOADING, PostResult, get_blog_post, loading_result


PANEL = "blog"
TITLE = "Blog / Musings"

LOADING_TEXT = "Loading post..."
EMPTY_TEXT = "Blog post content is empty or could not be loaded."

POST_CONTAINER_KEY = "blog-post"


def post_status_html(result: PostResult) -> str:
    """Markup for every state except a ready, non-empty post."""
    if result.state == LOADING:
        return f'<p class="post-status">{LOADING_TEXT}</p>'
    if result.state == ERROR:
        return f'<p class="post-error">{escape(result.error or "")}</p>'
    return f'<p class="post-empty">{EMPTY_TEXT}</p>'


def post_body_html(result: PostResult) -> str:
    if result.state not in (LOADING, ERROR) and not result.is_empty:
        return f'<article class="post">{result.html}</article>'
    return post_status_html(result)


def note_html() -> str:
    return f'<p class="post-note">{escape(SITE.blog_note)}</p>'


def panel_html(result: PostResult) -> str:
    return (
        section_title_html(TITLE, PANEL)
        + f'<div class="post-box panel-box">{post_body_html(result)}{note_html()}</div>'
    )


def render(cfg: AppConfig) -> None:
    render_section_title(TITLE, PANEL)

    status = st.empty()
    status.markdown(post_status_html(loading_result(cfg)), unsafe_allow_html=True)

    result = get_blog_post(cfg)
    if result.state == ERROR or result.is_empty:
        status.markdown(post_status_html(result), unsafe_allow_html=True)
    else:
        status.empty()
        with st.container(key=POST_CONTAINER_KEY):
            st.markdown(result.text)

    st.markdown(note_html(), unsafe_allow_html=True)
