from __future__ import annotations

from datetime import date
from html import escape
from typing import Optional

import streamlit as st

from components.cards import icon_svg, link_html
from data.content import SiteContent


def footer_html(site: SiteContent, year: Optional[int] = None) -> str:
    year = year or date.today().year
    icons = "".join(
        link_html(link.href, icon_svg(link.icon, 24), "social-link", aria_label=link.aria_label or link.label)
        for link in site.profile.links
    )
    return (
        f'<footer class="site-footer">'
        f'<h3 class="gradient-text">Let&#x27;s Connect!</h3>'
        f"<p>Always open to interesting discussions and collaborations.</p>"
        f'<div class="social-row">{icons}</div>'
        f'<p class="copyright">&copy; {year} {escape(site.profile.name)}.</p>'
        f'<p class="built-with">{escape(site.built_with)}</p>'
        f"</footer>"
    )


def render_footer(site: SiteContent) -> None:
    st.markdown(footer_html(site), unsafe_allow_html=True)
