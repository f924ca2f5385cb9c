from __future__ import annotations

import random
from dataclasses import dataclass
from html import escape
from typing import Optional

import streamlit as st

from components.cards import badge_html, icon_svg, link_html
from data.content import SiteContent


@dataclass(frozen=True)
class Blob:
    top_pct: float
    left_pct: float
    size_px: float
    opacity: float
    duration_s: float
    delay_s: float

    def style(self) -> str:
        return (
            f"top:{self.top_pct:.2f}%;left:{self.left_pct:.2f}%;"
            f"width:{self.size_px:.0f}px;height:{self.size_px:.0f}px;"
            f"opacity:{self.opacity:.3f};"
            f"animation-duration:{self.duration_s:.2f}s;animation-delay:{self.delay_s:.2f}s"
        )


def hero_blobs(count: int = 20, rng: Optional[random.Random] = None) -> list[Blob]:
    """Randomly placed background blobs; purely cosmetic."""
    rng = rng or random.Random()
    return [
        Blob(
            top_pct=rng.random() * 100,
            left_pct=rng.random() * 100,
            size_px=rng.random() * 300 + 50,
            opacity=rng.random() * 0.3,
            duration_s=rng.random() * 10 + 10,
            delay_s=rng.random() * 5,
        )
        for _ in range(count)
    ]


def _social_icons_html(site: SiteContent, css_class: str, size: int = 24) -> str:
    return "".join(
        link_html(link.href, icon_svg(link.icon, size), css_class, aria_label=link.aria_label or link.label)
        for link in site.profile.links
    )


def hero_html(site: SiteContent, blobs: list[Blob]) -> str:
    p = site.profile
    blobs_html = "".join(f'<div class="hero-blob" style="{b.style()}"></div>' for b in blobs)
    badges = "".join(badge_html(b.label, b.color, "outline", "hero-badge") for b in site.hero_badges)
    scroll = link_html("#main-content", icon_svg("chevron-down", 24), "scroll-hint", aria_label="Scroll down to main content")
    return (
        f'<header class="hero">'
        f'<div class="hero-overlay"></div>'
        f'<div class="hero-bg"><div class="radial"></div>{blobs_html}</div>'
        f'<div class="hero-content">'
        f'<h1 class="hero-title gradient-text">Hi, I&#x27;m {escape(p.name)}</h1>'
        f'<h2 class="hero-headline">{escape(p.headline)}</h2>'
        f'<p class="hero-tagline">{escape(p.tagline)}</p>'
        f'<div class="social-row">{_social_icons_html(site, "social-icon")}</div>'
        f'<div class="badge-row">{badges}</div>'
        f"</div>"
        f"{scroll}"
        f"</header>"
    )


def render_header(site: SiteContent, blob_count: int) -> None:
    # Keep the blob layout stable across reruns (tab clicks) within a session.
    seed = st.session_state.setdefault("hero_seed", random.randrange(2**32))
    blobs = hero_blobs(blob_count, random.Random(seed))
    st.markdown(hero_html(site, blobs), unsafe_allow_html=True)
    st.markdown('<div id="main-content"></div>', unsafe_allow_html=True)
