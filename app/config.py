from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (dark slate page with blue -> purple gradient accents).
# - Substituted into the CSS in components/styles.py.
#
THEME = {
    # Backgrounds (gray-900 -> gray-800 gradient)
    "bg_from": "#111827",
    "bg_to": "#1F2937",
    "bg_panel": "rgba(31, 41, 55, 0.5)",   # gray-800/50
    "bg_footer": "#111827",
    # Gradient heading + hero overlay
    "gradient_from": "#60A5FA",  # blue-400
    "gradient_to": "#A855F7",    # purple-500
    "overlay_from": "rgba(30, 58, 138, 0.8)",   # blue-900/80
    "overlay_to": "rgba(88, 28, 135, 0.8)",     # purple-900/80
    "blob": "rgba(59, 130, 246, 0.2)",          # blue-500/20
    # Text + borders
    "text_primary": "#F3F4F6",
    "text_secondary": "#D1D5DB",
    "text_muted": "#9CA3AF",
    "text_faint": "#6B7280",
    "border_color": "#374151",
    "highlight": "#FACC15",  # yellow-400 (strong text)
    "radius_px": 8,
    # Status colors
    "danger": "#F87171",
    "danger_bg": "rgba(127, 29, 29, 0.2)",
}

# Accent palettes (Tailwind shades). "rgb_900" / "rgb_700" feed translucent rgba() fills.
ACCENT_PALETTE = {
    "blue": {"200": "#BFDBFE", "300": "#93C5FD", "400": "#60A5FA", "500": "#3B82F6", "600": "#2563EB",
             "700": "#1D4ED8", "rgb_700": "29, 78, 216", "rgb_900": "30, 58, 138", "rgb_500": "59, 130, 246"},
    "purple": {"200": "#E9D5FF", "300": "#D8B4FE", "400": "#C084FC", "500": "#A855F7", "600": "#9333EA",
               "700": "#7E22CE", "rgb_700": "126, 34, 206", "rgb_900": "88, 28, 135", "rgb_500": "168, 85, 247"},
    "green": {"200": "#BBF7D0", "300": "#86EFAC", "400": "#4ADE80", "500": "#22C55E", "600": "#16A34A",
              "700": "#15803D", "rgb_700": "21, 128, 61", "rgb_900": "20, 83, 45", "rgb_500": "34, 197, 94"},
    "yellow": {"200": "#FEF08A", "300": "#FDE047", "400": "#FACC15", "500": "#EAB308", "600": "#CA8A04",
               "700": "#A16207", "rgb_700": "161, 98, 7", "rgb_900": "113, 63, 18", "rgb_500": "234, 179, 8"},
    "red": {"200": "#FECACA", "300": "#FCA5A5", "400": "#F87171", "500": "#EF4444", "600": "#DC2626",
            "700": "#B91C1C", "rgb_700": "185, 28, 28", "rgb_900": "127, 29, 29", "rgb_500": "239, 68, 68"},
    "indigo": {"200": "#C7D2FE", "300": "#A5B4FC", "400": "#818CF8", "500": "#6366F1", "600": "#4F46E5",
               "700": "#4338CA", "rgb_700": "67, 56, 202", "rgb_900": "49, 46, 129", "rgb_500": "99, 102, 241"},
    "gray": {"200": "#E5E7EB", "300": "#D1D5DB", "400": "#9CA3AF", "500": "#6B7280", "600": "#4B5563",
             "700": "#374151", "rgb_700": "55, 65, 81", "rgb_900": "17, 24, 39", "rgb_500": "107, 114, 128"},
}

# Page fades in after this delay (ms) over FADE_IN_DURATION_MS.
FADE_IN_DELAY_MS = 100
FADE_IN_DURATION_MS = 1000

TAB_IDS = ("about", "projects", "experience", "achievements", "blog")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    # Relative paths resolve against app/; http(s) URLs are fetched over the network.
    blog_post_source: str
    blog_fetch_timeout_s: float

    default_tab: str
    hero_blob_count: int

    log_level: str

    @property
    def blog_post_is_remote(self) -> bool:
        return self.blog_post_source.startswith(("http://", "https://"))


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getnum(name: str, default: float, cast=float):
    raw = _getenv(name)
    if raw is None:
        return cast(default)
    try:
        value = cast(raw)
    except ValueError:
        return cast(default)
    return value if math.isfinite(value) and value >= 0 else cast(default)


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Invalid, negative or non-finite numbers fall back to their defaults
    """
    load_dotenv(override=False)

    log_level = (_getenv("LOG_LEVEL", "INFO") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    default_tab = (_getenv("DEFAULT_TAB", "about") or "about").lower()
    if default_tab not in TAB_IDS:
        default_tab = "about"

    return AppConfig(
        blog_post_source=_getenv("BLOG_POST_SOURCE", "static/posts/sample-post.md") or "",
        blog_fetch_timeout_s=_getnum("BLOG_FETCH_TIMEOUT_S", 30.0),
        default_tab=default_tab,
        hero_blob_count=_getnum("HERO_BLOB_COUNT", 20, cast=int),
        log_level=log_level,
    )
