from __future__ import annotations

import streamlit as st

from config import ACCENT_PALETTE, FADE_IN_DELAY_MS, FADE_IN_DURATION_MS, THEME


APP_TITLE = "Bhavesh Gurnani - Portfolio"
APP_DESCRIPTION = "Portfolio of Bhavesh Gurnani, Computer Science student at IIT Delhi."


BASE_CSS = """
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

:root{
  --bg-from: __BG_FROM__;
  --bg-to: __BG_TO__;
  --bg-panel: __BG_PANEL__;
  --bg-footer: __BG_FOOTER__;
  --grad-from: __GRAD_FROM__;
  --grad-to: __GRAD_TO__;
  --overlay-from: __OVERLAY_FROM__;
  --overlay-to: __OVERLAY_TO__;
  --blob: __BLOB__;
  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --text-muted: __TEXT_MUTED__;
  --text-faint: __TEXT_FAINT__;
  --border: __BORDER__;
  --highlight: __HIGHLIGHT__;
  --danger: __DANGER__;
  --danger-bg: __DANGER_BG__;
  --radius: __RADIUS_PX__px;
}

@keyframes float{
  0%   { transform: translateY(0px) scale(1); opacity: 0.2; }
  50%  { transform: translateY(-20px) scale(1.05); opacity: 0.3; }
  100% { transform: translateY(0px) scale(1); opacity: 0.2; }
}
@keyframes fade-in{
  from { opacity: 0; }
  to   { opacity: 1; }
}
@keyframes bounce{
  0%, 100% { transform: translate(-50%, -25%); animation-timing-function: cubic-bezier(0.8,0,1,1); }
  50%      { transform: translate(-50%, 0); animation-timing-function: cubic-bezier(0,0,0.2,1); }
}
@keyframes pulse{
  50% { opacity: .5; }
}

/* Page surface + fade-in */
html, body, [data-testid="stAppViewContainer"]{
  background: linear-gradient(to bottom right, var(--bg-from), var(--bg-to)) !important;
  color: var(--text-primary) !important;
  font-family: "Inter", system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif !important;
}
.page, [data-testid="stAppViewContainer"] .block-container{
  animation: fade-in __FADE_MS__ms ease-in-out __FADE_DELAY_MS__ms both;
}
a{ color: inherit; text-decoration: none; }

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
header[data-testid="stHeader"] { background: transparent; }
footer:not(.site-footer) { visibility: hidden; }
.block-container{ padding-top: 0 !important; max-width: 1200px; }

/* Hero */
.hero{
  position: relative;
  min-height: 92vh;
  display: flex;
  align-items: center;
  justify-content: center;
  overflow: hidden;
  border-radius: var(--radius);
}
.hero-overlay{
  position: absolute; inset: 0; z-index: 1;
  background: linear-gradient(to right, var(--overlay-from), var(--overlay-to));
}
.hero-bg{ position: absolute; inset: 0; z-index: 0; }
.hero-bg .radial{
  position: absolute; inset: 0;
  background: radial-gradient(circle at center, rgba(55,65,81,0.3) 0, #111827 100%);
}
.hero-blob{
  position: absolute;
  border-radius: 9999px;
  background: var(--blob);
  filter: blur(70px);
  animation-name: float;
  animation-timing-function: ease-in-out;
  animation-iteration-count: infinite;
}
.hero-content{ position: relative; z-index: 2; text-align: center; padding: 0 24px; }
.hero-title{
  font-size: clamp(40px, 6vw, 60px);
  font-weight: 700;
  margin: 0 0 16px 0;
}
.hero-headline{ font-size: clamp(20px, 2.4vw, 24px); color: var(--text-secondary); margin: 0 0 32px 0; }
.hero-tagline{ font-size: clamp(18px, 2vw, 20px); color: var(--text-secondary); max-width: 42rem; margin: 0 auto 32px auto; }
.social-row{ display: flex; justify-content: center; gap: 16px; margin-bottom: 48px; }
.social-icon{
  display: inline-flex; padding: 12px; border-radius: 9999px;
  background: #1F2937; color: var(--text-primary);
  transition: transform .2s, background .2s;
}
.social-icon:hover{ background: #374151; transform: scale(1.1); }
.badge-row{ display: flex; flex-wrap: wrap; justify-content: center; gap: 12px; }
.scroll-hint{
  position: absolute; bottom: 40px; left: 50%; z-index: 2;
  color: var(--text-muted);
  animation: bounce 1s infinite;
}

/* Gradient text */
.gradient-text, .section-title{
  background: linear-gradient(to right, var(--grad-from), var(--grad-to));
  -webkit-background-clip: text;
  background-clip: text;
  color: transparent !important;
}
.section-title{
  font-size: 30px;
  font-weight: 700;
  text-align: center;
  margin: 0 0 32px 0;
}

/* Badges */
.badge{
  display: inline-flex; align-items: center; gap: 4px;
  border: 1px solid var(--a-500);
  border-radius: 9999px;
  font-size: 12px; font-weight: 600;
  padding: 2px 10px;
}
.badge.outline{ background: rgba(var(--a-rgb-900), 0.3); color: var(--a-300); }
.badge.secondary{ background: rgba(var(--a-rgb-900), 0.4); color: var(--a-200); border-color: rgba(var(--a-rgb-700), 0.5); }
.badge.hero-badge{ padding: 8px 16px; font-size: 14px; }
.badge-link:hover .badge{ background: rgba(var(--a-rgb-900), 0.5); }

/* Panels */
.panel-box{
  background: var(--bg-panel);
  border: 1px solid var(--border);
  border-radius: var(--radius);
  padding: 24px;
  margin-bottom: 24px;
}
.grid-2{ display: grid; grid-template-columns: repeat(auto-fit, minmax(320px, 1fr)); gap: 32px; }
.panel-box h3{ display: flex; align-items: center; gap: 8px; font-size: 20px; font-weight: 700; margin: 0 0 16px 0; }
.avatar{
  width: 160px; height: 160px; flex-shrink: 0;
  border-radius: 9999px;
  background: linear-gradient(to bottom right, #3B82F6, #9333EA);
  display: flex; align-items: center; justify-content: center;
  font-size: 56px; font-weight: 700; user-select: none;
}
.about-intro{ display: flex; flex-wrap: wrap; gap: 32px; align-items: center; margin-bottom: 32px; }
.about-intro h3{ font-size: 28px; margin: 0 0 8px 0; }
.about-intro p{ color: var(--text-secondary); }
.about-prose p{ color: var(--text-secondary); line-height: 1.7; }
.about-prose strong{ color: var(--a-400); }
.group-title{
  font-size: 13px; font-weight: 600; text-transform: uppercase; letter-spacing: .05em;
  color: var(--a-300); margin: 0 0 8px 0;
}
.skill-group{ margin-bottom: 24px; }
.interest{
  padding: 12px; margin-bottom: 16px;
  background: rgba(var(--a-rgb-900), 0.2);
  border-left: 4px solid var(--a-500);
  border-radius: 4px;
}
.interest h4{ color: var(--a-300); font-weight: 600; margin: 0; }
.interest p{ color: var(--text-secondary); font-size: 14px; margin: 0; }

/* Project card */
.project-card{
  display: flex; flex-direction: column;
  background: var(--bg-panel);
  border: 1px solid var(--a-500);
  border-radius: var(--radius);
  padding: 32px;
  margin-bottom: 48px;
  transition: box-shadow .3s, transform .3s;
}
.project-card:hover{ transform: translateY(-4px); box-shadow: 0 10px 15px -3px rgba(var(--a-rgb-500), 0.3); }
.project-title{ color: var(--a-300); font-size: 24px; font-weight: 700; margin: 0 0 8px 0; }
.project-subtitle{ color: var(--text-muted); font-size: 18px; margin: 0 0 16px 0; }
.project-description{ color: var(--text-secondary); margin: 0 0 24px 0; }
.card-label{
  font-size: 13px; font-weight: 600; text-transform: uppercase;
  color: var(--text-faint); margin: 0 0 12px 0;
}
.project-details{ color: var(--text-secondary); font-size: 14px; margin: 0 0 24px 0; padding-left: 20px; }
.tech-row{ display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 24px; }
.card-links{ margin-top: auto; padding-top: 16px; display: flex; flex-wrap: wrap; gap: 16px; }
.btn{
  display: inline-flex; align-items: center; gap: 8px;
  padding: 8px 16px; font-size: 14px; border-radius: 6px;
  transition: background .2s;
}
.btn-code{ background: #374151; color: var(--a-300) !important; border: 1px solid var(--a-700); }
.btn-code:hover{ background: #4B5563; }
.btn-project{ background: var(--a-600); color: #FFFFFF !important; }
.btn-project:hover{ background: var(--a-500); }

/* Achievement card */
.achievement-card{
  display: flex; align-items: flex-start; gap: 16px;
  padding: 16px; margin-bottom: 16px;
  background: rgba(55, 65, 81, 0.2);
  border-radius: var(--radius);
  border-left: 4px solid rgba(var(--a-rgb-500), 0.3);
  transition: background .2s;
}
.achievement-card:hover{ background: rgba(55, 65, 81, 0.4); }
.achievement-icon{ font-size: 24px; }
.achievement-title{ color: var(--a-400); font-weight: 600; margin: 0; }
.achievement-description{ color: var(--text-secondary); font-size: 14px; margin: 0; }

/* Experience timeline */
.timeline{ position: relative; border-left: 2px solid var(--border); padding-left: 32px; margin-left: 16px; }
.timeline-entry{ position: relative; margin-bottom: 48px; }
.timeline-dot{
  position: absolute; left: -45px; top: 4px;
  width: 24px; height: 24px; border-radius: 9999px;
  background: var(--a-500);
  border: 4px solid #111827;
}
.timeline-dot.upcoming{ animation: pulse 2s cubic-bezier(0.4,0,0.6,1) infinite; }
.period-pill{
  display: inline-block; padding: 4px 12px; border-radius: 9999px;
  background: rgba(var(--a-rgb-900), 0.3); color: var(--a-300);
  font-size: 14px; font-weight: 500; margin-bottom: 16px;
}
.timeline-role{ font-size: 24px; font-weight: 700; margin: 0 0 4px 0; }
.timeline-org{ font-size: 18px; color: var(--text-muted); margin: 0 0 16px 0; }
.timeline-body p{ color: var(--text-secondary); margin: 0 0 16px 0; }
.timeline-body ul{ color: var(--text-secondary); font-size: 14px; padding-left: 20px; }

/* Education + activities */
.edu-entry{
  border-left: 4px solid var(--a-500);
  padding: 8px 0 8px 16px; margin-bottom: 24px;
  background: rgba(55, 65, 81, 0.1);
  border-radius: 0 6px 6px 0;
}
.edu-head{ display: flex; justify-content: space-between; align-items: center; margin-bottom: 4px; }
.edu-title{ color: var(--a-300); font-size: 18px; font-weight: 600; margin: 0; }
.edu-score{ color: var(--a-400); font-size: 14px; font-weight: 500; }
.edu-program{ color: var(--text-muted); font-size: 14px; margin: 0; }
.edu-period{ color: var(--text-faint); font-size: 12px; margin: 0; }
.activity{
  background: rgba(55, 65, 81, 0.3);
  border: 1px solid rgba(75, 85, 99, 0.5);
  border-radius: var(--radius);
  padding: 16px; margin-bottom: 16px;
}
.activity h4{ color: #86EFAC; font-weight: 600; margin: 0 0 4px 0; }
.activity p{ color: var(--text-secondary); font-size: 14px; margin: 0; }

/* Blog post */
.post-box{ max-width: 48rem; margin: 0 auto; }
.post-status{ text-align: center; color: var(--text-muted); }
.post-error{
  text-align: center; color: var(--danger);
  background: var(--danger-bg);
  border: 1px solid rgba(239, 68, 68, 0.3);
  border-radius: 4px; padding: 8px 16px;
}
.post-empty{ text-align: center; color: var(--text-faint); }
.post-note{ text-align: center; color: var(--text-faint); font-size: 12px; margin-top: 32px; }

/* Footer */
.site-footer{
  background: var(--bg-footer);
  border-top: 1px solid #1F2937;
  padding: 48px 24px;
  text-align: center;
  margin-top: 64px;
}
.site-footer h3{ font-size: 24px; font-weight: 700; margin: 0 0 16px 0; }
.site-footer p{ color: var(--text-muted); margin: 0 0 24px 0; }
.site-footer .social-row{ gap: 24px; margin-bottom: 32px; }
.site-footer .social-link{ color: var(--text-muted); transition: color .2s, transform .2s; }
.site-footer .social-link:hover{ color: #FFFFFF; transform: scale(1.1); }
.site-footer .copyright{ font-size: 14px; color: var(--text-faint); margin: 0; }
.site-footer .built-with{ font-size: 12px; color: #4B5563; margin: 8px 0 0 0; }

/* Tab bar (Streamlit radio rendered as pills) */
div[data-testid="stRadio"] div[role="radiogroup"]{
  display: grid; grid-template-columns: repeat(5, 1fr); gap: 4px;
  background: #1F2937; padding: 4px; border-radius: var(--radius);
  margin-bottom: 48px;
}
div[data-testid="stRadio"] div[role="radiogroup"] > label{
  justify-content: center; margin: 0 !important; padding: 8px !important;
  border-radius: 4px; color: var(--text-muted) !important;
}
div[data-testid="stRadio"] div[role="radiogroup"] > label:has(input:checked){
  background: #374151; color: #FFFFFF !important;
}
div[data-testid="stRadio"] div[role="radiogroup"] > label > div:first-child{ display: none; }
"""


POST_CSS = """
__SCOPE__{ color: var(--text-secondary); line-height: 1.75; }
__SCOPE__ h1, __SCOPE__ h2, __SCOPE__ h3, __SCOPE__ h4{
  background: linear-gradient(to right, var(--grad-from), var(--grad-to));
  -webkit-background-clip: text;
  background-clip: text;
  color: transparent !important;
}
__SCOPE__ a{ color: #60A5FA; }
__SCOPE__ a:hover{ color: #93C5FD; }
__SCOPE__ strong{ color: #FDE047; }
__SCOPE__ code{ color: #FDE047; background: #374151; padding: 2px 4px; border-radius: 4px; }
__SCOPE__ pre{ background: #111827; border: 1px solid var(--border); border-radius: 6px; padding: 16px; overflow-x: auto; }
__SCOPE__ pre code{ background: transparent; padding: 0; }
__SCOPE__ blockquote{ border-left: 4px solid #A855F7; color: var(--text-muted); margin: 0; padding-left: 16px; }
__SCOPE__ li::marker{ color: #C084FC; }
__SCOPE__ table{ border-collapse: collapse; }
__SCOPE__ th, __SCOPE__ td{ border: 1px solid var(--border); padding: 4px 8px; }
"""

# Exported page wraps the post in <article class="post">; Streamlit keys its container.
POST_SCOPES = (".post", ".st-key-blog-post")


def post_css() -> str:
    return "".join(POST_CSS.replace("__SCOPE__", scope) for scope in POST_SCOPES)


def accent_css() -> str:
    """One `.accent-<name>` class per palette; components pick shades via CSS variables."""
    rules = []
    for name, shades in ACCENT_PALETTE.items():
        rules.append(
            f".accent-{name}{{"
            f"--a-200:{shades['200']};--a-300:{shades['300']};--a-400:{shades['400']};"
            f"--a-500:{shades['500']};--a-600:{shades['600']};--a-700:{shades['700']};"
            f"--a-rgb-500:{shades['rgb_500']};--a-rgb-700:{shades['rgb_700']};--a-rgb-900:{shades['rgb_900']};}}"
        )
    return "\n".join(rules)


def page_css() -> str:
    """Full stylesheet shared by the Streamlit app and the static export."""
    tokens = {
        "__BG_FROM__": str(THEME["bg_from"]),
        "__BG_TO__": str(THEME["bg_to"]),
        "__BG_PANEL__": str(THEME["bg_panel"]),
        "__BG_FOOTER__": str(THEME["bg_footer"]),
        "__GRAD_FROM__": str(THEME["gradient_from"]),
        "__GRAD_TO__": str(THEME["gradient_to"]),
        "__OVERLAY_FROM__": str(THEME["overlay_from"]),
        "__OVERLAY_TO__": str(THEME["overlay_to"]),
        "__BLOB__": str(THEME["blob"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__TEXT_MUTED__": str(THEME["text_muted"]),
        "__TEXT_FAINT__": str(THEME["text_faint"]),
        "__BORDER__": str(THEME["border_color"]),
        "__HIGHLIGHT__": str(THEME["highlight"]),
        "__DANGER__": str(THEME["danger"]),
        "__DANGER_BG__": str(THEME["danger_bg"]),
        "__RADIUS_PX__": str(int(THEME["radius_px"])),
        "__FADE_MS__": str(FADE_IN_DURATION_MS),
        "__FADE_DELAY_MS__": str(FADE_IN_DELAY_MS),
    }
    css = BASE_CSS
    for k, v in tokens.items():
        css = css.replace(k, v)
    return css + post_css() + "\n" + accent_css()


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="\U0001F9E0",
        layout="wide",
        initial_sidebar_state="collapsed",
        menu_items={"About": APP_DESCRIPTION},
    )
    st.markdown(f"<style>{page_css()}</style>", unsafe_allow_html=True)
