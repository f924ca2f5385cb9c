"""
Tests for the HTML builders: cards, links, timeline, hero and footer.
"""

import random
import re
from html import escape

from components.cards import achievement_card_html, link_html, project_card_html
from components.footer import footer_html
from components.header import hero_blobs, hero_html
from components.timeline import timeline_html
from data.content import SITE, Project
from data.service import READY, PostResult, render_markdown
from export import render_page_html


ANCHOR = re.compile(r"<a ([^>]*)>")


class TestLinks:

    def test_external_link_opens_new_tab(self):
        html = link_html("https://example.com", "x")
        assert 'target="_blank"' in html
        assert 'rel="noopener noreferrer"' in html

    def test_mailto_and_anchor_stay_in_place(self):
        for href in ("mailto:someone@example.com", "#main-content"):
            html = link_html(href, "x")
            assert "target=" not in html
            assert "rel=" not in html

    def test_every_external_anchor_on_page_is_safe(self, make_cfg):
        post = "[site](https://example.com) [mail](mailto:me@example.com)\n"
        result = PostResult(state=READY, source="x", text=post, html=render_markdown(post))
        page = render_page_html(make_cfg(), result, seed=1, year=2024)
        assert SITE.profile.links[0].href in page
        anchors = ANCHOR.findall(page)
        assert anchors
        for attrs in anchors:
            if 'href="http' in attrs:
                assert 'target="_blank"' in attrs
                assert 'rel="noopener noreferrer"' in attrs
            else:
                assert "target=" not in attrs


class TestProjectCard:

    def test_one_card_per_project(self):
        html = "".join(project_card_html(p) for p in SITE.projects)
        assert html.count('class="project-card ') == len(SITE.projects)
        for p in SITE.projects:
            assert escape(p.title) in html

    def test_technologies_become_badges(self):
        p = SITE.projects[1]
        html = project_card_html(p)
        for tech in p.technologies:
            assert f">{escape(tech)}</span>" in html
        assert f"accent-{p.color}" in html

    def test_links_only_when_present(self):
        bare = Project("Bare", "Sub", "Desc", ("one",), ("Python",))
        html = project_card_html(bare)
        assert "card-links" not in html
        assert "View Code" not in html

        arc = project_card_html(SITE.projects[0])
        assert "View Code" in arc
        assert "View Project" in arc

    def test_text_is_escaped(self):
        p = Project("<b>x</b>", "S", "D", (), ())
        assert "<b>x</b>" not in project_card_html(p)


class TestAchievementCard:

    def test_one_card_per_achievement(self):
        html = "".join(achievement_card_html(a) for a in SITE.achievements)
        assert html.count('class="achievement-card ') == len(SITE.achievements)
        for a in SITE.achievements:
            assert escape(a.title) in html
            assert escape(a.description) in html


class TestTimeline:

    def test_upcoming_entry_pulses(self):
        html = timeline_html(SITE.experience)
        assert html.count("timeline-dot upcoming") == 1
        assert html.count('class="timeline-entry ') == len(SITE.experience)


class TestHero:

    def test_blob_count_and_ranges(self):
        blobs = hero_blobs(20, random.Random(42))
        assert len(blobs) == 20
        for b in blobs:
            assert 0 <= b.top_pct <= 100
            assert 0 <= b.left_pct <= 100
            assert 50 <= b.size_px <= 350
            assert 0 <= b.opacity <= 0.3
            assert 10 <= b.duration_s <= 20
            assert 0 <= b.delay_s <= 5

    def test_seed_is_reproducible(self):
        assert hero_blobs(5, random.Random(7)) == hero_blobs(5, random.Random(7))

    def test_hero_html(self):
        blobs = hero_blobs(3, random.Random(1))
        html = hero_html(SITE, blobs)
        assert html.count('class="hero-blob"') == 3
        assert escape(SITE.profile.name) in html
        assert 'href="#main-content"' in html


class TestFooter:

    def test_year_and_name(self):
        html = footer_html(SITE, 2031)
        assert f"&copy; 2031 {escape(SITE.profile.name)}." in html
        assert html.count('class="social-link"') == len(SITE.profile.links)
