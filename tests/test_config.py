"""
Tests for env-driven configuration.
"""

from config import TAB_IDS, get_config


class TestDefaults:

    def test_defaults_without_env(self, clean_env):
        cfg = get_config()
        assert cfg.blog_post_source == "static/posts/sample-post.md"
        assert cfg.blog_fetch_timeout_s == 30.0
        assert cfg.default_tab == "about"
        assert cfg.hero_blob_count == 20
        assert cfg.log_level == "INFO"
        assert not cfg.blog_post_is_remote

    def test_about_is_a_known_tab(self):
        assert TAB_IDS[0] == "about"
        assert len(TAB_IDS) == 5


class TestOverrides:

    def test_env_values_are_used(self, clean_env):
        clean_env.setenv("BLOG_POST_SOURCE", "https://example.com/post.md")
        clean_env.setenv("BLOG_FETCH_TIMEOUT_S", "5")
        clean_env.setenv("DEFAULT_TAB", "Blog")
        clean_env.setenv("HERO_BLOB_COUNT", "3")
        clean_env.setenv("LOG_LEVEL", "debug")
        cfg = get_config()
        assert cfg.blog_post_is_remote
        assert cfg.blog_fetch_timeout_s == 5.0
        assert cfg.default_tab == "blog"
        assert cfg.hero_blob_count == 3
        assert cfg.log_level == "DEBUG"

    def test_blank_values_fall_back(self, clean_env):
        clean_env.setenv("BLOG_FETCH_TIMEOUT_S", "   ")
        clean_env.setenv("DEFAULT_TAB", "")
        cfg = get_config()
        assert cfg.blog_fetch_timeout_s == 30.0
        assert cfg.default_tab == "about"

    def test_bad_numbers_fall_back(self, clean_env):
        clean_env.setenv("BLOG_FETCH_TIMEOUT_S", "soon")
        clean_env.setenv("HERO_BLOB_COUNT", "-4")
        cfg = get_config()
        assert cfg.blog_fetch_timeout_s == 30.0
        assert cfg.hero_blob_count == 20

    def test_unknown_tab_and_level_fall_back(self, clean_env):
        clean_env.setenv("DEFAULT_TAB", "contact")
        clean_env.setenv("LOG_LEVEL", "chatty")
        cfg = get_config()
        assert cfg.default_tab == "about"
        assert cfg.log_level == "INFO"

    def test_non_finite_numbers_fall_back(self, clean_env):
        clean_env.setenv("BLOG_FETCH_TIMEOUT_S", "inf")
        cfg = get_config()
        assert cfg.blog_fetch_timeout_s == 30.0

        clean_env.setenv("BLOG_FETCH_TIMEOUT_S", "nan")
        cfg = get_config()
        assert cfg.blog_fetch_timeout_s == 30.0
