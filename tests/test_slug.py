"""Tests for slug sanitising and filename/URL derivation."""

import re

from playforge.services.slug import (
    MAX_SLUG_LENGTH,
    generate_random_slug,
    page_slug,
    sanitize_slug,
    slug_to_filename,
    slug_url,
)

_SLUG_RE = re.compile(r"^[a-z0-9_-]{0,64}$")


class TestSanitizeSlug:
    def test_spaces_and_punctuation(self):
        assert sanitize_slug("Login Page!!") == "login-page"

    def test_inner_underscores_are_kept(self):
        assert sanitize_slug("a_b") == "a_b"

    def test_edge_underscores_trimmed(self):
        assert sanitize_slug("___a___") == "a"

    def test_runs_collapse_to_single_hyphen(self):
        assert sanitize_slug("a  !!  b") == "a-b"

    def test_leading_and_trailing_hyphens_trimmed(self):
        assert sanitize_slug("--hello--") == "hello"
        assert sanitize_slug("  ¿hola?  ") == "hola"

    def test_uppercase_lowered(self):
        assert sanitize_slug("SpaceInvaders") == "spaceinvaders"

    def test_long_input_truncated(self):
        assert len(sanitize_slug("x" * 100)) == MAX_SLUG_LENGTH

    def test_truncation_never_leaves_trailing_hyphen(self):
        slug = sanitize_slug("a" * 63 + " b")
        assert slug == "a" * 63
        assert not slug.endswith("-")

    def test_empty_and_unusable_input(self):
        assert sanitize_slug("") == ""
        assert sanitize_slug("!!!") == ""

    def test_path_characters_removed(self):
        assert sanitize_slug("../../etc/passwd") == "etc-passwd"

    def test_output_alphabet_for_assorted_inputs(self):
        samples = [
            "Login Page!!",
            "___a___",
            "ünïcödé ßtring",
            "-" * 80,
            "a/b\\c.d",
            "emoji 🎮 game",
            "x" * 200 + "!",
            "\t\n  ",
        ]
        for sample in samples:
            slug = sanitize_slug(sample)
            assert _SLUG_RE.match(slug), sample
            assert not slug.startswith("-")
            assert not slug.endswith("-")

    def test_is_deterministic(self):
        assert sanitize_slug("My Game") == sanitize_slug("My Game")


class TestSlugHelpers:
    def test_filename_appends_extension(self):
        assert slug_to_filename("test-slug") == "test-slug.html"

    def test_filename_keeps_existing_extension(self):
        assert slug_to_filename("page.html") == "page.html"

    def test_page_slug_accepts_html_extension(self):
        assert page_slug("foo.html") == "foo"
        assert page_slug("Foo.HTML") == "foo"
        assert page_slug("Test Slug") == "test-slug"
        assert page_slug(".html") == ""

    def test_url(self):
        assert slug_url("test-slug") == "/generated/test-slug"


class TestGenerateRandomSlug:
    def test_prefix_and_alphabet(self):
        slug = generate_random_slug()
        assert slug.startswith("game-")
        assert _SLUG_RE.match(slug)
        assert len(slug.split("-")) == 3

    def test_custom_prefix_is_sanitised(self):
        slug = generate_random_slug("My Prefix")
        assert slug.startswith("my-prefix-")
        assert _SLUG_RE.match(slug)

    def test_two_slugs_differ(self):
        assert generate_random_slug() != generate_random_slug()
