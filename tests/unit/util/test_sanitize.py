"""Unit tests for comment sanitization."""

from blog.util.sanitize import sanitize_text


class TestSanitizeText:
    """Tests for sanitize_text."""

    def test_plain_text_is_unchanged(self):
        assert sanitize_text("Nice post, thanks") == "Nice post, thanks"

    def test_tags_are_stripped(self):
        assert sanitize_text("<b>bold</b> move") == "bold move"

    def test_script_bodies_are_removed(self):
        assert sanitize_text("hi<script>alert(1)</script>") == "hi"

    def test_control_characters_are_removed(self):
        assert sanitize_text("a\x01b\x07c\x7f") == "abc"

    def test_newlines_and_tabs_survive(self):
        assert sanitize_text("line one\nline\ttwo") == "line one\nline\ttwo"

    def test_surrounding_whitespace_is_trimmed(self):
        assert sanitize_text("   spaced  \n") == "spaced"

    def test_markup_only_input_becomes_empty(self):
        assert sanitize_text("<img src=x onerror=alert(1)>") == ""

    def test_ampersand_and_angle_bracket_stay_plain_text(self):
        assert sanitize_text("Tom & Jerry, 1 < 2") == "Tom & Jerry, 1 < 2"

    def test_tags_are_stripped_around_plain_entities(self):
        assert sanitize_text("<p>fish & chips</p>") == "fish & chips"

    def test_output_is_never_longer_than_input(self):
        content = "&" + "a" * 4999

        assert sanitize_text(content) == content
