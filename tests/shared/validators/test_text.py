"""Tests for text sanitization."""

import pytest

from src.shared.validators.text import sanitize


class TestSanitize:
    """Test trimming and HTML escaping."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  hello  ", "hello"),
            ("<b>bold</b>", "&lt;b&gt;bold&lt;/b&gt;"),
            ("Tom & Jerry", "Tom &amp; Jerry"),
            ("O'Brien", "O&#x27;Brien"),
            ('say "hi"', "say &quot;hi&quot;"),
            ("\n\ttabbed\n", "tabbed"),
        ],
    )
    def test_sanitize_strings(self, raw, expected):
        assert sanitize(raw) == expected

    def test_sanitize_none(self):
        assert sanitize(None) == ""

    def test_sanitize_number(self):
        assert sanitize(42) == "42"

    def test_sanitize_does_not_double_trim_inner_whitespace(self):
        assert sanitize("  Jane   Doe ") == "Jane   Doe"
