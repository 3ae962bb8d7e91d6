"""
Tests for HTML escaping of data-derived text
"""
import pytest

from jsonhighlight.escape import HTML_ENTITIES, escape_html


class TestEscapeHtml:

    def test_all_trigger_characters(self):
        assert escape_html("&<>'\"") == "&amp;&lt;&gt;&#39;&quot;"

    @pytest.mark.parametrize("char, entity", sorted(HTML_ENTITIES.items()))
    def test_single_character(self, char, entity):
        assert escape_html(f"a{char}b") == f"a{entity}b"

    def test_plain_text_unchanged(self):
        assert escape_html("plain text 123") == "plain text 123"

    def test_empty_string(self):
        assert escape_html("") == ""

    def test_unicode_preserved(self):
        assert escape_html("žluťoučký <kůň> 🐎") == "žluťoučký &lt;kůň&gt; 🐎"

    def test_script_tag(self):
        assert escape_html("<script>alert('x')</script>") == (
            "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;"
        )

    def test_escaping_twice_double_encodes(self):
        once = escape_html("Tom & Jerry <3")
        twice = escape_html(once)
        assert twice != once
        assert twice == "Tom &amp;amp; Jerry &amp;lt;3"

    def test_no_raw_trigger_characters_remain(self):
        text = "if a < b && c > d: print(\"'quoted'\")"
        escaped = escape_html(text)
        for char in "<>'\"":
            assert char not in escaped
        # Every remaining ampersand starts an entity
        assert escaped.count("&") == sum(escaped.count(e) for e in HTML_ENTITIES.values())
        assert len(escaped) >= len(text)
