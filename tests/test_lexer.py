"""
Tokenizer tests - locating {{#webinclude}} and escaped tokens

Tests offsets, document order, filtering of other directive kinds and
escape handling.
"""

from webinclude.lib.lexer import links_find


class TestLinksFind:
    """Test links_find() on plain and directive text"""

    def test_no_links(self):
        """Text without directives yields nothing"""
        assert list(links_find("plain text with { braces } and {{ mustache }}")) == []

    def test_single_link_offsets(self):
        """Offsets delimit the literal token text"""
        source = "see {{#webinclude http://x 2}} here"
        links = list(links_find(source))

        assert len(links) == 1
        link = links[0]
        assert link.kind == "webinclude"
        assert link.args == "http://x 2"
        assert link.link_text == "{{#webinclude http://x 2}}"
        assert source[link.start_index:link.end_index] == link.link_text

    def test_whitespace_after_opening_braces(self):
        """Whitespace is allowed after the opening braces"""
        links = list(links_find("{{ #webinclude http://x}}"))
        assert len(links) == 1
        assert links[0].args == "http://x"

    def test_links_in_document_order(self):
        """Tokens are yielded in order without overlap"""
        source = "{{#webinclude http://a}} mid {{#webinclude http://b 1:2}}"
        links = list(links_find(source))

        assert [link.args for link in links] == ["http://a", "http://b 1:2"]
        assert links[0].end_index <= links[1].start_index

    def test_other_kinds_skipped(self):
        """Other preprocessors' directives are not yielded"""
        source = "{{#include file.rs}} {{#playground x.rs}} {{#webinclude http://a}}"
        links = list(links_find(source))

        assert len(links) == 1
        assert links[0].args == "http://a"

    def test_kind_is_case_sensitive(self):
        """Directive kind is matched case-sensitively"""
        assert list(links_find("{{#WebInclude http://a}}")) == []

    def test_missing_argument_not_matched(self):
        """Directive without an argument is not a token"""
        assert list(links_find("{{#webinclude}}")) == []

    def test_multiline_document(self):
        """Tokens are found across lines"""
        source = "# Title\n\n{{#webinclude http://a 3}}\n\nEnd\n"
        links = list(links_find(source))
        assert len(links) == 1
        assert source[:links[0].start_index] == "# Title\n\n"

    def test_is_lazy(self):
        """Scan is a lazy iterator"""
        iterator = links_find("{{#webinclude http://a}}")
        assert next(iterator).args == "http://a"


class TestEscapedLinks:
    """Test backslash-escaped tokens"""

    def test_escaped_token(self):
        """Backslash before the token marks it escaped"""
        source = r"\{{#webinclude http://x 1}}"
        links = list(links_find(source))

        assert len(links) == 1
        assert links[0].kind is None
        assert links[0].link_text == source
        assert links[0].start_index == 0

    def test_escaped_other_kind_is_also_escaped(self):
        """Escaping is independent of the directive kind"""
        links = list(links_find(r"\{{#include foo.rs}}"))
        assert len(links) == 1
        assert links[0].kind is None

    def test_escape_ends_at_first_closing(self):
        """Escaped token ends at the first closing braces"""
        source = r"\{{#webinclude http://x}} and {{#webinclude http://y}}"
        links = list(links_find(source))

        assert len(links) == 2
        assert links[0].link_text == r"\{{#webinclude http://x}}"
        assert links[1].kind == "webinclude"
        assert links[1].args == "http://y"

    def test_escape_does_not_span_lines(self):
        """An escape needs its closing on the same line; the token itself may wrap"""
        source = "\\{{#webinclude http://x\n}}"
        links = list(links_find(source))

        assert len(links) == 1
        assert links[0].kind == "webinclude"
        assert links[0].start_index == 1
