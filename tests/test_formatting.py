"""
Row -> record formatting: eligibility, status, prefix, links, members, escaping.
"""
import pytest

from sheetdigest.formatting import (
    STATUS_HAS_SUB,
    STATUS_NO_SUB,
    FormatOptions,
    escape_html,
    format_row,
)
from sheetdigest.links import POLICY_SIMPLE
from sheetdigest.styles import BOLD_SPAN_STYLE, MEMBERS_SPAN_STYLE
from sheetdigest.table_extract import Link

SUB = Link("Sub", "https://sub.example/v")
OFF1 = Link("Official", "https://off.example/1")
OFF2 = Link("Official 2", "https://off.example/2")


class TestEligibility:
    """Short or blank rows yield no record."""

    def test_short_row_is_dropped(self):
        assert format_row(["1", "2024-01-01", "Song"]) == ""

    def test_empty_date_and_title_dropped(self, row_factory):
        assert format_row(row_factory(date="", title="")) == ""

    def test_date_only_renders_untitled(self, row_factory):
        out = format_row(row_factory(title=""))
        assert "Untitled" in out


class TestStatus:
    """Status emoji follows the sub cell."""

    @pytest.mark.parametrize("sub", ["None", "", []])
    def test_absent_sub(self, row_factory, sub):
        out = format_row(row_factory(sub=sub))
        assert out.startswith('<span style="')
        assert f">{STATUS_NO_SUB} 2024-05-01 . </span>" in out

    def test_present_sub(self, row_factory):
        out = format_row(row_factory(sub=[SUB]))
        assert f">{STATUS_HAS_SUB} 2024-05-01 . </span>" in out


class TestPrefix:
    """Bracketed prefix is bold and can be hidden."""

    def test_prefix_bold_when_enabled(self, row_factory):
        out = format_row(row_factory(title="[NOTICE] Song"))
        assert f'<span style="{BOLD_SPAN_STYLE}">NOTICE</span>' in out
        assert "[NOTICE]" not in out

    def test_prefix_hidden_when_disabled(self, row_factory):
        out = format_row(row_factory(title="[NOTICE] Song"), FormatOptions(show_prefix=False))
        assert "NOTICE" not in out
        assert ">Song</span>" in out


class TestLinksInRecord:
    """Main link and source annotation inside a rendered record."""

    def test_sub_is_main_and_officials_are_numbered_sources(self, row_factory):
        out = format_row(row_factory(official=[OFF1, OFF2], sub=[SUB]))
        assert '<a href="https://sub.example/v" target="_blank"' in out
        assert ">Song Name</span></a>" in out
        assert ">Source 1</span></a>" in out
        assert ">Source 2</span></a>" in out
        assert out.index("Source 1") < out.index("Source 2")
        assert "> | </span>" in out

    def test_single_official_is_main_without_sources(self, row_factory):
        out = format_row(row_factory(official=[OFF1]))
        assert '<a href="https://off.example/1"' in out
        assert ">Source" not in out
        assert out.count("<a ") == 1

    def test_no_main_link_renders_plain_title(self, row_factory):
        out = format_row(row_factory(official=[OFF1, OFF2]))
        assert ">Song Name</span><span" in out
        assert ">Official</span></a>" in out
        assert ">Official 2</span></a>" in out

    def test_scheme_less_url_gets_https(self, row_factory):
        out = format_row(row_factory(sub=[Link("v", "youtu.be/abc")]))
        assert 'href="https://youtu.be/abc"' in out

    def test_youtube_search_rendered_after_numbered_sources(self, row_factory):
        yt = Link("YouTube Search", "https://www.youtube.com/results?search_query=song")
        out = format_row(row_factory(official=[yt, OFF1], alternate=[OFF2], sub=[SUB]))
        assert ">Source 1</span></a>" in out
        assert ">Source 2</span></a>" in out
        assert ">YouTube Search</span></a>" in out
        assert out.index(">Source 1<") < out.index(">Source 2<") < out.index(">YouTube Search<")
        assert out.count("> | </span>") == 2
        assert 'href="https://www.youtube.com/results?search_query=song"' in out

    def test_root_relative_href_is_not_mangled(self, row_factory):
        out = format_row(row_factory(official=[Link("v", "/watch?v=1")]))
        assert 'href="/watch?v=1"' in out
        assert "https:///" not in out

    def test_simple_policy_has_no_sources(self, row_factory):
        out = format_row(
            row_factory(official=[OFF1, OFF2], sub=[SUB]),
            FormatOptions(policy=POLICY_SIMPLE),
        )
        assert ">Source" not in out
        assert out.count("<a ") == 1

    def test_simple_policy_ignores_alternate_column(self, row_factory):
        out = format_row(
            row_factory(alternate=[OFF1]),
            FormatOptions(policy=POLICY_SIMPLE),
        )
        assert "<a " not in out


class TestMembers:
    """Member initials resolve into a trailing members span."""

    def test_members_span(self, row_factory):
        out = format_row(row_factory())
        assert out.endswith(f'<span style="{MEMBERS_SPAN_STYLE}">Saerom &amp; Hayoung</span>')

    def test_no_members(self, row_factory):
        out = format_row(row_factory(title="Song"))
        assert MEMBERS_SPAN_STYLE not in out


class TestEscaping:
    """Every user-supplied string is HTML-escaped."""

    def test_escape_html(self):
        assert escape_html("""<a href="x">'&'</a>""") == (
            "&lt;a href=&quot;x&quot;&gt;&#039;&amp;&#039;&lt;/a&gt;"
        )

    def test_title_cannot_break_out(self, row_factory):
        out = format_row(row_factory(title="""<b>"Tom's" & Jerry</b>"""))
        assert "&lt;b&gt;&quot;Tom&#039;s&quot; &amp; Jerry&lt;/b&gt;" in out
        assert "<b>" not in out

    def test_href_is_attribute_escaped(self, row_factory):
        out = format_row(row_factory(sub=[Link("v", 'https://x.example/?a=1&b="2"')]))
        assert 'href="https://x.example/?a=1&amp;b=&quot;2&quot;"' in out


class TestIdempotence:
    """Formatting has no hidden state."""

    def test_same_input_same_output(self, row_factory):
        row = row_factory(title="[MV] Song (SR)", official=[OFF1, OFF2], sub=[SUB])
        assert format_row(row) == format_row(row)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
