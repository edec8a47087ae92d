"""
Row -> single-line digest record.

Record layout (separators are literal):
  <status> <date> . [<prefix> - ]<title or link>[ - <sources>][ - <members>]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from sheetdigest.links import (
    POLICY_RICH,
    POLICY_SIMPLE,
    as_links,
    has_sub_link,
    label_source_links,
    normalize_url,
    select_links,
)
from sheetdigest.members import MEMBER_MAP, resolve_initials
from sheetdigest.styles import (
    ANCHOR_STYLE,
    BASE_SPAN_STYLE,
    BOLD_SPAN_STYLE,
    LINK_SPAN_STYLE,
    MEMBERS_SPAN_STYLE,
)
from sheetdigest.table_extract import Cell, Link, cell_text
from sheetdigest.titles import split_name_and_initials, split_prefix

# Positional columns of the tracker sheet
COL_DATE = 1
COL_TITLE = 2
COL_CATEGORY = 3
COL_OFFICIAL = 4
COL_ALTERNATE = 5
COL_SUB = 8
MIN_ROW_CELLS = 9

STATUS_HAS_SUB = "✔️"
STATUS_NO_SUB = "❌"
UNTITLED = "Untitled"
SEPARATOR = " - "
SOURCE_SEPARATOR = " | "


@dataclass(frozen=True)
class FormatOptions:
    show_prefix: bool = True
    policy: str = POLICY_RICH
    member_map: Mapping[str, str] = field(default_factory=lambda: MEMBER_MAP)


def escape_html(unsafe: str) -> str:
    return (
        (unsafe or "")
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def is_formattable(row: Sequence[Cell]) -> bool:
    if len(row) < MIN_ROW_CELLS:
        return False
    return bool(cell_text(row[COL_DATE]) or cell_text(row[COL_TITLE]))


def _span(style: str, text: str) -> str:
    return f'<span style="{style}">{text}</span>'


def _anchor(link: Link, label_html: str) -> str:
    href = escape_html(normalize_url(link.url))
    return (
        f'<a href="{href}" target="_blank" style="{ANCHOR_STYLE}">'
        f"{_span(LINK_SPAN_STYLE, label_html)}</a>"
    )


def _render_sources(links: List[Link]) -> str:
    sep = _span(BASE_SPAN_STYLE, SOURCE_SEPARATOR)
    return sep.join(_anchor(link, escape_html(link.label)) for link in links)


def format_row(row: Sequence[Cell], options: Optional[FormatOptions] = None) -> str:
    """
    Format one sheet row as an HTML record.

    Rows that are too short or have neither a date nor a title yield "".
    """
    opts = options or FormatOptions()
    if not is_formattable(row):
        return ""

    date = cell_text(row[COL_DATE])
    full_title = cell_text(row[COL_TITLE]) or UNTITLED
    sub_cell = row[COL_SUB]

    official = as_links(row[COL_OFFICIAL])
    alternate = as_links(row[COL_ALTERNATE]) if opts.policy == POLICY_RICH else []
    selection = select_links(official, alternate, as_links(sub_cell), policy=opts.policy)

    parsed = split_prefix(full_title)
    name_parts = split_name_and_initials(parsed.title)
    escaped_name = escape_html(name_parts.name)

    status = STATUS_HAS_SUB if has_sub_link(sub_cell) else STATUS_NO_SUB
    parts: List[str] = [_span(BASE_SPAN_STYLE, f"{status} {escape_html(date)} . ")]

    if opts.show_prefix and parsed.prefix:
        parts.append(_span(BOLD_SPAN_STYLE, escape_html(parsed.prefix)))
        parts.append(_span(BASE_SPAN_STYLE, SEPARATOR))

    if selection.main_link is not None:
        parts.append(_anchor(selection.main_link, escaped_name))
    else:
        parts.append(_span(BASE_SPAN_STYLE, escaped_name))

    if opts.policy != POLICY_SIMPLE:
        sources = label_source_links(
            selection.source_links, has_main=selection.main_link is not None
        )
        if sources:
            parts.append(_span(BASE_SPAN_STYLE, SEPARATOR))
            parts.append(_render_sources(sources))

    members = resolve_initials(name_parts.initials, opts.member_map)
    if members:
        parts.append(_span(BASE_SPAN_STYLE, SEPARATOR))
        parts.append(_span(MEMBERS_SPAN_STYLE, escape_html(members)))

    return "".join(parts)
