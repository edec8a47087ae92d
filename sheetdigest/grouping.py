from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from sheetdigest.formatting import (
    COL_CATEGORY,
    COL_DATE,
    COL_TITLE,
    FormatOptions,
    escape_html,
    format_row,
)
from sheetdigest.table_extract import Row, cell_text

UNCATEGORIZED = "Uncategorized"
LINE_BREAK = "<br>"


def category_of(row: Sequence) -> str:
    return cell_text(row[COL_CATEGORY]).strip() or UNCATEGORIZED


def group_rows(rows: Sequence[Row]) -> Dict[str, List[Row]]:
    """
    Group rows by their category cell, keeping first-seen category order and
    row order within a category. Rows without a category column or without
    both date and title are skipped.
    """
    grouped: Dict[str, List[Row]] = {}
    for row in rows:
        if len(row) <= COL_CATEGORY:
            continue
        if not cell_text(row[COL_DATE]) and not cell_text(row[COL_TITLE]):
            continue
        grouped.setdefault(category_of(row), []).append(row)
    return grouped


def format_groups(
    rows: Sequence[Row],
    options: Optional[FormatOptions] = None,
) -> List[Tuple[str, List[str]]]:
    """Format each grouped row once; returns (category, non-empty records) pairs."""
    out: List[Tuple[str, List[str]]] = []
    for category, members in group_rows(rows).items():
        records = [r for r in (format_row(row, options) for row in members) if r]
        out.append((category, records))
    return out


def join_groups(groups: Sequence[Tuple[str, List[str]]], *, with_headers: bool = False) -> str:
    """
    Join formatted records category by category.

    Without headers, records and category blocks are separated by <br>. With
    headers, each block is preceded by an <h3> heading (even when none of its
    rows produced a record) and parts are concatenated.
    """
    parts: List[str] = []
    for category, records in groups:
        if with_headers:
            parts.append(f'<h3 class="category-header">{escape_html(category)}</h3>')
        if records:
            parts.append(LINE_BREAK.join(records))
    if with_headers:
        return "".join(parts)
    return LINE_BREAK.join(parts)


def render_digest(
    rows: Sequence[Row],
    options: Optional[FormatOptions] = None,
    *,
    with_headers: bool = False,
) -> str:
    return join_groups(format_groups(rows, options), with_headers=with_headers)


def html_to_plain_text(html: str) -> str:
    """Plain-text flavor of a digest: one line per record, tags stripped."""
    soup = BeautifulSoup(html or "", "lxml")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for h in soup.find_all(["h1", "h2", "h3"]):
        h.insert_after("\n")
    return soup.get_text().strip()
