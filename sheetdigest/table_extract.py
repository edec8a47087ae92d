"""
Extract a cell grid from a spreadsheet HTML fragment (as copied to the clipboard).

Each <tr> becomes a row and each <td> a cell:
  - a cell containing one or more <a> elements becomes a list of Link
    (document order, label = anchor text, url = href)
  - any other cell becomes its text
Text is whitespace-collapsed and trimmed.

Column semantics are positional and are not validated here.

Dependencies:
  pip install beautifulsoup4 lxml
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

START_FRAGMENT = "<!--StartFragment-->"
END_FRAGMENT = "<!--EndFragment-->"
WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Link:
    label: str
    url: str


Cell = Union[str, List[Link]]
Row = List[Cell]


def cell_text(cell: Optional[Cell]) -> str:
    """Plain text view of a cell; link cells join their labels."""
    if cell is None:
        return ""
    if isinstance(cell, list):
        return ", ".join(link.label for link in cell if link.label)
    return str(cell)


def extract_html_fragment(payload: str) -> str:
    """
    Strip the Windows "HTML Format" clipboard envelope.

    Prefers the content between the fragment markers, then the <body> content,
    and falls back to the payload itself.
    """
    data = payload or ""
    start_idx = data.find(START_FRAGMENT)
    if start_idx != -1:
        end_idx = data.find(END_FRAGMENT, start_idx)
        if end_idx == -1:
            return data[start_idx + len(START_FRAGMENT):].strip()
        return data[start_idx + len(START_FRAGMENT):end_idx].strip()

    body_start = data.find("<body")
    if body_start != -1:
        body_end = data.find("</body>", body_start)
        tag_end = data.find(">", body_start) + 1
        if body_end != -1 and tag_end > 0:
            return data[tag_end:body_end].strip()
    return data


def _clean_text(s: str) -> str:
    return WS_RE.sub(" ", s or "").strip()


def _extract_cell(td: Tag, base_url: Optional[str]) -> Cell:
    anchors = td.find_all("a")
    if anchors:
        links: List[Link] = []
        for a in anchors:
            href = str(a.get("href") or "").strip()
            if base_url and href:
                href = urljoin(base_url, href)
            links.append(Link(label=_clean_text(a.get_text()), url=href))
        return links
    return _clean_text(td.get_text())


def parse_table(markup: str, *, base_url: Optional[str] = None) -> List[Row]:
    """
    Parse every table row in `markup` into a list of cells.

    Returns [] for empty or non-tabular input; never raises on bad markup.
    """
    if not isinstance(markup, str) or not markup.strip():
        return []
    try:
        soup = BeautifulSoup(markup, "lxml")
    except Exception:
        return []

    rows: List[Row] = []
    for tr in soup.find_all("tr"):
        # header rows made of <th> only yield an empty row
        cells = tr.find_all("td")
        rows.append([_extract_cell(c, base_url) for c in cells])
    return rows
