from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from sheetdigest.table_extract import Cell, Link

POLICY_RICH = "rich"
POLICY_SIMPLE = "simple"
POLICIES = (POLICY_RICH, POLICY_SIMPLE)

YOUTUBE_SEARCH_LABEL = "YouTube Search"

# "mailto:", "tel:", "http:" ...; a digit after the colon is a host:port
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:(?!\d)")


@dataclass(frozen=True)
class LinkSelection:
    main_link: Optional[Link]
    source_links: List[Link] = field(default_factory=list)


def as_links(cell: Optional[Cell]) -> List[Link]:
    """Links held by a cell; text cells (including the 'None' sentinel) hold none."""
    if isinstance(cell, list):
        return [x for x in cell if isinstance(x, Link)]
    return []


def has_sub_link(cell: Optional[Cell]) -> bool:
    return len(as_links(cell)) > 0


def normalize_url(url: str) -> str:
    u = (url or "").strip()
    if not u or "://" in u or _SCHEME_RE.match(u):
        return u
    if u.startswith("//"):
        return f"https:{u}"
    # root-relative, fragment and query-only hrefs are left as they are
    if u[0] in "/#?":
        return u
    return f"https://{u}"


def select_links(
    official: Sequence[Link],
    alternate: Sequence[Link],
    sub: Sequence[Link],
    *,
    policy: str = POLICY_RICH,
) -> LinkSelection:
    """
    Pick the main link among the candidate columns.

    A column holding exactly one link is unambiguous; otherwise no main link is
    chosen and the candidates are returned as source links (rich policy only).
    """
    if policy == POLICY_SIMPLE:
        if len(sub) == 1:
            return LinkSelection(main_link=sub[0])
        if len(official) == 1:
            return LinkSelection(main_link=official[0])
        return LinkSelection(main_link=None)

    if policy != POLICY_RICH:
        raise ValueError(f"Unknown link policy: {policy!r} (expected one of {POLICIES})")

    if len(sub) == 1:
        return LinkSelection(main_link=sub[0], source_links=[*official, *alternate])
    if len(official) == 1 and not alternate:
        return LinkSelection(main_link=official[0], source_links=list(alternate))
    if len(alternate) == 1 and not official:
        return LinkSelection(main_link=alternate[0], source_links=list(official))
    return LinkSelection(main_link=None, source_links=[*official, *alternate])


def label_source_links(source_links: Sequence[Link], *, has_main: bool) -> List[Link]:
    """
    Relabel secondary links for display.

    Non-search links come first and are numbered ("Source 1", "Source 2", ...)
    when a main link was chosen; a lone one is just "Source". Without a main
    link they keep their own labels. "YouTube Search" links always keep theirs
    and go last.
    """
    yt_search = [link for link in source_links if link.label == YOUTUBE_SEARCH_LABEL]
    others = [link for link in source_links if link.label != YOUTUBE_SEARCH_LABEL]

    out: List[Link] = []
    if len(others) == 1 and not yt_search:
        only = others[0]
        out.append(Link(label="Source" if has_main else only.label, url=only.url))
    else:
        for i, link in enumerate(others, start=1):
            out.append(Link(label=f"Source {i}" if has_main else link.label, url=link.url))

    out.extend(yt_search)
    return out
