"""Title parsing: bracketed prefix tag and trailing member initials."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_PREFIX_RE = re.compile(r"^\[(.*?)\]\s*(.*)$")
# Non-greedy name so only the final parenthetical is captured
_INITIALS_RE = re.compile(r"^(.*?)\s*\(([^)]+)\)$")


@dataclass(frozen=True)
class ParsedPrefix:
    prefix: Optional[str]
    title: str


@dataclass(frozen=True)
class ParsedName:
    name: str
    initials: str


def split_prefix(text: str) -> ParsedPrefix:
    """
    '[NOTICE] Title' -> ParsedPrefix(prefix='NOTICE', title='Title')
    'Title'          -> ParsedPrefix(prefix=None, title='Title')
    """
    m = _PREFIX_RE.match(text)
    if m:
        return ParsedPrefix(prefix=m.group(1), title=m.group(2))
    return ParsedPrefix(prefix=None, title=text)


def split_name_and_initials(title: str) -> ParsedName:
    """
    'Song Name (SR, HY)' -> ParsedName(name='Song Name', initials='SR, HY')

    A parenthetical that is not the last thing in the title stays in the name.
    """
    m = _INITIALS_RE.match(title)
    if m:
        return ParsedName(name=m.group(1).strip(), initials=m.group(2).strip())
    return ParsedName(name=title.strip(), initials="")
