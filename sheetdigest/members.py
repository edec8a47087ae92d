"""
Initials-to-member mappings for the contributor credits found in titles.

Titles in the tracker sheet end with a parenthetical group of member initials,
e.g. "Song Name (SR, HY)". These are resolved to display names for the digest.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, List, Mapping

# Fixed lookup; case-sensitive, not editable at runtime
MEMBER_MAP: Mapping[str, str] = MappingProxyType(
    {
        "SR": "Saerom",
        "HY": "Hayoung",
        "GY": "Gyuri",
        "JW": "Jiwon",
        "JS": "Jisun",
        "SY": "Seoyeon",
        "CY": "Chaeyoung",
        "NG": "Nagyung",
        "JH": "Jiheon",
    }
)

_INITIALS_SPLIT_RE = re.compile(r"[\s,&]+")


def join_with_and(names: Iterable[str]) -> str:
    """
    Join names with English list rules.

    Examples:
        [] -> ""
        ["A"] -> "A"
        ["A", "B"] -> "A & B"
        ["A", "B", "C"] -> "A, B & C"
    """
    items = list(names)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " & " + items[-1]


def split_initials(initials: str) -> List[str]:
    return [tok for tok in _INITIALS_SPLIT_RE.split(initials or "") if tok]


def resolve_initials(initials: str, member_map: Mapping[str, str] = MEMBER_MAP) -> str:
    """
    Map each initials token to a display name and join them.
    Unknown tokens pass through unchanged.
    """
    names = [member_map.get(tok, tok) for tok in split_initials(initials)]
    return join_with_and(names)
