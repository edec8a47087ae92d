from typing import List, Optional, Union

import pytest

from sheetdigest.table_extract import Link


def make_row(
    date: str = "2024-05-01",
    title: str = "Song Name (SR, HY)",
    category: str = "Covers",
    official: Optional[List[Link]] = None,
    alternate: Optional[List[Link]] = None,
    sub: Union[str, List[Link]] = "None",
) -> list:
    """Build a 9-column sheet row with the positional layout of the tracker."""
    return [
        "1",
        date,
        title,
        category,
        official if official is not None else "",
        alternate if alternate is not None else "",
        "",
        "",
        sub,
    ]


@pytest.fixture
def row_factory():
    return make_row
