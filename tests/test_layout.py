from __future__ import annotations

import pytest

from memorytiles.engine.layout import columns_for, format_elapsed, rows_for


@pytest.mark.parametrize(
    "count,columns",
    [(2, 4), (16, 4), (20, 5), (24, 6), (28, 7), (32, 8), (18, 8), (100, 8)],
)
def test_columns_for(count: int, columns: int) -> None:
    assert columns_for(count) == columns


def test_rows_for() -> None:
    assert rows_for(16) == 4
    assert rows_for(32) == 4
    assert rows_for(12) == 3
    assert rows_for(0) == 0


@pytest.mark.parametrize(
    "seconds,text",
    [(0, "00:00"), (9, "00:09"), (61, "01:01"), (600, "10:00"), (3725, "62:05"), (-3, "00:00")],
)
def test_format_elapsed(seconds: int, text: str) -> None:
    assert format_elapsed(seconds) == text
