from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from memorytiles.client.pygame_app.scenes.board import card_rects, hit_test  # noqa: E402
from memorytiles.engine.layout import columns_for  # noqa: E402


@pytest.mark.parametrize("count", [16, 20, 24, 28, 32])
def test_card_rects_fit_and_do_not_overlap(count: int) -> None:
    area = pygame.Rect(16, 92, 992, 660)
    rects = card_rects(area, count, columns_for(count))
    assert len(rects) == count
    for r in rects:
        assert area.contains(r)
    for i, a in enumerate(rects):
        for b in rects[i + 1 :]:
            assert not a.colliderect(b)


def test_rects_are_row_major() -> None:
    area = pygame.Rect(0, 0, 800, 600)
    rects = card_rects(area, 20, 5)
    assert rects[0].y == rects[4].y
    assert rects[5].y > rects[4].y
    assert rects[1].x > rects[0].x


def test_hit_test() -> None:
    area = pygame.Rect(0, 0, 800, 600)
    rects = card_rects(area, 16, 4)
    assert hit_test(rects, rects[7].center) == 7
    assert hit_test(rects, (-5, -5)) is None
    assert card_rects(area, 0, 4) == []
