import pytest

from sqview.geometry import Rect


@pytest.mark.parametrize(
    "area",
    [Rect(0, 0, 10, 5), Rect(3, 4, 20, 12), Rect(7, 2, 3, 3)],
)
def test_inner_lies_within_outer_and_excludes_border(area):
    inner = area.inner()
    for y in range(inner.y, inner.bottom()):
        for x in range(inner.x, inner.right()):
            assert area.contains(x, y)
    assert not inner.contains(area.x, area.y)
    assert not inner.contains(area.right() - 1, area.bottom() - 1)
    assert inner.right() == area.right() - 1
    assert inner.bottom() == area.bottom() - 1


def test_inner_of_tiny_rect_is_empty():
    inner = Rect(5, 5, 1, 1).inner()
    assert inner.width == 0
    assert inner.height == 0
    assert not inner.contains(inner.x, inner.y)


@pytest.mark.parametrize("area", [Rect(0, 0, 10, 5), Rect(2, 9, 40, 1)])
def test_shadow_shares_bottom_right_corner(area):
    shadow = area.shadow()
    assert shadow.right() == area.right()
    assert shadow.bottom() == area.bottom()
    assert not shadow.contains(area.x, area.y)


def test_shadow_of_empty_rect_stays_empty():
    shadow = Rect(0, 0, 0, 0).shadow()
    assert shadow.width == 0
    assert shadow.height == 0


def test_contains_is_half_open():
    area = Rect(2, 3, 4, 5)
    assert area.contains(area.x, area.y)
    assert area.contains(area.right() - 1, area.bottom() - 1)
    assert not area.contains(area.right(), area.y)
    assert not area.contains(area.x, area.bottom())
    assert not area.contains(area.x - 1, area.y)


def test_zero_width_contains_nothing():
    area = Rect(4, 4, 0, 10)
    assert not area.contains(4, 4)
    assert area.right() == area.x