import pytest

from foldermap.gui import node_bounds


@pytest.mark.parametrize("text_width,line_height", [(0, 0), (40, 12), (71, 15), (200, 30)])
def test_bounds_size_adds_padding(text_width, line_height):
    _, _, width, height = node_bounds(text_width, line_height)
    assert width == text_width + 30
    assert height == line_height + 20


@pytest.mark.parametrize("text_width,line_height", [(10, 10), (41, 13), (100, 16)])
def test_bounds_are_centred(text_width, line_height):
    x, y, width, height = node_bounds(text_width, line_height)
    assert -x == width // 2
    assert -y == height // 2
    assert abs((x + width) + x) <= 1
    assert abs((y + height) + y) <= 1


def test_bounds_grow_with_text():
    small = node_bounds(10, 12)
    large = node_bounds(50, 12)
    assert large[2] > small[2]
    assert large[0] < small[0]
    assert large[3] == small[3]


def test_bounds_empty_text():
    assert node_bounds(0, 0) == (-15, -10, 30, 20)