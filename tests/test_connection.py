import pytest

from foldermap.connection import Connection
from foldermap.node import MindMapNode


def _pair(start, end):
    a = MindMapNode("a", "")
    b = MindMapNode("b", "")
    a.set_pos(*start)
    b.set_pos(*end)
    return a, b


def test_registers_with_both_nodes():
    a, b = _pair((0, 0), (10, 10))
    conn = Connection(a, b)
    assert a.connections == [conn]
    assert b.connections == [conn]
    assert conn.source is a and conn.destination is b


def test_path_endpoints_and_controls():
    a, b = _pair((3, 4), (50, -20))
    conn = Connection(a, b)
    start, ctrl1, ctrl2, end = conn.path
    assert start == a.pos
    assert end == b.pos
    assert ctrl1[0] == pytest.approx((a.pos[0] + b.pos[0]) / 2)
    assert ctrl2[0] == ctrl1[0]
    assert ctrl1[1] == a.pos[1]
    assert ctrl2[1] == b.pos[1]


def test_missing_node_leaves_path_empty():
    a = MindMapNode("a", "")
    conn = Connection(a, None)
    assert conn.path is None
    assert a.connections == [conn]
    assert conn.points(4) == []


def test_moving_node_updates_path():
    a, b = _pair((0, 0), (10, 0))
    conn = Connection(a, b)
    b.set_pos(30, 40)
    assert conn.path[-1] == (30.0, 40.0)
    a.set_pos(-5, 2)
    assert conn.path[0] == (-5.0, 2.0)


def test_points_sample_curve():
    a, b = _pair((2, 6), (40, 30))
    conn = Connection(a, b)
    pts = conn.points(2)
    assert len(pts) == 3
    assert pts[0] == pytest.approx(a.pos)
    assert pts[-1] == pytest.approx(b.pos)
    mid = ((a.pos[0] + b.pos[0]) / 2, (a.pos[1] + b.pos[1]) / 2)
    assert pts[1] == pytest.approx(mid)


def test_points_x_monotonic_for_rightward_link():
    a, b = _pair((0, 0), (100, 80))
    xs = [x for x, _ in Connection(a, b).points(10)]
    assert xs == sorted(xs)


@pytest.mark.parametrize("steps", [0, -3])
def test_points_rejects_bad_steps(steps):
    a, b = _pair((0, 0), (1, 1))
    with pytest.raises(ValueError):
        Connection(a, b).points(steps)