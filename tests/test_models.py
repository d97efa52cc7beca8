import math

import pytest
from PyQt5.QtCore import QRectF
from PyQt5.QtGui import QColor

from clip_viewer.exceptions import InvalidWindowError
from clip_viewer.models import ClipWindow, Line, Point


@pytest.mark.parametrize(
    "bounds",
    [
        (700, 100, 100, 500),  # xmin > xmax
        (100, 100, 100, 500),  # xmin == xmax
        (100, 700, 500, 100),  # ymin > ymax
        (100, 700, 300, 300),  # ymin == ymax
        (math.nan, 700, 100, 500),
        (100, math.inf, 100, 500),
    ],
)
def test_invalid_window_is_rejected_at_construction(bounds):
    with pytest.raises(InvalidWindowError):
        ClipWindow(*bounds)


def test_invalid_window_error_is_a_value_error():
    with pytest.raises(ValueError):
        ClipWindow(1, 0, 0, 1)


def test_window_is_immutable(window):
    with pytest.raises(AttributeError):
        window.xmin = 0
    with pytest.raises(AttributeError):
        window.extra = 1
    assert window.as_tuple() == (100.0, 700.0, 100.0, 500.0)


def test_window_from_qrectf_normalizes():
    flipped = QRectF(700, 500, -600, -400)

    assert ClipWindow.from_qrectf(flipped) == ClipWindow(100, 700, 100, 500)


def test_window_to_qrectf(window):
    rect = window.to_qrectf()

    assert (rect.left(), rect.top(), rect.width(), rect.height()) == (100, 100, 600, 400)


def test_window_contains_is_inclusive(window):
    assert window.contains((700, 100))
    assert window.contains((400, 300))
    assert not window.contains((700.0001, 300))


def test_window_edges_trace_the_outline(window):
    edges = window.edges()

    assert edges == [
        ((100.0, 100.0), (700.0, 100.0)),
        ((700.0, 100.0), (700.0, 500.0)),
        ((700.0, 500.0), (100.0, 500.0)),
        ((100.0, 500.0), (100.0, 100.0)),
    ]
    for (_, end), (start, _) in zip(edges, edges[1:] + edges[:1]):
        assert end == start


def test_window_equality_and_hash():
    a = ClipWindow(0, 10, 0, 5)
    b = ClipWindow(0.0, 10.0, 0.0, 5.0)

    assert a == b
    assert hash(a) == hash(b)
    assert a != ClipWindow(0, 10, 0, 6)


def test_window_graphics_items(qapp, window):
    items = window.create_graphics_items(QColor(0, 255, 0))

    assert len(items) == 4
    assert items[0].line().x2() == 700
    assert items[0].pen().color() == QColor(0, 255, 0)


def test_line_requires_points():
    with pytest.raises(TypeError):
        Line((0, 0), (1, 1))


def test_line_segment_conversion():
    line = Line.from_segment(((1, 2), (3, 4)), QColor(255, 0, 0))

    assert line.to_segment() == ((1.0, 2.0), (3.0, 4.0))
    assert line.start == Point(1, 2)
    assert line.color == QColor(255, 0, 0)


def test_line_defaults_to_black_on_invalid_color():
    line = Line(Point(0, 0), Point(1, 1), QColor())

    assert line.color == QColor(0, 0, 0)


def test_line_graphics_item_width(qapp):
    line = Line(Point(0, 0), Point(10, 0))

    assert line.create_graphics_item().pen().width() == Line.GRAPHICS_WIDTH
    assert line.create_graphics_item(width=5).pen().width() == 5
