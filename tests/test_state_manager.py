import pytest
from PyQt5.QtGui import QColor

from clip_viewer.models import ClipWindow, Line
from clip_viewer.state_manager import ClipStateManager


@pytest.fixture
def state(qapp):
    return ClipStateManager()


def test_defaults(state):
    assert state.clip_window() == ClipWindow(100, 700, 100, 500)
    assert [line.to_segment() for line in state.segments()] == [
        ((150.0, 150.0), (750.0, 550.0))
    ]
    assert state.original_color() == QColor(255, 0, 0)
    assert state.clipped_color() == QColor(0, 0, 255)
    assert state.window_color() == QColor(0, 255, 0)
    assert state.current_filepath() is None


def test_set_clip_window_emits_only_on_change(state):
    received = []
    state.clip_window_changed.connect(received.append)

    state.set_clip_window(ClipWindow(100, 700, 100, 500))
    state.set_clip_window(ClipWindow(0, 10, 0, 10))

    assert received == [ClipWindow(0, 10, 0, 10)]


def test_set_clip_window_ignores_wrong_type(state, capsys):
    received = []
    state.clip_window_changed.connect(received.append)

    state.set_clip_window((0, 10, 0, 10))

    assert received == []
    assert "Aviso:" in capsys.readouterr().out


def test_set_segments_filters_invalid_items(state, capsys):
    received = []
    state.segments_changed.connect(lambda: received.append(True))
    line = Line.from_segment(((0, 0), (1, 1)))

    state.set_segments([line, ((2, 2), (3, 3))])

    assert state.segments() == [line]
    assert received == [True]
    assert "Aviso:" in capsys.readouterr().out


def test_add_and_clear_segments(state):
    state.add_segment((0, 0), (5, 5))

    assert len(state.segments()) == 2
    assert state.segments()[-1].color == state.original_color()

    state.clear_segments()
    assert state.segments() == []


def test_set_colors_recolors_segments(state, capsys):
    received = []
    state.colors_changed.connect(lambda: received.append(True))

    state.set_colors(original=QColor(10, 20, 30), clipped=QColor())

    assert state.original_color() == QColor(10, 20, 30)
    assert state.clipped_color() == QColor(0, 0, 255)
    assert state.segments()[0].color == QColor(10, 20, 30)
    assert received == [True]
    assert "Cor inválida" in capsys.readouterr().out


def test_reset_restores_default_scene(state):
    state.set_clip_window(ClipWindow(0, 1, 0, 1))
    state.clear_segments()
    state.set_current_filepath("/tmp/cena.clip")

    state.reset()

    assert state.clip_window() == ClipStateManager.DEFAULT_CLIP_WINDOW
    assert len(state.segments()) == 1
    assert state.current_filepath() is None
