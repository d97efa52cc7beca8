from PyQt5.QtGui import QColor

from clip_viewer.editor import ClipViewerWindow
from clip_viewer.models import ClipWindow


def test_load_scene_replaces_window_and_segments(qapp, tmp_path, capsys):
    path = tmp_path / "cena.clip"
    path.write_text("w 0 200 0 200\nl -50 100 250 100\nl 10 10\n", encoding="utf-8")
    viewer = ClipViewerWindow()

    assert viewer.load_scene(str(path), show_errors=False)

    state = viewer._state_manager
    assert state.clip_window() == ClipWindow(0, 200, 0, 200)
    assert [line.to_segment() for line in state.segments()] == [
        ((-50.0, 100.0), (250.0, 100.0))
    ]
    assert viewer._scene_controller.last_results()[0].segment == (
        (0.0, 100.0),
        (200.0, 100.0),
    )
    assert "cena.clip" in viewer.windowTitle()
    assert "Linha 3" in capsys.readouterr().out


def test_load_missing_scene_keeps_default(qapp, tmp_path):
    viewer = ClipViewerWindow()

    assert not viewer.load_scene(str(tmp_path / "nada.clip"), show_errors=False)
    assert len(viewer._state_manager.segments()) == 1
    assert viewer._state_manager.current_filepath() is None


def test_zoom_label_follows_view_scale(qapp):
    viewer = ClipViewerWindow()

    assert viewer._zoom_label.text() == "Zoom: 100%"
    viewer._view.set_scale(2.0)
    assert viewer._zoom_label.text() == "Zoom: 200%"
    viewer._view.reset_view()
    assert viewer._zoom_label.text() == "Zoom: 100%"


def test_add_segment_from_text(qapp, capsys):
    viewer = ClipViewerWindow()

    assert viewer.add_segment_from_text("800 200 900 300")
    assert not viewer.add_segment_from_text("1 2 tres 4")
    assert not viewer.add_segment_from_text("")

    segments = viewer._state_manager.segments()
    assert len(segments) == 2
    assert segments[-1].to_segment() == ((800.0, 200.0), (900.0, 300.0))
    assert not viewer._scene_controller.last_results()[-1].accepted
    assert "Aviso:" in capsys.readouterr().out


def test_clear_segments_action_empties_scene(qapp):
    viewer = ClipViewerWindow()

    viewer._clear_segments_action.trigger()

    assert viewer._state_manager.segments() == []
    assert viewer._scene_controller.last_results() == []


def test_pick_color_updates_state(qapp, monkeypatch):
    viewer = ClipViewerWindow()
    monkeypatch.setattr(
        "clip_viewer.editor.QColorDialog.getColor",
        lambda *args, **kwargs: QColor(1, 2, 3),
    )

    viewer._pick_color("clipped")

    assert viewer._state_manager.clipped_color() == QColor(1, 2, 3)
    assert viewer._state_manager.original_color() == QColor(255, 0, 0)


def test_cancelled_color_dialog_keeps_color(qapp, monkeypatch):
    viewer = ClipViewerWindow()
    monkeypatch.setattr(
        "clip_viewer.editor.QColorDialog.getColor",
        lambda *args, **kwargs: QColor(),
    )

    viewer._pick_color("window")

    assert viewer._state_manager.window_color() == QColor(0, 255, 0)
