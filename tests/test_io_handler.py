from clip_viewer.io_handler import IOHandler, format_scene_lines, parse_scene_lines
from clip_viewer.models import ClipWindow


def test_parse_window_and_segments():
    lines = [
        "# cena de teste\n",
        "w 100 700 100 500\n",
        "\n",
        "l 150 150 750 550  # segmento do exemplo\n",
        "L 800 200 900 300\n",
    ]

    window, segments, warnings = parse_scene_lines(lines)

    assert window == ClipWindow(100, 700, 100, 500)
    assert segments == [((150.0, 150.0), (750.0, 550.0)), ((800.0, 200.0), (900.0, 300.0))]
    assert warnings == []


def test_parse_collects_warnings_with_line_numbers():
    lines = [
        "x 1 2 3 4",
        "l 1 2 3",
        "l a b c d",
        "w 700 100 100 500",
        "l 0 0 1 1",
    ]

    window, segments, warnings = parse_scene_lines(lines)

    assert window is None
    assert segments == [((0.0, 0.0), (1.0, 1.0))]
    assert len(warnings) == 4
    assert warnings[0].startswith("Linha 1:")
    assert warnings[1].startswith("Linha 2:")
    assert warnings[2].startswith("Linha 3:")
    assert "janela inválida" in warnings[3]


def test_parse_keeps_first_window():
    window, _, warnings = parse_scene_lines(["w 0 10 0 10", "w 0 20 0 20"])

    assert window == ClipWindow(0, 10, 0, 10)
    assert warnings == ["Linha 2: janela repetida ignorada."]


def test_format_scene_lines():
    lines = format_scene_lines(ClipWindow(100, 700, 100, 500), [((150, 150), (750.5, 550))])

    assert lines == ["w 100 700 100 500\n", "l 150 150 750.5 550\n"]


def test_write_then_read_scene_file(qapp, tmp_path):
    handler = IOHandler()
    path = tmp_path / "cena.clip"
    window = ClipWindow(0, 50, -10, 10)

    assert handler.write_scene_file(str(path), window, [((-5, 0), (60, 0))])
    parsed = handler.read_scene_file(str(path))

    assert parsed == (window, [((-5.0, 0.0), (60.0, 0.0))], [])


def test_read_missing_file_returns_none(qapp, tmp_path, capsys):
    handler = IOHandler()

    assert handler.read_scene_file(str(tmp_path / "nada.clip"), show_errors=False) is None
    assert "Aviso:" in capsys.readouterr().out
