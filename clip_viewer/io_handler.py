# clip_viewer/io_handler.py
import os
from typing import Iterable, List, Optional, Tuple

from PyQt5.QtWidgets import QFileDialog, QMessageBox, QWidget
from PyQt5.QtCore import QStandardPaths

from .exceptions import InvalidWindowError
from .models.clip_window import ClipWindow

Segment2D = Tuple[Tuple[float, float], Tuple[float, float]]


def parse_scene_lines(
    lines: Iterable[str],
) -> Tuple[Optional[ClipWindow], List[Segment2D], List[str]]:
    """
    Analisa as linhas de um arquivo de cena.

    Formato (uma entrada por linha, '#' inicia comentário):
        w xmin xmax ymin ymax
        l x1 y1 x2 y2

    Returns:
        Tupla: (janela, segmentos, avisos)
               janela: ClipWindow da linha 'w', ou None se ausente/inválida.
               segmentos: Lista de ((x1, y1), (x2, y2)).
               avisos: Problemas encontrados, com o número da linha.
    """
    window: Optional[ClipWindow] = None
    segments: List[Segment2D] = []
    warnings: List[str] = []

    for line_num, line in enumerate(lines, 1):
        stripped_line = line.split("#", 1)[0].strip()
        if not stripped_line:
            continue

        parts = stripped_line.split()
        command = parts[0].lower()
        if command not in ("w", "l"):
            warnings.append(f"Linha {line_num}: comando desconhecido '{parts[0]}'.")
            continue
        if len(parts) != 5:
            warnings.append(
                f"Linha {line_num}: '{command}' requer 4 valores, {len(parts) - 1} encontrados."
            )
            continue
        try:
            values = [float(p) for p in parts[1:]]
        except ValueError:
            warnings.append(f"Linha {line_num}: valores não numéricos: {stripped_line}")
            continue

        if command == "w":
            if window is not None:
                warnings.append(f"Linha {line_num}: janela repetida ignorada.")
                continue
            try:
                window = ClipWindow(*values)
            except InvalidWindowError as e:
                warnings.append(f"Linha {line_num}: janela inválida: {e}")
        else:
            x1, y1, x2, y2 = values
            segments.append(((x1, y1), (x2, y2)))

    return window, segments, warnings


def format_scene_lines(
    window: ClipWindow, segments: Iterable[Segment2D]
) -> List[str]:
    """Gera as linhas do arquivo de cena (inverso de parse_scene_lines)."""
    xmin, xmax, ymin, ymax = window.as_tuple()
    lines = [f"w {xmin:.6g} {xmax:.6g} {ymin:.6g} {ymax:.6g}\n"]
    for (x1, y1), (x2, y2) in segments:
        lines.append(f"l {x1:.6g} {y1:.6g} {x2:.6g} {y2:.6g}\n")
    return lines


class IOHandler:
    """
    Gerencia diálogos de arquivo e leitura/escrita de arquivos de cena.
    """

    FILE_FILTER = "Cena de Recorte (*.clip *.txt);;Todos os Arquivos (*)"

    def __init__(self, parent_widget: Optional[QWidget] = None):
        """Inicializa com o widget pai para diálogos."""
        self._parent = parent_widget
        self._last_dir: str = QStandardPaths.writableLocation(
            QStandardPaths.DocumentsLocation
        ) or os.path.expanduser("~")

    def prompt_load_scene(self) -> Optional[str]:
        """Abre diálogo para selecionar um arquivo de cena."""
        filepath, _ = QFileDialog.getOpenFileName(
            self._parent, "Abrir Cena", self._last_dir, self.FILE_FILTER
        )
        if filepath:
            self._last_dir = os.path.dirname(filepath)
            return filepath
        return None

    def prompt_save_scene(self, default_filename: str = "sem_titulo.clip") -> Optional[str]:
        full_default_path = os.path.join(self._last_dir, default_filename)
        filepath, _ = QFileDialog.getSaveFileName(
            self._parent, "Salvar Cena", full_default_path, self.FILE_FILTER
        )
        if filepath:
            self._last_dir = os.path.dirname(filepath)
            return filepath
        return None

    def read_scene_file(
        self, filepath: str, show_errors: bool = True
    ) -> Optional[Tuple[Optional[ClipWindow], List[Segment2D], List[str]]]:
        """
        Lê e analisa um arquivo de cena.

        Returns:
            Tupla (janela, segmentos, avisos), ou None em caso de erro de leitura.
        """
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return parse_scene_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            if show_errors:
                QMessageBox.critical(
                    self._parent,
                    "Erro de Leitura",
                    f"Não foi possível ler:\n'{os.path.basename(filepath)}'\n{e}",
                )
            else:
                print(f"Aviso: Não foi possível ler '{filepath}': {e}")
            return None

    def write_scene_file(
        self, filepath: str, window: ClipWindow, segments: Iterable[Segment2D]
    ) -> bool:
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.writelines(format_scene_lines(window, segments))
            return True
        except OSError as e:
            QMessageBox.critical(
                self._parent,
                "Erro de Escrita",
                f"Não foi possível salvar:\n'{os.path.basename(filepath)}'\n{e}",
            )
            return False
