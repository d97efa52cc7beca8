# clip_viewer/state_manager.py
from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtGui import QColor
from typing import Optional, List

from .models.clip_window import ClipWindow
from .models.line import Line
from .models.point import Point


class ClipStateManager(QObject):
    """
    Gerencia o estado central do visualizador de recorte.

    Responsável por:
    - Janela de recorte atual.
    - Segmentos originais a serem recortados.
    - Cores do segmento original, do segmento recortado e da janela.
    - Caminho do arquivo de cena atual.
    """

    # --- Sinais de Mudança de Estado ---
    clip_window_changed = pyqtSignal(object)  # ClipWindow
    segments_changed = pyqtSignal()
    colors_changed = pyqtSignal()
    filepath_changed = pyqtSignal(str)

    # --- Constantes ---
    DEFAULT_CLIP_WINDOW = ClipWindow(xmin=100.0, xmax=700.0, ymin=100.0, ymax=500.0)
    DEFAULT_SEGMENT = ((150.0, 150.0), (750.0, 550.0))

    DEFAULT_ORIGINAL_COLOR = QColor(255, 0, 0)  # Segmento original
    DEFAULT_CLIPPED_COLOR = QColor(0, 0, 255)  # Parte visível
    DEFAULT_WINDOW_COLOR = QColor(0, 255, 0)  # Contorno da janela

    def __init__(self, parent: Optional[QObject] = None):
        """
        Inicializa o gerenciador de estado com a cena padrão.

        Args:
            parent: Objeto pai opcional
        """
        super().__init__(parent)
        self._clip_window: ClipWindow = self.DEFAULT_CLIP_WINDOW
        self._original_color: QColor = QColor(self.DEFAULT_ORIGINAL_COLOR)
        self._clipped_color: QColor = QColor(self.DEFAULT_CLIPPED_COLOR)
        self._window_color: QColor = QColor(self.DEFAULT_WINDOW_COLOR)
        self._segments: List[Line] = [
            Line.from_segment(self.DEFAULT_SEGMENT, self._original_color)
        ]
        self._current_filepath: Optional[str] = None

    # --- Getters ---
    def clip_window(self) -> ClipWindow:
        return self._clip_window

    def segments(self) -> List[Line]:
        """Retorna uma cópia da lista de segmentos originais."""
        return list(self._segments)

    def original_color(self) -> QColor:
        return self._original_color

    def clipped_color(self) -> QColor:
        return self._clipped_color

    def window_color(self) -> QColor:
        return self._window_color

    def current_filepath(self) -> Optional[str]:
        return self._current_filepath

    # --- Setters ---
    def set_clip_window(self, window: ClipWindow):
        """
        Define a janela de recorte.

        Args:
            window: Nova janela (já validada na construção)
        """
        if not isinstance(window, ClipWindow):
            print(f"Aviso: Tipo de janela de recorte inválido: {window}")
            return
        if self._clip_window != window:
            self._clip_window = window
            self.clip_window_changed.emit(window)

    def set_segments(self, segments: List[Line]):
        """
        Substitui os segmentos originais.

        Args:
            segments: Lista de Line; itens de outro tipo são ignorados com aviso
        """
        valid_segments = []
        for segment in segments:
            if isinstance(segment, Line):
                valid_segments.append(segment)
            else:
                print(f"Aviso: Segmento inválido ignorado: {segment}")
        self._segments = valid_segments
        self.segments_changed.emit()

    def add_segment(self, p1, p2):
        """Adiciona um segmento a partir de duas tuplas (x, y)."""
        line = Line(Point(*p1), Point(*p2), self._original_color)
        self._segments.append(line)
        self.segments_changed.emit()

    def clear_segments(self):
        if self._segments:
            self._segments = []
            self.segments_changed.emit()

    def set_colors(
        self,
        original: Optional[QColor] = None,
        clipped: Optional[QColor] = None,
        window: Optional[QColor] = None,
    ):
        """Define as cores de desenho; cores ausentes ou inválidas são mantidas."""
        changed = False
        for attr, color in (
            ("_original_color", original),
            ("_clipped_color", clipped),
            ("_window_color", window),
        ):
            if color is None:
                continue
            if not (isinstance(color, QColor) and color.isValid()):
                print(f"Aviso: Cor inválida ignorada: {color}")
                continue
            if getattr(self, attr) != color:
                setattr(self, attr, color)
                changed = True
        if changed:
            for line in self._segments:
                line.color = self._original_color
            self.colors_changed.emit()

    def set_current_filepath(self, filepath: Optional[str]):
        normalized_new = filepath if filepath else None
        if self._current_filepath != normalized_new:
            self._current_filepath = normalized_new
            self.filepath_changed.emit(normalized_new or "")

    def reset(self):
        """Restaura a janela e o segmento padrão."""
        self.set_clip_window(self.DEFAULT_CLIP_WINDOW)
        self.set_segments(
            [Line.from_segment(self.DEFAULT_SEGMENT, self._original_color)]
        )
        self.set_current_filepath(None)
