# clip_viewer/controllers/scene_controller.py
from typing import List, Optional

from PyQt5.QtWidgets import QGraphicsScene
from PyQt5.QtCore import QObject, pyqtSignal

from ..models import Line, Point
from ..exceptions import ClippingError, InvalidInputError
from ..state_manager import ClipStateManager
from ..utils import clipping as clp

# Margem ao redor da janela/segmentos no retângulo da cena
SCENE_MARGIN = 50.0


class SceneController(QObject):
    """
    Controlador responsável por desenhar a janela, os segmentos originais e
    os segmentos recortados na cena gráfica.

    A cada mudança de estado a cena é redesenhada por completo: cada
    segmento é recortado com uma chamada própria a clip_segment.

    Atributos:
        results_updated: Sinal (aceitos, rejeitados) emitido após cada redesenho
        clip_failed: Sinal com a mensagem de erro de um segmento que falhou
    """

    results_updated = pyqtSignal(int, int)
    clip_failed = pyqtSignal(str)

    CLIPPED_LINE_WIDTH = 3  # Desenhado por cima do original

    def __init__(
        self,
        scene: QGraphicsScene,
        state_manager: ClipStateManager,
        parent: Optional[QObject] = None,
    ):
        """
        Inicializa o controlador da cena.

        Args:
            scene: A cena gráfica a ser controlada
            state_manager: Gerenciador de estado do visualizador
            parent: Objeto pai opcional
        """
        super().__init__(parent)
        self._scene = scene
        self._state_manager = state_manager
        self._last_results: List[Optional[clp.ClipResult]] = []

        self._state_manager.clip_window_changed.connect(self.refresh)
        self._state_manager.segments_changed.connect(self.refresh)
        self._state_manager.colors_changed.connect(self.refresh)

    def last_results(self) -> List[Optional[clp.ClipResult]]:
        """
        Resultados do último redesenho, na ordem dos segmentos.
        None indica um segmento cujo recorte levantou ClippingError.
        """
        return list(self._last_results)

    def refresh(self, *args):
        """Limpa a cena e redesenha janela, segmentos originais e recortados."""
        self._scene.clear()
        window = self._state_manager.clip_window()
        clipped_color = self._state_manager.clipped_color()

        for item in window.create_graphics_items(self._state_manager.window_color()):
            self._scene.addItem(item)

        results: List[Optional[clp.ClipResult]] = []
        accepted_count = 0
        rejected_count = 0
        for line in self._state_manager.segments():
            try:
                result = clp.clip_segment(window, line)
            except ClippingError as e:
                results.append(None)
                self.clip_failed.emit(f"{line!r}: {e}")
                # Coordenadas não finitas não podem ser desenhadas
                if not isinstance(e, InvalidInputError):
                    self._scene.addItem(line.create_graphics_item())
                continue

            self._scene.addItem(line.create_graphics_item())

            results.append(result)
            if result.accepted:
                accepted_count += 1
                self._draw_clipped(result.segment, clipped_color)
            else:
                rejected_count += 1

        self._last_results = results
        self._update_scene_rect(window)
        self.results_updated.emit(accepted_count, rejected_count)

    def _draw_clipped(self, segment: clp.Segment2D, color):
        p1, p2 = segment
        clipped_line = Line(
            Point.from_coords(p1, color), Point.from_coords(p2, color), color
        )
        self._scene.addItem(clipped_line.create_graphics_item(self.CLIPPED_LINE_WIDTH))
        self._scene.addItem(clipped_line.start.create_graphics_item())
        self._scene.addItem(clipped_line.end.create_graphics_item())

    def _update_scene_rect(self, window):
        rect = self._scene.itemsBoundingRect().united(window.to_qrectf())
        self._scene.setSceneRect(
            rect.adjusted(-SCENE_MARGIN, -SCENE_MARGIN, SCENE_MARGIN, SCENE_MARGIN)
        )
