# clip_viewer/view/main_view.py
from PyQt5.QtWidgets import QGraphicsView, QGraphicsScene
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QWheelEvent, QPainter


class GraphicsView(QGraphicsView):
    """
    View customizada para exibir a cena de recorte.
    Suporta zoom pela roda do mouse e pan arrastando com o botão esquerdo.
    """

    VIEW_SCALE_MIN = 0.05  # Limite mínimo de zoom
    VIEW_SCALE_MAX = 20.0  # Limite máximo de zoom

    scale_changed = pyqtSignal()

    def __init__(self, scene: QGraphicsScene, parent=None):
        super().__init__(scene, parent)
        self._current_scale: float = 1.0
        self._zoom_sensitivity: float = 0.1

        self.setRenderHints(QPainter.Antialiasing | QPainter.SmoothPixmapTransform)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

    def get_scale(self) -> float:
        return self._current_scale

    def set_scale(self, scale: float):
        """Define a escala da vista, com limites."""
        clamped_scale = max(self.VIEW_SCALE_MIN, min(scale, self.VIEW_SCALE_MAX))
        if abs(self._current_scale - clamped_scale) < 1e-6:
            return

        scale_factor = clamped_scale / self._current_scale
        self._current_scale = clamped_scale
        super().scale(scale_factor, scale_factor)
        self.scale_changed.emit()

    def reset_view(self):
        """Restaura a escala 1:1 e centraliza na cena."""
        self.resetTransform()
        self._current_scale = 1.0
        self.centerOn(self.sceneRect().center())
        self.scale_changed.emit()

    def wheelEvent(self, event: QWheelEvent):
        delta = event.angleDelta().y()
        if delta == 0:
            super().wheelEvent(event)
            return
        factor = 1.0 + self._zoom_sensitivity if delta > 0 else 1.0 / (1.0 + self._zoom_sensitivity)
        self.set_scale(self._current_scale * factor)
        event.accept()
