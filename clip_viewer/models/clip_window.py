"""
Módulo que define a classe ClipWindow, a janela retangular de recorte.
A janela é imutável e validada uma única vez, na construção.
"""

# clip_viewer/models/clip_window.py
import math
from typing import List, Tuple

from PyQt5.QtCore import Qt, QRectF, QLineF
from PyQt5.QtGui import QPen, QColor
from PyQt5.QtWidgets import QGraphicsLineItem

from ..exceptions import InvalidWindowError


class ClipWindow:
    """
    Retângulo de recorte alinhado aos eixos.

    Responsável por:
    - Armazenar os limites (xmin, xmax, ymin, ymax).
    - Garantir xmin < xmax e ymin < ymax com limites finitos.
    - Fornecer as quatro bordas para desenho.
    """

    __slots__ = ("_xmin", "_xmax", "_ymin", "_ymax")

    GRAPHICS_WIDTH = 1  # Espessura visual das bordas

    def __init__(self, xmin: float, xmax: float, ymin: float, ymax: float):
        """
        Inicializa a janela de recorte.

        Args:
            xmin: Limite esquerdo.
            xmax: Limite direito.
            ymin: Limite inferior.
            ymax: Limite superior.

        Raises:
            InvalidWindowError: Se algum limite não for finito ou se
                                xmin >= xmax ou ymin >= ymax.
        """
        bounds = (float(xmin), float(xmax), float(ymin), float(ymax))
        if not all(math.isfinite(b) for b in bounds):
            raise InvalidWindowError(
                f"Limites da janela devem ser finitos: {bounds}"
            )
        if bounds[0] >= bounds[1]:
            raise InvalidWindowError(
                f"xmin ({bounds[0]}) deve ser menor que xmax ({bounds[1]})."
            )
        if bounds[2] >= bounds[3]:
            raise InvalidWindowError(
                f"ymin ({bounds[2]}) deve ser menor que ymax ({bounds[3]})."
            )
        object.__setattr__(self, "_xmin", bounds[0])
        object.__setattr__(self, "_xmax", bounds[1])
        object.__setattr__(self, "_ymin", bounds[2])
        object.__setattr__(self, "_ymax", bounds[3])

    def __setattr__(self, name, value):
        raise AttributeError("ClipWindow é imutável.")

    @classmethod
    def from_qrectf(cls, qrect: QRectF) -> "ClipWindow":
        """Cria a janela a partir de um QRectF, normalizando-o antes."""
        norm_qrect = qrect.normalized()
        return cls(
            norm_qrect.left(),
            norm_qrect.right(),
            norm_qrect.top(),
            norm_qrect.bottom(),
        )

    @property
    def xmin(self) -> float:
        return self._xmin

    @property
    def xmax(self) -> float:
        return self._xmax

    @property
    def ymin(self) -> float:
        return self._ymin

    @property
    def ymax(self) -> float:
        return self._ymax

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Retorna os limites no formato (xmin, xmax, ymin, ymax)."""
        return (self._xmin, self._xmax, self._ymin, self._ymax)

    def to_qrectf(self) -> QRectF:
        return QRectF(
            self._xmin,
            self._ymin,
            self._xmax - self._xmin,
            self._ymax - self._ymin,
        )

    def contains(self, point: Tuple[float, float]) -> bool:
        """Verifica se o ponto está dentro da janela (bordas inclusas)."""
        x, y = point
        return self._xmin <= x <= self._xmax and self._ymin <= y <= self._ymax

    def edges(self) -> List[Tuple[Tuple[float, float], Tuple[float, float]]]:
        """
        Retorna as quatro bordas da janela como segmentos.

        A ordem é: y = ymin, x = xmax, y = ymax, x = xmin, percorrendo o
        contorno a partir do canto (xmin, ymin).
        """
        xmin, xmax, ymin, ymax = self.as_tuple()
        return [
            ((xmin, ymin), (xmax, ymin)),
            ((xmax, ymin), (xmax, ymax)),
            ((xmax, ymax), (xmin, ymax)),
            ((xmin, ymax), (xmin, ymin)),
        ]

    def create_graphics_items(self, color: QColor) -> List[QGraphicsLineItem]:
        """
        Cria um QGraphicsLineItem para cada borda da janela.

        Args:
            color: Cor do contorno.

        Returns:
            List[QGraphicsLineItem]: As quatro bordas, na ordem de edges().
        """
        pen = QPen(color if color.isValid() else QColor(Qt.green), self.GRAPHICS_WIDTH)
        items = []
        for (x1, y1), (x2, y2) in self.edges():
            item = QGraphicsLineItem(QLineF(x1, y1, x2, y2))
            item.setPen(pen)
            items.append(item)
        return items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClipWindow):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return (
            f"ClipWindow(xmin={self._xmin:.3f}, xmax={self._xmax:.3f}, "
            f"ymin={self._ymin:.3f}, ymax={self._ymax:.3f})"
        )
