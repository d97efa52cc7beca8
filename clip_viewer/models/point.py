"""
Módulo que define a classe Point para representação de pontos 2D.
Este módulo contém a implementação de pontos geométricos com coordenadas e cor.
"""

# clip_viewer/models/point.py
from PyQt5.QtCore import Qt, QPointF
from PyQt5.QtGui import QPen, QBrush, QColor
from PyQt5.QtWidgets import QGraphicsEllipseItem
from typing import Tuple, Optional


class Point:
    """
    Representa um ponto geométrico 2D com coordenadas e cor.

    Usado como extremo de Line e como marcador dos extremos recortados.
    """

    GRAPHICS_SIZE = 6.0  # Diâmetro visual do ponto na cena

    def __init__(self, x: float, y: float, color: Optional[QColor] = None):
        """
        Inicializa um ponto com coordenadas e cor.

        Args:
            x: Coordenada x do ponto.
            y: Coordenada y do ponto.
            color: Cor do ponto (opcional, padrão é preto).
        """
        self.x: float = float(x)
        self.y: float = float(y)
        self.color: QColor = (
            color if isinstance(color, QColor) and color.isValid() else QColor(Qt.black)
        )

    @classmethod
    def from_coords(cls, coords: Tuple[float, float], color: Optional[QColor] = None):
        return cls(coords[0], coords[1], color)

    def to_qpointf(self) -> QPointF:
        """Converte o ponto para o formato QPointF do Qt."""
        return QPointF(self.x, self.y)

    def create_graphics_item(self) -> QGraphicsEllipseItem:
        """Cria um marcador circular centrado no ponto."""
        offset = self.GRAPHICS_SIZE / 2.0
        point_item = QGraphicsEllipseItem(
            self.x - offset, self.y - offset, self.GRAPHICS_SIZE, self.GRAPHICS_SIZE
        )
        point_item.setPen(QPen(self.color, 1))
        point_item.setBrush(QBrush(self.color))
        return point_item

    def get_coords(self) -> Tuple[float, float]:
        """Retorna as coordenadas (x, y) do ponto."""
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Point(x={self.x:.3f}, y={self.y:.3f}, color={self.color.name()})"

    def __eq__(self, other: object) -> bool:
        """Verifica se dois Pontos são iguais (baseado nas coordenadas)."""
        if not isinstance(other, Point):
            return NotImplemented
        epsilon = 1e-9
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon
