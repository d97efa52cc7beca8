"""
Módulo que define a classe Line para representação de segmentos de linha 2D.
Uma Line é o segmento original informado pelo usuário, antes do recorte.
"""

# clip_viewer/models/line.py
from PyQt5.QtCore import Qt, QLineF
from PyQt5.QtGui import QPen, QColor
from PyQt5.QtWidgets import QGraphicsLineItem
from typing import Tuple, Optional

from .point import Point


class Line:
    """
    Representa um segmento de linha 2D definido por um ponto inicial e final.

    Responsável por:
    - Armazenar os objetos Point inicial e final.
    - Gerenciar a cor da linha.
    - Criar a representação gráfica QGraphicsItem da linha.
    - Converter-se para a tupla de segmento aceita pelo recorte.
    """

    GRAPHICS_WIDTH = 2  # Espessura visual da linha

    def __init__(
        self, start_point: Point, end_point: Point, color: Optional[QColor] = None
    ):
        """
        Inicializa uma linha com pontos inicial e final.

        Args:
            start_point: Objeto Point inicial.
            end_point: Objeto Point final.
            color: Cor da linha (opcional, padrão é preto).

        Raises:
            TypeError: Se start_point ou end_point não forem instâncias de Point.
        """
        if not isinstance(start_point, Point) or not isinstance(end_point, Point):
            raise TypeError("start_point e end_point devem ser instâncias de Point.")
        self.start: Point = start_point
        self.end: Point = end_point
        self.color: QColor = (
            color if isinstance(color, QColor) and color.isValid() else QColor(Qt.black)
        )

    @classmethod
    def from_segment(
        cls,
        segment: Tuple[Tuple[float, float], Tuple[float, float]],
        color: Optional[QColor] = None,
    ) -> "Line":
        """Cria uma Line a partir de ((x1, y1), (x2, y2))."""
        p1, p2 = segment
        return cls(Point.from_coords(p1), Point.from_coords(p2), color)

    def to_segment(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return (self.start.get_coords(), self.end.get_coords())

    def create_graphics_item(self, width: Optional[float] = None) -> QGraphicsLineItem:
        """
        Cria a representação gráfica da linha como um QGraphicsLineItem.

        Args:
            width: Espessura da caneta (opcional, padrão GRAPHICS_WIDTH).

        Returns:
            QGraphicsLineItem: Item gráfico representando a linha.
        """
        q_line_f = QLineF(self.start.to_qpointf(), self.end.to_qpointf())
        line_item = QGraphicsLineItem(q_line_f)
        line_item.setPen(
            QPen(self.color, width if width is not None else self.GRAPHICS_WIDTH)
        )
        return line_item

    def get_coords(self):
        """Retorna as coordenadas dos pontos inicial e final como uma lista de tuplas."""
        return [self.start.get_coords(), self.end.get_coords()]

    def __repr__(self) -> str:
        return (
            f"Line(start={self.start!r}, end={self.end!r}, color={self.color.name()})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        # A cor faz parte da igualdade; a ordem dos pontos também.
        return (
            self.start == other.start
            and self.end == other.end
            and self.color == other.color
        )
