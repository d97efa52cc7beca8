# clip_viewer/models/__init__.py
"""
Pacote que contém os modelos de dados do visualizador de recorte.

- Point: ponto 2D com cor.
- Line: segmento 2D original, com cor.
- ClipWindow: janela retangular de recorte, imutável.
"""

from .point import Point
from .line import Line
from .clip_window import ClipWindow

__all__ = [
    "Point",
    "Line",
    "ClipWindow",
]
