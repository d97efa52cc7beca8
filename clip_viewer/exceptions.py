# clip_viewer/exceptions.py
"""
Exceções levantadas pelo núcleo de recorte.

Todas derivam de ClippingError, de modo que a camada Qt pode tratar
qualquer falha de recorte com um único `except`.
"""


class ClippingError(Exception):
    """Erro base para falhas de recorte de segmentos."""


class InvalidWindowError(ClippingError, ValueError):
    """Janela de recorte degenerada (xmin >= xmax, ymin >= ymax ou limite não finito)."""


class InvalidInputError(ClippingError, ValueError):
    """Coordenada de entrada não finita (NaN ou infinito)."""


class DegenerateSegmentError(ClippingError):
    """Nenhuma borda pôde ser resolvida para um extremo fora da janela."""


class ClipConvergenceError(ClippingError):
    """O laço de recorte excedeu o número máximo de passos."""
