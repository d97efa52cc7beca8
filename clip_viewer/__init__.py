"""
Visualizador de recorte de segmentos 2D (Cohen-Sutherland).

O núcleo geométrico fica em clip_viewer.utils.clipping; os demais módulos
compõem a interface PyQt5 que desenha o resultado.
"""

from .exceptions import (
    ClippingError,
    InvalidWindowError,
    InvalidInputError,
    DegenerateSegmentError,
    ClipConvergenceError,
)
from .models.clip_window import ClipWindow
from .utils.clipping import ClipResult, Outcode, clip_segment, compute_outcode

__version__ = "1.0.0"

__all__ = [
    "ClippingError",
    "InvalidWindowError",
    "InvalidInputError",
    "DegenerateSegmentError",
    "ClipConvergenceError",
    "ClipWindow",
    "ClipResult",
    "Outcode",
    "clip_segment",
    "compute_outcode",
]
