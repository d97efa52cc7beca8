"""
Pacote de utilitários do visualizador.

Contém o módulo:
- clipping: recorte de segmentos 2D por Cohen-Sutherland.
"""

from . import clipping

__all__ = [
    "clipping",
]
