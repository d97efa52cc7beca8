"""
Pacote de controladores do visualizador.

- SceneController: desenha a janela, os segmentos originais e recortados.
"""

from .scene_controller import SceneController

__all__ = [
    "SceneController",
]
