from .main_view import GraphicsView

__all__ = ["GraphicsView"]
