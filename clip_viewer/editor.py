# clip_viewer/editor.py
import os
from typing import Optional

from PyQt5.QtCore import QTimer
from PyQt5.QtWidgets import (
    QMainWindow,
    QGraphicsScene,
    QAction,
    QMessageBox,
    QInputDialog,
    QColorDialog,
    QLabel,
)

from .view.main_view import GraphicsView
from .models import Line
from .state_manager import ClipStateManager
from .controllers.scene_controller import SceneController
from .io_handler import IOHandler, parse_scene_lines


class ClipViewerWindow(QMainWindow):
    """
    Janela principal: exibe a janela de recorte, os segmentos originais e
    as partes visíveis calculadas por Cohen-Sutherland.
    """

    STATUS_MESSAGE_TIMEOUT_MS = 5000

    def __init__(self, parent=None):
        super().__init__(parent)
        self.resize(900, 700)

        self._setup_core_components()
        self._setup_managers_controllers_services()
        self._setup_menu_bar()
        self._connect_signals()
        self._update_window_title()
        self._on_scale_changed()
        # Primeiro desenho depois que o laço de eventos iniciar
        QTimer.singleShot(0, self._scene_controller.refresh)

    def _setup_core_components(self) -> None:
        self._scene = QGraphicsScene(self)
        self._view = GraphicsView(self._scene, self)
        self.setCentralWidget(self._view)
        self._zoom_label = QLabel(self)
        self.statusBar().addPermanentWidget(self._zoom_label)

    def _setup_managers_controllers_services(self) -> None:
        self._state_manager = ClipStateManager(self)
        self._scene_controller = SceneController(self._scene, self._state_manager, self)
        self._io_handler = IOHandler(self)

    def _setup_menu_bar(self) -> None:
        menubar = self.menuBar()

        # --- Menu Arquivo ---
        file_menu = menubar.addMenu("&Arquivo")
        new_action = QAction("&Nova Cena", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self._state_manager.reset)
        file_menu.addAction(new_action)
        file_menu.addSeparator()
        open_action = QAction("&Abrir Cena...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._handle_open_action)
        file_menu.addAction(open_action)
        save_as_action = QAction("Salvar &Como...", self)
        save_as_action.setShortcut("Ctrl+Shift+S")
        save_as_action.triggered.connect(self._handle_save_as_action)
        file_menu.addAction(save_as_action)
        file_menu.addSeparator()
        exit_action = QAction("&Sair", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # --- Menu Editar ---
        edit_menu = menubar.addMenu("&Editar")
        add_segment_action = QAction("&Adicionar Segmento...", self)
        add_segment_action.setShortcut("Ctrl+L")
        add_segment_action.triggered.connect(self._handle_add_segment_action)
        edit_menu.addAction(add_segment_action)
        self._clear_segments_action = QAction("&Limpar Segmentos", self)
        self._clear_segments_action.triggered.connect(
            self._state_manager.clear_segments
        )
        edit_menu.addAction(self._clear_segments_action)

        # --- Menu Exibir ---
        view_menu = menubar.addMenu("&Exibir")
        reset_view_action = QAction("Resetar &Vista", self)
        reset_view_action.triggered.connect(self._view.reset_view)
        view_menu.addAction(reset_view_action)
        view_menu.addSeparator()
        for label, role in (
            ("Cor do Segmento &Original...", "original"),
            ("Cor do Segmento &Recortado...", "clipped"),
            ("Cor da &Janela...", "window"),
        ):
            color_action = QAction(label, self)
            color_action.triggered.connect(
                lambda checked=False, r=role: self._pick_color(r)
            )
            view_menu.addAction(color_action)

    def _connect_signals(self) -> None:
        self._scene_controller.results_updated.connect(self._on_results_updated)
        self._scene_controller.clip_failed.connect(self._on_clip_failed)
        self._state_manager.filepath_changed.connect(self._update_window_title)
        self._view.scale_changed.connect(self._on_scale_changed)

    # --- Arquivo ---
    def load_scene(self, filepath: str, show_errors: bool = True) -> bool:
        """
        Carrega um arquivo de cena e substitui janela e segmentos.

        Returns:
            bool: True se o arquivo foi lido.
        """
        parsed = self._io_handler.read_scene_file(filepath, show_errors=show_errors)
        if parsed is None:
            return False
        window, segments, warnings = parsed

        if warnings:
            for warning in warnings:
                print(f"Aviso: {os.path.basename(filepath)}: {warning}")
            if show_errors:
                QMessageBox.warning(
                    self,
                    "Avisos na Cena",
                    f"{len(warnings)} linha(s) ignorada(s):\n\n"
                    + "\n".join(warnings[:10]),
                )

        if window is not None:
            self._state_manager.set_clip_window(window)
        self._state_manager.set_segments(
            [
                Line.from_segment(segment, self._state_manager.original_color())
                for segment in segments
            ]
        )
        self._state_manager.set_current_filepath(filepath)
        return True

    def _handle_open_action(self) -> None:
        filepath = self._io_handler.prompt_load_scene()
        if filepath:
            self.load_scene(filepath)

    def _handle_save_as_action(self) -> None:
        filepath = self._io_handler.prompt_save_scene()
        if not filepath:
            return
        segments = [line.to_segment() for line in self._state_manager.segments()]
        if self._io_handler.write_scene_file(
            filepath, self._state_manager.clip_window(), segments
        ):
            self._state_manager.set_current_filepath(filepath)

    # --- Editar ---
    def add_segment_from_text(self, text: str) -> bool:
        """
        Adiciona um segmento a partir do texto "x1 y1 x2 y2".

        Returns:
            bool: True se o texto continha quatro números.
        """
        _, segments, warnings = parse_scene_lines([f"l {text}"])
        if warnings or not segments:
            for warning in warnings:
                print(f"Aviso: Segmento não adicionado: {warning}")
            return False
        p1, p2 = segments[0]
        self._state_manager.add_segment(p1, p2)
        return True

    def _handle_add_segment_action(self) -> None:
        text, ok = QInputDialog.getText(
            self, "Adicionar Segmento", "Coordenadas (x1 y1 x2 y2):"
        )
        if ok and text.strip() and not self.add_segment_from_text(text):
            QMessageBox.warning(
                self,
                "Segmento Inválido",
                "Informe quatro números separados por espaço: x1 y1 x2 y2.",
            )

    # --- Exibir ---
    def _pick_color(self, role: str) -> None:
        """Abre o seletor de cor para "original", "clipped" ou "window"."""
        current = {
            "original": self._state_manager.original_color,
            "clipped": self._state_manager.clipped_color,
            "window": self._state_manager.window_color,
        }[role]()
        color = QColorDialog.getColor(current, self, "Selecionar Cor")
        if color.isValid():
            self._state_manager.set_colors(**{role: color})

    # --- Status ---
    def _on_scale_changed(self) -> None:
        self._zoom_label.setText(f"Zoom: {self._view.get_scale() * 100:.0f}%")

    def _on_results_updated(self, accepted: int, rejected: int) -> None:
        window = self._state_manager.clip_window()
        self.statusBar().showMessage(
            f"Janela {window.as_tuple()} | Aceitos: {accepted} | Rejeitados: {rejected}"
        )

    def _on_clip_failed(self, message: str) -> None:
        print(f"Aviso: Falha no recorte: {message}")
        self.statusBar().showMessage(
            f"Falha no recorte: {message}", self.STATUS_MESSAGE_TIMEOUT_MS
        )

    def _update_window_title(self, *args) -> None:
        filepath: Optional[str] = self._state_manager.current_filepath()
        name = os.path.basename(filepath) if filepath else "Cena Padrão"
        self.setWindowTitle(f"Recorte Cohen-Sutherland - {name}")
