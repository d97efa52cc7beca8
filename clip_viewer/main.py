# clip_viewer/main.py
import sys
import traceback
from PyQt5.QtWidgets import QApplication, QMessageBox
from PyQt5.QtCore import Qt, QLocale


def main():
    """Configura e executa o visualizador de recorte."""
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
    QLocale.setDefault(QLocale.system())

    app = QApplication(sys.argv)

    # Arquivo de cena opcional passado na linha de comando
    scene_path = app.arguments()[1] if len(app.arguments()) > 1 else None

    viewer_instance = None
    try:
        from .editor import ClipViewerWindow

        viewer_instance = ClipViewerWindow()
        if scene_path:
            viewer_instance.load_scene(scene_path)

    except ImportError as e:
        print("--- ERRO CRÍTICO DE IMPORTAÇÃO ---", file=sys.stderr)
        traceback.print_exc()
        print("---------------------------------", file=sys.stderr)
        QMessageBox.critical(
            None,
            "Erro de Importação",
            f"Falha ao importar componentes necessários da aplicação.\n\n"
            f"Erro: {e}\n\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)

    except Exception as e:
        print("--- ERRO CRÍTICO INESPERADO ---", file=sys.stderr)
        traceback.print_exc()
        print("-----------------------------", file=sys.stderr)
        QMessageBox.critical(
            None,
            "Erro Inesperado na Inicialização",
            f"Ocorreu um erro inesperado ao iniciar a aplicação:\n\n"
            f"{e}\n\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)

    viewer_instance.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
