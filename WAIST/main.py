import sys
import argparse
import logging
from pathlib import Path

from PyQt5 import QtWidgets
import pyqtgraph as pg

from WAIST.config import Config
from WAIST.src.core.export import export_png
from WAIST.src.core.optics import calculate
from WAIST.src.core.scene import build_scene
from WAIST.src.core.types import BeamInput
from WAIST.src.ui.layouts.visualizer import VisualizerPage

logger = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, config: Config):
        super().__init__()
        self.config = config

        self.setWindowTitle("WAIST: Gaussian Beam Through a Thin Lens")
        self.resize(config.CANVAS_WIDTH_PX + 60, config.CANVAS_HEIGHT_PX + 480)

        self.page = VisualizerPage(config)
        self.setCentralWidget(self.page)
        self.init_menu()

        # First draw with the configured defaults
        self.page.reset_inputs()

    def init_menu(self):
        menubar = self.menuBar()

        waist_menu = menubar.addMenu("WAIST")
        waist_menu.addAction("Export Diagram...", self.on_export)
        waist_menu.addAction("Reset Inputs", self.page.reset_inputs)
        waist_menu.addSeparator()
        waist_menu.addAction("Quit", self.close)

        help_menu = menubar.addMenu("Help")
        help_menu.addAction("About", self.on_about)

    def on_export(self):
        scene = self.page.current_scene()
        if scene is None:
            QtWidgets.QMessageBox.information(self, "Export", "Nothing to export yet.")
            return
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export Diagram", "beam.png", "PNG (*.png)")
        if not path:
            return
        try:
            export_png(scene, Path(path), self.config.EXPORT_DPI)
        except OSError as e:
            logger.exception("Failed to export diagram")
            QtWidgets.QMessageBox.warning(self, "Export Failed", str(e))

    def on_about(self):
        QtWidgets.QMessageBox.about(
            self,
            "About WAIST",
            "Gaussian beam waist transformation by a thin lens.\n"
            "The object distance is entered as a positive magnitude.",
        )


def export_default(config: Config, path: Path) -> int:
    """Render the configured default inputs without opening a window."""
    beam = BeamInput.from_display(
        config.WAVELENGTH_NM, config.FOCAL_LENGTH_MM, config.OBJECT_DISTANCE_MM, config.WAIST_MM
    )
    result = calculate(beam)
    if result is None:
        logger.error("Configured inputs do not describe a valid beam: %s", beam)
        return 2
    scene = build_scene(beam, result, config.CANVAS_WIDTH_PX, config.CANVAS_HEIGHT_PX, config)
    try:
        export_png(scene, path, config.EXPORT_DPI)
    except OSError:
        logger.exception("Failed to export diagram to %s", path)
        return 1
    return 0


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=Path, default=None, help="JSON file overriding the defaults")
    parser.add_argument("--export", type=Path, default=None, help="Render the default inputs to PNG and exit")
    args = parser.parse_args()

    config = Config.load(args.config)
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.export is not None:
        sys.exit(export_default(config, args.export))

    app = QtWidgets.QApplication(sys.argv)
    pg.setConfigOptions(antialias=True)

    from WAIST.src.ui.theme import apply_theme
    apply_theme(app)

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec_())

if __name__ == "__main__":
    main()
