import os
import unittest
from pathlib import Path
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from PyQt5 import QtWidgets

from WAIST.config import Config
from WAIST.src.ui.layouts.visualizer import VisualizerPage
from WAIST.src.ui.theme import apply_theme
from WAIST.src.ui.widgets.inputs import parse_field


class TestParseField(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(parse_field("632.8"), 632.8)
        self.assertEqual(parse_field(" 1e3 "), 1000.0)

    def test_unparsable_is_nan(self):
        for text in ("", "-", "1e", "."):
            with self.subTest(text=text):
                val = parse_field(text)
                self.assertNotEqual(val, val)


class TestVisualizerPage(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    def setUp(self):
        self.page = VisualizerPage(Config())

    def tearDown(self):
        self.page.deleteLater()

    def test_nothing_drawn_before_first_valid_cycle(self):
        self.assertIsNone(self.page.canvas.scene)
        self.assertEqual(set(self.page.readouts.texts().values()), {"---"})

    def test_reset_runs_full_cycle(self):
        self.page.reset_inputs()
        texts = self.page.readouts.texts()
        self.assertEqual(texts["output_waist_position"], "100.32")
        self.assertEqual(texts["rayleigh_range"], "1241.15")
        self.assertEqual(texts["divergence"], "0.403")
        self.assertIsNotNone(self.page.canvas.scene)

        pixmap = self.page.canvas.grab()
        self.assertEqual((pixmap.width(), pixmap.height()), (800, 400))

    def test_invalid_input_leaves_display_unchanged(self):
        cases = [
            ("wavelength", "0"),
            ("focal_length", "0"),
            ("waist", "0"),
            ("object_distance", ""),
            ("wavelength", "-"),
        ]
        for key, text in cases:
            with self.subTest(field=key, text=text):
                self.page.reset_inputs()
                before_texts = self.page.readouts.texts()
                before_scene = self.page.canvas.scene

                self.page.inputs.edits[key].setText(text)

                self.assertEqual(self.page.readouts.texts(), before_texts)
                self.assertIs(self.page.canvas.scene, before_scene)

    def test_edit_triggers_recalculation(self):
        self.page.reset_inputs()
        before_scene = self.page.canvas.scene
        self.page.inputs.edits["object_distance"].setText("100")

        texts = self.page.readouts.texts()
        self.assertEqual(texts["output_waist_position"], "100.00")
        self.assertIsNot(self.page.canvas.scene, before_scene)

        x, y = self.page.curve_out.getData()
        self.assertEqual(len(x), self.page.config.PROFILE_SAMPLES)
        # Profile spans the same axis range as the schematic
        self.assertAlmostEqual(x[-1], self.page.scene.layout.span / 2.0 * 1e3)

    def test_theme_styles_only_shown_widgets(self):
        apply_theme(self.app)
        qss = self.app.styleSheet()
        for selector in ("QGroupBox::title", "QLineEdit", "QMenu"):
            self.assertIn(selector, qss)
        for selector in ("QPushButton", "QTableWidget", "QScrollBar", "QTabBar"):
            self.assertNotIn(selector, qss)
        self.app.setStyleSheet("")


if __name__ == "__main__":
    unittest.main()
