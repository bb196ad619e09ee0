from PyQt5 import QtWidgets

from WAIST.src.core.types import Readouts
from WAIST.src.ui.theme import HEX_SUCCESS, HEX_TEXT_DIM


class ReadoutWidget(QtWidgets.QGroupBox):
    ROWS = (
        ("output_waist_position", "Output waist position s':", "mm"),
        ("output_waist", "Output waist w₀':", "mm"),
        ("rayleigh_range", "Input Rayleigh range zʀ:", "mm"),
        ("output_rayleigh_range", "Output Rayleigh range zʀ':", "mm"),
        ("divergence", "Input divergence θ:", "mrad"),
        ("output_divergence", "Output divergence θ':", "mrad"),
    )

    def __init__(self, parent=None):
        super().__init__("Results", parent)
        self.layout = QtWidgets.QGridLayout(self)

        self.labels = {}
        for row, (key, name, unit) in enumerate(self.ROWS):
            self.layout.addWidget(QtWidgets.QLabel(name), row, 0)
            lbl = QtWidgets.QLabel("---")
            lbl.setStyleSheet(f"font-size: 16px; font-weight: bold; color: {HEX_TEXT_DIM};")
            self.layout.addWidget(lbl, row, 1)
            self.layout.addWidget(QtWidgets.QLabel(unit), row, 2)
            self.labels[key] = lbl

    def update_values(self, readouts: Readouts):
        for key, text in readouts._asdict().items():
            lbl = self.labels[key]
            lbl.setText(text)
            lbl.setStyleSheet(f"font-size: 16px; font-weight: bold; color: {HEX_SUCCESS};")

    def texts(self) -> dict:
        return {key: lbl.text() for key, lbl in self.labels.items()}
