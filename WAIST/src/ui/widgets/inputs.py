from PyQt5 import QtWidgets, QtCore, QtGui


def parse_field(text: str) -> float:
    """Field text as a float, NaN when it does not parse."""
    try:
        return float(text.strip())
    except ValueError:
        return float("nan")


class BeamInputWidget(QtWidgets.QGroupBox):
    # Emitted on every edit of any field
    values_changed = QtCore.pyqtSignal()

    FIELDS = (
        ("wavelength", "Wavelength λ:", "nm", "Laser wavelength in nanometers"),
        ("focal_length", "Focal length f:", "mm", "Thin lens focal length"),
        ("object_distance", "Object distance s:", "mm", "Distance from the input waist to the lens"),
        ("waist", "Input waist w₀:", "mm", "Input beam waist radius (1/e² intensity)"),
    )

    def __init__(self, parent=None):
        super().__init__("Beam & Lens", parent)
        self.layout = QtWidgets.QGridLayout(self)
        self.layout.setHorizontalSpacing(10)
        self.layout.setVerticalSpacing(8)

        self.edits = {}
        for row, (key, label, unit, tip) in enumerate(self.FIELDS):
            self.layout.addWidget(QtWidgets.QLabel(label), row, 0)
            edit = QtWidgets.QLineEdit()
            edit.setFixedWidth(96)
            validator = QtGui.QDoubleValidator(edit)
            validator.setLocale(QtCore.QLocale.c())  # float() only understands '.'
            edit.setValidator(validator)
            edit.setToolTip(tip)
            edit.textChanged.connect(lambda _text: self.values_changed.emit())
            self.layout.addWidget(edit, row, 1)
            self.layout.addWidget(QtWidgets.QLabel(unit), row, 2)
            self.edits[key] = edit

        self.layout.setRowStretch(len(self.FIELDS), 1)

    def set_values(self, wavelength_nm, focal_length_mm, object_distance_mm, waist_mm):
        """Fill all fields; emits one change signal at the end."""
        values = (wavelength_nm, focal_length_mm, object_distance_mm, waist_mm)
        for (key, *_), val in zip(self.FIELDS, values):
            edit = self.edits[key]
            edit.blockSignals(True)
            edit.setText(f"{val:g}")
            edit.blockSignals(False)
        self.values_changed.emit()

    def values(self) -> tuple:
        """(wavelength_nm, focal_length_mm, object_distance_mm, waist_mm)."""
        return tuple(parse_field(self.edits[key].text()) for key, *_ in self.FIELDS)
