"""Visualizer page: beam inputs, results, schematic and radius profile."""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5 import QtWidgets, QtCore
import pyqtgraph as pg

from WAIST.config import Config
from WAIST.src.core.optics import beam_profile, calculate, format_readouts
from WAIST.src.core.scene import Scene, build_scene
from WAIST.src.core.types import BeamInput, BeamResult
from WAIST.src.ui.theme import HEX_BG_DARK, HEX_PROFILE_IN, HEX_PROFILE_OUT
from WAIST.src.ui.widgets.canvas import BeamCanvas
from WAIST.src.ui.widgets.inputs import BeamInputWidget
from WAIST.src.ui.widgets.readouts import ReadoutWidget

logger = logging.getLogger(__name__)


class VisualizerPage(QtWidgets.QWidget):
    def __init__(self, config: Config):
        super().__init__()
        self.config = config

        self.beam: Optional[BeamInput] = None
        self.result: Optional[BeamResult] = None
        self.scene: Optional[Scene] = None

        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        self.canvas = BeamCanvas(self.config.CANVAS_WIDTH_PX, self.config.CANVAS_HEIGHT_PX)
        layout.addWidget(self.canvas, alignment=QtCore.Qt.AlignHCenter)

        self.plot_container = pg.GraphicsLayoutWidget()
        self.plot_container.setBackground(HEX_BG_DARK)
        self.plot_container.setMinimumHeight(180)

        self.plot = self.plot_container.addPlot(title="Beam Radius")
        self.plot.setLabel("left", "w(z) [mm]")
        self.plot.setLabel("bottom", "z from lens [mm]")
        self.plot.showGrid(x=True, y=True, alpha=0.3)

        self.curve_in = self.plot.plot(pen=pg.mkPen(HEX_PROFILE_IN, width=2), name="Input")
        self.curve_out = self.plot.plot(pen=pg.mkPen(HEX_PROFILE_OUT, width=2), name="Output")
        self.line_lens = pg.InfiniteLine(pos=0, angle=90, pen=pg.mkPen("w", width=1, style=QtCore.Qt.DashLine))
        self.plot.addItem(self.line_lens)

        layout.addWidget(self.plot_container, stretch=1)

        bottom_panel = QtWidgets.QHBoxLayout()
        self.inputs = BeamInputWidget()
        self.readouts = ReadoutWidget()
        bottom_panel.addWidget(self.inputs, 1)
        bottom_panel.addWidget(self.readouts, 2)
        layout.addLayout(bottom_panel)

    def _connect_signals(self) -> None:
        self.inputs.values_changed.connect(self.update_visualization)

    def reset_inputs(self) -> None:
        self.inputs.set_values(
            self.config.WAVELENGTH_NM,
            self.config.FOCAL_LENGTH_MM,
            self.config.OBJECT_DISTANCE_MM,
            self.config.WAIST_MM,
        )

    def update_visualization(self) -> None:
        """One calculate-then-render cycle from the current field values."""
        beam = BeamInput.from_display(*self.inputs.values())
        result = calculate(beam)
        if result is None:
            # Keep the previous frame until the inputs are usable again
            logger.debug("Update skipped, inputs not valid")
            return

        self.beam = beam
        self.result = result
        self.scene = build_scene(
            beam, result, self.config.CANVAS_WIDTH_PX, self.config.CANVAS_HEIGHT_PX, self.config
        )
        self.readouts.update_values(format_readouts(result))
        self.canvas.set_scene(self.scene)
        self.update_profile(self.scene.layout.span)

    def current_scene(self) -> Optional[Scene]:
        return self.scene

    def update_profile(self, span: float) -> None:
        z_in, w_in, z_out, w_out = beam_profile(self.beam, self.result, span, self.config.PROFILE_SAMPLES)
        self.curve_in.setData(z_in, w_in)
        self.curve_out.setData(z_out, w_out)
