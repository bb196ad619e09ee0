"""Fixed-size drawing surface for the beam schematic."""

from __future__ import annotations

from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from WAIST.src.core.scene import BACKGROUND, FONT_PX, Label, Polygon, Scene, Segment


class BeamCanvas(QtWidgets.QWidget):
    def __init__(self, width: int, height: int, parent=None):
        super().__init__(parent)
        self.setFixedSize(width, height)
        self.scene: Optional[Scene] = None

        self.label_font = QtGui.QFont("Arial")
        self.label_font.setPixelSize(FONT_PX)

    def set_scene(self, scene: Scene) -> None:
        self.scene = scene
        self.update()

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        try:
            painter.setRenderHint(QtGui.QPainter.Antialiasing)
            background = self.scene.background if self.scene is not None else BACKGROUND
            painter.fillRect(self.rect(), QtGui.QColor(background))
            if self.scene is not None:
                self.paint_scene(painter, self.scene)
        finally:
            painter.end()

    def paint_scene(self, painter: QtGui.QPainter, scene: Scene) -> None:
        painter.setFont(self.label_font)
        metrics = QtGui.QFontMetricsF(self.label_font)

        for item in scene.items:
            if isinstance(item, Segment):
                painter.setPen(QtGui.QPen(QtGui.QColor(item.color), item.width))
                painter.drawLine(QtCore.QPointF(item.x1, item.y1), QtCore.QPointF(item.x2, item.y2))
            elif isinstance(item, Polygon):
                color = QtGui.QColor(item.color)
                color.setAlphaF(item.alpha)
                painter.setPen(QtCore.Qt.NoPen)
                painter.setBrush(QtGui.QBrush(color))
                painter.drawPolygon(QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in item.points]))
                painter.setBrush(QtCore.Qt.NoBrush)
            elif isinstance(item, Label):
                x = item.x
                if item.align == "center":
                    x -= metrics.horizontalAdvance(item.text) / 2.0
                painter.setPen(QtGui.QColor(item.color))
                painter.drawText(QtCore.QPointF(x, item.y), item.text)
