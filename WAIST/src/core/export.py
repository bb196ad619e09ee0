"""Render a scene to an image file with matplotlib."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as PolygonPatch

from WAIST.src.core.scene import FONT_PX, Label, Polygon, Scene, Segment

matplotlib.use("Agg")

logger = logging.getLogger(__name__)


def export_png(scene: Scene, path: Path, dpi: int = 100) -> Path:
    """Draw the scene at its pixel size and save it to path."""
    path = Path(path)
    fig = plt.figure(figsize=(scene.width / dpi, scene.height / dpi), dpi=dpi)
    try:
        fig.patch.set_facecolor(scene.background)
        ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        ax.set_xlim(0, scene.width)
        ax.set_ylim(scene.height, 0)
        ax.set_axis_off()

        # Font size in points for a pixel height at this dpi
        font_pt = FONT_PX * 72.0 / dpi
        for item in scene.items:
            if isinstance(item, Segment):
                ax.plot(
                    [item.x1, item.x2],
                    [item.y1, item.y2],
                    color=item.color,
                    linewidth=item.width * 72.0 / dpi,
                    solid_capstyle="butt",
                )
            elif isinstance(item, Polygon):
                ax.add_patch(
                    PolygonPatch(item.points, closed=True, facecolor=item.color, alpha=item.alpha, edgecolor="none")
                )
            elif isinstance(item, Label):
                ax.text(
                    item.x,
                    item.y,
                    item.text,
                    color=item.color,
                    fontsize=font_pt,
                    ha=item.align,
                    va="baseline",
                )

        fig.savefig(path, dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)

    logger.info("Diagram saved to %s", path)
    return path
