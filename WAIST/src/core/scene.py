"""
Schematic of the beam before and after the lens, as plain drawing primitives.

Coordinates are canvas pixels, origin top-left, y pointing down. Nothing in
here knows about Qt or matplotlib; painters consume the primitives in order.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Union

import numpy as np

from WAIST.config import Config
from WAIST.src.core.optics import beam_radius
from WAIST.src.core.types import BeamInput, BeamResult

BACKGROUND = "#1e1e1e"
COLOR_AXIS = "#e0e0e0"
COLOR_LENS = "#4a90e2"
COLOR_BEAM_IN = "#ff6464"
COLOR_BEAM_OUT = "#64b4ff"
BEAM_ALPHA = 0.3
COLOR_DIMENSION = "#b0b0b0"
COLOR_TICK = "#909090"
COLOR_WAIST_IN = "#ff4d4d"
COLOR_WAIST_OUT = "#4d8dff"
COLOR_TEXT = "#e0e0e0"
FONT_PX = 12

TICK_PX = 5.0
LABEL_OFFSET_PX = 8.0
LENS_ARROW_DX = 5.0
LENS_ARROW_DY = 10.0


class Segment(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float = 1.0


class Polygon(NamedTuple):
    points: np.ndarray  # (N, 2) closed outline, last point joins the first
    color: str
    alpha: float = 1.0


class Label(NamedTuple):
    x: float
    y: float  # baseline
    text: str
    color: str = COLOR_TEXT
    align: str = "center"


Primitive = Union[Segment, Polygon, Label]


class SceneLayout(NamedTuple):
    width: int
    height: int
    span: float
    scale_x: float
    scale_y: float
    lens_x: float
    axis_y: float
    max_radius: float
    lens_half_height: float

    def to_x(self, z: float) -> float:
        return self.lens_x + z * self.scale_x


class Scene(NamedTuple):
    width: int
    height: int
    items: list
    layout: Optional[SceneLayout] = None
    background: str = BACKGROUND

    def of_type(self, kind) -> list:
        return [item for item in self.items if isinstance(item, kind)]


def compute_layout(beam: BeamInput, result: BeamResult, width: int, height: int, config: Config) -> SceneLayout:
    """Fit both beams and the lens onto a width x height surface."""
    s = beam.object_distance
    f = beam.focal_length
    s_out = result.output_waist_position

    span = config.SPAN_FACTOR * max(abs(s), s_out, f, abs(s + f), abs(s_out - f))
    scale_x = width / span

    radius_start = beam_radius(-span / 2.0, beam.waist, s, result.rayleigh_range)
    radius_end = beam_radius(span / 2.0, result.output_waist, s_out, result.output_rayleigh_range)
    max_radius = float(max(radius_start, radius_end))
    scale_y = height / (max_radius * config.HEIGHT_FACTOR)

    lens_half_height = min(max_radius * scale_y * config.LENS_SCALE, height / config.LENS_CAP_DIVISOR)

    return SceneLayout(
        width=width,
        height=height,
        span=span,
        scale_x=scale_x,
        scale_y=scale_y,
        lens_x=width / 2.0,
        axis_y=height / 2.0,
        max_radius=max_radius,
        lens_half_height=lens_half_height,
    )


def beam_envelope(
    waist_position: float,
    waist: float,
    rayleigh_range: float,
    z_start: float,
    z_end: float,
    layout: SceneLayout,
) -> np.ndarray:
    """
    Closed outline of a beam between z_start and z_end (meters, lens at 0).

    w(z) is sampled once per horizontal pixel. The top edge runs left to
    right, the bottom edge comes back right to left.
    """
    pixels = (z_end - z_start) * layout.scale_x
    n = max(int(math.floor(pixels + 1e-6)) + 1, 1)
    z = z_start + np.arange(n, dtype=np.float64) / layout.scale_x

    x = layout.lens_x + z * layout.scale_x
    dy = beam_radius(z, waist, waist_position, rayleigh_range) * layout.scale_y

    top = np.column_stack((x, layout.axis_y - dy))
    bottom = np.column_stack((x[::-1], layout.axis_y + dy[::-1]))
    return np.vstack((top, bottom))


def dimension_line(x1: float, y1: float, x2: float, y2: float, label: str) -> list:
    """Measurement line with end ticks and a centered label above it."""
    return [
        Segment(x1, y1, x2, y2, COLOR_DIMENSION),
        Segment(x1, y1 - TICK_PX, x1, y1 + TICK_PX, COLOR_TICK),
        Segment(x2, y2 - TICK_PX, x2, y2 + TICK_PX, COLOR_TICK),
        Label((x1 + x2) / 2.0, y1 - LABEL_OFFSET_PX, label),
    ]


def _lens(layout: SceneLayout) -> list:
    x = layout.lens_x
    top = layout.axis_y - layout.lens_half_height
    bottom = layout.axis_y + layout.lens_half_height
    items = [Segment(x, top, x, bottom, COLOR_LENS, 2.0)]
    for dx in (LENS_ARROW_DX, -LENS_ARROW_DX):
        items.append(Segment(x, top, x + dx, top + LENS_ARROW_DY, COLOR_LENS, 2.0))
        items.append(Segment(x, bottom, x + dx, bottom - LENS_ARROW_DY, COLOR_LENS, 2.0))
    return items


def _waist_marker(z: float, waist: float, text: str, color: str, layout: SceneLayout) -> list:
    x = layout.to_x(z)
    half = waist * layout.scale_y
    return [
        Segment(x, layout.axis_y - half, x, layout.axis_y + half, color),
        Label(x + LABEL_OFFSET_PX, layout.axis_y - 5.0, text, align="left"),
    ]


def build_scene(beam: BeamInput, result: BeamResult, width: int, height: int, config: Config) -> Scene:
    """Full schematic for one update: axis, lens, both beams, then annotations."""
    layout = compute_layout(beam, result, width, height, config)
    s = beam.object_distance
    f = beam.focal_length
    s_out = result.output_waist_position
    axis_y = layout.axis_y
    lens_x = layout.lens_x
    half_span = layout.span / 2.0

    items: list = [Segment(0.0, axis_y, float(width), axis_y, COLOR_AXIS)]
    items.extend(_lens(layout))

    items.append(
        Polygon(
            beam_envelope(s, beam.waist, result.rayleigh_range, -half_span, 0.0, layout),
            COLOR_BEAM_IN,
            BEAM_ALPHA,
        )
    )
    items.append(
        Polygon(
            beam_envelope(s_out, result.output_waist, result.output_rayleigh_range, 0.0, half_span, layout),
            COLOR_BEAM_OUT,
            BEAM_ALPHA,
        )
    )

    # Object and image distances below the axis
    items.extend(dimension_line(layout.to_x(s), axis_y + 40, lens_x, axis_y + 40, f"s = {-s * 1e3:.1f} mm"))
    items.extend(dimension_line(lens_x, axis_y + 60, layout.to_x(s_out), axis_y + 60, f"s' = {s_out * 1e3:.1f} mm"))

    # Focal length on both sides, above the axis
    f_y = axis_y - 50
    items.extend(dimension_line(layout.to_x(-f), f_y, lens_x, f_y, f"f = {f * 1e3:.1f} mm"))
    items.extend(dimension_line(lens_x, f_y - 20, layout.to_x(f), f_y - 20, f"f = {f * 1e3:.1f} mm"))

    items.extend(_waist_marker(s, beam.waist, f"w₀ = {beam.waist * 1e3:.3f} mm", COLOR_WAIST_IN, layout))
    items.extend(
        _waist_marker(
            s_out, result.output_waist, f"w₀' = {result.output_waist * 1e3:.3f} mm", COLOR_WAIST_OUT, layout
        )
    )

    # Rayleigh ranges and divergences go in the empty top margin of each half
    text_y = 30.0
    left_x = lens_x / 2.0
    right_x = lens_x + lens_x / 2.0
    items.append(Label(left_x, text_y, f"zʀ = {result.rayleigh_range * 1e3:.2f} mm"))
    items.append(Label(left_x, text_y + 18, f"θ = {result.divergence * 1e3:.3f} mrad"))
    items.append(Label(right_x, text_y, f"zʀ' = {result.output_rayleigh_range * 1e3:.2f} mm"))
    items.append(Label(right_x, text_y + 18, f"θ' = {result.output_divergence * 1e3:.3f} mrad"))

    return Scene(width=width, height=height, items=items, layout=layout)
