"""Gaussian beam transformation by a thin lens."""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from WAIST.src.core.types import BeamInput, BeamResult, Readouts

logger = logging.getLogger(__name__)


def calculate(beam: BeamInput) -> Optional[BeamResult]:
    """
    Closed-form waist transformation through a thin lens.
    Returns None when the input cannot describe a physical beam.
    """
    if not beam.is_valid():
        logger.debug("Invalid beam input, skipping: %s", beam)
        return None

    lam = beam.wavelength
    f = beam.focal_length
    s = beam.object_distance
    w0 = beam.waist

    try:
        zr = math.pi * w0**2 / lam
        # s is signed, so (|s| - f)^2 from the magnitude form becomes (s + f)^2
        w0_out = w0 * f / math.sqrt((s + f) ** 2 + zr**2)
        alpha = w0_out / w0
        s_out = f + alpha**2 * (-s - f)
        theta = lam / (math.pi * w0)
        theta_out = theta / alpha
        zr_out = alpha**2 * zr
    except (OverflowError, ZeroDivisionError):
        logger.debug("Beam input out of numeric range, skipping: %s", beam)
        return None

    result = BeamResult(
        rayleigh_range=zr,
        output_waist=w0_out,
        magnification=alpha,
        output_waist_position=s_out,
        divergence=theta,
        output_divergence=theta_out,
        output_rayleigh_range=zr_out,
    )
    if not all(math.isfinite(v) for v in result):
        logger.debug("Non-finite beam result, skipping: %s", result)
        return None
    if zr <= 0.0 or zr_out <= 0.0:
        # w0 squared underflowed; the beam radius law is undefined
        logger.debug("Rayleigh range underflow, skipping: %s", result)
        return None
    return result


def beam_radius(z, waist: float, waist_position: float, rayleigh_range: float):
    """w(z) for a beam with the given waist; accepts scalars or arrays."""
    return waist * np.hypot(1.0, (z - waist_position) / rayleigh_range)


def format_readouts(result: BeamResult) -> Readouts:
    return Readouts(
        output_waist_position=f"{result.output_waist_position * 1e3:.2f}",
        output_waist=f"{result.output_waist * 1e3:.3f}",
        rayleigh_range=f"{result.rayleigh_range * 1e3:.2f}",
        output_rayleigh_range=f"{result.output_rayleigh_range * 1e3:.2f}",
        divergence=f"{result.divergence * 1e3:.3f}",
        output_divergence=f"{result.output_divergence * 1e3:.3f}",
    )


def beam_profile(beam: BeamInput, result: BeamResult, span: float, samples: int = 400):
    """
    Sample the beam radius along the axis, lens at z = 0.
    Returns (z_in, w_in, z_out, w_out) in mm.
    """
    z_in = np.linspace(-span / 2.0, 0.0, samples)
    z_out = np.linspace(0.0, span / 2.0, samples)
    w_in = beam_radius(z_in, beam.waist, beam.object_distance, result.rayleigh_range)
    w_out = beam_radius(z_out, result.output_waist, result.output_waist_position, result.output_rayleigh_range)
    return z_in * 1e3, w_in * 1e3, z_out * 1e3, w_out * 1e3
