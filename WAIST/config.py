"""Application configuration with a read-only JSON override file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Config:
    # Initial inputs (display units)
    WAVELENGTH_NM: float = 632.8
    FOCAL_LENGTH_MM: float = 100.0
    OBJECT_DISTANCE_MM: float = 150.0
    WAIST_MM: float = 0.5

    # Drawing surface
    CANVAS_WIDTH_PX: int = 800
    CANVAS_HEIGHT_PX: int = 400

    # Scene layout
    SPAN_FACTOR: float = 2.2
    HEIGHT_FACTOR: float = 2.5
    LENS_SCALE: float = 1.5
    LENS_CAP_DIVISOR: float = 2.2

    # Profile plot / export
    PROFILE_SAMPLES: int = 400
    EXPORT_DPI: int = 100

    LOG_LEVEL: str = "INFO"

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".waist_config.json"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        cfg = cls()
        cfg_path = path or cls.default_path()
        if not cfg_path.exists():
            return cfg

        try:
            data = json.loads(cfg_path.read_text())
        except Exception:
            logger.exception("Failed to read config file: %s", cfg_path)
            return cfg

        for f in fields(cfg):
            if f.name not in data:
                continue
            raw = data[f.name]
            try:
                if f.type == "int":
                    val = int(raw)
                elif f.type == "float":
                    val = float(raw)
                else:
                    val = str(raw)
                setattr(cfg, f.name, val)
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid config value for %s", f.name)

        cfg.normalize()
        return cfg

    def normalize(self) -> None:
        self.CANVAS_WIDTH_PX = max(200, self.CANVAS_WIDTH_PX)
        self.CANVAS_HEIGHT_PX = max(100, self.CANVAS_HEIGHT_PX)
        # Span must stay wider than the features it frames
        self.SPAN_FACTOR = max(1.0, self.SPAN_FACTOR)
        self.HEIGHT_FACTOR = max(2.0, self.HEIGHT_FACTOR)
        self.LENS_SCALE = max(0.1, self.LENS_SCALE)
        self.LENS_CAP_DIVISOR = max(2.0, self.LENS_CAP_DIVISOR)
        self.PROFILE_SAMPLES = max(2, self.PROFILE_SAMPLES)
        self.EXPORT_DPI = max(10, self.EXPORT_DPI)
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
