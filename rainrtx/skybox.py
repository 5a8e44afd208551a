from __future__ import annotations

import math
import os

import numpy as np
from PIL import Image


def _unit(direction: np.ndarray) -> np.ndarray:
    # any non-zero length is accepted; a zero direction gives nan
    direction = np.asarray(direction, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return direction / np.linalg.norm(direction)


class GradientSkybox:
    """Vertical blend from horizon_color (looking down) to zenith_color (looking up)."""

    def __init__(self, zenith_color: np.ndarray, horizon_color: np.ndarray) -> None:
        self.zenith_color: np.ndarray = np.asarray(zenith_color, dtype=float)
        self.horizon_color: np.ndarray = np.asarray(horizon_color, dtype=float)

    def sample(self, direction: np.ndarray) -> np.ndarray:
        t = 0.5 * (_unit(direction)[1] + 1.0)
        return (1.0 - t) * self.horizon_color + t * self.zenith_color


def direction_to_uv(direction: np.ndarray) -> tuple[float, float]:
    """Equirectangular (u, v) in [0, 1] for a direction; v = 0 is straight up."""
    x, y, z = _unit(direction)
    phi = math.atan2(-z, x)
    if phi < 0.0:
        phi += 2.0 * math.pi
    theta = math.acos(max(-1.0, min(1.0, float(y))))
    return phi / (2.0 * math.pi), theta / math.pi


class EquirectangularSkybox:
    def __init__(self, pixels: np.ndarray) -> None:
        self.pixels: np.ndarray = np.asarray(pixels, dtype=float)
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"Skybox pixels must have shape (H, W, 3), got {self.pixels.shape}")
        self.height, self.width = self.pixels.shape[:2]

    @classmethod
    def from_file(cls, image_path: str) -> EquirectangularSkybox:
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Skybox image not found: {image_path}")
        with Image.open(image_path) as img:
            if img.mode != "RGB":
                img = img.convert("RGB")
            pixels = np.asarray(img, dtype=float) / 255.0
        return cls(pixels)

    def sample(self, direction: np.ndarray) -> np.ndarray:
        # nearest-neighbour lookup
        u, v = direction_to_uv(direction)
        ix = min(int(u * self.width), self.width - 1)
        iy = min(int(v * self.height), self.height - 1)
        return self.pixels[iy, ix].copy()
