from __future__ import annotations

import numpy as np

from rainrtx.typings.ray import Ray

GROUND_NORMAL: np.ndarray = np.array([0.0, 1.0, 0.0])
GROUND_NORMAL.setflags(write=False)


class Ground:
    """The infinite y = 0 plane, lit from above."""

    def __init__(self, color: np.ndarray, specular: float = -1.0) -> None:
        self.color: np.ndarray = np.asarray(color, dtype=float)
        self.specular: float = float(specular)

    def intersect(self, ray: Ray) -> float:
        # rays parallel to the plane give inf or nan, which callers' range checks reject
        origin_y = np.float64(ray.origin[1])
        direction_y = np.float64(ray.direction[1])
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(-origin_y / direction_y)
