from __future__ import annotations

from typing import Tuple

import numpy as np

from rainrtx.typings.ray import Ray


class Sphere:
    def __init__(self, center: np.ndarray, radius: float, color: np.ndarray, specular: float = -1.0) -> None:
        self.center: np.ndarray = np.asarray(center, dtype=float)
        self.radius: float = float(radius)
        self.color: np.ndarray = np.asarray(color, dtype=float)
        self.specular: float = float(specular)

    def intersect(self, ray: Ray) -> Tuple[float, float] | None:
        """Both roots of |origin + t * direction - center|^2 = radius^2, unordered.

        Returns None when the ray misses the sphere. The direction may have any
        length; a zero direction gives nan/inf roots.
        """
        ray_direction = np.asarray(ray.direction, dtype=float)
        origin_to_center = np.asarray(ray.origin, dtype=float) - self.center

        k1 = np.dot(ray_direction, ray_direction)
        k2 = 2.0 * np.dot(origin_to_center, ray_direction)
        k3 = np.dot(origin_to_center, origin_to_center) - self.radius * self.radius

        discriminant = k2 * k2 - 4.0 * k1 * k3
        if discriminant < 0.0:
            return None

        sqrt_discriminant = np.sqrt(discriminant)
        with np.errstate(divide="ignore", invalid="ignore"):
            t1 = (-k2 + sqrt_discriminant) / (2.0 * k1)
            t2 = (-k2 - sqrt_discriminant) / (2.0 * k1)
        return float(t1), float(t2)
