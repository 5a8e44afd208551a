from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class IntersectionType(str, Enum):
    NONE = "none"
    GROUND = "ground"
    SPHERE = "sphere"


@dataclass(frozen=True, slots=True)
class RayHit:
    """Nearest surface found along a ray.

    color, normal and position are only meaningful when intersection is not
    IntersectionType.NONE; shading must branch on intersection first.
    """

    intersection: IntersectionType
    color: np.ndarray | None = None
    specular: float = -1.0
    normal: np.ndarray | None = None
    position: np.ndarray | None = None

    @classmethod
    def miss(cls) -> RayHit:
        return cls(intersection=IntersectionType.NONE)

    @property
    def is_hit(self) -> bool:
        return self.intersection is not IntersectionType.NONE
