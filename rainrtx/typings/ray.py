from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Ray:
    origin: np.ndarray
    direction: np.ndarray # not required to be unit length

    def at(self, t: float) -> np.ndarray:
        return np.asarray(self.origin, dtype=float) + np.asarray(self.direction, dtype=float) * t
