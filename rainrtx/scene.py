from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol

import numpy as np

from rainrtx.surfaces.ground import Ground
from rainrtx.surfaces.sphere import Sphere
from rainrtx.typings.light import AmbientLight, DirectionalLight, PointLight


class Skybox(Protocol):
    def sample(self, direction: np.ndarray) -> np.ndarray:
        ...


@dataclass(slots=True)
class Scene:
    """Everything a ray is traced and shaded against.

    Populated once by the caller and only read while rendering, so a single
    Scene can be shared between workers tracing different rays.
    """

    spheres: List[Sphere] | None = None
    ground: Ground | None = None
    ambient_lights: List[AmbientLight] = field(default_factory=list)
    point_lights: List[PointLight] = field(default_factory=list)
    directional_lights: List[DirectionalLight] = field(default_factory=list)
    skybox: Skybox | None = None
    background_color: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=float))

    def __post_init__(self) -> None:
        self.background_color = np.asarray(self.background_color, dtype=float)
