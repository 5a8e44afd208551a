"""Shared fixtures for the ray tracer tests."""

import numpy as np
import pytest

from rainrtx.scene import Scene
from rainrtx.typings.ray import Ray


def make_ray(origin, direction):
    """Build a Ray from plain sequences."""
    return Ray(origin=np.asarray(origin, dtype=float), direction=np.asarray(direction, dtype=float))


class FixedSkybox:
    """Skybox stub returning one color and remembering what it was asked for."""

    def __init__(self, color):
        self.color = np.asarray(color, dtype=float)
        self.sampled = []

    def sample(self, direction):
        self.sampled.append(np.asarray(direction, dtype=float))
        return self.color.copy()


@pytest.fixture
def empty_scene():
    """A scene with no geometry, no lights and a grey background."""
    return Scene(background_color=(0.25, 0.5, 0.75))
