import numpy as np


class AmbientLight:
    def __init__(self, intensity: float) -> None:
        self.intensity: float = float(intensity)


class PointLight:
    def __init__(self, position: np.ndarray, intensity: float) -> None:
        self.position: np.ndarray = np.asarray(position, dtype=float)
        self.intensity: float = float(intensity)


class DirectionalLight:
    def __init__(self, direction: np.ndarray, intensity: float) -> None:
        # points from the surface toward the light
        self.direction: np.ndarray = np.asarray(direction, dtype=float)
        self.intensity: float = float(intensity)
