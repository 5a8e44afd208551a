import numpy as np

from rainrtx.typings.ray import Ray
from rainrtx.utils.vector_operations import vector_cross, normalize_vector


class Camera:
    """Pinhole eye looking through a flat screen of width screen_width.

    Rays are not normalized: each one runs from the eye to a pixel centre on
    the screen, which therefore lies at t = 1.
    """

    def __init__(
        self,
        position: np.ndarray,
        look_at: np.ndarray,
        up_vector: np.ndarray,
        screen_distance: float = 1.0,
        screen_width: float = 1.0,
    ) -> None:
        self.position = np.asarray(position, dtype=float)
        self.look_at = np.asarray(look_at, dtype=float)
        self.up_vector = np.asarray(up_vector, dtype=float)
        self.screen_distance = float(screen_distance)
        self.screen_width = float(screen_width)

        self.forward: np.ndarray = normalize_vector(self.look_at - self.position)
        self.right: np.ndarray = normalize_vector(vector_cross(self.forward, self.up_vector))
        self.true_up: np.ndarray = vector_cross(self.right, self.forward)

    def pixel_center(self, i: int, j: int, W: int, H: int) -> np.ndarray:
        """World position of pixel (row i, column j) on the screen."""
        screen_height = self.screen_width * H / W
        across = ((j + 0.5) / W - 0.5) * self.screen_width
        down = ((i + 0.5) / H - 0.5) * screen_height
        screen_center = self.position + self.forward * self.screen_distance
        return screen_center + self.right * across - self.true_up * down

    def generate_ray(self, i: int, j: int, W: int, H: int) -> Ray:
        return Ray(origin=self.position.copy(), direction=self.pixel_center(i, j, W, H) - self.position)
