from __future__ import annotations

import numpy as np
from PIL import Image

from rainrtx.camera import Camera
from rainrtx.intersection import trace
from rainrtx.scene import Scene
from rainrtx.typings.hit import RayHit
from rainrtx.typings.ray import Ray
from rainrtx.utils.vector_operations import clamp_color01, color_to_uint8, vector_dot, vector_length

# Materials with a specular exponent at or below this value have no highlight.
SPECULAR_DISABLED: float = -1.0


def save_image(image_array: np.ndarray, output_path: str) -> None:
    image = Image.fromarray(color_to_uint8(image_array))
    image.save(output_path)


def _light_intensity(
    light_vector: np.ndarray,
    light_intensity: float,
    normal: np.ndarray,
    normal_length: float,
    view_direction: np.ndarray,
    view_length: float,
    specular: float,
) -> float:
    """Diffuse + specular intensity received from one light along light_vector."""
    received = 0.0

    # Diffuse: I * cos(angle between N and L), neither vector assumed unit length
    n_dot_l = vector_dot(light_vector, normal)
    if n_dot_l > 0.0:
        received += light_intensity * n_dot_l / (normal_length * vector_length(light_vector))

    # Specular (Phong-style): I * cos(angle between R and V) ^ specular
    if specular > SPECULAR_DISABLED:
        reflection = 2.0 * normal * vector_dot(normal, light_vector)
        r_dot_v = vector_dot(view_direction, reflection)
        if r_dot_v > 0.0:
            received += light_intensity * (r_dot_v / (vector_length(reflection) * view_length)) ** specular

    return received


def compute_lighting(
    base_color: np.ndarray,
    point: np.ndarray,
    normal: np.ndarray,
    view_direction: np.ndarray,
    specular: float,
    scene: Scene,
) -> np.ndarray:
    """Scale base_color by the total light reaching point. No clamping."""
    normal = np.asarray(normal, dtype=float)
    normal_length = vector_length(normal)
    view_length = vector_length(view_direction)

    intensity = 0.0
    for ambient in scene.ambient_lights:
        intensity += ambient.intensity

    for light in scene.point_lights:
        intensity += _light_intensity(
            light.position - point, light.intensity, normal, normal_length, view_direction, view_length, specular
        )

    for light in scene.directional_lights:
        intensity += _light_intensity(
            light.direction, light.intensity, normal, normal_length, view_direction, view_length, specular
        )

    return np.asarray(base_color, dtype=float) * intensity


def shade(ray: Ray, hit: RayHit, scene: Scene) -> np.ndarray:
    """Final color for a traced ray: lit surface, skybox sample or background."""
    if hit.is_hit:
        return compute_lighting(hit.color, hit.position, hit.normal, ray.direction, hit.specular, scene)
    if scene.skybox is not None:
        return scene.skybox.sample(ray.direction)
    return scene.background_color.copy()


def render(camera: Camera, scene: Scene, width: int, height: int) -> np.ndarray:
    """Trace and shade one primary ray per pixel. Returns an (H, W, 3) image in [0, 1]."""
    image = np.zeros((height, width, 3), dtype=float)
    for i in range(height):
        for j in range(width):
            ray = camera.generate_ray(i, j, width, height)
            image[i, j, :] = shade(ray, trace(ray, scene), scene)
    return clamp_color01(image)
