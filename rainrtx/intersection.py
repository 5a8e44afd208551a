from __future__ import annotations

import math
from typing import Iterator, List, Tuple

import numpy as np

from rainrtx.scene import Scene
from rainrtx.surfaces.ground import GROUND_NORMAL
from rainrtx.surfaces.sphere import Sphere
from rainrtx.typings.hit import IntersectionType, RayHit
from rainrtx.typings.ray import Ray

# Sphere hits at t <= NEAR_T are ignored. With camera rays that reach the
# screen at t = 1 this clips everything between the eye and the screen.
NEAR_T: float = 1.0


def _sphere_candidates(ray: Ray, spheres: List[Sphere] | None) -> Iterator[Tuple[float, Sphere]]:
    for sphere in spheres or ():
        roots = sphere.intersect(ray)
        if roots is None:
            continue
        for t in roots:
            if NEAR_T < t < math.inf:
                yield t, sphere


def find_closest_sphere(ray: Ray, spheres: List[Sphere] | None) -> Tuple[float, Sphere | None]:
    """Smallest valid sphere root along the ray, or (inf, None).

    Strict comparison keeps the first candidate found on exact ties.
    """
    closest_t, closest_sphere = math.inf, None
    for t, sphere in _sphere_candidates(ray, spheres):
        if t < closest_t:
            closest_t, closest_sphere = t, sphere
    return closest_t, closest_sphere


def trace(ray: Ray, scene: Scene) -> RayHit:
    """Nearest hit of the ray against the scene's spheres and ground plane."""
    closest_t, closest_sphere = find_closest_sphere(ray, scene.spheres)
    intersection = IntersectionType.SPHERE if closest_sphere is not None else IntersectionType.NONE

    # ground is tested last and only replaces a strictly farther sphere hit
    if scene.ground is not None:
        ground_t = scene.ground.intersect(ray)
        if 0.0 < ground_t < closest_t:
            closest_t = ground_t
            intersection = IntersectionType.GROUND

    if intersection is IntersectionType.SPHERE:
        hit_point = ray.at(closest_t)
        surface_normal = hit_point - closest_sphere.center
        with np.errstate(divide="ignore", invalid="ignore"):
            surface_normal = surface_normal / np.linalg.norm(surface_normal)
        return RayHit(
            intersection=IntersectionType.SPHERE,
            color=closest_sphere.color.copy(),
            specular=closest_sphere.specular,
            normal=surface_normal,
            position=hit_point,
        )

    if intersection is IntersectionType.GROUND:
        return RayHit(
            intersection=IntersectionType.GROUND,
            color=scene.ground.color.copy(),
            specular=scene.ground.specular,
            normal=GROUND_NORMAL.copy(),
            position=ray.at(closest_t),
        )

    return RayHit.miss()
