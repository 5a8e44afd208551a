from __future__ import annotations

import os
from typing import Dict, List, Tuple

import numpy as np

from rainrtx.camera import Camera
from rainrtx.scene import Scene
from rainrtx.skybox import EquirectangularSkybox, GradientSkybox
from rainrtx.surfaces.ground import Ground
from rainrtx.surfaces.sphere import Sphere
from rainrtx.typings.light import AmbientLight, DirectionalLight, PointLight

# number of numeric fields expected after each tag
FIELD_COUNTS: Dict[str, int] = {
    "cam": 11,
    "set": 3,
    "sph": 8,
    "gnd": 4,
    "amb": 1,
    "pnt": 4,
    "dir": 4,
    "grd": 6,
}


def _parse_floats(obj_type: str, fields: List[str], line_number: int) -> List[float]:
    expected = FIELD_COUNTS[obj_type]
    if len(fields) != expected:
        raise ValueError(
            "Line {}: '{}' expects {} values, got {}".format(line_number, obj_type, expected, len(fields))
        )
    try:
        return [float(p) for p in fields]
    except ValueError as e:
        raise ValueError("Line {}: {}".format(line_number, e)) from e


def parse_scene_file(file_path: str) -> Tuple[Camera | None, Scene]:
    camera: Camera | None = None
    scene = Scene(spheres=[])
    scene_dir = os.path.dirname(os.path.abspath(file_path))
    with open(file_path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]
            if obj_type == "sky":
                if len(parts) != 2:
                    raise ValueError("Line {}: 'sky' expects a single image path".format(line_number))
                scene.skybox = EquirectangularSkybox.from_file(os.path.join(scene_dir, parts[1]))
                continue
            if obj_type not in FIELD_COUNTS:
                raise ValueError("Line {}: unknown object type: {}".format(line_number, obj_type))

            params = _parse_floats(obj_type, parts[1:], line_number)
            if obj_type == "cam":
                camera = Camera(
                    np.asarray(params[:3], dtype=float),
                    np.asarray(params[3:6], dtype=float),
                    np.asarray(params[6:9], dtype=float),
                    params[9],
                    params[10],
                )
            elif obj_type == "set":
                scene.background_color = np.asarray(params[:3], dtype=float)
            elif obj_type == "sph":
                if params[3] <= 0.0:
                    raise ValueError("Line {}: sphere radius must be positive, got {}".format(line_number, params[3]))
                scene.spheres.append(Sphere(params[:3], params[3], params[4:7], params[7]))
            elif obj_type == "gnd":
                scene.ground = Ground(params[:3], params[3])
            elif obj_type == "amb":
                scene.ambient_lights.append(AmbientLight(params[0]))
            elif obj_type == "pnt":
                scene.point_lights.append(PointLight(params[:3], params[3]))
            elif obj_type == "dir":
                scene.directional_lights.append(DirectionalLight(params[:3], params[3]))
            elif obj_type == "grd":
                scene.skybox = GradientSkybox(params[:3], params[3:6])
    return camera, scene
