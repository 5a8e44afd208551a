from __future__ import annotations

import numpy as np

EPSILON: float = 1e-5 # threshold below which a vector is treated as zero-length


def as_vector(v) -> np.ndarray:
    return np.asarray(v, dtype=float)


def vector_length(v: np.ndarray) -> float: #Euclidean length (magnitude) of a vector
    return float(np.linalg.norm(as_vector(v)))


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(as_vector(a), as_vector(b)))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = as_vector(v)
    magnitude = np.linalg.norm(vector_array)
    if magnitude < EPSILON:
        raise ValueError("Cannot normalize near-zero vector")
    return vector_array / magnitude


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray: #cross product of two vectors (3D)
    return np.cross(as_vector(a), as_vector(b))


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    return np.clip(as_vector(color_rgb), 0.0, 1.0)


def color_to_uint8(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB color array (clamped to [0, 1]) to 8-bit integer [0, 255]."""
    clamped_color = clamp_color01(color_rgb)
    return (clamped_color * 255.0 + 0.5).astype(np.uint8) # 0.5 before conversion ensures correct rounding
