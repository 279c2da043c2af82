import numpy as np
import pylinalg as la

from ..utils import convert


def broadcast_color(color, count):
    """Repeat a single color (of any length) for count vertices."""
    return np.tile(convert(color), count)


def radial_normals(positions, center):
    """Get the normalized direction from center to each vertex, flattened."""
    directions = positions.reshape((-1, 3)) - np.asarray(center, dtype=np.float32)
    return convert(la.vec_normalize(directions))


def rebase_indices(indices, offset):
    """Get a copy of the indices that refers to vertices offset places further."""
    return indices + np.uint32(offset)
