import numpy as np
import pylinalg as la

from ._base import Primitive
from .utils import broadcast_color
from ..utils import convert, logger
from ..utils.enums import Topology


# Corners in the local frame, scaled by the half-extents. The index buffers
# below depend on this order.
LOCAL_CORNERS = np.array(
    [
        [-1, -1, 0],  # bottom left
        [1, -1, 0],  # bottom right
        [-1, 1, 0],  # top left
        [1, 1, 0],  # top right
    ],
    dtype=np.float32,
)

CORNER_COLORS = np.array(
    [[1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 1, 1]],
    dtype=np.float32,
)

TEXCOORDS = np.array([[0, 1], [1, 1], [0, 0], [1, 0]], dtype=np.float32)

# The repeated first and last index make it possible to chain strips
STRIP_INDICES = np.array([0, 0, 1, 2, 3, 3], dtype=np.uint32)
LIST_INDICES = np.array([0, 1, 2, 1, 3, 2], dtype=np.uint32)


def face_geometry(a=1, b=1, x=0, y=0, z=0, *, color=None, strip=True, orientation=None):
    """Generate a face (a flat quad).

    Creates a rectangle with the given half-extents, rotated around and placed
    at the given center. Without rotation the face lies in the xy-plane.

    Parameters
    ----------
    a : float
        Half the size along the local x-axis.
    b : float
        Half the size along the local y-axis.
    x : float
        The x-coordinate of the center.
    y : float
        The y-coordinate of the center.
    z : float
        The z-coordinate of the center.
    color : ArrayLike | None
        The color for all 4 vertices, usually rgb or rgba. If None (default),
        the corners are red, green, blue and white.
    strip : bool
        Whether to produce indices for a triangle strip (default) or for a
        triangle list. The strip starts and ends with a repeated index, so
        that strips of multiple faces can be concatenated.
    orientation : ArrayLike | None
        A 3x3 rotation matrix that is applied around the center. A 4x4 matrix
        is also accepted, in which case only its rotational part is used.
        Default None (no rotation).

    Returns
    -------
    face : Primitive
        A primitive with 4 vertices.

    """

    affine = np.identity(4, dtype=float)
    if orientation is not None:
        affine[:-1, :-1] = np.asarray(orientation, dtype=float)[:3, :3]
    affine[:-1, -1] = x, y, z

    positions = la.vec_transform(LOCAL_CORNERS * np.array([a, b, 1], float), affine)
    positions = convert(positions)

    # All corners share the direction from the center to the first corner
    normal = convert(la.vec_normalize(positions[:3] - np.array([x, y, z], np.float32)))
    normals = np.tile(normal, 4)

    if color is None:
        colors = CORNER_COLORS
    else:
        colors = broadcast_color(color, 4)

    if strip:
        indices, topology = STRIP_INDICES, Topology.triangle_strip
    else:
        indices, topology = LIST_INDICES, Topology.triangle_list

    logger.debug(f"Generated face at ({x}, {y}, {z}) with {topology} indices")

    return Primitive(
        positions=positions,
        colors=colors,
        texcoords=TEXCOORDS,
        normals=normals,
        indices=indices,
        topology=topology,
    )
