import numpy as np

from ._base import Primitive
from .utils import broadcast_color
from ..utils import logger


# The 8 corners of a block, as signs of the half-extents
CORNER_SIGNS = np.array(
    [
        [-1, -1, 1],  # front, bottom left
        [1, -1, 1],  # front, bottom right
        [-1, 1, 1],  # front, top left
        [1, 1, 1],  # front, top right
        [1, -1, -1],  # right, bottom
        [1, 1, -1],  # right, top
        [-1, -1, -1],  # left, bottom
        [-1, 1, -1],  # left, top
    ],
    dtype=np.float32,
)

CORNER_COLORS = np.array(
    [
        [0, 0, 1],
        [1, 0, 1],
        [0, 1, 1],
        [1, 1, 1],
        [1, 0, 0],
        [1, 1, 0],
        [0, 0, 0],
        [0, 1, 0],
    ],
    dtype=np.float32,
)

CORNER_INDICES = np.array(
    [
        [0, 1, 2, 1, 3, 2],  # front
        [1, 4, 3, 4, 5, 3],  # right
        [6, 0, 7, 0, 2, 7],  # left
        [2, 3, 7, 3, 5, 7],  # top
        [6, 4, 0, 4, 1, 0],  # bottom
        [4, 6, 5, 6, 7, 5],  # back
    ],
    dtype=np.uint32,
)

# When vertices are not shared, each face gets a copy of 4 of the corners
FACE_CORNERS = np.array(
    [
        [6, 4, 0, 1],  # front
        [4, 5, 1, 3],  # right
        [6, 0, 7, 2],  # left
        [0, 1, 2, 3],  # top
        [6, 7, 4, 5],  # bottom
        [7, 2, 5, 3],  # back
    ],
    dtype=np.intp,
)

FACE_COLORS = np.array(
    [
        [0, 0, 1],  # front
        [0, 1, 1],  # right
        [1, 0, 1],  # left
        [1, 1, 0],  # top
        [0.2, 0.2, 0.2],  # bottom
        [1, 1, 1],  # back
    ],
    dtype=np.float32,
)

FACE_TEXCOORDS = np.array([[0, 0], [1, 0], [0, 1], [1, 1]], dtype=np.float32)

# Two triangles per face, relative to the face's first vertex
FACE_INDICES = np.array([0, 1, 2, 1, 3, 2], dtype=np.uint32)


def block_geometry(a=1, b=1, c=1, x=0, y=0, z=0, *, color=None, shared_vertices=True):
    """Generate a block (rectangular cuboid).

    Creates an axis-aligned block with the given half-extents around the
    given center. The block can be built from 8 corners that are shared by
    the faces, or from 4 separate vertices per face.

    Parameters
    ----------
    a : float
        Half the size along the x-axis.
    b : float
        Half the size along the y-axis.
    c : float
        Half the size along the z-axis.
    x : float
        The x-coordinate of the center.
    y : float
        The y-coordinate of the center.
    z : float
        The z-coordinate of the center.
    color : ArrayLike | None
        The color for all vertices, usually rgb or rgba. If None (default),
        each corner (shared) or face (not shared) gets its own color.
    shared_vertices : bool
        If True (default), the block has 8 vertices and no texcoords or
        normals, because these would be ambiguous at the corners. If False,
        it has 24 vertices, per-face texcoords, and an empty normals buffer
        (normals are not computed for blocks).

    Returns
    -------
    block : Primitive
        A primitive with a triangle-list topology.

    """

    corners = CORNER_SIGNS * np.array([a, b, c], np.float32)
    corners += np.array([x, y, z], np.float32)

    if shared_vertices:
        positions = corners
        indices = CORNER_INDICES
        default_colors = CORNER_COLORS
    else:
        positions = corners[FACE_CORNERS]
        indices = FACE_INDICES + 4 * np.arange(6, dtype=np.uint32).reshape(6, 1)
        default_colors = np.repeat(FACE_COLORS, 4, axis=0)

    vertex_count = len(default_colors)
    if color is None:
        colors = default_colors
    else:
        colors = broadcast_color(color, vertex_count)

    logger.debug(
        f"Generated block with {vertex_count} vertices (shared={shared_vertices})"
    )

    if shared_vertices:
        return Primitive(positions=positions, colors=colors, indices=indices)
    return Primitive(
        positions=positions,
        colors=colors,
        texcoords=np.tile(FACE_TEXCOORDS, (6, 1)),
        normals=[],
        indices=indices,
    )
