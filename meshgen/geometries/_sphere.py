import numpy as np

from ._base import Primitive
from .utils import broadcast_color, radial_normals
from ..utils import logger
from ..utils.enums import Topology


def sphere_geometry(
    x=0,
    y=0,
    z=0,
    radius=1,
    precision=8,
    *,
    color=(1, 1, 1),
    strip=True,
    random_color=False,
):
    """Generate a sphere.

    Creates a sphere around the given center by sampling great circles
    (meridians) through the poles on the z-axis. The meridians are rotated in
    steps of ``pi / precision`` around the z-axis, from 0 to pi inclusive, so
    that there are ``precision + 1`` of them. Each meridian (a ring) has
    ``2 * precision`` vertices, also at steps of ``pi / precision``.
    Neighbouring rings are connected by quads, made of two triangles each.

    With ``precision=2`` the result is a regular octahedron.

    Parameters
    ----------
    x : float
        The x-coordinate of the center.
    y : float
        The y-coordinate of the center.
    z : float
        The z-coordinate of the center.
    radius : float
        The radius of the sphere.
    precision : int
        The number of steps over half a ring, and the number of rings to
        connect. Must be an even number of at least 2. Higher values give a
        smoother sphere, at the cost of ``(precision + 1) * 2 * precision``
        vertices.
    color : ArrayLike
        The color for all vertices, usually rgb or rgba. Default white.
    strip : bool
        Whether to produce indices for one continuous triangle strip (default)
        or for a triangle list.
    random_color : bool
        If True, each vertex gets a random rgb color and ``color`` is ignored.
        Default False.

    Returns
    -------
    sphere : Primitive
        A primitive that represents the requested sphere.

    """

    if precision < 2 or precision % 2:
        logger.warning(
            f"Sphere precision should be an even number >= 2, got {precision}"
        )

    center = np.array([x, y, z], dtype=np.float32)
    positions = generate_sphere_positions(precision) * radius + center
    positions = positions.reshape((-1, 3))

    vertex_count = len(positions)
    if random_color:
        colors = np.random.random((vertex_count, 3))
    else:
        colors = broadcast_color(color, vertex_count)

    if strip:
        indices, topology = generate_strip_indices(precision), Topology.triangle_strip
    else:
        indices, topology = generate_list_indices(precision), Topology.triangle_list

    logger.debug(
        f"Generated sphere with {vertex_count} vertices"
        f" and {len(indices)} {topology} indices"
    )

    return Primitive(
        positions=positions,
        colors=colors,
        texcoords=generate_sphere_texcoords(precision),
        normals=radial_normals(positions, center),
        indices=indices,
        topology=topology,
    )


# Note that the functions below are separate so they can be tested in isolation.


def generate_sphere_positions(precision):
    """Get the positions on the unit sphere, with shape (precision + 1, 2 * precision, 3)."""
    step = np.pi / precision
    phi = np.arange(precision + 1) * step
    psi = np.arange(2 * precision) * step

    # grid has shape (rings, samples per ring)
    phi_grid, psi_grid = np.meshgrid(phi, psi, indexing="ij")

    # the first sample of each ring (psi = 0) lies in the xy-plane
    psi_grid_cos = np.cos(psi_grid)
    xx = np.cos(phi_grid) * psi_grid_cos
    yy = np.sin(phi_grid) * psi_grid_cos
    zz = np.sin(psi_grid)

    return np.stack([xx, yy, zz], axis=-1)


def generate_sphere_texcoords(precision):
    """Get the texture coordinates, 2 values for each vertex.

    Each ring is unwrapped into three bands: one going down from v=0.5 to
    v=0 on the left half of the texture, one going up from v=0 to v=1 on
    the right half, and one going down from v=1 back towards v=0.5 on the
    left half. Ring i is placed at an offset of ``i / (2 * precision)`` in u.
    """
    n = 1 / (precision * 2)
    n2 = n * 2
    half = precision // 2

    v_down = 0.5 - np.arange(half + 1) * n2
    v_up = (np.arange(precision) + 1) * n2
    v_back = 1 - (np.arange(half - 1) + 1) * n2
    vv = np.concatenate([v_down, v_up, v_back])

    u_shift = np.concatenate(
        [np.zeros(half + 1), np.full(precision, 0.5), np.zeros(half - 1)]
    )
    uu = n * np.arange(precision + 1).reshape(-1, 1) + u_shift

    texcoords = np.stack([uu, np.broadcast_to(vv, uu.shape)], axis=-1)
    return texcoords.reshape((-1, 2)).astype(np.float32)


def generate_strip_indices(precision):
    """Get the indices to draw the sphere as a single triangle strip.

    Each ring is zig-zagged together with the next ring. The direction
    alternates per quadrant so that the winding stays consistent on both
    sides of the poles. Repeated indices between rings create degenerate
    triangles to continue the strip.
    """
    n = 2 * precision
    q = n // 4

    # The zig-zag for the first pair of rings
    j = np.arange(0, q, dtype=np.uint32)
    up = np.column_stack([j + n, j])
    j = np.arange(q, 3 * q + 1, dtype=np.uint32)
    down = np.column_stack([j, j + n])
    j = np.arange(3 * q, n, dtype=np.uint32)
    back = np.column_stack([j + n, j])
    close = np.array([[n, 0]], dtype=np.uint32)
    ring = np.concatenate([up, down, back, close]).reshape(-1)

    # Repeat for each ring, prefixed with a degenerate pair
    offsets = np.arange(precision, dtype=np.uint32).reshape(-1, 1) * n
    rings = np.column_stack([offsets, offsets, ring + offsets]).reshape(-1)

    last = n * (precision - 1)
    return np.concatenate([[n], rings[2:], [last, last]]).astype(np.uint32)


def generate_list_indices(precision):
    """Get the indices to draw the sphere as a list of triangles.

    Each quad between two rings is split in two triangles. For the part of
    the ring that runs from one pole down to the other, the quads are split
    along the other diagonal, and the winding is reversed accordingly.
    """
    n = 2 * precision
    q = n // 4

    def ascending(j):
        return np.column_stack([j, j + n, j + 1, j + 1, j + n, j + n + 1])

    def descending(j):
        return np.column_stack([j + 1, j + n + 1, j, j, j + n + 1, j + n])

    ring = np.concatenate(
        [
            ascending(np.arange(0, q, dtype=np.uint32)),
            descending(np.arange(q, 3 * q, dtype=np.uint32)),
            ascending(np.arange(3 * q, n - 1, dtype=np.uint32)),
            # wrap around to the start of the ring
            np.array([[n - 1, 2 * n - 1, 0, 0, 2 * n - 1, n]], dtype=np.uint32),
        ]
    ).reshape(-1)

    offsets = np.arange(precision, dtype=np.uint32).reshape(-1, 1) * n
    return (ring + offsets).reshape(-1)
