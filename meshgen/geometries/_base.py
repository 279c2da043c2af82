from __future__ import annotations

from typing import TYPE_CHECKING, Iterable
import numpy as np
import pylinalg as la

from ..utils.bounds import points_to_aabb
from ..utils.enums import Topology

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

Optional = None

# The number of values per vertex for each vertex attribute
ATTRIBUTE_SIZES = {
    "positions": (3,),
    "colors": (3, 4),
    "texcoords": (2,),
    "normals": (3,),
}


class Primitive:
    """A primitive is a container for the flat buffers that describe one mesh.

    All buffers are one-dimensional numpy arrays, ready to be uploaded to a
    vertex or index buffer as is. Per-vertex attributes are stored as
    consecutive tuples, i.e. ``x0, y0, z0, x1, y1, z1, ...`` for positions.

    Buffer attributes:

    * ``positions``: 3 float32 values per vertex. The order of the vertices defines their index.
    * ``colors``: 3 (rgb) or 4 (rgba) float32 values per vertex.
    * ``texcoords``: 2 float32 values (u, v) per vertex. Optional.
    * ``normals``: 3 float32 values per vertex, unit length. Optional.
    * ``indices``: uint32 references into the vertex list, interpreted according to ``topology``.

    Optional attributes
    -------------------
    The ``texcoords`` and ``normals`` may be absent, meaning that they are
    not defined for this primitive (e.g. a block with shared vertices). This is
    different from an attribute that is present but empty. Use ``has()`` (or
    the ``in`` operator) to check; an absent attribute reads as None.

    Example
    -------

    .. code-block:: py

        p = Primitive(positions=[0, 0, 0, 1, 0, 0, 0, 1, 0], indices=[0, 1, 2])
        p.vertex_count  # 3
        p.has("normals")  # False

    """

    def __init__(
        self,
        *,
        positions: ArrayLike = Optional,
        colors: ArrayLike = Optional,
        texcoords: ArrayLike = Optional,
        normals: ArrayLike = Optional,
        indices: ArrayLike = Optional,
        topology: str | Topology = Topology.triangle_list,
    ):
        if topology not in Topology:
            raise ValueError(
                f"Primitive topology must be a string in {Topology}, not {topology!r}"
            )
        self._topology = topology
        self._attributes = {}

        given = {
            "positions": positions,
            "colors": colors,
            "texcoords": texcoords,
            "normals": normals,
        }
        for name, val in given.items():
            if val is Optional:
                continue
            # Copy, so buffers never share memory with the caller
            val = np.array(val, dtype=np.float32).reshape(-1)
            sizes = ATTRIBUTE_SIZES[name]
            if len(val) % sizes[0] and (len(sizes) == 1 or len(val) % sizes[1]):
                raise ValueError(f"Expected {sizes[0]} values per vertex for {name}")
            self._attributes[name] = val

        if indices is not Optional:
            indices = np.asarray(indices).reshape(-1)
            if indices.size and indices.min() < 0:
                raise ValueError("Indices must not be negative")
            self._attributes["indices"] = indices.astype(np.uint32)

    def __repr__(self) -> str:
        lines = [f"{self.__class__.__name__}("]
        for key in dir(self):
            val = self._attributes[key]
            lines.append(f"    {key}=<{val.dtype} array of {val.size} values>,")
        lines.append(f"    topology={self.topology!r},")
        lines.append(f") # at {hex(id(self))}")
        return "\n".join(lines)

    def __dir__(self) -> Iterable[str]:
        return sorted(self._attributes)

    def __contains__(self, name):
        return name in self._attributes

    def has(self, name):
        """Get whether the buffer attribute with the given name is present."""
        return name in self._attributes

    # %% Buffers

    @property
    def positions(self):
        """The vertex positions, 3 values per vertex."""
        return self._attributes.get("positions")

    @property
    def colors(self):
        """The vertex colors, 3 or 4 values per vertex."""
        return self._attributes.get("colors")

    @property
    def texcoords(self):
        """The texture coordinates, 2 values per vertex, or None if absent."""
        return self._attributes.get("texcoords")

    @property
    def normals(self):
        """The vertex normals, 3 values per vertex, or None if absent."""
        return self._attributes.get("normals")

    @property
    def indices(self):
        """The index buffer. How it forms triangles depends on the ``topology``."""
        return self._attributes.get("indices")

    # Aliases
    vertices = positions
    texture_coords = texcoords

    @property
    def topology(self):
        """How the indices form triangles. See :obj:`meshgen.utils.enums.Topology`."""
        return self._topology

    # %% Derived info

    @property
    def vertex_count(self):
        """The number of vertices in this primitive."""
        positions = self.positions
        return 0 if positions is None else len(positions) // 3

    @property
    def color_size(self):
        """The number of values per color (usually 3 or 4), or 0 if unknown."""
        n = self.vertex_count
        colors = self.colors
        if not n or colors is None:
            return 0
        return len(colors) // n

    def check(self):
        """Check that the buffers of this primitive are consistent.

        Raises ValueError if a non-empty attribute does not have one value-tuple
        per vertex, or if an index does not refer to an existing vertex.
        """
        n = self.vertex_count
        for name, sizes in ATTRIBUTE_SIZES.items():
            val = self._attributes.get(name)
            if val is None or not len(val):
                continue
            if len(val) not in [n * size for size in sizes]:
                raise ValueError(
                    f"{name} has {len(val)} values, which does not match {n} vertices"
                )
        indices = self.indices
        if indices is not None and indices.size and indices.max() >= n:
            raise ValueError(f"Index {indices.max()} out of range for {n} vertices")

    def triangles(self):
        """Get the triangles that the index buffer describes, as an Nx3 array.

        For a triangle list this is simply the reshaped index buffer. A
        triangle strip is expanded with alternating winding (so all triangles
        face the same way), dropping the degenerate triangles that are used
        to join strips.
        """
        indices = self.indices
        if indices is None or len(indices) < 3:
            return np.zeros((0, 3), np.uint32)
        if self.topology == Topology.triangle_list:
            if len(indices) % 3:
                raise ValueError("Triangle list length must be a multiple of 3")
            return indices.reshape((-1, 3))
        elif self.topology != Topology.triangle_strip:
            raise ValueError(f"Cannot get triangles for topology {self.topology!r}")

        tri = np.column_stack([indices[:-2], indices[1:-1], indices[2:]])
        # every other triangle in a strip is reversed
        tri[1::2] = tri[1::2][:, [1, 0, 2]]
        degenerate = (
            (tri[:, 0] == tri[:, 1])
            | (tri[:, 1] == tri[:, 2])
            | (tri[:, 0] == tri[:, 2])
        )
        return tri[~degenerate]

    def get_bounding_box(self) -> np.ndarray | None:
        """Axis-aligned bounding box.

        Returns
        -------
        aabb : ndarray, [2, 3] or None
            An axis-aligned bounding box, or None when the primitive has no
            (finite) positions.
        """
        positions = self.positions
        if positions is None:
            return None
        return points_to_aabb(positions.reshape((-1, 3)))

    def get_bounding_sphere(self) -> np.ndarray | None:
        """Bounding sphere.

        Returns
        -------
        bounding_sphere : ndarray, [4] or None
            A sphere (x, y, z, radius), or None when the primitive has no
            (finite) positions.
        """
        aabb = self.get_bounding_box()
        return None if aabb is None else la.aabb_to_sphere(aabb)
