"""
Procedurally generated geometry.

.. currentmodule:: meshgen.geometries

Each geometry function returns a :class:`Primitive`: a set of flat buffers
with per-vertex data (positions, colors, texcoords, normals) plus an index
buffer that describes how the vertices form triangles.

The standardized buffer names are:

* ``positions``: 3 floats (xyz) per vertex.
* ``colors``: 3 (rgb) or 4 (rgba) floats per vertex.
* ``texcoords``: 2 floats (uv) per vertex. May be absent.
* ``normals``: 3 floats per vertex, unit length. May be absent.
* ``indices``: indices into the vertex list, forming a triangle list or a
  triangle strip (see ``Primitive.topology``).

Multiple primitives can be combined into one with a :class:`Scene`.

.. rubric:: Geometry
.. autosummary::
    :toctree: geometry/
    :template: ../_templates/custom_layout.rst

    block_geometry
    face_geometry
    sphere_geometry
    Primitive
    Scene

"""

# ruff: noqa: F401

from ._base import Primitive
from ._block import block_geometry
from ._face import face_geometry
from ._sphere import sphere_geometry
from ._scene import Scene

# Define __all__ for e.g. Sphinx
__all__ = [
    ob.__name__
    for ob in globals().values()
    if (isinstance(ob, type) and issubclass(ob, Primitive))
    or (callable(ob) and ob.__name__.endswith("_geometry"))
]
__all__.sort()
