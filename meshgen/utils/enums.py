"""
The enums used in meshgen. The enums are all available from the root ``meshgen`` namespace.

.. currentmodule:: meshgen.utils.enums

.. autosummary::
    :toctree: utils/enums
    :template: ../_templates/custom_layout.rst

    Topology

"""

from wgpu.utils import BaseEnum


__all__ = ["Topology"]


class Enum(BaseEnum):
    """Enum base class for meshgen."""


class Topology(Enum):
    """The Topology enum specifies how the indices of a primitive form triangles.

    The values match wgpu's ``PrimitiveTopology``, so they can be used directly
    in a render pipeline descriptor.
    """

    triangle_list = "triangle-list"  #: Each group of 3 indices is a triangle.
    triangle_strip = "triangle-strip"  #: Each index forms a triangle with the 2 indices before it. Repeated indices produce degenerate triangles that join separate strips.


# NOTE: Don't forget to add new enums to the toctree and __all__
