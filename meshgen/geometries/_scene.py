import numpy as np

from ._base import Primitive
from .utils import rebase_indices
from ..utils import logger


class Scene(Primitive):
    """A primitive that combines other primitives, to draw them in one go.

    A scene starts out with empty (but present) buffers. Each call to
    ``add()`` appends the buffers of a primitive, rebasing its indices so
    they refer to the right vertices in the combined buffers. Since a scene
    is a primitive itself, it can be added to another scene.

    Primitives that lack ``texcoords`` or ``normals`` contribute nothing to
    the respective buffer of the scene. To keep these buffers aligned with
    the positions, only add primitives that all have the same optional
    attributes.

    Example
    -------

    .. code-block:: py

        scene = Scene()
        scene.add(face_geometry(1, 1)).add(sphere_geometry(radius=2))

    """

    def __init__(self):
        super().__init__(
            positions=[], colors=[], texcoords=[], normals=[], indices=[]
        )
        self._topologies = set()

    @property
    def topology(self):
        """The topology shared by all added primitives.

        None when the scene is empty, or when primitives with different
        topologies were added.
        """
        if len(self._topologies) == 1:
            return next(iter(self._topologies))
        return None

    def add(self, primitive):
        """Append the buffers of the given primitive to this scene.

        The primitive itself is not modified. Returns the scene, so calls
        can be chained.
        """
        if not isinstance(primitive, Primitive):
            raise TypeError(
                f"Scene.add() expects a Primitive, not {primitive.__class__.__name__}"
            )

        offset = self.vertex_count
        count = primitive.vertex_count
        attributes = self._attributes
        for name in ("positions", "colors", "texcoords", "normals"):
            val = primitive._attributes.get(name)
            if val is not None:
                attributes[name] = np.concatenate([attributes[name], val])

        indices = primitive.indices
        if indices is not None:
            attributes["indices"] = np.concatenate(
                [attributes["indices"], rebase_indices(indices, offset)]
            )

        if isinstance(primitive, Scene):
            self._topologies.update(primitive._topologies)
        else:
            self._topologies.add(primitive.topology)

        logger.debug(f"Added {count} vertices to scene at offset {offset}")
        return self
