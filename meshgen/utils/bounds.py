import numpy as np


def points_to_aabb(points):
    """Get the axis-aligned bounding box of a set of 3D points.

    Returns a (2, 3) float array ``[min, max]``, or None when there are no
    points with finite coordinates.
    """
    # Validate shape
    points = np.asarray(points)
    if not (points.ndim == 2 and points.shape[1] == 3):
        raise ValueError("Points must be a list of 3D points.")
    if points.shape[0] == 0:
        return None

    aabb = np.array([np.min(points, axis=0), np.max(points, axis=0)], dtype=float)

    # Non-finite values show up in the min/max, drop those points and retry
    if not np.isfinite(aabb).all():
        finite_mask = np.isfinite(points).all(axis=1)
        return points_to_aabb(points[finite_mask])

    return aabb
