"""
Utility functions for meshgen.

.. currentmodule:: meshgen.utils

.. autosummary::
    :toctree: utils/
    :template: ../_templates/custom_layout.rst

    distance
    convert
    to_radians
    to_degrees
    replace_comma
    replace_decimal_point
    bounds.points_to_aabb
    enums

"""

import os
import logging

import numpy as np

from . import enums  # noqa: F401

logger = logging.getLogger("meshgen")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("MESHGEN_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except ValueError:
            logger.warning(f"Invalid meshgen log level: {level}")


_set_log_level()


def distance(x, y, x2, y2):
    """Get the euclidean distance between the points (x, y) and (x2, y2) in the plane."""
    return float(np.linalg.norm([x2 - x, y2 - y]))


def convert(a):
    """Flatten a vector or matrix into a 1D float32 array.

    Matrices are flattened row by row. This is the flat layout used for all
    buffers produced by the geometry functions.
    """
    return np.asarray(a, dtype=np.float32).reshape(-1)


def to_radians(degrees):
    """Convert an angle in degrees to radians."""
    return degrees * np.pi / 180


def to_degrees(radians):
    """Convert an angle in radians to degrees."""
    return radians / np.pi * 180


def replace_comma(number):
    """Parse a string that uses a decimal comma (e.g. "5,3") into a float."""
    return float(number.replace(",", ".", 1))


def replace_decimal_point(number):
    """Format a number as a string with a decimal comma instead of a point."""
    return str(number).replace(".", ",", 1)
