"""Procedural mesh generation: flat vertex and index buffers for simple shapes."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info, repo_dir as _repo_dir
from . import utils

from .geometries import *

from .utils import (
    logger,
    distance,
    convert,
    to_radians,
    to_degrees,
    replace_comma,
    replace_decimal_point,
)
from .utils.enums import *
