"""
Versioning for meshgen. The reference version is hard-coded; a checkout of the
git repository appends the commit distance and hash to it.
"""

import logging
import subprocess
from pathlib import Path


# Bump before each release.
__version__ = "0.1.0"


logger = logging.getLogger("meshgen")

# The repository root, or None when installed as a regular package.
repo_dir = Path(__file__).parents[1]
repo_dir = repo_dir if repo_dir.joinpath(".git").is_dir() else None


def get_version():
    """Get the version string, with git info in a development checkout."""
    if not repo_dir:
        return __version__

    description = describe_git_head()
    if description is None:
        return __version__

    # e.g. "v0.1.0-4-gabc1234-dirty" or just "abc1234" when there are no tags
    parts = description.lstrip("v").split("-")
    if len(parts) < 3:
        return __version__ + "+" + ".".join(parts)
    release, post, *labels = parts
    if release != __version__:
        logger.warning("meshgen version from git and __version__ don't match.")
    version = release
    if post != "0":
        version += f".post{post}"
    if labels:
        version += "+" + ".".join(labels)
    return version


def describe_git_head():
    """Get the output of ``git describe`` for the repository, or None."""
    command = ["git", "describe", "--long", "--always", "--tags", "--dirty"]
    try:
        p = subprocess.run(command, cwd=repo_dir, capture_output=True)
    except OSError as e:
        logger.warning("Could not get meshgen version: " + str(e))
        return None
    if p.returncode:
        stderr = p.stderr.decode(errors="ignore")
        logger.warning("Could not get meshgen version:\n" + stderr)
        return None
    return p.stdout.decode(errors="ignore").strip()


__version__ = get_version()
version_info = tuple(
    int(i) if i.isnumeric() else i for i in __version__.split("+")[0].split(".")
)
