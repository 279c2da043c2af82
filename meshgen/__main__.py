"""A very tiny CLI.

Invoke using e.g. ``python -m meshgen version``.
"""

import sys
import argparse

import meshgen


def print_info():
    """Print the buffer sizes of the default shapes."""
    shapes = [
        ("block", meshgen.block_geometry()),
        ("block (unshared)", meshgen.block_geometry(shared_vertices=False)),
        ("face", meshgen.face_geometry()),
        ("sphere", meshgen.sphere_geometry()),
    ]
    for name, primitive in shapes:
        print(
            f"{name:<18} {primitive.vertex_count:>5} vertices"
            f" {len(primitive.indices):>5} indices ({primitive.topology})"
        )


def main(argv=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv
    if argv and argv[0].endswith(".py"):
        argv = argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    parser = argparse.ArgumentParser(
        prog="meshgen",
        description="The (very basic) meshgen CLI",
    )

    parser.add_argument(
        "command",
        action="store",
        help="The command to run: 'help', 'version' or 'info'",
    )

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("meshgen v" + meshgen.__version__)
    elif command == "info":
        print_info()
    else:
        print(f"Invalid command '{command}'")


if __name__ == "__main__":
    main()
