"""Command line entry point: merge two named regions of a topology file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .core.config import MergeConfig
from .core.errors import TopomergeError
from .core.types import ValidationMode
from .topology import merge_topology_file


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="topomerge",
        description="Merge two adjacent regions of a TopoJSON topology into one.",
    )
    parser.add_argument("input", type=Path, help="Topology file to read")
    parser.add_argument("major", help="Name of the region that is kept")
    parser.add_argument("minor", help="Name of the region that is absorbed")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Where to write the result (defaults to overwriting the input)",
    )
    parser.add_argument(
        "--object",
        dest="object_name",
        default=None,
        help="Object collection holding the regions (default: search all)",
    )
    parser.add_argument(
        "--name-property",
        default="name",
        help="Property that holds region names (default: %(default)s)",
    )
    parser.add_argument(
        "--validate",
        choices=[mode.value for mode in ValidationMode],
        default=ValidationMode.OFF.value,
        help="Rebuild the merged shape and check it (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = MergeConfig(
        name_property=args.name_property,
        object_name=args.object_name,
        validation=args.validate,
        verbose=args.verbose,
    )
    output = args.output if args.output is not None else args.input

    try:
        merge_topology_file(args.input, output, args.major, args.minor, config)
    except (TopomergeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
