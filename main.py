#!/usr/bin/env python3
"""main.py: CLI entry point for the icon catalog generator.

Reads the icon enum and Icon component from the design-system checkout,
classifies every icon and writes public/icons-metadata.json.

Usage:
    python main.py
    python main.py --common-path /path/to/common-react

Exit status is 0 whenever the catalog is written, including runs that
leave some icons uncategorized; 1 if the icon enum cannot be found.
"""

from __future__ import annotations

import argparse
import sys

from icon_catalog.exceptions import EnumNotFoundError
from icon_catalog.metadata import generate_catalog, print_summary
from icon_catalog.paths import Paths


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate the icon metadata catalog from the design-system sources."
    )
    parser.add_argument(
        "--common-path",
        default=None,
        metavar="DIR",
        help="Design-system checkout (default: ../common-react next to this repo)",
    )
    args = parser.parse_args(argv)

    if args.common_path:
        Paths.configure(collaborator_root=args.common_path)

    try:
        result = generate_catalog()
    except EnumNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
