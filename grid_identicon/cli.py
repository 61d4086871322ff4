"""Command line entry point.

Usage::

    grid-identicon Timothy                # writes Timothy.png
    grid-identicon Timothy -o avatar.png --cell-size 20
    grid-identicon --base64               # random seed, PNG as base64 on stdout
    grid-identicon Timothy --signature    # MD5 signature only

The CLI is a thin collaborator: it picks the seed string, calls the pipeline
and decides where the bytes go.
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from grid_identicon.config import CanvasConfig, DEFAULT_CELL_SIZE
from grid_identicon.digest import string_signature
from grid_identicon.errors import IdenticonError
from grid_identicon.pipeline import generate
from grid_identicon.seed import random_string
from grid_identicon.types import ImageFormat
from grid_identicon.utils.image import to_base64

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def parse_image_format(value: str) -> ImageFormat:
    """Case-insensitive ``--format`` parsing (``png`` and ``PNG`` both work)."""
    return ImageFormat(value.upper())


def default_output_path(seed: str, fmt: ImageFormat) -> Path:
    stem = _UNSAFE_FILENAME_CHARS.sub("_", seed).lstrip(".") or "identicon"
    return Path(f"{stem}.{fmt.value.lower()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-identicon",
        description="Generate a symmetric pixel-art identicon from a string.",
    )
    parser.add_argument(
        "string",
        nargs="?",
        help="Input string. A random 7 character seed is used when omitted.",
    )
    parser.add_argument("-o", "--output", type=Path, help="Output image path.")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument(
        "--format",
        dest="fmt",
        type=parse_image_format,
        choices=list(ImageFormat),
        default=ImageFormat.PNG,
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--base64",
        action="store_true",
        help="Print the encoded image as base64 instead of writing a file.",
    )
    output.add_argument(
        "--signature",
        action="store_true",
        help="Print the hex MD5 signature of the string and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    seed: str = args.string if args.string is not None else random_string()

    if args.signature:
        print(string_signature(seed))
        return 0

    try:
        config = CanvasConfig(cell_size=args.cell_size)
    except IdenticonError as e:
        parser.error(str(e))

    data = generate(seed, config).render(fmt=args.fmt)

    if args.base64:
        print(to_base64(data))
        return 0

    path: Path = args.output or default_output_path(seed, args.fmt)
    path.write_bytes(data)
    logger.info("wrote %s identicon for %r to %s", args.fmt.value, seed, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
