from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .files import hash_file

logger = logging.getLogger("quickxorhash")


def init_logger(verbose: bool) -> None:
    # [year-month-day hour:minute:second] [LEVEL] <logger name>: message
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] <%(name)s>: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickxorhash",
        description="Print the QuickXorHash of each file.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE")
    parser.add_argument(
        "--base64",
        action="store_true",
        help="print the base64 digest used by OneDrive / SharePoint instead of hex",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    init_logger(args.verbose)

    status = 0
    for name in args.files:
        try:
            result = hash_file(name)
        except OSError as exc:
            logger.error("Cannot hash %s: %s", name, exc)
            status = 2
            continue
        text = result.base64digest() if args.base64 else result.hexdigest()
        print(text if len(args.files) == 1 else f"{text}  {name}")
    return status


if __name__ == "__main__":
    sys.exit(main())
