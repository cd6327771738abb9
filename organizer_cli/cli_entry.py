"""
cli_entry.py - CLI Entry Point

Usage:
    organizer-cli <path> [-c|--copy] [-h|--help]
"""

import argparse
import logging
import sys
from typing import List, Optional

from organizer_core import (
    OperationMode,
    OrganizerError,
    organize,
    render_report,
)


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = _Parser(
        prog="organizer-cli",
        description="Organize files by extension in the specified path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  organizer-cli /home/user/Downloads
  organizer-cli /home/user/Downloads --copy
"""
    )
    parser.add_argument("path", type=str, help="Path to the directory to organize")
    parser.add_argument("--copy", "-c", action="store_true", help="Copy files instead of moving them")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    args = create_parser().parse_args(argv)
    mode = OperationMode.COPY if args.copy else OperationMode.MOVE

    print(f"{mode.participle} files from: {args.path}")
    print()

    try:
        result = organize(args.path, mode=mode)
    except OrganizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
