"""Main CLI entry point for utf8b."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file
from ..streaming.config import StreamConfig


def main() -> int:
    """Main entry point for the utf8b CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="utf8b: Lossless UTF-8b Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  utf8b --analyze data.bin               Report scalars and escaped bytes
  utf8b --analyze data.bin --chunk-size 1
  utf8b --version                        Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Decode FILE, report escaped bytes and check the round-trip",
    )

    parser.add_argument(
        "--chunk-size",
        metavar="N",
        type=int,
        default=StreamConfig.chunk_size,
        help=f"Bytes read per chunk (default: {StreamConfig.chunk_size})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"utf8b {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --analyze
    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            config = StreamConfig(chunk_size=args.chunk_size)
            return 0 if analyze_file(file_path, config) else 1
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
