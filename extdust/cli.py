#!/usr/bin/env python
"""
extdust CLI: total disk usage per file extension under a directory.

Files are enumerated with `fd`, so hidden and git-ignored files are included.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from . import __version__
from .lister import FdLister, ScanError, find_fd
from .options import DEFAULT_LIMIT, DisplayOptions, ScanOptions
from .report import render_report
from .scanner import scan_files
from .ui import log_error, log_info, print_report, set_verbose

logger = logging.getLogger(__name__)

FD_MISSING_MESSAGE = (
    "Failed to find fdfind on your system. Please ensure it has been installed, and is in your PATH."
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="extdust",
        description=(
            "Search for files with given extensions starting from a specified path and display "
            "their total size per extension, with optional file or folder details."
        ),
    )
    p.add_argument("-p", "--path", default="",
                   help="Path to search (default: current directory)")
    p.add_argument("-e", "--ext", default="",
                   help="Comma-separated file extensions to search for")

    p.add_argument("-f", "--files", action="store_true",
                   help="Show file details per extension")
    p.add_argument("-d", "--dirs", action="store_true",
                   help="Show folder details per extension")

    p.add_argument("-l", "--limit", type=int, default=DEFAULT_LIMIT,
                   help=f"Limit the number of results displayed (default: {DEFAULT_LIMIT})")

    p.add_argument("-s", "--size", action="store_true",
                   help="Sort by size, smallest first (default: largest first)")
    p.add_argument("-n", "--name", action="store_true",
                   help="Sort summary by extension name")

    p.add_argument("-t", "--total", action="store_true",
                   help="Show total size of all extensions combined")

    p.add_argument("-v", "--verbose", action="store_true",
                   help="Verbose diagnostics (debug logging)")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    set_verbose(args.verbose)

    path = args.path
    if not path:
        try:
            path = os.getcwd()
        except OSError as e:
            log_error(f"Error getting current directory: {e}")
            return 1

    fd_path: Optional[str] = find_fd()
    if not fd_path:
        log_error(FD_MISSING_MESSAGE)
        return 1

    scan = ScanOptions.from_args(args, path)
    display = DisplayOptions.from_args(args)
    wanted = ", ".join(scan.extension_list()) or "all extensions"
    log_info(f"Scanning {scan.path} ({wanted}) with {fd_path}")

    try:
        stats = scan_files(FdLister(fd_path), scan.path, scan.extensions)
    except ScanError as e:
        log_error(str(e))
        return 1

    print_report(render_report(stats, display))
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
