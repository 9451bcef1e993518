"""
Scan driver: feeds every file the lister reports into an ExtensionStats.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from .classifier import classify_extension
from .lister import FileLister
from .stats import ExtensionStats
from .ui import log_warning

logger = logging.getLogger(__name__)


def _file_size(path: str) -> int:
    return os.stat(path).st_size


def scan_files(
    lister: FileLister,
    root: str,
    extensions: str = "",
    stats: Optional[ExtensionStats] = None,
) -> ExtensionStats:
    """
    Stat each path from ``lister`` (relative to ``root``) and record it by extension.

    Files that vanish or can't be stat'ed are reported and skipped. A ScanError
    from the lister propagates; whatever was recorded up to that point should be
    thrown away by the caller.
    """
    if stats is None:
        stats = ExtensionStats()

    skipped = 0
    for relative_path in lister.list_files(root, extensions):
        file_path = os.path.normpath(os.path.join(root, relative_path))
        try:
            size = _file_size(file_path)
        except OSError as e:
            skipped += 1
            log_warning(f"Error statting file {file_path}: {e}")
            continue
        stats.record(classify_extension(file_path), file_path, size)

    logger.debug(
        "Scanned %s: %d files in %d extensions, %d skipped",
        root, stats.file_count(), len(stats.sizes), skipped,
    )
    return stats
