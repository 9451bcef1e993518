#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ensure the local project root (containing the 'extdust' package) is on sys.path
so tests can import without requiring an installed/editable package.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, List


# tests/ -> project_root/
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from extdust.lister import FileLister  # noqa: E402


class FakeLister(FileLister):
    """Yields a fixed list of relative paths instead of running fd."""

    def __init__(self, paths: List[str]):
        self.paths = list(paths)
        self.calls: List[tuple] = []

    def list_files(self, root: str, extensions: str = "") -> Iterator[str]:
        self.calls.append((root, extensions))
        yield from self.paths


def make_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path
