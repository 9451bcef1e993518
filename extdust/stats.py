"""
Per-extension aggregation of scanned files.

ExtensionStats keeps three views of the same data, all keyed by extension:
byte totals, the individual file records, and byte totals per containing folder.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class FileDetail:
    path: str
    size: int


@dataclass
class ExtensionStats:
    """Append-only store filled by the scanner and read by the report."""
    sizes: Dict[str, int] = field(default_factory=dict)
    files: Dict[str, List[FileDetail]] = field(default_factory=dict)
    folders: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def record(self, ext: str, path: str, size: int) -> None:
        """Add one file of ``size`` bytes under extension ``ext``."""
        self.sizes[ext] = self.sizes.get(ext, 0) + size
        self.files.setdefault(ext, []).append(FileDetail(path=path, size=size))

        folder = os.path.dirname(path)
        per_folder = self.folders.setdefault(ext, {})
        per_folder[folder] = per_folder.get(folder, 0) + size

    def total_size(self) -> int:
        return sum(self.sizes.values())

    def file_count(self) -> int:
        return sum(len(items) for items in self.files.values())

    def folder_details(self, ext: str) -> List[FileDetail]:
        """Folder totals for ``ext`` as FileDetail rows (path = folder)."""
        return [FileDetail(path=folder, size=size) for folder, size in self.folders.get(ext, {}).items()]

    def is_empty(self) -> bool:
        return not self.sizes
