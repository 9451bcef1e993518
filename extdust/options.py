"""
Run configuration built from the command line.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List

from .lister import split_extensions

DEFAULT_LIMIT = 100


@dataclass(frozen=True)
class ScanOptions:
    path: str
    extensions: str = ""

    def extension_list(self) -> List[str]:
        return split_extensions(self.extensions)

    @classmethod
    def from_args(cls, args: argparse.Namespace, path: str) -> "ScanOptions":
        return cls(path=path, extensions=getattr(args, "ext", "") or "")


@dataclass(frozen=True)
class DisplayOptions:
    show_files: bool = False
    show_folders: bool = False
    limit: int = DEFAULT_LIMIT
    sort_by_name: bool = False
    reverse_size: bool = False
    show_total: bool = False

    @property
    def show_details(self) -> bool:
        return self.show_files or self.show_folders

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DisplayOptions":
        """Create DisplayOptions from CLI arguments."""
        return cls(
            show_files=bool(getattr(args, "files", False)),
            show_folders=bool(getattr(args, "dirs", False)),
            limit=getattr(args, "limit", DEFAULT_LIMIT),
            sort_by_name=bool(getattr(args, "name", False)),
            reverse_size=bool(getattr(args, "size", False)),
            show_total=bool(getattr(args, "total", False)),
        )
