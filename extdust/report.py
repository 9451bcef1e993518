"""
Text report for an ExtensionStats: an optional per-extension detail block
(top files and/or folders) followed by the summary table.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from .options import DisplayOptions
from .size_utils import format_size
from .stats import ExtensionStats, FileDetail

NO_FILES_FOUND = "No files found."
DETAIL_HEADER = "Storage Usage Per Extension:"
SEPARATOR = "_____________"
RULE = "=================================="
SUMMARY_TITLE = " Summary: Storage per Extension "
BRANCH = "├──"
LAST_BRANCH = "└──"


def sort_extensions(sizes: Dict[str, int], sort_by_name: bool = False, reverse_size: bool = False) -> List[str]:
    """Extension keys by name, or by total size (largest first unless reverse_size)."""
    if sort_by_name:
        return sorted(sizes)
    return sorted(sizes, key=lambda ext: sizes[ext], reverse=not reverse_size)


def sort_by_size(details: Iterable[FileDetail], reverse_size: bool = False) -> List[FileDetail]:
    return sorted(details, key=lambda d: d.size, reverse=not reverse_size)


def _tree_lines(details: List[FileDetail], limit: int) -> List[str]:
    shown = details[:max(limit, 0)]
    lines = []
    for i, detail in enumerate(shown):
        prefix = LAST_BRANCH if i == len(shown) - 1 else BRANCH
        lines.append(f"{prefix} {detail.path} ({format_size(detail.size)})")
    return lines


def render_details(stats: ExtensionStats, extensions: List[str], display: DisplayOptions) -> List[str]:
    if not display.show_details:
        return []

    lines = [DETAIL_HEADER]
    for i, ext in enumerate(extensions):
        files = stats.files.get(ext, [])
        if ext not in stats.sizes or not files:
            lines.append(f"{ext.upper()}: {NO_FILES_FOUND}")
            continue

        lines.append(f"{ext.upper()}: {format_size(stats.sizes[ext])}")

        if display.show_files:
            lines.extend(_tree_lines(sort_by_size(files, display.reverse_size), display.limit))

        if display.show_folders:
            lines.append("")
            lines.append("Folders:")
            folders = sort_by_size(stats.folder_details(ext), display.reverse_size)
            lines.extend(_tree_lines(folders, display.limit))

        if i < len(extensions) - 1:
            lines.append(SEPARATOR)
            lines.append("")
    return lines


def render_summary(stats: ExtensionStats, extensions: List[str], show_total: bool = False) -> List[str]:
    lines = [RULE, SUMMARY_TITLE, RULE]
    for ext in extensions:
        lines.append(f"{ext.upper()}: {format_size(stats.sizes[ext])}")
    lines.append(RULE)
    if show_total:
        lines.append(f"Total : {format_size(stats.total_size())}")
    return lines


def render_report(stats: ExtensionStats, display: DisplayOptions) -> str:
    """Full report text. The store is only read, never reordered."""
    if stats.is_empty():
        return NO_FILES_FOUND

    extensions = sort_extensions(stats.sizes, display.sort_by_name, display.reverse_size)

    lines: List[str] = []
    if display.show_details:
        lines.extend(render_details(stats, extensions, display))
        lines.append("")
    lines.extend(render_summary(stats, extensions, display.show_total))
    return "\n".join(lines)
