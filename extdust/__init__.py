__version__ = "1.0.0"

from .classifier import NO_EXTENSION, classify_extension, is_standard_extension
from .lister import FdLister, FileLister, ScanError, build_fd_args, find_fd
from .options import DisplayOptions, ScanOptions
from .report import render_report
from .scanner import scan_files
from .size_utils import format_size
from .stats import ExtensionStats, FileDetail

__all__ = [
    "__version__",
    "NO_EXTENSION",
    "classify_extension",
    "is_standard_extension",
    "FdLister",
    "FileLister",
    "ScanError",
    "build_fd_args",
    "find_fd",
    "DisplayOptions",
    "ScanOptions",
    "render_report",
    "scan_files",
    "format_size",
    "ExtensionStats",
    "FileDetail",
]
