"""
ui.py

Console output for extdust, built on Rich:
  - log_info / log_warning / log_error for diagnostics (stderr).
  - print_report for the final report (stdout, written verbatim).
  - printable to make undecodable file names safe to print.
  - set_verbose to toggle log_info.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# ---------- Console + Theme ----------

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.warn": "yellow",
        "ui.error": "red bold",
    }
)

console = Console(theme=_THEME, highlight=False)
err_console = Console(theme=_THEME, highlight=False, stderr=True)

# ---------- Global State ----------

VERBOSE = False


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


# ---------- Logging ----------


def printable(text: str) -> str:
    """Swap surrogate-escaped bytes (from undecodable file names) for U+FFFD."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def log_info(message: str) -> None:
    """Info is suppressed unless VERBOSE is True."""
    if VERBOSE:
        err_console.print(f"[ui.info]{escape(printable(message))}[/]", soft_wrap=True, emoji=False)


def log_warning(message: str) -> None:
    err_console.print(f"[ui.warn]{escape(printable(message))}[/]", soft_wrap=True, emoji=False)


def log_error(message: str) -> None:
    err_console.print(f"[ui.error]{escape(printable(message))}[/]", soft_wrap=True, emoji=False)


# ---------- Report ----------


def print_report(text: str) -> None:
    """Write report text unchanged: no markup, no wrapping, tabs kept."""
    out = console.file
    out.write(printable(text) + "\n")
    out.flush()
