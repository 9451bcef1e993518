"""
File enumeration backed by `fd`.

FileLister is the seam the scanner depends on; FdLister runs `fd` as a child
process and yields the relative paths it prints, one per line.

Requirements:
- `fd` (or `fdfind`, the Debian/Ubuntu package name) must be on PATH.
"""
from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
import threading
from typing import Callable, Iterator, List, Optional, Sequence, TextIO

from .ui import log_warning

logger = logging.getLogger(__name__)

FD_NAMES = ("fd", "fdfind")


class ScanError(RuntimeError):
    """The enumerator could not be started or did not finish cleanly."""


def find_fd(names: Sequence[str] = FD_NAMES) -> Optional[str]:
    """Return the first of ``names`` found on PATH, or None."""
    for name in names:
        path = shutil.which(name)
        if path:
            return path
    return None


def split_extensions(extensions: str) -> List[str]:
    """'go, md,,txt' -> ['go', 'md', 'txt']"""
    if not extensions:
        return []
    return [ext.strip() for ext in extensions.split(",") if ext.strip()]


def build_fd_args(path: str, extensions: str) -> List[str]:
    """Arguments for fd: every regular file under ``path``, optionally narrowed by -e."""
    args = ["--type", "f", "-H", "-I", "--full-path", "--base-directory", path]
    for ext in split_extensions(extensions):
        args.extend(["-e", ext])
    return args


def _warn_stderr_line(line: str) -> None:
    log_warning(f"fd error output: {line}")


def _drain(stream: TextIO, on_line: Callable[[str], None]) -> None:
    for raw in stream:
        on_line(raw.rstrip("\r\n"))


class FileLister:
    """Yields paths of regular files under a root, relative to that root."""

    def list_files(self, root: str, extensions: str = "") -> Iterator[str]:
        raise NotImplementedError


class FdLister(FileLister):
    """
    Runs fd and yields its stdout lines.

    stderr is drained on a separate thread so a chatty fd (permission errors on
    large trees) can't fill its pipe and stall stdout. Each stderr line goes to
    ``on_stderr``.
    """

    def __init__(self, executable: str, on_stderr: Optional[Callable[[str], None]] = None):
        self.executable = executable
        self.on_stderr = on_stderr or _warn_stderr_line

    def command(self, root: str, extensions: str = "") -> List[str]:
        return [self.executable, *build_fd_args(root, extensions)]

    def list_files(self, root: str, extensions: str = "") -> Iterator[str]:
        cmd = self.command(root, extensions)
        logger.debug("Running: %s", " ".join(shlex.quote(c) for c in cmd))

        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding=sys.getfilesystemencoding(),
                errors="surrogateescape",
                bufsize=1,
            )
        except OSError as e:
            raise ScanError(f"error starting command: {e}") from e

        assert proc.stdout is not None and proc.stderr is not None
        reader = threading.Thread(
            target=_drain, args=(proc.stderr, self.on_stderr), name="fd-stderr", daemon=True
        )
        reader.start()

        finished = False
        try:
            for raw in proc.stdout:
                line = raw.rstrip("\r\n")
                if line:
                    yield line
            returncode = proc.wait()
            reader.join()
            finished = True
        finally:
            if not finished:
                # Consumer stopped early (or was interrupted): don't leave fd running.
                proc.kill()
                proc.wait()
                reader.join(timeout=1)
            proc.stdout.close()
            proc.stderr.close()

        logger.debug("fd exited with status %s", returncode)
        if returncode != 0:
            raise ScanError(f"command execution failed: exit status {returncode}")
