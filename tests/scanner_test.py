from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import FakeLister, make_file
from extdust import scanner
from extdust.classifier import NO_EXTENSION
from extdust.lister import FileLister, ScanError
from extdust.scanner import scan_files


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    root = tmp_path / "root"
    make_file(root / "a" / "x.go", 2000)
    make_file(root / "b" / "y.go", 1000)
    make_file(root / "README.md", 500)
    make_file(root / "Makefile", 7)
    make_file(root / "lib" / "libz.so.1", 11)
    return root


def test_scan_aggregates_by_extension_and_folder(sample_tree: Path):
    rels = ["a/x.go", "b/y.go", "README.md", "Makefile", "lib/libz.so.1"]
    stats = scan_files(FakeLister(rels), str(sample_tree))

    assert stats.sizes == {"go": 3000, "md": 500, NO_EXTENSION: 18}
    assert stats.folders["go"] == {
        str(sample_tree / "a"): 2000,
        str(sample_tree / "b"): 1000,
    }
    assert [f.path for f in stats.files["go"]] == [
        str(sample_tree / "a" / "x.go"),
        str(sample_tree / "b" / "y.go"),
    ]
    assert stats.folders[NO_EXTENSION] == {str(sample_tree): 7, str(sample_tree / "lib"): 11}


def test_scan_passes_root_and_filter_to_lister(sample_tree: Path):
    lister = FakeLister(["README.md"])
    scan_files(lister, str(sample_tree), "md, go")
    assert lister.calls == [(str(sample_tree), "md, go")]


def test_scan_normalizes_dot_prefixed_paths(sample_tree: Path):
    stats = scan_files(FakeLister(["./a/x.go"]), str(sample_tree))
    assert stats.files["go"][0].path == os.path.join(str(sample_tree), "a", "x.go")


def test_missing_file_is_skipped_with_warning(sample_tree: Path, capsys):
    stats = scan_files(FakeLister(["a/x.go", "gone.txt", "README.md"]), str(sample_tree))
    assert set(stats.sizes) == {"go", "md"}
    err = capsys.readouterr().err
    assert "Error statting file" in err
    assert "gone.txt" in err


def test_stat_permission_error_is_skipped(sample_tree: Path, monkeypatch, capsys):
    real = scanner._file_size

    def fake_size(path: str) -> int:
        if path.endswith("y.go"):
            raise PermissionError(13, "Permission denied", path)
        return real(path)

    monkeypatch.setattr(scanner, "_file_size", fake_size)
    stats = scan_files(FakeLister(["a/x.go", "b/y.go"]), str(sample_tree))
    assert stats.sizes == {"go": 2000}
    assert "Permission denied" in capsys.readouterr().err


def test_scan_into_existing_store(sample_tree: Path):
    stats = scan_files(FakeLister(["README.md"]), str(sample_tree))
    same = scan_files(FakeLister(["a/x.go"]), str(sample_tree), stats=stats)
    assert same is stats
    assert stats.sizes == {"md": 500, "go": 2000}


def test_scan_error_propagates(sample_tree: Path):
    class FailingLister(FileLister):
        def list_files(self, root, extensions=""):
            yield "a/x.go"
            raise ScanError("command execution failed: exit status 1")

    with pytest.raises(ScanError):
        scan_files(FailingLister(), str(sample_tree))


def test_empty_listing_gives_empty_store(tmp_path: Path):
    stats = scan_files(FakeLister([]), str(tmp_path))
    assert stats.is_empty()
