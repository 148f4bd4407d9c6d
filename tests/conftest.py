"""Pytest-Bootstrap und Fixtures für echte Verzeichnisbäume unter tmp_path."""

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


def aligned(path: Path) -> int:
    """Erwartete belegte Größe einer Datei, unabhängig vom Dateisystem."""
    from tree_census.entry import storage_size

    st = os.stat(path)
    return storage_size(st.st_size, st.st_blksize)


def hardlink(src: Path, dst: Path) -> None:
    try:
        os.link(src, dst)
    except OSError as e:
        pytest.skip(f"Hardlinks nicht unterstützt: {e}")


def symlink(target: Path, link: Path) -> None:
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError) as e:
        pytest.skip(f"Symlinks nicht unterstützt: {e}")


@pytest.fixture
def simple_tree(tmp_path: Path) -> Path:
    """2 Dateien (100 B, 5000 B) in der Wurzel, 1 Unterordner mit 1 Datei (1 B)."""
    root = tmp_path / "root"
    write_file(root / "a.txt", 100)
    write_file(root / "b.bin", 5000)
    write_file(root / "sub" / "c.txt", 1)
    return root


@pytest.fixture
def wide_tree(tmp_path: Path) -> Path:
    """500 Dateien verteilt auf 50 Verzeichnisse (teilweise verschachtelt)."""
    root = tmp_path / "wide"
    for d in range(50):
        folder = root / f"group{d % 5}" / f"dir{d:02d}" if d >= 5 else root / f"group{d}"
        for f in range(10):
            write_file(folder / f"file{f}.dat", (d * 37 + f * 911) % 9000)
    return root
