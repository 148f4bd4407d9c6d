"""Zähler pro Wurzelverzeichnis."""

import threading

from .entry import Entry, EntryKind


class Counter:
    """Akkumuliert Dateien, Verzeichnisse und Größe für genau eine Wurzel.

    Hardlinks: jeder Alias erhöht n_files, die Größe zählt pro Identität
    (st_dev, st_ino) nur einmal. Symlinks zählen als Datei ohne Größe.
    Die Wurzel selbst wird nicht als Verzeichnis gezählt.

    count() ist thread-safe; der Lock gehört nur diesem Zähler.
    """

    def __init__(self, dirpath: str, with_size: bool = False):
        self.dirpath = dirpath
        self.with_size = with_size
        self.n_files = 0
        self.n_dirs = 0
        self.size = 0
        self._seen: set[tuple[int, int]] = set()
        self._lock = threading.Lock()

    def count(self, entry: Entry) -> None:
        with self._lock:
            if entry.kind is EntryKind.SYMLINK:
                self.n_files += 1
            elif entry.kind is EntryKind.DIRECTORY:
                self.n_dirs += 1
            else:
                self.n_files += 1
                if self.with_size and entry.identity is not None and entry.identity not in self._seen:
                    self._seen.add(entry.identity)
                    self.size += entry.size

    def total_size(self) -> int:
        return self.size

    def as_dict(self) -> dict:
        return {
            "path": self.dirpath,
            "file_count": self.n_files,
            "dir_count": self.n_dirs,
            "size_bytes": self.size if self.with_size else None,
        }

    def __repr__(self) -> str:
        return (
            f"Counter({self.dirpath!r}, n_files={self.n_files}, "
            f"n_dirs={self.n_dirs}, size={self.size})"
        )
