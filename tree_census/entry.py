"""Eintrags-Klassifizierung – Datei, Verzeichnis oder Symlink."""

import os
from dataclasses import dataclass
from enum import Enum

from .errors import EntryError


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class Entry:
    """Flüchtige Sicht auf einen Verzeichniseintrag während des Scans."""

    path: str
    name: str
    kind: EntryKind
    identity: tuple[int, int] | None = None
    size: int = 0


def storage_size(logical_size: int, block_size: int) -> int:
    """Rundet die logische Größe auf ganze Blöcke auf (tatsächliche Belegung).

    Beispiel: 100 B bei 4096er Blöcken -> 4096, 5000 B -> 8192, 0 B -> 0.
    """
    if block_size <= 0:
        return logical_size
    return block_size * -(-logical_size // block_size)


def classify(dir_entry: os.DirEntry, with_size: bool = False) -> Entry | None:
    """Bestimmt die Art eines Eintrags. Symlinks werden nie aufgelöst.

    Args:
        dir_entry: Eintrag aus os.scandir().
        with_size: Nur dann werden Identität (st_dev, st_ino) und Größe ermittelt.

    Returns:
        Entry, oder None für Sonderdateien (Sockets, FIFOs, Devices).

    Raises:
        EntryError: Wenn die Metadaten nicht gelesen werden können.
    """
    try:
        if dir_entry.is_symlink():
            return Entry(dir_entry.path, dir_entry.name, EntryKind.SYMLINK)
        if dir_entry.is_dir(follow_symlinks=False):
            return Entry(dir_entry.path, dir_entry.name, EntryKind.DIRECTORY)
        if not dir_entry.is_file(follow_symlinks=False):
            return None
        if not with_size:
            return Entry(dir_entry.path, dir_entry.name, EntryKind.FILE)
        st = dir_entry.stat(follow_symlinks=False)
        if not st.st_ino:
            # Windows: DirEntry.stat() liefert st_ino/st_dev = 0
            st = os.stat(dir_entry.path, follow_symlinks=False)
    except OSError as e:
        raise EntryError(dir_entry.path, e) from e

    return Entry(
        dir_entry.path,
        dir_entry.name,
        EntryKind.FILE,
        identity=(st.st_dev, st.st_ino),
        size=storage_size(st.st_size, getattr(st, "st_blksize", 0)),
    )
