"""Sequentieller Walker – lazy Tiefensuche über genau eine Wurzel.

Nutzt os.scandir() für Performance. Es ist immer nur ein Verzeichnis
gleichzeitig geöffnet; gefundene Unterverzeichnisse landen auf einem Stack.
"""

import logging
import os
from collections.abc import Iterator

from .counter import Counter
from .entry import Entry, EntryKind, classify
from .errors import EntryError, RootOpenError
from .filters import PatternFilter, is_hidden, should_count

log = logging.getLogger(__name__)


def diagnose(verbose: bool, message: str) -> None:
    """Meldet einen behebbaren Fehler – als Warnung nur im Verbose-Modus."""
    if verbose:
        log.warning(message)
    else:
        log.debug(message)


class TreeWalker:
    """Iterierbare Traversierung einer Wurzel, bei jedem iter() neu ab der Wurzel.

    Liefert klassifizierte Einträge (ohne die Wurzel selbst). Symlinks auf
    Verzeichnisse werden als Symlink geliefert und nicht betreten.

    Raises (beim Iterieren):
        RootOpenError: Ein Verzeichnis lässt sich nicht öffnen oder lesen.
    """

    def __init__(self, root: str, all_files: bool = False, with_size: bool = False, verbose: bool = False):
        self.root = str(root)
        self.all_files = all_files
        self.with_size = with_size
        self.verbose = verbose

    def __iter__(self) -> Iterator[Entry]:
        pending = [self.root]
        while pending:
            path = pending.pop()
            try:
                with os.scandir(path) as entries:
                    for dir_entry in entries:
                        if not self.all_files and is_hidden(dir_entry.name):
                            continue
                        try:
                            entry = classify(dir_entry, self.with_size)
                        except EntryError as e:
                            diagnose(self.verbose, str(e))
                            continue
                        if entry is None:
                            continue
                        if entry.kind is EntryKind.DIRECTORY:
                            pending.append(entry.path)
                        yield entry
            except OSError as e:
                raise RootOpenError(path, e) from e


def walk(
    root: str,
    all_files: bool = False,
    with_size: bool = False,
    pattern_filter: PatternFilter | None = None,
    verbose: bool = False,
) -> Counter:
    """Zählt eine Wurzel sequentiell.

    Returns:
        Vollständig gefüllter Counter für root.

    Raises:
        RootOpenError: Ein Verzeichnis der Wurzel ist nicht lesbar – das
            Ergebnis der ganzen Wurzel wäre unvollständig.
    """
    counter = Counter(str(root), with_size)
    for entry in TreeWalker(root, all_files, with_size, verbose):
        if should_count(entry, pattern_filter):
            counter.count(entry)
    return counter
