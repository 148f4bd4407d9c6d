"""Paralleler Walker – fester Thread-Pool über eine gemeinsame Warteschlange.

Jedes Verzeichnis ist ein WorkItem (Wurzel-Index + Pfad). Worker expandieren
Items und legen gefundene Unterverzeichnisse wieder in die Queue. Die Queue
schließt sich selbst, sobald keine Arbeit mehr aussteht.
"""

import logging
import os
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from .counter import Counter
from .entry import EntryKind, classify
from .errors import EntryError, RootOpenError
from .filters import PatternFilter, is_hidden, should_count
from .walker import diagnose

log = logging.getLogger(__name__)

THREADS_ENV = "TREE_CENSUS_THREADS"


@dataclass(frozen=True)
class WorkItem:
    root_index: int
    path: str


class WorkQueue:
    """Blockierende Queue mit Zähler ausstehender Items.

    put() erhöht den Zähler, task_done() senkt ihn. Fällt er auf 0, ist die
    Queue dauerhaft geschlossen und get() liefert allen Wartenden None.
    """

    def __init__(self):
        self._items: deque[WorkItem] = deque()
        self._outstanding = 0
        self._closed = False
        self._cond = threading.Condition()

    def put(self, item: WorkItem) -> None:
        with self._cond:
            if self._closed:
                raise RuntimeError("WorkQueue ist bereits geschlossen")
            self._items.append(item)
            self._outstanding += 1
            self._cond.notify()

    def get(self) -> WorkItem | None:
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if self._closed:
                return None
            return self._items.popleft()

    def task_done(self) -> None:
        with self._cond:
            self._outstanding -= 1
            if self._outstanding <= 0:
                self._close()

    def abort(self) -> None:
        """Verwirft alle Items und weckt alle Worker (nur bei internem Fehler)."""
        with self._cond:
            self._items.clear()
            self._close()

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def _close(self) -> None:
        self._closed = True
        self._cond.notify_all()


def resolve_threads(threads: int | None) -> int:
    """Anzahl Worker: explizit > Umgebungsvariable > CPU-Kerne."""
    if threads:
        return max(1, threads)
    env = os.environ.get(THREADS_ENV, "")
    if env.isdigit() and int(env) > 0:
        return int(env)
    return os.cpu_count() or 1


def parallel_walk(
    roots: list[str],
    all_files: bool = False,
    with_size: bool = False,
    pattern_filter: PatternFilter | None = None,
    verbose: bool = False,
    threads: int | None = None,
    on_directory: Callable[[str], None] | None = None,
) -> list[Counter]:
    """Zählt alle Wurzeln gemeinsam mit einem Pool von Worker-Threads.

    Nicht lesbare Verzeichnisse (auch eine Wurzel selbst) werden übersprungen
    und im Verbose-Modus gemeldet; die übrigen Wurzeln laufen weiter.

    Args:
        roots: Wurzelverzeichnisse.
        threads: Anzahl Worker; 0/None -> resolve_threads().
        on_directory: Optionaler Callback pro expandiertem Verzeichnis (Fortschritt).

    Returns:
        Ein Counter pro Wurzel, in der Reihenfolge von roots.
    """
    counters = [Counter(str(root), with_size) for root in roots]
    if not counters:
        return counters

    work = WorkQueue()
    for index, counter in enumerate(counters):
        work.put(WorkItem(index, counter.dirpath))

    failures: list[BaseException] = []

    def expand(item: WorkItem) -> None:
        counter = counters[item.root_index]
        try:
            with os.scandir(item.path) as entries:
                for dir_entry in entries:
                    if not all_files and is_hidden(dir_entry.name):
                        continue
                    try:
                        entry = classify(dir_entry, with_size)
                    except EntryError as e:
                        diagnose(verbose, str(e))
                        continue
                    if entry is None:
                        continue
                    if entry.kind is EntryKind.DIRECTORY:
                        work.put(WorkItem(item.root_index, entry.path))
                    if should_count(entry, pattern_filter):
                        counter.count(entry)
        except OSError as e:
            diagnose(verbose, str(RootOpenError(item.path, e)))
        if on_directory is not None:
            on_directory(item.path)

    def worker() -> None:
        while True:
            item = work.get()
            if item is None:
                return
            try:
                expand(item)
            except Exception as e:
                log.error(f"Worker-Fehler bei {item.path}: {e}")
                failures.append(e)
                work.abort()
                return
            finally:
                work.task_done()

    n_threads = resolve_threads(threads)
    log.debug(f"Starte {n_threads} Worker für {len(roots)} Wurzel(n)")
    pool = [
        threading.Thread(target=worker, name=f"census-worker-{i}", daemon=True)
        for i in range(n_threads)
    ]
    for t in pool:
        t.start()
    for t in pool:
        t.join()

    if failures:
        raise failures[0]
    return counters
