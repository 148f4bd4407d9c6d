"""Programmatischer Einstiegspunkt – Konfiguration prüfen und Walker wählen."""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from .counter import Counter
from .errors import ConfigurationError, RootOpenError
from .filters import PatternFilter
from .parallel import parallel_walk
from .walker import walk

log = logging.getLogger(__name__)


@dataclass
class CensusConfig:
    roots: list[str] = field(default_factory=lambda: ["."])
    all_files: bool = False
    with_size: bool = False
    pattern: str | None = None
    non_recursive: bool = False  # sequentiell, eine Wurzel nach der anderen
    threads: int | None = None
    verbose: bool = False
    order_by: str | None = None
    progress: bool = False

    @property
    def size_requested(self) -> bool:
        """Sortierung nach Größe erzwingt die Größenberechnung."""
        return self.with_size or self.order_by == "s"

    @property
    def with_dir(self) -> bool:
        """Verzeichnisse werden nur ohne Filter gezählt."""
        return self.pattern is None


def validate_roots(paths: list[str]) -> list[str]:
    """Entfernt nicht existierende Pfade und Nicht-Verzeichnisse.

    Raises:
        ConfigurationError: Wenn kein gültiges Verzeichnis übrig bleibt.
    """
    valid = []
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            log.warning(f"Pfad existiert nicht: {raw}")
        elif not path.is_dir():
            log.warning(f"Pfad ist kein Verzeichnis: {raw}")
        else:
            valid.append(raw)
    if not valid:
        raise ConfigurationError("Keine gültigen Verzeichnisse angegeben")
    return valid


def run_census(config: CensusConfig) -> list[Counter]:
    """Zählt alle Wurzeln der Konfiguration.

    Returns:
        Ein Counter pro erfolgreich gezählter Wurzel (unsortiert).

    Raises:
        ConfigurationError: Ungültiges Pattern oder keine gültige Wurzel.
    """
    pattern_filter = PatternFilter.compile(config.pattern)
    roots = validate_roots(config.roots)
    with_size = config.size_requested

    if config.non_recursive:
        counters = []
        for root in tqdm(roots, desc="Zähle Wurzeln", unit="Ordner", disable=not config.progress):
            try:
                counters.append(walk(root, config.all_files, with_size, pattern_filter, config.verbose))
            except RootOpenError as e:
                log.error(str(e))
        return counters

    with tqdm(desc="Expandiere Verzeichnisse", unit="Ordner", disable=not config.progress) as bar:
        bar_lock = threading.Lock()

        def advance(_path: str) -> None:
            with bar_lock:
                bar.update(1)

        return parallel_walk(
            roots,
            config.all_files,
            with_size,
            pattern_filter,
            config.verbose,
            config.threads,
            on_directory=advance if config.progress else None,
        )
