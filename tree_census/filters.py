"""Namensfilter (Regex) und Sichtbarkeitsregeln für Einträge."""

import re

from .entry import Entry, EntryKind
from .errors import ConfigurationError


def is_hidden(name: str) -> bool:
    """Versteckte Einträge (Punkt-Präfix) – nur mit --all gezählt."""
    return name.startswith(".")


class PatternFilter:
    """Einmal kompilierter Regex über Eintragsnamen.

    Ist ein Filter aktiv, werden nur passende Dateien (inkl. Symlinks)
    gezählt; Verzeichnisse werden weiter traversiert, aber nie gezählt.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        try:
            self._regex = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f"Ungültiges Pattern {pattern!r}: {e}") from e

    @classmethod
    def compile(cls, pattern: str | None) -> "PatternFilter | None":
        if pattern is None:
            return None
        return cls(pattern)

    def matches(self, name: str) -> bool:
        return self._regex.search(name) is not None

    def __repr__(self) -> str:
        return f"PatternFilter({self.pattern!r})"


def should_count(entry: Entry, pattern_filter: PatternFilter | None) -> bool:
    """Entscheidet, ob ein klassifizierter Eintrag in den Zähler eingeht."""
    if pattern_filter is None:
        return True
    if entry.kind is EntryKind.DIRECTORY:
        return False
    return pattern_filter.matches(entry.name)
