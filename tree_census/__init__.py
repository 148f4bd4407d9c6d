"""Tree Census – zählt Dateien, Verzeichnisse und Belegung pro Wurzelverzeichnis."""

__version__ = "1.0.0"
