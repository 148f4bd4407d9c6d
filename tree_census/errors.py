"""Fehlerklassen für Traversierung und Konfiguration."""


class CensusError(Exception):
    """Basisklasse aller Fehler von tree_census."""


class ConfigurationError(CensusError):
    """Ungültige Konfiguration (Pattern, keine gültigen Wurzeln) – bricht vor dem Scan ab."""


class RootOpenError(CensusError):
    """Ein Verzeichnis konnte nicht geöffnet/gelesen werden."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Verzeichnis nicht lesbar: {path} ({cause.strerror or cause})")
        self.path = path
        self.cause = cause


class EntryError(CensusError):
    """Metadaten eines einzelnen Eintrags nicht lesbar – Eintrag wird übersprungen."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Metadaten nicht lesbar: {path} ({cause.strerror or cause})")
        self.path = path
        self.cause = cause
