"""Hilfsfunktionen – Formatierung etc."""


def format_size(size_bytes: int) -> str:
    """Konvertiert Bytes in menschenlesbare Größe (Binär-Einheiten, wie du -h)."""
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = float(size_bytes)
    for unit in ("KiB", "MiB", "GiB", "TiB"):
        size /= 1024
        if size < 1024 or unit == "TiB":
            return f"{size:.1f} {unit}"
