"""Sortierung, Terminal-Tabelle und JSON-Report der Zähler."""

import json
from datetime import datetime
from pathlib import Path

from .counter import Counter
from .utils import format_size

ORDER_CHOICES = ("n", "f", "d", "s")


def sort_counters(counters: list[Counter], order_by: str | None) -> list[Counter]:
    """Sortiert nach Name (aufsteigend) oder Dateien/Verzeichnissen/Größe (absteigend).

    Ohne order_by bleibt die Reihenfolge des Scans erhalten.
    """
    if order_by is None:
        return list(counters)
    if order_by == "n":
        return sorted(counters, key=lambda c: c.dirpath)
    if order_by == "f":
        return sorted(counters, key=lambda c: c.n_files, reverse=True)
    if order_by == "d":
        return sorted(counters, key=lambda c: c.n_dirs, reverse=True)
    if order_by == "s":
        return sorted(counters, key=lambda c: c.total_size(), reverse=True)
    raise ValueError(f"Unbekannte Sortierung: {order_by!r}")


def format_table(counters: list[Counter], with_dir: bool, with_size: bool) -> list[str]:
    """Eine Zeile pro Wurzel, bei mehreren Wurzeln zusätzlich eine TOTAL-Zeile."""
    rows = [(c.dirpath, c.n_files, c.n_dirs, c.total_size()) for c in counters]
    if len(rows) > 1:
        rows.append((
            "TOTAL",
            sum(r[1] for r in rows),
            sum(r[2] for r in rows),
            sum(r[3] for r in rows),
        ))

    files_width = max((len(f"{r[1]:,}") for r in rows), default=1)
    dirs_width = max((len(f"{r[2]:,}") for r in rows), default=1)
    size_width = max((len(format_size(r[3])) for r in rows), default=1)

    lines = []
    for path, n_files, n_dirs, size in rows:
        cols = [f"{n_files:>{files_width},} files"]
        if with_dir:
            cols.append(f"{n_dirs:>{dirs_width},} dirs")
        if with_size:
            cols.append(f"{format_size(size):>{size_width}}")
        lines.append("  ".join(cols) + f"  {path}")
    return lines


def generate_report(counters: list[Counter], with_dir: bool, pattern: str | None) -> dict:
    """Erstellt einen strukturierten Census-Report.

    Args:
        counters: Fertige Zähler (bereits sortiert).
        with_dir: False wenn ein Filter aktiv war – dann ohne dir_count.
        pattern: Der verwendete Filter oder None.

    Returns:
        Strukturierter Report als Dict.
    """
    roots = []
    for counter in counters:
        entry = counter.as_dict()
        if not with_dir:
            entry.pop("dir_count")
        if entry["size_bytes"] is None:
            entry.pop("size_bytes")
        else:
            entry["size_human"] = format_size(entry["size_bytes"])
        roots.append(entry)

    return {
        "scan_info": {
            "scan_date": datetime.now().isoformat(),
            "total_roots": len(counters),
            "pattern": pattern,
        },
        "roots": roots,
    }


def save_report(report: dict, output_path: Path) -> None:
    """Schreibt den Report als JSON-Datei (UTF-8, mit abschließendem Zeilenumbruch)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(report, indent=2, ensure_ascii=False)
    output_path.write_text(text + "\n", encoding="utf-8")
