"""Tree Census – CLI-Einstiegspunkt.

Zählt pro Wurzelverzeichnis Dateien, Unterverzeichnisse und optional die
tatsächlich belegte Größe (Hardlinks einmal, Symlinks ohne Größe).
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .census import CensusConfig, run_census
from .errors import ConfigurationError
from .report import ORDER_CHOICES, format_table, generate_report, save_report, sort_counters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree-census",
        description="Zählt Dateien, Verzeichnisse und Belegung unterhalb der angegebenen Verzeichnisse.",
    )
    parser.add_argument("paths", nargs="*", default=["."], help="Wurzelverzeichnisse (default: .)")
    parser.add_argument("-a", "--all", dest="all_files", action="store_true",
                        help="Versteckte Einträge (Punkt-Präfix) mitzählen")
    parser.add_argument("-s", "--size", dest="with_size", action="store_true",
                        help="Belegte Größe berechnen")
    parser.add_argument("-p", "--pattern", help="Nur Dateien zählen, deren Name auf REGEX passt")
    parser.add_argument("-n", "--non-recursive", action="store_true",
                        help="Sequentiell zählen, eine Wurzel nach der anderen (ohne Thread-Pool)")
    parser.add_argument("-t", "--threads", type=int, default=None,
                        help="Anzahl Worker-Threads (default: Anzahl CPU-Kerne)")
    parser.add_argument("-o", "--order-by", choices=ORDER_CHOICES,
                        help="Sortierung: n=Name, f=Dateien, d=Verzeichnisse, s=Größe")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Warnungen für nicht lesbare Einträge ausgeben")
    parser.add_argument("--json", dest="json_path", help="Zusätzlich JSON-Report schreiben")
    parser.add_argument("--progress", action="store_true", help="Fortschrittsbalken anzeigen")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> CensusConfig:
    if args.threads is not None and args.threads < 0:
        raise ConfigurationError(f"Ungültige Thread-Anzahl: {args.threads}")
    return CensusConfig(
        roots=args.paths,
        all_files=args.all_files,
        with_size=args.with_size,
        pattern=args.pattern,
        non_recursive=args.non_recursive,
        threads=args.threads,
        verbose=args.verbose,
        order_by=args.order_by,
        progress=args.progress,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = config_from_args(args)
        counters = run_census(config)
    except ConfigurationError as e:
        print(f"Fehler: {e}", file=sys.stderr)
        sys.exit(2)

    if not counters:
        print("Fehler: Keine Wurzel konnte gezählt werden.", file=sys.stderr)
        sys.exit(1)

    counters = sort_counters(counters, config.order_by)
    for line in format_table(counters, config.with_dir, config.size_requested):
        print(line)

    if args.json_path:
        output_path = Path(args.json_path).resolve()
        save_report(generate_report(counters, config.with_dir, config.pattern), output_path)
        print(f"Report gespeichert: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
