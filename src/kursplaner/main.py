"""
Entry point für den Kursplaner.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .persistence import CsvKursRepository
from .service import KursplanerService
from .view import ConsoleKursplanerView
from .controller import KursplanerController

DATEINAME = "ABCU_Advising_Program_Input.csv"


def standard_pfad() -> Path:
    """
    Standardpfad der Kursdatei.
    Erwartet: data/ABCU_Advising_Program_Input.csv im Repo-Root.
    """
    repo_root = Path(__file__).resolve().parents[2]  # .../src/kursplaner/main.py
    return repo_root / "data" / DATEINAME


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Liest die Kommandozeile."""
    parser = argparse.ArgumentParser(
        prog="kursplaner",
        description="Lädt eine Kursdatei (CSV) und zeigt Kurse mit Voraussetzungen an.",
    )
    parser.add_argument(
        "csv",
        nargs="?",
        default=None,
        help=f"Pfad zur Kursdatei (Standard: data/{DATEINAME})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Datenpfad bestimmen
    - Komponenten erstellen
    - Controller starten

    Die Datei wird erst über das Menü geladen.
    Fehlt sie, meldet der Controller das beim Laden.
    """
    args = parse_args(argv)
    data_path = Path(args.csv) if args.csv else standard_pfad()

    try:
        # Bausteine der App erstellen.
        repo = CsvKursRepository(str(data_path))
        service = KursplanerService()
        view = ConsoleKursplanerView()
        controller = KursplanerController(repo, service, view)

        # App starten.
        controller.starte_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Strg+D.
        print("\nAnwendung beendet.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        print(f"\nFEHLER: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
