"""
Launcher für den Kursplaner aus dem Quellbaum.

Aufruf ohne vorherige Installation:
    python run.py                      (Standarddatei aus data/)
    python run.py pfad/zur/datei.csv   (eigene Kursdatei)

Nach "pip install ." steht stattdessen der Befehl "kursplaner" bereit.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Paket aus src/ importierbar machen
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from kursplaner.main import main

if __name__ == "__main__":
    main()
