"""
Persistence layer (CSV)

Hier liegt das Einlesen der Kursdatei. Die Domain selbst bleibt frei von CSV-Details.
- KursQuelle: Schnittstelle (lade_zeilen)
- FileStorage: Datei lesen
- CsvZeilenParser: Text -> Zeilen mit Feldern
- CsvKursRepository: Datei-Repository

Format der Datei:
- Trenner ist das Komma.
- Felder in Anführungszeichen dürfen Kommas enthalten.
- Leere Zeilen werden übersprungen.
- Es gibt keine Kopfzeile. Eine Kopfzeile würde als Kurs geladen.
"""

from __future__ import annotations

import csv
import io
from typing import List, Optional, Protocol

from .domain import QuelleLeerError, QuelleNichtVerfuegbarError


class KursQuelle(Protocol):
    """
    Schnittstelle für die Datenquelle.
    """
    def lade_zeilen(self) -> List[List[str]]:
        """Liefert alle Zeilen als Listen von Feldern."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim Laden.
    - Nur lesen.
    - UTF-8 wird fest genutzt, ein BOM am Anfang wird ignoriert.
    """

    def lese_text(self, pfad: str) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError/UnicodeDecodeError bei Leseproblemen
        """
        with open(pfad, "r", encoding="utf-8-sig", newline="") as f:
            return f.read()


class CsvZeilenParser:
    """
    Wandelt CSV-Text in Zeilen.
    - Leerzeichen um die Felder werden entfernt.
    - Leere Felder am Zeilenende fallen weg, z.B. durch ein Komma am Ende.
    - Leere Felder mitten in der Zeile bleiben stehen, damit die Positionen stimmen.
    """

    def __init__(self, trenner: str = ",") -> None:
        self._trenner = trenner

    def parse(self, text: str) -> List[List[str]]:
        """
        Zerlegt den Text.
        Zeilen ohne Inhalt werden nicht zurückgegeben.
        """
        zeilen: List[List[str]] = []
        reader = csv.reader(
            io.StringIO(text),
            delimiter=self._trenner,
            quotechar='"',
            skipinitialspace=True,
        )

        for roh in reader:
            felder = [f.strip() for f in roh]
            while felder and not felder[-1]:
                felder.pop()
            if felder:
                zeilen.append(felder)

        return zeilen


class CsvKursRepository:
    """
    Repository für eine CSV-Datei.
    - FileStorage für Datei-Zugriff
    - CsvZeilenParser für das Zerlegen
    """

    def __init__(
        self,
        pfad: str,
        storage: Optional[FileStorage] = None,
        parser: Optional[CsvZeilenParser] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._pfad = pfad
        self._storage = storage or FileStorage()
        self._parser = parser or CsvZeilenParser()

    @property
    def pfad(self) -> str:
        """Pfad der CSV-Datei."""
        return self._pfad

    def lade_zeilen(self) -> List[List[str]]:
        """
        Lädt die Datei und zerlegt sie in Zeilen.
        - Datei fehlt oder ist nicht lesbar -> QuelleNichtVerfuegbarError
        - Datei hat keine Zeilen -> QuelleLeerError
        """
        try:
            raw = self._storage.lese_text(self._pfad)
        except (OSError, UnicodeDecodeError) as e:
            raise QuelleNichtVerfuegbarError(self._pfad, str(e)) from e

        try:
            zeilen = self._parser.parse(raw)
        except csv.Error as e:
            raise QuelleNichtVerfuegbarError(self._pfad, f"CSV-Fehler: {e}") from e

        if not zeilen:
            raise QuelleLeerError(self._pfad)

        return zeilen
