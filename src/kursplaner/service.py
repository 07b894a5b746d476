"""
Application/Use-Case layer

Der KursplanerService verwaltet die Session.
Er baut aus den Zeilen Kurse, füllt einen neuen KursSpeicher und beantwortet die Abfragen.

Zustände:
- nicht_geladen: noch kein erfolgreicher Ladevorgang
- geladen: ein Speicher ist vorhanden

Fehlerhafte Zeilen werden übersprungen und im LadeErgebnis gemeldet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .domain import FehlerhafteZeileError, Kurs, QuelleLeerError, baue_kurs
from .store import KursSpeicher


class SessionZustand(Enum):
    """Zustand der Session."""
    nicht_geladen = "nicht_geladen"
    geladen = "geladen"


@dataclass(frozen=True, slots=True)
class NichtGeladen:
    """Ergebnis, wenn vor dem Laden abgefragt wird."""


@dataclass(frozen=True, slots=True)
class KursNichtGefunden:
    """
    Ergebnis, wenn eine Kursnummer nicht existiert.
    eingabe ist die Eingabe des Nutzers, noch nicht normalisiert.
    """
    eingabe: str


@dataclass(slots=True)
class LadeErgebnis:
    """
    Ergebnis eines Ladevorgangs.
    - speicher: der neue KursSpeicher
    - geladen: Anzahl eingefügter Kurse
    - uebersprungen: fehlerhafte Zeilen
    """
    speicher: KursSpeicher
    geladen: int = 0
    uebersprungen: List[FehlerhafteZeileError] = field(default_factory=list)

    @property
    def ist_vollstaendig(self) -> bool:
        """Wahr, wenn keine Zeile übersprungen wurde."""
        return not self.uebersprungen


class KursplanerService:
    """
    Service für die Session.
    Er besitzt den aktuellen KursSpeicher und tauscht ihn beim Neuladen komplett aus.
    """

    def __init__(self) -> None:
        self._speicher: Optional[KursSpeicher] = None

    @property
    def zustand(self) -> SessionZustand:
        """Aktueller Zustand der Session."""
        if self._speicher is None:
            return SessionZustand.nicht_geladen
        return SessionZustand.geladen

    def ist_geladen(self) -> bool:
        """Wahr nach einem erfolgreichen Ladevorgang."""
        return self.zustand == SessionZustand.geladen

    def load_from_records(self, zeilen: Sequence[Sequence[str]]) -> LadeErgebnis:
        """
        Lädt Kurse aus Zeilen.
        - Jede Zeile wird zu einem Kurs.
        - Fehlerhafte Zeilen werden übersprungen und gesammelt.
        - Erst wenn alles eingefügt ist, wird der alte Speicher ersetzt.

        Gibt es keine einzige verwendbare Zeile, wird QuelleLeerError geworfen.
        Der alte Zustand bleibt dann erhalten.
        """
        speicher = KursSpeicher()
        ergebnis = LadeErgebnis(speicher=speicher)

        for nummer, felder in enumerate(zeilen, 1):
            try:
                kurs = baue_kurs(felder, nummer)
            except FehlerhafteZeileError as e:
                ergebnis.uebersprungen.append(e)
                continue
            speicher.insert(kurs)
            ergebnis.geladen += 1

        if speicher.ist_leer():
            raise QuelleLeerError()

        # Austausch in einem Schritt.
        self._speicher = speicher
        return ergebnis

    def list_all(self) -> Union[List[Kurs], NichtGeladen]:
        """Alle Kurse sortiert nach Kursnummer."""
        if self._speicher is None:
            return NichtGeladen()
        return list(self._speicher.all_in_order())

    def describe(self, eingabe: str) -> Union[Kurs, KursNichtGefunden, NichtGeladen]:
        """
        Sucht einen Kurs.
        Die Eingabe wird in Großbuchstaben umgewandelt, damit der Nutzer
        die Schreibweise der Datei nicht kennen muss.
        Die gespeicherten Kursnummern werden nicht umgewandelt.
        """
        if self._speicher is None:
            return NichtGeladen()

        kurs = self._speicher.find_by_identifier(self.normalisiere_kursnummer(eingabe))
        if kurs is None:
            return KursNichtGefunden(eingabe=eingabe)
        return kurs

    def voraussetzungen_aufloesen(self, kurs: Kurs) -> List[Tuple[str, Optional[str]]]:
        """
        Liefert zu jeder Voraussetzung den Titel.
        Unbekannte Kursnummern bekommen None.
        """
        aufgeloest: List[Tuple[str, Optional[str]]] = []
        for kursnummer in kurs.voraussetzungen:
            treffer = self._speicher.find_by_identifier(kursnummer) if self._speicher else None
            aufgeloest.append((kursnummer, treffer.titel if treffer else None))
        return aufgeloest

    @staticmethod
    def normalisiere_kursnummer(eingabe: str) -> str:
        """Entfernt Leerzeichen am Rand und wandelt in Großbuchstaben."""
        return eingabe.strip().upper()
