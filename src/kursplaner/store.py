"""
Datenstruktur für die Kurse

Der KursSpeicher ist ein binärer Suchbaum über die Kursnummer.
- Einfügen ohne Balancierung.
- Gleiche Kursnummern werden rechts einsortiert und bleiben erhalten.
- Suche und Durchlauf arbeiten mit Schleifen statt Rekursion.
  Bei sortierter Eingabe entsteht sonst eine lange Kette.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .domain import Kurs


@dataclass(slots=True)
class _Knoten:
    """
    Ein Knoten im Baum.
    - links: nur kleinere Kursnummern
    - rechts: gleiche oder größere Kursnummern
    """
    kurs: Kurs
    links: Optional[_Knoten] = None
    rechts: Optional[_Knoten] = None


class KursSpeicher:
    """
    Geordneter Speicher für Kurse.

    Wird beim Laden leer erzeugt, einmal befüllt und danach nur gelesen.
    Ein neuer Ladevorgang erzeugt einen neuen Speicher.
    """

    def __init__(self) -> None:
        self._wurzel: Optional[_Knoten] = None
        self._anzahl: int = 0

    def insert(self, kurs: Kurs) -> None:
        """
        Fügt einen Kurs ein.
        - Kleiner -> links weiter
        - Größer oder gleich -> rechts weiter
        - Fehlt das Kind, wird dort der neue Knoten angelegt.
        """
        neu = _Knoten(kurs)
        self._anzahl += 1

        if self._wurzel is None:
            self._wurzel = neu
            return

        knoten = self._wurzel
        while True:
            if kurs.kursnummer < knoten.kurs.kursnummer:
                if knoten.links is None:
                    knoten.links = neu
                    return
                knoten = knoten.links
            else:
                if knoten.rechts is None:
                    knoten.rechts = neu
                    return
                knoten = knoten.rechts

    def find_by_identifier(self, kursnummer: str) -> Optional[Kurs]:
        """
        Sucht einen Kurs über die exakte Kursnummer.
        Gibt None zurück, wenn es keinen Treffer gibt.
        Bei Duplikaten gewinnt der Knoten, der näher an der Wurzel liegt.
        """
        knoten = self._wurzel
        while knoten is not None:
            aktuell = knoten.kurs.kursnummer
            if kursnummer == aktuell:
                return knoten.kurs
            if kursnummer < aktuell:
                knoten = knoten.links
            else:
                knoten = knoten.rechts
        return None

    def all_in_order(self) -> Iterator[Kurs]:
        """
        Liefert alle Kurse aufsteigend nach Kursnummer.
        Jeder Aufruf startet einen neuen Durchlauf.
        """
        stapel: List[_Knoten] = []
        knoten = self._wurzel

        while stapel or knoten is not None:
            # Ganz nach links absteigen.
            while knoten is not None:
                stapel.append(knoten)
                knoten = knoten.links

            knoten = stapel.pop()
            yield knoten.kurs
            knoten = knoten.rechts

    def hoehe(self) -> int:
        """
        Höhe des Baums (Anzahl Ebenen).
        Leerer Baum: 0.
        """
        if self._wurzel is None:
            return 0

        max_tiefe = 0
        offen = [(self._wurzel, 1)]
        while offen:
            knoten, tiefe = offen.pop()
            max_tiefe = max(max_tiefe, tiefe)
            if knoten.links is not None:
                offen.append((knoten.links, tiefe + 1))
            if knoten.rechts is not None:
                offen.append((knoten.rechts, tiefe + 1))
        return max_tiefe

    def ist_leer(self) -> bool:
        """Wahr, wenn noch kein Kurs eingefügt wurde."""
        return self._wurzel is None

    def __iter__(self) -> Iterator[Kurs]:
        return self.all_in_order()

    def __len__(self) -> int:
        return self._anzahl

    def __contains__(self, kursnummer: object) -> bool:
        if not isinstance(kursnummer, str):
            return False
        return self.find_by_identifier(kursnummer) is not None
