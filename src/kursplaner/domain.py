"""
Domain beinhaltet den Kurs + die Fehlerklassen

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder CSV-Logik.

- Kurs ist eine unveränderliche Dataclass.
- Die Kursnummer wird nicht normalisiert. Groß/Klein bleibt wie in der Datei.
- Fehler sind eigene Exceptions und werden im Controller abgefangen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


class KursplanerError(Exception):
    """Basisklasse für alle fachlichen Fehler."""


class QuelleNichtVerfuegbarError(KursplanerError):
    """
    Die Datenquelle konnte nicht geöffnet oder gelesen werden.
    Die Session bleibt im bisherigen Zustand.
    """

    def __init__(self, pfad: str, grund: str = "") -> None:
        self.pfad = pfad
        self.grund = grund
        text = f"Datei konnte nicht geöffnet werden: {pfad}"
        if grund:
            text += f" ({grund})"
        super().__init__(text)


class QuelleLeerError(KursplanerError):
    """Die Datenquelle ist lesbar, enthält aber keine verwendbaren Zeilen."""

    def __init__(self, pfad: str = "") -> None:
        self.pfad = pfad
        super().__init__(f"Keine Daten in der Datei: {pfad}" if pfad else "Keine verwendbaren Daten.")


class FehlerhafteZeileError(KursplanerError):
    """
    Eine Zeile hat weniger als zwei Felder (Kursnummer, Titel).
    Die Zeilennummer ist 1-basiert, bezogen auf die gelieferten Zeilen.
    """

    def __init__(self, zeilennummer: int, felder: Sequence[str]) -> None:
        self.zeilennummer = zeilennummer
        self.felder = tuple(felder)
        super().__init__(
            f"Zeile {zeilennummer}: Kursnummer und Titel erwartet, "
            f"aber {len(self.felder)} Feld(er) gefunden: {list(self.felder)}"
        )


@dataclass(frozen=True, slots=True)
class Kurs:
    """
    Ein Kurs aus dem Katalog.
    - kursnummer: Such- und Sortierschlüssel
    - titel: freier Text
    - voraussetzungen: Kursnummern in der Reihenfolge der Datei
    """
    kursnummer: str
    titel: str
    voraussetzungen: Tuple[str, ...] = ()

    def hat_voraussetzungen(self) -> bool:
        """Wahr, wenn mindestens eine Voraussetzung eingetragen ist."""
        return len(self.voraussetzungen) > 0


def baue_kurs(felder: Sequence[str], zeilennummer: int) -> Kurs:
    """
    Baut einen Kurs aus einer Zeile.
    - Feld 0 -> kursnummer
    - Feld 1 -> titel
    - alle weiteren Felder -> voraussetzungen (Reihenfolge bleibt, leere fallen weg)

    Fehlen Kursnummer oder Titel (auch als leeres Feld), wird FehlerhafteZeileError geworfen.
    """
    if len(felder) < 2 or not felder[0].strip() or not felder[1].strip():
        raise FehlerhafteZeileError(zeilennummer, felder)

    return Kurs(
        kursnummer=felder[0],
        titel=felder[1],
        voraussetzungen=tuple(v for v in felder[2:] if v.strip()),
    )
