"""
Gemeinsame Fixtures für die Tests.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pytest

from kursplaner.domain import Kurs
from kursplaner.service import KursplanerService


class FakeView:
    """
    View für Tests.
    Eingaben kommen aus einer Liste, Ausgaben werden gesammelt.
    """

    def __init__(self, eingaben: Sequence[str]) -> None:
        self._eingaben = list(eingaben)
        self.nachrichten: List[str] = []
        self.kurslisten: List[List[Kurs]] = []
        self.details: List[Tuple[Kurs, List[Tuple[str, Optional[str]]]]] = []
        self.menue_aufrufe = 0

    def render_willkommen(self) -> None:
        pass

    def render_abschied(self) -> None:
        self.nachrichten.append("<abschied>")

    def render_menue(self) -> None:
        self.menue_aufrufe += 1

    def prompt(self, frage: str) -> str:
        if not self._eingaben:
            raise EOFError
        return self._eingaben.pop(0)

    def show_message(self, text: str) -> None:
        self.nachrichten.append(text)

    def render_kursliste(self, kurse) -> None:
        self.kurslisten.append(list(kurse))

    def render_kurs(self, kurs, voraussetzungen) -> None:
        self.details.append((kurs, list(voraussetzungen)))


class FakeQuelle:
    """Liefert feste Zeilen oder wirft einen vorgegebenen Fehler."""

    def __init__(self, zeilen=None, fehler: Optional[Exception] = None) -> None:
        self.zeilen = zeilen or []
        self.fehler = fehler

    def lade_zeilen(self):
        if self.fehler is not None:
            raise self.fehler
        return [list(z) for z in self.zeilen]


@pytest.fixture
def beispiel_zeilen():
    """Drei Kurse aus dem Rundlauf-Szenario."""
    return [
        ["CS101", "Intro to Programming"],
        ["CS201", "Data Structures", "CS101"],
        ["MA101", "Calculus I"],
    ]


@pytest.fixture
def service() -> KursplanerService:
    return KursplanerService()


@pytest.fixture
def geladener_service(service, beispiel_zeilen) -> KursplanerService:
    service.load_from_records(beispiel_zeilen)
    return service
