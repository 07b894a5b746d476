"""
UI layer für die Console

Diese View zeigt den Kursplaner in der Konsole.
- Text formatieren und ausgeben
- Kursliste und Kursdetails darstellen
- Eingaben und Menü anzeigen
"""

from __future__ import annotations

import shutil
import textwrap
from typing import List, Optional, Sequence, Tuple

from .domain import Kurs


class ConsoleKursplanerView:
    """
    View für die Konsole.

    Die Breite wird automatisch ermittelt anhand der Breite des aktuellen Fensters.
    """

    def __init__(self, width: int | None = None) -> None:
        """
        Erstellt die View.
        - Wenn width None ist, wird die Terminal-Breite genutzt.
        - Es gibt eine Mindestbreite.
        """
        term_cols = shutil.get_terminal_size(fallback=(100, 24)).columns

        if width is None:
            width = term_cols

        self._width = max(40, width)

    def render_willkommen(self) -> None:
        """Begrüßung beim Start."""
        print(self._banner("Willkommen beim ABCU Kursplaner"))

    def render_abschied(self) -> None:
        """Verabschiedung beim Beenden."""
        print()
        print(self._banner("Danke für die Nutzung des Kursplaners!"))
        print()

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║            HAUPTMENÜ                  ║")
        print("╠═══════════════════════════════════════╣")
        print("║  1) Kursdaten laden                   ║")
        print("║  2) Kursliste ausgeben                ║")
        print("║  3) Kurs anzeigen                     ║")
        print("║  9) Beenden                           ║")
        print("╚═══════════════════════════════════════╝")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_kursliste(self, kurse: Sequence[Kurs]) -> None:
        """
        Gibt alle Kurse aus.
        Eine Zeile pro Kurs: KURSNUMMER: Titel
        """
        print(self._build_kursliste(kurse))

    def render_kurs(self, kurs: Kurs, voraussetzungen: Sequence[Tuple[str, Optional[str]]]) -> None:
        """Zeigt einen Kurs mit Voraussetzungen."""
        print(self._build_kurs(kurs, voraussetzungen))

    def _build_kursliste(self, kurse: Sequence[Kurs]) -> str:
        """
        Baut die Kursliste als Text.
        """
        lines: List[str] = ["", "=== KURSLISTE ==="]
        for k in kurse:
            lines.extend(self._wrapped(f"{k.kursnummer}: {k.titel}"))
        lines.append(f"({len(kurse)} Kurse)")
        return "\n".join(lines)

    def _build_kurs(self, kurs: Kurs, voraussetzungen: Sequence[Tuple[str, Optional[str]]]) -> str:
        """
        Baut die Detailansicht.
        - Erste Zeile: KURSNUMMER, Titel
        - Danach die Voraussetzungen in Dateireihenfolge
        """
        lines: List[str] = [""]
        lines.extend(self._wrapped(f"{kurs.kursnummer}, {kurs.titel}"))

        if not voraussetzungen:
            lines.append("Voraussetzungen: keine")
            return "\n".join(lines)

        lines.extend(self._wrapped("Voraussetzungen: " + ", ".join(nr for nr, _ in voraussetzungen)))

        # Titel nur, wenn die Voraussetzung im Katalog steht.
        for nr, titel in voraussetzungen:
            titel_txt = titel if titel is not None else "(nicht im Katalog)"
            lines.extend(self._wrapped(f"  - {nr}: {titel_txt}"))

        return "\n".join(lines)

    def _banner(self, text: str) -> str:
        """
        Baut einen Rahmen um einen kurzen Text.
        """
        inner = min(len(text) + 2, self._width - 2)
        rand = "=" * (inner + 2)
        return "\n".join([rand, "|" + text[:inner].center(inner) + "|", rand])

    def _wrapped(self, text: str) -> List[str]:
        """
        Bricht langen Text um.
        """
        wrapped = textwrap.wrap(
            text,
            width=self._width,
            break_long_words=False,
            break_on_hyphens=False,
            subsequent_indent="    ",
        )
        return wrapped or [""]
