"""
Controller layer

Der KursplanerController steuert die App. Er verbindet Repository, Service und View.

Aufgaben:
- Kursdaten laden
- Kursliste und Kursdetails über den KursplanerService abfragen
- Ausgabe über ConsoleKursplanerView
- Menü anzeigen und Eingaben verarbeiten
"""

from __future__ import annotations

from .domain import KursplanerError
from .persistence import KursQuelle
from .service import KursNichtGefunden, KursplanerService, NichtGeladen
from .view import ConsoleKursplanerView


class KursplanerController:
    """
    Hauptcontroller für den Kursplaner.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Service und View
    - Fehler abfangen und als Nachricht anzeigen
    """

    def __init__(
        self,
        repo: KursQuelle,
        service: KursplanerService,
        view: ConsoleKursplanerView
    ) -> None:
        """
        Erstellt den Controller.

        - repo: liefert die Zeilen der Kursdatei
        - service: Session mit dem KursSpeicher
        - view: Ein-/Ausgabe
        """
        self._repo = repo
        self._service = service
        self._view = view

    def starte_app(self) -> None:
        """
        Startet die Anwendung.
        Die Schleife läuft bis zur Auswahl 9.
        """
        self._view.render_willkommen()

        while True:
            self._view.render_menue()
            choice = self._view.prompt("Auswahl: ").strip()

            if choice == "1":
                self.lade_daten()
            elif choice == "2":
                self.zeige_kursliste()
            elif choice == "3":
                self.zeige_kurs()
            elif choice == "9":
                self._beenden()
                break
            else:
                self._view.show_message("\nUngültige Auswahl. Bitte erneut versuchen.")

    def lade_daten(self) -> None:
        """
        Lädt die Kursdatei neu.
        Bei einem Fehler bleibt der bisherige Stand erhalten.
        """
        try:
            zeilen = self._repo.lade_zeilen()
            ergebnis = self._service.load_from_records(zeilen)
        except KursplanerError as e:
            self._view.show_message(f"\nFEHLER beim Laden der Daten: {e}")
            return

        if ergebnis.ist_vollstaendig:
            self._view.show_message(f"\nKursdaten erfolgreich geladen ({ergebnis.geladen} Kurse).")
            return

        # Teilweise geladen: immer offenlegen.
        nummern = ", ".join(str(f.zeilennummer) for f in ergebnis.uebersprungen)
        self._view.show_message(
            f"\nKursdaten teilweise geladen: {ergebnis.geladen} Kurse, "
            f"{len(ergebnis.uebersprungen)} fehlerhafte Zeile(n) übersprungen (Zeile {nummern})."
        )
        for fehler in ergebnis.uebersprungen:
            self._view.show_message(f"  WARNUNG: {fehler}")

    def zeige_kursliste(self) -> None:
        """Zeigt alle Kurse sortiert nach Kursnummer."""
        kurse = self._service.list_all()
        if isinstance(kurse, NichtGeladen):
            self._view.show_message(
                "\nBitte zuerst die Kursdaten laden (Auswahl 1), bevor die Kursliste ausgegeben wird."
            )
            return

        self._view.render_kursliste(kurse)

    def zeige_kurs(self) -> None:
        """
        Fragt eine Kursnummer ab und zeigt den Kurs.
        Groß/Klein spielt bei der Eingabe keine Rolle.
        """
        if not self._service.ist_geladen():
            self._view.show_message(
                "\nBitte zuerst die Kursdaten laden (Auswahl 1), bevor ein Kurs angezeigt wird."
            )
            return

        eingabe = self._view.prompt("Kursnummer: ")
        if not eingabe.strip():
            return

        ergebnis = self._service.describe(eingabe)
        if isinstance(ergebnis, KursNichtGefunden):
            self._view.show_message(f"\nKursnummer {ergebnis.eingabe.strip()} nicht gefunden.")
            return
        if isinstance(ergebnis, NichtGeladen):
            self._view.show_message("\nBitte zuerst die Kursdaten laden (Auswahl 1).")
            return

        self._view.render_kurs(ergebnis, self._service.voraussetzungen_aufloesen(ergebnis))

    def _beenden(self) -> None:
        """Beendet das Programm."""
        self._view.render_abschied()
