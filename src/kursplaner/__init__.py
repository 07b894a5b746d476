"""
kursplaner package

Dieses Paket implementiert den Konsolen-Kursplaner für den ABCU-Kurskatalog.
Kurse werden aus einer CSV-Datei geladen, in einem binären Suchbaum sortiert
und können als Liste oder einzeln mit Voraussetzungen angezeigt werden.

Schichtenarchitektur:
- domain.py: Kurs + Fehlerklassen
- store.py: KursSpeicher (binärer Suchbaum)
- persistence.py: CSV-Einlesen
- service.py: Session (Laden, Liste, Details)
- view.py: Konsolen-Ausgabe
- controller.py: Menü-Orchestrierung
- main.py: Einstiegspunkt
"""
