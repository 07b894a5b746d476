"""
Tests für die Menü-Schleife des KursplanerController.
"""

import pytest

from kursplaner.controller import KursplanerController
from kursplaner.domain import QuelleLeerError, QuelleNichtVerfuegbarError
from kursplaner.main import main, parse_args, standard_pfad
from kursplaner.service import KursplanerService

from conftest import FakeQuelle, FakeView


def _starte(eingaben, quelle):
    view = FakeView(eingaben)
    service = KursplanerService()
    KursplanerController(quelle, service, view).starte_app()
    return view, service


def test_komplette_session(beispiel_zeilen):
    view, service = _starte(["1", "2", "3", "cs201", "9"], FakeQuelle(beispiel_zeilen))

    assert service.ist_geladen()
    assert [k.kursnummer for k in view.kurslisten[0]] == ["CS101", "CS201", "MA101"]

    kurs, voraussetzungen = view.details[0]
    assert kurs.kursnummer == "CS201"
    assert voraussetzungen == [("CS101", "Intro to Programming")]
    assert view.nachrichten[-1] == "<abschied>"


def test_ungueltige_auswahl_zeigt_menue_erneut():
    view, _ = _starte(["7", "abc", "9"], FakeQuelle())

    assert view.menue_aufrufe == 3
    assert sum("Ungültige Auswahl" in n for n in view.nachrichten) == 2


def test_liste_und_kurs_vor_dem_laden():
    view, _ = _starte(["2", "3", "9"], FakeQuelle())

    assert view.kurslisten == []
    assert view.details == []
    hinweise = [n for n in view.nachrichten if "zuerst die Kursdaten laden" in n]
    assert len(hinweise) == 2


def test_kurs_nicht_gefunden_zeigt_eingabe(beispiel_zeilen):
    view, _ = _starte(["1", "3", "xy123", "9"], FakeQuelle(beispiel_zeilen))

    assert view.details == []
    assert any("Kursnummer xy123 nicht gefunden." in n for n in view.nachrichten)


@pytest.mark.parametrize(
    "fehler",
    [QuelleNichtVerfuegbarError("kurse.csv", "No such file"), QuelleLeerError("kurse.csv")],
)
def test_ladefehler_wird_gemeldet(fehler):
    view, service = _starte(["1", "2", "9"], FakeQuelle(fehler=fehler))

    assert not service.ist_geladen()
    assert any("FEHLER beim Laden" in n and "kurse.csv" in n for n in view.nachrichten)
    assert any("zuerst die Kursdaten laden" in n for n in view.nachrichten)


def test_teilweises_laden_wird_offengelegt(beispiel_zeilen):
    quelle = FakeQuelle(beispiel_zeilen + [["CS301"]])
    view, service = _starte(["1", "9"], quelle)

    assert service.ist_geladen()
    assert any("teilweise geladen" in n and "Zeile 4" in n for n in view.nachrichten)
    assert any(n.startswith("  WARNUNG:") for n in view.nachrichten)


def test_neuladen_im_menue():
    quelle = FakeQuelle([["A100", "Alpha"]])
    view = FakeView(["1", "9"])
    service = KursplanerService()
    controller = KursplanerController(quelle, service, view)
    controller.starte_app()

    quelle.zeilen = [["B100", "Beta"]]
    controller.lade_daten()
    controller.zeige_kursliste()

    assert [k.kursnummer for k in view.kurslisten[-1]] == ["B100"]


def test_leere_kursnummer_wird_ignoriert(beispiel_zeilen):
    view, _ = _starte(["1", "3", "   ", "9"], FakeQuelle(beispiel_zeilen))
    assert view.details == []
    assert not any("nicht gefunden" in n for n in view.nachrichten)


def test_parse_args_standardpfad():
    assert parse_args([]).csv is None
    assert parse_args(["kurse.csv"]).csv == "kurse.csv"
    assert standard_pfad().name == "ABCU_Advising_Program_Input.csv"


def test_main_beendet_bei_eof(monkeypatch, tmp_path, capsys):
    datei = tmp_path / "kurse.csv"
    datei.write_text("CS101,Intro\n", encoding="utf-8")
    eingaben = iter(["1", "2"])

    def fake_input(_frage=""):
        try:
            return next(eingaben)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    with pytest.raises(SystemExit) as info:
        main([str(datei)])

    assert info.value.code == 0
    ausgabe = capsys.readouterr().out
    assert "CS101: Intro" in ausgabe
    assert "Anwendung beendet." in ausgabe
