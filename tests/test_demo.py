"""Smoke test for the demonstration program."""

from festivals.demo import main


def test_main_prints_samples_and_agenda(capsys, monkeypatch):
    monkeypatch.delenv("FESTIVALS_RESOURCE", raising=False)
    assert main() == 0
    out = capsys.readouterr().out
    assert "Gazpatxo Rock {ROCK, PUNK, HIPHOP}" in out
    assert "Gazpatxo Rock empieza después que Black Sound Fest" in out
    assert "Agenda de festivales" in out
