import io
import sys

import pytest

from thaumsolver.cli import main

NOTES = {
    "Aer.md": "",
    "Ignis.md": "",
    "Terra.md": "",
    "Lux.md": "[[Aer]][[Ignis]]\n",
    "Vitreus.md": "[[Terra]][[Aer]]\n",
}


@pytest.fixture
def workspace(tmp_path):
    notes = tmp_path / "notes"
    notes.mkdir()
    for name, text in NOTES.items():
        (notes / name).write_text(text)
    return tmp_path


def _run(workspace, monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main(
        [
            "--notes", str(workspace / "notes"),
            "--network", str(workspace / "network.txt"),
            "--history", str(workspace / "history.txt"),
        ]
    )


def test_reload_writes_files_and_finds_commons(workspace, monkeypatch, capsys):
    status = _run(workspace, monkeypatch, "1\n1 2 Ignis Terra\n0\n")
    out = capsys.readouterr().out
    assert status == 0
    assert (workspace / "network.txt").read_text().splitlines()[0] == "5"
    assert (workspace / "history.txt").exists()
    common_line = next(l for l in out.splitlines() if "Vitreus" in l)
    assert set(common_line.replace("?", "").split()) == {n[:-3] for n in NOTES}


def test_spelling_error_reported(workspace, monkeypatch, capsys):
    _run(workspace, monkeypatch, "1\n0\n")
    capsys.readouterr()
    status = _run(workspace, monkeypatch, "0\n2 Ignis Aqua\n1 2 Aer Aqua\n0\n")
    out = capsys.readouterr().out
    assert status == 0
    assert out.count("Spelling Error") == 2


def test_menu_printed(workspace, monkeypatch, capsys):
    _run(workspace, monkeypatch, "1\n")
    out = capsys.readouterr().out
    assert "0: Load from file\n1: Reload and save\n? " in out
    assert "2 nodeA nodeB: lists fastest paths between them" in out


def test_missing_files_fail(workspace, monkeypatch, capsys):
    status = _run(workspace, monkeypatch, "0\n0\n")
    assert status == 1
    assert "thaumsolver:" in capsys.readouterr().err