from __future__ import annotations

from scripts.book_local import _choose

OPTIONS = [("br_downtown", "Downtown"), ("br_riverside", "Riverside")]


def _feed(monkeypatch, answers: list[str]) -> None:
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_choose_rejects_zero_and_negative_numbers(monkeypatch, capsys):
    _feed(monkeypatch, ["0", "-1", "3", "2"])
    assert _choose("Branch", OPTIONS) == "br_riverside"
    assert capsys.readouterr().out.count("Not a valid choice.") == 3


def test_choose_blank_quits(monkeypatch):
    _feed(monkeypatch, [""])
    assert _choose("Branch", OPTIONS) is None
