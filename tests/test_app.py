"""Tests for the console entry point."""

import io

import pytest

from chesshelper import app


def _run(monkeypatch: pytest.MonkeyPatch, lines: str, *argv: str) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    return app.main(list(argv))


class TestMain:
    def test_moves_and_messages(self, monkeypatch, capsys) -> None:
        assert _run(monkeypatch, "e4\nNf5\n:quit\n", "--analysis") == 0
        out = capsys.readouterr().out
        assert "Incorrect move: Nf5" in out

    def test_piece_map_command(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, ":map\n:quit\n")
        assert "n: {general=b1, right=g1}" in capsys.readouterr().out

    def test_key_and_opponent(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, ":key w e4\n:opp e5\n:key s c3\n:quit\n")
        out = capsys.readouterr().out
        assert "error" not in out

    def test_bad_commands(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, ":key w e9\n:key ? e4\n:opp Zz9\n:nope\n")
        out = capsys.readouterr().out
        assert "invalid square" in out
        assert "unbound key" in out
        assert "unknown command" in out
        assert out.count("error:") == 4

    def test_game_over_ends_session(self, monkeypatch, capsys) -> None:
        _run(monkeypatch, "f3\ne5\ng4\nQh4\ne4\n", "--analysis")
        out = capsys.readouterr().out
        assert "0-1" in out
        assert "Incorrect move: e4" not in out
