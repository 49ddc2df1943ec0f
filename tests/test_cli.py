"""
Tests for the command-line front end and the shared wording helpers.

The CLI is driven with scripted input and a list-collecting printer, so no
terminal is involved.
"""

import json

import pytest

from cli import main, run_cli, to_token
from models import AccusationResult, NavigationResult, NavigationStatus, RoomVisit
from ui_helpers import (
    format_clue_list,
    format_navigation,
    format_verdict,
    format_visit,
    lines_to_html,
)


def _scripted(lines):
    """input() replacement that replays ``lines`` then raises EOFError."""
    feed = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return fake_input


def _play(lines):
    out = []
    result = run_cli(input_fn=_scripted(lines), output_fn=out.append)
    return result, out


# =============================================================================
# TOKEN MAPPING
# =============================================================================

class TestToToken:

    @pytest.mark.parametrize(
        "raw, token",
        [
            ("l", "left"), ("e", "left"), ("LEFT", "left"), (" esquerda ", "left"),
            ("r", "right"), ("d", "right"), ("direita", "right"),
            ("b", "back"), ("voltar", "back"),
            ("s", "exit"), ("q", "exit"), ("Quit", "exit"),
        ],
    )
    def test_aliases(self, raw, token):
        assert to_token(raw) == token

    def test_unknown_word_passes_through(self):
        assert to_token(" dance ") == "dance"


# =============================================================================
# GAME LOOP
# =============================================================================

class TestRunCli:

    def test_reference_playthrough(self):
        result, out = _play(["e", "e", "b", "d", "b", "b", "d", "d", "s", "Sra. Rosa"])
        assert result.valid is True
        assert result.count == 2
        assert "You found a clue: pegadas molhadas" in out
        assert "Clue here: fio de cabelo ruivo (already collected)" in out
        assert " -> This clue points to: Sr. Verde" in out
        assert "No clue in this room." in out
        assert "Result: ACCUSATION UPHELD. Case closed." in out

    def test_invalid_commands_reported(self):
        _, out = _play(["b", "fly", "", "s", "Sr. Azul"])
        assert "You are at the entrance; there is nowhere to go back to." in out
        assert "Invalid command: 'fly'." in out

    def test_no_room_reported(self):
        _, out = _play(["r", "r", "r", "s", "Sr. Verde"])
        assert "There is no room to the right." in out

    def test_clue_and_suspect_lists(self):
        _, out = _play(["s", "Sr. Verde"])
        clues_at = out.index("Collected clues:")
        assert out[clues_at + 1] == " - pegadas molhadas"
        suspects_at = out.index("Known suspects:")
        assert sorted(out[suspects_at + 1:suspects_at + 4]) == [
            " - Sr. Azul", " - Sr. Verde", " - Sra. Rosa",
        ]

    def test_insufficient_accusation(self):
        result, out = _play(["s", "Sr. Verde"])
        assert result.count == 1
        assert result.valid is False
        assert "Only 1 clue points to this suspect." in out

    def test_eof_during_exploration_moves_to_accusation(self):
        result, out = _play([])
        assert result is None
        assert "Input closed; ending the exploration." in out
        assert "No suspect named. Closing the case file." in out


# =============================================================================
# ENTRY POINT
# =============================================================================

class TestMain:

    def test_bad_seed_file_exits_with_error(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"root": "A", "rooms": []}), encoding="utf-8")
        assert main(["--seed", str(path)]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_custom_seed_file(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "tiny.json"
        path.write_text(
            json.dumps({"title": "Shed", "root": "Shed", "rooms": [{"name": "Shed", "clue": "oil"}]}),
            encoding="utf-8",
        )
        monkeypatch.setattr("builtins.input", _scripted(["exit", ""]))
        assert main(["--seed", str(path)]) == 0
        assert "SHED" in capsys.readouterr().out


# =============================================================================
# WORDING HELPERS
# =============================================================================

class TestFormatting:

    def test_format_visit_new_clue(self):
        lines = format_visit(RoomVisit("Hall", "pegadas molhadas", True, "Sr. Verde"))
        assert lines == [
            "-- Current room: Hall",
            "You found a clue: pegadas molhadas",
            " -> This clue points to: Sr. Verde",
        ]

    def test_format_navigation_moved(self):
        result = NavigationResult("left", NavigationStatus.MOVED, "SalaA", RoomVisit("SalaA"))
        assert format_navigation(result) == [
            "Going left: SalaA",
            "-- Current room: SalaA",
            "No clue in this room.",
        ]

    def test_format_clue_list_empty(self):
        assert format_clue_list([]) == ["No clues collected."]

    def test_format_verdict_upheld(self):
        lines = format_verdict(AccusationResult("X", 2, True, ("c1", "c2")))
        assert lines[1] == "2 clues point to this suspect:"
        assert lines[-1] == "Result: ACCUSATION UPHELD. Case closed."

    def test_lines_to_html_escapes_seed_text(self):
        html = lines_to_html(["-- Current room: <b>Attic</b>", "You found a clue: a & b"])
        assert html == (
            "-- Current room: &lt;b&gt;Attic&lt;/b&gt;<br>You found a clue: a &amp; b"
        )
