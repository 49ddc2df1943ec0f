"""
Tests for DetectiveQuestGame.

These tests verify that:
1. The reference scenario produces the documented verdicts
2. GameState tracks moves, invalid moves and visited rooms
3. reset() starts over without rebuilding the mansion
"""

import pytest

from config import MAP_CONFIG
from game_engine import DetectiveQuestGame
from models import MansionSeed, NavigationStatus

REFERENCE_WALK = ["left", "left", "back", "right", "back", "back", "right", "right", "exit"]


def _explore(game, tokens=REFERENCE_WALK):
    for token in tokens:
        game.command(token)
    return game


# =============================================================================
# REFERENCE SCENARIO
# =============================================================================

class TestReferenceScenario:

    @pytest.mark.parametrize(
        "suspect, count, valid",
        [
            ("Sra. Rosa", 2, True),
            ("Sr. Verde", 2, True),
            ("Sr. Azul", 1, False),
            ("Coronel Mostarda", 0, False),
        ],
    )
    def test_verdicts_after_full_walk(self, game, suspect, count, valid):
        _explore(game)
        result = game.make_accusation(suspect)
        assert (result.count, result.valid) == (count, valid)
        assert game.state.accusation_made
        assert game.state.accusation_valid is valid
        assert game.state.corroboration_count == count

    def test_collected_clues_ascending(self, game):
        _explore(game)
        assert game.collected_clues() == sorted(game.collected_clues())
        assert len(game.collected_clues()) == 5

    def test_known_suspects(self, game):
        assert sorted(game.known_suspects()) == ["Sr. Azul", "Sr. Verde", "Sra. Rosa"]

    def test_partial_walk_is_insufficient(self, game):
        """Only the Hall and SalaA: one clue each for Sr. Verde and Sra. Rosa."""
        _explore(game, ["left", "exit"])
        assert game.make_accusation("Sra. Rosa").valid is False

    def test_corroborating_clues_listed(self, game):
        _explore(game)
        result = game.make_accusation("Sra. Rosa")
        assert result.corroborating_clues == (
            "copo com pegadas digitais",
            "fio de cabelo ruivo",
        )


# =============================================================================
# STATE TRACKING
# =============================================================================

class TestState:

    def test_opening_visit_recorded(self, game):
        assert game.current_room.name == "Hall"
        assert game.history[0].status is NavigationStatus.STARTED
        assert game.state.rooms_visited == {"Hall"}
        assert game.is_exploring

    def test_moves_and_invalid_moves(self, game):
        _explore(game, ["back", "left", "dance", "right", "right"])
        assert game.state.moves == 2
        assert game.state.invalid_moves == 3
        assert game.state.rooms_visited == {"Hall", "SalaA", "SalaD"}
        assert game.history[-1].status is NavigationStatus.NO_ROOM
        assert game.last_visit.room_name == "SalaD"

    def test_accusation_ends_exploration(self, game):
        game.command("left")
        game.make_accusation("Sra. Rosa")
        assert not game.is_exploring
        assert game.session.finished
        assert game.history[-1].status is NavigationStatus.EXITED
        assert game.last_visit.room_name == "SalaA"

    def test_exit_stops_exploring(self, game):
        game.command("exit")
        assert not game.is_exploring
        assert game.result is None


# =============================================================================
# RESET
# =============================================================================

class TestReset:

    def test_reset_starts_fresh_session(self, game):
        _explore(game)
        game.make_accusation("Sra. Rosa")
        root = game.root

        game.reset()
        assert game.root is root
        assert game.result is None
        assert game.state.accusation_made is False
        assert game.state.moves == 0
        assert game.collected_clues() == ["pegadas molhadas"]
        assert game.current_room.name == "Hall"
        assert len(game.history) == 1
        assert game.is_exploring


# =============================================================================
# CUSTOM SEED
# =============================================================================

class TestCustomSeed:

    def test_game_from_custom_seed(self):
        seed = MansionSeed.model_validate(
            {
                "title": "Cottage",
                "root": "Porch",
                "rooms": [
                    {"name": "Porch", "clue": "muddy boots", "right": "Kitchen"},
                    {"name": "Kitchen", "clue": "broken cup"},
                ],
                "ledger": [
                    {"clue": "muddy boots", "suspect": "Gardener"},
                    {"clue": "broken cup", "suspect": "Gardener"},
                ],
            }
        )
        game = DetectiveQuestGame(seed)
        game.command("right")
        result = game.make_accusation("Gardener")
        assert result.count == 2
        assert result.valid

    def test_long_clues_stay_attributed(self):
        """A clue past the length limit is clipped on the room and in the ledger alike."""
        long_clue = "L" * (MAP_CONFIG.max_clue_length + 3)
        seed = MansionSeed.model_validate(
            {
                "root": "Attic",
                "rooms": [
                    {"name": "Attic", "clue": long_clue, "right": "Stairs"},
                    {"name": "Stairs", "clue": "torn glove"},
                ],
                "ledger": [
                    {"clue": long_clue, "suspect": "X"},
                    {"clue": "torn glove", "suspect": "X"},
                ],
            }
        )
        game = DetectiveQuestGame(seed)
        assert game.root.truncated
        assert game.last_visit.suspect == "X"

        game.command("right")
        result = game.make_accusation("X")
        assert result.count == 2
        assert result.valid
