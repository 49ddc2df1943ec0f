"""
Tests for seed-data validation and loading.

These tests verify that:
1. The reference mansion is a valid seed
2. Structural problems (duplicates, dangling links, cycles) are rejected
3. JSON seed files load, and failures surface as SeedDataError
"""

import json

import pytest
from pydantic import ValidationError

from case_data import REFERENCE_MANSION, load_seed_file
from config import MAP_CONFIG
from models import GameState, MansionSeed, NavigationResult, NavigationStatus, RoomVisit, SeedDataError


def _seed(rooms, root="A", ledger=()):
    return {"root": root, "rooms": rooms, "ledger": list(ledger)}


# =============================================================================
# SCHEMA VALIDATION
# =============================================================================

class TestMansionSeed:

    def test_reference_mansion_is_valid(self):
        assert REFERENCE_MANSION.root == "Hall"
        assert len(REFERENCE_MANSION.rooms) == 6
        assert len(REFERENCE_MANSION.ledger) == 5
        sala_b = next(r for r in REFERENCE_MANSION.rooms if r.name == "SalaB")
        assert sala_b.clue == ""

    def test_single_room_mansion(self):
        seed = MansionSeed.model_validate(_seed([{"name": "A"}]))
        assert seed.rooms[0].left is None

    def test_duplicate_room_names(self):
        with pytest.raises(ValidationError, match="duplicate room name"):
            MansionSeed.model_validate(_seed([{"name": "A"}, {"name": "A"}]))

    def test_names_identical_after_truncation(self):
        """Names that differ only past the length limit would build twin rooms."""
        prefix = "N" * MAP_CONFIG.max_name_length
        rooms = [{"name": prefix + "1", "left": prefix + "2"}, {"name": prefix + "2"}]
        with pytest.raises(ValidationError, match="identical once truncated"):
            MansionSeed.model_validate(_seed(rooms, root=prefix + "1"))

    def test_long_names_that_stay_distinct(self):
        long_a = "A" * (MAP_CONFIG.max_name_length + 5)
        rooms = [{"name": long_a, "left": "B"}, {"name": "B"}]
        seed = MansionSeed.model_validate(_seed(rooms, root=long_a))
        assert seed.root == long_a

    def test_unknown_root(self):
        with pytest.raises(ValidationError, match="root room"):
            MansionSeed.model_validate(_seed([{"name": "A"}], root="Z"))

    def test_dangling_child(self):
        with pytest.raises(ValidationError, match="unknown room"):
            MansionSeed.model_validate(_seed([{"name": "A", "left": "B"}]))

    def test_two_parents(self):
        rooms = [
            {"name": "A", "left": "B", "right": "C"},
            {"name": "B", "left": "D"},
            {"name": "C", "right": "D"},
            {"name": "D"},
        ]
        with pytest.raises(ValidationError, match="two parents"):
            MansionSeed.model_validate(_seed(rooms))

    def test_cycle_back_to_root(self):
        rooms = [{"name": "A", "left": "B"}, {"name": "B", "left": "A"}]
        with pytest.raises(ValidationError, match="cannot be a child"):
            MansionSeed.model_validate(_seed(rooms))

    def test_detached_cycle_is_unreachable(self):
        rooms = [
            {"name": "A"},
            {"name": "B", "left": "C"},
            {"name": "C", "left": "B"},
        ]
        with pytest.raises(ValidationError, match="not reachable"):
            MansionSeed.model_validate(_seed(rooms))

    def test_empty_room_name(self):
        with pytest.raises(ValidationError):
            MansionSeed.model_validate(_seed([{"name": ""}], root=""))

    def test_empty_ledger_values(self):
        with pytest.raises(ValidationError):
            MansionSeed.model_validate(
                _seed([{"name": "A"}], ledger=[{"clue": "", "suspect": "X"}])
            )


# =============================================================================
# LOADING
# =============================================================================

class TestLoading:

    def test_load_seed_file(self, tmp_path):
        path = tmp_path / "mansion.json"
        path.write_text(
            json.dumps(
                {
                    "title": "Cottage",
                    "root": "Porch",
                    "rooms": [
                        {"name": "Porch", "clue": "muddy boots", "left": "Kitchen"},
                        {"name": "Kitchen", "clue": "broken cup"},
                    ],
                    "ledger": [{"clue": "muddy boots", "suspect": "Gardener"}],
                }
            ),
            encoding="utf-8",
        )
        seed = load_seed_file(path)
        assert seed.title == "Cottage"
        assert seed.rooms[0].left == "Kitchen"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedDataError, match="cannot read"):
            load_seed_file(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SeedDataError, match="invalid seed file"):
            load_seed_file(path)


# =============================================================================
# RESULT OBJECTS
# =============================================================================

class TestResults:

    def test_room_visit_has_clue(self):
        assert RoomVisit("SalaB").has_clue is False
        assert RoomVisit("Hall", "pegadas molhadas", True).has_clue is True

    def test_navigation_flags(self):
        moved = NavigationResult("left", NavigationStatus.MOVED, "SalaA")
        blocked = NavigationResult("right", NavigationStatus.NO_ROOM, "SalaE")
        at_root = NavigationResult("back", NavigationStatus.AT_ROOT, "Hall")
        assert moved.moved and not moved.is_invalid_navigation
        assert blocked.is_invalid_navigation and not blocked.moved
        assert at_root.is_invalid_navigation

    def test_game_state_record_and_reset(self):
        state = GameState()
        state.record(NavigationResult("left", NavigationStatus.MOVED, "SalaA", RoomVisit("SalaA")))
        state.record(NavigationResult("x", NavigationStatus.UNRECOGNIZED, "SalaA"))
        assert state.moves == 1
        assert state.invalid_moves == 1
        assert state.rooms_visited == {"SalaA"}

        state.reset()
        assert state == GameState()
