"""Shared fixtures for the Detective Quest test suite."""

import pytest

from case_data import REFERENCE_MANSION
from clue_index import ClueIndex
from exploration import ExplorationSession
from game_engine import DetectiveQuestGame
from map_tree import build_map
from suspect_ledger import SuspectLedger, build_ledger


@pytest.fixture()
def mansion():
    """Root room of the reference mansion."""
    return build_map(REFERENCE_MANSION)


@pytest.fixture()
def ledger():
    """Ledger populated with the reference clue → suspect table."""
    return build_ledger(REFERENCE_MANSION)


@pytest.fixture()
def session(mansion, ledger):
    return ExplorationSession(mansion, ledger)


@pytest.fixture()
def game():
    return DetectiveQuestGame()


@pytest.fixture()
def small_case():
    """Three collected clues; c1 and c2 name X, c3 names Y."""
    clues = ClueIndex(["c1", "c2", "c3"])
    table = SuspectLedger()
    table.upsert("c1", "X")
    table.upsert("c2", "X")
    table.upsert("c3", "Y")
    return clues, table
