"""
game_engine.py
==============
Core game engine for Detective Quest: The Mansion of Clues.

Contains:
  DetectiveQuestGame — the single orchestrating class that builds the mansion
                       map and suspect ledger from seed data, owns the
                       exploration session and the GameState, and exposes a
                       clean API consumed by both the Streamlit UI (app.py)
                       and the CLI runner (cli.py).

Public API summary:
    game = DetectiveQuestGame()
    game.current_room                → Room
    game.last_visit                  → RoomVisit
    game.command(token)              → NavigationResult
    game.collected_clues()           → list[str], ascending
    game.known_suspects()            → list[str]
    game.make_accusation(name)       → AccusationResult
    game.reset()                     → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
under the ``detective_quest`` namespace. Configure level and destination once
at your entry point (cli.py / app.py); this module never configures handlers.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import accusation
from case_data import REFERENCE_MANSION
from exploration import ExplorationSession
from map_tree import Room, build_map
from models import AccusationResult, GameState, MansionSeed, NavigationResult, RoomVisit
from suspect_ledger import SuspectLedger, build_ledger

logger = logging.getLogger("detective_quest.game_engine")


class DetectiveQuestGame:
    """
    Main game engine.

    The map and the ledger are built once per game object and survive
    reset(); only the session (and with it the collected clues) and the
    GameState start over.

    Attributes:
        seed:     The MansionSeed the game was built from.
        root:     Root room of the mansion map.
        ledger:   Clue → suspect table.
        session:  The current ExplorationSession.
        state:    GameState counters for the front ends.
        history:  Every NavigationResult of the current session, opening
                  visit first.
        result:   The AccusationResult once an accusation was made.
    """

    def __init__(self, seed: Optional[MansionSeed] = None) -> None:
        self.seed = seed if seed is not None else REFERENCE_MANSION
        self.root: Room = build_map(self.seed)
        self.ledger: SuspectLedger = build_ledger(self.seed)
        self.state = GameState()
        self._start_session()

        logger.info(
            "DetectiveQuestGame initialised — mansion=%r, suspects=%d",
            self.seed.title,
            len(self.ledger.suspects()),
        )

    def _start_session(self) -> None:
        self.session = ExplorationSession(self.root, self.ledger)
        self.history: List[NavigationResult] = [self.session.opening]
        self.result: Optional[AccusationResult] = None
        self.state.record(self.session.opening)

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> Room:
        return self.session.current_room

    @property
    def last_visit(self) -> RoomVisit:
        """The most recent RoomVisit; the opening visit guarantees one exists."""
        return next(r.visit for r in reversed(self.history) if r.visit is not None)

    @property
    def is_exploring(self) -> bool:
        """True until the player exits the mansion or makes an accusation."""
        return not self.session.finished and not self.state.accusation_made

    def command(self, token: str) -> NavigationResult:
        """
        Apply one navigation token to the session.

        Args:
            token: "left", "right", "back" or "exit"; anything else is
                   reported as unrecognised.

        Returns:
            The session's NavigationResult, also appended to ``history``.
        """
        result = self.session.step(token)
        self.history.append(result)
        self.state.record(result)
        return result

    def collected_clues(self) -> List[str]:
        """Clues collected so far, in ascending order."""
        return self.session.collected_clues.inorder()

    def known_suspects(self) -> List[str]:
        """Distinct suspect names the ledger knows about."""
        return self.ledger.suspects()

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def make_accusation(self, suspect_name: str) -> AccusationResult:
        """
        Accuse ``suspect_name`` using the clues collected in this session.

        Ends exploration if the player had not exited yet. The name is
        matched exactly against the ledger's suspect names.

        Returns:
            The AccusationResult, also stored on ``result`` and in ``state``.
        """
        if not self.session.finished:
            self.command("exit")

        result = accusation.evaluate(
            self.session.collected_clues, self.ledger, suspect_name
        )

        self.result                    = result
        self.state.accusation_made     = True
        self.state.accusation_valid    = result.valid
        self.state.corroboration_count = result.count

        logger.info(
            "Accusation evaluated — suspect=%r, count=%d, valid=%s, moves=%d",
            suspect_name,
            result.count,
            result.valid,
            self.state.moves,
        )
        return result

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a new exploration of the same mansion with no clues collected."""
        logger.info("Game reset requested — starting a new session.")
        self.state.reset()
        self._start_session()
