"""
models.py
=========
Shared data models for Detective Quest: The Mansion of Clues.

Contains:
  - SeedDataError    : Raised when a mansion description cannot be used.
  - RoomSeed, LedgerSeed, MansionSeed
                     : Pydantic schemas for the seed data that describes a
                       mansion layout and its clue → suspect associations.
  - NavigationStatus : Outcome of a single navigation token.
  - RoomVisit, NavigationResult, AccusationResult
                     : Immutable results handed to whatever renders the game.
  - GameState        : Mutable dataclass tracking per-session player progress.

Keeping these in one module guarantees a single source of truth for data
shapes used across the core structures, game_engine.py, the CLI and the
Streamlit UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, field_validator, model_validator

from config import MAP_CONFIG


class SeedDataError(Exception):
    """Raised when seed data is malformed or describes an impossible mansion."""


# ---------------------------------------------------------------------------
# Pydantic seed-data schemas
# ---------------------------------------------------------------------------

class RoomSeed(BaseModel):
    """
    One room of a mansion description.

    Fields:
        name:  Unique, non-empty room name.
        clue:  Clue text found in the room; "" when the room holds none.
        left:  Name of the room reached by going left, if any.
        right: Name of the room reached by going right, if any.
    """

    name:  str
    clue:  str = ""
    left:  Optional[str] = None
    right: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("room name must not be empty")
        return value


class LedgerSeed(BaseModel):
    """A single clue → suspect association."""

    clue:    str
    suspect: str

    @field_validator("clue", "suspect")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("ledger clue and suspect must not be empty")
        return value


class MansionSeed(BaseModel):
    """
    Complete, validated description of a mansion.

    The model validator guarantees the rooms form a single binary tree hanging
    from ``root``: names are unique, every child reference resolves, no room
    has two parents, the root has none, and every room is reachable from the
    root. Names stay unique after truncation to MapConfig.max_name_length.
    A structure that passes these checks cannot contain a cycle.

    Clue text is never normalised beyond truncation to
    MapConfig.max_clue_length: a ledger entry only attributes a room's clue
    when both truncated strings match exactly.
    """

    title:  str = "Untitled mansion"
    root:   str
    rooms:  List[RoomSeed]
    ledger: List[LedgerSeed] = []

    @model_validator(mode="after")
    def _check_tree(self) -> "MansionSeed":
        by_name: Dict[str, RoomSeed] = {}
        for room in self.rooms:
            if room.name in by_name:
                raise ValueError(f"duplicate room name: {room.name!r}")
            by_name[room.name] = room

        # rooms are built with clipped names, which must stay unique too
        clipped: Dict[str, str] = {}
        for room in self.rooms:
            kept = MAP_CONFIG.clip_name(room.name)
            if kept in clipped:
                raise ValueError(
                    f"room names {clipped[kept]!r} and {room.name!r} are identical "
                    f"once truncated to {MAP_CONFIG.max_name_length} characters"
                )
            clipped[kept] = room.name

        if self.root not in by_name:
            raise ValueError(f"root room {self.root!r} is not defined")

        parents: Dict[str, str] = {}
        for room in self.rooms:
            for child in (room.left, room.right):
                if child is None:
                    continue
                if child not in by_name:
                    raise ValueError(
                        f"room {room.name!r} links to unknown room {child!r}"
                    )
                if child == self.root:
                    raise ValueError(f"root room {self.root!r} cannot be a child")
                if child in parents:
                    raise ValueError(
                        f"room {child!r} has two parents: "
                        f"{parents[child]!r} and {room.name!r}"
                    )
                parents[child] = room.name

        reachable: Set[str] = set()
        pending = [self.root]
        while pending:
            name = pending.pop()
            reachable.add(name)
            room = by_name[name]
            pending.extend(c for c in (room.left, room.right) if c is not None)

        unreachable = sorted(set(by_name) - reachable)
        if unreachable:
            raise ValueError(f"rooms not reachable from the root: {unreachable}")
        return self


# ---------------------------------------------------------------------------
# Navigation and accusation results
# ---------------------------------------------------------------------------

class NavigationStatus(Enum):
    """
    What happened when a navigation token was processed.

    NO_ROOM and AT_ROOT are the two flavours of an invalid navigation; the
    session stays where it was. UNRECOGNIZED marks a token outside
    {left, right, back, exit}. SESSION_FINISHED is returned for any token
    received after ``exit``.
    """
    STARTED          = "started"
    MOVED            = "moved"
    BACKTRACKED      = "backtracked"
    NO_ROOM          = "no_room"
    AT_ROOT          = "at_root"
    UNRECOGNIZED     = "unrecognized"
    EXITED           = "exited"
    SESSION_FINISHED = "session_finished"


@dataclass(frozen=True)
class RoomVisit:
    """
    Result of entering a room.

    Attributes:
        room_name:        Name of the room entered.
        clue:             The room's clue, or None when it holds none.
        newly_discovered: True only the first time this clue was collected.
        suspect:          Suspect the clue points to, when the ledger knows.
    """
    room_name:        str
    clue:             Optional[str] = None
    newly_discovered: bool = False
    suspect:          Optional[str] = None

    @property
    def has_clue(self) -> bool:
        return self.clue is not None


@dataclass(frozen=True)
class NavigationResult:
    """
    Result of one navigation token.

    Attributes:
        token:     The token as received.
        status:    The NavigationStatus outcome.
        room_name: The current room after the token was processed.
        visit:     The RoomVisit produced when a room was (re-)entered.
    """
    token:     str
    status:    NavigationStatus
    room_name: str
    visit:     Optional[RoomVisit] = None

    @property
    def moved(self) -> bool:
        return self.status in (NavigationStatus.MOVED, NavigationStatus.BACKTRACKED)

    @property
    def is_invalid_navigation(self) -> bool:
        return self.status in (NavigationStatus.NO_ROOM, NavigationStatus.AT_ROOT)


@dataclass(frozen=True)
class AccusationResult:
    """
    Verdict on an accusation.

    Attributes:
        suspect:             The name the player accused, verbatim.
        count:               Number of collected clues pointing to ``suspect``.
        valid:               True when ``count`` reaches the fixed threshold.
        corroborating_clues: Those clues, in ascending order.
    """
    suspect:             str
    count:               int
    valid:               bool
    corroborating_clues: Tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable snapshot of the player's progress through the mansion.

    Owned by DetectiveQuestGame and updated in place as tokens are processed.
    The front ends read it (read-only) for their progress indicators.

    Attributes:
        moves:               Tokens that changed the current room.
        invalid_moves:       Tokens rejected as invalid navigation or unknown.
        rooms_visited:       Names of every room entered at least once.
        accusation_made:     True once make_accusation() has been called.
        accusation_valid:    Verdict of that accusation.
        corroboration_count: Tally behind that verdict.
    """

    moves:               int  = 0
    invalid_moves:       int  = 0
    rooms_visited:       Set[str] = field(default_factory=set)
    accusation_made:     bool = False
    accusation_valid:    bool = False
    corroboration_count: int  = 0

    def record(self, result: NavigationResult) -> None:
        """Fold one NavigationResult into the counters."""
        if result.moved:
            self.moves += 1
        elif result.is_invalid_navigation or result.status is NavigationStatus.UNRECOGNIZED:
            self.invalid_moves += 1
        if result.visit is not None:
            self.rooms_visited.add(result.visit.room_name)

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.moves               = 0
        self.invalid_moves       = 0
        self.rooms_visited       = set()
        self.accusation_made     = False
        self.accusation_valid    = False
        self.corroboration_count = 0
