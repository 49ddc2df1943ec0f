"""
exploration.py
==============
Navigation over the mansion map and clue collection.

An ExplorationSession starts in the root room and consumes navigation tokens
one at a time:

    left / right  — move to that child, remembering the current room
    back          — return to the room we came from
    exit          — finish; later tokens are not consumed

Every time a room is entered (the start room included) its clue, if any, is
checked against the session's ClueIndex: an unseen clue is collected and
reported as new, a known one is reported as already collected. The suspect the
ledger associates with the clue is reported alongside; this never changes any
state.

Invalid moves and unknown tokens are reported through NavigationStatus and
leave the session untouched. Nothing here raises for ordinary play.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import map_tree
from clue_index import ClueIndex
from map_tree import Room
from models import NavigationResult, NavigationStatus, RoomVisit
from suspect_ledger import SuspectLedger

logger = logging.getLogger("detective_quest.exploration")

LEFT  = "left"
RIGHT = "right"
BACK  = "back"
EXIT  = "exit"

VALID_TOKENS = (LEFT, RIGHT, BACK, EXIT)


class ExplorationSession:
    """
    One player's walk through a mansion.

    The map is only read; several sessions may share it. The ClueIndex is
    owned by the session and the ledger is shared read-only in ordinary play.

    Attributes:
        root:            The room exploration started from.
        current_room:    Where the player is now.
        visited_path:    Rooms to return to with ``back``, most recent last.
        collected_clues: Clues collected so far.
        ledger:          Clue → suspect table used to annotate visits.
        finished:        True once ``exit`` was processed.
        opening:         The result of entering the start room.
    """

    def __init__(
        self,
        root: Room,
        ledger: SuspectLedger,
        collected_clues: Optional[ClueIndex] = None,
    ) -> None:
        self.root = root
        self.current_room: Room = root
        self.visited_path: List[Room] = []
        self.collected_clues = collected_clues if collected_clues is not None else ClueIndex()
        self.ledger = ledger
        self.finished = False

        logger.info("Exploration started in %s.", root.name)
        self.opening = NavigationResult(
            token="",
            status=NavigationStatus.STARTED,
            room_name=root.name,
            visit=self._enter(root),
        )

    # ------------------------------------------------------------------
    # Room entry
    # ------------------------------------------------------------------

    def _enter(self, room: Room) -> RoomVisit:
        """Collect the room's clue if it is new and report what was found."""
        if not map_tree.has_clue(room):
            logger.debug("Entered %s: no clue.", room.name)
            return RoomVisit(room_name=room.name)

        newly_discovered = not self.collected_clues.contains(room.clue)
        if newly_discovered:
            self.collected_clues.insert(room.clue)
        suspect = self.ledger.lookup(room.clue)

        logger.info(
            "Entered %s: clue=%r (%s), suspect=%s",
            room.name,
            room.clue,
            "new" if newly_discovered else "already collected",
            suspect or "-",
        )
        return RoomVisit(
            room_name=room.name,
            clue=room.clue,
            newly_discovered=newly_discovered,
            suspect=suspect,
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def step(self, token: str) -> NavigationResult:
        """
        Process a single navigation token.

        Args:
            token: One of "left", "right", "back", "exit". Anything else is
                   reported as UNRECOGNIZED and ignored.

        Returns:
            A NavigationResult describing what happened. ``visit`` is set
            whenever a room was entered.
        """
        if self.finished:
            return self._stay(token, NavigationStatus.SESSION_FINISHED)

        if token in (LEFT, RIGHT):
            child = map_tree.left(self.current_room) if token == LEFT else map_tree.right(self.current_room)
            if child is None:
                logger.info("No room to the %s of %s.", token, self.current_room.name)
                return self._stay(token, NavigationStatus.NO_ROOM)
            self.visited_path.append(self.current_room)
            self.current_room = child
            return self._moved(token, NavigationStatus.MOVED)

        if token == BACK:
            if not self.visited_path:
                logger.info("Cannot go back from %s: already at the root.", self.current_room.name)
                return self._stay(token, NavigationStatus.AT_ROOT)
            self.current_room = self.visited_path.pop()
            return self._moved(token, NavigationStatus.BACKTRACKED)

        if token == EXIT:
            self.finished = True
            logger.info(
                "Exploration finished in %s with %d clue(s) collected.",
                self.current_room.name,
                len(self.collected_clues),
            )
            return self._stay(token, NavigationStatus.EXITED)

        logger.warning("Unrecognised navigation token %r ignored.", token)
        return self._stay(token, NavigationStatus.UNRECOGNIZED)

    def run(self, tokens: Iterable[str]) -> List[NavigationResult]:
        """
        Feed ``tokens`` to step() until ``exit`` or the end of the input.

        Tokens after ``exit`` are left unconsumed in the iterable.
        """
        results: List[NavigationResult] = []
        for token in tokens:
            result = self.step(token)
            results.append(result)
            if self.finished:
                break
        return results

    def _stay(self, token: str, status: NavigationStatus) -> NavigationResult:
        return NavigationResult(token=token, status=status, room_name=self.current_room.name)

    def _moved(self, token: str, status: NavigationStatus) -> NavigationResult:
        return NavigationResult(
            token=token,
            status=status,
            room_name=self.current_room.name,
            visit=self._enter(self.current_room),
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        """Number of rooms on the backtracking stack."""
        return len(self.visited_path)

    def path_names(self) -> List[str]:
        """Names from the start room down to the current room."""
        return [room.name for room in self.visited_path] + [self.current_room.name]

    def available_moves(self) -> List[str]:
        """Tokens that would currently succeed; exit is available until the session ends."""
        if self.finished:
            return []
        moves = []
        if self.current_room.left is not None:
            moves.append(LEFT)
        if self.current_room.right is not None:
            moves.append(RIGHT)
        if self.visited_path:
            moves.append(BACK)
        moves.append(EXIT)
        return moves
