"""
accusation.py
=============
Deterministic, side-effect-free accusation logic.

An accusation names one suspect. It stands when at least
MIN_CORROBORATING_CLUES of the collected clues point to that suspect in the
ledger. Names are compared exactly: "sra. rosa" does not corroborate
"Sra. Rosa".

Kept apart from the game engine so it can be unit-tested without a map or a
session.
"""

from __future__ import annotations

import logging

from clue_index import ClueIndex
from config import MIN_CORROBORATING_CLUES
from models import AccusationResult
from suspect_ledger import SuspectLedger

logger = logging.getLogger("detective_quest.accusation")


def tally(collected_clues: ClueIndex, ledger: SuspectLedger, suspect_name: str) -> int:
    """
    Count the collected clues whose ledger entry names ``suspect_name``.

    Clues without a ledger entry count for nobody. The count does not depend
    on the order the clues are visited in.

    Examples:
        clues {c1, c2, c3}, ledger {c1→X, c2→X, c3→Y}
        >>> tally(clues, ledger, "X")
        2
        >>> tally(clues, ledger, "Y")
        1
    """
    return sum(1 for clue in collected_clues if ledger.lookup(clue) == suspect_name)


def is_accusation_valid(count: int) -> bool:
    """True when ``count`` reaches the fixed corroboration threshold (2)."""
    return count >= MIN_CORROBORATING_CLUES


def evaluate(
    collected_clues: ClueIndex,
    ledger: SuspectLedger,
    suspect_name: str,
) -> AccusationResult:
    """
    Judge an accusation against the clues collected so far.

    Args:
        collected_clues: The session's ClueIndex.
        ledger:          Clue → suspect table.
        suspect_name:    Name typed by the player, used verbatim.

    Returns:
        AccusationResult with the tally, the verdict and the corroborating
        clues in ascending order.
    """
    corroborating = tuple(
        clue for clue in collected_clues if ledger.lookup(clue) == suspect_name
    )
    count = len(corroborating)
    valid = is_accusation_valid(count)

    logger.info(
        "Accusation of %r — corroborating clues=%d, valid=%s",
        suspect_name,
        count,
        valid,
    )
    return AccusationResult(
        suspect=suspect_name,
        count=count,
        valid=valid,
        corroborating_clues=corroborating,
    )
