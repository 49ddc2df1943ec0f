"""
suspect_ledger.py
=================
Clue → suspect table: a fixed-size hash map with chained buckets.

The bucket of a clue is chosen by a multiplicative rolling hash over its
UTF-8 bytes (seed 5381, multiplier 33, kept to an unsigned 64-bit word)
reduced modulo the bucket count. Collisions are chained; a new entry goes to
the front of its chain, and re-inserting a known clue overwrites its suspect
in place.

Both parameters come from LedgerConfig in config.py. The table is sized for
the handful of clues a mansion holds and does not grow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from config import LEDGER_CONFIG, MAP_CONFIG
from models import MansionSeed

logger = logging.getLogger("detective_quest.suspect_ledger")

_WORD_MASK = (1 << 64) - 1


def hash_clue(clue: str, bucket_count: int = LEDGER_CONFIG.bucket_count) -> int:
    """
    Return the bucket index of ``clue``.

    Computes ``h = h * 33 + byte`` for every UTF-8 byte, starting from 5381,
    wrapping at 64 bits, then returns ``h % bucket_count``.

    Example:
        >>> hash_clue("a", 17)   # (5381 * 33 + 97) % 17
        3
    """
    h = LEDGER_CONFIG.hash_seed
    for byte in clue.encode("utf-8"):
        h = (h * LEDGER_CONFIG.hash_multiplier + byte) & _WORD_MASK
    return h % bucket_count


@dataclass
class LedgerEntry:
    """One association; ``suspect`` is overwritten on upsert."""

    clue:    str
    suspect: str


class SuspectLedger:
    """
    Hash table mapping clue text to the suspect it implicates.

    Attributes:
        bucket_count: Number of buckets, fixed at construction.
    """

    def __init__(self, bucket_count: int = LEDGER_CONFIG.bucket_count) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self.bucket_count = bucket_count
        self._buckets: List[List[LedgerEntry]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def _index(self, clue: str) -> int:
        return hash_clue(clue, self.bucket_count)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def upsert(self, clue: str, suspect: str) -> None:
        """
        Associate ``clue`` with ``suspect``.

        If the clue already has an entry its suspect is replaced; otherwise a
        new entry is placed at the front of the clue's bucket chain. An empty
        clue is ignored.
        """
        if not clue:
            logger.debug("Ignoring upsert with an empty clue (suspect=%r).", suspect)
            return

        chain = self._buckets[self._index(clue)]
        for entry in chain:
            if entry.clue == clue:
                if entry.suspect != suspect:
                    logger.debug(
                        "Ledger overwrite: %r %r -> %r", clue, entry.suspect, suspect
                    )
                entry.suspect = suspect
                return

        chain.insert(0, LedgerEntry(clue, suspect))
        self._size += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect linked to ``clue``, or None if the ledger has no entry."""
        if not clue:
            return None
        for entry in self._buckets[self._index(clue)]:
            if entry.clue == clue:
                return entry.suspect
        return None

    def bucket(self, index: int) -> List[LedgerEntry]:
        """Return a copy of the chain stored in bucket ``index``, front first."""
        return list(self._buckets[index])

    def entries(self) -> Iterator[LedgerEntry]:
        """Yield every entry, bucket 0 upwards, each chain front to back."""
        for chain in self._buckets:
            yield from chain

    def suspects(self) -> List[str]:
        """
        Return the distinct suspect names known to the ledger.

        Names come out in the order entries() visits them, first occurrence
        kept.
        """
        seen: List[str] = []
        for entry in self.entries():
            if entry.suspect not in seen:
                seen.append(entry.suspect)
        return seen

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SuspectLedger(entries={self._size}, buckets={self.bucket_count})"


def build_ledger(seed: MansionSeed) -> SuspectLedger:
    """
    Create a ledger populated with the seed's associations, in seed order.

    Ledger clues are truncated to MapConfig.max_clue_length, the same limit
    create_room() applies, so they match the text that lands on the rooms.
    Room clues missing from the ledger are reported at INFO: they stay
    unattributed during the game.
    """
    ledger = SuspectLedger()
    for item in seed.ledger:
        clue = MAP_CONFIG.clip_clue(item.clue)
        if clue != item.clue:
            logger.warning(
                "Ledger clue for %r truncated to %d characters.",
                item.suspect,
                MAP_CONFIG.max_clue_length,
            )
        ledger.upsert(clue, item.suspect)

    room_clues = [MAP_CONFIG.clip_clue(r.clue) for r in seed.rooms]
    unattributed = [c for c in room_clues if c and c not in ledger]
    if unattributed:
        logger.info("Clues with no suspect in the ledger: %s", unattributed)

    logger.info(
        "Ledger built — entries=%d, suspects=%d", len(ledger), len(ledger.suspects())
    )
    return ledger
