"""
config.py
=========
Central configuration module for Detective Quest: The Mansion of Clues.

All tunable constants, hashing parameters, field limits, and command aliases
live here so they can be adjusted without touching the data structures or the
game loop.

Usage:
    from config import LEDGER_CONFIG, MAP_CONFIG, MIN_CORROBORATING_CLUES
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Final, Optional


# ---------------------------------------------------------------------------
# Suspect ledger (hash table)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LedgerConfig:
    """
    Parameters of the clue → suspect hash table.

    Attributes:
        bucket_count:    Number of fixed buckets. A small prime keeps chains
                         short for the handful of clues a mansion holds.
        hash_seed:       Initial value of the rolling hash.
        hash_multiplier: Factor applied to the running hash before each byte
                         is added.
    """
    bucket_count:    int = 17
    hash_seed:       int = 5381
    hash_multiplier: int = 33


# ---------------------------------------------------------------------------
# Mansion map
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MapConfig:
    """
    Field limits applied when rooms are created.

    Longer values are truncated (never rejected); the room records that it
    was truncated so the caller can tell.

    Attributes:
        max_name_length: Maximum number of characters kept from a room name.
        max_clue_length: Maximum number of characters kept from a clue.
    """
    max_name_length: int = 63
    max_clue_length: int = 127

    def clip_name(self, name: str) -> str:
        return name[: self.max_name_length]

    def clip_clue(self, clue: str) -> str:
        return clue[: self.max_clue_length]


# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Process-level settings read from the environment by the entry points.

    Attributes:
        log_level: Name of the root logging level. WARNING by default so the
                   game text is not interleaved with INFO records.
        seed_file: Optional path to a JSON mansion description that replaces
                   the reference mansion from case_data.py.
    """
    log_level: str = "WARNING"
    seed_file: Optional[str] = None

    @property
    def level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        value = logging.getLevelName(self.log_level)
        return value if isinstance(value, int) else logging.WARNING


def load_game_config() -> GameConfig:
    """
    Build a GameConfig from environment variables.

    Entry points call ``load_dotenv()`` first, so values from a local ``.env``
    file are visible here too.

    Recognised variables:
        DETECTIVE_QUEST_LOG_LEVEL  — overrides GameConfig.log_level
        DETECTIVE_QUEST_SEED_FILE  — sets GameConfig.seed_file
    """
    return GameConfig(
        log_level=os.environ.get("DETECTIVE_QUEST_LOG_LEVEL", "WARNING").upper(),
        seed_file=os.environ.get("DETECTIVE_QUEST_SEED_FILE") or None,
    )


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

LEDGER_CONFIG = LedgerConfig()
MAP_CONFIG    = MapConfig()


MIN_CORROBORATING_CLUES: Final[int] = 2
"""
Number of collected clues that must name the accused for the accusation to
stand. Fixed by the rules of the game; deliberately not part of any config
dataclass.
"""


# ---------------------------------------------------------------------------
# Command aliases
# ---------------------------------------------------------------------------

COMMAND_ALIASES: Dict[str, str] = {
    # left
    "l": "left", "e": "left", "left": "left", "esquerda": "left",
    # right
    "r": "right", "d": "right", "right": "right", "direita": "right",
    # back
    "b": "back", "back": "back", "voltar": "back",
    # exit
    "q": "exit", "s": "exit", "exit": "exit", "quit": "exit", "sair": "exit",
}
"""
Raw words typed by the player → navigation tokens understood by the session.

Only the CLI uses this table; the exploration session itself accepts the four
canonical tokens and reports anything else as unrecognised. Both the English
words and the Portuguese words and single-letter shortcuts (e/d/b/s) are
accepted.
"""
