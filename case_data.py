"""
case_data.py
============
Seed data for Detective Quest: the mansion layout and the clue → suspect
associations.

Centralising the story here means you can swap the whole mansion (rooms,
clues, suspects) without touching the map, the ledger, the session or the UI.

To create a new case, either:
    1. Replace REFERENCE_MANSION below, keeping the MansionSeed shape, or
    2. Write a JSON file with the same shape and point the
       DETECTIVE_QUEST_SEED_FILE environment variable (or ``--seed``) at it.

Clue text in ``ledger`` must match the room's clue exactly, accents and
spacing included, or the clue stays unattributed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from models import MansionSeed, SeedDataError

logger = logging.getLogger("detective_quest.case_data")


# ---------------------------------------------------------------------------
# Reference mansion
#
#                 Hall
#                /    \
#           SalaA      SalaB
#           /   \          \
#       SalaC   SalaD      SalaE
# ---------------------------------------------------------------------------

REFERENCE_MANSION_DATA: Dict[str, Any] = {
    "title": "Detective Quest — Capítulo Mestre",
    "root": "Hall",
    "rooms": [
        {"name": "Hall",  "clue": "pegadas molhadas",          "left": "SalaA", "right": "SalaB"},
        {"name": "SalaA", "clue": "fio de cabelo ruivo",       "left": "SalaC", "right": "SalaD"},
        {"name": "SalaB", "clue": "",                          "right": "SalaE"},
        {"name": "SalaC", "clue": "marca de fumaça no tapete"},
        {"name": "SalaD", "clue": "copo com pegadas digitais"},
        {"name": "SalaE", "clue": "bilhete rasgado"},
    ],
    # Sra. Rosa and Sr. Verde each have two clues; Sr. Azul only one.
    "ledger": [
        {"clue": "pegadas molhadas",          "suspect": "Sr. Verde"},
        {"clue": "fio de cabelo ruivo",       "suspect": "Sra. Rosa"},
        {"clue": "marca de fumaça no tapete", "suspect": "Sr. Azul"},
        {"clue": "copo com pegadas digitais", "suspect": "Sra. Rosa"},
        {"clue": "bilhete rasgado",           "suspect": "Sr. Verde"},
    ],
}

REFERENCE_MANSION: MansionSeed = MansionSeed.model_validate(REFERENCE_MANSION_DATA)
"""The mansion played when no seed file is configured."""


# ---------------------------------------------------------------------------
# Loading custom mansions
# ---------------------------------------------------------------------------

def load_seed_file(path: Union[str, Path]) -> MansionSeed:
    """
    Read and validate a JSON mansion description from ``path``.

    Raises:
        SeedDataError: if the file cannot be read or fails validation.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SeedDataError(f"cannot read seed file {path}: {exc}") from exc

    try:
        seed = MansionSeed.model_validate_json(raw)
    except ValidationError as exc:
        raise SeedDataError(f"invalid seed file {path}: {exc}") from exc

    logger.info("Loaded mansion %r from %s (%d rooms).", seed.title, path, len(seed.rooms))
    return seed
