"""
map_tree.py
===========
The mansion map: a binary tree of rooms.

Each Room owns up to two child rooms (``left`` and ``right``). The tree is
wired once, either by hand or from a validated MansionSeed via build_map(),
and is only read afterwards. Rooms are never removed one by one; dropping
the root releases the whole map.

Traversal primitives used by the exploration session:
    left(room)      → Optional[Room]
    right(room)     → Optional[Room]
    has_clue(room)  → bool
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from config import MAP_CONFIG
from models import MansionSeed

logger = logging.getLogger("detective_quest.map_tree")


@dataclass(eq=False)
class Room:
    """
    A node of the mansion map.

    Rooms compare by identity, never by name.

    Attributes:
        name:      Unique, non-empty room name.
        clue:      Clue text; "" when the room holds no clue.
        left:      Child reached by going left, if any.
        right:     Child reached by going right, if any.
        truncated: True when create_room() had to shorten the name or clue.
    """

    name:      str
    clue:      str = ""
    left:      Optional["Room"] = field(default=None, repr=False)
    right:     Optional["Room"] = field(default=None, repr=False)
    truncated: bool = False


def create_room(name: str, clue: Optional[str] = "") -> Room:
    """
    Create a room with the given name and optional clue.

    Names and clues longer than the MapConfig limits are truncated rather
    than rejected; the returned room's ``truncated`` flag tells the caller.

    Args:
        name: Room name. Must not be empty.
        clue: Clue text. "" or None means the room holds no clue.

    Returns:
        A new Room with no children.

    Raises:
        ValueError: if ``name`` is empty.
    """
    if not name:
        raise ValueError("room name must not be empty")
    clue = clue or ""

    kept_name = MAP_CONFIG.clip_name(name)
    kept_clue = MAP_CONFIG.clip_clue(clue)
    truncated = kept_name != name or kept_clue != clue
    if truncated:
        logger.warning(
            "Room %r truncated to limits (name ≤ %d, clue ≤ %d characters).",
            kept_name,
            MAP_CONFIG.max_name_length,
            MAP_CONFIG.max_clue_length,
        )
    return Room(name=kept_name, clue=kept_clue, truncated=truncated)


# ---------------------------------------------------------------------------
# Traversal primitives
# ---------------------------------------------------------------------------

def left(room: Room) -> Optional[Room]:
    return room.left


def right(room: Room) -> Optional[Room]:
    return room.right


def has_clue(room: Room) -> bool:
    return room.clue != ""


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the tree in pre-order (room, left subtree, right subtree)."""
    pending = [root] if root is not None else []
    while pending:
        room = pending.pop()
        yield room
        # right first so the left subtree comes out first
        if room.right is not None:
            pending.append(room.right)
        if room.left is not None:
            pending.append(room.left)


def depth(root: Optional[Room]) -> int:
    """Number of rooms on the longest root-to-leaf path (0 for an empty map)."""
    if root is None:
        return 0
    return 1 + max(depth(root.left), depth(root.right))


# ---------------------------------------------------------------------------
# Construction from seed data
# ---------------------------------------------------------------------------

def build_map(seed: MansionSeed) -> Room:
    """
    Wire the rooms of a validated MansionSeed into a tree and return its root.

    MansionSeed has already checked that the rooms form a single tree, so
    this only creates the nodes and links them.
    """
    rooms: Dict[str, Room] = {
        room_seed.name: create_room(room_seed.name, room_seed.clue) for room_seed in seed.rooms
    }
    for room_seed in seed.rooms:
        node = rooms[room_seed.name]
        if room_seed.left is not None:
            node.left = rooms[room_seed.left]
        if room_seed.right is not None:
            node.right = rooms[room_seed.right]

    logger.info(
        "Mansion %r built — rooms=%d, root=%s, depth=%d",
        seed.title,
        len(rooms),
        seed.root,
        depth(rooms[seed.root]),
    )
    return rooms[seed.root]
