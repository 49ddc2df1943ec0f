"""
clue_index.py
=============
Ordered set of collected clues, stored as a plain binary search tree.

Clues are ordered by Python string comparison (lexicographic by code point).
Inserting a clue that is already present does nothing, so the tree never
holds duplicates. The tree is not rebalanced: a mansion holds a handful of
clues and the player decides the insertion order.

Public API summary:
    index = ClueIndex()
    index.insert(clue)    → bool   (True if the clue was new)
    index.contains(clue)  → bool
    index.inorder()       → list[str], ascending
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger("detective_quest.clue_index")


@dataclass
class ClueNode:
    """One clue in the tree; owns its two subtrees."""

    key:   str
    left:  Optional["ClueNode"] = field(default=None, repr=False)
    right: Optional["ClueNode"] = field(default=None, repr=False)


class ClueIndex:
    """
    Binary search tree of clue strings without duplicates.

    Attributes:
        root: Top node of the tree, or None while no clue has been collected.
    """

    def __init__(self, clues: Iterable[str] = ()) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0
        for clue in clues:
            self.insert(clue)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, clue: str) -> bool:
        """
        Insert ``clue`` keeping the tree ordered.

        Walks down from the root: strictly smaller keys go left, strictly
        greater keys go right, and an equal key ends the walk without change.

        Args:
            clue: Clue text. An empty string is ignored.

        Returns:
            True if a new node was created, False for an empty or known clue.
        """
        if not clue:
            logger.debug("Ignoring insert of an empty clue.")
            return False

        if self.root is None:
            self.root = ClueNode(clue)
            self._size = 1
            return True

        node = self.root
        while True:
            if clue < node.key:
                if node.left is None:
                    node.left = ClueNode(clue)
                    break
                node = node.left
            elif clue > node.key:
                if node.right is None:
                    node.right = ClueNode(clue)
                    break
                node = node.right
            else:
                return False

        self._size += 1
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, clue: str) -> bool:
        """Return True if ``clue`` has been collected. Empty clues are never present."""
        if not clue:
            return False
        node = self.root
        while node is not None:
            if clue < node.key:
                node = node.left
            elif clue > node.key:
                node = node.right
            else:
                return True
        return False

    def inorder(self) -> List[str]:
        """Return every clue in ascending order."""
        return list(self)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[str]:
        stack: List[ClueNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.contains(clue)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"ClueIndex({self.inorder()!r})"
