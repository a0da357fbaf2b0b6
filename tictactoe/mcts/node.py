from __future__ import annotations

from typing import List, Optional

from tictactoe.core import Position


class Node:
    __slots__ = ("position", "parent", "children", "visit_count", "wins")

    def __init__(self, position: Position, parent: Optional[int] = None) -> None:
        self.position: Position = position
        self.parent: Optional[int] = parent
        self.children: List[int] = []
        self.visit_count: int = 0
        self.wins: float = 0.0

    def is_leaf(self) -> bool:
        return not self.children


class NodeArena:
    """Flat node storage; parents and children refer to each other by index."""

    ROOT = 0

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def reset(self, position: Position) -> int:
        self._nodes.clear()
        self._nodes.append(Node(position.copy()))
        return self.ROOT

    def add_child(self, parent: int, position: Position) -> int:
        index = len(self._nodes)
        self._nodes.append(Node(position, parent))
        self._nodes[parent].children.append(index)
        return index

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> Node:
        return self._nodes[self.ROOT]
