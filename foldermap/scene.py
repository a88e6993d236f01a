"""The mind-map scene: a tree of folder-backed nodes and their links."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Optional, Union

from .connection import Connection
from .node import Color, MindMapNode

CHILD_OFFSET = (200.0, 0.0)

Item = Union[MindMapNode, Connection]


class MapError(Exception):
    """Raised when a map cannot be created, opened or saved."""


def random_color(rng: random.Random) -> Color:
    """A random RGB colour drawn from the given generator."""
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))


class MindMapScene:
    """Holds the nodes and connections of one mind map rooted at a folder."""

    def __init__(self) -> None:
        self.items: list[Item] = []
        self.root_node: Optional[MindMapNode] = None
        self.map_path = ""

    def clear(self) -> None:
        """Drop every item from the scene."""
        self.items.clear()
        self.root_node = None

    def _start_map(self, path: Path) -> MindMapNode:
        root = MindMapNode(path.name, str(path))
        self.items.append(root)
        root.set_pos(0, 0)
        self.root_node = root
        self.map_path = str(path)
        return root

    def create_new_map(self, path: str | os.PathLike[str]) -> MindMapNode:
        """Start a new map at path, creating the folder if needed."""
        self.clear()
        folder = Path(path)
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MapError(f"cannot create root directory: {folder}") from exc
        if not folder.is_dir():
            raise MapError(f"cannot create root directory: {folder}")
        return self._start_map(folder)

    def open_map(self, path: str | os.PathLike[str]) -> MindMapNode:
        """Open the map rooted at an existing folder."""
        self.clear()
        folder = Path(path)
        if not folder.is_dir():
            raise MapError(f"directory does not exist: {folder}")
        return self._start_map(folder)

    def save_map(self) -> str:
        """Save the map; the folder tree itself is the stored form."""
        if not self.map_path:
            raise MapError("create or open a mind map first")
        return self.map_path

    def add_child_node(self, parent: Optional[MindMapNode], text: str) -> Optional[MindMapNode]:
        """Add a child to the right of parent, linked to it; None if no parent."""
        if parent is None:
            return None
        child = MindMapNode(text, "")
        self.items.append(child)
        px, py = parent.pos
        child.set_pos(px + CHILD_OFFSET[0], py + CHILD_OFFSET[1])
        connection = Connection(parent, child)
        self.items.append(connection)
        connection.update_path()
        parent.add_child(child)
        return child

    def _discard(self, item: Item) -> None:
        self.items = [i for i in self.items if i is not item]

    def remove_node(self, node: Optional[MindMapNode]) -> None:
        """Remove a non-root node with its whole subtree and all its links."""
        if node is None or node.is_root():
            return
        for child in list(node.children):
            self.remove_node(child)
        for connection in list(node.connections):
            self._discard(connection)
            for end in (connection.source, connection.destination):
                if end is not None:
                    end.remove_connection(connection)
        parent = node.parent_node()
        if parent is not None:
            parent.remove_child(node)
        self._discard(node)

    def selected_items(self) -> list[MindMapNode]:
        """Nodes currently marked as selected, in scene order."""
        return [i for i in self.items if isinstance(i, MindMapNode) and i.selected]