"""Mind-map nodes, each tied to a folder on disk."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Optional, Protocol

Color = tuple[int, int, int]
Point = tuple[float, float]

DEFAULT_COLOR: Color = (135, 206, 250)
ROOT_COLOR: Color = (255, 165, 0)


class _PathItem(Protocol):
    def update_path(self) -> None: ...


def _make_dir(path: Path) -> None:
    # Folder creation failures are tolerated; the node still exists.
    with contextlib.suppress(OSError):
        path.mkdir(parents=True, exist_ok=True)


class MindMapNode:
    """A labelled node of a mind map whose children live in sub-folders."""

    def __init__(self, text: str, path: str | os.PathLike[str], parent: object = None) -> None:
        self.text = text
        self.color: Color = DEFAULT_COLOR
        self.folder_path = os.fspath(path)
        self.parent = parent
        self.selected = False
        self.children: list[MindMapNode] = []
        self.connections: list[_PathItem] = []
        self._pos: Point = (0.0, 0.0)
        if self.folder_path:
            _make_dir(Path(self.folder_path))

    def __repr__(self) -> str:
        return f"MindMapNode(text={self.text!r}, folder_path={self.folder_path!r})"

    @property
    def pos(self) -> Point:
        """Position of the node's centre in scene coordinates."""
        return self._pos

    def set_pos(self, x: float, y: float) -> None:
        """Move the node and refresh every connection attached to it."""
        self._pos = (float(x), float(y))
        for connection in self.connections:
            connection.update_path()

    def directory(self) -> Path:
        """The node's folder as a path."""
        return Path(self.folder_path)

    def add_child(self, child: MindMapNode) -> None:
        """Attach a child node, giving it a sub-folder named after its text."""
        if child in self.children:
            return
        self.children.append(child)
        if child.parent is None:
            child.parent = self
        if self.folder_path:
            base = Path(self.folder_path)
            _make_dir(base / child.text)
            child.folder_path = str(base / child.text)

    def remove_child(self, child: MindMapNode) -> None:
        """Detach a child node; its folder is left in place."""
        self.children = [c for c in self.children if c is not child]
        if child.parent is self:
            child.parent = None

    def add_connection(self, connection: _PathItem) -> None:
        if connection not in self.connections:
            self.connections.append(connection)

    def remove_connection(self, connection: _PathItem) -> None:
        self.connections = [c for c in self.connections if c is not connection]

    def parent_node(self) -> Optional[MindMapNode]:
        """The parent if it is a mind-map node, otherwise None."""
        return self.parent if isinstance(self.parent, MindMapNode) else None

    def is_root(self) -> bool:
        return self.parent_node() is None

    def display_color(self) -> Color:
        """Colour used when drawing: root nodes are always orange."""
        return ROOT_COLOR if self.is_root() else self.color