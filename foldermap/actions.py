"""Window-independent actions behind the mind-map toolbar."""

from __future__ import annotations

import os
from typing import Optional

from .node import MindMapNode
from .scene import MindMapScene

ZOOM_IN_FACTOR = 1.2
ZOOM_OUT_FACTOR = 0.8
READY_MESSAGE = "Ready"
SAVED_MESSAGE = "Mind map saved"
STATUS_TIMEOUT_MS = 3000


class MapController:
    """Runs the new/open/save/delete/zoom commands against a scene."""

    def __init__(self, scene: MindMapScene) -> None:
        self.scene = scene
        self.scale = 1.0
        self.status = READY_MESSAGE

    def new_map(self, path: str | os.PathLike[str]) -> Optional[str]:
        """Create a map at path; an empty path does nothing and returns None."""
        if not os.fspath(path):
            return None
        self.scene.create_new_map(path)
        self.status = f"Created new mind map: {os.fspath(path)}"
        return self.status

    def open_map(self, path: str | os.PathLike[str]) -> Optional[str]:
        """Open the map at path; an empty path does nothing and returns None."""
        if not os.fspath(path):
            return None
        self.scene.open_map(path)
        self.status = f"Opened mind map: {os.fspath(path)}"
        return self.status

    def save_map(self) -> str:
        """Save the current map and report it in the status."""
        self.scene.save_map()
        self.status = SAVED_MESSAGE
        return self.status

    def delete_selected(self) -> int:
        """Remove every selected non-root node; return how many were removed."""
        removed = 0
        for node in self.scene.selected_items():
            if not self._in_scene(node) or node.is_root():
                continue
            self.scene.remove_node(node)
            removed += 1
        return removed

    def zoom_in(self) -> float:
        self.scale *= ZOOM_IN_FACTOR
        return self.scale

    def zoom_out(self) -> float:
        self.scale *= ZOOM_OUT_FACTOR
        return self.scale

    def _in_scene(self, node: MindMapNode) -> bool:
        return any(item is node for item in self.scene.items)