"""Tk window for browsing and editing a folder-backed mind map."""

from __future__ import annotations

import random
import sys
from typing import TYPE_CHECKING, Optional

from .actions import READY_MESSAGE, STATUS_TIMEOUT_MS, MapController
from .connection import Connection
from .node import MindMapNode
from .scene import MapError, MindMapScene, random_color

if TYPE_CHECKING:
    import tkinter as tk

CURVE_STEPS = 24
WINDOW_TITLE = "Strict Tree Mind Map"


def node_bounds(text_width: int, line_height: int) -> tuple[int, int, int, int]:
    """Rectangle (x, y, width, height) of a node centred on its position."""
    width = int(text_width) + 30
    height = int(line_height) + 20
    return (-(width // 2), -(height // 2), width, height)


def _hex(color: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def _lighter(color: tuple[int, int, int]) -> tuple[int, int, int]:
    return tuple(min(255, int(c * 1.2)) for c in color)  # type: ignore[return-value]


class MainWindow:
    """Main window: toolbar, canvas view of the scene and a status bar."""

    def __init__(self, root: "tk.Tk") -> None:
        import tkinter as tk
        from tkinter import font as tkfont

        self.root = root
        self.scene = MindMapScene()
        self.controller = MapController(self.scene)
        self._rng = random.Random()
        self._font = tkfont.nametofont("TkDefaultFont")
        self._drag: Optional[tuple[MindMapNode, float, float]] = None
        self._hover: Optional[MindMapNode] = None
        self._status_job: Optional[str] = None

        root.title(WINDOW_TITLE)
        root.geometry("1200x800")

        toolbar = tk.Frame(root, bd=1, relief=tk.RAISED)
        toolbar.pack(side=tk.TOP, fill=tk.X)
        buttons = [
            ("New", self._on_new),
            ("Open", self._on_open),
            ("Save", self._on_save),
            None,
            ("Delete node", self._on_delete),
            None,
            ("Zoom in", self._on_zoom_in),
            ("Zoom out", self._on_zoom_out),
        ]
        for spec in buttons:
            if spec is None:
                tk.Frame(toolbar, width=2, bd=1, relief=tk.SUNKEN).pack(
                    side=tk.LEFT, fill=tk.Y, padx=4, pady=2
                )
            else:
                label, command = spec
                tk.Button(toolbar, text=label, command=command).pack(side=tk.LEFT, padx=2, pady=2)

        self._status = tk.Label(root, text=READY_MESSAGE, anchor=tk.W, bd=1, relief=tk.SUNKEN)
        self._status.pack(side=tk.BOTTOM, fill=tk.X)

        self.canvas = tk.Canvas(root, background="white")
        self.canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", lambda _e: self.redraw())
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<Button-3>", self._on_context)

        root.after_idle(self._welcome)

    # ----- coordinates -----

    def _origin(self) -> tuple[float, float]:
        return self.canvas.winfo_width() / 2, self.canvas.winfo_height() / 2

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self._origin()
        s = self.controller.scale
        return ox + x * s, oy + y * s

    def _to_scene(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self._origin()
        s = self.controller.scale
        return (x - ox) / s, (y - oy) / s

    def _bounds(self, node: MindMapNode) -> tuple[int, int, int, int]:
        return node_bounds(self._font.measure(node.text), self._font.metrics("linespace"))

    def _node_at(self, sx: float, sy: float) -> Optional[MindMapNode]:
        x, y = self._to_scene(sx, sy)
        nodes = [i for i in self.scene.items if isinstance(i, MindMapNode)]
        for node in reversed(nodes):
            bx, by, w, h = self._bounds(node)
            nx, ny = node.pos
            if nx + bx <= x <= nx + bx + w and ny + by <= y <= ny + by + h:
                return node
        return None

    # ----- drawing -----

    def redraw(self) -> None:
        """Repaint every connection and node of the scene."""
        self.canvas.delete("all")
        for item in self.scene.items:
            if isinstance(item, Connection):
                coords = [c for p in item.points(CURVE_STEPS) for c in self._to_screen(*p)]
                if coords:
                    self.canvas.create_line(*coords, fill="darkgray", width=2, capstyle="round")
        for item in self.scene.items:
            if isinstance(item, MindMapNode):
                self._draw_node(item)

    def _draw_node(self, node: MindMapNode) -> None:
        bx, by, w, h = self._bounds(node)
        nx, ny = node.pos
        x0, y0 = self._to_screen(nx + bx, ny + by)
        x1, y1 = self._to_screen(nx + bx + w, ny + by + h)
        color = node.display_color()
        self.canvas.create_rectangle(
            x0,
            y0,
            x1,
            y1,
            fill=_hex(_lighter(color)),
            outline="blue" if node.selected else "darkgray",
            width=2 if node.selected else 1,
        )
        self.canvas.create_text((x0 + x1) / 2, (y0 + y1) / 2, text=node.text, fill="black")
        if node is self._hover:
            self.canvas.create_rectangle(
                x0, y0, x1, y1, fill="white", stipple="gray25", outline=""
            )

    # ----- status -----

    def _show_status(self, message: str, timed: bool = True) -> None:
        if self._status_job is not None:
            self.root.after_cancel(self._status_job)
            self._status_job = None
        self._status.config(text=message)
        if timed:
            self._status_job = self.root.after(
                STATUS_TIMEOUT_MS, lambda: self._status.config(text="")
            )

    def _welcome(self) -> None:
        from tkinter import messagebox

        messagebox.showinfo("Welcome", "Create or open a mind map to begin", parent=self.root)

    # ----- commands -----

    def _run_map_command(self, command, title: str) -> None:
        from tkinter import filedialog, messagebox

        path = filedialog.askdirectory(parent=self.root, title=title)
        if not path:
            return
        try:
            message = command(path)
        except MapError as exc:
            messagebox.showerror("Error", str(exc), parent=self.root)
            self.redraw()
            return
        if message:
            self._show_status(message)
        self.redraw()

    def _on_new(self) -> None:
        self._run_map_command(self.controller.new_map, "Choose root folder")

    def _on_open(self) -> None:
        self._run_map_command(self.controller.open_map, "Choose mind map root folder")

    def _on_save(self) -> None:
        from tkinter import messagebox

        try:
            message = self.controller.save_map()
        except MapError as exc:
            messagebox.showwarning("Warning", str(exc), parent=self.root)
            return
        self._show_status(message)

    def _on_delete(self) -> None:
        self.controller.delete_selected()
        self.redraw()

    def _on_zoom_in(self) -> None:
        self.controller.zoom_in()
        self.redraw()

    def _on_zoom_out(self) -> None:
        self.controller.zoom_out()
        self.redraw()

    # ----- mouse -----

    def _on_press(self, event) -> None:
        node = self._node_at(event.x, event.y)
        for item in self.scene.items:
            if isinstance(item, MindMapNode):
                item.selected = item is node
        if node is not None:
            x, y = self._to_scene(event.x, event.y)
            nx, ny = node.pos
            self._drag = (node, x - nx, y - ny)
        self.redraw()

    def _on_drag(self, event) -> None:
        if self._drag is None:
            return
        node, dx, dy = self._drag
        x, y = self._to_scene(event.x, event.y)
        node.set_pos(x - dx, y - dy)
        self.redraw()

    def _on_release(self, _event) -> None:
        self._drag = None

    def _on_motion(self, event) -> None:
        node = self._node_at(event.x, event.y)
        if node is not self._hover:
            self._hover = node
            self.redraw()

    def _on_context(self, event) -> None:
        node = self._node_at(event.x, event.y)
        if node is not None:
            self._node_menu(node, event.x_root, event.y_root)
        else:
            self._scene_menu(event.x_root, event.y_root)

    def _node_menu(self, node: MindMapNode, x: int, y: int) -> None:
        import tkinter as tk

        menu = tk.Menu(self.root, tearoff=0)
        menu.add_command(label="Edit node", command=lambda: self._edit_node(node))
        menu.add_command(
            label="Delete node",
            command=lambda: self._delete_node(node),
            state=tk.DISABLED if node.is_root() else tk.NORMAL,
        )
        menu.add_command(label="Set colour", command=lambda: self._recolor(node))
        menu.add_separator()
        menu.add_command(label="Add child node", command=lambda: self._add_child(node))
        menu.add_separator()
        menu.add_command(label="Show folder", command=lambda: self._show_folder(node))
        try:
            menu.tk_popup(x, y)
        finally:
            menu.grab_release()

    def _scene_menu(self, x: int, y: int) -> None:
        import tkinter as tk

        menu = tk.Menu(self.root, tearoff=0)
        menu.add_command(label="New mind map", command=self._on_new)
        menu.add_command(label="Open mind map", command=self._on_open)
        menu.add_command(label="Save mind map", command=self._on_save)
        try:
            menu.tk_popup(x, y)
        finally:
            menu.grab_release()

    def _edit_node(self, node: MindMapNode) -> None:
        from tkinter import simpledialog

        text = simpledialog.askstring(
            "Edit node", "Enter new text:", initialvalue=node.text, parent=self.root
        )
        if text:
            node.text = text
            self.redraw()

    def _delete_node(self, node: MindMapNode) -> None:
        if not node.is_root():
            self.scene.remove_node(node)
            self.redraw()

    def _recolor(self, node: MindMapNode) -> None:
        node.color = random_color(self._rng)
        self.redraw()

    def _add_child(self, node: MindMapNode) -> None:
        from tkinter import simpledialog

        text = simpledialog.askstring(
            "Add child node", "Enter node text:", initialvalue="Child node", parent=self.root
        )
        if text:
            self.scene.add_child_node(node, text)
            self.redraw()

    def _show_folder(self, node: MindMapNode) -> None:
        from tkinter import messagebox

        if node.folder_path:
            messagebox.showinfo("Folder", node.folder_path, parent=self.root)


def main(argv: Optional[list[str]] = None) -> int:
    """Open the mind-map window and run until it is closed."""
    import tkinter as tk

    if argv is None:
        argv = sys.argv[1:]
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0