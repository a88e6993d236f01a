# foldermap

foldermap is a mind map that keeps a strict tree shape by mirroring it onto
folders on disk. The root node is a folder you choose. Each child node you
add gets a sub-folder of the same name under its parent's folder.

## Installing

```
pip install .
```

The window uses tkinter, which comes with most Python builds. The package has
no other dependencies.

## Running

```
foldermap
```

This opens the window (`foldermap.gui.main`). Use the toolbar to make a new map
or open an existing one. Either way you pick a folder, and that folder becomes
the root node, placed at the centre of the canvas.

- Click a node to select it and drag it to move it. Its connections follow.
- Right-click a node to rename it, delete it, give it a random colour, add a
  child node, or show its folder path. The root node cannot be deleted, and it
  is always drawn in orange.
- Right-click empty space to make, open or save a map.
- "Delete node" on the toolbar removes the selected node together with its
  connections and all of its children. The folders stay on disk.
- "Zoom in" scales the view by 1.2 and "Zoom out" by 0.8.

## Using it from Python

```python
from foldermap.scene import MindMapScene, MapError

scene = MindMapScene()
root = scene.create_new_map("/tmp/ideas")
child = scene.add_child_node(root, "chapter one")
print(child.directory())   # /tmp/ideas/chapter one
scene.save_map()           # returns "/tmp/ideas"
```

- `MindMapScene.create_new_map` creates the folder if it is missing and raises
  `MapError` if it cannot.
- `MindMapScene.open_map` raises `MapError` if the folder does not exist.
- `MindMapScene.save_map` raises `MapError` if no map has been made or opened
  yet. If a map exists, it returns the map's path.
- `MindMapScene.add_child_node` places the child 200 units to the right of its
  parent and links the two with a `foldermap.connection.Connection`. This is a
  cubic curve, and `Connection.points(steps)` samples it.
- `MindMapScene.remove_node` removes a non-root node, its subtree and its
  links from the scene.

`foldermap.actions.MapController` holds the toolbar's actions: `new_map`,
`open_map`, `save_map`, `delete_selected`, `zoom_in` and `zoom_out`. It keeps
a status message and a zoom scale, and it needs no window.

## What it does not do

- Saving stores nothing beyond the folders themselves. Node positions, colours
  and renamed labels are lost when the map is closed.
- Opening a map shows only its root node. Existing sub-folders are not read
  back in as child nodes.
- Renaming or deleting a node does not rename or delete its folder.
- "Show folder" only displays the folder's path. It does not open a file
  manager.

## Tests

```
pip install .[test]
pytest
```