import pytest

from foldermap.actions import (
    READY_MESSAGE,
    SAVED_MESSAGE,
    ZOOM_IN_FACTOR,
    ZOOM_OUT_FACTOR,
    MapController,
)
from foldermap.node import MindMapNode
from foldermap.scene import MapError, MindMapScene


@pytest.fixture
def controller():
    return MapController(MindMapScene())


def test_initial_state(controller):
    assert controller.status == READY_MESSAGE
    assert controller.scale == 1.0


def test_new_map_creates_folder_and_reports(controller, tmp_path):
    target = tmp_path / "ideas"
    message = controller.new_map(str(target))
    assert target.is_dir()
    assert str(target) in message
    assert controller.status == message
    assert controller.scene.root_node.text == "ideas"


def test_empty_path_does_nothing(controller):
    assert controller.new_map("") is None
    assert controller.open_map("") is None
    assert controller.scene.root_node is None
    assert controller.status == READY_MESSAGE


def test_open_missing_map_raises(controller, tmp_path):
    with pytest.raises(MapError):
        controller.open_map(str(tmp_path / "missing"))
    assert controller.status == READY_MESSAGE


def test_open_existing_map(controller, tmp_path):
    message = controller.open_map(tmp_path)
    assert str(tmp_path) in message
    assert controller.scene.map_path == str(tmp_path)


def test_save_without_map_raises(controller):
    with pytest.raises(MapError):
        controller.save_map()


def test_save_after_new(controller, tmp_path):
    controller.new_map(tmp_path / "m")
    assert controller.save_map() == SAVED_MESSAGE
    assert controller.status == SAVED_MESSAGE


def test_delete_selected_skips_root(controller, tmp_path):
    controller.new_map(tmp_path / "m")
    root = controller.scene.root_node
    child = controller.scene.add_child_node(root, "a")
    root.selected = True
    child.selected = True
    assert controller.delete_selected() == 1
    nodes = [i for i in controller.scene.items if isinstance(i, MindMapNode)]
    assert nodes == [root]
    assert root.children == []


def test_delete_selected_parent_and_child(controller, tmp_path):
    controller.new_map(tmp_path / "m")
    root = controller.scene.root_node
    a = controller.scene.add_child_node(root, "a")
    b = controller.scene.add_child_node(a, "b")
    a.selected = True
    b.selected = True
    assert controller.delete_selected() == 1
    assert controller.scene.items == [root]


def test_zoom_round_trip(controller):
    assert controller.zoom_in() == pytest.approx(ZOOM_IN_FACTOR)
    assert controller.zoom_out() == pytest.approx(ZOOM_IN_FACTOR * ZOOM_OUT_FACTOR)
    assert controller.scale == pytest.approx(ZOOM_IN_FACTOR * ZOOM_OUT_FACTOR)