import pytest

from gltfwriter.element import MainElement
from gltfwriter.node import CameraNode, MeshNode, Node, SkinNode

IDENTITY = [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0]


def test_empty_node():
    assert Node(0).to_json() == {}


def test_children_indices():
    node = Node(0, "root")
    node.add_child(Node(3))
    node.add_child(Node(1))
    result = node.to_json()
    assert result["children"] == [3, 1]
    assert result["name"] == "root"


def test_trs_serialized():
    node = Node(0)
    node.set_trs([1, 2, 3], [0, 0, 0, 1], [2, 2, 2])
    result = node.to_json()
    assert result["translation"] == [1, 2, 3]
    assert result["rotation"] == [0, 0, 0, 1]
    assert result["scale"] == [2, 2, 2]
    assert "matrix" not in result


def test_matrix_replaces_trs():
    node = Node(0)
    node.set_trs([1, 2, 3], [0, 0, 0, 1], [2, 2, 2])
    node.set_matrix(IDENTITY)
    result = node.to_json()
    assert result == {"matrix": IDENTITY}
    assert node.translation is None and node.rotation is None and node.scale is None


def test_translation_clears_matrix_but_keeps_other_trs():
    node = Node(0)
    node.set_scale([3, 3, 3])
    node.set_matrix(IDENTITY)
    node.set_translation([4, 5, 6])
    result = node.to_json()
    assert result == {"translation": [4, 5, 6]}


def test_rotation_and_scale_independent():
    node = Node(0)
    node.set_rotation([0, 1, 0, 0])
    node.set_scale([1, 2, 1])
    assert node.to_json() == {"rotation": [0, 1, 0, 0], "scale": [1, 2, 1]}


@pytest.mark.parametrize(
    "setter, values",
    [
        ("set_matrix", [1.0] * 9),
        ("set_translation", [1.0, 2.0]),
        ("set_rotation", [0.0, 0.0, 1.0]),
        ("set_scale", [1.0] * 4),
    ],
)
def test_wrong_lengths_rejected(setter, values):
    with pytest.raises(ValueError):
        getattr(Node(0), setter)(values)


def test_mesh_node_refers_to_mesh():
    node = MeshNode(1, MainElement(6))
    node.set_translation([0, 1, 0])
    result = node.to_json()
    assert result["mesh"] == 6
    assert result["translation"] == [0, 1, 0]


def test_camera_node_refers_to_camera():
    assert CameraNode(0, MainElement(2), "eye").to_json() == {"name": "eye", "camera": 2}


def test_skin_node_refers_to_skin():
    assert SkinNode(0, MainElement(1)).to_json() == {"skin": 1}