from gltfwriter.skin import Skin


def test_skin_without_name_is_empty():
    assert Skin(0).to_json() == {}


def test_skin_with_name_and_extras():
    skin = Skin(3, "rig")
    skin.set_extras({"bones": 2})
    assert skin.to_json() == {"name": "rig", "extras": {"bones": 2}}
    assert skin.index == 3