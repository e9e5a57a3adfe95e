from gltfwriter.asset_info import AssetInfo
from gltfwriter.constants import GLTFVersion


def test_default_json():
    assert AssetInfo().to_json() == {"version": "2.0"}


def test_version_one():
    assert AssetInfo(GLTFVersion.GLTF_1_0).to_json()["version"] == "1.0"


def test_undefined_version_writes_two():
    assert AssetInfo(GLTFVersion.UNDEFINED).to_json()["version"] == "2.0"


def test_all_fields():
    info = AssetInfo()
    info.copyright = "made up"
    info.generator = "gen"
    info.min_version = GLTFVersion.GLTF_1_0
    assert info.to_json() == {
        "version": "2.0",
        "copyright": "made up",
        "generator": "gen",
        "minVersion": "1.0",
    }


def test_extras_passed_through():
    info = AssetInfo()
    info.set_extras({"a": 1})
    assert info.to_json()["extras"] == {"a": 1}