import pytest

from gltfwriter.element import MainElement
from gltfwriter.texture_info import NormalTextureInfo, OcclusionTextureInfo, TextureInfo


def test_basic_info():
    info = TextureInfo(MainElement(3))
    assert info.to_json() == {"index": 3}


def test_tex_coord_written_when_nonzero():
    info = TextureInfo()
    info.set(MainElement(1), 2)
    assert info.to_json() == {"index": 1, "texCoord": 2}


def test_missing_texture_raises():
    with pytest.raises(ValueError):
        TextureInfo().to_json()


def test_normal_scale():
    info = NormalTextureInfo()
    info.set(MainElement(0), 0, 0.5)
    assert info.to_json() == {"index": 0, "scale": 0.5}


def test_normal_default_scale_omitted():
    info = NormalTextureInfo(MainElement(0))
    assert "scale" not in info.to_json()
    assert info.scale == 1.0


def test_occlusion_strength():
    info = OcclusionTextureInfo()
    info.set(MainElement(5), 1, 0.25)
    assert info.to_json() == {"index": 5, "texCoord": 1, "strength": 0.25}


def test_occlusion_default_strength_omitted():
    info = OcclusionTextureInfo(MainElement(2))
    assert info.to_json() == {"index": 2}


def test_set_resets_scale():
    info = NormalTextureInfo(MainElement(0), 0, 2.0)
    info.set(MainElement(1))
    assert info.scale == 1.0
    assert info.to_json() == {"index": 1}