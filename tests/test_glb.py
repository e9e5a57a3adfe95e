import json
import struct

import pytest

from gltfwriter.asset import Asset
from gltfwriter.glb import GLBContainer


def _asset_with_data(data: bytes) -> Asset:
    asset = Asset()
    buffer = asset.create_buffer()
    buffer.add_data(data)
    scene = asset.create_scene("main")
    asset.set_main_scene(scene)
    return asset


def _split(glb: bytes):
    magic, version, length = struct.unpack_from("<III", glb, 0)
    json_len, json_type = struct.unpack_from("<II", glb, 12)
    json_chunk = glb[20 : 20 + json_len]
    bin_start = 20 + json_len
    bin_len, bin_type = struct.unpack_from("<II", glb, bin_start)
    bin_chunk = glb[bin_start + 8 : bin_start + 8 + bin_len]
    return magic, version, length, json_type, json_chunk, bin_type, bin_chunk


def test_header_fields():
    glb = GLBContainer(_asset_with_data(b"\x01\x02\x03\x04")).to_bytes()
    assert glb[:4] == b"glTF"
    magic, version, length, *_ = _split(glb)
    assert magic == 0x46546C67
    assert version == 2
    assert length == len(glb)


def test_chunk_types():
    glb = GLBContainer(_asset_with_data(b"abcd")).to_bytes()
    _, _, _, json_type, _, bin_type, _ = _split(glb)
    assert struct.pack("<I", json_type) == b"JSON"
    assert struct.pack("<I", bin_type) == b"BIN\x00"


def test_json_chunk_matches_asset():
    asset = _asset_with_data(b"abcdefg")
    glb = GLBContainer(asset).to_bytes()
    _, _, _, _, json_chunk, _, _ = _split(glb)
    assert len(json_chunk) % 4 == 0
    assert json.loads(json_chunk.decode("utf-8").rstrip(" ")) == asset.to_json()
    stripped = json_chunk.rstrip(b" ")
    assert json_chunk[len(stripped):] == b" " * (len(json_chunk) - len(stripped))


def test_binary_chunk_padded_with_zeros():
    payload = b"\x09\x08\x07\x06\x05"
    glb = GLBContainer(_asset_with_data(payload)).to_bytes()
    _, _, _, _, _, _, bin_chunk = _split(glb)
    assert len(bin_chunk) % 4 == 0
    assert bin_chunk.startswith(payload)
    assert set(bin_chunk[len(payload):]) == {0}


def test_no_buffer_raises():
    with pytest.raises(ValueError):
        GLBContainer(Asset()).to_bytes()


def test_save_writes_bytes(tmp_path):
    asset = _asset_with_data(b"1234")
    path = tmp_path / "out.glb"
    container = GLBContainer(asset)
    container.save(path)
    assert path.read_bytes() == container.to_bytes()