import json

import pytest

from gltfwriter.constants import MagFilter, MinFilter, WrapMode
from gltfwriter.sampler import Sampler


def test_defaults():
    assert Sampler(0).to_json() == {
        "magFilter": 9729,
        "minFilter": 9729,
        "wrapS": 10497,
        "wrapT": 10497,
    }


def test_set_filter_and_wrap():
    sampler = Sampler(0)
    sampler.set_filter(MagFilter.NEAREST, MinFilter.LINEAR_MIPMAP_LINEAR)
    sampler.set_wrap_mode(WrapMode.CLAMP_TO_EDGE, WrapMode.MIRRORED_REPEAT)
    assert sampler.to_json() == {
        "magFilter": 9728,
        "minFilter": 9987,
        "wrapS": 33071,
        "wrapT": 33648,
    }


def test_values_are_plain_ints_in_text():
    data = json.loads(Sampler(0).to_string())
    assert data["wrapS"] == int(WrapMode.REPEAT)


def test_invalid_filter_rejected():
    with pytest.raises(ValueError):
        Sampler(0).set_filter(1, MinFilter.LINEAR)