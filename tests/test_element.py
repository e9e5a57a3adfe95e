import json

import pytest

from gltfwriter.element import Element, Extension, MainElement


class _Ext(Extension):
    def __init__(self, ext_name, payload):
        self._name = ext_name
        self._payload = payload

    def name(self):
        return self._name

    def to_json(self):
        return self._payload


def test_extension_is_abstract():
    with pytest.raises(TypeError):
        Extension()


def test_empty_element_serializes_to_empty_object():
    assert Element().to_json() == {}


def test_extensions_keyed_by_name():
    element = Element()
    element.add_extension(_Ext("EXT_a", {"x": 1}))
    element.add_extension(_Ext("EXT_b", {"y": 2}))
    assert element.to_json() == {"extensions": {"EXT_a": {"x": 1}, "EXT_b": {"y": 2}}}


def test_extras_included_when_not_empty():
    element = Element()
    element.set_extras({"author": "someone"})
    assert element.to_json()["extras"] == {"author": "someone"}


@pytest.mark.parametrize("extras", [None, {}, []])
def test_empty_extras_omitted(extras):
    element = Element()
    element.set_extras(extras)
    assert "extras" not in element.to_json()


def test_scalar_extras_kept():
    element = Element()
    element.set_extras(0)
    assert element.to_json() == {"extras": 0}


def test_main_element_name_and_index():
    element = MainElement(3, "thing")
    assert element.index == 3
    assert element.to_json() == {"name": "thing"}


def test_main_element_without_name():
    assert MainElement(0).to_json() == {}


def test_to_string_compact():
    assert MainElement(0, "x").to_string() == '{"name":"x"}'


def test_to_string_indented_round_trip():
    element = MainElement(1, "node")
    element.set_extras({"k": [1, 2]})
    text = element.to_string(2)
    assert "\n" in text
    assert json.loads(text) == element.to_json()