"""Tests for the JSON bridge."""

import json
from dataclasses import dataclass

import pytest

from objtasks.config import ObjtasksConfig
from objtasks.mappings import make_immutable
from objtasks.model import CityRecord, Rectangle
from objtasks.serialization import from_json, to_json


@dataclass
class _Point:
    x: int
    y: int


@dataclass
class _Holder:
    settings: object


class _Circle:
    def __init__(self, radius: float) -> None:
        self.radius = radius

    @classmethod
    def from_dict(cls, data: dict) -> "_Circle":
        return cls(radius=data["radius"])


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_mapping_keeps_insertion_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_nested(self):
        assert to_json({"a": [1, {"b": None, "c": True}]}) == '{"a":[1,{"b":null,"c":true}]}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_frozen_mapping(self):
        assert to_json(make_immutable({"a": 1})) == '{"a":1}'

    def test_dataclass_holding_frozen_mapping(self):
        holder = _Holder(make_immutable({"a": 1}))
        assert to_json(holder) == '{"settings":{"a":1}}'

    def test_tuple(self):
        assert to_json((1, 2)) == "[1,2]"

    def test_non_ascii_kept(self):
        assert to_json({"city": "Minsk", "name": "Мінск"}) == '{"city":"Minsk","name":"Мінск"}'

    def test_ensure_ascii_config(self):
        out = to_json("é", ObjtasksConfig(json_ensure_ascii=True))
        assert out == '"\\u00e9"'

    def test_unsupported(self):
        with pytest.raises(TypeError):
            to_json(object())


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_dataclass(self):
        rect = from_json(Rectangle, '{ "width": 10, "height": 20 }')
        assert rect == Rectangle(10, 20)
        assert rect.area() == 200

    def test_dataclass_ignores_unknown_keys(self):
        assert from_json(_Point, '{"x": 1, "y": 2, "z": 3}') == _Point(1, 2)

    def test_dataclass_missing_key(self):
        with pytest.raises(TypeError):
            from_json(_Point, '{"x": 1}')

    def test_dataclass_requires_object(self):
        with pytest.raises(TypeError):
            from_json(_Point, "[1, 2]")

    def test_from_dict_hook(self):
        circle = from_json(_Circle, '{"radius": 10}')
        assert isinstance(circle, _Circle)
        assert circle.radius == 10

    def test_city_record(self):
        record = from_json(CityRecord, '{"country": "Belarus", "city": "Brest"}')
        assert record == CityRecord("Belarus", "Brest")

    def test_plain_types(self):
        assert from_json(dict, '{"a": 1}') == {"a": 1}
        assert from_json(list, "[1, 2]") == [1, 2]
        assert from_json(str, '"x"') == "x"
        assert from_json(float, "3") == 3.0

    def test_plain_type_mismatch(self):
        with pytest.raises(TypeError):
            from_json(dict, "[1]")
        with pytest.raises(TypeError):
            from_json(int, "true")

    def test_untyped(self):
        assert from_json(None, '{"a": [1, null]}') == {"a": [1, None]}

    def test_malformed_json(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(dict, "{not json")

    def test_round_trip(self):
        rect = Rectangle(3, 4)
        assert from_json(Rectangle, to_json(rect)) == rect
