"""Tests for the value types."""

import dataclasses

import pytest

from objtasks.model import CityRecord, Rectangle, make_rectangle


class TestRectangle:
    def test_fields_and_area(self):
        rect = Rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20
        assert rect.area() == 200

    def test_factory(self):
        assert make_rectangle(3, 4) == Rectangle(width=3, height=4)

    def test_frozen(self):
        rect = Rectangle(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rect.width = 5  # type: ignore[misc]


class TestCityRecord:
    def test_dict_round_trip(self):
        record = CityRecord.from_dict({"country": "Russia", "city": "Omsk"})
        assert record.to_dict() == {"country": "Russia", "city": "Omsk"}
