"""Rectangle and JSON pair stories."""

from __future__ import annotations

from dataclasses import dataclass

import orjson
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from katakit.domain.serialization import deserialize, serialize
from katakit.domain.shapes import Rectangle, make_rectangle


@dataclass
class Circle:
    radius: float


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Label(BaseModel):
    text: str
    size: int


# ======================== make_rectangle ========================


@pytest.mark.os_agnostic
def test_rectangle_exposes_sides_and_area() -> None:
    """Width, height and area of a fresh rectangle."""
    r = make_rectangle(10, 20)

    assert (r.width, r.height, r.area()) == (10, 20, 200)


@pytest.mark.os_agnostic
def test_rectangle_area_follows_mutation() -> None:
    """area() is recomputed from the current sides on every call."""
    r = make_rectangle(10, 20)
    r.height = 5

    assert r.area() == 50


# ======================== serialize ========================


@pytest.mark.os_agnostic
def test_serialize_list() -> None:
    assert serialize([1, 2, 3]) == "[1,2,3]"


@pytest.mark.os_agnostic
def test_serialize_keeps_insertion_order() -> None:
    """Keys are not sorted."""
    assert serialize({"width": 10, "height": 20}) == '{"width":10,"height":20}'


@pytest.mark.os_agnostic
def test_serialize_dataclass_uses_field_order() -> None:
    assert serialize(make_rectangle(3, 4)) == '{"width":3,"height":4}'


@pytest.mark.os_agnostic
def test_serialize_plain_object_uses_instance_dict() -> None:
    assert serialize(Point(1, 2)) == '{"x":1,"y":2}'


@pytest.mark.os_agnostic
def test_serialize_pydantic_model_uses_model_dump() -> None:
    assert serialize(Label(text="hi", size=3)) == '{"text":"hi","size":3}'


@pytest.mark.os_agnostic
def test_serialize_rejects_unknown_types() -> None:
    """Objects without fields cannot be encoded."""
    with pytest.raises(TypeError):
        serialize(object())


# ======================== deserialize ========================


@pytest.mark.os_agnostic
def test_deserialize_builds_instance_positionally() -> None:
    circle = deserialize(Circle, '{"radius":10}')

    assert circle == Circle(radius=10)


@pytest.mark.os_agnostic
def test_deserialize_follows_key_order_not_names() -> None:
    """Values are passed by position; mismatched key order swaps fields."""
    r = deserialize(Rectangle, '{"height":20,"width":10}')

    assert (r.width, r.height) == (20, 10)


@pytest.mark.os_agnostic
def test_deserialize_array_spreads_elements() -> None:
    assert deserialize(Point, "[1, 2]").y == 2


@pytest.mark.os_agnostic
def test_deserialize_wrong_arity_raises_type_error() -> None:
    with pytest.raises(TypeError):
        deserialize(Circle, '{"radius":1,"extra":2}')


@pytest.mark.os_agnostic
def test_deserialize_invalid_json_raises_decode_error() -> None:
    """Native parse errors propagate."""
    with pytest.raises(orjson.JSONDecodeError):
        deserialize(Circle, "{radius: 1")


@pytest.mark.os_agnostic
@given(
    width=st.integers(min_value=-(2**53), max_value=2**53),
    height=st.floats(allow_nan=False, allow_infinity=False),
)
def test_rectangle_round_trips(width: int, height: float) -> None:
    """serialize then deserialize reproduces an equal rectangle."""
    original = make_rectangle(width, height)

    assert deserialize(Rectangle, serialize(original)) == original
