import pytest
from pydantic import ValidationError

from models.rectangle import Rectangle, make_rectangle
from serialization import from_json, get_json


class Circle:
    def __init__(self, radius):
        self.radius = radius


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_make_rectangle():
    r = make_rectangle(10, 20)

    assert r.width == 10
    assert r.height == 20
    assert r.get_area() == 200


def test_get_json_is_compact():
    assert get_json([1, 2, 3]) == "[1,2,3]"
    assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'


def test_get_json_dumps_models():
    assert get_json(make_rectangle(10, 20)) == '{"width":10,"height":20}'
    assert get_json(make_rectangle(1.5, 2)) == '{"width":1.5,"height":2}'


def test_rectangle_keeps_integer_sides():
    r = make_rectangle(10, 20)

    assert isinstance(r.width, int)
    assert isinstance(r.get_area(), int)


def test_rectangle_rejects_extra_fields():
    with pytest.raises(ValidationError):
        Rectangle(width=1, height=2, depth=3)


def test_get_json_rejects_unserializable():
    with pytest.raises(TypeError):
        get_json({"fn": object()})


def test_from_json_plain_class_uses_values_in_order():
    c = from_json(Circle, '{"radius":10}')
    p = from_json(Point, '{"x":1,"y":2}')

    assert isinstance(c, Circle)
    assert c.radius == 10
    assert (p.x, p.y) == (1, 2)


def test_from_json_array_passes_items():
    p = from_json(Point, "[3,4]")

    assert (p.x, p.y) == (3, 4)


def test_from_json_model_round_trip():
    r = from_json(Rectangle, get_json(make_rectangle(3, 4)))

    assert isinstance(r, Rectangle)
    assert r.get_area() == 12


def test_from_json_model_validates():
    with pytest.raises(ValidationError):
        from_json(Rectangle, '{"width":"wide"}')


def test_from_json_rejects_scalar():
    with pytest.raises(ValueError, match="Cannot build Circle"):
        from_json(Circle, "10")


def test_from_json_rejects_malformed_text():
    with pytest.raises(ValueError):
        from_json(Circle, "{radius:")
