import pytest
from hypothesis import given, strategies as st

from pyoptics import Lens, lens, nth, key, identity, view, set_, over, \
    compose
from tests.helpers import Greeting, Pair, Point2D, Settings, markers, \
    labels, points, label_lens, point_lens


@given(markers)
def test_get_set(s):
    assert label_lens.set(s, label_lens.get(s)) == s
    assert point_lens.set(s, point_lens.get(s)) == s


@given(markers, points)
def test_set_get(s, p):
    assert point_lens.get(point_lens.set(s, p)) == p


@given(markers, labels, labels)
def test_set_set(s, a, b):
    assert label_lens.set(label_lens.set(s, a), b) == label_lens.set(s, b)


@given(markers, labels)
def test_set_leaves_siblings_alone(s, a):
    updated = label_lens.set(s, a)
    assert updated.point == s.point
    assert updated.previous == s.previous
    assert updated.origin == s.origin


def test_set_returns_new_value():
    p = Point2D(1.0, 2.0)
    moved = lens("x").set(p, 5.0)
    assert moved == Point2D(5.0, 2.0)
    assert p == Point2D(1.0, 2.0)


def test_over_and_free_functions():
    x = lens("x")
    p = Point2D(1.0, 2.0)
    assert x.over(p, lambda v: v * 10) == Point2D(10.0, 2.0)
    assert view(x, p) == 1.0
    assert set_(x, p, 3.0) == Point2D(3.0, 2.0)
    assert over(x, p, lambda v: -v) == Point2D(-1.0, 2.0)


def test_of_builds_from_getter_and_setter():
    first = Lens.of(getter=lambda t: t[0], setter=lambda t, a: (a, t[1]))
    assert first.get((1, 2)) == 1
    assert first.set((1, 2), 9) == (9, 2)
    assert first.view((1, 2)) == (1, (1, 2))


def test_lens_on_named_tuple():
    right = lens("right")
    assert right.set(Pair(1, 2), 5) == Pair(1, 5)
    assert isinstance(right.set(Pair(1, 2), 5), Pair)


def test_lens_on_pydantic_model():
    retries = lens("retries")
    settings = Settings(name="svc")
    updated = retries.set(settings, 5)
    assert updated.retries == 5
    assert updated.name == "svc"
    assert settings.retries == 3


def test_lens_on_unsupported_aggregate_raises_type_error():
    with pytest.raises(TypeError):
        lens("real").set(1 + 2j, 4.0)


def test_nth_then_field():
    greetings = [Greeting("Hello", "en"), Greeting("Bonjour", "fr")]
    first_key = compose(nth(0), lens("key"))
    assert first_key.get(greetings) == "Hello"
    updated = first_key.set(greetings, "Salut")
    assert first_key.get(updated) == "Salut"
    assert updated[1] == Greeting("Bonjour", "fr")
    assert greetings[0].key == "Hello"


def test_nth_keeps_tuple_type_and_rejects_out_of_range():
    assert nth(1).set((1, 2, 3), 20) == (1, 20, 3)
    assert nth(-1).get((1, 2, 3)) == 3
    with pytest.raises(IndexError):
        nth(5).get([1, 2])


def test_key_on_mapping():
    name = key("name")
    d = {"name": "a", "n": 1}
    assert name.get(d) == "a"
    assert name.set(d, "b") == {"name": "b", "n": 1}
    assert d == {"name": "a", "n": 1}
    with pytest.raises(KeyError):
        key("missing").get(d)


@given(st.integers(), st.integers())
def test_identity(s, a):
    ident = identity()
    assert ident.get(s) == s
    assert ident.set(s, a) == a
