"""
Domain types, reference accessors and hypothesis strategies shared by
the test modules.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple

from hypothesis import strategies as st
from pydantic import BaseModel

from pyoptics import Just, Maybe, Nothing, lens, nullable, prism


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

type Point = Point2D | Point3D

@dataclass(frozen=True)
class Marker:
    """An aggregate holding a sum-typed field."""
    label: str
    point: Point
    previous: Maybe[Point] = Nothing
    origin: Point | None = None

@dataclass(frozen=True)
class Greeting:
    key: str
    lang: str

class Pair(NamedTuple):
    left: int
    right: int

class Settings(BaseModel):
    name: str
    retries: int = 3


# --- Reference accessors ---

label_lens = lens("label")
point_lens = lens("point")
previous_lens = lens("previous")
origin_optional = nullable("origin")
x_lens = lens("x")
y_lens = lens("y")
z_lens = lens("z")
point2d_prism = prism(Point2D)
point3d_prism = prism(Point3D)


# --- Strategies ---

coords = st.floats(allow_nan=False, allow_infinity=False, width=32)
points_2d = st.builds(Point2D, x=coords, y=coords)
points_3d = st.builds(Point3D, x=coords, y=coords, z=coords)
points = st.one_of(points_2d, points_3d)
maybe_points = st.one_of(st.just(Nothing), st.builds(Just, points))
nested_maybe_points = st.one_of(st.just(Nothing), st.builds(Just, maybe_points))
labels = st.text(max_size=12)

markers = st.builds(
    Marker,
    label=labels,
    point=points,
    previous=maybe_points,
    origin=st.one_of(st.none(), points),
)
