"""Tests for circle/rectangle models and the bounding-box computation."""

from __future__ import annotations

import math
import random

import pytest
from pydantic import ValidationError

from circlebox.domain.geometry import (
    Circle,
    Point,
    Rectangle,
    bounding_box,
    bounding_boxes,
)


def _c(x: float, y: float, r: float) -> Circle:
    return Circle(x=x, y=y, radius=r)


def _rect(x1: float, y1: float, x2: float, y2: float) -> Rectangle:
    return Rectangle(left_bottom=Point(x=x1, y=y1), right_top=Point(x=x2, y=y2))


class TestModels:
    def test_circle_extent(self) -> None:
        c = _c(1, 2, 3)
        assert (c.left, c.bottom, c.right, c.top) == (-2, -1, 4, 5)

    def test_negative_radius_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _c(0, 0, -1)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Circle(x=float("inf"), y=0, radius=1)

    def test_string_coordinate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Circle.model_validate({"x": "1", "y": 0, "radius": 1})

    def test_extent_overflow_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _c(-1e308, 0, 1e308)

    def test_point_rejects_infinity(self) -> None:
        with pytest.raises(ValidationError):
            Point(x=math.inf, y=0)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Circle.model_validate({"x": 1, "y": 2})

    def test_frozen(self) -> None:
        c = _c(0, 0, 1)
        with pytest.raises(ValidationError):
            c.radius = 2  # type: ignore[misc]

    def test_default_rectangle_is_zero(self) -> None:
        assert Rectangle() == _rect(0, 0, 0, 0)

    def test_wire_shape(self) -> None:
        assert _rect(-1, -2, 3, 4).model_dump() == {
            "left_bottom": {"x": -1, "y": -2},
            "right_top": {"x": 3, "y": 4},
        }


class TestBoundingBox:
    def test_empty_gives_zero_rectangle(self) -> None:
        assert bounding_box([]) == _rect(0, 0, 0, 0)

    def test_single_circle_at_origin(self) -> None:
        assert bounding_box([_c(0, 0, 5)]) == _rect(-5, -5, 5, 5)

    def test_two_circles(self) -> None:
        assert bounding_box([_c(0, 0, 1), _c(10, 0, 1)]) == _rect(-1, -1, 11, 1)

    def test_zero_radius_collapses_to_point(self) -> None:
        assert bounding_box([_c(3, -2, 0)]) == _rect(3, -2, 3, -2)

    def test_zero_radius_collapses_one_axis(self) -> None:
        box = bounding_box([_c(0, 4, 0), _c(6, 4, 0)])
        assert box == _rect(0, 4, 6, 4)
        assert box.height == 0
        assert box.width == 6

    def test_axes_independent(self) -> None:
        # Widest circle on x is not the one extending furthest on y.
        box = bounding_box([_c(0, 0, 10), _c(2, 30, 1)])
        assert box == _rect(-10, -10, 10, 31)

    def test_negative_coordinates(self) -> None:
        box = bounding_box([_c(-5, -5, 1), _c(-2, -8, 0.5)])
        assert box == _rect(-6, -8.5, -1.5, -4)

    def test_accepts_any_iterable(self) -> None:
        box = bounding_box(c for c in [_c(1, 1, 1)])
        assert box == _rect(0, 0, 2, 2)

    def test_bounding_boxes_keeps_order(self) -> None:
        boxes = bounding_boxes([[_c(0, 0, 5)], [], [_c(0, 0, 1), _c(10, 0, 1)]])
        assert boxes == [_rect(-5, -5, 5, 5), _rect(0, 0, 0, 0), _rect(-1, -1, 11, 1)]


@pytest.mark.parametrize("seed", range(20))
class TestBoundingBoxProperties:
    def _circles(self, seed: int) -> list[Circle]:
        rng = random.Random(seed)
        return [
            _c(rng.uniform(-100, 100), rng.uniform(-100, 100), rng.uniform(0, 20))
            for _ in range(rng.randint(1, 30))
        ]

    def test_contains_every_circle(self, seed: int) -> None:
        circles = self._circles(seed)
        box = bounding_box(circles)
        assert all(box.contains(c) for c in circles)

    def test_is_minimal(self, seed: int) -> None:
        """Every side touches the extent of at least one circle."""
        circles = self._circles(seed)
        box = bounding_box(circles)
        assert box.left_bottom.x == min(c.left for c in circles)
        assert box.left_bottom.y == min(c.bottom for c in circles)
        assert box.right_top.x == max(c.right for c in circles)
        assert box.right_top.y == max(c.top for c in circles)

    def test_order_does_not_matter(self, seed: int) -> None:
        circles = self._circles(seed)
        shuffled = circles[:]
        random.Random(seed + 1000).shuffle(shuffled)
        assert bounding_box(shuffled) == bounding_box(circles)
