"""Circles, points, rectangles and the bounding-box computation.

A task is an ordered sequence of circles; each task yields exactly one
axis-aligned rectangle enclosing every circle's full disc.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field, model_validator


class Point(BaseModel):
    """A point on the plane."""

    model_config = {"frozen": True, "allow_inf_nan": False}

    x: float = 0.0
    y: float = 0.0


class Circle(BaseModel):
    """A circle with center ``(x, y)`` and a non-negative radius.

    Coordinates must be JSON numbers; strings and booleans are rejected.
    """

    model_config = {"frozen": True, "strict": True, "allow_inf_nan": False}

    x: float
    y: float
    radius: float = Field(ge=0)

    @model_validator(mode="after")
    def _finite_extent(self) -> Circle:
        # Huge finite values can still overflow to inf once the radius is applied.
        if not all(math.isfinite(v) for v in (self.left, self.right, self.bottom, self.top)):
            raise ValueError("circle extent is not a finite number")
        return self

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    @property
    def bottom(self) -> float:
        return self.y - self.radius

    @property
    def top(self) -> float:
        return self.y + self.radius


class Rectangle(BaseModel):
    """Axis-aligned rectangle given by its left-bottom and right-top corners.

    The default instance is the zero rectangle ``(0, 0)-(0, 0)``.
    """

    model_config = {"frozen": True}

    left_bottom: Point = Field(default_factory=Point)
    right_top: Point = Field(default_factory=Point)

    @property
    def width(self) -> float:
        return self.right_top.x - self.left_bottom.x

    @property
    def height(self) -> float:
        return self.right_top.y - self.left_bottom.y

    def contains(self, circle: Circle) -> bool:
        """Return True if the circle's whole disc lies inside the rectangle."""
        return (
            self.left_bottom.x <= circle.left
            and self.left_bottom.y <= circle.bottom
            and self.right_top.x >= circle.right
            and self.right_top.y >= circle.top
        )


Task = list[Circle]


def bounding_box(circles: Iterable[Circle]) -> Rectangle:
    """Return the minimal axis-aligned rectangle enclosing every circle.

    Each axis is an independent interval, so one pass with running
    min/max accumulators is enough. An empty input gives the zero
    rectangle rather than an error.
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    seen = False

    for circle in circles:
        seen = True
        min_x = min(min_x, circle.left)
        min_y = min(min_y, circle.bottom)
        max_x = max(max_x, circle.right)
        max_y = max(max_y, circle.top)

    if not seen:
        return Rectangle()

    return Rectangle(
        left_bottom=Point(x=min_x, y=min_y),
        right_top=Point(x=max_x, y=max_y),
    )


def bounding_boxes(tasks: Sequence[Sequence[Circle]]) -> list[Rectangle]:
    """Compute one bounding box per task, preserving task order."""
    return [bounding_box(task) for task in tasks]
