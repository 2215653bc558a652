"""Polymorphism: one operation name, behavior chosen by the type involved.

Overloading is resolved on argument types (Python has no signature
overloading, so ``singledispatchmethod`` stands in). Overriding is
resolved on the receiver's type at run time.
"""

from __future__ import annotations

import math
from functools import singledispatchmethod


class Printer:
    """``render`` picks an implementation from its argument's type."""

    @singledispatchmethod
    def render(self, value: object) -> str:
        return f"object: {value!r}"

    @render.register
    def _(self, value: int) -> str:
        return f"int: {value}"

    @render.register
    def _(self, value: list) -> str:
        return f"list of {len(value)} items"


class Shape:
    name = "shape"

    def area(self) -> float:
        raise NotImplementedError


class Circle(Shape):
    name = "circle"

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius**2


class Square(Shape):
    name = "square"

    def __init__(self, side: float) -> None:
        self.side = side

    def area(self) -> float:
        return self.side**2


def total_area(shapes: list[Shape]) -> float:
    return sum(shape.area() for shape in shapes)


def demo() -> None:
    printer = Printer()
    for value in (42, [1, 2, 3], "hi"):
        print(printer.render(value))

    shapes: list[Shape] = [Circle(1), Square(2)]
    for shape in shapes:
        print(f"{shape.name} area: {shape.area():.2f}")
    print(f"total area: {total_area(shapes):.2f}")
