"""
LSP: after

Rectangle and Square are siblings under Shape. Neither promises mutable
width and height, so any Shape can stand in for any other.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        """Surface covered by the shape."""


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def resized(self, width: float, height: float) -> "Rectangle":
        return Rectangle(width, height)


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def area(self) -> float:
        return self.side * self.side

    def resized(self, side: float) -> "Square":
        return Square(side)


def total_area(shapes: list[Shape]) -> float:
    return sum(shape.area() for shape in shapes)


def demo() -> list[str]:
    shapes = [Rectangle(3, 4), Square(2)]
    lines = [f"{shape!r}.area() = {shape.area()}" for shape in shapes]
    lines.append(f"total_area = {total_area(shapes)}")
    lines.append(f"Rectangle(2, 2).resized(3, 4).area() = {Rectangle(2, 2).resized(3, 4).area()}")
    return lines
