"""
LSP: before

Square inherits Rectangle's setters but cannot honor their contract, so code
written against Rectangle breaks when handed a Square.
"""


class Rectangle:
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def set_width(self, width: float) -> None:
        self.width = width

    def set_height(self, height: float) -> None:
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Square(Rectangle):
    def __init__(self, side: float):
        super().__init__(side, side)

    def set_width(self, width: float) -> None:
        self.width = self.height = width

    def set_height(self, height: float) -> None:
        self.width = self.height = height


def stretch(rect: Rectangle, width: float, height: float) -> float:
    """Resize and return the new area, which callers expect to be width * height."""
    rect.set_width(width)
    rect.set_height(height)
    return rect.area()


def demo() -> list[str]:
    return [
        f"stretch(Rectangle(2, 2), 3, 4) = {stretch(Rectangle(2, 2), 3, 4)} (expected 12)",
        f"stretch(Square(2), 3, 4) = {stretch(Square(2), 3, 4)} (expected 12)",
    ]
