"""Plane figures whose constructors check the angle and side rules of their kind."""

from __future__ import annotations

from collections.abc import Sequence


class FigureError(ValueError):
    """Raised when the given angles or sides do not make the requested figure."""


def _chained_not_equal(first: int, *rest: int) -> bool:
    """Apply ``!=`` left to right, each step yielding 0 or 1 for the next one."""
    result = first
    for value in rest:
        result = int(result != value)
    return bool(result)


class Figure:
    """A figure described by its angles and side lengths."""

    name = "Figure"

    def __init__(
        self,
        angles: Sequence[int] = (0, 0, 0),
        sides: Sequence[int] = (0, 0, 0),
    ) -> None:
        self.angles = tuple(angles)
        self.sides = tuple(sides)

    @property
    def sides_count(self) -> int:
        return len(self.sides)

    def describe(self) -> str:
        """Return the one-line description of the figure."""
        sides = ", ".join(map(str, self.sides))
        angles = ", ".join(map(str, self.angles))
        if self.sides_count == 4:
            return f"{self.name}( Sides {sides} Angles {angles})"
        return f"{self.name}(Sides {sides}; Angles {angles})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(angles={self.angles!r}, sides={self.sides!r})"


class Triangle(Figure):
    """A triangle: its three angles must add up to 180."""

    name = "Triangle"

    def __init__(
        self, a: int, b: int, c: int, a_side: int, b_side: int, c_side: int
    ) -> None:
        super().__init__((a, b, c), (a_side, b_side, c_side))
        self._validate()

    def _validate(self) -> None:
        if sum(self.angles) != 180:
            raise FigureError("The sum of the angles should be 180 ")


class EquilateralTriangle(Triangle):
    """A triangle rejected when the middle side differs from both others or angle C is not 60."""

    name = "EquilateralTriangle"

    def _validate(self) -> None:
        super()._validate()
        a_side, b_side, c_side = self.sides
        if a_side != b_side and b_side != c_side:
            raise FigureError("Sides should be equal")
        if self.angles[2] != 60:
            raise FigureError("Ungles should be 60")


class RightTriangle(Triangle):
    """A triangle whose angle C is 90."""

    name = "Rightangled Triangle"

    def _validate(self) -> None:
        super()._validate()
        if self.angles[2] != 90:
            raise FigureError("C-ungle should be 90")


class IsoscelesTriangle(Triangle):
    """A triangle whose sides A and C, and angles A and C, are equal."""

    name = "IsosscelessTriangle"

    def _validate(self) -> None:
        super()._validate()
        a_side, _, c_side = self.sides
        if a_side != c_side:
            raise FigureError("aSide and bSide should be equal")
        a, _, c = self.angles
        if a != c:
            raise FigureError("Ungle A and ungle B should be equal")


class Quadrilateral(Figure):
    """A quadrilateral: its four angles must add up to 360."""

    name = "Quadrilateral"

    def __init__(
        self,
        a: int,
        b: int,
        c: int,
        d: int,
        a_side: int,
        b_side: int,
        c_side: int,
        d_side: int,
    ) -> None:
        super().__init__((a, b, c, d), (a_side, b_side, c_side, d_side))
        self._validate()

    def _validate(self) -> None:
        if sum(self.angles) != 360:
            raise FigureError("The sum of the ungles should be 360")


class Rectangle(Quadrilateral):
    """A quadrilateral rejected when both opposite angle pairs differ or angle D is not 90."""

    name = "Rectangle"

    def _validate(self) -> None:
        super()._validate()
        a, b, c, d = self.angles
        if a != c and b != d:
            raise FigureError("aSide and cSide/ bSide and dSide should be equal")
        if d != 90:
            raise FigureError("Ungles should be 90")


class Square(Quadrilateral):
    """A quadrilateral whose sides pass the chained side test and whose angle D is 90."""

    name = "Square"

    def _validate(self) -> None:
        super()._validate()
        if _chained_not_equal(*self.sides):
            raise FigureError("All sides should be equal")
        if self.angles[3] != 90:
            raise FigureError("All ungles should be 90")


class Parallelogram(Quadrilateral):
    """A quadrilateral with at least one equal pair of opposite sides and of opposite angles."""

    name = "Parallelogram"

    def _validate(self) -> None:
        super()._validate()
        a_side, b_side, c_side, d_side = self.sides
        if a_side != c_side and b_side != d_side:
            raise FigureError("aSide and cSide/ bSide and dSide should be equal")
        a, b, c, d = self.angles
        if a != c and b != d:
            raise FigureError("aUngle and cUngle/ bUngle and dUngle should be equal")


class Rhomb(Quadrilateral):
    """A quadrilateral whose sides pass the chained side test, with an equal pair of opposite angles."""

    name = "Rhomb"

    def _validate(self) -> None:
        super()._validate()
        if _chained_not_equal(*self.sides):
            raise FigureError("All sides should be equal")
        a, b, c, d = self.angles
        if a != c and b != d:
            raise FigureError("aUngle and cUngle/ bUngle and dUngle should be equal")