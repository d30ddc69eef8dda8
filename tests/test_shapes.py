import re

import pytest

from figurekit.shapes import (
    EquilateralTriangle,
    Figure,
    FigureError,
    IsoscelesTriangle,
    Parallelogram,
    Quadrilateral,
    Rectangle,
    Rhomb,
    RightTriangle,
    Square,
    Triangle,
)


def _raises(message):
    return pytest.raises(FigureError, match=f"^{re.escape(message)}$")


def test_triangle_keeps_values():
    triangle = Triangle(50, 60, 70, 10, 20, 30)
    assert triangle.angles == (50, 60, 70)
    assert triangle.sides == (10, 20, 30)
    assert triangle.sides_count == 3
    assert triangle.name == "Triangle"


def test_triangle_describe():
    triangle = Triangle(50, 60, 70, 10, 20, 30)
    assert triangle.describe() == "Triangle(Sides 10, 20, 30; Angles 50, 60, 70)"
    assert str(triangle) == triangle.describe()


def test_triangle_bad_sum():
    with pytest.raises(FigureError) as excinfo:
        Triangle(50, 60, 80, 10, 20, 30)
    assert str(excinfo.value) == "The sum of the angles should be 180 "


def test_figure_error_is_value_error():
    with pytest.raises(ValueError):
        Triangle(1, 1, 1, 1, 1, 1)


def test_equilateral_created():
    figure = EquilateralTriangle(60, 60, 60, 30, 30, 30)
    assert figure.name == "EquilateralTriangle"
    assert figure.sides == (30, 30, 30)


def test_equilateral_sides_differ():
    with pytest.raises(FigureError) as excinfo:
        EquilateralTriangle(60, 60, 60, 10, 20, 30)
    assert str(excinfo.value) == "Sides should be equal"


def test_equilateral_only_one_pair_needs_matching():
    figure = EquilateralTriangle(60, 60, 60, 10, 10, 20)
    assert figure.sides == (10, 10, 20)


def test_equilateral_angle_c():
    with pytest.raises(FigureError) as excinfo:
        EquilateralTriangle(60, 70, 50, 30, 30, 30)
    assert str(excinfo.value) == "Ungles should be 60"


def test_equilateral_sum_checked_first():
    with pytest.raises(FigureError) as excinfo:
        EquilateralTriangle(60, 60, 70, 10, 20, 30)
    assert str(excinfo.value) == "The sum of the angles should be 180 "


def test_right_triangle():
    figure = RightTriangle(30, 60, 90, 10, 20, 30)
    assert figure.name == "Rightangled Triangle"
    assert figure.angles[2] == 90
    with _raises("C-ungle should be 90"):
        RightTriangle(90, 60, 30, 10, 20, 30)


def test_isosceles():
    figure = IsoscelesTriangle(50, 80, 50, 10, 20, 10)
    assert figure.name == "IsosscelessTriangle"
    with _raises("aSide and bSide should be equal"):
        IsoscelesTriangle(50, 80, 50, 10, 20, 15)
    with _raises("Ungle A and ungle B should be equal"):
        IsoscelesTriangle(40, 80, 60, 10, 20, 10)


def test_quadrilateral():
    figure = Quadrilateral(90, 90, 90, 90, 60, 60, 60, 60)
    assert figure.sides_count == 4
    assert figure.name == "Quadrilateral"
    assert (
        figure.describe()
        == "Quadrilateral( Sides 60, 60, 60, 60 Angles 90, 90, 90, 90)"
    )
    with _raises("The sum of the ungles should be 360"):
        Quadrilateral(90, 90, 90, 80, 60, 60, 60, 60)


def test_rectangle():
    figure = Rectangle(90, 90, 90, 90, 70, 60, 60, 60)
    assert figure.sides == (70, 60, 60, 60)
    assert figure.name == "Rectangle"
    with _raises("aSide and cSide/ bSide and dSide should be equal"):
        Rectangle(100, 80, 80, 100, 60, 60, 60, 60)
    with _raises("Ungles should be 90"):
        Rectangle(80, 100, 80, 100, 60, 60, 60, 60)


def test_square_chained_side_rule():
    with _raises("All sides should be equal"):
        Square(90, 90, 90, 90, 20, 20, 20, 20)
    figure = Square(90, 90, 90, 90, 1, 1, 1, 1)
    assert figure.name == "Square"
    assert Square(90, 90, 90, 90, 0, 0, 0, 0).sides == (0, 0, 0, 0)


def test_square_angle_d():
    with pytest.raises(FigureError) as excinfo:
        Square(80, 100, 80, 100, 1, 1, 1, 1)
    assert str(excinfo.value) == "All ungles should be 90"


def test_parallelogram():
    figure = Parallelogram(100, 80, 100, 80, 20, 30, 20, 30)
    assert figure.name == "Parallelogram"
    with _raises("The sum of the ungles should be 360"):
        Parallelogram(30, 40, 30, 40, 20, 30, 20, 30)
    with _raises("aSide and cSide/ bSide and dSide should be equal"):
        Parallelogram(100, 80, 100, 80, 20, 30, 25, 35)
    with _raises("aUngle and cUngle/ bUngle and dUngle should be equal"):
        Parallelogram(100, 80, 80, 100, 20, 30, 20, 30)


def test_rhomb():
    figure = Rhomb(100, 80, 100, 80, 1, 1, 1, 1)
    assert figure.name == "Rhomb"
    with _raises("All sides should be equal"):
        Rhomb(100, 80, 100, 80, 30, 30, 30, 30)
    with _raises("aUngle and cUngle/ bUngle and dUngle should be equal"):
        Rhomb(100, 80, 80, 100, 1, 1, 1, 1)


def test_figure_defaults_describe_like_triangle():
    figure = Figure()
    assert figure.sides_count == 3
    assert figure.describe().startswith("Figure(Sides ")
    assert figure.angles == (0, 0, 0)