"""Command that builds a fixed set of figures and reports which were created."""

from __future__ import annotations

import argparse
import sys
from typing import NamedTuple

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


class _Scenario(NamedTuple):
    kind: type[Figure]
    args: tuple[int, ...]
    failure_label: str
    success_suffix: str = " Is created"


_SCENARIOS = (
    _Scenario(Triangle, (50, 60, 70, 10, 20, 30), "Triangle was not created. ", " Is created "),
    _Scenario(EquilateralTriangle, (60, 60, 60, 30, 30, 30), "Equilateral triangle was not created. "),
    _Scenario(RightTriangle, (30, 60, 90, 10, 20, 30), "Rightangled triangle was not created. "),
    _Scenario(IsoscelesTriangle, (50, 80, 50, 10, 20, 10), "Isossceless Triangle  was not created. "),
    _Scenario(Quadrilateral, (90, 90, 90, 90, 60, 60, 60, 60), "Quadrilateral  was not created. "),
    _Scenario(Rectangle, (90, 90, 90, 90, 70, 60, 60, 60), "Rectangle  was not created. "),
    _Scenario(Square, (90, 90, 90, 90, 20, 20, 20, 20), "Square  was not created. "),
    _Scenario(Parallelogram, (30, 40, 30, 40, 20, 30, 20, 30), "Parallelogram  was not created. "),
    _Scenario(Rhomb, (30, 40, 30, 40, 30, 30, 30, 30), "Rhomb  was not created. "),
)


def main(argv=None) -> int:
    """Build each sample figure and print its description or the reason it failed."""
    parser = argparse.ArgumentParser(
        prog="figurekit",
        description="Build sample figures and report which of them are valid.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    for scenario in _SCENARIOS:
        try:
            figure = scenario.kind(*scenario.args)
        except FigureError as error:
            out.write(f"{scenario.failure_label}\nError: {error}\n\n")
        else:
            out.write(f"{figure.describe()}{scenario.success_suffix}\n\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())