# figurekit

Plane figures that check themselves. Each triangle or quadrilateral is built
from its angles (in degrees) and its side lengths, all whole numbers. If the
values break a rule of the shape, construction raises
`figurekit.shapes.FigureError` (a subclass of `ValueError`). No object is
created in that case.

## Shapes

All classes live in `figurekit.shapes`. A triangle takes its three angles
`a, b, c` and then its three sides `a_side, b_side, c_side`. A quadrilateral
takes its four angles `a, b, c, d` and then its four sides
`a_side, b_side, c_side, d_side`.

Each specialised shape first applies the check of its base shape. Its own
checks come after that.

| Class                 | Construction fails when                                                         |
|-----------------------|---------------------------------------------------------------------------------|
| `Triangle`            | the angles do not sum to 180                                                    |
| `EquilateralTriangle` | side B differs from both side A and side C, or angle C is not 60                |
| `RightTriangle`       | angle C is not 90                                                               |
| `IsoscelesTriangle`   | side A differs from side C, or angle A differs from angle C                     |
| `Quadrilateral`       | the angles do not sum to 360                                                    |
| `Rectangle`           | angle A differs from angle C and angle B differs from angle D, or angle D is not 90 |
| `Square`              | the chained side test is true, or angle D is not 90                             |
| `Parallelogram`       | both pairs of opposite sides differ, or both pairs of opposite angles differ    |
| `Rhomb`               | the chained side test is true, or both pairs of opposite angles differ          |

The *chained side test* compares the sides from left to right with `!=`. Each
comparison gives 0 or 1, and that result is then compared with the next side.
The test is true when the last comparison is true. Because of this, four equal
non-zero sides such as `20, 20, 20, 20` fail the test.

Every figure has the following members:

- `name`: the shape's display name, for example `"Triangle"`,
  `"Rightangled Triangle"` or `"IsosscelessTriangle"`.
- `angles` and `sides`: tuples of the values given.
- `sides_count`: the number of sides.
- `describe()`: a one-line description. `str(figure)` returns the same text.

The base class `Figure` can also be built directly, as in
`Figure(angles=..., sides=...)`. Its default is three zero angles and three
zero sides, and it performs no checks.

## Usage

```python
from figurekit.shapes import FigureError, Quadrilateral, Triangle

print(Triangle(50, 60, 70, 10, 20, 30).describe())
# Triangle(Sides 10, 20, 30; Angles 50, 60, 70)

print(Quadrilateral(90, 90, 90, 90, 60, 60, 60, 60).describe())
# Quadrilateral( Sides 60, 60, 60, 60 Angles 90, 90, 90, 90)

try:
    Triangle(50, 60, 80, 10, 20, 30)
except FigureError as err:
    print("not created:", err)
# not created: The sum of the angles should be 180
```

## Command line

```
figurekit
```

The command takes no arguments other than `--help`. It builds a fixed sample
of each shape in turn. For each sample it prints one of two things:

- the shape's description followed by "Is created", or
- a "... was not created." line, followed by `Error:` and the reason.

It always exits with status 0.

## What it does not do

The command cannot read figures from its arguments, from a file or from
input. It only reports on its built-in samples. The package computes no areas,
perimeters or other measurements, and it does not check whether the side
lengths can actually form the shape.

## Development

```
pip install -e .[test]
pytest
```