# linesect

Lightweight 2D and 3D vector types and a `Line` class that finds where two
lines intersect.

## Installation

```
pip install .
```

## Vectors

`linesect.vectors` provides `Vector2` and `Vector3`. Both are mutable
dataclasses with components defaulting to zero, and support:

- `+`, `-` and unary `-`;
- `*` by a number (on either side) or component-wise by another vector of the
  same kind, and `/` by a number;
- `==` on all components and lexicographic ordering with `<`;
- indexing (`v[0]`, `v[1] = 2.0`; an index past the last axis raises
  `IndexError`) and iteration;
- `set(...)`, `length()`, `distance(other)`, `dot(other)` and
  `equal(other, epsilon)`, which is true when every component differs by less
  than `epsilon`;
- `normalize()`, which scales the vector to unit length in place and returns
  it; a zero vector raises `ZeroDivisionError`.

`Vector3` also has `cross(other)` and `angle(other)`, the angle between two
vectors in degrees.

`str()` of a vector gives its components in parentheses, e.g. `(1, 2, 0)`.

```python
from linesect.vectors import Vector2, Vector3

v = Vector2(3, 4)
v.length()                  # 5.0
v.normalize()               # v becomes (0.6, 0.8)

a = Vector3(1, 0, 0)
b = Vector3(0, 1, 0)
print(a.cross(b))           # (0, 0, 1)
a.angle(b)                  # about 90 degrees
a.equal(Vector3(1, 0, 1e-7), 1e-6)  # True
```

## Lines

`linesect.line.Line` stores a line in parametric form: a `direction` and a
`point` it passes through, both `Vector3`. It can be built from:

- two `Vector3` values: `Line(direction, point)`;
- two `Vector2` values: `Line.from_2d(direction, point)`, placing the line in
  the z = 0 plane;
- slope and intercept: `Line.from_slope_intercept(k, b)` for `y = k * x + b`.

`set(direction, point)` and `set_slope_intercept(k, b)` change an existing
line; `set` accepts `Vector2` or `Vector3` values and lifts 2D ones to z = 0.

```python
from linesect.line import Line
from linesect.vectors import Vector2

line1 = Line.from_slope_intercept(1, 0)    # y = x
line2 = Line.from_slope_intercept(-1, 2)   # y = -x + 2

line1.is_intersected(line2)   # True
print(line1.intersect(line2)) # (1, 1, 0)

line3 = Line.from_2d(Vector2(1, 2), Vector2(0, 1))
print(line3)
# Line
# ====
# Direction: (1, 2, 0)
#     Point: (0, 1, 0)
```

`Line.intersect` returns a `Vector3` whose components are all NaN when the
lines are parallel; `Line.is_intersected` reports that case as `False`. For
skew lines in 3D, `intersect` returns the point on the first line that is
closest to the second.

## What it does not do

linesect is a library only: it has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```