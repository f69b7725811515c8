# hullkit

hullkit builds the convex hull of a 3D point cloud. The points are snapped
onto an integer grid, and the hull is built on that grid in exact integer and
rational arithmetic. The work is split into halves that are merged back
together, in the style of Preparata and Hong. The result is a graph of
vertices joined by paired half-edges.

The package uses only the standard library.

## Installation

```
pip install .
```

To install the test requirements and run the tests:

```
pip install ".[test]"
pytest
```

## Building a hull

`hullkit.builder.HullBuilder.compute(points)` takes any iterable of
three-number sequences. After the call, `builder.vertex_list` is one vertex of
the hull, or `None` if there were no points. You reach every other hull vertex
by following edges from there.

```python
from hullkit.builder import HullBuilder

points = [
    (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0),
    (1.0, 1.0, 0.0), (1.0, 0.0, 1.0), (0.0, 1.0, 1.0), (1.0, 1.0, 1.0),
    (0.5, 0.5, 0.5),  # interior point, not part of the hull
]

builder = HullBuilder()
builder.compute(points)

hull_vertices = []
seen = {builder.vertex_list}
stack = [builder.vertex_list]
while stack:
    vertex = stack.pop()
    hull_vertices.append(vertex)
    edge = vertex.edges
    while edge is not None:
        if edge.target not in seen:
            seen.add(edge.target)
            stack.append(edge.target)
        edge = edge.next
        if edge is vertex.edges:
            break

for vertex in hull_vertices:
    print(vertex.point.index, builder.get_coordinates(vertex))
```

## The graph

- `Vertex`
  - `point` is an `IntPoint` holding the grid position. Its `index` field is
    the position of the input point that the vertex came from.
  - `edges` is one of the vertex's outgoing edges, or `None`.
  - `xvalue()`, `yvalue()` and `zvalue()` return the grid coordinates as
    floats.
  - `dot(normal)` returns the exact dot product as a `Rational128`.
- `Edge`
  - `target` is the vertex the edge points to.
  - `reverse` is the paired edge running the other way, so
    `edge.reverse.target` is the edge's origin.
  - `next` and `prev` form a circular list of the edges that leave the same
    vertex.
  - `edge.reverse.prev` is the next edge around the face on the edge's side.
- `HullBuilder`
  - `get_coordinates(vertex)` maps a vertex back to model coordinates.
  - `to_vector(point)` scales a grid direction back to model units, without
    the centre offset.
  - `face_normal(face)` returns the unit normal of a `Face` in model units.
  - `new_edge_pair(origin, target)` and `remove_edge_pair(edge)` edit the
    graph directly.

The longest side of the bounding box is split into 10216 grid steps, and
coordinates are truncated to that grid. The positions returned by
`get_coordinates` are therefore the snapped positions, not the exact input
values.

## Supporting modules

- `hullkit.exact` holds the exact types the construction relies on:
  - `IntPoint`, an integer point with `dot`, `cross` and `is_zero`;
  - `Rational64` and `Rational128`, fractions that can be compared exactly and
    may have a zero denominator;
  - `RationalPoint`, a point whose coordinates share one denominator.
- `hullkit.vector` provides:
  - `Vector3` and `Vector4`, which support dot and cross products, lengths,
    normalisation, rotation, interpolation, component-wise min and max, and
    axis queries;
  - `plane_space(n)`, which returns two vectors spanning the plane orthogonal
    to a unit normal.
- `hullkit.scalar` holds scalar helpers:
  - `clamped`, `fsel` and `fuzzy_zero`;
  - angle helpers `normalize_angle`, `atan2_fast`, `radians` and `degrees`;
  - byte-order helpers `swap_endian_float`, `unswap_endian_float`,
    `swap_endian_double` and `unswap_endian_double`.

## What the package does not do

- There is no step that shrinks the hull by moving its faces inward.
- There is no flat, indexed output of vertices, edges and faces. The hull is
  available only as the linked `Vertex`/`Edge` graph described above.
  `Face` objects are not created by `compute`.
- There is no command-line tool.
- Nothing is read from or written to mesh files.