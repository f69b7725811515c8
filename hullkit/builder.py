"""Incremental divide-and-conquer construction of a 3D convex hull on an integer grid."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from hullkit.exact import IntPoint, Rational64, Rational128, RationalPoint
from hullkit.vector import Vector3

_GRID = 10216.0
_DOWN = (0, 0, -1)


class Orientation(Enum):
    """Relative orientation of two edges around a common vertex."""

    NONE = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


class Vertex:
    """A hull vertex with its ring of outgoing edges."""

    __slots__ = (
        "next",
        "prev",
        "edges",
        "first_nearby_face",
        "last_nearby_face",
        "point128",
        "point",
        "copy",
    )

    def __init__(self, point: Optional[IntPoint] = None) -> None:
        self.next: Optional[Vertex] = None
        self.prev: Optional[Vertex] = None
        self.edges: Optional[Edge] = None
        self.first_nearby_face: Optional[Face] = None
        self.last_nearby_face: Optional[Face] = None
        self.point128: Optional[RationalPoint] = None
        self.point: IntPoint = point if point is not None else IntPoint()
        self.copy = -1

    def __repr__(self) -> str:
        p = self.point
        return f"Vertex({p.x}, {p.y}, {p.z}, index={p.index})"

    def dot(self, normal: IntPoint) -> Rational128:
        """Exact dot product of the vertex position with ``normal``."""
        if self.point.index >= 0:
            return Rational128(self.point.dot(normal))
        p = self.point128
        return Rational128(p.x * normal.x + p.y * normal.y + p.z * normal.z, p.denominator)

    def xvalue(self) -> float:
        """The x grid coordinate as a float."""
        return float(self.point.x) if self.point.index >= 0 else self.point128.xvalue()

    def yvalue(self) -> float:
        """The y grid coordinate as a float."""
        return float(self.point.y) if self.point.index >= 0 else self.point128.yvalue()

    def zvalue(self) -> float:
        """The z grid coordinate as a float."""
        return float(self.point.z) if self.point.index >= 0 else self.point128.zvalue()

    def receive_nearby_faces(self, src: Vertex) -> None:
        """Take over all faces that have ``src`` as their nearby vertex."""
        if self.last_nearby_face is not None:
            self.last_nearby_face.next_with_same_nearby_vertex = src.first_nearby_face
        else:
            self.first_nearby_face = src.first_nearby_face
        if src.last_nearby_face is not None:
            self.last_nearby_face = src.last_nearby_face
        face = src.first_nearby_face
        while face is not None:
            face.nearby_vertex = self
            face = face.next_with_same_nearby_vertex
        src.first_nearby_face = None
        src.last_nearby_face = None


class Edge:
    """A directed half-edge; ``next``/``prev`` walk the edges leaving the same vertex."""

    __slots__ = ("next", "prev", "reverse", "target", "face", "copy")

    def __init__(self) -> None:
        self.next: Optional[Edge] = None
        self.prev: Optional[Edge] = None
        self.reverse: Optional[Edge] = None
        self.target: Optional[Vertex] = None
        self.face: Optional[Face] = None
        self.copy = 0

    def __repr__(self) -> str:
        origin = self.reverse.target if self.reverse is not None else None
        return f"Edge({origin!r} -> {self.target!r})"

    def link(self, other: Edge) -> None:
        """Make ``other`` the successor of this edge around their shared origin."""
        self.next = other
        other.prev = self

    def _release(self) -> None:
        self.next = None
        self.prev = None
        self.reverse = None
        self.target = None
        self.face = None


class Face:
    """A hull face given by an origin and two spanning directions."""

    __slots__ = ("nearby_vertex", "next_with_same_nearby_vertex", "origin", "dir0", "dir1")

    def __init__(self) -> None:
        self.nearby_vertex: Optional[Vertex] = None
        self.next_with_same_nearby_vertex: Optional[Face] = None
        self.origin = IntPoint()
        self.dir0 = IntPoint()
        self.dir1 = IntPoint()

    def init(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        """Set the face from three vertices and register it with ``a``."""
        self.nearby_vertex = a
        self.origin = IntPoint(a.point.x, a.point.y, a.point.z, a.point.index)
        self.dir0 = b.point - a.point
        self.dir1 = c.point - a.point
        if a.last_nearby_face is not None:
            a.last_nearby_face.next_with_same_nearby_vertex = self
        else:
            a.first_nearby_face = self
        a.last_nearby_face = self

    def normal(self) -> IntPoint:
        """Exact (unnormalised) normal ``dir0 x dir1``."""
        return self.dir0.cross(self.dir1)


class _IntermediateHull:
    __slots__ = ("min_xy", "max_xy", "min_yx", "max_yx")

    def __init__(self) -> None:
        self.min_xy: Optional[Vertex] = None
        self.max_xy: Optional[Vertex] = None
        self.min_yx: Optional[Vertex] = None
        self.max_yx: Optional[Vertex] = None

    def set_single(self, v: Optional[Vertex]) -> None:
        self.min_xy = self.max_xy = self.min_yx = self.max_yx = v

    def assign(self, other: _IntermediateHull) -> None:
        self.min_xy = other.min_xy
        self.max_xy = other.max_xy
        self.min_yx = other.min_yx
        self.max_yx = other.max_yx


def _orientation(prev: Edge, nxt: Edge, s: IntPoint, t: IntPoint) -> Orientation:
    if prev.next is nxt:
        if prev.prev is nxt:
            n = t.cross(s)
            base = nxt.reverse.target.point
            m = (prev.target.point - base).cross(nxt.target.point - base)
            return Orientation.COUNTER_CLOCKWISE if n.dot(m) > 0 else Orientation.CLOCKWISE
        return Orientation.COUNTER_CLOCKWISE
    if prev.prev is nxt:
        return Orientation.CLOCKWISE
    return Orientation.NONE


def _ring(start: Optional[Edge], forward: bool = True):
    """Yield the edges of a circular list starting at ``start``."""
    if start is None:
        return
    e = start
    while True:
        following = e.next if forward else e.prev
        yield e
        e = following
        if e is start:
            return


class HullBuilder:
    """Builds the hull graph of a point set; ``vertex_list`` is an entry vertex afterwards."""

    def __init__(self) -> None:
        self.scaling = Vector3()
        self.center = Vector3()
        self.original_vertices: List[Vertex] = []
        self.merge_stamp = 0
        self.min_axis = 0
        self.med_axis = 0
        self.max_axis = 0
        self.used_edge_pairs = 0
        self.max_used_edge_pairs = 0
        self.vertex_list: Optional[Vertex] = None

    # ------------------------------------------------------------------ setup

    def compute(self, points: Iterable[Sequence[float]]) -> None:
        """Build the hull of ``points`` (each a sequence of three floats)."""
        coords = [(float(p[0]), float(p[1]), float(p[2])) for p in points]

        lo = Vector3(1e30, 1e30, 1e30)
        hi = Vector3(-1e30, -1e30, -1e30)
        for c in coords:
            p = Vector3(*c)
            lo = lo.component_min(p)
            hi = hi.component_max(p)

        s = hi - lo
        self.max_axis = s.max_axis()
        self.min_axis = s.min_axis()
        if self.min_axis == self.max_axis:
            self.min_axis = (self.max_axis + 1) % 3
        self.med_axis = 3 - self.max_axis - self.min_axis

        s = s / _GRID
        if (self.med_axis + 1) % 3 != self.max_axis:
            s = s * -1.0
        self.scaling = Vector3(s.x, s.y, s.z)

        inverse = Vector3(*(1.0 / c if c != 0 else c for c in s))
        self.center = (lo + hi) * 0.5

        grid_points = []
        for index, c in enumerate(coords):
            p = (Vector3(*c) - self.center) * inverse
            grid_points.append(
                IntPoint(int(p[self.med_axis]), int(p[self.max_axis]), int(p[self.min_axis]), index)
            )
        grid_points.sort(key=lambda q: (q.y, q.x, q.z))

        self.original_vertices = [Vertex(point) for point in grid_points]
        self.used_edge_pairs = 0
        self.max_used_edge_pairs = 0
        self.merge_stamp = -3

        hull = _IntermediateHull()
        self._compute_internal(0, len(self.original_vertices), hull)
        self.vertex_list = hull.min_xy

    # ------------------------------------------------------------ edge pairs

    def new_edge_pair(self, origin: Vertex, target: Vertex) -> Edge:
        """Create an edge from ``origin`` to ``target`` together with its reverse."""
        e = Edge()
        r = Edge()
        e.reverse = r
        r.reverse = e
        e.copy = self.merge_stamp
        r.copy = self.merge_stamp
        e.target = target
        r.target = origin
        self.used_edge_pairs += 1
        self.max_used_edge_pairs = max(self.max_used_edge_pairs, self.used_edge_pairs)
        return e

    def remove_edge_pair(self, edge: Edge) -> None:
        """Unlink ``edge`` and its reverse from the rings of both end vertices."""
        r = edge.reverse
        n = edge.next
        if n is not edge:
            n.prev = edge.prev
            edge.prev.next = n
            r.target.edges = n
        else:
            r.target.edges = None

        n = r.next
        if n is not r:
            n.prev = r.prev
            r.prev.next = n
            edge.target.edges = n
        else:
            edge.target.edges = None

        edge._release()
        r._release()
        self.used_edge_pairs -= 1

    # ------------------------------------------------------------ coordinates

    def to_vector(self, point: IntPoint) -> Vector3:
        """Scale a grid direction back to model units (without the centre offset)."""
        p = Vector3()
        p[self.med_axis] = float(point.x)
        p[self.max_axis] = float(point.y)
        p[self.min_axis] = float(point.z)
        return p * self.scaling

    def face_normal(self, face: Face) -> Vector3:
        """Unit normal of ``face`` in model units."""
        return self.to_vector(face.dir0).cross(self.to_vector(face.dir1)).normalized()

    def get_coordinates(self, vertex: Vertex) -> Vector3:
        """Position of ``vertex`` in model units."""
        p = Vector3()
        p[self.med_axis] = vertex.xvalue()
        p[self.max_axis] = vertex.yvalue()
        p[self.min_axis] = vertex.zvalue()
        return p * self.scaling + self.center

    # -------------------------------------------------------- divide & merge

    def _compute_internal(self, start: int, end: int, result: _IntermediateHull) -> None:
        n = end - start
        if n == 0:
            result.set_single(None)
            return
        if n == 2:
            v = self.original_vertices[start]
            w = self.original_vertices[start + 1]
            if v.point != w.point:
                dx = v.point.x - w.point.x
                dy = v.point.y - w.point.y
                if dx == 0 and dy == 0:
                    if v.point.z > w.point.z:
                        v, w = w, v
                    v.next = v
                    v.prev = v
                    result.set_single(v)
                else:
                    v.next = w
                    v.prev = w
                    w.next = v
                    w.prev = v
                    if dx < 0 or (dx == 0 and dy < 0):
                        result.min_xy, result.max_xy = v, w
                    else:
                        result.min_xy, result.max_xy = w, v
                    if dy < 0 or (dy == 0 and dx < 0):
                        result.min_yx, result.max_yx = v, w
                    else:
                        result.min_yx, result.max_yx = w, v

                e = self.new_edge_pair(v, w)
                e.link(e)
                v.edges = e
                e = e.reverse
                e.link(e)
                w.edges = e
                return
            n = 1
        if n == 1:
            v = self.original_vertices[start]
            v.edges = None
            v.next = v
            v.prev = v
            result.set_single(v)
            return

        split0 = start + n // 2
        p = self.original_vertices[split0 - 1].point
        split1 = split0
        while split1 < end and self.original_vertices[split1].point == p:
            split1 += 1
        self._compute_internal(start, split0, result)
        hull1 = _IntermediateHull()
        self._compute_internal(split1, end, hull1)
        self._merge(result, hull1)

    def _merge_projection(
        self, h0: _IntermediateHull, h1: _IntermediateHull
    ) -> Tuple[bool, Vertex, Vertex]:
        v0 = h0.max_yx
        v1 = h1.min_yx
        if v0.point.x == v1.point.x and v0.point.y == v1.point.y:
            v1p = v1.prev
            if v1p is v1:
                if v1.edges is not None:
                    v1 = v1.edges.target
                return False, v0, v1
            v1n = v1.next
            v1p.next = v1n
            v1n.prev = v1p
            if v1 is h1.min_xy:
                if v1n.point.x < v1p.point.x or (
                    v1n.point.x == v1p.point.x and v1n.point.y < v1p.point.y
                ):
                    h1.min_xy = v1n
                else:
                    h1.min_xy = v1p
            if v1 is h1.max_xy:
                if v1n.point.x > v1p.point.x or (
                    v1n.point.x == v1p.point.x and v1n.point.y > v1p.point.y
                ):
                    h1.max_xy = v1n
                else:
                    h1.max_xy = v1p

        v0 = h0.max_xy
        v1 = h1.max_xy
        v00 = v10 = None
        sign = 1

        for side in (0, 1):
            dx = (v1.point.x - v0.point.x) * sign
            if dx > 0:
                while True:
                    dy = v1.point.y - v0.point.y
                    w0 = v0.next if side else v0.prev
                    if w0 is not v0:
                        dx0 = (w0.point.x - v0.point.x) * sign
                        dy0 = w0.point.y - v0.point.y
                        if dy0 <= 0 and (dx0 == 0 or (dx0 < 0 and dy0 * dx <= dy * dx0)):
                            v0 = w0
                            dx = (v1.point.x - v0.point.x) * sign
                            continue
                    w1 = v1.next if side else v1.prev
                    if w1 is not v1:
                        dx1 = (w1.point.x - v1.point.x) * sign
                        dy1 = w1.point.y - v1.point.y
                        dxn = (w1.point.x - v0.point.x) * sign
                        if dxn > 0 and dy1 < 0 and (dx1 == 0 or (dx1 < 0 and dy1 * dx < dy * dx1)):
                            v1 = w1
                            dx = dxn
                            continue
                    break
            elif dx < 0:
                while True:
                    dy = v1.point.y - v0.point.y
                    w1 = v1.prev if side else v1.next
                    if w1 is not v1:
                        dx1 = (w1.point.x - v1.point.x) * sign
                        dy1 = w1.point.y - v1.point.y
                        if dy1 >= 0 and (dx1 == 0 or (dx1 < 0 and dy1 * dx <= dy * dx1)):
                            v1 = w1
                            dx = (v1.point.x - v0.point.x) * sign
                            continue
                    w0 = v0.prev if side else v0.next
                    if w0 is not v0:
                        dx0 = (w0.point.x - v0.point.x) * sign
                        dy0 = w0.point.y - v0.point.y
                        dxn = (v1.point.x - w0.point.x) * sign
                        if dxn < 0 and dy0 > 0 and (dx0 == 0 or (dx0 < 0 and dy0 * dx < dy * dx0)):
                            v0 = w0
                            dx = dxn
                            continue
                    break
            else:
                x = v0.point.x
                y0 = v0.point.y
                w0 = v0
                while True:
                    t = w0.next if side else w0.prev
                    if t is v0 or t.point.x != x or t.point.y > y0:
                        break
                    w0 = t
                    y0 = t.point.y
                v0 = w0

                y1 = v1.point.y
                w1 = v1
                while True:
                    t = w1.prev if side else w1.next
                    if t is v1 or t.point.x != x or t.point.y < y1:
                        break
                    w1 = t
                    y1 = t.point.y
                v1 = w1

            if side == 0:
                v00, v10 = v0, v1
                v0 = h0.min_xy
                v1 = h1.min_xy
                sign = -1

        v0.prev = v1
        v1.next = v0
        v00.next = v10
        v10.prev = v00

        if h1.min_xy.point.x < h0.min_xy.point.x:
            h0.min_xy = h1.min_xy
        if h1.max_xy.point.x >= h0.max_xy.point.x:
            h0.max_xy = h1.max_xy
        h0.max_yx = h1.max_yx
        return True, v00, v10

    def _find_max_angle(
        self, ccw: bool, start: Vertex, s: IntPoint, rxs: IntPoint, sxrxs: IntPoint
    ) -> Tuple[Optional[Edge], Rational64]:
        min_edge: Optional[Edge] = None
        min_cot = Rational64(0, 0)
        for e in _ring(start.edges):
            if e.copy <= self.merge_stamp:
                continue
            t = e.target.point - start.point
            cot = Rational64(t.dot(sxrxs), t.dot(rxs))
            if cot.is_nan():
                continue
            if min_edge is None:
                min_cot, min_edge = cot, e
                continue
            cmp = cot.compare(min_cot)
            if cmp < 0:
                min_cot, min_edge = cot, e
            elif cmp == 0 and ccw == (
                _orientation(min_edge, e, s, t) is Orientation.COUNTER_CLOCKWISE
            ):
                min_edge = e
        return min_edge, min_cot

    def _find_edge_for_coplanar_faces(
        self,
        c0: Vertex,
        c1: Vertex,
        e0: Optional[Edge],
        e1: Optional[Edge],
        stop0: Optional[Vertex],
        stop1: Optional[Vertex],
    ) -> Tuple[Optional[Edge], Optional[Edge]]:
        start0, start1 = e0, e1
        et0 = start0.target.point if start0 is not None else c0.point
        et1 = start1.target.point if start1 is not None else c1.point
        s = c1.point - c0.point
        reference = start0 if start0 is not None else start1
        normal = (reference.target.point - c0.point).cross(s)
        dist = c0.point.dot(normal)
        perp = s.cross(normal)

        max_dot0 = et0.dot(perp)
        if e0 is not None:
            while e0.target is not stop0:
                e = e0.reverse.prev
                if e.target.point.dot(normal) < dist or e.copy == self.merge_stamp:
                    break
                dot = e.target.point.dot(perp)
                if dot <= max_dot0:
                    break
                max_dot0 = dot
                e0 = e
                et0 = e.target.point

        max_dot1 = et1.dot(perp)
        if e1 is not None:
            while e1.target is not stop1:
                e = e1.reverse.next
                if e.target.point.dot(normal) < dist or e.copy == self.merge_stamp:
                    break
                dot = e.target.point.dot(perp)
                if dot <= max_dot1:
                    break
                max_dot1 = dot
                e1 = e
                et1 = e.target.point

        dx = max_dot1 - max_dot0
        if dx > 0:
            while True:
                dy = (et1 - et0).dot(s)
                if e0 is not None and e0.target is not stop0:
                    f0 = e0.next.reverse
                    if f0.copy > self.merge_stamp:
                        d0 = f0.target.point - et0
                        dx0 = d0.dot(perp)
                        dy0 = d0.dot(s)
                        if (dy0 < 0) if dx0 == 0 else (
                            dx0 < 0 and Rational64(dy0, dx0).compare(Rational64(dy, dx)) >= 0
                        ):
                            et0 = f0.target.point
                            dx = (et1 - et0).dot(perp)
                            e0 = None if e0 is start0 else f0
                            continue
                if e1 is not None and e1.target is not stop1:
                    f1 = e1.reverse.next
                    if f1.copy > self.merge_stamp:
                        d1 = f1.target.point - et1
                        if d1.dot(normal) == 0:
                            dx1 = d1.dot(perp)
                            dy1 = d1.dot(s)
                            dxn = (f1.target.point - et0).dot(perp)
                            if dxn > 0 and (
                                (dy1 < 0)
                                if dx1 == 0
                                else (dx1 < 0 and Rational64(dy1, dx1).compare(Rational64(dy, dx)) > 0)
                            ):
                                e1 = f1
                                et1 = e1.target.point
                                dx = dxn
                                continue
                break
        elif dx < 0:
            while True:
                dy = (et1 - et0).dot(s)
                if e1 is not None and e1.target is not stop1:
                    f1 = e1.prev.reverse
                    if f1.copy > self.merge_stamp:
                        d1 = f1.target.point - et1
                        dx1 = d1.dot(perp)
                        dy1 = d1.dot(s)
                        if (dy1 > 0) if dx1 == 0 else (
                            dx1 < 0 and Rational64(dy1, dx1).compare(Rational64(dy, dx)) <= 0
                        ):
                            et1 = f1.target.point
                            dx = (et1 - et0).dot(perp)
                            e1 = None if e1 is start1 else f1
                            continue
                if e0 is not None and e0.target is not stop0:
                    f0 = e0.reverse.prev
                    if f0.copy > self.merge_stamp:
                        d0 = f0.target.point - et0
                        if d0.dot(normal) == 0:
                            dx0 = d0.dot(perp)
                            dy0 = d0.dot(s)
                            dxn = (et1 - f0.target.point).dot(perp)
                            if dxn < 0 and (
                                (dy0 > 0)
                                if dx0 == 0
                                else (dx0 < 0 and Rational64(dy0, dx0).compare(Rational64(dy, dx)) < 0)
                            ):
                                e0 = f0
                                et0 = e0.target.point
                                dx = dxn
                                continue
                break
        return e0, e1

    def _merge(self, h0: _IntermediateHull, h1: _IntermediateHull) -> None:
        if h1.max_xy is None:
            return
        if h0.max_xy is None:
            h0.assign(h1)
            return

        self.merge_stamp -= 1

        to_prev0 = first_new0 = pending_head0 = pending_tail0 = None
        to_prev1 = first_new1 = pending_head1 = pending_tail1 = None

        projected, c0, c1 = self._merge_projection(h0, h1)
        if projected:
            down = IntPoint(*_DOWN)
            s = c1.point - c0.point
            normal = down.cross(s)
            t = s.cross(normal)

            start0 = None
            for e in _ring(c0.edges):
                d = e.target.point - c0.point
                if d.dot(normal) == 0 and d.dot(t) > 0:
                    if start0 is None or _orientation(start0, e, s, down) is Orientation.CLOCKWISE:
                        start0 = e

            start1 = None
            for e in _ring(c1.edges):
                d = e.target.point - c1.point
                if d.dot(normal) == 0 and d.dot(t) > 0:
                    if (
                        start1 is None
                        or _orientation(start1, e, s, down) is Orientation.COUNTER_CLOCKWISE
                    ):
                        start1 = e

            if start0 is not None or start1 is not None:
                start0, start1 = self._find_edge_for_coplanar_faces(
                    c0, c1, start0, start1, None, None
                )
                if start0 is not None:
                    c0 = start0.target
                if start1 is not None:
                    c1 = start1.target

            prev_point = IntPoint(c1.point.x, c1.point.y, c1.point.z + 1)
        else:
            prev_point = IntPoint(c1.point.x + 1, c1.point.y, c1.point.z)

        first0, first1 = c0, c1
        first_run = True

        while True:
            s = c1.point - c0.point
            r = prev_point - c0.point
            rxs = r.cross(s)
            sxrxs = s.cross(rxs)

            min0, min_cot0 = self._find_max_angle(False, c0, s, rxs, sxrxs)
            min1, min_cot1 = self._find_max_angle(True, c1, s, rxs, sxrxs)
            if min0 is None and min1 is None:
                e = self.new_edge_pair(c0, c1)
                e.link(e)
                c0.edges = e
                e = e.reverse
                e.link(e)
                c1.edges = e
                return

            if min0 is None:
                cmp = 1
            elif min1 is None:
                cmp = -1
            else:
                cmp = min_cot0.compare(min_cot1)

            visible = (
                not min_cot1.is_negative_infinity()
                if cmp >= 0
                else not min_cot0.is_negative_infinity()
            )
            if first_run or visible:
                e = self.new_edge_pair(c0, c1)
                if pending_tail0 is not None:
                    pending_tail0.prev = e
                else:
                    pending_head0 = e
                e.next = pending_tail0
                pending_tail0 = e

                e = e.reverse
                if pending_tail1 is not None:
                    pending_tail1.next = e
                else:
                    pending_head1 = e
                e.prev = pending_tail1
                pending_tail1 = e

            e0, e1 = min0, min1
            if cmp == 0:
                e0, e1 = self._find_edge_for_coplanar_faces(c0, c1, e0, e1, None, None)

            if cmp >= 0 and e1 is not None:
                if to_prev1 is not None:
                    e = to_prev1.next
                    while e is not min1:
                        following = e.next
                        self.remove_edge_pair(e)
                        e = following
                if pending_tail1 is not None:
                    if to_prev1 is not None:
                        to_prev1.link(pending_head1)
                    else:
                        min1.prev.link(pending_head1)
                        first_new1 = pending_head1
                    pending_tail1.link(min1)
                    pending_head1 = pending_tail1 = None
                elif to_prev1 is None:
                    first_new1 = min1
                prev_point = c1.point
                c1 = e1.target
                to_prev1 = e1.reverse

            if cmp <= 0 and e0 is not None:
                if to_prev0 is not None:
                    e = to_prev0.prev
                    while e is not min0:
                        following = e.prev
                        self.remove_edge_pair(e)
                        e = following
                if pending_tail0 is not None:
                    if to_prev0 is not None:
                        pending_head0.link(to_prev0)
                    else:
                        pending_head0.link(min0.next)
                        first_new0 = pending_head0
                    min0.link(pending_tail0)
                    pending_head0 = pending_tail0 = None
                elif to_prev0 is None:
                    first_new0 = min0
                prev_point = c0.point
                c0 = e0.target
                to_prev0 = e0.reverse

            if c0 is first0 and c1 is first1:
                if to_prev0 is None:
                    pending_head0.link(pending_tail0)
                    c0.edges = pending_tail0
                else:
                    e = to_prev0.prev
                    while e is not first_new0:
                        following = e.prev
                        self.remove_edge_pair(e)
                        e = following
                    if pending_tail0 is not None:
                        pending_head0.link(to_prev0)
                        first_new0.link(pending_tail0)

                if to_prev1 is None:
                    pending_tail1.link(pending_head1)
                    c1.edges = pending_tail1
                else:
                    e = to_prev1.next
                    while e is not first_new1:
                        following = e.next
                        self.remove_edge_pair(e)
                        e = following
                    if pending_tail1 is not None:
                        to_prev1.link(pending_head1)
                        pending_tail1.link(first_new1)
                return

            first_run = False