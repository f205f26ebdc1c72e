"""Planar vector maths and convex polygon helpers used by the physics code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

PI = math.pi


@dataclass(frozen=True)
class Vector2:
    """An immutable two-dimensional vector. The y axis points down on screen."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def rotate(self, angle: float) -> Vector2:
        """Return this vector rotated by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)


def deg_to_rad(degrees: float) -> float:
    return degrees * PI / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / PI


def angle(a: Vector2, b: Vector2 | None = None, c: Vector2 | None = None) -> float:
    """Angle of ``a`` alone, or the angle ABC in [0, 2*pi) measured from BC to BA."""
    if b is None and c is None:
        return math.atan2(a.y, a.x)
    if b is None or c is None:
        raise TypeError("angle takes either one or three vectors")
    return (angle(a - b) - angle(c - b)) % (2 * PI)


def perpendicular(vector: Vector2, side: bool | Vector2) -> Vector2:
    """Return a vector perpendicular to ``vector``.

    With a boolean, ``True`` selects (y, -x) and ``False`` (-y, x). With a
    vector, the perpendicular pointing towards that direction is chosen.
    """
    if isinstance(side, Vector2):
        candidate = perpendicular(vector, True)
        return candidate if candidate.dot(side) >= 0 else -candidate
    if side:
        return Vector2(vector.y, -vector.x)
    return Vector2(-vector.y, vector.x)


def intersection(a: Vector2, b: Vector2, c: Vector2, d: Vector2) -> tuple[float, float]:
    """Intersect lines AB and CD.

    Returns ``(t, u)`` such that ``a + t*(b - a) == c + u*(d - c)``.
    """
    r = b - a
    s = d - c
    denominator = r.cross(s)
    if denominator == 0:
        raise ValueError("lines are parallel")
    offset = c - a
    return offset.cross(s) / denominator, offset.cross(r) / denominator


def closest_point(a: Vector2, b: Vector2, p: Vector2) -> Vector2:
    """Return the point of segment AB closest to ``p``."""
    ab = b - a
    length2 = ab.norm2()
    if length2 == 0:
        return a
    t = min(max((p - a).dot(ab) / length2, 0.0), 1.0)
    return a + ab * t


def clamp_vector(vector: Vector2, low: Vector2, high: Vector2) -> Vector2:
    """Clamp each coordinate of ``vector`` between those of ``low`` and ``high``."""
    return Vector2(
        min(max(vector.x, low.x), high.x),
        min(max(vector.y, low.y), high.y),
    )


class ConvexPolygon:
    """A convex polygon given by its vertices in clockwise order."""

    def __init__(self, vertices: Sequence[Vector2]) -> None:
        self.vertices: tuple[Vector2, ...] = tuple(vertices)

    def __repr__(self) -> str:
        return f"ConvexPolygon({list(self.vertices)!r})"

    def support_function(self, direction: Vector2) -> Vector2:
        """Return the vertex farthest along ``direction``."""
        if not self.vertices:
            raise ValueError("polygon has no vertices")
        return max(self.vertices, key=direction.dot)

    def area_and_center_of_mass(self) -> tuple[float, Vector2]:
        if len(self.vertices) < 3:
            raise ValueError("Invalid shape")
        first = self.vertices[0]
        area = 0.0
        weighted = Vector2(0.0, 0.0)
        for b, c in zip(self.vertices[1:-1], self.vertices[2:]):
            triangle_area = abs((b - first).cross(c - first)) / 2.0
            area += triangle_area
            weighted += (first + b + c) / 3.0 * triangle_area
        return area, weighted / area

    def moment_of_inertia(self, density: float, axis: Vector2) -> float:
        """Moment of inertia about ``axis``, shifted from the first vertex."""
        first = self.vertices[0]
        moment = 0.0
        area = 0.0
        for vb, vc in zip(self.vertices[1:-1], self.vertices[2:]):
            b = vb - first
            c = vc - first
            # Clockwise vertices in a y-down frame give a positive B x C.
            signed_area = b.cross(c) / 2.0
            area += abs(signed_area)
            moment += signed_area * (b.norm2() + c.norm2() + b.dot(c))
        return moment * density / 6.0 - (area * density) * (axis - first).norm2()

    def contains(self, point: Vector2) -> bool:
        count = len(self.vertices)
        for i, vi in enumerate(self.vertices):
            vj = self.vertices[(i + 1) % count]
            vk = self.vertices[(i + 2) % count]
            edge = vj - vi
            if edge.cross(point - vi) * edge.cross(vk - vi) < 0:
                return False
        return True


def box_contains(box: Sequence[Vector2], point: Vector2) -> bool:
    """Whether ``point`` lies in the rectangle A, B, C, D given in order."""
    a, b, _, d = box
    ab = b - a
    ad = d - a
    ap = point - a
    return (
        ab.dot(ap) >= 0
        and ab.dot(point - b) <= 0
        and ad.dot(ap) >= 0
        and ad.dot(point - d) <= 0
    )


def ear_clipping(vertices: Sequence[Vector2]) -> list[list[int]]:
    """Triangulate a simple clockwise polygon; returns triangles of vertex indices."""
    indices = list(range(len(vertices)))
    triangulation: list[list[int]] = []
    i = 0
    while len(indices) > 3:
        size = len(indices)
        j = (i + 1) % size
        k = (i + 2) % size
        a, b, c = vertices[indices[i]], vertices[indices[j]], vertices[indices[k]]
        if angle(a, b, c) < PI:
            triangle = ConvexPolygon((a, b, c))
            others = (vertices[indices[(k + 1 + n) % size]] for n in range(size - 3))
            if not any(triangle.contains(other) for other in others):
                triangulation.append([indices[i], indices[j], indices[k]])
                del indices[j]
        i = (i + 1) % len(indices)
    triangulation.append(indices)
    return triangulation


def _can_merge(vertices, a0, a1, a2, a3, b0, b1, b2, b3) -> bool:
    return (
        a1 == b2
        and b1 == a2
        and angle(vertices[a0], vertices[a1], vertices[a2])
        + angle(vertices[b1], vertices[b2], vertices[b3]) <= PI
        and angle(vertices[a1], vertices[a2], vertices[a3])
        + angle(vertices[b0], vertices[b1], vertices[b2]) <= PI
    )


def hertel_mehlhorn(
    vertices: Sequence[Vector2], components: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Merge triangulation components into larger convex components."""
    n = len(vertices)
    components = [list(component) for component in components]
    a_index = 0
    while a_index < len(components):
        component_a = components[a_index]
        i_a = 0
        while i_a < len(component_a):
            size_a = len(component_a)
            a0, a1, a2, a3 = (component_a[(i_a + s) % size_a] for s in range(4))
            # Only an edge between non-consecutive polygon vertices is a diagonal
            if (a2 - a1) % n != 1:
                b_index = 0
                while b_index < len(components):
                    merged = False
                    if b_index != a_index:
                        component_b = components[b_index]
                        size_b = len(component_b)
                        for i_b in range(size_b):
                            b0, b1, b2, b3 = (component_b[(i_b + s) % size_b] for s in range(4))
                            if _can_merge(vertices, a0, a1, a2, a3, b0, b1, b2, b3):
                                insert_at = (i_a + 2) % len(component_a)
                                for j_b in range(size_b - 2):
                                    component_a.insert(
                                        insert_at, component_b[(i_b + size_b - j_b) % size_b]
                                    )
                                del components[b_index]
                                if b_index < a_index:
                                    a_index -= 1
                                merged = True
                                break
                    if not merged:
                        b_index += 1
            i_a += 1
        a_index += 1
    return components