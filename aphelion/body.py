"""Rigid body components and their shape-dependent properties."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from aphelion.geometry import (
    ConvexPolygon,
    Vector2,
    angle,
    ear_clipping,
    hertel_mehlhorn,
    intersection,
    perpendicular,
)

if TYPE_CHECKING:
    from aphelion.scene import Scene


@dataclass
class Body:
    """Position, orientation and mass properties of a physical entity."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    density: float = 1.0
    mass: float = 0.0
    center_of_mass: Vector2 = field(default_factory=Vector2)
    moment_of_inertia: float = 0.0

    def local_to_world(self, point: Vector2) -> Vector2:
        return point.rotate(self.rotation) + self.position

    def world_to_local(self, point: Vector2) -> Vector2:
        return (point - self.position).rotate(-self.rotation)

    def shadow_terminator(self, light_source: Vector2, scene: Scene, entity_id: int) -> list[Vector2]:
        """Two points bounding the shadow cast by this entity's shape."""
        if scene.has_component(entity_id, CircleBody):
            return scene.get_component(entity_id, CircleBody).shadow_terminator(light_source, self)
        return scene.get_component(entity_id, PolygonBody).shadow_terminator(light_source, self)


@dataclass
class CircleBody:
    radius: float

    def shadow_terminator(self, light_source: Vector2, body: Body) -> list[Vector2]:
        orthogonal = perpendicular(body.position - light_source, True)
        orthogonal = orthogonal / orthogonal.norm()
        return [body.position + orthogonal * self.radius, body.position - orthogonal * self.radius]


@dataclass
class PolygonBody:
    vertices: list[Vector2]
    components: list[ConvexPolygon] = field(default_factory=list)

    def shadow_terminator(self, light_source: Vector2, body: Body) -> list[Vector2]:
        world = [body.local_to_world(v - body.center_of_mass) for v in self.vertices]
        angle0 = angle(world[0] - light_source)
        angles = [0.0] + [angle(v - light_source) - angle0 for v in world[1:]]
        # First smallest and last greatest angle
        lowest = min(range(len(angles)), key=angles.__getitem__)
        highest = max(reversed(range(len(angles))), key=angles.__getitem__)
        a, b = world[lowest], world[highest]
        # Project both extreme rays onto the line through the body that is
        # perpendicular to the light ray.
        normal = perpendicular(body.position - light_source, True)
        u, _ = intersection(body.position, body.position + normal, light_source, a)
        v, _ = intersection(body.position, body.position + normal, light_source, b)
        return [body.position + normal * u, body.position + normal * v]

    def support_function(self, direction: Vector2, component: ConvexPolygon, body: Body) -> Vector2:
        """World-space support point of one convex component of the body."""
        local = component.support_function(direction.rotate(-body.rotation))
        return body.local_to_world(local - body.center_of_mass)


def circle_body(body: Body, radius: float) -> CircleBody:
    """Create a circle shape and set the body's mass properties from it."""
    body.mass = math.pi * radius * radius * body.density
    body.center_of_mass = Vector2(radius, radius)
    body.moment_of_inertia = body.mass * radius * radius / 2.0
    return CircleBody(radius)


def polygon_body(body: Body, vertices: Sequence[Vector2]) -> PolygonBody:
    """Create a polygon shape, split it into convex parts and set mass properties."""
    vertices = list(vertices)
    component_indices = hertel_mehlhorn(vertices, ear_clipping(vertices))
    components = [ConvexPolygon([vertices[i] for i in indices]) for indices in component_indices]
    area = 0.0
    weighted = Vector2(0.0, 0.0)
    for component in components:
        component_area, component_center = component.area_and_center_of_mass()
        area += component_area
        weighted += component_area * component_center
    body.center_of_mass = weighted / area
    body.mass = area * body.density
    body.moment_of_inertia = sum(
        c.moment_of_inertia(body.density, body.center_of_mass) for c in components
    )
    return PolygonBody(vertices, components)