import math

import pytest

from aphelion.body import Body, CircleBody, PolygonBody, circle_body, polygon_body
from aphelion.geometry import Vector2 as V
from aphelion.scene import Scene

SQUARE = [V(0, 0), V(1, 0), V(1, 1), V(0, 1)]
L_SHAPE = [V(0, 0), V(2, 0), V(2, 1), V(1, 1), V(1, 2), V(0, 2)]


def test_local_world_round_trip():
    body = Body(position=V(3, -2), rotation=0.7)
    point = V(1.5, 4.0)
    back = body.world_to_local(body.local_to_world(point))
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_local_to_world_without_rotation_translates():
    body = Body(position=V(3, -2))
    assert body.local_to_world(V(1, 1)) == V(4, -1)


def test_circle_body_mass_properties():
    body = Body(density=1.0)
    circle = circle_body(body, 1.0)
    assert circle.radius == 1.0
    assert body.mass == pytest.approx(math.pi)
    assert body.center_of_mass == V(1.0, 1.0)
    assert body.moment_of_inertia == pytest.approx(body.mass / 2)


def test_circle_mass_scales_with_density():
    light, heavy = Body(density=1.0), Body(density=4.0)
    circle_body(light, 2.0)
    circle_body(heavy, 2.0)
    assert heavy.mass == pytest.approx(4 * light.mass)


def test_polygon_body_square():
    body = Body(density=2.0)
    shape = polygon_body(body, SQUARE)
    assert len(shape.components) == 1
    assert body.mass == pytest.approx(2.0)
    assert body.center_of_mass.x == pytest.approx(0.5)
    assert body.center_of_mass.y == pytest.approx(0.5)
    assert body.moment_of_inertia == pytest.approx(2.0 / 6)


def test_polygon_body_l_shape_mass():
    body = Body(density=1.0)
    shape = polygon_body(body, L_SHAPE)
    assert shape.vertices == L_SHAPE
    assert body.mass == pytest.approx(3.0)
    assert body.moment_of_inertia > 0


def test_circle_shadow_terminator_is_perpendicular_to_light():
    body = Body(position=V(0, 0))
    circle = circle_body(body, 1.0)
    light = V(-10, 3)
    a, b = circle.shadow_terminator(light, body)
    ray = body.position - light
    assert (a - body.position).norm() == pytest.approx(1.0)
    assert (b - body.position).norm() == pytest.approx(1.0)
    assert (a - b).dot(ray) == pytest.approx(0, abs=1e-9)


def test_polygon_shadow_terminator_spans_shape():
    body = Body(position=V(0, 0))
    shape = polygon_body(body, SQUARE)
    light = V(-10, 0)
    a, b = shape.shadow_terminator(light, body)
    assert a.x == pytest.approx(0, abs=1e-9)
    assert b.x == pytest.approx(0, abs=1e-9)
    assert a.y * b.y < 0
    assert min(abs(a.y), abs(b.y)) >= 0.5


def test_polygon_support_function_world_space():
    body = Body(position=V(10, 10))
    shape = polygon_body(body, SQUARE)
    point = shape.support_function(V(1, 1), shape.components[0], body)
    assert point.x == pytest.approx(10.5)
    assert point.y == pytest.approx(10.5)


def test_body_shadow_terminator_dispatches_on_shape():
    scene = Scene()
    for component in (Body, CircleBody, PolygonBody):
        scene.register_component(component)
    circle_id = scene.create_entity()
    body = scene.assign_component(circle_id, Body(position=V(5, 5)))
    circle = scene.assign_component(circle_id, circle_body(body, 2.0))
    light = V(0, 0)
    assert body.shadow_terminator(light, scene, circle_id) == circle.shadow_terminator(light, body)

    poly_id = scene.create_entity()
    poly_body = scene.assign_component(poly_id, Body(position=V(5, 5)))
    poly = scene.assign_component(poly_id, polygon_body(poly_body, SQUARE))
    assert poly_body.shadow_terminator(light, scene, poly_id) == poly.shadow_terminator(light, poly_body)


def test_shadow_terminator_without_shape_raises():
    scene = Scene()
    for component in (Body, CircleBody, PolygonBody):
        scene.register_component(component)
    entity = scene.create_entity()
    body = scene.assign_component(entity, Body())
    with pytest.raises(KeyError):
        body.shadow_terminator(V(1, 1), scene, entity)