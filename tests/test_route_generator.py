# tests/test_route_generator.py
import pytest

from app.models.routing import Coordinate
from app.services import route_generator, waypoint_generator
from app.services.geo import calculate_distance, calculate_route_distance
from app.services.route_generator import generate_routes, point_to_point_waypoint_count

STOCKHOLM = Coordinate(lat=59.33, lon=18.06)


def test_loop_routes_count_ids_and_flags():
    routes = generate_routes(STOCKHOLM, None, 4, 5.0)

    assert len(routes) == 4
    assert [r.id for r in routes] == [0, 1, 2, 3]
    assert all(r.is_loop for r in routes)


def test_loop_routes_start_and_end_at_start():
    for route in generate_routes(STOCKHOLM, None, 3, 5.0):
        assert route.points[0] == STOCKHOLM
        assert route.points[-1] == STOCKHOLM
        assert route.points[1:-1] == route.waypoints
        assert 3 <= len(route.waypoints) <= 5
        assert STOCKHOLM not in route.waypoints


def test_loop_route_distance_is_straight_line_length():
    for route in generate_routes(STOCKHOLM, None, 2, 4.0):
        assert route.distance == pytest.approx(calculate_route_distance(route.points))
        assert route.duration is None
        assert route.steps is None


def test_stockholm_loop_scenario(monkeypatch):
    calls = []
    original = waypoint_generator.generate_loop_waypoints

    def recording(start, target_distance_km, variation_index=0):
        calls.append((start, target_distance_km, variation_index))
        return original(start, target_distance_km, variation_index)

    monkeypatch.setattr(waypoint_generator, "generate_loop_waypoints", recording)

    routes = generate_routes(Coordinate(lat=59.33, lon=18.06), None, 2, 4)

    assert [c[2] for c in calls] == [0, 1]
    assert [len(r.waypoints) for r in routes] == [3, 4]
    for route in routes:
        assert route.points[0] == Coordinate(lat=59.33, lon=18.06)
        assert route.points[-1] == Coordinate(lat=59.33, lon=18.06)


def test_point_to_point_routes():
    end = Coordinate(lat=59.35, lon=18.10)
    routes = generate_routes(STOCKHOLM, end, 3, 8.0)

    assert len(routes) == 3
    assert [r.id for r in routes] == [0, 1, 2]
    for route in routes:
        assert route.is_loop is False
        assert route.points[0] == STOCKHOLM
        assert route.points[-1] == end
        assert route.points[1:-1] == route.waypoints
        assert len(route.points) >= 3


def test_equator_waypoint_count_scenario():
    start = Coordinate(lat=0, lon=0)
    end = Coordinate(lat=0, lon=0.09)

    assert calculate_distance(start, end) == pytest.approx(10.0, abs=0.05)
    assert point_to_point_waypoint_count(start, end, 15) == 2


def test_equator_routes_use_two_waypoints(monkeypatch):
    counts = []
    original = waypoint_generator.generate_random_waypoints

    def recording(start, end, count=2):
        counts.append(count)
        return original(start, end, count)

    monkeypatch.setattr(waypoint_generator, "generate_random_waypoints", recording)

    routes = generate_routes(Coordinate(lat=0, lon=0), Coordinate(lat=0, lon=0.09), 2, 15)

    assert counts == [2, 2]
    assert all(len(r.waypoints) == 2 for r in routes)


def test_short_target_still_gets_one_waypoint():
    start = Coordinate(lat=0, lon=0)
    end = Coordinate(lat=0, lon=0.09)
    # Target shorter than the direct distance
    assert point_to_point_waypoint_count(start, end, 3) == 1


def test_point_to_point_with_zero_waypoints_is_a_straight_line(monkeypatch):
    monkeypatch.setattr(route_generator, "point_to_point_waypoint_count", lambda *args: 0)
    end = Coordinate(lat=59.35, lon=18.10)

    (route,) = generate_routes(STOCKHOLM, end, 1, 5.0)

    assert route.waypoints == []
    assert route.points == [STOCKHOLM, end]
    assert route.distance == pytest.approx(calculate_distance(STOCKHOLM, end))


def test_zero_routes_requested():
    assert generate_routes(STOCKHOLM, None, 0, 5.0) == []
