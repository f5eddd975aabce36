import pytest
import numpy as np

from geometry import Point, angle_dist_key, cross, graham_scan, monotone_chain
from point_set import PointSet


def pts(*coords) -> list[Point]:
    return [Point(x, y) for x, y in coords]


def check_hull(points: list[Point], hull: list[Point]):
    unique = set(points)

    assert set(hull) <= unique, f"Hull has foreign points: {hull}"
    assert len(set(hull)) == len(hull), f"Hull has repeated points: {hull}"
    assert hull[0] == min(unique), f"Hull does not start at minimum point: {hull}"

    if len(hull) < 3:
        return

    n = len(hull)
    for i in range(n):
        a, b, c = hull[i], hull[(i + 1) % n], hull[(i + 2) % n]
        assert cross(a, b, c) > 0, f"Not a strict left turn at {a}, {b}, {c}"

    # no input point is strictly outside any hull edge
    for p in unique:
        for i in range(n):
            a, b = hull[i], hull[(i + 1) % n]
            assert cross(a, b, p) >= 0, f"{p} lies outside edge {a} -> {b}"


def test_point_order():
    assert Point(0, 5) < Point(1, 0)
    assert Point(1, 0) < Point(1, 2)
    assert sorted(pts((2, 1), (1, 3), (1, -1))) == pts((1, -1), (1, 3), (2, 1))
    assert Point(1, 2).compare(Point(1, 3)) == -1
    assert Point(1, 3).compare(Point(1, 2)) == 1
    assert Point(1, 2).compare(Point(1, 2)) == 0


def test_point_value_semantics():
    assert Point(3, 4) == Point(3, 4)
    assert len({Point(3, 4), Point(3, 4), Point(4, 3)}) == 2
    assert str(Point(-1, 7)) == "(-1, 7)"
    with pytest.raises(AttributeError):
        Point(0, 0).x = 1


@pytest.mark.parametrize("p, expected_sign", [
    (Point(0, 1), 1),      # left of (0,0) -> (1,0)
    (Point(2, 0), 0),      # on the line
    (Point(0, -1), -1),    # right of the line
])
def test_orientation_sign(p, expected_sign):
    o, q = Point(0, 0), Point(1, 0)
    assert np.sign(o.orientation(p, q)) == expected_sign


def test_orientation_is_exact_for_large_coordinates():
    big = 10**30
    o, q = Point(0, 0), Point(big, big + 1)
    p = Point(big - 1, big)
    # float arithmetic would report these as collinear
    assert o.orientation(p, q) == 1


def test_distance_squared():
    assert Point(1, 1).distance_squared(Point(4, 5)) == 25
    assert Point(4, 5).distance_squared(Point(1, 1)) == 25
    assert Point(2, 2).distance_squared(Point(2, 2)) == 0


def test_angle_dist_key_orders_counter_clockwise_then_by_distance():
    p0 = Point(0, 0)
    points = pts((0, 4), (2, 2), (4, 0), (1, 1), (0, 1), (3, -3))
    ordered = sorted(points, key=angle_dist_key(p0))
    assert ordered == pts((3, -3), (4, 0), (1, 1), (2, 2), (0, 1), (0, 4))


@pytest.mark.parametrize("points, expected", [
    (pts((0, 0), (1, 1), (2, 2)), pts((0, 0), (2, 2))),
    (pts((0, 0), (4, 0), (4, 4), (0, 4), (2, 2)), pts((0, 0), (4, 0), (4, 4), (0, 4))),
    (pts((2, 2), (0, 4), (4, 4), (0, 0), (4, 0)), pts((0, 0), (4, 0), (4, 4), (0, 4))),
    (pts((0, 0), (4, 0), (4, 2), (4, 4)), pts((0, 0), (4, 0), (4, 4))),
    (pts((0, 0), (1, 0), (2, 0), (0, 1)), pts((0, 0), (2, 0), (0, 1))),
    (pts((0, 0), (0, 1), (0, 2), (1, 0)), pts((0, 0), (1, 0), (0, 2))),
    (pts((0, 0), (2, 0), (4, 0), (4, 4), (2, 4), (0, 4), (0, 2)),
     pts((0, 0), (4, 0), (4, 4), (0, 4))),
    (pts((0, 0), (5, -5), (10, 0), (5, 5), (5, 0), (3, 1)),
     pts((0, 0), (5, -5), (10, 0), (5, 5))),
    (pts((-3, 7), (-3, -2), (-3, 1), (-3, 9)), pts((-3, -2), (-3, 9))),
])
def test_graham_scan_known_hulls(points, expected):
    assert graham_scan(points) == expected
    assert monotone_chain(points) == expected


def test_graham_scan_needs_three_points():
    with pytest.raises(ValueError):
        graham_scan(pts((0, 0), (1, 1)))
    with pytest.raises(ValueError, match="3 distinct points"):
        graham_scan([Point(0, 0)] * 3)
    with pytest.raises(ValueError):
        graham_scan(pts((0, 0), (1, 1), (1, 1), (0, 0)))


def test_monotone_chain_trivial_sets():
    assert monotone_chain([]) == []
    assert monotone_chain(pts((1, 1))) == pts((1, 1))
    assert monotone_chain(pts((3, 0), (1, 1), (3, 0))) == pts((1, 1), (3, 0))


@pytest.fixture
def n_trials():
    # n_points -> n_trials
    return {
        3: 500,
        10: 300,
        100: 50,
        1000: 5,
    }


@pytest.mark.parametrize("n_points", [3, 10, 100, 1000])
@pytest.mark.parametrize("limits", [(0, 5), (-100, 100), (-10**9, 10**9)])
def test_graham_scan_matches_monotone_chain(n_points, limits, n_trials):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=n_trials[n_points])
    for seed in seeds:
        rng = np.random.default_rng(seed)
        low, high = limits
        coords = rng.integers(low, high, size=(n_points, 2), endpoint=True)
        points = [Point(int(x), int(y)) for x, y in coords]

        point_set = PointSet()
        for p in points:
            point_set.add(p)

        hull = point_set.convex_hull()
        assert hull == monotone_chain(points), f"Hulls differ for seed {seed}"
        check_hull(points, hull)
