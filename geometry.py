import functools

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """
    Point on the integer grid. Ordered by x, then by y.
    """
    x: int
    y: int

    def __str__(self):
        return f'({self.x}, {self.y})'

    def compare(self, other: 'Point') -> int:
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    def orientation(self, p: 'Point', q: 'Point') -> int:
        """
        Cross product of vectors (self, q) and (self, p).
        Positive if p is left of the directed line self -> q,
        zero if the three points are collinear, negative otherwise.
        """
        return cross(self, q, p)

    def distance_squared(self, other: 'Point') -> int:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy


def cross(o: Point, a: Point, b: Point) -> int:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def angle_dist_key(p0: Point):
    """
    Sort key ordering points counter-clockwise around p0,
    closer points first when they lie on the same ray.
    Only valid when p0 is the minimum of the points being sorted.
    """
    def compare(p: Point, q: Point) -> int:
        result = p0.orientation(p, q)
        if result == 0:
            result = p0.distance_squared(p) - p0.distance_squared(q)
        return result

    return functools.cmp_to_key(compare)


def graham_scan(points: list[Point]) -> list[Point]:
    """
    Graham scan for convex hull of at least 3 distinct points.

    Returns hull vertices counter-clockwise, starting from the minimum point.
    Points on the boundary which are not vertices are dropped.
    Time complexity: O(n*log(n)).
    """
    n_distinct = len(set(points))
    if n_distinct < 3:
        raise ValueError(f'Graham scan needs at least 3 distinct points, got {n_distinct}')

    p0 = min(points)
    ordered = sorted((p for p in points if p != p0), key=angle_dist_key(p0))

    # keep only the farthest point of every ray from p0
    candidates = [
        p for p, nxt in zip(ordered, ordered[1:])
        if p0.orientation(p, nxt) != 0
    ]
    candidates.append(ordered[-1])

    stack = [p0]
    for c in candidates:
        while len(stack) >= 2 and stack[-2].orientation(c, stack[-1]) <= 0:
            stack.pop()
        stack.append(c)
    return stack


def monotone_chain(points: list[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Same output contract as graham_scan, but accepts any number of points.
    Time complexity: O(n*log(n)).
    """
    points = sorted(set(points))
    if len(points) <= 2:
        return points

    lower = []
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]
