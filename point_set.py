import logging

from geometry import Point, graham_scan

logger = logging.getLogger(__name__)


class PointSet:
    """
    Set of unique points with a lazily sorted view and a cached convex hull.

    Both caches are rebuilt only on demand: `add` marks the sort order
    and the hull as stale, `remove` only the hull, since deleting
    from a sorted list keeps it sorted.
    """

    def __init__(self):
        self.points: list[Point] = []
        self.members: set[Point] = set()
        self.convex: list[Point] = []
        self.is_sorted: bool = True
        self.is_convex_up_to_date: bool = True
        self.hull_computations: int = 0

    def __len__(self):
        return len(self.points)

    def __contains__(self, p: Point):
        return p in self.members

    def __iter__(self):
        return iter(self.sorted_view())

    def add(self, p: Point) -> bool:
        if p in self.members:
            return False
        self.points.append(p)
        self.members.add(p)
        self.is_sorted = False
        self.is_convex_up_to_date = False
        return True

    def remove(self, p: Point) -> bool:
        if p not in self.members:
            return False
        self.points.remove(p)
        self.members.discard(p)
        self.is_convex_up_to_date = False
        return True

    def sort_points(self):
        if not self.is_sorted:
            self.points.sort()
            self.is_sorted = True

    def sorted_view(self) -> list[Point]:
        self.sort_points()
        return list(self.points)

    def convex_hull(self) -> list[Point]:
        """
        Convex hull vertices counter-clockwise, starting from the
        leftmost (then lowest) point. Sets of up to 2 points are their own hull.

        The hull is recomputed only if the set changed since the last call.
        A new list is returned every time, so callers cannot alter the cache.
        """
        if not self.is_convex_up_to_date:
            self.sort_points()
            if len(self.points) <= 2:
                self.convex = list(self.points)
            else:
                self.convex = graham_scan(self.points)
            self.hull_computations += 1
            self.is_convex_up_to_date = True
            logger.debug(
                'Recomputed hull of %d points: %d vertices',
                len(self.points), len(self.convex),
            )
        return list(self.convex)
