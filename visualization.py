from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from geometry import Point


def plot_points(points: list[Point], ax: Axes):
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, s=10, c='gray', label='Points')


def plot_hull(hull: list[Point], ax: Axes):
    """
    Draw hull vertices in the given order, closing the polygon.
    Degenerate hulls are drawn as a segment or a single marker.
    """
    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    if len(hull) > 2:
        poly = Polygon(list(zip(xs, ys)), alpha=0.2, facecolor='red', edgecolor='darkred')
        ax.add_patch(poly)
        ax.plot(xs + [xs[0]], ys + [ys[0]], 'o-', color='red', markersize=6, label='Hull')
    elif len(hull) == 2:
        ax.plot(xs, ys, 'o-', color='red', markersize=6, label='Hull')
    elif len(hull) == 1:
        ax.plot(xs, ys, 'o', color='red', markersize=8, label='Hull')


def plot_point_set(points: list[Point], hull: list[Point], path: str):
    # standalone figure, not registered with pyplot, so no GUI backend is involved
    fig = Figure()
    ax = fig.add_subplot(111)
    plot_points(points, ax)
    plot_hull(hull, ax)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Convex hull ({len(hull)} of {len(points)} points)")
    ax.grid(True, alpha=0.3)
    ax.axis('equal')
    if points:
        ax.legend(loc='best')
    fig.savefig(path)
