from __future__ import annotations

from .hull import ConvexHull3D


def _set_equal_limits(ax, pts) -> None:
    """Однакові масштаби по осях."""
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    zs = [p.z for p in pts]
    max_range = max(max(xs) - min(xs), max(ys) - min(ys), max(zs) - min(zs))
    if max_range == 0:
        max_range = 1.0
    mx = 0.5 * (min(xs) + max(xs))
    my = 0.5 * (min(ys) + max(ys))
    mz = 0.5 * (min(zs) + max(zs))
    ax.set_xlim(mx - max_range / 2, mx + max_range / 2)
    ax.set_ylim(my - max_range / 2, my + max_range / 2)
    ax.set_zlim(mz - max_range / 2, mz + max_range / 2)


def plot_hull(hull: ConvexHull3D, ax=None, show_points: bool = True):
    """
    Намалювати живі грані оболонки (Poly3DCollection) і, за бажанням, усі вхідні точки.
    Якщо ax не передано — створюється нова Figure з 3D-віссю. Повертає ax.
    """
    from mpl_toolkits.mplot3d.art3d import Poly3DCollection

    if ax is None:
        from matplotlib.figure import Figure
        fig = Figure(figsize=(6, 6))
        ax = fig.add_subplot(111, projection="3d")

    pts = hull.P
    tris = [[tuple(pts[i]) for i in tri] for tri in hull.faces()]
    ax.add_collection3d(Poly3DCollection(tris, facecolor="tab:blue", edgecolor="k",
                                         linewidths=0.5, alpha=0.3))
    if show_points:
        ax.scatter([p.x for p in pts], [p.y for p in pts], [p.z for p in pts], s=8, color="tab:red")

    _set_equal_limits(ax, pts)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title(f"Convex hull ({len(tris)} faces)")
    return ax


def save_hull_plot(hull: ConvexHull3D, path: str) -> None:
    """Зберегти зображення оболонки у файл (без GUI, через Agg-канву)."""
    from matplotlib.backends.backend_agg import FigureCanvasAgg

    ax = plot_hull(hull)
    fig = ax.get_figure()
    FigureCanvasAgg(fig)
    fig.savefig(path)
