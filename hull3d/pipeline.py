from __future__ import annotations
from typing import Iterable, List, Tuple

from .errors import DegenerateInputError
from .geom import Pt, as_points
from .hull import ConvexHull3D, find_initial_tetra
from .planes import answer_queries
from .tolerances import DEFAULT_TOLERANCES, Tolerances


def hull_distances(
    points: Iterable[Tuple[float, float, float]],
    queries: Iterable[Tuple[float, float, float]],
    backend: str = "internal",
    tol: Tolerances = DEFAULT_TOLERANCES,
) -> List[float]:
    """
    Повний пайплайн:
      - будує опуклу оболонку points;
      - для кожної точки queries повертає відстань до найближчої грані.

    backend="internal" — наш ConvexHull3D;
    backend="scipy"    — SciPy ConvexHull (Qhull), для перехресної перевірки.
    """
    pts: List[Pt] = as_points(points)
    qs: List[Pt] = as_points(queries)

    backend = backend.lower()
    if backend == "internal":
        hull = ConvexHull3D(pts, tol)
        return answer_queries(hull.planes(), qs)

    if backend == "scipy":
        try:
            import numpy as np
            from scipy.spatial import ConvexHull, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy; install scipy "
                "or use backend='internal'."
            ) from e

        # вироджений вхід відсікаємо так само, як і для internal
        find_initial_tetra(pts, tol)
        arr = np.array([(p.x, p.y, p.z) for p in pts], dtype=float)
        try:
            hull = ConvexHull(arr)
        except QhullError as e:
            raise DegenerateInputError(f"Qhull rejected the point set: {e}") from e
        if not qs:
            return []
        q_arr = np.array([(q.x, q.y, q.z) for q in qs], dtype=float)

        # equations: [nx, ny, nz, d], |n| = 1, n·x + d <= 0 всередині
        eq = hull.equations
        signed = q_arr @ eq[:, :3].T + eq[:, 3]
        return [float(v) for v in -signed.max(axis=1)]

    raise ValueError(f"Unknown backend: {backend}")
