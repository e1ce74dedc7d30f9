# examples/main.py
from __future__ import annotations

import random

from hull3d.geom import as_points
from hull3d.hull import ConvexHull3D
from hull3d.pipeline import hull_distances
from hull3d.plot import save_hull_plot


def generate_random_points(n: int, seed: int = 0):
    """
    Генерує n випадкових точок в одиничному кубі [0,1]^3 + вершини куба,
    щоб оболонка була нормальною (опуклий куб).
    """
    rng = random.Random(seed)
    pts = [
        (0, 0, 0),
        (1, 0, 0),
        (1, 1, 0),
        (0, 1, 0),
        (0, 0, 1),
        (1, 0, 1),
        (1, 1, 1),
        (0, 1, 1),
    ]
    for _ in range(n):
        pts.append((rng.random(), rng.random(), rng.random()))
    return pts


def main():
    # --- 1) Вхідні дані ---
    points = generate_random_points(200)
    queries = [(0.5, 0.5, 0.5), (0.1, 0.5, 0.5), (0.9, 0.9, 0.9)]

    # --- 2) Оболонка ---
    hull = ConvexHull3D(as_points(points))
    print(f"Вершини оболонки: {len(hull.vertices())}")
    print(f"Граней оболонки:  {len(hull.faces())}")
    print(f"Точок всередині:  {len(hull.skipped)}")
    print("VALIDATION:", hull.validate())

    # --- 3) Відстані: наша реалізація vs SciPy (Qhull) ---
    ours = hull_distances(points, queries, backend="internal")
    ref = hull_distances(points, queries, backend="scipy")
    for q, a, b in zip(queries, ours, ref):
        print(f"{q}: internal={a:.9f} scipy={b:.9f}")

    # --- 4) Експорти ---
    hull.write_off("hull.off")
    save_hull_plot(hull, "hull.png")
    print("hull.off і hull.png записано.")


if __name__ == "__main__":
    main()
