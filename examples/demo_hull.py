from hull3d.geom import as_points
from hull3d.hull import ConvexHull3D
from hull3d.planes import distance_to_hull

if __name__ == "__main__":
    raw = [
        (0,0,0), (1,0,0), (1,1,0), (0,1,0),
        (0,0,1), (1,0,1), (1,1,1), (0,1,1),
        (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
    ]
    pts = as_points(raw)
    hull = ConvexHull3D(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("Inside points:", hull.skipped)
    print("Distance from (0.5, 0.5, 0.5):", distance_to_hull(hull.planes(), pts[8]))

    hull.write_off("hull.off")
    print("Wrote hull.off — можна глянути в MeshLab/ParaView.")
