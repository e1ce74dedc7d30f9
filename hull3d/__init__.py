"""
hull3d — інкрементальна 3D опукла оболонка + відстань від внутрішньої точки до межі.
Грані зберігаються в арені з позначкою deleted; горизонт — ребра з лічильником 1.
"""

__version__ = "0.1.0"

from hull3d.geom import Pt, centroid
from hull3d.tolerances import EPS, Tolerances, DEFAULT_TOLERANCES
from hull3d.errors import Hull3DError, DegenerateInputError, InputFormatError
from hull3d.faces import Face, FaceStore, edge_key, split_edge_key
from hull3d.hull import ConvexHull3D, InsertStep, find_initial_tetra
from hull3d.planes import Plane, extract_planes, distance_to_hull, answer_queries
from hull3d.io import parse_input, format_answers
from hull3d.pipeline import hull_distances

__all__ = [
    "Pt", "centroid",
    "EPS", "Tolerances", "DEFAULT_TOLERANCES",
    "Hull3DError", "DegenerateInputError", "InputFormatError",
    "Face", "FaceStore", "edge_key", "split_edge_key",
    "ConvexHull3D", "InsertStep", "find_initial_tetra",
    "Plane", "extract_planes", "distance_to_hull", "answer_queries",
    "parse_input", "format_answers",
    "hull_distances", "__version__",
]
