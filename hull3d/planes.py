from __future__ import annotations
from dataclasses import dataclass
from math import inf, sqrt
from typing import Iterable, List

from .faces import FaceStore
from .geom import Pt, dot


@dataclass(frozen=True)
class Plane:
    """Півпростір грані: dot(normal, P) + offset <= 0 всередині; length = |normal|."""
    normal: Pt
    length: float
    offset: float


def extract_planes(store: FaceStore) -> List[Plane]:
    """Один Plane на кожну живу грань; орієнтацію не перераховуємо."""
    planes: List[Plane] = []
    for face in store:
        if face.deleted:
            continue
        planes.append(Plane(face.normal, sqrt(dot(face.normal, face.normal)), face.offset))
    return planes


def distance_to_hull(planes: Iterable[Plane], q: Pt) -> float:
    """
    Відстань від внутрішньої точки q до найближчої грані.
    q зовні оболонки не перевіряється — результат тоді від'ємний.
    """
    best = inf
    seen = False
    for pl in planes:
        seen = True
        if pl.length == 0.0:
            continue  # вироджена грань без площини
        d = -(dot(pl.normal, q) + pl.offset) / pl.length
        if d < best:
            best = d
    if not seen:
        raise ValueError("no planes")
    return best


def answer_queries(planes: List[Plane], queries: Iterable[Pt]) -> List[float]:
    return [distance_to_hull(planes, q) for q in queries]
