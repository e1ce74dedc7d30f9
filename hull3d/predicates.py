# hull3d/predicates.py
from __future__ import annotations
from typing import Tuple
from .geom import Pt, sub, cross, dot
from .tolerances import EPS

def orient3d(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def plane_of(a: Pt, b: Pt, c: Pt) -> Tuple[Pt, float]:
    """
    Площина трикутника (a, b, c): (normal, offset), де normal = (b-a) x (c-a)
    (не нормована), а dot(normal, P) + offset == 0 для кожної P на площині.
    """
    n = cross(sub(b, a), sub(c, a))
    return n, -dot(n, a)

def plane_value(normal: Pt, offset: float, p: Pt) -> float:
    """Знакова (ненормована) відстань: > 0 — p із зовнішнього боку."""
    return dot(normal, p) + offset

def visible_from_point(normal: Pt, offset: float, p: Pt, eps: float = EPS) -> bool:
    # строго зовні; точки в межах eps від площини вважаються «на» ній
    return plane_value(normal, offset, p) > eps
