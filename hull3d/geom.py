from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable


@dataclass(frozen=True)
class Pt:
    """Точка або вільний вектор у 3D (різниця двох точок)."""
    x: float
    y: float
    z: float

    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def __add__(self, other: Pt) -> Pt:
        return add(self, other)

    def __sub__(self, other: Pt) -> Pt:
        return sub(self, other)

    def __neg__(self) -> Pt:
        return neg(self)

    def __mul__(self, k: float) -> Pt:
        return scale(self, k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Pt:
        return div(self, k)


def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y, a.z + b.z)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def neg(a: Pt) -> Pt:
    return Pt(-a.x, -a.y, -a.z)

def scale(a: Pt, k: float) -> Pt:
    return Pt(a.x*k, a.y*k, a.z*k)

def div(a: Pt, k: float) -> Pt:
    return Pt(a.x / k, a.y / k, a.z / k)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    # правило правої руки
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    return div(Pt(xs, ys, zs), float(n))

def as_points(coords: Iterable[Iterable[float]]) -> list[Pt]:
    """Перетворити ітерабельні трійки (tuple, list, numpy-рядки) на список Pt, зберігаючи порядок."""
    out: list[Pt] = []
    for c in coords:
        if isinstance(c, Pt):
            out.append(c)
            continue
        x, y, z = c
        out.append(Pt(float(x), float(y), float(z)))
    return out
