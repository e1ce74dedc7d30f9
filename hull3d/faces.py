from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .geom import Pt, neg
from .predicates import plane_of, plane_value

Edge = Tuple[int, int]          # орієнтоване ребро (u, v)

_LOW32 = 0xFFFFFFFF


def edge_key(u: int, v: int) -> int:
    """Неорієнтоване ребро як одне ціле: старші 32 біти — min, молодші — max."""
    return (min(u, v) << 32) | max(u, v)


def split_edge_key(key: int) -> Edge:
    return key >> 32, key & _LOW32


@dataclass
class Face:
    """
    Трикутна грань оболонки.
    v: індекси вершин; нормаль (права рука) дивиться назовні від внутрішньої точки.
    normal, offset: площина dot(normal, P) + offset == 0.
    deleted: «надгробок» — грань ніколи не видаляється фізично.
    """
    v: Tuple[int, int, int]
    normal: Pt
    offset: float
    deleted: bool = False

    def edge(self, i: int) -> Edge:
        a, b, c = self.v
        if i == 0:
            return (a, b)
        if i == 1:
            return (b, c)
        return (c, a)

    def edges(self) -> List[Edge]:
        return [self.edge(i) for i in range(3)]

    def value(self, p: Pt) -> float:
        return plane_value(self.normal, self.offset, p)


class FaceStore:
    """
    Арена граней з незмінними індексами: лише append та позначка deleted.
    Так id граней лишаються валідними весь час побудови.
    """

    def __init__(self):
        self._faces: List[Face] = []

    def add_face(self, a: int, b: int, c: int, points: Sequence[Pt], interior: Pt) -> int:
        """Додати грань (a, b, c), зорієнтувавши її назовні відносно interior. Повертає id."""
        normal, offset = plane_of(points[a], points[b], points[c])
        if plane_value(normal, offset, interior) > 0:
            b, c = c, b
            normal, offset = neg(normal), -offset
        fid = len(self._faces)
        self._faces.append(Face((a, b, c), normal, offset))
        return fid

    def delete(self, fid: int) -> None:
        face = self._faces[fid]
        if face.deleted:
            raise ValueError(f"face {fid} is already deleted")
        face.deleted = True

    def alive_ids(self) -> List[int]:
        return [fid for fid, f in enumerate(self._faces) if not f.deleted]

    def alive(self) -> List[Face]:
        return [f for f in self._faces if not f.deleted]

    def __len__(self) -> int:
        return len(self._faces)

    def __getitem__(self, fid: int) -> Face:
        return self._faces[fid]

    def __iter__(self) -> Iterator[Face]:
        return iter(self._faces)
