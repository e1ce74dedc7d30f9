from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .errors import DegenerateInputError
from .faces import Edge, FaceStore, edge_key, split_edge_key
from .geom import Pt, centroid, cross, dot, sub
from .planes import Plane, extract_planes
from .predicates import orient3d, visible_from_point
from .tolerances import DEFAULT_TOLERANCES, Tolerances

log = logging.getLogger(__name__)

Tetra = Tuple[int, int, int, int]


def find_initial_tetra(points: Sequence[Pt], tol: Tolerances = DEFAULT_TOLERANCES) -> Tetra:
    """
    Знайти перші 4 не копланарні точки (детерміновано, у порядку входу):
      - v0 = 0 (якір);
      - v1: перша точка, що відрізняється координатами від v0;
      - v2: перша після v1 з |cx|+|cy|+|cz| > tol.collinear для (v1-v0) x (v2-v0);
      - v3: перша після v2 з |dot(v3-v0, n)| > tol.coplanar.
    Якщо сканування доходить до кінця списку — DegenerateInputError.
    """
    n = len(points)
    if n < 4:
        raise DegenerateInputError(f"Need at least 4 points, got {n}")
    v0 = 0
    p0 = points[v0]

    v1 = next((i for i in range(1, n) if points[i] != p0), None)
    if v1 is None:
        raise DegenerateInputError("All points coincide: cannot pick a second vertex")

    base = sub(points[v1], p0)
    v2 = None
    normal = None
    for i in range(v1 + 1, n):
        cp = cross(base, sub(points[i], p0))
        if abs(cp.x) + abs(cp.y) + abs(cp.z) > tol.collinear:
            v2, normal = i, cp
            break
    if v2 is None:
        raise DegenerateInputError("All points collinear: cannot form a base triangle")

    v3 = next((i for i in range(v2 + 1, n)
               if abs(dot(sub(points[i], p0), normal)) > tol.coplanar), None)
    if v3 is None:
        raise DegenerateInputError("All points coplanar: 3D hull is impossible")

    return v0, v1, v2, v3


@dataclass(frozen=True)
class InsertStep:
    """Результат вставки однієї точки: які грані знесено і які пришито."""
    point: int
    deleted: Tuple[int, ...]
    created: Tuple[int, ...]


class ConvexHull3D:
    """
    Інкрементальний 3D convex hull (без conflict graph, лінійний скан видимості).

    Вхід: список Pt (мінімум 4 афінно незалежні).
    Будується одразу в конструкторі; self.store — арена всіх граней (живих і мертвих).
    """

    def __init__(self, points: Sequence[Pt], tol: Tolerances = DEFAULT_TOLERANCES):
        self.P: List[Pt] = list(points)  # індексована копія
        self.tol = tol
        self.store = FaceStore()
        self.steps: List[InsertStep] = []
        self.skipped: List[int] = []

        # 1) стартовий тетраедр і внутрішня точка (фіксується на весь час побудови)
        self.tetra: Tetra = find_initial_tetra(self.P, tol)
        self.interior: Pt = centroid(self.P[i] for i in self.tetra)
        self._seed()

        # 2) решта точок у порядку входу
        self.build()

    # ---------------- Публічний API ----------------
    def faces(self) -> List[Tuple[int, int, int]]:
        """Активні грані (трикутники) як індекси вершин."""
        return [f.v for f in self.store.alive()]

    def vertices(self) -> List[int]:
        """Індекси крайніх точок (вершин оболонки), відсортовані."""
        return sorted({i for f in self.store.alive() for i in f.v})

    def planes(self) -> List[Plane]:
        return extract_planes(self.store)

    def build(self) -> None:
        seeds = set(self.tetra)
        for p_idx in range(len(self.P)):
            if p_idx in seeds:
                continue
            self.insert_point(p_idx)
        log.info("hull built: %d points, %d live faces of %d allocated, %d points inside",
                 len(self.P), len(self.store.alive_ids()), len(self.store), len(self.skipped))

    def insert_point(self, p_idx: int) -> InsertStep:
        """
        Додати точку p_idx:
          1) знайти видимі грані;
          2) якщо таких нема — точка всередині (або на межі), нічого не змінюється;
          3) знести видимі грані, порахувати їхні ребра;
          4) ребра з лічильником 1 — горизонт;
          5) пришити нові грані (u, v, p) вздовж горизонту.
        """
        visible = self.visible_faces(self.P[p_idx])
        if not visible:
            step = InsertStep(p_idx, (), ())
            self.skipped.append(p_idx)
            self.steps.append(step)
            log.debug("point %d is inside the hull", p_idx)
            return step

        border = self.delete_and_count_border(visible)
        created = [self.store.add_face(u, v, p_idx, self.P, self.interior)
                   for u, v in self.horizon_edges(border)]

        step = InsertStep(p_idx, tuple(visible), tuple(created))
        self.steps.append(step)
        log.debug("point %d: %d faces deleted, %d faces created", p_idx, len(visible), len(created))
        return step

    def visible_faces(self, p: Pt) -> List[int]:
        visible: List[int] = []
        for fid in self.store.alive_ids():
            f = self.store[fid]
            if visible_from_point(f.normal, f.offset, p, self.tol.visible):
                visible.append(fid)
        return visible

    def delete_and_count_border(self, visible: Sequence[int]) -> Dict[int, int]:
        """Позначити грані мертвими; edge_key -> скільки видимих граней має це ребро."""
        border: Dict[int, int] = {}
        for fid in visible:
            self.store.delete(fid)
            for u, v in self.store[fid].edges():
                key = edge_key(u, v)
                border[key] = border.get(key, 0) + 1
        return border

    @staticmethod
    def horizon_edges(border: Dict[int, int]) -> List[Edge]:
        # ребро між двома видимими гранями (лічильник 2) — внутрішнє для «ковпака»
        return [split_edge_key(key) for key, count in border.items() if count == 1]

    # ---------------- Внутрішні методи ----------------
    def _seed(self) -> None:
        v0, v1, v2, v3 = self.tetra
        for a, b, c in ((v0, v1, v2), (v0, v3, v1), (v0, v2, v3), (v1, v3, v2)):
            self.store.add_face(a, b, c, self.P, self.interior)
        log.debug("seed tetrahedron %s, interior point %s", self.tetra, self.interior)

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожне неорієнтоване ребро зустрічається рівно у 2 активних гранях;
          - кожне орієнтоване ребро — рівно в одній грані (узгоджена орієнтація);
          - orient3d(a,b,c,O) < 0 для внутрішньої точки O;
          - жодна вхідна точка не лежить зовні жодної грані (з допуском tol.visible).
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        faces = self.store.alive()
        O = self.interior

        # 1) ребра
        edge_count: Dict[int, int] = {}
        directed: Dict[Edge, int] = {}
        for f in faces:
            for u, v in f.edges():
                key = edge_key(u, v)
                edge_count[key] = edge_count.get(key, 0) + 1
                directed[(u, v)] = directed.get((u, v), 0) + 1
        bad_edges = [(split_edge_key(e), k) for e, k in edge_count.items() if k != 2]
        bad_directed = [e for e, k in directed.items() if k != 1 or (e[1], e[0]) not in directed]

        # 2) орієнтації
        bad_orient: List[int] = []
        for fid in self.store.alive_ids():
            a, b, c = self.store[fid].v
            if orient3d(self.P[a], self.P[b], self.P[c], O) >= 0:
                bad_orient.append(fid)

        # 3) усі точки всередині
        outside = [pi for pi, p in enumerate(self.P)
                   if any(f.value(p) > self.tol.visible for f in faces)]

        return {
            "faces": len(faces),
            "unique_vertices": len(self.vertices()),
            "bad_edges": bad_edges,
            "bad_directed_edges": bad_directed,
            "bad_orient_faces": bad_orient,
            "outside_points": outside,
        }

    def is_valid(self) -> bool:
        report = self.validate()
        return not (report["bad_edges"] or report["bad_directed_edges"]
                    or report["bad_orient_faces"] or report["outside_points"])

    def to_off(self) -> str:
        """
        Експорт опуклої оболонки у формат OFF (активні грані).
        """
        faces = self.faces()
        used = self.vertices()
        remap = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(faces)} 0"]
        for i in used:
            p = self.P[i]
            lines.append(f"{p.x} {p.y} {p.z}")
        for tri in faces:
            a, b, c = (remap[i] for i in tri)
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)

    def write_off(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_off())
