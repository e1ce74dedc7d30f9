from __future__ import annotations
from dataclasses import dataclass

EPS = 1e-9  # абсолютний епс; порівняння float-геометрії на точну рівність ненадійні


@dataclass(frozen=True)
class Tolerances:
    """
    Іменовані допуски побудови оболонки.
      collinear — поріг для |cx|+|cy|+|cz| векторного добутку (пошук базового трикутника);
      coplanar  — поріг |відстані| (ненормованої) четвертої точки від базової площини;
      visible   — точка «бачить» грань, якщо dot(n, p) + d > visible.
    Для іншого масштабу координат передавайте власний екземпляр.
    """
    collinear: float = EPS
    coplanar: float = EPS
    visible: float = EPS

    def __post_init__(self):
        for name in ("collinear", "coplanar", "visible"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"tolerance '{name}' must be non-negative")

    @classmethod
    def uniform(cls, eps: float) -> Tolerances:
        return cls(collinear=eps, coplanar=eps, visible=eps)


DEFAULT_TOLERANCES = Tolerances()
