from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .errors import InputFormatError
from .geom import Pt

log = logging.getLogger(__name__)


class _Tokens:
    def __init__(self, text: str):
        self._toks = text.split()
        self._pos = 0

    def _next(self, what: str) -> str:
        if self._pos >= len(self._toks):
            raise InputFormatError(f"Unexpected end of input while reading {what}")
        tok = self._toks[self._pos]
        self._pos += 1
        return tok

    def count(self, what: str) -> int:
        tok = self._next(what)
        try:
            n = int(tok)
        except ValueError:
            raise InputFormatError(f"Token {self._pos}: expected integer {what}, got '{tok}'") from None
        if n < 0:
            raise InputFormatError(f"Token {self._pos}: {what} must be non-negative, got {n}")
        return n

    def point(self, what: str) -> Pt:
        xyz = []
        for _ in range(3):
            tok = self._next(what)
            try:
                xyz.append(float(tok))
            except ValueError:
                raise InputFormatError(f"Token {self._pos}: cannot read number '{tok}' in {what}") from None
        return Pt(*xyz)

    def exhausted(self) -> bool:
        return self._pos >= len(self._toks)

    def remaining(self) -> int:
        return len(self._toks) - self._pos


def parse_input(text: str) -> Tuple[List[Pt], List[Pt]]:
    """
    Парсить вхід: N, N трійок x y z, Q, Q трійок (усе через пробільні символи).
    Повертає (points, queries). Усе після останнього запиту ігнорується.
    """
    toks = _Tokens(text)
    n = toks.count("point count")
    points = [toks.point(f"point {i}") for i in range(n)]
    q = toks.count("query count")
    queries = [toks.point(f"query {i}") for i in range(q)]
    if not toks.exhausted():
        log.warning("ignoring %d trailing token(s) after the last query", toks.remaining())
    return points, queries


def format_answers(values: Iterable[float]) -> str:
    # фіксована точка, 9 знаків; по одному значенню на рядок
    return "".join(f"{v:.9f}\n" for v in values)
