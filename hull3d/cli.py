"""
Пакетна програма: точки й запити зі stdin (або файлу) -> відстані до межі оболонки у stdout.

Usage:
    python -m hull3d < input.txt
    python -m hull3d input.txt -o answers.txt --off hull.off --plot hull.png
    python -m hull3d input.txt --backend scipy
"""
from __future__ import annotations

import argparse
import logging
import sys

from .errors import DegenerateInputError, InputFormatError
from .hull import ConvexHull3D
from .io import format_answers, parse_input
from .pipeline import hull_distances
from .planes import answer_queries
from .tolerances import DEFAULT_TOLERANCES, Tolerances

log = logging.getLogger(__name__)


def _tolerance(text: str) -> float:
    try:
        eps = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: '{text}'") from None
    if eps < 0.0:
        raise argparse.ArgumentTypeError(f"tolerance must be non-negative, got {text}")
    return eps


def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog="hull3d",
                                 description="Distances from interior points to the 3D convex hull boundary.")
    ap.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    ap.add_argument("--output", "-o", default="-", help="Output file (default: stdout)")
    ap.add_argument("--backend", choices=("internal", "scipy"), default="internal",
                    help="Hull implementation (default: internal)")
    ap.add_argument("--off", metavar="PATH", help="Also write the hull as an OFF file")
    ap.add_argument("--plot", metavar="PATH", help="Also save a rendering of the hull (matplotlib)")
    ap.add_argument("--eps", type=_tolerance, default=None,
                    help=f"Absolute tolerance for all geometric tests (default: {DEFAULT_TOLERANCES.visible:g})")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    return ap.parse_args(argv)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write(path: str, text: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def run(args) -> int:
    tol = Tolerances.uniform(args.eps) if args.eps is not None else DEFAULT_TOLERANCES
    points, queries = parse_input(_read(args.input))
    log.debug("read %d points, %d queries", len(points), len(queries))

    hull = None
    if args.backend == "internal" or args.off or args.plot:
        hull = ConvexHull3D(points, tol)
    if args.off:
        hull.write_off(args.off)
        log.info("wrote %s", args.off)
    if args.plot:
        from .plot import save_hull_plot
        save_hull_plot(hull, args.plot)
        log.info("wrote %s", args.plot)

    if args.backend == "internal":
        answers = answer_queries(hull.planes(), queries)
    else:
        answers = hull_distances(points, queries, backend=args.backend, tol=tol)

    _write(args.output, format_answers(answers))
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return run(args)
    except (InputFormatError, DegenerateInputError) as e:
        log.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
