"""Build one polygon and print it.

With no arguments the unit right triangle [[0,0],[0,1],[1,1]] is used;
``--ring X,Y X,Y ...`` supplies the exterior ring instead.
"""
import argparse
import sys

from .errors import GeometryError
from .polygon import Polygon

_DEFAULT_RING = [[0., 0.], [0., 1.], [1., 1.]]


def _parse_xy(text: str) -> list[float]:
    try:
        return [float(v) for v in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y got {text!r}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="sfgeom-demo", description=__doc__.splitlines()[0])
    parser.add_argument("--ring", nargs="+", type=_parse_xy, metavar="X,Y",
                        help="exterior ring coordinates (closed automatically)")
    parser.add_argument("--wkt", action="store_true", help="print WKT instead of repr")
    args = parser.parse_args(argv)

    try:
        polygon = Polygon([args.ring or _DEFAULT_RING])
    except GeometryError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    print(polygon if args.wkt else repr(polygon))
    return 0


if __name__ == "__main__":
    sys.exit(main())
