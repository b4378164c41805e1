"""Demo entrypoint printing sample vector computations."""

from __future__ import annotations

import argparse
import logging
import math

from . import config
from .math import Vec2, VectorError, project_onto, reject_from
from .verbose import VerboseVec2


def _banner() -> None:
    print("*" * 54)
    print("vectorlib demo")
    print("*" * 54)


def run(angle: float, scale: float, verbose: bool) -> None:
    v = Vec2(1.0, 2.0)
    w = Vec2(3, 4)
    print("v = %r" % (v,))
    print("w = %r" % (w,))

    k = Vec2(3, 4)
    print("w + k = %r" % (w + k,))
    print("w * k (component-wise) = %r" % (w * k,))

    scaled = v.scale(scale)
    u = Vec2(10.0, 20.0)
    print("v scaled by %g = %r" % (scale, scaled))
    print("dot(scaled, u) = %g" % scaled.dot_product(u))

    mixed = Vec2(2, 0.5)
    print("dot(%r, %r) = %g" % (mixed, w, mixed.dot_product(w)))

    rotated = Vec2(1.0, 0.0).rotate(angle)
    print("(1, 0) rotated by %.4f rad = (%.4f, %.4f)" % (angle, rotated.x, rotated.y))

    divisor = Vec2(0.0, 5.0)
    print("v.div(%r) = %r" % (divisor, v.div(divisor)))
    print("v / %r = %r" % (divisor, v / divisor))
    print("v.div(%r) = %r" % (Vec2.zero(), v.div(Vec2.zero())))

    print("|w| = %g" % w.magnitude())
    print("normalize(w) = %r" % (w.normalize(),))
    try:
        Vec2.zero().normalize()
    except VectorError as exc:
        print("normalize(0, 0) failed: %s" % exc)

    print("project w onto (1, 0) = %r" % (project_onto(w, Vec2(1.0, 0.0)),))
    print("reject w from (1, 0) = %r" % (reject_from(w, Vec2(1.0, 0.0)),))

    with VerboseVec2(v, verbose), VerboseVec2(w, verbose):
        with VerboseVec2(u, verbose):
            pass


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print sample 2D vector computations.")
    parser.add_argument("--angle", type=float, default=config.DEFAULT_DEMO_ANGLE, help="rotation angle in radians")
    parser.add_argument("--scale", type=float, default=config.DEFAULT_DEMO_SCALE, help="uniform scale factor")
    parser.add_argument("--verbose", dest="verbose", action="store_true", help="log wrapper lifecycle events")
    parser.add_argument("--quiet", dest="verbose", action="store_false")
    parser.set_defaults(verbose=config.DEFAULT_VERBOSE)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=logging.getLevelName(config.DEFAULT_LOG_LEVEL),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    args = parser.parse_args(argv)
    if not math.isfinite(args.angle):
        parser.error("--angle must be finite")

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    _banner()
    run(args.angle, args.scale, args.verbose)


if __name__ == "__main__":
    main()
