"""Command-line interface."""
from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import Optional, Sequence

from catenaryline.config import CONNECTION_LINE_POINTS
from catenaryline.logging_config import level_from_verbosity, setup_logging
from catenaryline.model.catenary import LineOptions, Mode
from catenaryline.model.conductors import ConductorType, get_conductor
from catenaryline.transmission_line import create_transmission_line
from catenaryline.utils import rts_percent_from_tension

logger = logging.getLogger("catenaryline.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="catenaryline",
        description="Sample a hanging cable between two supports in a local east-north-up frame.",
    )
    ap.add_argument("--start", type=float, nargs=3, required=True, metavar=("X", "Y", "Z"), help="start support")
    ap.add_argument("--end", type=float, nargs=3, required=True, metavar=("X", "Y", "Z"), help="end support")
    ap.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.PHYSICS.value)
    ap.add_argument("--points", type=int, default=CONNECTION_LINE_POINTS, help="number of segments N")
    ap.add_argument("--conductor", choices=[c.value for c in ConductorType], help="conductor preset")
    ap.add_argument("--tension", type=float, help="horizontal tension in N")
    ap.add_argument("--tension-pct", type=float, help="horizontal tension as %% of the conductor RTS")
    ap.add_argument("--weight", type=float, help="linear weight in N/m")
    ap.add_argument("--length", type=float, help="target cable length (length mode)")
    ap.add_argument("--sag-ratio", type=float, help="mid-span sag as a fraction of the span (sag mode)")
    ap.add_argument("--csv", metavar="PATH", help="write the sampled points to a CSV file ('-' for stdout)")
    ap.add_argument("--plot", action="store_true", help="plot the profile")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="more logging (-vv for debug)")
    return ap


def options_from_args(args: argparse.Namespace) -> LineOptions:
    fields = {"mode": Mode(args.mode), "num_points": args.points}
    if args.tension is not None:
        fields["tension"] = args.tension
    if args.weight is not None:
        fields["linear_weight"] = args.weight
    if args.length is not None:
        fields["target_length"] = args.length
    if args.sag_ratio is not None:
        fields["sag_ratio"] = args.sag_ratio

    if args.conductor:
        return LineOptions.for_conductor(
            get_conductor(args.conductor),
            tension_percent=args.tension_pct,
            **fields,
        )
    if args.tension_pct is not None:
        raise ValueError("--tension-pct requires --conductor.")
    return LineOptions(**fields)


def write_csv(points, stream) -> None:
    writer = csv.writer(stream)
    writer.writerow(["x", "y", "z"])
    for x, y, z in points:
        writer.writerow([f"{x:.6f}", f"{y:.6f}", f"{z:.6f}"])


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=level_from_verbosity(args.verbose))

    try:
        options = options_from_args(args)
    except ValueError as e:
        logger.error(str(e))
        return 2

    result = create_transmission_line(args.start, args.end, options)

    print("=== Transmission line ===")
    print(f"conductor      : {options.name}")
    print(f"points         : {len(result)}")
    meta = result.metadata
    if meta is None:
        print("span           : degenerate (raw endpoints)")
    else:
        print(f"strategy       : {meta.strategy.value} (requested {meta.requested_mode.value})")
        print(f"fallback       : {'yes' if meta.used_fallback else 'no'}")
        print(f"a (H/w)        : {meta.a:.4f} m")
        print(f"max sag        : {meta.max_sag:.4f} m")
        print(f"tension        : {meta.implied_tension:.1f} N")
        if args.conductor:
            rts = get_conductor(args.conductor).rated_strength
            print(f"tension / RTS  : {rts_percent_from_tension(meta.implied_tension, rts):.1f} %")
        print(f"linear weight  : {meta.linear_weight:.3f} N/m")
        print(f"cable length   : {result.length:.4f} m")

    if args.csv == "-":
        write_csv(result.points, sys.stdout)
    elif args.csv:
        with open(args.csv, "w", newline="", encoding="utf-8") as f:
            write_csv(result.points, f)
        logger.info(f"Points written to: {args.csv}")

    if args.plot:
        from catenaryline.plotting import plot_profile
        plot_profile(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
