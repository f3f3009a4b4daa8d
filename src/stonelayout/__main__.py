"""
Command-line interface.

Usage:
    $ python -m stonelayout --preset assets/presets/ashlar_running.oob --json layout.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from stonelayout.config import DEFAULT_SEED, MAX_STONES
from stonelayout.engine.layout_engine import LayoutEngine
from stonelayout.logging_config import setup_logging
from stonelayout.model.io import IOManager
from stonelayout.model.parameters import LayoutDirection, PatternType, StoneParameters
from stonelayout.presets.oob import load_preset

logger = logging.getLogger("stonelayout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stonelayout",
        description="Generate a seeded stone coursing layout for a rectangular wall.",
    )
    parser.add_argument("--preset", help="Path to an .oob preset file.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Generator seed (default: %(default)s).")
    parser.add_argument("--max-stones", type=int, default=MAX_STONES, help="Safety cutoff (default: %(default)s).")
    parser.add_argument("--pattern", choices=[p.value for p in PatternType], help="Override the coursing pattern.")
    parser.add_argument("--direction", choices=[d.value for d in LayoutDirection], help="Override the course direction.")
    parser.add_argument("--json", dest="json_path", help="Write the layout to a JSON file.")
    parser.add_argument("--vtk", dest="vtk_path", help="Write the layout as a box mesh (.vtp/.vtk).")
    parser.add_argument("--plot", action="store_true", help="Show a 2D elevation of the layout.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        params = load_preset(args.preset).parameters if args.preset else StoneParameters()
    except OSError as e:
        logger.error(f"Could not read preset: {e}")
        return 1

    if args.pattern:
        params = params.replace(pattern_type=PatternType(args.pattern))
    if args.direction:
        params = params.replace(layout_direction=LayoutDirection(args.direction))

    try:
        engine = LayoutEngine(seed=args.seed, max_stones=args.max_stones)
    except ValueError as e:
        logger.error(str(e))
        return 2

    layout = engine.generate_layout(params)

    try:
        if args.json_path:
            IOManager.export_json(params, layout, args.json_path)
        if args.vtk_path:
            IOManager.export_vtk(layout, args.vtk_path)
    except (OSError, ValueError) as e:
        logger.error(f"Export failed: {e}")
        return 1

    summary = f"{layout.stone_count} stones, total area {layout.total_area:.1f}"
    if layout.truncated:
        summary += " (truncated)"
    print(summary)

    if args.plot:
        from stonelayout.view.elevation import plot_layout
        plot_layout(layout, params)

    return 0


if __name__ == "__main__":
    sys.exit(main())
