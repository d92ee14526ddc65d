from __future__ import annotations

import argparse
import importlib
import logging
import sys

from neontycoon.catalog import Catalog, default_catalog
from neontycoon.formatting import format_text_report
from neontycoon.simulation import Simulation
from neontycoon.strategy import (
    PRESTIGE_MODES,
    ClickProfile,
    GreedyCheapest,
    GreedyROI,
    Strategy,
)
from neontycoon.terminal import Terminal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neontycoon",
        description="Neon Tycoon economy simulation CLI",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Run a simulation")
    sim.add_argument(
        "--catalog",
        default=None,
        help="Python module with define_catalog() (default: built-in catalog)",
    )
    sim.add_argument(
        "--strategy",
        default="greedy_cheapest",
        choices=["greedy_cheapest", "greedy_roi"],
        help="Strategy to use (default: greedy_cheapest)",
    )
    sim.add_argument("--cps", type=float, default=0.0, help="Clicks per second")
    sim.add_argument(
        "--tick-resolution", type=float, default=1.0, help="Seconds per tick"
    )
    sim.add_argument(
        "--terminal-time", type=float, default=3600, help="Max simulation time (s)"
    )
    sim.add_argument(
        "--prestige",
        default="never",
        choices=list(PRESTIGE_MODES),
        help="When to prestige (default: never)",
    )
    sim.add_argument("--export-csv", default=None, help="CSV export path prefix")
    sim.add_argument("--export-json", default=None, help="JSON export path")
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")

    return parser


def load_catalog(module_path: str | None) -> Catalog:
    """Import module and call define_catalog()."""
    if module_path is None:
        return default_catalog()
    mod = importlib.import_module(module_path)
    if not hasattr(mod, "define_catalog"):
        print(f"Error: module {module_path!r} has no define_catalog() function")
        sys.exit(1)
    return mod.define_catalog()


def build_strategy(name: str, cps: float, prestige_mode: str = "never") -> Strategy:
    click_profile = ClickProfile(clicks_per_second=cps) if cps > 0 else None
    if name == "greedy_roi":
        return GreedyROI(click_profile=click_profile, prestige_mode=prestige_mode)
    return GreedyCheapest(click_profile=click_profile, prestige_mode=prestige_mode)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "simulate":
        catalog = load_catalog(args.catalog)
        strategy = build_strategy(args.strategy, args.cps, args.prestige)

        sim = Simulation(
            strategy=strategy,
            terminal=Terminal.time(args.terminal_time),
            catalog=catalog,
            tick_resolution=args.tick_resolution,
        )
        report = sim.run()
        print(format_text_report(report, catalog))

        if args.export_csv:
            from neontycoon.export import export_csv
            export_csv(report, args.export_csv)
            print(f"\nCSV exported to {args.export_csv}_*.csv")

        if args.export_json:
            from neontycoon.export import export_json
            export_json(report, args.export_json)
            print(f"\nJSON exported to {args.export_json}")

        if args.plot:
            from neontycoon.visualization import plot_simulation
            plot_simulation(report, args.plot)
            print(f"\nPlot saved to {args.plot}")


if __name__ == "__main__":
    main()
