from __future__ import annotations

from collections import Counter

from neontycoon.catalog import Catalog
from neontycoon.report import SimulationReport


def format_text_report(report: SimulationReport, catalog: Catalog | None = None) -> str:
    """Format a simulation report for console output."""
    lines: list[str] = []

    lines.append("=" * 40 + " Neon Tycoon Simulation Report " + "=" * 40)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Terminal: {report.terminal_description}")
    lines.append(f"Result: {report.outcome} at {report.total_time:.1f}s")
    lines.append("")

    lines.append("ECONOMY:")
    lines.append(f"  Money: {report.final_money:,.0f}")
    lines.append(f"  Income: {report.final_income_per_sec:,.2f}/s")
    lines.append(f"  Neural Data: {report.final_neural_data}")
    lines.append(f"  Clicks: {report.total_clicks}")
    lines.append("")

    # Purchase summary
    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    lines.append(f"  Rate: {report.purchases_per_minute:.1f}/min")
    lines.append(f"  Max gap: {report.max_purchase_gap:.1f}s")
    lines.append(f"  Mean gap: {report.mean_purchase_gap:.1f}s")
    by_building = Counter(p.building_id for p in report.purchases)
    for building_id, count in sorted(by_building.items()):
        label = f"#{building_id}"
        if catalog is not None:
            bdef = catalog.get_building(building_id)
            if bdef is not None:
                label = bdef.name
        lines.append(f"  {label:.<30s} {count}")
    lines.append("")

    if report.skills:
        lines.append("SKILLS:")
        for s in report.skills:
            lines.append(f"  * {s.skill_id:.<30s} {s.time:.1f}s")
        lines.append("")

    if report.prestiges:
        lines.append("PRESTIGE:")
        for p in report.prestiges:
            lines.append(
                f"  * {p.time:.1f}s: +{p.reward_amount} neural data "
                f"(run of {p.run_duration:.1f}s)"
            )
        lines.append("")

    return "\n".join(lines)
