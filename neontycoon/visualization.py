from __future__ import annotations

from neontycoon.report import SimulationReport


def plot_simulation(
    report: SimulationReport,
    output_path: str | None = None,
) -> None:
    """Generate a 3-panel matplotlib visualization of simulation results.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install neontycoon[viz]"
        )

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle(
        f"Neon Tycoon Simulation: {report.strategy_description}",
        fontsize=14,
    )

    # 1. Money over time (log scale)
    ax1 = axes[0]
    series = report.money_series()
    if series:
        times, values = zip(*series)
        ax1.plot(times, [max(v, 1e-10) for v in values], label="money")
        for p in report.prestiges:
            ax1.axvline(p.time, color="purple", linestyle=":", alpha=0.6)
    ax1.set_yscale("log")
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("Money")
    ax1.set_title("Money")
    ax1.grid(True, alpha=0.3)

    # 2. Income rate over time
    ax2 = axes[1]
    series = report.income_series()
    if series:
        times, rates = zip(*series)
        ax2.plot(times, rates, color="green")
    ax2.set_xlabel("Time (s)")
    ax2.set_ylabel("Income (/s)")
    ax2.set_title("Income Rate")
    ax2.grid(True, alpha=0.3)

    # 3. Purchase timeline
    ax3 = axes[2]
    if report.purchases:
        ax3.scatter(
            [p.time for p in report.purchases],
            [p.building_id for p in report.purchases],
            s=10,
            alpha=0.6,
        )
        ax3.set_xlabel("Time (s)")
        ax3.set_ylabel("Building id")
        ax3.set_title("Purchase Timeline")
        ax3.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()
