from __future__ import annotations

from typing import Dict, List, Sequence

from matplotlib.figure import Figure

from .errors import InvalidConfiguration
from .simulator import CapacityReport

MARKERS = ("o", "s", "^", "x")


def save_fault_chart(reports: Sequence[CapacityReport], path: str) -> str:
    """Plot page faults against frame count for each policy and save the figure to ``path``.

    Draws on a standalone ``Figure`` so the caller's pyplot backend and state are left alone.
    """
    if not reports:
        raise InvalidConfiguration("No capacity reports to plot")

    ordered = sorted(reports, key=lambda r: r.capacity)
    capacities = [r.capacity for r in ordered]
    series: Dict[str, List[int]] = {}
    for report in ordered:
        for result in report.results:
            series.setdefault(result.policy, []).append(result.faults)

    fig = Figure(figsize=(8, 5))
    ax = fig.subplots()
    for idx, (policy, faults) in enumerate(series.items()):
        ax.plot(capacities, faults, label=policy, marker=MARKERS[idx % len(MARKERS)])

    ax.set_xlabel("Number of Frames")
    ax.set_ylabel("Page Faults")
    ax.set_title("Page Faults vs Number of Frames")
    ax.set_xticks(capacities)
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    return path
