from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .simulator import CapacityReport

TABLE_HEADERS = ("Policy", "Page Faults", "Page Hits", "Failure Rate", "Success Rate")


@dataclass
class ReportConfig:
    sequence: Sequence[int]
    page_range: Optional[int] = None
    seed: Optional[int] = None


class ReportBuilder:
    """Render capacity reports as plain text."""

    def __init__(self, config: ReportConfig):
        self.config = config

    def _build_table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        if not rows:
            return "(No data)"
        widths = [
            max(len(str(headers[i])), *(len(str(row[i])) for row in rows)) for i in range(len(headers))
        ]

        def _format_row(row: Sequence[str]) -> str:
            return "| " + " | ".join(str(row[i]).ljust(widths[i]) for i in range(len(headers))) + " |"

        header_line = _format_row(headers)
        separator = "|-" + "-|-".join("-" * widths[i] for i in range(len(headers))) + "-|"
        body_lines = [_format_row(row) for row in rows]
        return "\n".join([header_line, separator, *body_lines])

    def _format_capacity(self, report: CapacityReport) -> str:
        rows = [
            (
                r.policy,
                str(r.faults),
                str(r.hits),
                f"{r.failure_rate:.2f}%",
                f"{r.success_rate:.2f}%",
            )
            for r in report.results
        ]
        return "\n".join([f"[Frame Size: {report.capacity}]", self._build_table(TABLE_HEADERS, rows)])

    @staticmethod
    def summary_line(report: CapacityReport) -> str:
        best = f"{report.best} ({report.best_rate:.1f}%)" if report.best else "n/a"
        worst = f"{report.worst} ({report.worst_rate:.1f}%)" if report.worst else "n/a"
        return f"Frame Size {report.capacity}: BEST -> {best} | WORST -> {worst} Success Rate"

    def narrative(self, reports: Sequence[CapacityReport]) -> List[str]:
        if not reports or not self.config.sequence:
            return []

        totals: Dict[str, List[float]] = {}
        for report in reports:
            for result in report.results:
                totals.setdefault(result.policy, []).append(result.failure_rate)
        averages = {policy: sum(rates) / len(rates) for policy, rates in totals.items()}
        ranked = sorted(averages, key=averages.__getitem__)

        lines = [f"- {ranked[0]} has the lowest average failure rate ({averages[ranked[0]]:.2f}%)."]
        if len(ranked) > 1:
            lines.append("- Remaining policies, best first: " + ", ".join(ranked[1:]) + ".")

        ordered = sorted(reports, key=lambda r: r.capacity)
        if len({r.capacity for r in ordered}) < 2:
            return lines

        anomalies = []
        for policy in totals:
            faults = [(r.capacity, r.result_for(policy).faults) for r in ordered]
            for (small_cap, small_faults), (large_cap, large_faults) in zip(faults, faults[1:]):
                if large_faults > small_faults:
                    anomalies.append(
                        f"- {policy} faulted more with {large_cap} frames ({large_faults}) than with "
                        f"{small_cap} frames ({small_faults}): Belady's anomaly."
                    )
        if anomalies:
            lines.extend(anomalies)
        else:
            lines.append("- Adding page frames never increased the fault count for any policy.")
        return lines

    def build_report(self, reports: Iterable[CapacityReport]) -> str:
        report_list = list(reports)
        header = [
            "[Simulation Configuration]",
            f"- Reference String: {list(self.config.sequence)}",
            f"- Total Requests: {len(self.config.sequence)}",
        ]
        if self.config.page_range is not None:
            header.append(f"- Page Range: {self.config.page_range}")
        if self.config.seed is not None:
            header.append(f"- Seed: {self.config.seed}")
        header.append("")

        body = "\n\n".join(self._format_capacity(r) for r in report_list)
        summary = ["", "[Summary]", *(self.summary_line(r) for r in report_list)]
        narrative = self.narrative(report_list)
        if narrative:
            summary.extend(["", "[Narrative]", *narrative])
        return "\n".join(header + [body] + summary)
