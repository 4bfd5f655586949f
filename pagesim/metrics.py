from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .simulator import SimulationResult


@dataclass
class ReportConfig:
    capacity: int
    workload_name: str
    workload_params: dict = field(default_factory=dict)


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    """Plain-text table; first column left-aligned, the rest right-aligned."""
    if not rows:
        return "(No data)"
    cells = [[str(value) for value in row] for row in [headers, *rows]]
    widths = [max(len(column) for column in columns) for columns in zip(*cells)]

    def _line(row: Sequence[str]) -> str:
        first, *rest = row
        padded = [first.ljust(widths[0])] + [value.rjust(width) for value, width in zip(rest, widths[1:])]
        return "| " + " | ".join(padded) + " |"

    rule = "|" + "|".join("-" * (width + 2) for width in widths) + "|"
    return "\n".join([_line(cells[0]), rule, *(_line(row) for row in cells[1:])])


def build_sweep_table(policies: Sequence[str], hit_counts: Mapping[int, Mapping[str, int]]) -> str:
    """Capacity rows x policy columns of raw hit counts."""
    rows = [[capacity, *(hit_counts[capacity][name] for name in policies)] for capacity in sorted(hit_counts)]
    return format_table(["Capacity", *policies], rows)


class MetricsCollector:
    """Per-run detail shown by ``pagesim --report``: one row per policy."""

    HEADERS = ("Policy", "Hits", "Misses", "Evictions", "Hit Rate", "ns/req")

    def __init__(self, config: ReportConfig):
        self.config = config

    def build_report(self, results: Iterable[SimulationResult]) -> str:
        result_list = list(results)
        requests = result_list[0].requests if result_list else 0
        params = ", ".join(f"{k}={v}" for k, v in self.config.workload_params.items())
        title = f"[{self.config.workload_name} | capacity {self.config.capacity} | {requests} requests]"
        rows = [
            (r.policy, r.hits, r.misses, r.evictions, f"{r.hit_rate:.2%}", f"{r.ns_per_request:.1f}")
            for r in result_list
        ]
        lines = [title]
        if params:
            lines.append(params)
        lines.append(format_table(self.HEADERS, rows))
        return "\n".join(lines)
