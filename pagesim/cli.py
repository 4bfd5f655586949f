from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Sequence

from .metrics import MetricsCollector, ReportConfig, build_sweep_table
from .policies import POLICY_NAMES, build_cache, hit_count
from .simulator import Simulator
from .trace_generator import DEFAULT_PARAMETERS, TraceGenerator, WorkloadType

logger = logging.getLogger(__name__)

# constant setup
MIN_CAPACITY = 5
MAX_CAPACITY = 100
CAPACITY_STEP = 5
TOTAL_REQUESTS = 10000
TOTAL_PAGES = 100
DEFAULT_SEED = 0
WORKLOADS = [workload.value for workload in WorkloadType]


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagesim",
        description="Count page-cache hits for FIFO, OPT, RAND, LRU and CLOCK over synthetic traces",
        epilog=(
            "Examples:\n"
            "  pagesim                               # every policy, workload and capacity 5..100\n"
            "  pagesim --policies lru clock --workloads looping\n"
            "  pagesim --capacities 10 50 --report   # full per-run report"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--policies",
        nargs="+",
        default=POLICY_NAMES,
        metavar="POLICY",
        help=f"Policies to run ({', '.join(POLICY_NAMES)}); default all",
    )
    parser.add_argument(
        "--workloads",
        nargs="+",
        default=WORKLOADS,
        choices=WORKLOADS,
        metavar="WORKLOAD",
        help=f"Workloads to generate ({', '.join(WORKLOADS)}); default all",
    )
    parser.add_argument(
        "--capacities",
        nargs="+",
        type=int,
        metavar="N",
        help="Explicit cache capacities; overrides the min/max/step range",
    )
    parser.add_argument("--min-capacity", type=int, default=MIN_CAPACITY)
    parser.add_argument("--max-capacity", type=int, default=MAX_CAPACITY)
    parser.add_argument("--step", type=int, default=CAPACITY_STEP)
    parser.add_argument("--requests", type=int, default=TOTAL_REQUESTS, help="Trace length")
    parser.add_argument("--pages", type=int, default=TOTAL_PAGES, help="Distinct pages for random workloads")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for traces and RAND")
    parser.add_argument("--report", action="store_true", help="Print the detailed report for every run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_capacities(args: argparse.Namespace) -> List[int]:
    if args.capacities:
        capacities = sorted(set(args.capacities))
    else:
        if args.step <= 0:
            raise ValueError(f"--step must be positive, got {args.step}")
        capacities = list(range(args.min_capacity, args.max_capacity + 1, args.step))
    if not capacities:
        raise ValueError("No cache capacities selected")
    negative = [c for c in capacities if c < 0]
    if negative:
        raise ValueError(f"Cache capacity must be non-negative, got {negative[0]}")
    return capacities


def resolve_policies(names: Sequence[str]) -> List[str]:
    selected: List[str] = []
    for raw in names:
        name = raw.strip().upper()
        if name not in POLICY_NAMES:
            raise ValueError(f"Unknown policy '{raw}', expected one of {', '.join(POLICY_NAMES)}")
        if name not in selected:
            selected.append(name)
    return selected


def workload_parameters(workload: WorkloadType, requests: int, pages: int) -> Dict[str, int | float]:
    params = dict(DEFAULT_PARAMETERS[workload])
    params["total_requests"] = requests
    if "total_pages" in params:
        params["total_pages"] = pages
    return params


def run_workload(
    workload: WorkloadType,
    policies: Sequence[str],
    capacities: Sequence[int],
    *,
    requests: int = TOTAL_REQUESTS,
    pages: int = TOTAL_PAGES,
    seed: int | None = DEFAULT_SEED,
    report: bool = False,
) -> Dict[int, Dict[str, int]]:
    """Sweep capacities for one workload; returns capacity -> policy -> hit count."""
    params = workload_parameters(workload, requests, pages)
    trace = TraceGenerator(workload, params, seed=seed).generate()
    logger.debug("generated %s trace with %d requests", workload.value, len(trace))

    table: Dict[int, Dict[str, int]] = {}
    for capacity in capacities:
        if report:
            simulator = Simulator(capacity, trace)
            results = [
                simulator.run(name, build_cache(name, capacity, trace, seed=seed)) for name in policies
            ]
            table[capacity] = {result.policy: result.hits for result in results}
            report_config = ReportConfig(capacity=capacity, workload_name=workload.value, workload_params=params)
            print(MetricsCollector(report_config).build_report(results))
            print()
        else:
            table[capacity] = {name: hit_count(name, trace, capacity, seed=seed) for name in policies}
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        policies = resolve_policies(args.policies)
        capacities = resolve_capacities(args)
        for name in args.workloads:
            workload = WorkloadType(name)
            table = run_workload(
                workload,
                policies,
                capacities,
                requests=args.requests,
                pages=args.pages,
                seed=args.seed,
                report=args.report,
            )
            print(f"\n{'=' * 60}")
            print(f"Workload: {workload.value} ({args.requests} requests)")
            print(f"{'=' * 60}\n")
            print(build_sweep_table(policies, table))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
