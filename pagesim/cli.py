from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_CAPACITIES, DEFAULT_LENGTH, DEFAULT_PAGE_RANGE, SimulationConfig
from .errors import InvalidConfiguration
from .metrics import ReportBuilder, ReportConfig
from .reference import parse_sequence
from .simulator import CapacityReport, simulate

logger = logging.getLogger(__name__)


def parse_arguments(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagesim",
        description="Compare FIFO, Second Chance, LRU and Optimal page replacement",
        epilog=(
            "Examples:\n"
            "  pagesim                                   # 16 random refs over 7 pages, frames 3 4 5\n"
            "  pagesim --length 50 --page-range 10 --seed 1\n"
            "  pagesim --sequence 1,2,3,4,1,2,5,1,2,3,4,5 --capacities 3 4\n"
            "  pagesim --chart faults.png"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="number of generated references")
    parser.add_argument("--page-range", type=int, default=DEFAULT_PAGE_RANGE, help="pages are drawn from [0, N)")
    parser.add_argument(
        "--capacities",
        type=int,
        nargs="+",
        default=list(DEFAULT_CAPACITIES),
        help="frame counts to evaluate, in report order",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible generated sequence")
    parser.add_argument("--sequence", default=None, help="explicit reference string, e.g. '7,0,1,2,0'")
    parser.add_argument("--chart", default=None, metavar="PATH", help="also save a fault chart (PNG) to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every policy run")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    sequence = parse_sequence(args.sequence) if args.sequence is not None else None
    return SimulationConfig(
        length=args.length,
        page_range=args.page_range,
        capacities=args.capacities,
        seed=args.seed,
        sequence=sequence,
        chart_path=args.chart,
    )


def run(config: SimulationConfig) -> str:
    sequence = config.reference_sequence()
    reports: List[CapacityReport] = simulate(sequence, config.capacities)
    report_config = ReportConfig(
        sequence=sequence,
        page_range=None if config.sequence is not None else config.page_range,
        seed=None if config.sequence is not None else config.seed,
    )
    text = ReportBuilder(report_config).build_report(reports)

    if config.chart_path:
        from .charts import save_fault_chart

        save_fault_chart(reports, config.chart_path)
        logger.info("fault chart written to %s", config.chart_path)
        text += f"\n\nChart saved to {config.chart_path}"
    return text


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        print(run(build_config(args)))
    except InvalidConfiguration as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0
