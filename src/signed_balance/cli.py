"""signed-balance CLI: thin entry point from argparse to the analysis functions.

Usage:
    signed-balance samples
    signed-balance analyze --graph unbalanced_quad --output /tmp/quad.json
    signed-balance analyze --input my_graph.json --config balance.json
    signed-balance crosscheck --count 200 --seed 7
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from .analysis import analyze_graph, crosscheck_random_graphs
from .config import BalanceConfig
from .datasets.samples import SAMPLE_GRAPHS, build_sample_graph
from .logging_io import append_jsonl, read_graph_payload, write_json
from .types import SignedGraph

logger = logging.getLogger(__name__)


def _new_experiment_id() -> str:
    return datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")


def _load_config(path: str | None) -> BalanceConfig:
    return BalanceConfig.from_json(path) if path else BalanceConfig()


def _events_path(cfg: BalanceConfig) -> Path:
    experiment_id = cfg.experiment_id or _new_experiment_id()
    return Path(cfg.artifacts_dir) / experiment_id / "events.jsonl"


def _load_graph(args: argparse.Namespace, cfg: BalanceConfig) -> tuple[SignedGraph, str]:
    if args.input:
        return SignedGraph.from_dict(read_graph_payload(args.input)), str(args.input)
    name = args.graph or cfg.sample_graph
    return build_sample_graph(name), name


def _run_samples() -> int:
    for name, sample in SAMPLE_GRAPHS.items():
        print(f"{name}: {sample.description}")
    return 0


def _run_analyze(args: argparse.Namespace) -> int:
    try:
        cfg = _load_config(args.config)
        graph, name = _load_graph(args, cfg)
    except (OSError, ValueError) as exc:
        logger.error("Cannot load input: %s", exc)
        return 2

    summary = analyze_graph(graph, cfg, name=name)
    print(json.dumps(summary, ensure_ascii=False, indent=2))
    if args.output:
        write_json(summary, args.output)
        logger.info("Summary written to %s", args.output)
    append_jsonl(
        "graph_analyzed",
        {"name": name, "balanced": summary["balanced"], "verdicts": summary["verdicts"]},
        _events_path(cfg),
    )
    return 0


def _run_crosscheck(args: argparse.Namespace) -> int:
    try:
        cfg = _load_config(args.config)
        overrides = {}
        if args.count is not None:
            overrides["crosscheck_graphs"] = args.count
        if args.seed is not None:
            overrides["seed"] = args.seed
        if overrides:
            cfg = BalanceConfig.from_dict({**cfg.to_dict(), **overrides})
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    result = crosscheck_random_graphs(cfg)
    print(json.dumps(result, ensure_ascii=False, indent=2))
    append_jsonl(
        "crosscheck_completed",
        {k: v for k, v in result.items() if k != "disagreements"},
        _events_path(cfg),
    )
    return 0 if result["passed"] else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signed-balance",
        description="Structural balance checks for signed undirected graphs.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("samples", help="List the built-in sample graphs.")

    analyze = sub.add_parser("analyze", help="Run every checker on one graph.")
    source = analyze.add_mutually_exclusive_group()
    source.add_argument("--graph", choices=sorted(SAMPLE_GRAPHS), default=None)
    source.add_argument("--input", type=str, default=None, metavar="PATH")
    analyze.add_argument("--config", type=str, default=None)
    analyze.add_argument("--output", type=str, default=None, metavar="PATH")

    crosscheck = sub.add_parser("crosscheck", help="Compare checkers on random graphs.")
    crosscheck.add_argument("--config", type=str, default=None)
    crosscheck.add_argument("--count", type=int, default=None, metavar="N")
    crosscheck.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "samples":
        return _run_samples()
    if args.command == "analyze":
        return _run_analyze(args)
    if args.command == "crosscheck":
        return _run_crosscheck(args)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
