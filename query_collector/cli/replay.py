#!/usr/bin/env python3
"""
Replay a captured ORM log through a QueryCollector and print the summary.

Each line of the log file is one log event. Lines may carry a leading
severity as '<level> <message>' where level is 0-7; other lines are
logged at DEBUG. Replayed statements carry no caller attribution.

    query-collector-replay --log-file app.log --forward --out summary.json
"""
import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from tabulate import tabulate

from query_collector.cli.cli import build_env_parser
from query_collector.config.collector_config import CollectorConfig
from query_collector.config.config_loader import ConfigLoader
from query_collector.consts.LogLevel import SourceLogLevel
from query_collector.service.collector.downstream import StdlibLoggerBridge
from query_collector.service.collector.query_collector import QueryCollector
from query_collector.util.log_config import configure_package_logging, setup_logger

logger = setup_logger(__name__)

SEVERITY_PREFIX = re.compile(r'^([0-7])\s+(.*)$')
SQL_PREVIEW_WIDTH = 80


def build_replay_parser() -> argparse.ArgumentParser:
    parser = build_env_parser(description="Replay an ORM query log and summarize the statements")
    parser.add_argument("--log-file", type=str, required=True,
                        help="Path to the captured log file")
    parser.add_argument("--forward", action="store_true",
                        help="Forward query lines to the output logger as 'SQL (duration)'")
    parser.add_argument("--out", type=str, default="",
                        help="If set, write the collected summary as JSON to this path")
    return parser


def split_severity(line: str):
    match = SEVERITY_PREFIX.match(line)
    if match:
        return match.group(2), SourceLogLevel(int(match.group(1)))
    return line, None


def replay(collector: QueryCollector, lines: List[str]) -> Dict[str, Any]:
    for line in lines:
        line = line.rstrip('\n')
        if not line.strip():
            continue
        message, severity = split_severity(line)
        collector.log(message, severity)
    return collector.collect()


def print_summary(summary: Dict[str, Any]) -> None:
    print(tabulate([
        ["Statements", summary['nb_statements']],
        ["Failed", summary['nb_failed_statements']],
        ["Total duration", summary['accumulated_duration_str']],
        ["Peak memory", summary['peak_memory_usage_str']],
    ], tablefmt="heavy_grid"))

    if not summary['statements']:
        return
    rows = []
    for i, statement in enumerate(summary['statements'], 1):
        sql = statement['sql']
        if len(sql) > SQL_PREVIEW_WIDTH:
            sql = sql[:SQL_PREVIEW_WIDTH - 3] + '...'
        rows.append([i, sql, statement['duration_str'], statement['memory_str'], statement['caller'] or '-'])
    print(tabulate(rows, headers=["#", "SQL", "Duration", "Memory", "Caller"],
                   tablefmt="heavy_grid", numalign="right"))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_replay_parser().parse_args(argv)

    log_file = Path(args.log_file)
    if not log_file.exists():
        logger.error(f"Log file not found: {log_file}")
        return 1

    if args.config_dir:
        loader = ConfigLoader(Path(args.config_dir), env=args.env)
        config = loader.config_data
        profiling = loader.get_profiling_configuration()
    else:
        config = CollectorConfig()
        profiling = None

    configure_package_logging(logging.getLevelName(config.log_level), config.log_file)

    collector = QueryCollector.from_config(
        config,
        profiling=profiling,
        # replayed lines have no call stack behind them
        trace_provider=list,
        downstream=StdlibLoggerBridge(setup_logger(
            "query_collector.replay.forwarded", level=logging.DEBUG, log_file=config.log_file)),
    )
    if args.forward:
        collector.set_log_queries_to_logger(True)

    with open(log_file, 'r', encoding='utf-8') as f:
        summary = replay(collector, f.readlines())

    print_summary(summary)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, ensure_ascii=False)
        logger.info(f"Summary written to {out_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
