"""Command-line entry point for vibecheck."""

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .analyzer import VibeCheckAnalyzer
from .config import CONFIG_FILE_NAMES, VibeCheckConfig, load_config, write_default_config
from .exceptions import AnalysisPathNotFoundError
from .logging_config import configure_logging
from .models import CATEGORY_TITLES, Severity
from .reporting import ReportData, ReportFormat, generate_report, render_score_only
from .rules import RULE_CATALOG, parse_categories
from .scoring import calculate_score

logger = logging.getLogger(__name__)

COMMANDS = ("analyze", "init", "list-rules")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vibecheck",
        description="vibecheck - code quality analyzer for React components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  vibecheck src/
  vibecheck analyze src/ --format json
  vibecheck src/ --rules state-management,performance --fix
  vibecheck init
  vibecheck list-rules
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command", required=True)

    # analyze: run the rules over a file or directory
    p_analyze = sub.add_parser("analyze", help="Analyze a file or directory (default)")
    p_analyze.add_argument("path", nargs="?", default=".",
                           help="Path to analyze (default: current directory)")
    p_analyze.add_argument("-c", "--config", type=str, default=None,
                           help="Path to config file")
    p_analyze.add_argument("-f", "--format", type=str, default=ReportFormat.CONSOLE.value,
                           choices=[f.value for f in ReportFormat],
                           help="Output format (default: console)")
    p_analyze.add_argument("--rules", type=str, default=None,
                           help="Comma-separated list of rule categories to run")
    p_analyze.add_argument("--ignore-config", action="store_true",
                           help="Ignore config files and use defaults")
    p_analyze.add_argument("--score-only", action="store_true",
                           help="Only show the overall score")
    p_analyze.add_argument("--fix", action="store_true",
                           help="Show the suggested action for each suggestion")
    p_analyze.add_argument("--verbose", action="store_true",
                           help="Show detailed analysis information")
    p_analyze.add_argument("--log-file", type=str, default=None,
                           help="Also write JSON log records to this file")
    p_analyze.add_argument("--json-logs", action="store_true",
                           help="Emit log records on stderr as JSON lines")

    # init: write a default config file
    p_init = sub.add_parser("init", help=f"Create a {CONFIG_FILE_NAMES[0]} config file")
    p_init.add_argument("--path", type=str, default=CONFIG_FILE_NAMES[0],
                        help="Where to write the config file")

    # list-rules: describe every rule
    sub.add_parser("list-rules", help="List all available rules and their descriptions")

    return parser


def _with_default_command(argv: Sequence[str]) -> list[str]:
    """Insert ``analyze`` when no subcommand was given."""
    args = list(argv)
    if not args:
        return ["analyze"]
    if args[0] in COMMANDS or args[0] in ("-h", "--help", "--version"):
        return args
    return ["analyze", *args]


def cmd_analyze(args) -> int:
    """Analyze a path and print a report.

    Returns 1 when the path does not exist or an error-severity issue was
    found, 0 otherwise.
    """
    configure_logging(
        "DEBUG" if args.verbose else "WARNING",
        log_file=args.log_file,
        structured=args.json_logs,
    )

    try:
        categories = parse_categories(args.rules) if args.rules else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    target = Path(args.path)
    if not target.exists():
        print(f"Error: Path does not exist: {args.path}", file=sys.stderr)
        return 1

    logger.info(f"Running vibe check on {args.path} ({target.resolve()})")
    config = VibeCheckConfig() if args.ignore_config else load_config(args.config)
    analyzer = VibeCheckAnalyzer(config, categories=categories)

    start = time.perf_counter()
    try:
        results = analyzer.analyze_directory(target)
    except AnalysisPathNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    elapsed_ms = round((time.perf_counter() - start) * 1000)
    logger.info(f"Analysis completed in {elapsed_ms}ms")

    if not results:
        print("No React files found to analyze")
        return 0

    scores = calculate_score(results, len(results))
    if args.score_only:
        render_score_only(scores)
        return 0

    report = ReportData(
        results=results,
        scores=scores,
        config=config,
        analysis_time_ms=elapsed_ms,
        total_files=len(results),
        show_fix=args.fix,
    )
    generate_report(report, args.format)

    has_errors = any(
        issue.severity == Severity.ERROR for r in results for issue in r.issues
    )
    return 1 if has_errors else 0


def cmd_init(args) -> int:
    if not write_default_config(args.path):
        print(f"{args.path} already exists")
        return 0
    print(f"Created {args.path} configuration file")
    return 0


def cmd_list_rules(args) -> int:
    print("Available vibecheck rules:\n")
    for category, rules in RULE_CATALOG.items():
        print(f"{CATEGORY_TITLES[category]} ({category.value})")
        for name, description in rules.items():
            print(f"  - {name:<20} {description}")
        print()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(_with_default_command(sys.argv[1:] if argv is None else argv))

    handlers = {
        "analyze": cmd_analyze,
        "init": cmd_init,
        "list-rules": cmd_list_rules,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
