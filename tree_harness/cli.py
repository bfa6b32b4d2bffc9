"""CLI entry point for running a registered test suite."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from tree_harness.config import RunSettings
from tree_harness.failure_log import Sink
from tree_harness.loading import SuiteLoadError, load_suite_factory
from tree_harness.models.summary import RunSummary

EXIT_SUCCESS = 0
EXIT_FAILURES = 1
EXIT_USAGE = 2


def format_summary(summary: RunSummary) -> str:
    """Human readable one-line result of a run."""
    if summary.succeeded:
        return "Success."
    return f"There were {summary.error_count} errors"


def run(settings: RunSettings, report_sink: Sink | None = None) -> int:
    """Build, run and report the configured suite; return the exit code.

    The failure report goes to ``report_sink`` (stderr by default), the
    summary to stdout.
    """
    log = logging.getLogger("tree_harness")

    log.info("Loading suite: %s", settings.suite)
    try:
        build_suite = load_suite_factory(settings.suite)
    except SuiteLoadError as e:
        log.error("%s", e)
        return EXIT_USAGE

    root = build_suite()
    log.info("Running suite %s", root.name)
    root.run()

    summary = RunSummary.from_node(root)
    log.info("Suite %s finished with %d error(s)", root.name, summary.error_count)

    root.report(report_sink if report_sink is not None else sys.stderr)

    if settings.output_format == "json":
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(format_summary(summary))

    return EXIT_SUCCESS if summary.succeeded else EXIT_FAILURES


def parse_settings(argv: Sequence[str] | None = None) -> RunSettings:
    """Parse command line arguments into validated settings."""
    parser = argparse.ArgumentParser(description="Run a hierarchical test suite")
    parser.add_argument(
        "--suite",
        default="selftest",
        help="Suite key registered under the tree_harness.suites entry points",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "json"),
        default="text",
        help="Summary format printed on stdout",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level for harness messages on stderr",
    )

    args = parser.parse_args(argv)

    try:
        return RunSettings(
            suite=args.suite,
            output_format=args.output_format,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))


def main() -> None:
    """CLI entry point."""
    settings = parse_settings()

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(settings))


if __name__ == "__main__":  # pragma: no cover
    main()
