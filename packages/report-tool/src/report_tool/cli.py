import argparse
import logging
import sys

from tree_builder.errors import ReportError

from report_tool.config import Settings
from report_tool.report import generate_report

logger = logging.getLogger(__name__)


class UsageError(ReportError):
    """The command line was called with the wrong arguments."""


USAGE = "Usage: figtree-report <full_path_to_results_directory>"


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse *argv*, raising UsageError unless exactly one path is given."""
    parser = argparse.ArgumentParser(
        prog="figtree-report",
        description="Generate a LaTeX validation report from a tree of images.",
    )
    parser.add_argument("paths", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(argv)
    if len(args.paths) != 1:
        raise UsageError(f"Expected 1 argument found {len(args.paths)}")
    args.directory = args.paths[0]
    return args


def start_cli(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        directory = parse_args(args).directory
    except UsageError as e:
        print(USAGE, file=sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        result = generate_report(directory, settings)
    except (ReportError, OSError) as e:
        logger.error("report generation failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(
        f"Report written to {result.report} "
        f"({result.sections} sections, index {result.index})"
    )
    return 0


def main() -> None:
    sys.exit(start_cli())


if __name__ == "__main__":
    main()
