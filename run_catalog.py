#!/usr/bin/env python3
"""
C# errors and warnings catalog generator.

Fetches the Roslyn ErrorCode enum, the GetWarningLevel switch, the compiler
resource strings and (optionally) the compiler-message documentation, joins
them, and writes a markdown table or a JSON array.

Usage:
    python run_catalog.py
    python run_catalog.py --link --details --output errors.md
    python run_catalog.py --json --output errors.json
"""

import argparse
import io
import logging
import sys
import time
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class _CatalogArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    from fetching import config

    parser = _CatalogArgumentParser(
        description="C# errors and warnings list generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_catalog.py --link --output errors.md\n"
            "  python run_catalog.py --json --details --output errors.json\n"
        ),
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output to the specified file (default: output to the console)."
    )
    parser.add_argument(
        "-l", "--link",
        dest="include_links",
        action="store_true",
        default=config.INCLUDE_LINKS,
        help="Include links to documentation when they exist."
    )
    parser.add_argument(
        "-d", "--details",
        dest="include_details",
        action="store_true",
        default=config.INCLUDE_DETAILS,
        help="Gather documentation in markdown format."
    )
    parser.add_argument(
        "-j", "--json",
        dest="json_output",
        action="store_true",
        default=False,
        help="Write output in JSON format."
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=config.MAX_WORKERS,
        help=f"Maximum concurrent HTTP requests. Default: {config.MAX_WORKERS}"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr). Default: INFO"
    )
    parser.add_argument(
        "--run-report-dir",
        default=None,
        help="If set, write a JSON run summary into this directory."
    )

    args = parser.parse_args(argv)
    if args.max_workers < 1:
        parser.error("--max-workers must be at least 1")
    return args


def render_report(entries, json_output: bool, include_details: bool) -> str:
    """Render the finished catalog to a string."""
    from reporting import OutputFormat, create_writer

    writer = create_writer(
        OutputFormat.JSON if json_output else OutputFormat.MARKDOWN,
        include_details=include_details,
    )
    buffer = io.StringIO()
    writer.write(entries, buffer)
    return buffer.getvalue()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    from catalog import CatalogOptions, generate_catalog, severity_counts
    from core import (
        CatalogError,
        RunSummary,
        configure_structured_logging,
        phase_scope,
        set_run_id,
        write_run_report,
    )
    from fetching import SourceTextFetcher

    args = parse_args(argv)
    configure_structured_logging(getattr(logging, args.log_level))
    run_id = set_run_id()

    options = CatalogOptions(
        include_links=args.include_links,
        include_details=args.include_details,
        max_workers=args.max_workers,
    )

    t0 = time.time()
    try:
        with SourceTextFetcher(pool_size=options.max_workers) as fetcher:
            entries = generate_catalog(fetcher, options)

        with phase_scope("report"):
            report = render_report(entries, args.json_output, args.include_details)
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(report)
                logger.info("Report written to %s", args.output)
            else:
                sys.stdout.write(report)
                sys.stdout.flush()

            if args.run_report_dir:
                summary = RunSummary(
                    run_id=run_id,
                    options={
                        "include_links": args.include_links,
                        "include_details": args.include_details,
                        "json_output": args.json_output,
                        "max_workers": args.max_workers,
                    },
                    severity_counts={
                        str(severity): count
                        for severity, count in severity_counts(entries).items()
                    },
                    total_entries=len(entries),
                    elapsed_seconds=round(time.time() - t0, 3),
                )
                path = write_run_report(summary, args.run_report_dir)
                logger.info("Run summary written to %s", path)

    except CatalogError as e:
        logger.error("Catalog generation failed: %s", e)
        return 1
    except OSError as e:
        logger.error("Output error: %s", e)
        return 1
    except Exception as e:
        logger.error("Catalog generation failed: %s", e, exc_info=True)
        return 1

    return 0


def console_main() -> None:
    sys.exit(main())


if __name__ == "__main__":
    console_main()
