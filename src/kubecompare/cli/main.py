#!/usr/bin/env python3
"""
KUBECOMPARE CLI
---------------
Compares two multi-document manifest files (e.g. two kustomize builds) and
prints, per resource, whether it changed, appeared or disappeared.

    kubecompare old.yaml new.yaml

Exit status is 1 when an input file is missing or unreadable and 0 once the
report has been printed, whether or not differences were found.

Author: KubeCompare Team
Date: 2026-10-19
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console

from kubecompare.cli.formatter import ReportFormatter
from kubecompare.core.engine import CompareEngine
from kubecompare.core.errors import InputAccessError

VERSION = "kubecompare v1.0.0"


@dataclass
class CompareOptions:
    """Run options collected from the command line."""
    left_path: str
    right_path: str
    color: bool = True
    summary: bool = False
    verbose: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1, like missing files."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class KubeCompareCLI:
    """
    CLI wrapper that translates user arguments into an engine run and
    hands the report to the formatter.
    """

    def __init__(self):
        self.parser = _ArgumentParser(
            prog="kubecompare",
            description="KubeCompare - Per-resource diff of two Kubernetes manifest streams",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=VERSION)
        self.parser.add_argument("left", metavar="fileA", help="Old manifest stream")
        self.parser.add_argument("right", metavar="fileB", help="New manifest stream")
        self.parser.add_argument("--no-color", action="store_true", help="Disable colored output")
        self.parser.add_argument("--summary", action="store_true", help="Print a per-outcome summary table")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")

    def parse(self, argv: Optional[List[str]] = None) -> CompareOptions:
        args = self.parser.parse_args(argv)
        return CompareOptions(
            left_path=args.left,
            right_path=args.right,
            color=not args.no_color,
            summary=args.summary,
            verbose=args.verbose,
        )

    def build_console(self, options: CompareOptions, stderr: bool = False) -> Console:
        """
        Colour is decided by --no-color alone (NO_COLOR in the environment is
        ignored); rich still drops styling when the stream is not a terminal.
        """
        return Console(stderr=stderr, no_color=not options.color, soft_wrap=True)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit status."""
        options = self.parse(argv)

        logging.basicConfig(
            level=logging.DEBUG if options.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        out = ReportFormatter(self.build_console(options))
        err = ReportFormatter(self.build_console(options, stderr=True))

        engine = CompareEngine()
        try:
            report = engine.compare_files(options.left_path, options.right_path)
        except InputAccessError as e:
            for message in e.messages:
                err.print_error(message)
            return 1

        out.render(report, options.left_path, options.right_path)
        if options.summary:
            out.print_summary(engine.generate_summary(report))
        return 0


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        status = KubeCompareCLI().run(argv)
    except KeyboardInterrupt:
        Console(stderr=True).print("\n[bold red]Terminated by user.[/bold red]")
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
