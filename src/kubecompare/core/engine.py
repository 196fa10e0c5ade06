#!/usr/bin/env python3
"""
KUBECOMPARE ENGINE - The Orchestrator
-------------------------------------
The CompareEngine runs one comparison end-to-end:

1. Split & decode both streams (malformed segments are dropped)
2. Reconcile records by identity (right stream is primary)
3. Diff every matched pair
4. Assemble the ComparisonReport

The engine has no presentation dependency; rendering belongs to the CLI.

Author: KubeCompare Team
Date: 2026-10-19
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from kubecompare.core.errors import InputAccessError
from kubecompare.core.models import ComparisonReport, Matched, Outcome, ReportEntry
from kubecompare.diffing.differ import compare_values
from kubecompare.matching.matcher import reconcile
from kubecompare.parsing.decoder import ManifestDecoder

logger = logging.getLogger("kubecompare.engine")

PathLike = Union[str, Path]


def check_files(*paths: PathLike) -> List[str]:
    """Returns one message per path that does not exist."""
    return [f"cannot find file: {p}" for p in paths if not Path(p).exists()]


def read_inputs(*paths: PathLike) -> List[str]:
    """
    Reads every input as text (BOM-aware). Missing files are reported
    together; the first unreadable file aborts.
    """
    missing = check_files(*paths)
    if missing:
        raise InputAccessError(missing)

    contents = []
    for p in paths:
        try:
            contents.append(Path(p).read_text(encoding='utf-8-sig'))
        except (OSError, UnicodeDecodeError) as e:
            raise InputAccessError([f"cannot read file: {p} ({e})"]) from e
    return contents


class CompareEngine:
    """
    Stateless between runs: each compare() builds fresh records, so one
    engine can serve any number of comparisons.
    """

    def __init__(self):
        self.decoder = ManifestDecoder()

    def compare(self, left_text: str, right_text: str) -> ComparisonReport:
        """Compares two manifest streams; left is old, right is new."""
        left = self.decoder.decode_stream(left_text)
        dropped_left = self.decoder.dropped
        right = self.decoder.decode_stream(right_text)
        dropped_right = self.decoder.dropped

        entries = []
        for entry in reconcile(left, right):
            if isinstance(entry, Matched):
                entries.append(ReportEntry(entry, diff=compare_values(entry.left.value, entry.right.value)))
            else:
                entries.append(ReportEntry(entry))

        report = ComparisonReport(
            entries=entries,
            dropped_left=dropped_left,
            dropped_right=dropped_right,
        )
        logger.info(
            f"Compared {len(left)} left / {len(right)} right manifests: "
            f"{report.matched} matched, {report.count(Outcome.ADDED)} added, "
            f"{report.count(Outcome.REMOVED)} removed"
        )
        return report

    def compare_files(self, left_path: PathLike, right_path: PathLike) -> ComparisonReport:
        """Reads both files then compares them. Raises InputAccessError."""
        left_text, right_text = read_inputs(left_path, right_path)
        return self.compare(left_text, right_text)

    def generate_summary(self, report: ComparisonReport) -> Dict[str, Any]:
        """Per-outcome counts for the summary table."""
        return {
            "total_manifests": len(report.entries),
            "changed": report.count(Outcome.CHANGED),
            "unchanged": report.count(Outcome.UNCHANGED),
            "added": report.count(Outcome.ADDED),
            "removed": report.count(Outcome.REMOVED),
            "dropped_left": report.dropped_left,
            "dropped_right": report.dropped_right,
        }
