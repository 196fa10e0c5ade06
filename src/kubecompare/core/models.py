#!/usr/bin/env python3
"""
KUBECOMPARE CORE MODELS
-----------------------
Defines the fundamental data structures shared by the decoder, the matcher
and the differ. These models represent one manifest and the outcome of
reconciling two streams of them.

Author: KubeCompare Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from kubecompare.core.values import GenericValue


@dataclass(frozen=True)
class ManifestIdentity:
    """
    The (kind, name, namespace) key used to pair manifests across streams.
    Namespace is empty for cluster-scoped resources. Equality is exact.
    """
    kind: str
    name: str
    namespace: str = ""

    def __str__(self) -> str:
        return f"{self.kind}: {self.name} ({self.namespace})"


@dataclass(frozen=True)
class ManifestRecord:
    """
    One successfully decoded manifest segment.
    """
    identity: ManifestIdentity
    value: GenericValue      # The fully generic tree used for diffing
    raw: str = ""            # The original segment text
    index: int = 0           # Position of the segment within its stream


# --- Reconciliation entries ---

@dataclass(frozen=True)
class Matched:
    identity: ManifestIdentity
    left: ManifestRecord
    right: ManifestRecord


@dataclass(frozen=True)
class AddedOnRight:
    identity: ManifestIdentity
    record: ManifestRecord


@dataclass(frozen=True)
class RemovedOnLeft:
    identity: ManifestIdentity
    record: ManifestRecord


ReconciliationEntry = Union[Matched, AddedOnRight, RemovedOnLeft]
ReconciliationResult = List[ReconciliationEntry]


# --- Diff output ---

class LineKind(Enum):
    ADDED = "+"
    REMOVED = "-"


@dataclass(frozen=True)
class DiffLine:
    kind: LineKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value}{self.text}"


@dataclass
class DiffResult:
    """Signed lines for one matched pair. Empty means equivalent."""
    lines: List[DiffLine] = field(default_factory=list)

    @property
    def equivalent(self) -> bool:
        return not self.lines

    @property
    def added(self) -> List[DiffLine]:
        return [l for l in self.lines if l.kind is LineKind.ADDED]

    @property
    def removed(self) -> List[DiffLine]:
        return [l for l in self.lines if l.kind is LineKind.REMOVED]


# --- Report ---

class Outcome(Enum):
    CHANGED = "CHANGED"
    UNCHANGED = "UNCHANGED"
    ADDED = "ADDED"
    REMOVED = "REMOVED"


@dataclass
class ReportEntry:
    """
    A reconciliation entry paired with its diff (matched entries only).
    """
    entry: ReconciliationEntry
    diff: Optional[DiffResult] = None

    @property
    def identity(self) -> ManifestIdentity:
        return self.entry.identity

    @property
    def outcome(self) -> Outcome:
        if isinstance(self.entry, AddedOnRight):
            return Outcome.ADDED
        if isinstance(self.entry, RemovedOnLeft):
            return Outcome.REMOVED
        return Outcome.UNCHANGED if self.diff.equivalent else Outcome.CHANGED


@dataclass
class ComparisonReport:
    """The full result of comparing a left (old) and right (new) stream."""
    entries: List[ReportEntry] = field(default_factory=list)
    dropped_left: int = 0
    dropped_right: int = 0

    def count(self, outcome: Outcome) -> int:
        return sum(1 for e in self.entries if e.outcome is outcome)

    @property
    def matched(self) -> int:
        return self.count(Outcome.CHANGED) + self.count(Outcome.UNCHANGED)

    @property
    def has_differences(self) -> bool:
        return any(e.outcome is not Outcome.UNCHANGED for e in self.entries)
