#!/usr/bin/env python3
"""
KUBECOMPARE DIFFER - Structural Comparison
------------------------------------------
Compares two GenericValue trees by serializing both canonically and
line-diffing the results. Only lines that exist on one side are reported;
shared lines are dropped. An empty result means the trees are equivalent.

A changed parent may show up as a removed block followed by an added block
instead of a single pinpoint edit. Key reordering never produces output
because keys are sorted during serialization.

Author: KubeCompare Team
Date: 2026-10-19
"""

import difflib
from typing import List

from kubecompare.core.models import DiffLine, DiffResult, LineKind
from kubecompare.core.values import GenericValue
from kubecompare.diffing.serializer import serialize


def diff(left: GenericValue, right: GenericValue) -> List[DiffLine]:
    """
    Signed lines in serialization order. For a replaced span the removed
    lines come before the added ones.
    """
    a = serialize(left)
    b = serialize(right)

    # autojunk off: closing braces repeat far too often in large manifests
    matcher = difflib.SequenceMatcher(None, a, b, autojunk=False)

    lines: List[DiffLine] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        if tag in ("delete", "replace"):
            lines.extend(DiffLine(LineKind.REMOVED, text) for text in a[i1:i2])
        if tag in ("insert", "replace"):
            lines.extend(DiffLine(LineKind.ADDED, text) for text in b[j1:j2])
    return lines


def is_equivalent(lines: List[DiffLine]) -> bool:
    return not lines


def compare_values(left: GenericValue, right: GenericValue) -> DiffResult:
    """diff() wrapped in a DiffResult for the report layer."""
    return DiffResult(lines=diff(left, right))
