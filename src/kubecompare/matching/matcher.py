#!/usr/bin/env python3
"""
KUBECOMPARE MATCHER - Reconciliation
------------------------------------
Pairs manifests of the old (left) stream with those of the new (right)
stream by identity.

The right stream is primary: pass 1 walks it and reports a match or an
addition for every entry; pass 2 walks the left stream and only reports
what vanished. When identities repeat inside one stream the first
occurrence wins.

Author: KubeCompare Team
Date: 2026-10-19
"""

from typing import List, Optional

from kubecompare.core.models import (
    AddedOnRight,
    ManifestRecord,
    Matched,
    ReconciliationResult,
    RemovedOnLeft,
)


def _first_match(record: ManifestRecord, candidates: List[ManifestRecord]) -> Optional[ManifestRecord]:
    for candidate in candidates:
        if candidate.identity == record.identity:
            return candidate
    return None


def reconcile(left: List[ManifestRecord], right: List[ManifestRecord]) -> ReconciliationResult:
    """
    Returns pass-1 entries (Matched / AddedOnRight, in right order)
    followed by pass-2 entries (RemovedOnLeft, in left order).
    """
    result: ReconciliationResult = []

    # Pass 1: right-driven
    for record in right:
        counterpart = _first_match(record, left)
        if counterpart is not None:
            result.append(Matched(record.identity, left=counterpart, right=record))
        else:
            result.append(AddedOnRight(record.identity, record=record))

    # Pass 2: left-only leftovers
    for record in left:
        if _first_match(record, right) is None:
            result.append(RemovedOnLeft(record.identity, record=record))

    return result
