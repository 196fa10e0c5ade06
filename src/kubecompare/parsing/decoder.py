#!/usr/bin/env python3
"""
KUBECOMPARE DECODER - Segment to Record
---------------------------------------
Turns one raw manifest segment into a ManifestRecord: the identity used by
the matcher plus the generic tree used by the differ.

Decoding is tolerant. A segment that is blank, fails to parse, or does not
look like a resource is dropped (the decoder returns None) instead of
aborting the whole comparison.

Author: KubeCompare Team
Date: 2026-10-19
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ruamel.yaml import YAML, YAMLError

from kubecompare.core.errors import KeyCollisionError
from kubecompare.core.models import ManifestRecord
from kubecompare.core.values import to_generic
from kubecompare.matching.identity import extract_identity
from kubecompare.parsing.splitter import split_manifests

logger = logging.getLogger("kubecompare.decoder")


class ManifestDecoder:
    """
    Wraps a safe ruamel.yaml loader. One decoder can be reused for
    several streams; `dropped` reflects the last decode_stream() call.

    A second, resolution-free ('base') loader reads the identity fields
    as their source text, so `name: true` stays "true".
    """

    IDENTITY_PATHS = (("kind",), ("metadata", "name"), ("metadata", "namespace"))
    # Fields a resource carries as maps; any other shape is not a manifest
    MAPPING_PATHS = (("spec",), ("metadata", "labels"), ("metadata", "annotations"))

    def __init__(self):
        self.yaml = YAML(typ='safe', pure=True)
        self.text_yaml = YAML(typ='base', pure=True)
        self.dropped = 0

    def decode(self, segment: str, index: int = 0) -> Optional[ManifestRecord]:
        """Decodes one segment, or returns None if it must be skipped."""
        if not segment.strip():
            return None

        try:
            doc = self.yaml.load(segment)
        except YAMLError as e:
            logger.debug(f"Segment {index}: YAML error, skipping ({e.__class__.__name__})")
            return None

        reason = self._reject_reason(doc)
        if reason:
            logger.debug(f"Segment {index}: {reason}, skipping")
            return None

        try:
            value = to_generic(doc)
        except KeyCollisionError as e:
            logger.debug(f"Segment {index}: {e}, skipping")
            return None

        return ManifestRecord(
            identity=extract_identity(doc, self._load_source(segment, index)),
            value=value,
            raw=segment,
            index=index,
        )

    def decode_stream(self, text: str) -> List[ManifestRecord]:
        """Splits and decodes a whole stream, keeping stream order."""
        records = []
        self.dropped = 0
        for index, segment in enumerate(split_manifests(text)):
            record = self.decode(segment, index)
            if record is None:
                # Blank segments (leading '---', trailing newline) are not failures
                if segment.strip():
                    self.dropped += 1
                continue
            records.append(record)
        return records

    def _load_source(self, segment: str, index: int) -> Optional[Dict[str, Any]]:
        """The segment with every scalar left as text, or None."""
        try:
            source = self.text_yaml.load(segment)
        except YAMLError as e:
            logger.debug(f"Segment {index}: no source text for identity ({e.__class__.__name__})")
            return None
        return source if isinstance(source, dict) else None

    def _reject_reason(self, doc: Any) -> str:
        """Returns a non-empty reason if the document can't be a manifest."""
        if doc is None:
            return "empty document"
        if not isinstance(doc, dict):
            return f"document is a {type(doc).__name__}, not a mapping"

        metadata = doc.get("metadata")
        if metadata is not None and not isinstance(metadata, dict):
            return "metadata is not a mapping"

        for path in self.IDENTITY_PATHS:
            if isinstance(self._lookup(doc, path), (dict, list)):
                return f"'{'.'.join(path)}' is not a scalar"

        for path in self.MAPPING_PATHS:
            node = self._lookup(doc, path)
            if node is not None and not isinstance(node, dict):
                return f"'{'.'.join(path)}' is not a mapping"
        return ""

    @staticmethod
    def _lookup(doc: Any, path: Tuple[str, ...]) -> Any:
        node = doc
        for key in path:
            node = node.get(key) if isinstance(node, dict) else None
        return node
