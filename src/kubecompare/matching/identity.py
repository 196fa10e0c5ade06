#!/usr/bin/env python3
"""
KUBECOMPARE IDENTITY - The Name Tag
-----------------------------------
Extracts the (kind, name, namespace) key from a decoded manifest.

Identity components keep the scalar's source text: `name: true` is the
name "true" and `name: 0x10` is "0x10", exactly as a quoted value would be.

Author: KubeCompare Team
Date: 2026-10-19
"""

from typing import Any, Dict, Optional, Tuple

from kubecompare.core.models import ManifestIdentity

KIND_PATH = ("kind",)
NAME_PATH = ("metadata", "name")
NAMESPACE_PATH = ("metadata", "namespace")


def _lookup(doc: Any, path: Tuple[str, ...]) -> Any:
    node = doc
    for key in path:
        node = node.get(key) if isinstance(node, dict) else None
    return node


def _clean_id(value: Any, text: Any = None) -> str:
    """Missing or null identity fields collapse to an empty string."""
    if value is None:
        return ""
    if isinstance(text, str):
        return text
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def extract_identity(doc: Dict[str, Any], source: Optional[Dict[str, Any]] = None) -> ManifestIdentity:
    """
    Total over any decoded mapping: absent fields never raise, they
    just produce empty identity components.

    `source` is the same document loaded without scalar resolution (every
    scalar a string); when given, identity text is taken from it.
    """
    return ManifestIdentity(
        kind=_clean_id(_lookup(doc, KIND_PATH), _lookup(source, KIND_PATH)),
        name=_clean_id(_lookup(doc, NAME_PATH), _lookup(source, NAME_PATH)),
        namespace=_clean_id(_lookup(doc, NAMESPACE_PATH), _lookup(source, NAMESPACE_PATH)),
    )
