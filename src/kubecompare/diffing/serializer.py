#!/usr/bin/env python3
"""
KUBECOMPARE SERIALIZER - Canonical Text Form
--------------------------------------------
Renders a GenericValue as indented text, one line per scalar entry, with
mapping keys in sorted order. Two trees that differ only by key order
serialize identically; sequence order is kept as-is.

Example:
    {
      metadata: {
        name: "web",
      },
      spec: {
        ports: [
          80,
        ],
      },
    }

Author: KubeCompare Team
Date: 2026-10-19
"""

import json
from typing import List

from kubecompare.core.values import (
    Bool,
    GenericValue,
    Mapping,
    Null,
    Number,
    Sequence,
    String,
)

INDENT = "  "


def render_scalar(value: GenericValue) -> str:
    """Strings are JSON-quoted so "1" and 1 never collide."""
    if isinstance(value, Null):
        return "null"
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Number):
        return repr(value.value)
    if isinstance(value, String):
        return json.dumps(value.value, ensure_ascii=False)
    raise TypeError(f"Not a scalar GenericValue: {value!r}")


def _render(value: GenericValue, depth: int, prefix: str, suffix: str) -> List[str]:
    pad = INDENT * depth

    if isinstance(value, Mapping):
        if not value.entries:
            return [f"{pad}{prefix}{{}}{suffix}"]
        lines = [f"{pad}{prefix}{{"]
        for key in sorted(value.entries):
            lines.extend(_render(value.entries[key], depth + 1, f"{key}: ", ","))
        lines.append(f"{pad}}}{suffix}")
        return lines

    if isinstance(value, Sequence):
        if not value.items:
            return [f"{pad}{prefix}[]{suffix}"]
        lines = [f"{pad}{prefix}["]
        for item in value.items:
            lines.extend(_render(item, depth + 1, "", ","))
        lines.append(f"{pad}]{suffix}")
        return lines

    return [f"{pad}{prefix}{render_scalar(value)}{suffix}"]


def serialize(value: GenericValue) -> List[str]:
    """Returns the canonical lines of a tree (no trailing newlines)."""
    return _render(value, 0, "", "")
