#!/usr/bin/env python3
"""
KUBECOMPARE GENERIC VALUES
--------------------------
The universal representation of a decoded YAML document. Both sides of a
diff are reduced to these variants before they are serialized and compared.

Each variant is a frozen dataclass, so structural equality comes for free:
Mapping compares its entries regardless of insertion order, Sequence compares
element by element.

Author: KubeCompare Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from kubecompare.core.errors import KeyCollisionError


@dataclass(frozen=True)
class Null:
    """YAML `null`, `~` or an empty value."""


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Mapping:
    """
    Key/value node. Keys are unique strings; entry order is irrelevant
    for equality (a dict compares order-independently).
    """
    entries: Dict[str, "GenericValue"] = field(default_factory=dict)

    def __hash__(self):
        return hash(frozenset(self.entries.items()))


@dataclass(frozen=True)
class Sequence:
    """Ordered list node. Compared positionally, never as a set."""
    items: Tuple["GenericValue", ...] = ()


GenericValue = Union[Null, Bool, Number, String, Mapping, Sequence]


def to_generic(obj: Any) -> GenericValue:
    """
    Converts plain loader output (dicts, lists, scalars) into GenericValue.

    bool is checked before int because bool subclasses int in Python.
    Scalars the YAML loader may produce beyond the core types (dates,
    timestamps, binary blobs) are kept as their string form.

    Raises KeyCollisionError when two keys of one mapping stringify
    identically.
    """
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, dict):
        entries = {}
        for k, v in obj.items():
            key = str(k)
            if key in entries:
                raise KeyCollisionError(f"Mapping key {key!r} appears twice after stringification")
            entries[key] = to_generic(v)
        return Mapping(entries)
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(to_generic(item) for item in obj))
    return String(str(obj))
