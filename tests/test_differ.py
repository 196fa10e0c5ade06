#!/usr/bin/env python3
"""
KUBECOMPARE DIFFER SUITE
------------------------
Covers the generic value model, the canonical serializer and the
serialize-then-line-diff comparison.

Author: KubeCompare Team
Date: 2026-10-19
"""

import pytest

from kubecompare.core.errors import KeyCollisionError
from kubecompare.core.models import LineKind
from kubecompare.core.values import Bool, Mapping, Null, Number, Sequence, String, to_generic
from kubecompare.diffing.differ import compare_values, diff, is_equivalent
from kubecompare.diffing.serializer import render_scalar, serialize

DEPLOYMENT = {
    "apiVersion": "apps/v1",
    "kind": "Deployment",
    "metadata": {"name": "web", "namespace": "prod", "labels": {"app": "web"}},
    "spec": {
        "replicas": 3,
        "paused": False,
        "revisionHistoryLimit": None,
        "template": {
            "spec": {
                "containers": [
                    {"name": "web", "image": "nginx:1.25", "ports": [{"containerPort": 80}]},
                    {"name": "sidecar", "image": "envoy", "args": []},
                ]
            }
        },
    },
}


def test_to_generic_variants():
    assert to_generic(None) == Null()
    assert to_generic(True) == Bool(True)
    assert to_generic(7) == Number(7)
    assert to_generic(1.5) == Number(1.5)
    assert to_generic("x") == String("x")
    assert to_generic([1, "a"]) == Sequence((Number(1), String("a")))
    assert to_generic({"a": None}) == Mapping({"a": Null()})


def test_bool_is_not_a_number():
    """bool subclasses int; the variant must still be Bool."""
    assert isinstance(to_generic(False), Bool)
    assert to_generic(True) != Number(1)


def test_unknown_scalars_become_strings():
    import datetime
    assert to_generic(datetime.date(2024, 1, 2)) == String("2024-01-02")


def test_mapping_equality_ignores_order():
    assert to_generic({"a": 1, "b": 2}) == to_generic({"b": 2, "a": 1})
    assert to_generic([1, 2]) != to_generic([2, 1])


def test_render_scalar():
    assert render_scalar(Null()) == "null"
    assert render_scalar(Bool(True)) == "true"
    assert render_scalar(Bool(False)) == "false"
    assert render_scalar(Number(42)) == "42"
    assert render_scalar(String("nginx")) == '"nginx"'
    assert render_scalar(String("a\nb")) == '"a\\nb"'


def test_render_scalar_rejects_containers():
    with pytest.raises(TypeError):
        render_scalar(Mapping({}))


def test_serialize_sorts_keys_and_indents():
    value = to_generic({"spec": {"ports": [80]}, "metadata": {"name": "web"}})
    assert serialize(value) == [
        "{",
        "  metadata: {",
        '    name: "web",',
        "  },",
        "  spec: {",
        "    ports: [",
        "      80,",
        "    ],",
        "  },",
        "}",
    ]


def test_serialize_empty_containers():
    assert serialize(to_generic({})) == ["{}"]
    assert serialize(to_generic([])) == ["[]"]
    assert serialize(to_generic({"args": [], "env": {}})) == ["{", "  args: [],", "  env: {},", "}"]


def test_serialize_scalar_root():
    assert serialize(to_generic("plain")) == ['"plain"']


@pytest.mark.parametrize("raw", [
    DEPLOYMENT,
    {},
    [],
    None,
    "scalar",
    [[1, [2, {"a": [3]}]]],
])
def test_diff_identity_law(raw):
    """
    REFLEXIVITY TEST: a tree compared with itself yields no lines.
    """
    value = to_generic(raw)
    assert diff(value, value) == []
    assert is_equivalent(diff(value, value))


def test_diff_ignores_key_order():
    assert diff(to_generic({"a": 1, "b": 2}), to_generic({"b": 2, "a": 1})) == []


def test_diff_key_order_deep():
    reordered = {
        "spec": DEPLOYMENT["spec"],
        "metadata": {"labels": {"app": "web"}, "namespace": "prod", "name": "web"},
        "kind": "Deployment",
        "apiVersion": "apps/v1",
    }
    assert diff(to_generic(DEPLOYMENT), to_generic(reordered)) == []


def test_diff_sequence_order_matters():
    assert diff(to_generic([1, 2, 3]), to_generic([3, 2, 1])) != []


def test_diff_scalar_change():
    """
    SCENARIO: replicas 1 -> 2 shows exactly one removed and one added line.
    """
    left = to_generic({"kind": "Pod", "metadata": {"name": "a"}, "spec": {"replicas": 1}})
    right = to_generic({"kind": "Pod", "metadata": {"name": "a"}, "spec": {"replicas": 2}})

    lines = diff(left, right)

    assert [(l.kind, l.text) for l in lines] == [
        (LineKind.REMOVED, "    replicas: 1,"),
        (LineKind.ADDED, "    replicas: 2,"),
    ]


def test_diff_added_key_only_adds():
    lines = diff(to_generic({"a": 1}), to_generic({"a": 1, "b": 2}))
    assert [(l.kind, l.text) for l in lines] == [(LineKind.ADDED, "  b: 2,")]


def test_diff_removed_key_only_removes():
    lines = diff(to_generic({"a": 1, "b": 2}), to_generic({"a": 1}))
    assert [(l.kind, l.text) for l in lines] == [(LineKind.REMOVED, "  b: 2,")]


def test_diff_type_change_is_detected():
    """A quoted "1" and the number 1 are different values."""
    assert diff(to_generic({"port": "80"}), to_generic({"port": 80})) != []


def test_diff_null_vs_missing():
    assert diff(to_generic({"a": None}), to_generic({})) != []


def test_diff_nested_container_change():
    left = dict(DEPLOYMENT, spec=dict(DEPLOYMENT["spec"], replicas=3))
    right = dict(DEPLOYMENT, spec=dict(DEPLOYMENT["spec"], replicas=5))
    lines = diff(to_generic(left), to_generic(right))
    assert [l.text.strip() for l in lines] == ["replicas: 3,", "replicas: 5,"]


def test_replace_lists_removed_before_added():
    lines = diff(to_generic({"image": "a", "tag": "x"}), to_generic({"image": "b", "tag": "y"}))
    kinds = [l.kind for l in lines]
    assert kinds == [LineKind.REMOVED, LineKind.REMOVED, LineKind.ADDED, LineKind.ADDED]


def test_diff_line_str_is_signed():
    line = diff(to_generic({"a": 1}), to_generic({"a": 2}))[0]
    assert str(line) == "-  a: 1,"


def test_compare_values_result():
    result = compare_values(to_generic({"a": 1}), to_generic({"a": 2}))
    assert not result.equivalent
    assert len(result.added) == 1
    assert len(result.removed) == 1
    assert compare_values(to_generic({"a": 1}), to_generic({"a": 1})).equivalent


def test_to_generic_rejects_colliding_keys():
    """Keys 1 and "1" cannot share one string-keyed mapping."""
    with pytest.raises(KeyCollisionError):
        to_generic({"data": {"1": "old", 1: "same"}})
