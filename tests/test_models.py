"""Tests for the hierarchy model, bundled taxonomy and taxonomy JSON files."""
import json
import pytest

from rueda.core.emotions import build_emotion_tree
from rueda.core.models import Node, validate_wheel_hierarchy
from rueda.core.serialization import load_taxonomy, save_taxonomy, taxonomy_from_dict
from rueda.utils.errors import (
    MalformedHierarchyError, RuedaIOError, RuedaSchemaError, RuedaValidationError,
)


# --- Node ---

def test_nodes_at_depth_keeps_left_to_right_order(make_tree):
    root = make_tree({"A": {"a1": ["x", "y"], "a2": ["z"]}, "B": {"b1": ["w"]}})
    assert [n.name for n in root.nodes_at_depth(0)] == ["root"]
    assert [n.name for n in root.nodes_at_depth(1)] == ["A", "B"]
    assert [n.name for n in root.nodes_at_depth(2)] == ["a1", "a2", "b1"]
    assert [n.name for n in root.nodes_at_depth(3)] == ["x", "y", "z", "w"]
    assert root.nodes_at_depth(4) == []


def test_nodes_at_negative_depth_raises():
    with pytest.raises(ValueError):
        Node("root").nodes_at_depth(-1)


def test_node_dict_shape():
    n = Node("A", (Node("a", (Node("x"),)),))
    assert n.to_dict() == {"name": "A", "children": [{"name": "a", "children": [{"name": "x"}]}]}
    assert Node.from_dict(n.to_dict()) == n


@pytest.mark.parametrize("raw,match", [
    ([], "se esperaba objeto"),
    ({"children": []}, "falta 'name'"),
    ({"name": "  "}, "falta 'name'"),
    ({"name": "A", "children": {"name": "a"}}, "children inválido"),
    ({"name": "A", "children": [{"name": "a"}, 3]}, "A\\[1\\]"),
])
def test_node_from_dict_errors(raw, match):
    with pytest.raises(RuedaSchemaError, match=match):
        Node.from_dict(raw)


def test_validate_accepts_three_levels(two_by_two):
    validate_wheel_hierarchy(two_by_two)


def test_malformed_is_a_validation_error():
    assert issubclass(MalformedHierarchyError, RuedaValidationError)


# --- emotion taxonomy ---

def test_emotion_tree_shape():
    root = build_emotion_tree()
    validate_wheel_hierarchy(root)
    assert len(root.nodes_at_depth(1)) == 7
    assert len(root.nodes_at_depth(2)) == 41
    assert len(root.nodes_at_depth(3)) == 82
    assert root.children[0].name == "Happy"
    assert [c.name for c in root.children[0].children[0].children] == ["Aroused", "Cheeky"]


# --- files ---

def test_save_and_load_taxonomy(tmp_path):
    root = build_emotion_tree()
    p = save_taxonomy(root, tmp_path / "emotions")
    assert p.suffix == ".json"
    assert not p.with_suffix(".json.tmp").exists()
    assert load_taxonomy(p) == root


def test_load_missing_file(tmp_path):
    with pytest.raises(RuedaIOError):
        load_taxonomy(tmp_path / "nope.json")


def test_load_malformed_json(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(RuedaValidationError, match="línea 1"):
        load_taxonomy(p)


def test_load_wrong_schema_version(tmp_path):
    p = tmp_path / "v2.json"
    p.write_text(json.dumps({"schema_version": 2, "root": {"name": "r"}}), encoding="utf-8")
    with pytest.raises(RuedaSchemaError, match="schema_version=2"):
        load_taxonomy(p)


@pytest.mark.parametrize("data", [[], {"root": {"name": "r"}}, {"schema_version": "x", "root": {}}])
def test_taxonomy_from_dict_rejects(data):
    with pytest.raises(RuedaSchemaError):
        taxonomy_from_dict(data)
