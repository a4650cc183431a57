"""Tests for outline tree building."""

import pytest
from funclist_mcp.parser import OutlineRecord, build_outline_tree, flatten_tree, parse_source


def _record(name: str, level: int) -> OutlineRecord:
    return OutlineRecord(name=name, line=1, category="public", level=level)


def test_build_outline_tree():
    """Test records nest under the closest shallower record."""
    records = [
        _record("a", 0),
        _record("b", 1),
        _record("c", 2),
        _record("d", 1),
        _record("e", 0),
    ]

    roots = build_outline_tree(records)

    assert [n.record.name for n in roots] == ["a", "e"]
    assert [n.record.name for n in roots[0].children] == ["b", "d"]
    assert [n.record.name for n in roots[0].children[0].children] == ["c"]
    assert roots[1].children == []


def test_build_outline_tree_empty():
    """Test empty input."""
    assert build_outline_tree([]) == []


def test_flatten_tree_depth_matches_level():
    """Test flattening restores pre-order with depth equal to level."""
    source = '''
var app = {
    start: function () {
        function tick() {
            var step = function () {};
        }
    },
    stop: function () {}
};
function helper() {}
'''
    records = parse_source(source)
    flat = flatten_tree(build_outline_tree(records))

    assert [r for r, _ in flat] == records
    assert all(depth == r.level for r, depth in flat)
    assert [(r.name, depth) for r, depth in flat] == [
        ("start", 0), ("tick", 1), ("step", 2), ("stop", 0), ("helper", 0),
    ]
