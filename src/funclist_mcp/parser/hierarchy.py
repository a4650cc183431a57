"""Build nested outline trees for collapsible function lists."""

from dataclasses import dataclass, field

from .records import OutlineRecord


@dataclass
class OutlineNode:
    """A node in the outline tree with its nested functions."""
    record: OutlineRecord
    children: list["OutlineNode"] = field(default_factory=list)


def build_outline_tree(records: list[OutlineRecord]) -> list[OutlineNode]:
    """Build a hierarchical tree from a flat pre-order record list.

    Each record becomes a child of the closest preceding record with a
    lower level. Returns top-level functions.
    """
    roots = []
    stack: list[OutlineNode] = []

    for record in records:
        node = OutlineNode(record=record)
        while stack and stack[-1].record.level >= record.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)

    return roots


def flatten_tree(nodes: list[OutlineNode], depth: int = 0) -> list[tuple[OutlineRecord, int]]:
    """Flatten outline tree with depth information.

    Returns list of (record, depth) tuples for indentation.
    """
    result = []
    for node in nodes:
        result.append((node.record, depth))
        result.extend(flatten_tree(node.children, depth + 1))
    return result
