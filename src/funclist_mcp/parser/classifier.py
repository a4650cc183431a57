"""Classify AST nodes as declarations, name hints, or neither."""

from dataclasses import dataclass
from typing import Optional, Union

from .languages import LanguageSpec
from .params import format_args, node_text, split_parameters
from .records import OutlineRecord, UNNAMED_PLACEHOLDER, categorize


@dataclass(frozen=True)
class Declaration:
    """The node is a function-like declaration."""
    record: OutlineRecord


@dataclass(frozen=True)
class Hint:
    """The node names a function literal that is its value."""
    name: str


Classification = Union[Declaration, Hint, None]


def classify(
    node,
    spec: LanguageSpec,
    source_bytes: bytes,
    hint: str = "",
    level: int = 0,
) -> Classification:
    """Classify a single AST node.

    Args:
        node: tree-sitter node
        spec: Dialect the tree was parsed with
        source_bytes: Raw source the tree was parsed from
        hint: Name carried from the enclosing context ("" for none)
        level: Number of enclosing declarations

    Returns:
        Declaration with a new record, Hint with a name for the node's
        children, or None when the node contributes neither.
    """
    if node.type in spec.function_node_types:
        return Declaration(_build_record(node, source_bytes, hint, level))

    if node.type in spec.hint_fields:
        name = _extract_key_name(node.child_by_field_name(spec.hint_fields[node.type]), source_bytes)
        return Hint(name) if name else None

    if node.type in spec.assignment_statement_types:
        name = _extract_assignment_target(node, spec, source_bytes)
        return Hint(name) if name else None

    return None


def _build_record(node, source_bytes: bytes, hint: str, level: int) -> OutlineRecord:
    """Build the outline record for a declaration node."""
    name = _extract_key_name(node.child_by_field_name("name"), source_bytes)
    name = name or hint or UNNAMED_PLACEHOLDER

    params_node = node.child_by_field_name("parameters") or node.child_by_field_name("parameter")
    params, defaults = split_parameters(params_node, source_bytes)

    return OutlineRecord(
        name=name,
        line=node.start_point[0] + 1,
        category=categorize(name, generator=_is_generator(node)),
        level=level,
        args=tuple(format_args(params, defaults, source_bytes)),
    )


def _is_generator(node) -> bool:
    """Check for the ``*`` token that marks generator functions and methods."""
    return any(child.type == "*" for child in node.children)


def _extract_key_name(node, source_bytes: bytes) -> Optional[str]:
    """Extract a plain name from an identifier-like or literal key node."""
    if node is None:
        return None

    if node.type in ("identifier", "property_identifier", "private_property_identifier",
                     "shorthand_property_identifier", "type_identifier"):
        return node_text(node, source_bytes)

    # Quoted keys: {"name": function () {}}
    if node.type == "string":
        text = node_text(node, source_bytes)
        return text[1:-1] if len(text) >= 2 else None

    # Numeric keys, destructuring patterns, computed keys, error nodes
    return None


def _extract_assignment_target(node, spec: LanguageSpec, source_bytes: bytes) -> Optional[str]:
    """Extract the name assigned to in ``target = value;`` statements."""
    if node.named_child_count == 0:
        return None

    expression = node.named_children[0]
    if expression.type not in spec.assignment_types:
        return None

    left = expression.child_by_field_name("left")
    if left is None:
        return None

    if left.type == "identifier":
        return node_text(left, source_bytes)

    # obj.prop = function () {}
    if left.type == "member_expression":
        return _extract_key_name(left.child_by_field_name("property"), source_bytes)

    return None
