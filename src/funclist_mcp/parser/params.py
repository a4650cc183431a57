"""Parameter list formatting."""

from typing import Optional, Sequence


# Literal node types rendered by their own source text
_PLAIN_LITERALS = ("number", "true", "false", "null", "undefined")

# Quote characters stripped from string literals
_QUOTES = "\"'`"


def node_text(node, source_bytes: bytes) -> str:
    """Return the source text covered by a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def render_literal(node, source_bytes: bytes) -> str:
    """Render a default value the way a literal's raw value reads.

    String literals lose their quotes. Anything that is not a simple
    literal falls back to its source text.
    """
    text = node_text(node, source_bytes)
    if node.type in ("string", "template_string"):
        if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
            return text[1:-1]
        return text
    if node.type in _PLAIN_LITERALS:
        return text
    return " ".join(text.split())


def format_args(
    params: Sequence,
    defaults: Sequence[Optional[object]],
    source_bytes: bytes,
) -> list[str]:
    """Format parameters as ``name`` or ``name=default``.

    Args:
        params: Parameter name nodes in declaration order
        defaults: Default value nodes aligned with ``params`` by index.
            May be shorter than ``params`` or hold None for gaps.
        source_bytes: Source the nodes point into

    Returns:
        One string per parameter
    """
    formatted = []
    for i, param in enumerate(params):
        text = node_text(param, source_bytes)
        default = defaults[i] if i < len(defaults) else None
        if default is not None:
            text += "=" + render_literal(default, source_bytes)
        formatted.append(text)
    return formatted


def split_parameters(node, source_bytes: bytes) -> tuple[list, list]:
    """Split a parameter list node into aligned name and default lists.

    ``node`` is either a formal parameter list or the single bare
    parameter of an arrow function (``x => x``).
    """
    if node is None:
        return [], []

    if node.type != "formal_parameters":
        return [node], [None]

    params = []
    defaults = []
    for child in node.named_children:
        if child.type == "comment":
            continue

        if child.type == "assignment_pattern":
            name = child.child_by_field_name("left")
            default = child.child_by_field_name("right")
        elif child.type in ("required_parameter", "optional_parameter"):
            # TypeScript: drop accessibility modifiers and type annotations
            name = child.child_by_field_name("pattern")
            default = child.child_by_field_name("value")
        else:
            name = child
            default = None

        params.append(name if name is not None else child)
        defaults.append(default)

    return params, defaults
