"""Pre-order AST walk that collects outline records."""

from .classifier import Declaration, Hint, classify
from .languages import LanguageSpec
from .records import OutlineRecord


def walk(
    node,
    spec: LanguageSpec,
    source_bytes: bytes,
    records: list[OutlineRecord],
    hint: str = "",
    level: int = 0,
) -> list[OutlineRecord]:
    """Walk the AST in pre-order and append a record per declaration.

    A declaration deepens the level seen by its children. A hint only
    renames function literals inside the hinting node, never its siblings.
    Only named children are visited; anonymous children are tokens.

    Uses an explicit stack so deeply nested trees (long operator chains
    in generated code) do not hit the interpreter's recursion limit.
    """
    stack = [(node, hint, level)]

    while stack:
        node, hint, level = stack.pop()
        result = classify(node, spec, source_bytes, hint, level)

        if isinstance(result, Declaration):
            records.append(result.record)
            level += 1
        elif isinstance(result, Hint):
            hint = result.name

        # Reversed so the first child is popped first
        stack.extend((child, hint, level) for child in reversed(node.named_children))

    return records
