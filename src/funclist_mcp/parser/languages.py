"""Language registry with LanguageSpec definitions for supported dialects."""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional


@dataclass
class LanguageSpec:
    """Specification for extracting function outlines from a dialect's AST."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node types that represent function-like declarations.
    # Every one of them carries a parameter list field.
    function_node_types: frozenset[str]

    # Node types that can name a function literal appearing as their value.
    # Maps node_type -> child field name holding the name
    hint_fields: dict[str, str]

    # Statement node types whose assignment target names the assigned value
    assignment_statement_types: frozenset[str]

    # Assignment expression node types (plain and compound)
    assignment_types: frozenset[str]

    # File extensions handled by this dialect
    extensions: tuple[str, ...]


_JS_FUNCTION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",                     # tree-sitter-javascript < 0.21
    "generator_function",
    "arrow_function",
    "method_definition",
})

_JS_HINT_FIELDS = {
    "variable_declarator": "name",
    "pair": "key",
    "field_definition": "property",
}


# JavaScript specification
JAVASCRIPT_SPEC = LanguageSpec(
    ts_language="javascript",
    function_node_types=_JS_FUNCTION_TYPES,
    hint_fields=_JS_HINT_FIELDS,
    assignment_statement_types=frozenset({"expression_statement"}),
    assignment_types=frozenset({"assignment_expression", "augmented_assignment_expression"}),
    extensions=(".js", ".mjs", ".cjs", ".jsx"),
)


_TS_FUNCTION_TYPES = _JS_FUNCTION_TYPES | {
    "function_signature",
    "method_signature",
    "abstract_method_signature",
}

_TS_HINT_FIELDS = {
    **_JS_HINT_FIELDS,
    "public_field_definition": "name",
}


# TypeScript specification
TYPESCRIPT_SPEC = LanguageSpec(
    ts_language="typescript",
    function_node_types=_TS_FUNCTION_TYPES,
    hint_fields=_TS_HINT_FIELDS,
    assignment_statement_types=frozenset({"expression_statement"}),
    assignment_types=frozenset({"assignment_expression", "augmented_assignment_expression"}),
    extensions=(".ts", ".mts", ".cts"),
)


# TSX uses the TypeScript node types with a JSX-aware grammar
TSX_SPEC = LanguageSpec(
    ts_language="tsx",
    function_node_types=_TS_FUNCTION_TYPES,
    hint_fields=_TS_HINT_FIELDS,
    assignment_statement_types=frozenset({"expression_statement"}),
    assignment_types=frozenset({"assignment_expression", "augmented_assignment_expression"}),
    extensions=(".tsx",),
)


# Language registry
LANGUAGE_REGISTRY = {
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "tsx": TSX_SPEC,
}


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ext: language
    for language, spec in LANGUAGE_REGISTRY.items()
    for ext in spec.extensions
}


def language_for_path(path: str) -> Optional[str]:
    """Return the registered language for a file path, or None."""
    return LANGUAGE_EXTENSIONS.get(PurePath(path).suffix.lower())
