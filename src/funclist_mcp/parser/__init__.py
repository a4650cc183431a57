"""Parser package for extracting function outlines from source code."""

from .records import OutlineRecord, UNNAMED_PLACEHOLDER, CATEGORIES, categorize
from .languages import (
    LanguageSpec,
    LANGUAGE_REGISTRY,
    LANGUAGE_EXTENSIONS,
    JAVASCRIPT_SPEC,
    language_for_path,
)
from .params import format_args, split_parameters
from .classifier import Declaration, Hint, classify
from .walker import walk
from .extractor import parse_source
from .hierarchy import OutlineNode, build_outline_tree, flatten_tree

__all__ = [
    "OutlineRecord",
    "UNNAMED_PLACEHOLDER",
    "CATEGORIES",
    "categorize",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "JAVASCRIPT_SPEC",
    "language_for_path",
    "format_args",
    "split_parameters",
    "Declaration",
    "Hint",
    "classify",
    "walk",
    "parse_source",
    "OutlineNode",
    "build_outline_tree",
    "flatten_tree",
]
