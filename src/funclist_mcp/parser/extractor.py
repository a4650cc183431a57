"""Function outline extraction using tree-sitter."""

import logging

from tree_sitter_language_pack import get_parser

from .languages import LANGUAGE_REGISTRY
from .records import OutlineRecord
from .walker import walk

logger = logging.getLogger(__name__)


def parse_source(content: str, language: str = "javascript") -> list[OutlineRecord]:
    """Parse source code and extract its function outline.

    tree-sitter never rejects input: syntax errors become ERROR/MISSING
    nodes and the outline covers whatever could be recovered. Errors
    raised by the parser library itself are not caught here.

    Args:
        content: Raw source code
        language: Language name (must be in LANGUAGE_REGISTRY)

    Returns:
        OutlineRecord list in pre-order (parents before nested functions)
    """
    if language not in LANGUAGE_REGISTRY:
        return []

    spec = LANGUAGE_REGISTRY[language]
    source_bytes = content.encode("utf-8")

    parser = get_parser(spec.ts_language)
    tree = parser.parse(source_bytes)

    if tree.root_node.has_error:
        logger.debug("Source has syntax errors; %s outline is best-effort", language)

    records = walk(tree.root_node, spec, source_bytes, [], "", 0)
    logger.debug("Extracted %d functions from %d bytes of %s", len(records), len(source_bytes), language)

    return records
