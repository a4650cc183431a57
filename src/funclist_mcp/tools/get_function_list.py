"""Get function list - outline of functions in a source string or file."""

import logging
import os
from pathlib import Path
from typing import Optional

from ..parser import (
    LANGUAGE_REGISTRY,
    OutlineRecord,
    build_outline_tree,
    language_for_path,
    parse_source,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 500 * 1024  # 500KB


def get_function_list(
    source: str,
    language: str = "javascript",
    nested: bool = False
) -> dict:
    """Get the function outline of a source string.

    Args:
        source: Raw source code
        language: Language name (javascript, typescript, tsx)
        nested: Return a tree with "children" instead of a flat list

    Returns:
        Dict with functions outline
    """
    if language not in LANGUAGE_REGISTRY:
        return {"error": f"Unsupported language: {language}"}

    records = parse_source(source, language)

    return {
        "language": language,
        "count": len(records),
        "functions": _format_records(records, nested)
    }


def get_file_function_list(
    file_path: str,
    language: Optional[str] = None,
    nested: bool = False,
    max_size: Optional[int] = None
) -> dict:
    """Get the function outline of a local file.

    Args:
        file_path: Path to the file (supports ~ for home directory)
        language: Language name; inferred from the extension when omitted
        nested: Return a tree with "children" instead of a flat list
        max_size: Maximum file size in bytes (default FUNCLIST_MAX_FILE_SIZE or 500KB)

    Returns:
        Dict with file path and functions outline
    """
    path = Path(file_path).expanduser()

    if not path.is_file():
        return {"error": f"File not found: {file_path}"}

    language = language or language_for_path(path.name)
    if not language:
        return {"error": f"Cannot detect language for: {file_path}"}

    if max_size is None:
        max_size = _max_file_size()

    try:
        size = path.stat().st_size
        if size > max_size:
            return {"error": f"File too large: {size} bytes (limit {max_size})"}
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return {"error": f"Could not read {file_path}: {e}"}

    logger.debug("Outlining %s as %s", path, language)
    result = get_function_list(content, language=language, nested=nested)

    if "error" in result:
        return result

    return {"file": str(path), **result}


def _max_file_size() -> int:
    """Read FUNCLIST_MAX_FILE_SIZE, falling back to the default when invalid."""
    value = os.environ.get("FUNCLIST_MAX_FILE_SIZE")
    if not value:
        return DEFAULT_MAX_FILE_SIZE

    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring invalid FUNCLIST_MAX_FILE_SIZE=%r, using %d", value, DEFAULT_MAX_FILE_SIZE)
        return DEFAULT_MAX_FILE_SIZE


def _format_records(records: list[OutlineRecord], nested: bool) -> list[dict]:
    """Convert records to output dicts, optionally nested by level."""
    if not nested:
        return [r.to_dict() for r in records]

    return [_node_to_dict(n) for n in build_outline_tree(records)]


def _node_to_dict(node) -> dict:
    """Convert OutlineNode to output dict."""
    result = node.record.to_dict()

    if node.children:
        result["children"] = [_node_to_dict(c) for c in node.children]

    return result
