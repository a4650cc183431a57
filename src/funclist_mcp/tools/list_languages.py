"""List supported languages."""

from ..parser import LANGUAGE_REGISTRY


def list_languages() -> dict:
    """List all languages that can be outlined.

    Returns:
        Dict with count and list of languages with their file extensions
    """
    languages = [
        {"language": name, "extensions": list(spec.extensions)}
        for name, spec in LANGUAGE_REGISTRY.items()
    ]

    return {
        "count": len(languages),
        "languages": languages
    }
