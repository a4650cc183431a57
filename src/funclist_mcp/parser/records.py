"""Outline record dataclass and category rules."""

from dataclasses import dataclass, field


# Name given to a function that has no name of its own and no naming context
UNNAMED_PLACEHOLDER = "function"

GENERATOR = "generator"
UNNAMED = "unnamed"
PRIVATE = "private"
CLASS = "class"
PUBLIC = "public"

CATEGORIES = (GENERATOR, UNNAMED, PRIVATE, CLASS, PUBLIC)


@dataclass(frozen=True)
class OutlineRecord:
    """A function-like declaration found in a source file."""
    name: str                       # Declared or inferred name (e.g., "init")
    line: int                       # Start line number (1-indexed)
    category: str                   # "generator" | "unnamed" | "private" | "class" | "public"
    level: int = 0                  # Number of enclosing function-like declarations
    args: tuple[str, ...] = field(default_factory=tuple)  # Formatted parameters ("a", "b=2")

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        return {
            "name": self.name,
            "line": self.line,
            "category": self.category,
            "level": self.level,
            "args": list(self.args),
        }


def categorize(name: str, generator: bool = False) -> str:
    """Pick the category for a declaration.

    Rules are checked in order and the first match wins. Apart from the
    generator flag they are naming conventions, not semantic checks:
    a leading underscore means private, a leading capital means class.
    """
    if generator:
        return GENERATOR
    if name == UNNAMED_PLACEHOLDER:
        return UNNAMED
    if name[:1] == "_":
        return PRIVATE
    if name[:1].upper() == name[:1]:
        return CLASS
    return PUBLIC
