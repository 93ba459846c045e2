"""Color definitions for console output.

Centralized palette using Rich color names so every report view styles
diff kinds the same way.
"""

from schema_compare.schema.models import ChangeKind


class DiffColors:
    """Centralized color palette for Schema Compare console output.

    Reference: https://rich.readthedocs.io/en/stable/appendix/colors.html
    """

    # Diff kinds
    ADDED = "green"
    REMOVED = "red"
    CHANGED = "yellow"
    SIMILAR = "blue"

    # Values
    OLD_VALUE = "red"
    NEW_VALUE = "green"
    EMPTY = "dim"

    # UI elements
    BORDER = "blue"
    HEADER = "bold bright_white"
    LABEL = "bold cyan"

    @classmethod
    def for_kind(cls, kind: ChangeKind) -> str:
        """Get the color used for a diff kind."""
        return {
            ChangeKind.ADDED: cls.ADDED,
            ChangeKind.REMOVED: cls.REMOVED,
            ChangeKind.CHANGED: cls.CHANGED,
            ChangeKind.SIMILAR: cls.SIMILAR,
        }[kind]
