"""Data models for schema snapshots and comparison results."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Record = Mapping[str, Any]


class Category(Enum):
    """Record categories of a schema snapshot."""

    TABLES = "tables"
    COLUMNS = "columns"
    JOINS = "joins"


class ChangeKind(Enum):
    """Roles a record can play in a diff result."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"
    SIMILAR = "similar"


def _key_part(value: Any) -> str:
    """Render one key attribute as text; missing values become empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class KeySpec:
    """Rule for deriving a record's identity string within a snapshot."""

    fields: tuple[str, ...]
    separator: str = "."

    @classmethod
    def of(cls, fields: str | Sequence[str], separator: str = ".") -> "KeySpec":
        """Build a KeySpec from a single attribute name or a list of names."""
        if isinstance(fields, str):
            return cls((fields,), separator)
        return cls(tuple(fields), separator)

    def key_of(self, record: Record) -> str:
        """Join the key attributes of a record into its identity string."""
        return self.separator.join(_key_part(record.get(name)) for name in self.fields)


DEFAULT_KEY_SPECS: dict[Category, KeySpec] = {
    Category.TABLES: KeySpec.of("name"),
    Category.COLUMNS: KeySpec.of(["table", "name"]),
    Category.JOINS: KeySpec.of(["join_name", "leftColumn", "rightColumn", "operator"]),
}


@dataclass
class SchemaSnapshot:
    """One side of a comparison: the ordered records of each category."""

    tables: list[Record] = field(default_factory=list)
    columns: list[Record] = field(default_factory=list)
    joins: list[Record] = field(default_factory=list)

    def records(self, category: Category) -> list[Record]:
        """Get the records of one category."""
        return getattr(self, category.value)

    def get_summary(self) -> dict[str, int]:
        """Get record counts per category."""
        return {category.value: len(self.records(category)) for category in Category}


@dataclass(frozen=True)
class PropertyChange:
    """One attribute that differs between a matched old/new record pair."""

    key: str
    old_value: Any = None
    new_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"key": self.key, "old_value": self.old_value, "new_value": self.new_value}


@dataclass(frozen=True)
class ChangedPair:
    """Two records sharing a key but structurally unequal."""

    old: Record
    new: Record

    def property_changes(self) -> list[PropertyChange]:
        """Derive the individual attribute differences of this pair."""
        from schema_compare.schema.changes import extract_changes

        return extract_changes(self.old, self.new)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "old": dict(self.old),
            "new": dict(self.new),
            "changes": [change.to_dict() for change in self.property_changes()],
        }


@dataclass
class DiffResult:
    """Added/removed/changed/similar partition for one record category."""

    category: Category
    added: list[Record] = field(default_factory=list)
    removed: list[Record] = field(default_factory=list)
    changed: list[ChangedPair] = field(default_factory=list)
    similar: list[Record] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        """Check if anything was added, removed, or changed."""
        return bool(self.added or self.removed or self.changed)

    def counts(self) -> dict[str, int]:
        """Get the size of each partition."""
        return {
            ChangeKind.ADDED.value: len(self.added),
            ChangeKind.REMOVED.value: len(self.removed),
            ChangeKind.CHANGED.value: len(self.changed),
            ChangeKind.SIMILAR.value: len(self.similar),
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "added": [dict(record) for record in self.added],
            "removed": [dict(record) for record in self.removed],
            "changed": [pair.to_dict() for pair in self.changed],
            "similar": [dict(record) for record in self.similar],
        }


@dataclass
class ComparisonReport:
    """Diff results for every category of two compared snapshots."""

    tables: DiffResult
    columns: DiffResult
    joins: DiffResult

    def result(self, category: Category) -> DiffResult:
        """Get the diff result of one category."""
        return getattr(self, category.value)

    def results(self) -> dict[Category, DiffResult]:
        """Get all diff results keyed by category, in display order."""
        return {category: self.result(category) for category in Category}

    @property
    def has_differences(self) -> bool:
        """Check if any category has added, removed, or changed records."""
        return any(result.has_differences for result in self.results().values())

    def get_summary(self) -> dict[str, int]:
        """Get totals of each partition summed across categories."""
        totals = {kind.value: 0 for kind in ChangeKind}
        for result in self.results().values():
            for kind, count in result.counts().items():
                totals[kind] += count
        return totals

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        data: dict[str, Any] = {
            category.value: result.to_dict() for category, result in self.results().items()
        }
        data["summary"] = self.get_summary()
        return data
