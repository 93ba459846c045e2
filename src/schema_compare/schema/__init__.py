"""Schema comparison engine.

This module reconciles two schema snapshots (tables, columns, joins) by key
and reports added, removed, changed, and unchanged records.
"""

from schema_compare.schema.changes import extract_changes
from schema_compare.schema.comparator import SchemaComparator, compare
from schema_compare.schema.equivalence import equal
from schema_compare.schema.models import (
    Category,
    ChangedPair,
    ComparisonReport,
    DiffResult,
    KeySpec,
    PropertyChange,
    SchemaSnapshot,
)
from schema_compare.schema.normalizer import normalize
from schema_compare.schema.reconciler import reconcile

__all__ = [
    "SchemaComparator",
    "compare",
    "reconcile",
    "extract_changes",
    "equal",
    "normalize",
    "Category",
    "ChangedPair",
    "ComparisonReport",
    "DiffResult",
    "KeySpec",
    "PropertyChange",
    "SchemaSnapshot",
]
