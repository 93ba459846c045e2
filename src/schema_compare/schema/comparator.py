"""Schema comparison across tables, columns, and joins."""

from collections.abc import Mapping

from schema_compare.schema.models import (
    DEFAULT_KEY_SPECS,
    Category,
    ComparisonReport,
    KeySpec,
    SchemaSnapshot,
)
from schema_compare.schema.reconciler import reconcile
from schema_compare.utils.logging import get_logger

logger = get_logger(__name__)


class SchemaComparator:
    """Compare two schema snapshots category by category."""

    def __init__(self, key_specs: Mapping[Category, KeySpec] | None = None):
        """Initialize comparator.

        Args:
            key_specs: Identity rule per category. Categories missing from the
                mapping fall back to the built-in keys.
        """
        self.key_specs = dict(DEFAULT_KEY_SPECS)
        if key_specs:
            self.key_specs.update(key_specs)

    def compare(self, old: SchemaSnapshot, new: SchemaSnapshot) -> ComparisonReport:
        """Compare old and new snapshots.

        Neither snapshot is modified; the report is a pure function of both.

        Args:
            old: Snapshot of the previous schema version
            new: Snapshot of the current schema version

        Returns:
            ComparisonReport with one DiffResult per category
        """
        results = {}
        for category in Category:
            key_spec = self.key_specs[category]
            result = reconcile(old.records(category), new.records(category), key_spec, category)
            results[category.value] = result

            logger.debug(
                "category_reconciled",
                category=category.value,
                key_fields=list(key_spec.fields),
                **result.counts(),
            )

        report = ComparisonReport(**results)

        logger.info(
            "schema_comparison_complete",
            has_differences=report.has_differences,
            **report.get_summary(),
        )

        return report


def compare(
    old: SchemaSnapshot,
    new: SchemaSnapshot,
    key_specs: Mapping[Category, KeySpec] | None = None,
) -> ComparisonReport:
    """Compare two snapshots with a one-off :class:`SchemaComparator`."""
    return SchemaComparator(key_specs).compare(old, new)
