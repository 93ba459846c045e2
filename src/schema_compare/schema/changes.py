"""Property-level differences between a matched pair of records."""

from schema_compare.schema.equivalence import equal
from schema_compare.schema.models import PropertyChange, Record


def extract_changes(old_record: Record, new_record: Record) -> list[PropertyChange]:
    """List the attributes whose values differ between two records.

    Attributes are visited in the old record's order, followed by the
    attributes that only the new record carries.

    Args:
        old_record: Record from the old snapshot
        new_record: Record from the new snapshot with the same key

    Returns:
        One PropertyChange per unequal attribute (empty when the records are equal)
    """
    all_keys = list(old_record) + [key for key in new_record if key not in old_record]

    return [
        PropertyChange(key=key, old_value=old_record.get(key), new_value=new_record.get(key))
        for key in all_keys
        if not equal(old_record.get(key), new_record.get(key))
    ]
