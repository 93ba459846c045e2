"""Key-based reconciliation of two record collections."""

from collections.abc import Sequence

from schema_compare.schema.equivalence import equal
from schema_compare.schema.models import Category, ChangedPair, DiffResult, KeySpec, Record


def build_lookup(records: Sequence[Record], key_spec: KeySpec) -> dict[str, Record]:
    """Index records by identity string.

    When two records share a key the later one replaces the earlier one,
    while the key keeps the position where it was first seen.

    Args:
        records: Ordered records of one category
        key_spec: Identity rule for the category

    Returns:
        Dict of {key: record}
    """
    lookup: dict[str, Record] = {}
    for record in records:
        lookup[key_spec.key_of(record)] = record
    return lookup


def reconcile(
    old_records: Sequence[Record],
    new_records: Sequence[Record],
    key_spec: KeySpec,
    category: Category,
) -> DiffResult:
    """Partition two record collections into added, removed, changed, and similar.

    Args:
        old_records: Records of the old snapshot
        new_records: Records of the new snapshot
        key_spec: Identity rule used to match records across snapshots
        category: Category the records belong to

    Returns:
        DiffResult where ``added`` follows new order, ``removed`` follows old
        order, and ``changed``/``similar`` follow the old lookup's key order
    """
    old_lookup = build_lookup(old_records, key_spec)
    new_lookup = build_lookup(new_records, key_spec)

    result = DiffResult(category=category)
    result.added = [r for r in new_records if key_spec.key_of(r) not in old_lookup]
    result.removed = [r for r in old_records if key_spec.key_of(r) not in new_lookup]

    for key, old_record in old_lookup.items():
        if key not in new_lookup:
            continue
        new_record = new_lookup[key]
        if equal(old_record, new_record):
            result.similar.append(old_record)
        else:
            result.changed.append(ChangedPair(old=old_record, new=new_record))

    return result
