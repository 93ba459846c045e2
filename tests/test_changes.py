"""Unit tests for schema_compare.schema.changes."""

from __future__ import annotations

from schema_compare.schema.changes import extract_changes
from schema_compare.schema.equivalence import equal
from schema_compare.schema.models import ChangedPair, PropertyChange


class TestExtractChanges:
    def test_single_property_change(self):
        old = {"table": "Orders", "name": "id", "type": "int"}
        new = {"table": "Orders", "name": "id", "type": "integer"}
        assert extract_changes(old, new) == [
            PropertyChange(key="type", old_value="int", new_value="integer")
        ]

    def test_equal_records_have_no_changes(self):
        record = {"name": "Orders", "caption": "Orders"}
        assert extract_changes(record, dict(record)) == []

    def test_formatting_noise_is_not_a_change(self):
        old = {"name": "total", "label": "Total ( USD )"}
        new = {"name": "total", "label": "total(usd)"}
        assert extract_changes(old, new) == []

    def test_removed_and_added_attributes(self):
        old = {"name": "Orders", "caption": "Orders"}
        new = {"name": "Orders", "schema": "sales"}
        changes = extract_changes(old, new)
        assert changes == [
            PropertyChange(key="caption", old_value="Orders", new_value=None),
            PropertyChange(key="schema", old_value=None, new_value="sales"),
        ]

    def test_null_vs_absent_is_not_a_change(self):
        assert extract_changes({"name": "a", "hidden": None}, {"name": "a"}) == []

    def test_order_old_keys_then_new_only_keys(self):
        old = {"b": "1", "a": "1"}
        new = {"z": "1", "a": "2", "b": "2"}
        assert [c.key for c in extract_changes(old, new)] == ["b", "a", "z"]

    def test_changed_keys_fail_equal_and_others_pass(self):
        old = {"name": "j1", "type": "inner", "operator": "=", "note": "A . B"}
        new = {"name": "j1", "type": "left", "operator": "=", "note": "a.b", "extra": "x"}
        changed_keys = {c.key for c in extract_changes(old, new)}
        assert changed_keys == {"type", "extra"}
        for key in set(old) | set(new):
            assert equal(old.get(key), new.get(key)) == (key not in changed_keys)


class TestChangedPair:
    def test_property_changes_delegates(self):
        pair = ChangedPair(old={"name": "a", "v": "1"}, new={"name": "a", "v": "2"})
        assert pair.property_changes() == [PropertyChange("v", "1", "2")]

    def test_to_dict(self):
        pair = ChangedPair(old={"name": "a", "v": "1"}, new={"name": "a", "v": "2"})
        assert pair.to_dict() == {
            "old": {"name": "a", "v": "1"},
            "new": {"name": "a", "v": "2"},
            "changes": [{"key": "v", "old_value": "1", "new_value": "2"}],
        }
