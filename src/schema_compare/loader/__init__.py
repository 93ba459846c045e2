"""Loading of schema snapshots from exported archives."""

from schema_compare.loader.archive import load_snapshot, parse_schema_xml

__all__ = ["load_snapshot", "parse_schema_xml"]
