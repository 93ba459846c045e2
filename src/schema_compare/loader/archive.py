"""Load schema snapshots from exported archives.

An export is a zip archive holding one ``*_schema.xml`` document. The
document lists tables (with nested columns) under a ``tables`` element and
join definitions under a ``joins`` element::

    <schema>
      <tables>
        <table name="Orders" caption="Orders">
          <column name="id" type="int"/>
          <column name="total" formula="[price] * [qty]"/>
        </table>
      </tables>
      <joins>
        <join name="orders_customers" type="inner">
          <cond leftColumn="customer_id" rightColumn="id" operator="="/>
        </join>
      </joins>
    </schema>

Every element becomes a flat attribute record; a few derived fields are added
so records can be matched across versions.
"""

import io
import xml.etree.ElementTree as ET
import zipfile
from pathlib import Path

from schema_compare.exceptions import ArchiveError, FormatError, SchemaParseError
from schema_compare.schema.models import Record, SchemaSnapshot
from schema_compare.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SCHEMA_MARKER = "_schema.xml"


def _select(root: ET.Element, container: str, tag: str) -> list[ET.Element]:
    """Find ``tag`` elements nested anywhere below a ``container`` element.

    Matches are unique and returned in document order.
    """
    matched = {
        id(element)
        for scope in root.iter(container)
        for element in scope.iter(tag)
        if element is not scope
    }
    return [element for element in root.iter(tag) if id(element) in matched]


def _table_record(table: ET.Element) -> dict[str, str | None]:
    record: dict[str, str | None] = {"name": table.get("name")}
    record.update(table.attrib)
    return record


def _column_record(table: ET.Element, column: ET.Element) -> dict[str, str | None]:
    record: dict[str, str | None] = {"table": table.get("name"), "name": column.get("name")}
    record.update(column.attrib)
    if column.get("formula"):
        record["type"] = "formula"
    return record


def _join_record(join: ET.Element, cond: ET.Element) -> dict[str, str | None]:
    record: dict[str, str | None] = {"join_name": join.get("name")}
    record.update(join.attrib)
    record.update(cond.attrib)
    return record


def parse_schema_xml(document: str | bytes, member: str | None = None) -> SchemaSnapshot:
    """Parse a schema document into a snapshot.

    Args:
        document: XML text (bytes are decoded according to the XML declaration)
        member: Archive member name, used in error messages

    Returns:
        SchemaSnapshot with tables, columns, and joins in document order

    Raises:
        SchemaParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise SchemaParseError(str(e), member=member) from e

    tables: list[Record] = []
    columns: list[Record] = []
    joins: list[Record] = []

    for table in _select(root, "tables", "table"):
        tables.append(_table_record(table))
        for column in table.iter("column"):
            columns.append(_column_record(table, column))

    dropped_joins = 0
    for join in _select(root, "joins", "join"):
        cond = join.find(".//cond")
        if cond is None:
            dropped_joins += 1
            continue
        joins.append(_join_record(join, cond))

    if dropped_joins:
        logger.debug("joins_without_condition_dropped", member=member, count=dropped_joins)

    return SchemaSnapshot(tables=tables, columns=columns, joins=joins)


def find_schema_member(archive: zipfile.ZipFile, marker: str = DEFAULT_SCHEMA_MARKER) -> str | None:
    """Get the first archive member whose name contains ``marker``."""
    for name in archive.namelist():
        if marker in name:
            return name
    return None


def load_snapshot(
    source: str | Path | bytes,
    schema_marker: str = DEFAULT_SCHEMA_MARKER,
) -> SchemaSnapshot:
    """Load a schema snapshot from a zip archive.

    Args:
        source: Path to the archive, or the archive's raw bytes
        schema_marker: Substring identifying the schema document inside the archive

    Returns:
        SchemaSnapshot parsed from the archive's schema document

    Raises:
        ArchiveError: If the source is not a readable zip archive
        FormatError: If no member name contains ``schema_marker``
        SchemaParseError: If the schema document is malformed
    """
    if isinstance(source, bytes):
        label = "<bytes>"
        handle: str | Path | io.BytesIO = io.BytesIO(source)
    else:
        label = str(source)
        handle = source

    try:
        archive = zipfile.ZipFile(handle)
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveError(f"Cannot open zip archive: {e}", source=label) from e

    with archive:
        member = find_schema_member(archive, schema_marker)
        if member is None:
            logger.warning(
                "schema_member_not_found",
                source=label,
                marker=schema_marker,
                members=archive.namelist(),
            )
            raise FormatError("No schema XML file found", source=label)

        try:
            document = archive.read(member)
        except (zipfile.BadZipFile, NotImplementedError, RuntimeError) as e:
            raise ArchiveError(f"Cannot read {member}: {e}", source=label) from e

    snapshot = parse_schema_xml(document, member=member)

    logger.info(
        "snapshot_loaded",
        source=label,
        member=member,
        **snapshot.get_summary(),
    )

    return snapshot
