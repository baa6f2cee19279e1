"""
Parameter type descriptor table.

The descriptor table is a tab-delimited, double-quote-guarded text resource.
Its first row names the columns; every further row describes one parameter:

    "InternalName"	"ParamType"
    "LogDir"	"MustBeExistingDirectory"

The column layout is parsed once per process and cached. Later parses reuse
the cached layout and ignore the header row they are handed, so every table
loaded by one process must share a layout.
"""

import csv
import logging
import threading
from dataclasses import dataclass
from importlib import resources
from typing import Dict, List, Optional, Sequence, Tuple

from paramstate.config import get_descriptor_resource
from paramstate.errors import (
    DuplicateParameterName,
    InvalidValidationRule,
    MalformedDescriptorTable,
    UnknownDescriptorField,
)
from paramstate.parameter_types import ParameterValidationRule

logger = logging.getLogger(__name__)

INTERNAL_NAME_FIELD = "InternalName"
PARAM_TYPE_FIELD = "ParamType"
KNOWN_FIELDS = (INTERNAL_NAME_FIELD, PARAM_TYPE_FIELD)

FIELD_DELIMITER = "\t"
GUARD_CHAR = '"'

# Process-wide cache of the header layout
_column_names: Optional[Tuple[str, ...]] = None
_column_lock = threading.Lock()


@dataclass(frozen=True)
class ParameterTypeDescriptor:
    """Name and validation rule of one parameter, as read from the table."""
    name: str
    validation_rule: ParameterValidationRule = ParameterValidationRule.UNDEFINED


def split_row(row: str) -> List[str]:
    """Split one table row into fields, stripping the quote guards."""
    return next(csv.reader([row], delimiter=FIELD_DELIMITER, quotechar=GUARD_CHAR))


def get_column_layout(header_row: str) -> Tuple[str, ...]:
    """Get the cached column layout, parsing header_row on first use.

    Raises:
        UnknownDescriptorField: header names an unsupported column
        MalformedDescriptorTable: header has no InternalName column
    """
    global _column_names
    with _column_lock:
        if _column_names is None:
            columns = tuple(split_row(header_row))
            for column in columns:
                if column not in KNOWN_FIELDS:
                    raise UnknownDescriptorField(column)
            if INTERNAL_NAME_FIELD not in columns:
                raise MalformedDescriptorTable(
                    f"Parameter type information header has no {INTERNAL_NAME_FIELD} column: {header_row!r}"
                )
            _column_names = columns
            logger.debug(f"Cached descriptor column layout: {columns}")
        return _column_names


def reset_column_layout() -> None:
    """Forget the cached column layout. For testing only."""
    global _column_names
    with _column_lock:
        _column_names = None


def parse_descriptor_row(row: str, columns: Tuple[str, ...]) -> ParameterTypeDescriptor:
    """Build a descriptor from one detail row.

    Raises:
        MalformedDescriptorTable: field count differs from the header
        InvalidValidationRule: ParamType cell names no rule
    """
    cells = split_row(row)
    if len(cells) != len(columns):
        raise MalformedDescriptorTable.field_count(len(columns), len(cells), row)

    values = dict(zip(columns, cells))
    rule = ParameterValidationRule.UNDEFINED
    if PARAM_TYPE_FIELD in values:
        raw_rule = values[PARAM_TYPE_FIELD]
        try:
            rule = ParameterValidationRule.from_table_value(raw_rule)
        except ValueError as e:
            raise InvalidValidationRule(raw_rule, PARAM_TYPE_FIELD, row) from e

    return ParameterTypeDescriptor(name=values[INTERNAL_NAME_FIELD], validation_rule=rule)


def parse_descriptor_table(rows: Sequence[str]) -> Dict[str, ParameterTypeDescriptor]:
    """Parse a descriptor table into descriptors keyed by name, in row order.

    Args:
        rows: Table rows; rows[0] is the header

    Returns:
        Ordered dict mapping parameter name to its descriptor

    Raises:
        MalformedDescriptorTable: no header row, or a row of the wrong width
        UnknownDescriptorField: header names an unsupported column
        InvalidValidationRule: a ParamType cell names no rule
        DuplicateParameterName: two rows share a name
    """
    if not rows:
        raise MalformedDescriptorTable("Parameter type information table has no header row")

    columns = get_column_layout(rows[0])
    descriptors: Dict[str, ParameterTypeDescriptor] = {}
    for row in rows[1:]:
        if not row.strip():
            continue
        descriptor = parse_descriptor_row(row, columns)
        if descriptor.name in descriptors:
            raise DuplicateParameterName(descriptor.name)
        descriptors[descriptor.name] = descriptor

    logger.debug(f"Parsed {len(descriptors)} parameter descriptor(s)")
    return descriptors


def read_descriptor_rows(package: Optional[str] = None, resource: Optional[str] = None) -> List[str]:
    """Read the rows of a packaged descriptor table.

    Args:
        package: Package holding the resource (default from paramstate.config)
        resource: Resource file name (default from paramstate.config)

    Returns:
        The table's lines, without line terminators
    """
    default_package, default_resource = get_descriptor_resource()
    package = package or default_package
    resource = resource or default_resource
    text = resources.files(package).joinpath(resource).read_text(encoding="utf-8-sig")
    return text.splitlines()
