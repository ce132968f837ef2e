"""Spreadsheet importer for bull records.

The importer reads the active sheet of an ``.xlsx`` workbook, locates the
header row and creates one bull per data row through
:func:`bulls.services.record_store.create_bull`. Rows are written one at
a time as they are read; there is no transaction around the whole run,
so rows created before a failure stay in the table.

Rows the record store rejects are skipped and reported in
:attr:`BullImportResult.errors`. Passing ``strict=True`` turns the first
rejected row into a :class:`BullImportError` instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from openpyxl import load_workbook

from .record_store import BullValidationError, create_bull

logger = logging.getLogger(__name__)

COLUMN_DEFINITIONS: Sequence[Tuple[str, str]] = [
    ('registration_code', 'Registration Code'),
    ('name', 'Name'),
    ('born_on', 'Born On'),
    ('offspring_count', 'Offspring Count'),
]

REQUIRED_HEADERS: List[str] = [label for _, label in COLUMN_DEFINITIONS]


@dataclass
class BullImportResult:
    total_rows: int = 0
    created: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return max(self.total_rows - self.created, 0)


class BullImportError(Exception):
    """Raised when a workbook cannot be imported.

    ``result`` carries the counts gathered before the failure, if any rows
    were processed.
    """

    def __init__(self, message: str, result: Optional[BullImportResult] = None) -> None:
        super().__init__(message)
        self.result = result


def _normalise_header(value: Any) -> str:
    return str(value).strip().casefold() if value is not None else ''


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _coerce_code(value: Any) -> str:
    if _is_blank(value):
        return ''
    # Numeric codes come back as floats when the cell is not formatted as text
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _coerce_text(value: Any) -> str:
    return str(value).strip() if not _is_blank(value) else ''


def _coerce_date(value: Any) -> Any:
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return str(value).strip()


def _coerce_count(value: Any) -> Any:
    if _is_blank(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


COERCERS = {
    'registration_code': _coerce_code,
    'name': _coerce_text,
    'born_on': _coerce_date,
    'offspring_count': _coerce_count,
}


def _map_headers(header_row: Sequence[Any]) -> Dict[str, int]:
    lookup = {label.casefold(): attribute for attribute, label in COLUMN_DEFINITIONS}
    header_map: Dict[str, int] = {}
    for idx, raw_header in enumerate(header_row):
        attribute = lookup.get(_normalise_header(raw_header))
        if attribute and attribute not in header_map:
            header_map[attribute] = idx
    missing = [label for attribute, label in COLUMN_DEFINITIONS if attribute not in header_map]
    if missing:
        raise BullImportError('Missing required columns: ' + ', '.join(missing))
    return header_map


def _row_attributes(row: Sequence[Any], header_map: Dict[str, int]) -> Dict[str, Any]:
    attributes: Dict[str, Any] = {}
    for attribute, idx in header_map.items():
        value = row[idx] if idx < len(row) else None
        attributes[attribute] = COERCERS[attribute](value)
    return attributes


def _format_row_errors(row_index: int, exc: BullValidationError) -> List[str]:
    return [
        f'Row {row_index}: {field_name}: {message}'
        for field_name, messages in exc.errors.items()
        for message in messages
    ]


def import_bulls_workbook(source, *, strict: bool = False) -> BullImportResult:
    """Create one bull per data row of the workbook at ``source``.

    ``source`` is a filesystem path or an open binary file (an uploaded
    file works too). A workbook with a header row and no data rows is a
    valid, empty import.
    """

    label = getattr(source, 'name', source)
    try:
        workbook = load_workbook(source, read_only=True, data_only=True)
    except Exception as exc:
        raise BullImportError('The workbook could not be read.') from exc

    result = BullImportResult()
    try:
        rows = workbook.active.iter_rows(values_only=True)
        header_map: Optional[Dict[str, int]] = None
        for row_index, row in enumerate(rows, start=1):
            if row is None or all(_is_blank(value) for value in row):
                continue
            if header_map is None:
                header_map = _map_headers(row)
                continue
            result.total_rows += 1
            try:
                create_bull(_row_attributes(row, header_map))
            except BullValidationError as exc:
                row_errors = _format_row_errors(row_index, exc)
                if strict:
                    raise BullImportError(row_errors[0], result=result) from exc
                for message in row_errors:
                    logger.warning(f"[import] {label}: {message}")
                result.errors.extend(row_errors)
                continue
            result.created += 1
        if header_map is None:
            raise BullImportError('The workbook does not contain any rows.')
    finally:
        workbook.close()

    logger.info(
        f"[import] {label}: rows={result.total_rows} created={result.created} skipped={result.skipped}"
    )
    return result
