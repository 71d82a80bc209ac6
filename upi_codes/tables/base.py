"""Construction helpers for the frozen code tables."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypeVar

from upi_codes.exceptions import CodeTableError
from upi_codes.models import Category, CodeRecord, Status

R = TypeVar("R")

SUCCESS_CODE = "00"
ALTERNATE_SUCCESS_CODE = "000"


def build_table(name: str, records: Iterable[R]) -> Mapping[str, R]:
    """Index records by code and return a read-only view.

    Parameters
    ----------
    name : str
        Table name used in error messages.
    records : Iterable
        Records exposing a ``code`` attribute.

    Returns
    -------
    Mapping
        ``MappingProxyType`` keyed by code, in insertion order.

    Raises
    ------
    CodeTableError
        If a code is repeated or not stored in uppercase.
    """
    table: dict[str, R] = {}
    for record in records:
        if record.code != record.code.upper():
            raise CodeTableError(f"{name}: code {record.code!r} is not uppercase")
        if record.code in table:
            raise CodeTableError(f"{name}: duplicate code {record.code!r}")
        table[record.code] = record
    return MappingProxyType(table)


def entry(
    code: str,
    description: str,
    category: Category,
    status: Status,
    handling: str,
) -> CodeRecord:
    return CodeRecord(code, description, category, status, handling)


def failure_codes(table: Mapping[str, CodeRecord]) -> list[str]:
    """Codes in ``table`` whose status is not SUCCESS, in table order."""
    return [c for c, record in table.items() if record.status != Status.SUCCESS]
