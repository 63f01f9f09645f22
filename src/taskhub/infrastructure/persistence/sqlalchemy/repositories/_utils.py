"""Shared utilities for SQLAlchemy repositories."""

from functools import reduce
from typing import Iterable, Optional, TypeVar

from sqlalchemy import ColumnElement, Select

StmtT = TypeVar("StmtT", bound=Select)


def apply_predicates(
    stmt: StmtT,
    predicates: Iterable[Optional[ColumnElement[bool]]],
) -> StmtT:
    """
    Fold optional predicates over a base statement.

    Each non-None predicate is added with ``WHERE``, so the criteria combine
    conjunctively in the given order.
    """
    return reduce(
        lambda acc, predicate: acc.where(predicate),
        (p for p in predicates if p is not None),
        stmt,
    )


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Treat empty or whitespace-only filter strings as absent."""
    if value is None or not value.strip():
        return None
    return value
