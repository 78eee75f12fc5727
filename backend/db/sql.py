"""
SQL execution helper and canonical categorical predicates.

Rules:
1. Statements are SQLAlchemy Core selects; values are bind params only
2. Column names come from the allow-list in constants.py
3. Null and empty-string categories are handled by the helpers below,
   never by ad-hoc WHERE fragments

Usage:
    from db.sql import run_select, not_blank

    stmt = (
        select(col, func.count().label('count'))
        .where(not_blank(col))
        .group_by(col)
    )
    rows = run_select(db, stmt)
"""
from typing import Any, List

from sqlalchemy import and_, case, literal_column, or_
from sqlalchemy.sql import ColumnElement

from constants import UNKNOWN_LABEL


def run_select(db, statement) -> List[Any]:
    """
    Execute a Core select and return all rows.

    Args:
        db: SQLAlchemy database handle (or object with .session.execute)
        statement: SQLAlchemy Select

    Returns:
        List of result rows
    """
    # Get session - handle both db and db.session patterns
    session = getattr(db, 'session', db)

    result = session.execute(statement)
    return result.fetchall()


# =============================================================================
# MISSING CATEGORY - CANONICAL PREDICATES
# =============================================================================
#
# Each metric declares one policy for null/empty categories:
#
#   EXCLUDE            ->  WHERE col IS NOT NULL AND col != ''
#   LABEL_AS_UNKNOWN   ->  GROUP BY CASE WHEN col IS NULL OR col = ''
#                                        THEN 'Unknown' ELSE col END
#
# NEVER write these patterns directly in a query builder.
#
# =============================================================================

def not_blank(column) -> ColumnElement:
    """Predicate keeping rows whose category is present and non-empty."""
    return and_(column.isnot(None), column != '')


def unknown_if_blank(column) -> ColumnElement:
    """
    Expression mapping null/empty categories to the literal 'Unknown'.

    Constants are rendered inline (no bind params) so the same expression
    text appears in SELECT and GROUP BY.
    """
    return case(
        (or_(column.is_(None), column == literal_column("''")), literal_column(f"'{UNKNOWN_LABEL}'")),
        else_=column,
    )
