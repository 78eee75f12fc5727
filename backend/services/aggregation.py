"""
Aggregation Query Layer - MetricRequest -> SQL aggregate -> GroupedRow list.

All analytics use SQL aggregation; no row-level data leaves the database.

Rules:
- Column names come from the allow-list (validated by MetricRequest)
- The equality filter is always a bound parameter
- Null/empty categories follow the metric's MissingCategoryPolicy
- Rows are returned in database order; this layer never re-sorts
- Currency conversion happens once, in Python, after aggregation
- Database errors are wrapped in QueryFailure and never retried

Usage:
    from services.aggregation import run_metric, rank_keys

    rows = run_metric(get_metric('room_types'))
"""

import logging
import time
from typing import Any, List, Optional

from sqlalchemy import Integer, cast, extract, func, select
from sqlalchemy.exc import SQLAlchemyError

from constants import AED_TO_USD_RATE, DATE_PART_COLUMNS
from db.sql import not_blank, run_select, unknown_if_blank
from models.database import db
from models.transaction import RealEstateTransaction
from services.metrics.base import (
    GroupedRow,
    MetricRequest,
    MissingCategoryPolicy,
    OrderBy,
    QueryFailure,
)

logger = logging.getLogger('aggregation')

COUNT_LABEL = 'row_count'
AVERAGE_LABEL = 'avg_value'


# =============================================================================
# CURRENCY
# =============================================================================

def convert_currency(amount: Optional[float], rate: float = AED_TO_USD_RATE) -> Optional[float]:
    """
    Convert a stored AED amount to USD.

    >>> convert_currency(3670)
    1000.0
    """
    if amount is None:
        return None
    return float(amount) / rate


# =============================================================================
# STATEMENT BUILDER
# =============================================================================

def _date_part(name: str):
    instance_date = RealEstateTransaction.__table__.c.instance_date
    return cast(extract(name, instance_date), Integer)


def _key_expression(name: str, policy: MissingCategoryPolicy):
    """Return (expression, where-conditions) for one grouping column."""
    if name in DATE_PART_COLUMNS:
        return _date_part(name), []

    column = RealEstateTransaction.__table__.c[name]
    if policy == MissingCategoryPolicy.EXCLUDE:
        return column, [not_blank(column)]
    return unknown_if_blank(column), []


def build_statement(request: MetricRequest):
    """
    Build the aggregate SELECT for a request.

    Selected columns, in order: one labelled column per grouping key,
    row_count, and avg_value when the request has a value_column.
    """
    table = RealEstateTransaction.__table__

    key_exprs = []
    conditions = []
    for name in request.grouping_columns:
        expr, key_conditions = _key_expression(name, request.on_missing_category)
        key_exprs.append(expr)
        conditions.extend(key_conditions)

    if request.has_date_key or request.after_year is not None or request.before_year is not None:
        conditions.append(table.c.instance_date.isnot(None))
    if request.after_year is not None:
        conditions.append(_date_part('year') > request.after_year)
    if request.before_year is not None:
        conditions.append(_date_part('year') < request.before_year)

    if request.filter_column is not None and request.filter_value is not None:
        conditions.append(table.c[request.filter_column] == request.filter_value)

    if request.outer_keys is not None:
        conditions.append(key_exprs[0].in_(request.outer_keys))

    labelled_keys = [
        expr.label(name) for expr, name in zip(key_exprs, request.grouping_columns)
    ]
    count_expr = func.count().label(COUNT_LABEL)
    columns = labelled_keys + [count_expr]

    avg_expr = None
    if request.value_column is not None:
        value = table.c[request.value_column]
        if request.positive_values_only:
            conditions.append(value > 0)
        if request.values_required:
            conditions.append(value.isnot(None))
        avg_expr = func.avg(value).label(AVERAGE_LABEL)
        columns.append(avg_expr)

    statement = select(*columns).select_from(table)
    if conditions:
        statement = statement.where(*conditions)
    statement = statement.group_by(*key_exprs)

    if request.having_min_count is not None:
        statement = statement.having(func.count() > request.having_min_count)

    # Keys break ties so repeated calls return identical ordering
    key_order = [label.asc() for label in labelled_keys]
    if request.order_by == OrderBy.METRIC and avg_expr is not None:
        statement = statement.order_by(avg_expr.desc(), *key_order)
    elif request.order_by in (OrderBy.METRIC, OrderBy.COUNT):
        statement = statement.order_by(count_expr.desc(), *key_order)
    else:
        statement = statement.order_by(*key_order)

    if request.limit is not None:
        statement = statement.limit(request.limit)

    return statement


# =============================================================================
# EXECUTION
# =============================================================================

def _to_grouped_row(row, request: MetricRequest, rate: float) -> GroupedRow:
    mapping = row._mapping
    keys = tuple(mapping[name] for name in request.grouping_columns)
    count = int(mapping[COUNT_LABEL] or 0)

    average = None
    if request.value_column is not None:
        raw = mapping[AVERAGE_LABEL]
        average = float(raw) if raw is not None else None
        if request.currency:
            average = convert_currency(average, rate)

    return GroupedRow(keys=keys, count=count, average=average)


def run_metric(request: MetricRequest, rate: float = AED_TO_USD_RATE) -> List[GroupedRow]:
    """
    Execute one aggregate query.

    Args:
        request: The metric to compute
        rate: AED per USD, applied to averages of currency metrics

    Returns:
        GroupedRow list in database order

    Raises:
        QueryFailure: If the database rejects or cannot run the query
    """
    start = time.perf_counter()
    statement = build_statement(request)

    try:
        rows = run_select(db, statement)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("metric_query_failed metric=%s err=%s", request.metric, e)
        raise QueryFailure(request.metric, e) from e

    grouped = [_to_grouped_row(row, request, rate) for row in rows]
    logger.info(
        "metric_query metric=%s rows=%d elapsed_ms=%d",
        request.metric, len(grouped), int((time.perf_counter() - start) * 1000)
    )
    return grouped


def rank_keys(request: MetricRequest) -> List[Any]:
    """
    Run a ranking query and return its first grouping key, in rank order.

    Used as the externally supplied label order of a top-N pivot.
    """
    return [row.key for row in run_metric(request)]
