"""Aggregation over reconciled transaction records."""

from momo_ledger.analytics.calculator import (
    DirectionBreakdown,
    SumOptions,
    SumResult,
    direction_breakdown,
    sum_by_date,
    sum_by_date_range,
    sum_by_last_days,
    sum_by_month,
    sum_by_type,
)
from momo_ledger.analytics.context import AnalyticsContext
from momo_ledger.analytics.labels import simplify_type

__all__ = [
    "AnalyticsContext",
    "DirectionBreakdown",
    "SumOptions",
    "SumResult",
    "direction_breakdown",
    "simplify_type",
    "sum_by_date",
    "sum_by_date_range",
    "sum_by_last_days",
    "sum_by_month",
    "sum_by_type",
]
