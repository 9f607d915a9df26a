# backend/services/stats_engine.py

import math
from typing import Any, Mapping, Sequence

import pandas as pd

from models.stats_models import SummaryStats


def as_score(value: Any) -> float:
    """
    Finite real numbers pass through as floats. Everything else
    (None, "", text, booleans, NaN, inf) is missing and comes back as NaN.
    """
    # "" is missing here rather than 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return math.nan
    value = float(value)
    return value if math.isfinite(value) else math.nan


def _mean_over_all(records: Sequence[Mapping[str, Any]], field: str) -> float:
    """
    Missing scores add 0 to the total but still count in the denominator.
    With no records at all the result is 0/0, i.e. NaN.
    """
    count = len(records)
    if count == 0:
        return math.nan

    scores = pd.Series([as_score(r.get(field)) for r in records], dtype="float64")
    return float(scores.fillna(0).sum()) / count


def compute_summary_stats(records: Sequence[Mapping[str, Any]]) -> SummaryStats:
    return SummaryStats(
        total_records=len(records),
        avg_intensity=_mean_over_all(records, "intensity"),
        avg_relevance=_mean_over_all(records, "relevance"),
        avg_likelihood=_mean_over_all(records, "likelihood"),
    )
