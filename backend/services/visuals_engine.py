# backend/services/visuals_engine.py

from typing import Any, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from models.record_models import FACETS, SCORES, FilterState
from models.visuals_models import DerivedDatasets, IntensityBucket, RegionSlice, TopicSlice
from services.filters import apply_filters
from services.stats_engine import as_score, compute_summary_stats

TOP_N = 10
NO_DATA = "No Data"


# -----------------------------
# Internal helpers
# -----------------------------

def _frame(records: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """
    Build a DataFrame holding just the facet and score columns.
    Missing columns are added as all-None so the reductions never KeyError.
    dtype=object keeps the raw Python values; no numeric inference.
    """
    cols = list(FACETS) + list(SCORES)
    return pd.DataFrame(
        [{c: r.get(c) for c in cols} for r in records],
        columns=cols,
        dtype=object,
    )


def _scores(df: pd.DataFrame, col: str) -> pd.Series:
    return df[col].map(as_score).astype(float)


def _round_half_away(values: pd.Series) -> pd.Series:
    # np.round is banker's rounding; ties go away from zero here.
    # Comparing the fraction avoids the |x| + 0.5 carry just below a tie.
    magnitude = np.abs(values)
    whole = np.floor(magnitude)
    return np.sign(values) * (whole + ((magnitude - whole) >= 0.5))


def _top_counts(df: pd.DataFrame, col: str) -> pd.Series:
    """
    Count rows per label, most frequent first.
    Ties keep the order in which each label was first seen.
    """
    labels = df[col]
    labels = labels[labels.map(lambda v: isinstance(v, str) and v != "").astype(bool)]
    if labels.empty:
        return pd.Series(dtype="int64")

    counts = labels.groupby(labels, sort=False).size()
    return counts.sort_values(ascending=False, kind="stable").head(TOP_N)


# -----------------------------
# Public API
# -----------------------------

def by_intensity(records: Sequence[Mapping[str, Any]]) -> List[IntensityBucket]:
    """
    Histogram of rounded intensity, ascending.
    Records without an intensity are left out; empty buckets are not filled in.
    """
    scores = _scores(_frame(records), "intensity").dropna()
    if scores.empty:
        return []

    # Python ints: no int64 overflow for huge scores
    buckets = _round_half_away(scores).map(int)
    counts = buckets.value_counts().sort_index()

    return [IntensityBucket(intensity=int(k), count=int(v)) for k, v in counts.items()]


def by_region(records: Sequence[Mapping[str, Any]]) -> List[RegionSlice]:
    counts = _top_counts(_frame(records), "region")
    if counts.empty:
        return [RegionSlice(name=NO_DATA, value=0)]
    return [RegionSlice(name=str(k), value=int(v)) for k, v in counts.items()]


def by_topic(records: Sequence[Mapping[str, Any]]) -> List[TopicSlice]:
    counts = _top_counts(_frame(records), "topic")
    if counts.empty:
        return [TopicSlice(topic=NO_DATA, count=0)]
    return [TopicSlice(topic=str(k), count=int(v)) for k, v in counts.items()]


def scatter_points(records: Sequence[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """
    Likelihood (x), relevance (y) and intensity (size) are read straight
    off the records, so the filtered subset is handed over as-is.
    """
    return list(records)


def build_visuals(
    records: Sequence[Mapping[str, Any]],
    filters: Optional[FilterState] = None,
) -> DerivedDatasets:
    """
    Filter the raw dataset and run every chart reduction over the result.
    Pure: the same (records, filters) always yields the same datasets.
    """
    filtered = apply_filters(records, filters or FilterState())

    return DerivedDatasets(
        by_intensity=by_intensity(filtered),
        by_region=by_region(filtered),
        by_topic=by_topic(filtered),
        scatter_points=[dict(r) for r in scatter_points(filtered)],
        summary=compute_summary_stats(filtered),
    )
