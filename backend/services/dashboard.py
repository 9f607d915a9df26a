# backend/services/dashboard.py
"""
dashboard.py

Client-side session core for the dashboard.

The raw dataset is fetched once and kept as an immutable snapshot.
Every filter change recomputes all chart datasets from scratch.
The only await point is the fetch (plus the optional chart delay,
which is purely cosmetic).
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from models.record_models import FilterState
from models.visuals_models import ChartLoading, DashboardSnapshot, DerivedDatasets, FacetOptions
from services.data_client import DataFetchError, fetch_all_records
from services.filters import active_filters, facet_options
from services.visuals_engine import build_visuals
from utils import config
from utils.data_store import DataStore

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch data. Please try again later."

FetchRecords = Callable[[], Awaitable[List[Dict[str, Any]]]]


class Dashboard:
    def __init__(
        self,
        fetch_records: Optional[FetchRecords] = None,
        chart_delay: Optional[float] = None,
    ) -> None:
        self._fetch_records = fetch_records or fetch_all_records
        self.chart_delay = config.CHART_DELAY if chart_delay is None else chart_delay

        self.store = DataStore()
        self.filters = FilterState()
        self.loading = False
        self.error: Optional[str] = None
        # Charts show as loading until the first refresh completes
        self.charts_loading = ChartLoading(intensity=True, region=True, likelihood=True, topic=True)

        self._facet_options = FacetOptions()
        self._derived: Optional[DerivedDatasets] = build_visuals((), self.filters)
        self._refresh_generation = 0

    # -----------------------------
    # Loading
    # -----------------------------

    async def load(self) -> None:
        """
        Fetch the full dataset. On failure the previous snapshot stays
        in place and a user-facing error is set.
        """
        self.loading = True
        self._derived = None
        try:
            rows = await self._fetch_records()
            self.store.store_data(rows)
            self.error = None
            self._facet_options = facet_options(self.store.get_data())
            logger.info("Loaded %d records", len(self.store))
        except DataFetchError as e:
            self.error = FETCH_ERROR_MESSAGE
            logger.error("Error fetching data: %s", e)
        finally:
            self.loading = False
            self._recompute()

    # -----------------------------
    # Filters
    # -----------------------------

    def set_filter(self, facet: str, value: Optional[str]) -> None:
        self.filters = self.filters.with_value(facet, value)
        self._mark_charts_loading()
        self._recompute()

    def clear_filter(self, facet: str) -> None:
        self.set_filter(facet, "")

    def clear_filters(self) -> None:
        self.filters = FilterState()
        self._mark_charts_loading()
        self._recompute()

    def _recompute(self) -> None:
        # While a fetch is pending the old snapshot must not feed the charts
        if self.loading:
            self._derived = None
            return
        self._derived = build_visuals(self.store.get_data(), self.filters)

    # -----------------------------
    # Presentation affordance
    # -----------------------------

    def _mark_charts_loading(self) -> int:
        self._refresh_generation += 1
        self.charts_loading = ChartLoading(intensity=True, region=True, likelihood=True, topic=True)
        return self._refresh_generation

    async def refresh_charts(self, delay: Optional[float] = None) -> None:
        """
        Flag every chart as loading for `delay` seconds, then clear the flags.

        Filter changes already raise the flags and cancel any pending clear,
        so the presentation layer awaits this after each change to lower them.
        Only the latest refresh clears the flags.
        """
        generation = self._mark_charts_loading()

        await asyncio.sleep(self.chart_delay if delay is None else delay)

        if generation == self._refresh_generation:
            self.charts_loading = ChartLoading()

    # -----------------------------
    # Read side
    # -----------------------------

    @property
    def derived(self) -> Optional[DerivedDatasets]:
        return self._derived

    @property
    def options(self) -> FacetOptions:
        return self._facet_options

    def snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            loading=self.loading,
            error=self.error,
            filters=self.filters,
            active_filters=active_filters(self.filters),
            facet_options=self._facet_options,
            charts_loading=self.charts_loading,
            derived=self._derived,
        )
