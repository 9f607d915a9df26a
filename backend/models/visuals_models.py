from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from models.record_models import FilterState
from models.stats_models import SummaryStats


class IntensityBucket(BaseModel):
    intensity: int
    count: int


class RegionSlice(BaseModel):
    name: str
    value: int


class TopicSlice(BaseModel):
    topic: str
    count: int


class FacetOptions(BaseModel):
    topics: List[str] = []
    sectors: List[str] = []
    regions: List[str] = []
    pestles: List[str] = []
    sources: List[str] = []
    countries: List[str] = []


class DerivedDatasets(BaseModel):
    by_intensity: List[IntensityBucket]
    by_region: List[RegionSlice]
    by_topic: List[TopicSlice]
    scatter_points: List[Dict[str, Any]]
    summary: SummaryStats


class ChartLoading(BaseModel):
    intensity: bool = False
    region: bool = False
    likelihood: bool = False
    topic: bool = False


class DashboardSnapshot(BaseModel):
    loading: bool
    error: Optional[str] = None
    filters: FilterState
    active_filters: Dict[str, str]
    facet_options: FacetOptions
    charts_loading: ChartLoading
    derived: Optional[DerivedDatasets] = None
