# backend/models/record_models.py

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

# Categorical fields usable as filter keys, in display order
FACETS = ("topic", "sector", "region", "pestle", "source", "country")

# Numeric scores carried by each record
SCORES = ("intensity", "likelihood", "relevance")

# Plural keys used for the select-control option lists
FACET_OPTION_KEYS = {
    "topic": "topics",
    "sector": "sectors",
    "region": "regions",
    "pestle": "pestles",
    "source": "sources",
    "country": "countries",
}


class Record(BaseModel):
    """
    One row of the dataset. Nothing is required; unknown keys pass through.
    Scores stay loosely typed because the source data mixes numbers and "".
    """
    model_config = ConfigDict(extra="allow")

    topic: Optional[str] = None
    sector: Optional[str] = None
    region: Optional[str] = None
    pestle: Optional[str] = None
    source: Optional[str] = None
    country: Optional[str] = None

    intensity: Optional[Union[int, float, str]] = None
    likelihood: Optional[Union[int, float, str]] = None
    relevance: Optional[Union[int, float, str]] = None


class FilterState(BaseModel):
    """
    Selected value per facet. "" means no restriction.
    Frozen: every change produces a new state.
    """
    model_config = ConfigDict(frozen=True)

    topic: str = ""
    sector: str = ""
    region: str = ""
    pestle: str = ""
    source: str = ""
    country: str = ""

    def with_value(self, facet: str, value: Optional[str]) -> "FilterState":
        if facet not in FACETS:
            raise ValueError(f"Unknown facet: {facet!r}")
        return self.model_copy(update={facet: value or ""})

    def selected(self, facet: str) -> str:
        if facet not in FACETS:
            raise ValueError(f"Unknown facet: {facet!r}")
        return getattr(self, facet)

    def as_dict(self) -> Dict[str, str]:
        return {facet: getattr(self, facet) for facet in FACETS}
