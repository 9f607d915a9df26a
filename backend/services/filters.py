# backend/services/filters.py

from typing import Any, Dict, Iterable, List, Mapping

from models.record_models import FACETS, FACET_OPTION_KEYS, FilterState
from models.visuals_models import FacetOptions


def _facet_value(record: Mapping[str, Any], facet: str) -> Any:
    value = record.get(facet)
    # Empty strings count as absent
    return value if value not in (None, "") else None


def matches(record: Mapping[str, Any], filters: FilterState) -> bool:
    """
    True when the record satisfies every facet selection.
    An unset facet matches anything, including a missing field.
    An active facet needs a present field with exactly the same value.
    """
    for facet in FACETS:
        selected = filters.selected(facet)
        if not selected:
            continue
        value = _facet_value(record, facet)
        if value is None or value != selected:
            return False
    return True


def apply_filters(records: Iterable[Mapping[str, Any]], filters: FilterState) -> List[Mapping[str, Any]]:
    """Filtered subset in input order."""
    return [record for record in records if matches(record, filters)]


def active_filters(filters: FilterState) -> Dict[str, str]:
    return {facet: value for facet, value in filters.as_dict().items() if value}


def facet_options(records: Iterable[Mapping[str, Any]]) -> FacetOptions:
    """
    Distinct non-empty values per facet over the whole raw dataset,
    sorted ascending. Never looks at the current filters.
    """
    seen: Dict[str, set] = {facet: set() for facet in FACETS}

    for record in records:
        if not isinstance(record, Mapping):
            continue
        for facet in FACETS:
            value = _facet_value(record, facet)
            # Only string values can be selected in the controls
            if isinstance(value, str):
                seen[facet].add(value)

    return FacetOptions(**{
        FACET_OPTION_KEYS[facet]: sorted(values)
        for facet, values in seen.items()
    })
