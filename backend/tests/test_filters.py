import itertools

import pytest

from models.record_models import FACETS, FilterState
import services.filters as filters_module
from services.filters import active_filters, apply_filters, facet_options, matches


def test_unset_filters_match_everything(sample_rows):
    assert all(matches(r, FilterState()) for r in sample_rows)


def test_active_facet_requires_exact_value():
    rec = {"region": "Asia"}
    assert matches(rec, FilterState(region="Asia"))
    assert not matches(rec, FilterState(region="asia"))
    assert not matches(rec, FilterState(region="Asia "))


@pytest.mark.parametrize("missing", [None, ""])
def test_absent_field_never_matches_active_facet(missing):
    rec = {"topic": "oil", "country": missing}
    assert not matches(rec, FilterState(country="India"))
    assert not matches({"topic": "oil"}, FilterState(country="India"))


def test_matches_is_conjunction_of_facets(sample_rows):
    f = FilterState(topic="oil", pestle="Industries", source="EIA")
    for rec in sample_rows:
        expected = all(
            not f.selected(facet) or rec.get(facet) == f.selected(facet)
            for facet in FACETS
        )
        assert matches(rec, f) is expected


def test_apply_filters_keeps_order_and_is_idempotent(sample_rows):
    f = FilterState(topic="oil")
    once = apply_filters(sample_rows, f)
    assert [r["_id"] for r in once] == ["a1", "a3"]
    assert apply_filters(once, f) == once


def test_filter_state_is_immutable_and_validated():
    f = FilterState()
    g = f.with_value("region", "Asia")
    assert f.region == ""
    assert g.region == "Asia"
    assert g.with_value("region", None).region == ""
    with pytest.raises(ValueError):
        f.with_value("colour", "red")


def test_active_filters_lists_only_selected():
    f = FilterState(region="Asia", source="EIA")
    assert active_filters(f) == {"region": "Asia", "source": "EIA"}
    assert active_filters(FilterState()) == {}


def test_facet_options_sorted_distinct_non_empty(sample_rows):
    opts = facet_options(sample_rows)
    assert opts.topics == ["gas", "oil"]
    assert opts.sectors == ["Energy", "Retail"]
    assert opts.regions == ["Asia", "Northern America"]
    assert opts.countries == ["India", "Mexico", "United States of America"]
    assert opts.sources == ["EIA", "Reuters", "WSJ"]
    assert opts.pestles == ["Economic", "Industries", "Political"]


def test_facet_options_empty_dataset():
    opts = facet_options([])
    assert opts.model_dump() == {
        "topics": [], "sectors": [], "regions": [],
        "pestles": [], "sources": [], "countries": [],
    }


@pytest.mark.parametrize("f", [
    FilterState(topic="oil", sector="Energy", source="EIA"),
    FilterState(region="Asia", country="India"),
    FilterState(pestle="Industries", country="Mexico"),
])
def test_facet_evaluation_order_does_not_change_result(monkeypatch, sample_rows, f):
    rows = list(sample_rows) + [{"topic": "oil"}]
    baseline = [matches(r, f) for r in rows]
    # every 37th permutation of the six facets, reversed order included
    orders = list(itertools.islice(itertools.permutations(FACETS), 0, None, 37))
    orders.append(tuple(reversed(FACETS)))
    for order in orders:
        monkeypatch.setattr(filters_module, "FACETS", order)
        assert [filters_module.matches(r, f) for r in rows] == baseline
