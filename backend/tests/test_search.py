from storefront.core.config import settings
from storefront.engine.search import (
    default_filters,
    filter_and_sort,
    reset_filters,
    search,
    suggest,
    toggle_amenity,
)
from storefront.models.domain import Destination, FilterState, SearchCriteria, SortOrder
from storefront.storage.catalog import CatalogStore


def _destination(id, title, price, rating=4.5, amenities=(), location="Somewhere"):
    return Destination(
        id=id,
        title=title,
        location=location,
        rating=rating,
        description="",
        price=price,
        amenities=frozenset(amenities),
    )


CATALOG = CatalogStore()


def test_query_matches_title_or_location_case_insensitively():
    titles = [d.title for d in search(CATALOG.all(), SearchCriteria(query="dub"))]
    assert titles == ["Dubai"]

    by_location = search(CATALOG.all(), SearchCriteria(query="PARIS"))
    assert [d.title for d in by_location] == ["Europe"]


def test_empty_query_returns_full_catalog_in_order():
    assert search(CATALOG.all(), SearchCriteria(query="")) == list(CATALOG.all())


def test_no_match_is_empty_list():
    assert search(CATALOG.all(), SearchCriteria(query="atlantis")) == []


def test_suggestions_need_two_characters():
    assert suggest(CATALOG.all(), "d") == []
    assert [d.title for d in suggest(CATALOG.all(), "du")] == ["Dubai"]


def test_amenity_filter_is_conjunctive():
    pool_only = _destination(1, "A", 100, amenities={"Wifi", "Pool"})
    gym_too = _destination(2, "B", 100, amenities={"Wifi", "Gym", "Pool"})
    state = FilterState(selected_amenities=frozenset({"Wifi", "Gym"}))

    assert filter_and_sort([pool_only, gym_too], state) == [gym_too]


def test_price_range_is_inclusive():
    items = [_destination(1, "A", 100), _destination(2, "B", 200), _destination(3, "C", 201)]
    state = FilterState(price_range=(100, 200))
    assert [d.id for d in filter_and_sort(items, state)] == [1, 2]


def test_widening_price_range_restores_hidden_destinations():
    results = search(CATALOG.all(), SearchCriteria(query=""))
    narrow = filter_and_sort(results, FilterState(price_range=(0, 150)))
    assert [d.title for d in narrow] == ["Thailand", "Bali"]

    wide = filter_and_sort(results, FilterState(price_range=(0, 1000)))
    assert wide == results


def test_lowest_price_sort_ascending():
    items = [_destination(1, "A", 300), _destination(2, "B", 90), _destination(3, "C", 450)]
    state = FilterState(sort=SortOrder.lowest_price)
    assert [d.price for d in filter_and_sort(items, state)] == [90, 300, 450]


def test_recommended_keeps_input_order():
    items = [_destination(1, "A", 300), _destination(2, "B", 90), _destination(3, "C", 450)]
    assert filter_and_sort(items, FilterState()) == items


def test_top_rated_sort_is_stable_on_ties():
    items = [
        _destination(1, "A", 100, rating=4.8),
        _destination(2, "B", 100, rating=5.0),
        _destination(3, "C", 100, rating=4.8),
        _destination(4, "D", 100, rating=5.0),
    ]
    state = FilterState(sort=SortOrder.top_rated)
    assert [d.id for d in filter_and_sort(items, state)] == [2, 4, 1, 3]


def test_filter_does_not_mutate_input():
    items = [_destination(1, "A", 300), _destination(2, "B", 90)]
    filter_and_sort(items, FilterState(sort=SortOrder.lowest_price))
    assert [d.id for d in items] == [1, 2]


def test_toggle_and_reset_filters():
    state = toggle_amenity(FilterState(sort=SortOrder.top_rated), "Pool")
    assert state.selected_amenities == {"Pool"}
    assert toggle_amenity(state, "Pool").selected_amenities == frozenset()

    narrowed = FilterState(price_range=(0, 100), selected_amenities=frozenset({"Gym"}), sort=SortOrder.top_rated)
    reset = reset_filters(narrowed)
    assert reset.price_range == (0.0, 1000.0)
    assert reset.selected_amenities == frozenset()
    assert reset.sort == SortOrder.top_rated


def test_query_whitespace_is_matched_literally():
    titles = [d.title for d in search(CATALOG.all(), SearchCriteria(query=" "))]
    assert titles == ["Europe", "New York City", "Dubai"]


def test_suggestions_keep_leading_whitespace():
    assert [d.title for d in suggest(CATALOG.all(), " d")] == ["Dubai"]
    assert suggest(CATALOG.all(), " ") == []


def test_reset_uses_configured_price_max(monkeypatch):
    monkeypatch.setattr(settings, "price_range_max", 750.0)
    narrowed = FilterState(price_range=(0, 100), sort=SortOrder.lowest_price)

    assert reset_filters(narrowed).price_range == (0.0, 750.0)
    assert default_filters().price_range == (0.0, 750.0)
