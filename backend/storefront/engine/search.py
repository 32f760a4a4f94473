from __future__ import annotations

import dataclasses
from typing import Iterable, List, Optional

from storefront.core.config import settings
from storefront.models.domain import Destination, FilterState, SearchCriteria, SortOrder

AMENITY_OPTIONS = (
    "Wifi",
    "Kitchen",
    "Air conditioning",
    "Pool",
    "Gym",
    "Heating",
)
SUGGESTION_MIN_LENGTH = 2


def _matches(destination: Destination, needle: str) -> bool:
    return needle in destination.title.lower() or needle in destination.location.lower()


def search(catalog: Iterable[Destination], criteria: SearchCriteria) -> List[Destination]:
    """Case-insensitive match on title or location. An empty query keeps everything."""
    needle = criteria.query.lower()
    return [d for d in catalog if _matches(d, needle)]


def suggest(
    catalog: Iterable[Destination],
    query: str,
    min_length: int = SUGGESTION_MIN_LENGTH,
) -> List[Destination]:
    needle = query.lower()
    if len(needle) < min_length:
        return []
    return [d for d in catalog if _matches(d, needle)]


def filter_and_sort(results: Iterable[Destination], state: FilterState) -> List[Destination]:
    """
    Apply price and amenity filters, then the sort order.

    Callers pass the unfiltered search results every time so that relaxing a
    filter brings excluded destinations back. Amenities are conjunctive: a
    destination must offer every selected amenity. Sorting is stable.
    """
    low, high = state.price_range
    filtered = [
        d
        for d in results
        if low <= d.price <= high and state.selected_amenities <= d.amenities
    ]
    if state.sort == SortOrder.lowest_price:
        filtered.sort(key=lambda d: d.price)
    elif state.sort == SortOrder.top_rated:
        filtered.sort(key=lambda d: d.rating, reverse=True)
    return filtered


def toggle_amenity(state: FilterState, amenity: str) -> FilterState:
    selected = set(state.selected_amenities)
    if amenity in selected:
        selected.discard(amenity)
    else:
        selected.add(amenity)
    return dataclasses.replace(state, selected_amenities=frozenset(selected))


def default_filters() -> FilterState:
    return FilterState(price_range=(0.0, settings.price_range_max))


def reset_filters(state: FilterState, price_max: Optional[float] = None) -> FilterState:
    # sort order survives a reset
    high = settings.price_range_max if price_max is None else price_max
    return FilterState(price_range=(0.0, high), sort=state.sort)
