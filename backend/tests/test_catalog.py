import pytest

from storefront.models.domain import Destination
from storefront.storage.catalog import CatalogStore


def test_lookup_by_id():
    catalog = CatalogStore()
    assert catalog.get_by_id(4).title == "Dubai"
    assert catalog.get_by_id(999) is None


def test_all_is_immutable_and_ordered():
    catalog = CatalogStore()
    everything = catalog.all()
    assert isinstance(everything, tuple)
    assert [d.id for d in everything] == [1, 2, 3, 4, 5]


def test_duplicate_ids_rejected():
    dupe = Destination(id=1, title="A", location="B", rating=4.0, description="", price=10)
    with pytest.raises(ValueError):
        CatalogStore([dupe, dupe])
