"""Tests for the in-memory product store."""

import pytest

from product_catalog_api.app.core.errors import NotFoundError
from product_catalog_api.app.schemas.product import ProductCreate


def make_fields(name: str = "Pen", category: str = "Stationery") -> ProductCreate:
    return ProductCreate(name=name, description=f"{name} description", price=1.5, category=category, inStock=True)


def test_insert_generates_unique_ids(store):
    first = store.insert(make_fields("Pen"))
    second = store.insert(make_fields("Pen"))
    assert first.id
    assert first.id != second.id
    assert len(store) == 2


def test_find_by_id(store):
    created = store.insert(make_fields())
    assert store.find_by_id(created.id) == created
    assert store.find_by_id("missing") is None


def test_returned_records_are_copies(store):
    created = store.insert(make_fields())
    created.name = "Changed outside the store"
    assert store.find_by_id(created.id).name == "Pen"

    snapshot = store.list_all()
    snapshot[0].name = "Changed again"
    snapshot.clear()
    assert store.find_by_id(created.id).name == "Pen"
    assert len(store) == 1


def test_replace_by_id_keeps_id(store):
    created = store.insert(make_fields("Pen"))
    updated = store.replace_by_id(created.id, make_fields("Pencil", "Office"))
    assert updated.id == created.id
    assert store.find_by_id(created.id).name == "Pencil"
    assert store.find_by_id(created.id).category == "Office"


def test_replace_missing_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.replace_by_id("missing", make_fields())


def test_delete_by_id(store):
    created = store.insert(make_fields())
    store.delete_by_id(created.id)
    assert store.find_by_id(created.id) is None
    with pytest.raises(NotFoundError):
        store.delete_by_id(created.id)


def test_list_all_keeps_insertion_order(store):
    names = ["C", "A", "B"]
    for name in names:
        store.insert(make_fields(name))
    store.replace_by_id(store.list_all()[1].id, make_fields("A2"))
    assert [p.name for p in store.list_all()] == ["C", "A2", "B"]


def test_clear(store):
    store.insert(make_fields())
    store.clear()
    assert store.list_all() == []
