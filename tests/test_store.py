# tests/test_store.py
import pytest

from catalog.errors import InvalidIdError
from catalog.models import Price, Product
from catalog.store import InMemoryStore


def make_product(name="small-prod"):
    return Product(name=name, description="short-desc", tags=["a"],
                   prices={"USD": Price(1, 1), "GBP": Price(7528, 100)})

def make_product_with_id(pid):
    p = make_product()
    p.id = pid
    return p


def test_empty_store():
    s = InMemoryStore()
    assert s.all_ids() == []
    with pytest.raises(InvalidIdError):
        s.load(0)
    with pytest.raises(InvalidIdError):
        s.load(1)

def test_new_products_get_distinct_ids():
    s = InMemoryStore()
    p1, p2 = make_product(), make_product()
    id1 = s.save(p1)
    id2 = s.save(p2)
    assert id1 != 0 and id2 != 0
    assert id1 != id2
    # the id is set on the saved product too
    assert (p1.id, p2.id) == (id1, id2)
    assert sorted(s.all_ids()) == sorted([id1, id2])

def test_round_trip():
    s = InMemoryStore()
    p = make_product()
    pid = s.save(p)
    loaded = s.load(pid)
    assert loaded == p
    assert loaded.id == pid

def test_unknown_id_rejected():
    s = InMemoryStore()
    s.save(make_product())
    p = make_product()
    p.id = 99
    with pytest.raises(InvalidIdError):
        s.save(p)
    with pytest.raises(InvalidIdError):
        s.load(99)
    # failed save did not touch the store
    assert s.all_ids() == [1]
    assert s.save(make_product()) == 2

def test_saved_product_is_detached():
    s = InMemoryStore()
    p = make_product()
    pid = s.save(p)
    p.name = "changed"
    p.tags.append("b")
    p.prices["USD"].value = 1000
    p.prices["HUF"] = Price(1, 1)

    loaded = s.load(pid)
    assert loaded.name == "small-prod"
    assert loaded.tags == ["a"]
    assert loaded.prices == {"USD": Price(1, 1), "GBP": Price(7528, 100)}

def test_loaded_product_is_detached():
    s = InMemoryStore()
    pid = s.save(make_product())
    loaded = s.load(pid)
    loaded.tags.append("b")
    loaded.prices.pop("GBP")
    assert s.load(pid) == make_product_with_id(pid)

def test_save_replaces_whole_product():
    s = InMemoryStore()
    pid = s.save(make_product())
    replacement = Product(id=pid, name="new", description="new-desc", prices={"USD": Price(5, 1)})
    assert s.save(replacement) == pid
    loaded = s.load(pid)
    assert loaded.tags is None
    assert loaded.prices == {"USD": Price(5, 1)}
    assert s.all_ids() == [pid]

def test_ids_are_never_reused():
    s = InMemoryStore()
    ids = [s.save(make_product()) for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    # overwriting does not mint new ids
    s.save(make_product_with_id(3))
    assert s.save(make_product()) == 6
