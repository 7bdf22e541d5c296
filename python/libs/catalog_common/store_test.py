import threading

from catalog_common.models import ProductUpdate
from catalog_common.store import ProductStore


def test_create_assigns_sequential_ids():
    store = ProductStore()
    first = store.create(nome="A", preco=1, quantidade=1)
    second = store.create(nome="B", preco=2, quantidade=2)
    assert (first.id, second.id) == (1, 2)
    assert [p.nome for p in store.list()] == ["A", "B"]


def test_find_by_id_missing_returns_none():
    store = ProductStore()
    store.create(nome="A")
    assert store.find_by_id(99) is None
    assert store.find_by_id(None) is None


def test_update_overwrites_every_field():
    store = ProductStore()
    product = store.create(nome="A", preco=1, quantidade=1, imagem="/uploads/a.png")
    updated = store.update(product.id, ProductUpdate(nome="B"))
    assert updated is not None
    assert updated.nome == "B"
    assert updated.preco is None
    assert updated.quantidade is None
    assert updated.imagem is None


def test_update_missing_returns_none():
    assert ProductStore().update(1, ProductUpdate(nome="X")) is None


def test_remove_by_id():
    store = ProductStore()
    product = store.create(nome="A")
    assert store.remove_by_id(product.id) is True
    assert store.remove_by_id(product.id) is False
    assert store.list() == []


def test_ids_are_reused_after_delete():
    store = ProductStore()
    store.create(nome="A")
    second = store.create(nome="B")
    store.remove_by_id(1)
    third = store.create(nome="C")
    # length + 1 after the delete collides with the surviving record.
    assert third.id == 2 == second.id


def test_monotonic_ids_never_repeat():
    store = ProductStore(monotonic_ids=True)
    first = store.create(nome="A")
    store.remove_by_id(first.id)
    second = store.create(nome="B")
    assert second.id == 2


def test_concurrent_creates_get_distinct_ids():
    store = ProductStore()

    def worker():
        for _ in range(50):
            store.create(nome="x")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [p.id for p in store.list()]
    assert len(ids) == 400
    assert len(set(ids)) == 400

