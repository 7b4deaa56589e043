import logging
import pytest
from cutter.engine import Engine
from cutter.models import ReferenceEntry
from cutter.errors import TableUnavailable
from cutter.DB.memory_store import MemoryStore


class CountingStore(MemoryStore):
    def __init__(self, seed):
        super().__init__(seed)
        self.loads: list[str] = []

    def load_partition(self, partition):
        self.loads.append(partition)
        return super().load_partition(partition)


def _store() -> CountingStore:
    return CountingStore({
        "t": [ReferenceEntry("T", "Taylor", "3"), ReferenceEntry("T", "Thomas, J.", "36")],
    })


@pytest.mark.e2e
def test_partition_is_loaded_once_and_reused():
    store = _store()
    eng = Engine(store)
    try:
        eng.lookup("Thompson"); eng.lookup("Tanner"); eng.lookup("thomas")
        assert store.loads == ["t"]
        assert len(eng.cache) == 1
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_failed_load_is_not_cached_and_is_retried_next_call():
    store = _store()
    eng = Engine(store)
    try:
        for _ in range(2):
            with pytest.raises(TableUnavailable):
                eng.lookup("Brown")
        assert store.loads == ["b", "b"]
        assert "b" not in eng.cache
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_shutdown_releases_store_and_cache():
    eng = Engine(_store())
    eng.lookup("Thompson")
    eng.shutdown()
    assert len(eng.cache) == 0
    with pytest.raises(RuntimeError):
        eng.lookup("Thompson")


@pytest.mark.e2e
def test_failed_load_is_logged_with_partition_name(caplog):
    eng = Engine(_store())
    try:
        with caplog.at_level(logging.ERROR, logger="cutter.engine"):
            with pytest.raises(TableUnavailable):
                eng.lookup("Brown")
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].getMessage().startswith("Error loading cutter table b:")
    finally:
        eng.shutdown()
