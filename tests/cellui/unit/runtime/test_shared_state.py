import threading

from cellui.runtime.shared_state import SharedCell


def test_get_set_and_update() -> None:
    cell = SharedCell("a")
    cell.set("b")
    assert cell.get() == "b"
    assert cell.update(lambda value: value + "c") == "bc"
    assert cell.get() == "bc"


def test_setter_returns_zero_argument_callable() -> None:
    cell = SharedCell("initial")
    store = cell.setter("clicked")
    assert cell.get() == "initial"
    store()
    assert cell.get() == "clicked"


def test_locked_holds_lock_for_block_only() -> None:
    cell = SharedCell(1)
    with cell.locked() as value:
        assert value == 1
        acquired = []
        worker = threading.Thread(target=lambda: acquired.append(cell.get()))
        worker.start()
        worker.join(timeout=0.05)
        assert acquired == []
    worker.join(timeout=1.0)
    assert acquired == [1]


def test_concurrent_updates_are_not_lost() -> None:
    cell = SharedCell(0)

    def _bump() -> None:
        for _ in range(500):
            cell.update(lambda value: value + 1)

    workers = [threading.Thread(target=_bump) for _ in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    assert cell.get() == 2000
