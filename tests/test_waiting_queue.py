import pytest

from clinicqueue.models import Priority, Ticket
from clinicqueue.waiting_queue import (
    RECORD_SIZE,
    TicketStore,
    WaitingQueue,
    decode_ticket,
    encode_ticket,
)


def make(number, priority=Priority.GENERAL, name="Ana"):
    return Ticket(number, Priority(priority), "Outro", 3, name)


def test_queue_is_fifo():
    queue = WaitingQueue()
    tickets = [make(n) for n in (1, 2, 3)]
    for ticket in tickets:
        queue.push(ticket)
    assert [queue.pop() for _ in range(3)] == tickets
    assert not queue


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        WaitingQueue().pop()


def test_peek_and_after_first():
    queue = WaitingQueue()
    assert queue.peek() is None
    assert queue.after_first() is None
    queue.push(make(1))
    assert queue.peek() == make(1)
    assert queue.after_first() is None
    queue.push(make(2))
    assert queue.after_first() == make(2)
    assert len(queue) == 2


def test_iter_and_clear():
    queue = WaitingQueue()
    queue.push(make(1))
    queue.push(make(2))
    assert [t.number for t in queue] == [1, 2]
    queue.clear()
    assert len(queue) == 0
    assert list(queue) == []


def test_encode_decode_round_trip():
    ticket = Ticket(12, Priority.INFANT, "Pediatra", 7, "João Conceição")
    data = encode_ticket(ticket)
    assert len(data) == RECORD_SIZE
    assert decode_ticket(data) == ticket


def test_decode_wrong_size_raises():
    with pytest.raises(ValueError):
        decode_ticket(b"\0" * (RECORD_SIZE - 1))


def test_encode_too_long_name_raises():
    with pytest.raises(ValueError):
        encode_ticket(make(1, name="x" * 50))


def test_store_missing_file_loads_none(tmp_path):
    assert TicketStore(tmp_path / "fila.dat").load() is None


def test_store_empty_file_loads_none(tmp_path):
    path = tmp_path / "fila.dat"
    path.write_bytes(b"")
    assert TicketStore(path).load() is None


def test_store_round_trip_and_overwrite(tmp_path):
    store = TicketStore(tmp_path / "arquivo" / "fila.dat")
    store.save(make(1, Priority.ELDERLY, "Bia"))
    assert store.load() == make(1, Priority.ELDERLY, "Bia")
    store.save(make(2, Priority.GENERAL, "Caio"))
    assert store.load() == make(2, Priority.GENERAL, "Caio")
    assert store.path.stat().st_size == RECORD_SIZE


def test_store_remove(tmp_path):
    store = TicketStore(tmp_path / "fila.dat")
    store.save(make(1))
    store.remove()
    assert store.load() is None
    store.remove()
    assert not store.path.exists()