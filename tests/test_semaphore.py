import io

import pytest

from oslabsim.semaphore import BoundedBuffer, BufferEmpty, BufferFull, main


def test_produce_numbers_items_in_sequence():
    buffer = BoundedBuffer()
    assert [buffer.produce() for _ in range(3)] == [1, 2, 3]
    assert len(buffer) == 3


def test_produce_beyond_capacity_raises():
    buffer = BoundedBuffer()
    for _ in range(buffer.capacity):
        buffer.produce()
    with pytest.raises(BufferFull):
        buffer.produce()
    assert len(buffer) == buffer.capacity


def test_consume_empty_raises():
    buffer = BoundedBuffer()
    with pytest.raises(BufferEmpty):
        buffer.consume()
    assert len(buffer) == 0


def test_consume_returns_latest_item():
    buffer = BoundedBuffer(capacity=5)
    produced = [buffer.produce() for _ in range(4)]
    assert buffer.consume() == produced[-1]
    assert buffer.consume() == produced[-2]
    assert len(buffer) == len(produced) - 2


def test_semaphore_counts_stay_balanced():
    buffer = BoundedBuffer(capacity=4)
    for action in ["p", "p", "c", "p", "p", "p", "c"]:
        if action == "p":
            buffer.produce()
        else:
            buffer.consume()
        assert buffer.mutex == 1
        assert buffer.full + buffer.empty == buffer.capacity
        assert buffer.full == len(buffer)


def test_invalid_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedBuffer(capacity=0)


def test_main_reports_empty_then_produces(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n2\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Buffer is empty" in out
    assert "Producer produced item 1" in out
    assert "consumer consumed the item 1" in out


def test_main_reports_full(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 1 1 3"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Buffer is Full" in out
    assert "Producer produced item 3" in out