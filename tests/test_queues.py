import pytest

from algopractice.queues import ArrayQueue, DequeQueue, LinkedQueue, QueueEmptyError


def test_enqueue_front_back():
    for q in (ArrayQueue(), LinkedQueue()):
        for value in (2, 3, 4, 45):
            q.enqueue(value)
        assert q.front() == 2
        assert q.back() == 45


def test_dequeue_order():
    for q in (ArrayQueue(), LinkedQueue()):
        for value in (2, 23, 45, 66):
            q.enqueue(value)
        assert q.dequeue() == 2
        assert q.dequeue() == 23
        assert q.dequeue() == 45


def test_is_empty():
    for q in (ArrayQueue(), LinkedQueue()):
        assert q.is_empty() is True
        q.enqueue(3)
        q.enqueue(4)
        assert q.is_empty() is False


def test_length():
    for q in (ArrayQueue(), LinkedQueue()):
        assert len(q) == 0
        q.enqueue(3)
        q.enqueue(4)
        q.dequeue()
        q.enqueue(22)
        q.enqueue(99)
        q.dequeue()
        q.dequeue()
        assert len(q) == 1
        assert q.front() == 99


@pytest.mark.parametrize("cls", [ArrayQueue, LinkedQueue, DequeQueue])
def test_empty_queue_raises(cls):
    q = cls()
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.front()
    with pytest.raises(QueueEmptyError):
        q.back()


def test_linked_queue_refills_after_emptying():
    q = LinkedQueue()
    q.enqueue(1)
    q.dequeue()
    q.enqueue(7)
    assert q.front() == 7
    assert q.back() == 7


def test_deque_queue_sequence():
    q = DequeQueue()
    q.enqueue("Snap")
    q.enqueue(123)
    q.enqueue(True)
    q.enqueue(212.545454)
    assert len(q) == 4

    assert q.dequeue() == "Snap"
    assert len(q) == 3

    q.dequeue()
    assert q.front() is True

    q.dequeue()
    assert q.back() == 212.545454

    q.enqueue("Snap")
    q.dequeue()
    assert len(q) == 1

    q.dequeue()
    assert q.is_empty() is True