"""Unit tests for the indexed max-priority queue."""

from __future__ import annotations

import random

import pytest

from transitive_trust.propagation import IndexedMaxPriorityQueue


def drain(queue: IndexedMaxPriorityQueue[str]) -> list[tuple[str, float]]:
    """Extract every entry in priority order."""
    items = []
    while not queue.is_empty():
        items.append(queue.extract_max())
    return items


def assert_index_consistent(queue: IndexedMaxPriorityQueue[str]) -> None:
    """The key -> position map must match the heap array."""
    heap = queue._heap
    assert len(queue._index) == len(heap)
    for position, (key, _) in enumerate(heap):
        assert queue._index[key] == position
    for position in range(1, len(heap)):
        assert heap[(position - 1) // 2][1] >= heap[position][1]


class TestInsertAndExtract:
    """Tests for insert / extract_max."""

    def test_empty_queue(self) -> None:
        """A new queue is empty and extract_max signals it with None."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        assert queue.is_empty()
        assert len(queue) == 0
        assert queue.extract_max() is None
        assert queue.peek() is None

    def test_extracts_in_descending_priority(self) -> None:
        """Entries come out highest priority first."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        for key, priority in [("a", 0.3), ("b", 0.9), ("c", 0.1), ("d", 0.5)]:
            queue.insert(key, priority)

        assert [key for key, _ in drain(queue)] == ["b", "d", "a", "c"]

    def test_extract_returns_priority(self) -> None:
        """extract_max returns the (key, priority) pair."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        queue.insert("a", 0.4)
        assert queue.extract_max() == ("a", 0.4)
        assert queue.is_empty()

    def test_duplicate_insert_rejected(self) -> None:
        """Each key may be queued once."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        queue.insert("a", 0.4)
        with pytest.raises(ValueError, match="already in queue"):
            queue.insert("a", 0.7)
        assert len(queue) == 1

    def test_key_can_be_reinserted_after_extraction(self) -> None:
        """Extraction removes the key from the index."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        queue.insert("a", 0.4)
        queue.extract_max()
        assert "a" not in queue
        queue.insert("a", 0.2)
        assert "a" in queue

    def test_negative_priorities(self) -> None:
        """Priorities are plain numbers; negatives order correctly."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        queue.insert("a", -0.5)
        queue.insert("b", 0.0)
        queue.insert("c", -0.1)
        assert [key for key, _ in drain(queue)] == ["b", "c", "a"]


class TestUpdatePriority:
    """Tests for update_priority."""

    def test_increase_moves_key_to_front(self) -> None:
        """Raising a priority sifts the entry up."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        for key, priority in [("a", 0.1), ("b", 0.5), ("c", 0.3)]:
            queue.insert(key, priority)

        queue.update_priority("a", 0.9)

        assert queue.extract_max() == ("a", 0.9)
        assert_index_consistent(queue)

    def test_decrease_moves_key_back(self) -> None:
        """Lowering a priority sifts the entry down."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        for key, priority in [("a", 0.9), ("b", 0.5), ("c", 0.3)]:
            queue.insert(key, priority)

        queue.update_priority("a", 0.0)

        assert [key for key, _ in drain(queue)] == ["b", "c", "a"]

    def test_unknown_key_is_noop(self) -> None:
        """Updating a key that is not queued changes nothing."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        queue.insert("a", 0.5)

        queue.update_priority("missing", 1.0)

        assert len(queue) == 1
        assert "missing" not in queue
        assert queue.peek() == ("a", 0.5)

    def test_extracted_key_is_noop(self) -> None:
        """Keys already extracted are no longer updatable."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        queue.insert("a", 0.5)
        queue.insert("b", 0.2)
        queue.extract_max()

        queue.update_priority("a", 1.0)

        assert queue.extract_max() == ("b", 0.2)
        assert queue.is_empty()

    def test_same_priority_keeps_position(self) -> None:
        """An unchanged priority leaves the heap as it was."""
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        for key, priority in [("a", 0.9), ("b", 0.5), ("c", 0.3)]:
            queue.insert(key, priority)
        before = list(queue._heap)

        queue.update_priority("b", 0.5)

        assert queue._heap == before


class TestHeapInvariants:
    """Randomized operation sequences keep heap and index in step."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_random_operations_match_reference(self, seed: int) -> None:
        """Compare against a dict-backed reference under random operations."""
        rng = random.Random(seed)
        queue: IndexedMaxPriorityQueue[str] = IndexedMaxPriorityQueue()
        reference: dict[str, float] = {}
        counter = 0

        for _ in range(300):
            op = rng.random()
            if op < 0.4:
                key = f"n{counter}"
                counter += 1
                priority = rng.random()
                queue.insert(key, priority)
                reference[key] = priority
            elif op < 0.8 and reference:
                key = rng.choice(sorted(reference))
                priority = rng.random()
                queue.update_priority(key, priority)
                reference[key] = priority
            elif reference:
                key, priority = queue.extract_max()
                assert priority == max(reference.values())
                assert reference.pop(key) == priority
            assert_index_consistent(queue)

        assert len(queue) == len(reference)
        priorities = [priority for _, priority in drain(queue)]
        assert priorities == sorted(reference.values(), reverse=True)
