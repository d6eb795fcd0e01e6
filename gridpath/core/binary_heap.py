"""Binary min-heap keyed by a caller supplied scoring function."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar


T = TypeVar("T")


class BinaryHeap(Generic[T]):
    """Min-heap that stores references and scores them lazily.

    The score of an item is looked up through ``score_fn`` every time the
    heap compares it, so callers may change the underlying value and then
    call :meth:`rescore` to move the item into place without reinserting
    it.
    """

    def __init__(self, score_fn: Callable[[T], Any]) -> None:
        self.score_fn = score_fn
        self._content: List[T] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def push(self, item: T) -> None:
        """Add ``item`` and sift it up to its place."""

        self._content.append(item)
        self._sift_up(len(self._content) - 1)

    def pop(self) -> Optional[T]:
        """Remove and return the lowest scored item, ``None`` if empty."""

        if not self._content:
            return None
        result = self._content[0]
        end = self._content.pop()
        if self._content:
            self._content[0] = end
            self._sift_down(0)
        return result

    def peek(self) -> Optional[T]:
        """Return the lowest scored item without removing it."""

        return self._content[0] if self._content else None

    def remove(self, item: T) -> None:
        """Remove ``item`` (matched by identity); no-op if absent."""

        idx = self._index_of(item)
        if idx < 0:
            return
        end = self._content.pop()
        if idx == len(self._content):
            return
        self._content[idx] = end
        self._restore(idx)

    def rescore(self, item: T) -> None:
        """Reposition ``item`` after its score changed.

        A* only ever lowers a score before calling this, which only needs
        a sift towards the root; the direction is still checked so the heap
        stays valid when a score grows.
        """

        idx = self._index_of(item)
        if idx >= 0:
            self._restore(idx)

    def size(self) -> int:
        return len(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def __bool__(self) -> bool:
        return bool(self._content)

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) >= 0

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _index_of(self, item: object) -> int:
        for i, candidate in enumerate(self._content):
            if candidate is item:
                return i
        return -1

    def _restore(self, idx: int) -> None:
        if idx > 0:
            parent = (idx - 1) // 2
            if self.score_fn(self._content[idx]) < self.score_fn(self._content[parent]):
                self._sift_up(idx)
                return
        self._sift_down(idx)

    def _sift_up(self, idx: int) -> None:
        content = self._content
        item = content[idx]
        score = self.score_fn(item)
        while idx > 0:
            parent_idx = (idx - 1) // 2
            parent = content[parent_idx]
            if score >= self.score_fn(parent):
                break
            content[parent_idx] = item
            content[idx] = parent
            idx = parent_idx

    def _sift_down(self, idx: int) -> None:
        content = self._content
        length = len(content)
        item = content[idx]
        score = self.score_fn(item)
        while True:
            left = 2 * idx + 1
            right = left + 1
            swap = -1
            best = score
            if left < length:
                left_score = self.score_fn(content[left])
                if left_score < best:
                    swap = left
                    best = left_score
            if right < length:
                if self.score_fn(content[right]) < best:
                    swap = right
            if swap < 0:
                break
            content[idx] = content[swap]
            content[swap] = item
            idx = swap


__all__ = ["BinaryHeap"]
