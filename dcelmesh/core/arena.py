"""Slot-based storage keyed by typed handles.

Records are never relocated: removal tombstones the slot (the record's
``deleted`` flag) and pushes its index on a LIFO reuse stack, so the next
``add`` recycles the most recently freed slot before growing storage. Every
other live handle stays valid across adds and removes.

Physical storage is bounded by the peak number of concurrently live records;
there is no compaction.
"""
from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Protocol, Tuple, Type, TypeVar

from .errors import OutOfBoundsError, UseAfterFreeError
from .handles import Handle

__all__ = ['Arena', 'Deletable']


class Deletable(Protocol):
    """Records stored in an Arena expose a boolean tombstone flag."""

    deleted: bool


T = TypeVar('T', bound=Deletable)
H = TypeVar('H', bound=Handle)


class Arena(Generic[T, H]):
    """Generic tombstoning arena.

    Parameters
    ----------
    handle_type : type
        Handle subclass minted by ``add`` (e.g. ``VertexId``).
    name : str, optional
        Label used in error context; defaults to the handle class name.

    Notes
    -----
    ``len(arena)`` counts live records and is tracked explicitly, separately
    from ``allocated`` (physical slots). ``allocated == len(arena) +
    pending_reuse`` always holds.
    """

    def __init__(self, handle_type: Type[H], name: Optional[str] = None):
        self._handle_type = handle_type
        self.name = name or handle_type.__name__
        self._slots: List[T] = []
        self._reuse_stack: List[int] = []
        self._live = 0

    # --- sizes ---
    def __len__(self) -> int:
        return self._live

    @property
    def allocated(self) -> int:
        return len(self._slots)

    @property
    def pending_reuse(self) -> int:
        return len(self._reuse_stack)

    # --- mutation ---
    def add(self, item: T) -> H:
        """Store ``item`` and return its handle. Amortized O(1)."""
        item.deleted = False
        if self._reuse_stack:
            idx = self._reuse_stack.pop()
            self._slots[idx] = item
        else:
            idx = len(self._slots)
            self._slots.append(item)
        self._live += 1
        return self._handle_type(idx)

    def remove(self, handle: H) -> None:
        """Tombstone the slot behind ``handle``; a no-op if it is already removed."""
        idx = handle.index
        if 0 <= idx < len(self._slots) and not self._slots[idx].deleted:
            self._slots[idx].deleted = True
            self._reuse_stack.append(idx)
            self._live -= 1

    # --- access ---
    def get(self, handle: H) -> T:
        """Return the live record behind ``handle``.

        The record itself is returned, so mutating it updates the arena.

        Raises
        ------
        OutOfBoundsError
            If the index is negative or beyond the allocated slots.
        UseAfterFreeError
            If the slot has been removed.
        """
        idx = handle.index
        if idx < 0 or idx >= len(self._slots):
            raise OutOfBoundsError(
                f"{self.name} handle out of bounds",
                {'handle': handle, 'allocated': len(self._slots)})
        item = self._slots[idx]
        if item.deleted:
            raise UseAfterFreeError(f"{self.name} handle refers to a removed slot", {'handle': handle})
        return item

    __getitem__ = get

    def is_live(self, handle: H) -> bool:
        idx = handle.index
        return 0 <= idx < len(self._slots) and not self._slots[idx].deleted

    def __contains__(self, handle) -> bool:
        return isinstance(handle, self._handle_type) and self.is_live(handle)

    # --- iteration (live records only, ascending index) ---
    def items(self) -> Iterator[Tuple[H, T]]:
        for idx, item in enumerate(self._slots):
            if not item.deleted:
                yield self._handle_type(idx), item

    def handles(self) -> Iterator[H]:
        for h, _ in self.items():
            yield h

    def values(self) -> Iterator[T]:
        for _, item in self.items():
            yield item

    def __iter__(self) -> Iterator[H]:
        return self.handles()

    def __repr__(self) -> str:
        return (f'Arena({self.name}, live={self._live}, allocated={len(self._slots)}, '
                f'pending_reuse={len(self._reuse_stack)})')
