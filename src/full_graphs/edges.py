"""
Edge Buffer Module
==================

This module provides ``EdgeBuffer``, the growable integer sequence the
generators accumulate edges in before handing them to the graph builder.

Edges are stored flat, two integers per edge: ``[s0, t0, s1, t1, ...]``.
Storage is a numpy array that can be reserved up front, so a generator
that knows its exact edge count allocates once and never reallocates
while filling.

The buffer is a scoped resource: use it as a context manager and its
storage is released on every exit path, including exceptions.

Examples
--------
>>> with EdgeBuffer(4) as buf:
...     buf.append_edge(0, 1)
...     buf.append_edge(1, 0)
...     buf.to_array().tolist()
[0, 1, 1, 0]
"""

import logging
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from . import config
from .errors import AllocationFailure, IndexOutOfRange, InvalidArgument

logger = logging.getLogger(__name__)


class EdgeBuffer:
    """
    Growable, pre-sizable sequence of vertex indices.

    Parameters
    ----------
    capacity : int, optional
        Number of integers to reserve immediately (default: 0)
    dtype : str, optional
        Integer type of the storage (default: ``buffer.dtype`` from the config)
    """

    def __init__(self, capacity: int = 0, dtype: Optional[str] = None):
        self._dtype = np.dtype(dtype or config.get_edge_dtype())
        self._data: Optional[NDArray[np.int64]] = np.empty(0, dtype=self._dtype)
        self._size = 0
        if capacity:
            self.reserve(capacity)

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------

    def __enter__(self) -> "EdgeBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    @property
    def released(self) -> bool:
        return self._data is None

    def release(self) -> None:
        """Drop the storage. Calling it again is a no-op."""
        if self._data is None:
            return
        logger.debug(f"Releasing edge buffer: size={self._size}, capacity={len(self._data)}")
        self._data = None
        self._size = 0

    def _storage(self) -> NDArray[np.int64]:
        if self._data is None:
            raise InvalidArgument("Edge buffer has already been released")
        return self._data

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._storage())

    def size(self) -> int:
        """Number of integers written so far."""
        self._storage()
        return self._size

    def __len__(self) -> int:
        return self.size()

    def reserve(self, capacity: int) -> None:
        """
        Make room for at least ``capacity`` integers.

        Existing content is kept; the buffer never shrinks.

        Raises
        ------
        InvalidArgument
            If ``capacity`` is negative
        AllocationFailure
            If ``capacity`` exceeds the configured ceiling or numpy cannot
            allocate it
        """
        data = self._storage()
        capacity = int(capacity)
        if capacity < 0:
            logger.error(f"Negative edge buffer capacity requested: {capacity}")
            raise InvalidArgument(f"Buffer capacity must be non-negative, got {capacity}")
        if capacity <= len(data):
            return

        limit = config.get_max_edge_values()
        if capacity > limit:
            logger.error(f"Edge buffer capacity {capacity} exceeds limit {limit}")
            raise AllocationFailure(
                f"Cannot reserve {capacity} values (limit is {limit})",
                requested=capacity,
            )

        try:
            grown = np.empty(capacity, dtype=self._dtype)
        except (MemoryError, ValueError) as e:
            logger.error(f"Edge buffer allocation of {capacity} values failed: {e}")
            raise AllocationFailure(
                f"Cannot allocate {capacity} values", requested=capacity
            ) from e

        grown[: self._size] = data[: self._size]
        self._data = grown
        logger.debug(f"Reserved edge buffer capacity: {capacity}")

    def _ensure(self, needed: int) -> None:
        capacity = self.capacity
        if needed <= capacity:
            return
        # Double, capped at the ceiling
        target = max(needed, 2 * capacity)
        target = max(needed, min(target, config.get_max_edge_values()))
        self.reserve(target)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def append(self, value: int) -> None:
        """Append a single integer."""
        self._ensure(self._size + 1)
        self._data[self._size] = value
        self._size += 1

    def append_edge(self, source: int, target: int) -> None:
        """Append both endpoints of one edge."""
        self._ensure(self._size + 2)
        self._data[self._size] = source
        self._data[self._size + 1] = target
        self._size += 2

    def write_row(self, offset: int, source: int, targets: range) -> int:
        """
        Write the edges ``(source, t)`` for every ``t`` in ``targets``.

        Writes go directly into reserved storage starting at ``offset``;
        the buffer does not grow. The written size is extended to cover
        the row.

        Returns
        -------
        int
            Offset just past the written row
        """
        data = self._storage()
        end = offset + 2 * len(targets)
        if offset < 0 or end > len(data):
            raise IndexOutOfRange(
                f"Row [{offset}, {end}) outside reserved capacity {len(data)}",
                position=offset,
            )
        data[offset:end:2] = source
        data[offset + 1:end:2] = np.arange(
            targets.start, targets.stop, targets.step, dtype=self._dtype
        )
        self._size = max(self._size, end)
        return end

    def append_row(self, source: int, targets: range) -> None:
        """Append the edges ``(source, t)`` for every ``t`` in ``targets``."""
        self._ensure(self._size + 2 * len(targets))
        self.write_row(self._size, source, targets)

    def __getitem__(self, index: Union[int, slice]):
        return self.view()[index]

    def __setitem__(self, index: int, value: int) -> None:
        data = self._storage()
        if not -self._size <= index < self._size:
            raise IndexOutOfRange(
                f"Index {index} outside buffer of size {self._size}", position=index
            )
        if index < 0:
            index += self._size
        data[index] = value

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def view(self) -> NDArray[np.int64]:
        """Read-only view of the written values."""
        view = self._storage()[: self._size]
        view.flags.writeable = False
        return view

    def to_array(self) -> NDArray[np.int64]:
        """Copy of the written values, independent of the buffer's lifetime."""
        return self._storage()[: self._size].copy()

    def pairs(self) -> NDArray[np.int64]:
        """Written values as an ``(m, 2)`` array of ``(source, target)`` rows."""
        return self.view().reshape(-1, 2)

    def __repr__(self) -> str:
        if self.released:
            return "EdgeBuffer(released)"
        return f"EdgeBuffer(size={self._size}, capacity={len(self._data)})"


__all__ = ["EdgeBuffer"]
