"""A small emulated heap handing out integer handles to byte-addressed slices."""

from __future__ import annotations

from dataclasses import dataclass


class HeapError(RuntimeError):
    """Raised for invalid handles, bad indices and exhausted heap space."""


@dataclass
class _Block:
    start: int
    size: int
    free: bool = True


@dataclass
class _Allocation:
    block: _Block
    element_size: int
    count: int


class Heap:
    """A first-fit heap over a fixed amount of raw memory.

    Allocations are arrays of fixed-width unsigned integers; each element
    occupies ``element_size`` bytes and is stored little-endian. Values
    wider than an element are truncated to its width.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("heap size must not be negative")
        self._memory = bytearray(size)
        self._blocks: list[_Block] = [_Block(0, size)]
        self._allocations: dict[int, _Allocation] = {}
        self._next_handle = 1

    def allocate(self, element_size: int = 2) -> int:
        """Allocate room for a single element and return its handle."""
        return self.allocate_array(1, element_size)

    def allocate_array(self, count: int, element_size: int = 2) -> int:
        """Allocate room for ``count`` elements and return the handle."""
        if element_size <= 0:
            raise ValueError("element size must be positive")
        if count < 0:
            raise ValueError("element count must not be negative")
        total = count * element_size

        for block in self._blocks:
            if block.free and block.size >= total:
                handle = self._next_handle
                self._next_handle += 1
                block.free = False
                if block.size > total:
                    self._blocks.append(_Block(block.start + total, block.size - total))
                    block.size = total
                self._allocations[handle] = _Allocation(block, element_size, count)
                return handle

        raise HeapError("Heap is out of memory")

    def free(self, handle: int) -> None:
        """Release the allocation behind ``handle``."""
        allocation = self._lookup(handle)
        allocation.block.free = True
        del self._allocations[handle]

    def get(self, handle: int, index: int) -> int:
        """Return element ``index`` of the allocation behind ``handle``."""
        allocation = self._lookup(handle)
        address = self._address(allocation, index)
        raw = self._memory[address:address + allocation.element_size]
        return int.from_bytes(raw, "little")

    def set(self, handle: int, index: int, value: int) -> None:
        """Store ``value`` as element ``index`` of the allocation behind ``handle``."""
        allocation = self._lookup(handle)
        address = self._address(allocation, index)
        width = allocation.element_size
        masked = value & ((1 << (8 * width)) - 1)
        self._memory[address:address + width] = masked.to_bytes(width, "little")

    def reallocate(self, handle: int, new_count: int) -> int:
        """Resize an allocation to ``new_count`` elements.

        Shrinks and in-place growth keep the handle; otherwise the data is
        copied to a new allocation, the old one is freed and the new handle
        is returned.
        """
        allocation = self._lookup(handle)
        if new_count < 0:
            raise ValueError("element count must not be negative")
        block = allocation.block
        new_size = new_count * allocation.element_size
        old_size = allocation.count * allocation.element_size

        if new_size <= old_size:
            if old_size > new_size:
                self._blocks.append(_Block(block.start + new_size, old_size - new_size))
                block.size = new_size
            allocation.count = new_count
            return handle

        growth = new_size - old_size
        for neighbour in self._blocks:
            if (
                neighbour.free
                and neighbour.start == block.start + block.size
                and neighbour.size >= growth
            ):
                neighbour.start += growth
                neighbour.size -= growth
                if neighbour.size == 0:
                    self._blocks.remove(neighbour)
                block.size = new_size
                allocation.count = new_count
                return handle

        new_handle = self.allocate_array(new_count, allocation.element_size)
        for index in range(allocation.count):
            self.set(new_handle, index, self.get(handle, index))
        self.free(handle)
        return new_handle

    def _lookup(self, handle: int) -> _Allocation:
        try:
            return self._allocations[handle]
        except KeyError:
            raise HeapError("Invalid handle") from None

    @staticmethod
    def _address(allocation: _Allocation, index: int) -> int:
        if not 0 <= index < allocation.count:
            raise HeapError("Index is out of bounds")
        return allocation.block.start + index * allocation.element_size