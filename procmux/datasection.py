"""The data section of an emulated process: 16-bit named variables."""

from __future__ import annotations

_WORD_MASK = 0xFFFF


class DataSection:
    """Named 16-bit variables, split into initialized and uninitialized."""

    def __init__(self) -> None:
        self._initialized: dict[str, int] = {}
        self._uninitialized: dict[str, int] = {}

    def add_initialized(self, name: str, data: int) -> None:
        """Add ``name`` with ``data`` unless the name already exists."""
        if name not in self:
            self._initialized[name] = data & _WORD_MASK

    def add_uninitialized(self, name: str) -> None:
        """Add ``name`` without a value unless the name already exists."""
        if name not in self:
            self._uninitialized[name] = 0

    def __contains__(self, name: object) -> bool:
        return name in self._initialized or name in self._uninitialized

    def get(self, name: str) -> int:
        """Return the value of ``name``; uninitialized variables read as 0."""
        if name in self._initialized:
            return self._initialized[name]
        if name in self._uninitialized:
            return 0
        raise KeyError(f"variable not found in data section: {name}")

    def update(self, name: str, data: int) -> None:
        """Set ``name`` to ``data``, moving it to the initialized variables."""
        if name in self._initialized:
            self._initialized[name] = data & _WORD_MASK
            return
        if name in self._uninitialized:
            del self._uninitialized[name]
            self._initialized[name] = data & _WORD_MASK
            return
        raise KeyError(f"variable not found in data section: {name}")