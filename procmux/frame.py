"""A frame of emulated physical memory."""

from __future__ import annotations


class Frame:
    """A fixed-size frame mapping five-digit hex addresses to byte strings."""

    def __init__(self, frame_id: int, size: int) -> None:
        self.frame_id = frame_id
        self.size = size
        self._data: dict[str, str] = {f"{i:05X}": "00" for i in range(size)}

    def read(self, address: str) -> str:
        """Return the byte at ``address``; raises KeyError if out of range."""
        return self._data[address]

    def write(self, address: str, data: str) -> None:
        """Store ``data`` at ``address``; unknown addresses are ignored."""
        if address in self._data:
            self._data[address] = data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self.frame_id == other.frame_id

    def __hash__(self) -> int:
        return hash(self.frame_id)

    def dump(self) -> str:
        """Return the frame contents as text, one address per line."""
        lines = [f"\n\nFrame ID: {self.frame_id}\n\n"]
        lines.extend(f"{address} : {byte}\n" for address, byte in sorted(self._data.items()))
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Frame(frame_id={self.frame_id!r}, size={self.size!r})"