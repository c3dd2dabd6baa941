"""Building blocks for a process multiplexer emulator: clock, activity vectors, memory, instructions and configuration."""

__version__ = "0.1.0"