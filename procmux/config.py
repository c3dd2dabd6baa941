"""Reading the emulator configuration file."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_UINT32_MAX = 0xFFFFFFFF
_MAX_CORES = 128
_NUMBER = re.compile(r"\s*\+?(\d+)")


class ConfigError(ValueError):
    """Raised when the configuration text cannot be read."""


@dataclass
class Configuration:
    """Settings for the emulated CPU.

    Memory sizes are held as base-two exponents: a value of 6 means 64 bytes.
    """

    batch_process_frequency: int = 1
    core_count: int = 1
    delay_per_instruction_execution: int = 0
    maximum_instructions: int = 1
    minimum_instructions: int = 1
    quantum_cycle: int = 1
    scheduler_algorithm: str = "FCFS"
    maximum_memory_per_process: int = 6
    maximum_overall_memory: int = 6
    memory_per_frame: int = 6
    minimum_memory_per_process: int = 6


def tokenize(line: str, delimiter: str) -> list[str]:
    """Split ``line`` on ``delimiter``, dropping a trailing empty piece."""
    if not line:
        return []
    pieces = line.split(delimiter)
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def _unsigned(text: str) -> int:
    match = _NUMBER.match(text)
    if match is None:
        raise ConfigError(f"expected an unsigned number, got {text!r}")
    return int(match.group(1))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _power_of_two_exponent(text: str) -> int:
    value = _unsigned(text)
    if value == 0 or value & (value - 1):
        raise ConfigError("Value must be a power of 2")
    return value.bit_length() - 1


def _value(tokens: list[str]) -> str:
    if len(tokens) < 2:
        raise ConfigError(f"missing value for {tokens[0]!r}")
    return tokens[1]


# key -> (field, fallback when too many tokens, converter)
_NUMERIC_KEYS = {
    "batch-process-frequency": (
        "batch_process_frequency", 1, lambda s: _clamp(_unsigned(s), 1, _UINT32_MAX)),
    "num-cores": (
        "core_count", 1, lambda s: _clamp(_unsigned(s), 1, _MAX_CORES)),
    "delay-per-execution": (
        "delay_per_instruction_execution", 0, lambda s: _clamp(_unsigned(s), 0, _UINT32_MAX)),
    "maximum-instructions": (
        "maximum_instructions", 1, lambda s: _clamp(_unsigned(s), 1, _UINT32_MAX)),
    "minimum-instructions": (
        "minimum_instructions", 1, lambda s: _clamp(_unsigned(s), 0, _UINT32_MAX)),
    "quantum-cycles": (
        "quantum_cycle", 1, lambda s: _clamp(_unsigned(s), 1, _UINT32_MAX)),
    "maximum-memory-per-process": (
        "maximum_memory_per_process", 6, _power_of_two_exponent),
    "maximum-overall-memory": (
        "maximum_overall_memory", 6, _power_of_two_exponent),
    "memory-per-frame": (
        "memory_per_frame", 6, _power_of_two_exponent),
    "minimum-memory-per-process": (
        "minimum_memory_per_process", 6, _power_of_two_exponent),
    "scheduling-alogrithm": (
        "scheduler_algorithm", "FCFS", lambda s: "RR" if s == "RR" else "FCFS"),
}


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_config(text: str) -> Configuration:
    """Build a Configuration from the text of a configuration file.

    Each line is ``key value``; unknown keys are ignored and a line with
    more than one value resets its setting to the fallback. Raises
    ConfigError for empty lines, missing or non-numeric values and memory
    sizes that are not powers of two.
    """
    config = Configuration()
    for line in _lines(text):
        tokens = tokenize(line, " ")
        if not tokens:
            raise ConfigError("empty line in configuration")
        entry = _NUMERIC_KEYS.get(tokens[0])
        if entry is None:
            continue
        field, fallback, convert = entry
        if len(tokens) > 2:
            setattr(config, field, fallback)
            continue
        setattr(config, field, convert(_value(tokens)))
    return config


def read_config(path: Union[str, Path] = "config.txt") -> Configuration:
    """Read the configuration file at ``path``.

    A file that cannot be opened yields the default configuration after a
    message on standard error.
    """
    try:
        text = Path(path).read_text()
    except OSError:
        print("ERROR: Config.txt was not opened", file=sys.stderr)
        return Configuration()
    return parse_config(text)


def format_config(config: Configuration) -> str:
    """Return the main scheduling settings, one per line."""
    values = (
        config.batch_process_frequency,
        config.core_count,
        config.delay_per_instruction_execution,
        config.maximum_instructions,
        config.minimum_instructions,
        config.quantum_cycle,
        config.scheduler_algorithm,
    )
    return "".join(f"{value}\n" for value in values)