"""Instructions executed by the emulated processes."""

from __future__ import annotations

import copy
from enum import Enum, auto
from typing import Union

_WORD_MASK = 0xFFFF


class InstructionType(Enum):
    """The kinds of instruction the system can perform."""

    UNSET = auto()
    ADD = auto()
    DECLARE = auto()
    FOR = auto()
    PRINT = auto()
    READ = auto()
    SLEEP = auto()
    SUBTRACT = auto()
    WRITE = auto()


class ParameterCombination(Enum):
    """How the two operands of an arithmetic instruction were given."""

    VARIABLE = auto()
    LITERAL = auto()
    MIXED = auto()


class InstructionError(RuntimeError):
    """Raised when an operand is asked for that the instruction does not use."""


class Instruction:
    """Base class for all instructions."""

    instruction_type: InstructionType = InstructionType.UNSET

    def clone(self) -> "Instruction":
        """Return an independent copy of the instruction."""
        return copy.deepcopy(self)


Operand = Union[str, int]


def _is_literal(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AddInstruction(Instruction):
    """ADD: store the sum of two operands in ``destination``.

    Operands are two variable names, two 16-bit literals, or a variable
    name followed by a literal.
    """

    instruction_type = InstructionType.ADD

    def __init__(self, destination: str, first: Operand, second: Operand) -> None:
        self.destination = destination
        self._first_variable = ""
        self._second_variable = ""
        self._first_literal = 0
        self._second_literal = 0

        if isinstance(first, str) and isinstance(second, str):
            self.combination = ParameterCombination.VARIABLE
            self._first_variable = first
            self._second_variable = second
        elif _is_literal(first) and _is_literal(second):
            self.combination = ParameterCombination.LITERAL
            self._first_literal = first & _WORD_MASK
            self._second_literal = second & _WORD_MASK
        elif isinstance(first, str) and _is_literal(second):
            self.combination = ParameterCombination.MIXED
            self._first_variable = first
            self._second_literal = second & _WORD_MASK
        else:
            raise TypeError(
                "operands must be two names, two integers, or a name and an integer"
            )

    @property
    def literal_first(self) -> int:
        if self.combination is not ParameterCombination.LITERAL:
            raise InstructionError("First Literal not used to create instruction.")
        return self._first_literal

    @property
    def literal_second(self) -> int:
        if self.combination is ParameterCombination.VARIABLE:
            raise InstructionError("Second Literal not used to create instruction.")
        return self._second_literal

    @property
    def variable_first(self) -> str:
        if self.combination is ParameterCombination.LITERAL:
            raise InstructionError("First Variable not used to create instruction.")
        return self._first_variable

    @property
    def variable_second(self) -> str:
        if self.combination is not ParameterCombination.VARIABLE:
            raise InstructionError("Second Variable not used to create instruction.")
        return self._second_variable

    def _key(self) -> tuple:
        return (
            self.destination,
            self.combination,
            self._first_variable,
            self._second_variable,
            self._first_literal,
            self._second_literal,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddInstruction):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self.combination is ParameterCombination.VARIABLE:
            operands = (self._first_variable, self._second_variable)
        elif self.combination is ParameterCombination.LITERAL:
            operands = (self._first_literal, self._second_literal)
        else:
            operands = (self._first_variable, self._second_literal)
        return f"AddInstruction({self.destination!r}, {operands[0]!r}, {operands[1]!r})"