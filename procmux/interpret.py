"""Turning instruction tokens and raw programs into instruction objects."""

from __future__ import annotations

from typing import Optional, Sequence

from .instruction import AddInstruction, Instruction
from .parsing import is_all_digits, is_valid_identifier, tokenize_instructions


def interpret_add(tokens: Sequence[str]) -> Optional[AddInstruction]:
    """Build an ADD instruction from ``["ADD", dst, a, b]``.

    Each operand is a decimal literal or a variable name. Literals are
    reduced to 16 bits. When the literal comes first and the variable
    second, the operands are swapped so the variable leads. Returns None
    when the tokens do not form a valid ADD.
    """
    if len(tokens) != 4 or tokens[0] != "ADD":
        return None

    _, destination, first, second = tokens
    if not is_valid_identifier(destination):
        return None

    first_is_number = is_all_digits(first)
    second_is_number = is_all_digits(second)

    if first_is_number and second_is_number:
        return AddInstruction(destination, int(first), int(second))
    if second_is_number and is_valid_identifier(first):
        return AddInstruction(destination, first, int(second))
    if first_is_number and is_valid_identifier(second):
        return AddInstruction(destination, second, int(first))
    if is_valid_identifier(first) and is_valid_identifier(second):
        return AddInstruction(destination, first, second)
    return None


_INTERPRETERS = {
    "ADD": interpret_add,
}


def interpret_instructions(raw: str) -> list[Instruction]:
    """Parse a raw program into the instructions that can be built from it.

    Instructions that are malformed or of an unknown kind are skipped.
    Raises ParseError when an instruction lacks its closing parenthesis.
    """
    instructions: list[Instruction] = []
    for tokens in tokenize_instructions(raw):
        interpreter = _INTERPRETERS.get(tokens[0]) if tokens else None
        if interpreter is None:
            continue
        instruction = interpreter(tokens)
        if instruction is not None:
            instructions.append(instruction)
    return instructions