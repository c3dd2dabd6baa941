import pytest

from procmux.instruction import (
    AddInstruction,
    InstructionError,
    InstructionType,
    ParameterCombination,
)
from procmux.interpret import interpret_add, interpret_instructions
from procmux.parsing import ParseError


def test_add_two_literals():
    instruction = interpret_add(["ADD", "x", "1", "2"])
    assert instruction.combination is ParameterCombination.LITERAL
    assert instruction.destination == "x"
    assert instruction.literal_first == 1
    assert instruction.literal_second == 2
    assert instruction.instruction_type is InstructionType.ADD


def test_add_variable_then_literal():
    instruction = interpret_add(["ADD", "x", "y", "7"])
    assert instruction.combination is ParameterCombination.MIXED
    assert instruction.variable_first == "y"
    assert instruction.literal_second == 7


def test_add_literal_then_variable_swaps_operands():
    instruction = interpret_add(["ADD", "x", "5", "y"])
    assert instruction.combination is ParameterCombination.MIXED
    assert instruction.variable_first == "y"
    assert instruction.literal_second == 5
    with pytest.raises(InstructionError):
        instruction.literal_first


def test_add_two_variables():
    instruction = interpret_add(["ADD", "x", "a", "b"])
    assert instruction == AddInstruction("x", "a", "b")
    assert instruction.variable_second == "b"


def test_add_literal_is_reduced_to_sixteen_bits():
    instruction = interpret_add(["ADD", "x", "70000", "0"])
    assert instruction == AddInstruction("x", 70000, 0)
    assert 0 <= instruction.literal_first <= 0xFFFF


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["ADD"],
        ["ADD", "x", "1"],
        ["ADD", "x", "1", "2", "3"],
        ["SUBTRACT", "x", "1", "2"],
        ["ADD", "1x", "1", "2"],
        ["ADD", "", "1", "2"],
        ["ADD", "x", "1a", "2"],
        ["ADD", "x", "2", "1a"],
        ["ADD", "x", "a b", "c"],
    ],
)
def test_add_rejects_invalid_tokens(tokens):
    assert interpret_add(tokens) is None


def test_interpret_program_keeps_order():
    program = "ADD(x, 1, 2); ADD(y, x, 3); ADD(z, x, y)"
    instructions = interpret_instructions(program)
    assert instructions == [
        AddInstruction("x", 1, 2),
        AddInstruction("y", "x", 3),
        AddInstruction("z", "x", "y"),
    ]


def test_interpret_program_skips_unknown_and_invalid():
    program = 'PRINT("hi"); ADD(x, 1, 2); ADD(1bad, 1, 2); ADD(y, 1)'
    instructions = interpret_instructions(program)
    assert instructions == [AddInstruction("x", 1, 2)]


def test_interpret_program_unquotes_parameters():
    instructions = interpret_instructions('"ADD(x, \\"a\\", [b])"'.replace("\\", ""))
    assert len(instructions) <= 1
    program = 'ADD("x", "a", [b])'
    assert interpret_instructions(program) == [AddInstruction("x", "a", "b")]


def test_interpret_empty_program():
    assert interpret_instructions("") == []


def test_interpret_missing_parenthesis_raises():
    with pytest.raises(ParseError):
        interpret_instructions("ADD(x, 1, 2")


def test_interpreted_instruction_clones_equal():
    (instruction,) = interpret_instructions("ADD(x, y, 4)")
    clone = instruction.clone()
    assert clone == instruction
    assert clone is not instruction