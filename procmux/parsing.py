"""Lexical helpers for the instruction language and for text layout."""

from __future__ import annotations

_BLANKS = " \t"
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_WHITESPACE = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised when an instruction string is malformed."""


def trim_and_unquote(text: str) -> str:
    """Strip blanks, then one pair of enclosing quotes, then one pair of brackets."""
    text = text.strip(_BLANKS)
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    if len(text) >= 2 and text[0] == "[" and text[-1] == "]":
        text = text[1:-1]
    return text


def split_top_level(text: str) -> list[str]:
    """Split on ';' that are outside any parentheses or brackets.

    Empty pieces are dropped.
    """
    pieces: list[str] = []
    current: list[str] = []
    parens = 0
    brackets = 0

    for char in text:
        if char == "(":
            parens += 1
        elif char == ")":
            parens -= 1
        elif char == "[":
            brackets += 1
        elif char == "]":
            brackets -= 1

        if char == ";" and parens == 0 and brackets == 0:
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        pieces.append("".join(current))
    return pieces


def _split_parameters(text: str) -> list[str]:
    parameters: list[str] = []
    current: list[str] = []
    depth = 0

    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1

        if char == "," and depth == 0:
            parameter = trim_and_unquote("".join(current))
            if parameter:
                parameters.append(parameter)
            current = []
        else:
            current.append(char)

    if current:
        parameters.append(trim_and_unquote("".join(current)))
    return parameters


def tokenize_instructions(raw: str) -> list[list[str]]:
    """Break a raw program into one token list per instruction.

    Each list starts with the instruction name followed by its parameters.
    Raises ParseError when an opening parenthesis has no closing one.
    """
    parsed: list[list[str]] = []

    for piece in split_top_level(raw):
        instruction = trim_and_unquote(piece)
        open_paren = instruction.find("(")
        if open_paren == -1:
            parsed.append([instruction])
            continue

        name = trim_and_unquote(instruction[:open_paren])
        close_paren = instruction.rfind(")")
        if close_paren == -1 or close_paren <= open_paren:
            raise ParseError("Malformed instruction: missing closing parenthesis")

        parameters = _split_parameters(instruction[open_paren + 1:close_paren])
        parsed.append([name, *parameters])

    return parsed


def split(raw: str, delimiter: str) -> list[str]:
    """Split on ``delimiter`` except inside brackets; empty pieces are dropped."""
    tokens: list[str] = []
    current: list[str] = []
    in_brackets = False

    for char in raw:
        if char == "[":
            in_brackets = True
            current.append(char)
        elif char == "]":
            in_brackets = False
            current.append(char)
        elif char == delimiter and not in_brackets:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def is_all_digits(text: str) -> bool:
    """True if ``text`` is non-empty and made only of decimal digits."""
    return bool(text) and all(char in _DIGITS for char in text)


def is_hex_string(text: str) -> bool:
    """True if ``text`` is hexadecimal digits, optionally after a 0x prefix."""
    if not text:
        return False
    body = text[2:] if len(text) > 2 and text[0] == "0" and text[1] in "xX" else text
    return all(char in _HEX_DIGITS for char in body)


def is_valid_identifier(text: str) -> bool:
    """True if ``text`` starts with a letter and holds no whitespace."""
    if not text or text[0] not in _LETTERS:
        return False
    return not any(char in _WHITESPACE for char in text)


def center_string(text: str, width: int) -> str:
    """Pad ``text`` with spaces to ``width``, extra space going to the right."""
    if len(text) >= width:
        return text
    padding = width - len(text)
    left = padding // 2
    return " " * left + text + " " * (padding - left)