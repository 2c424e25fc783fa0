"""Split raw expression text into tokens."""
from typing import Tuple

from infix_interpreter.common.tokens import NumberToken, Operator, OperatorToken, Tokens


# Single character operators recognized by the lexer
OPERATOR_CHARS: Tuple[str, ...] = ("+", "-", "*", "/", "(", ")")


def _scan_number(text: str, start: int) -> int:
    """
    Find the end of the numeric literal starting at ``start``.

    A literal is a run of decimal digits containing at most one decimal point.

    :param str text: Expression text
    :param int start: Index of the first digit

    :return: Index one past the last character of the literal
    :rtype: int
    """
    end = start
    seen_point = False
    while end < len(text):
        char = text[end]
        if char.isdecimal():
            end += 1
        elif char == "." and not seen_point:
            seen_point = True
            end += 1
        else:
            break
    return end


def tokenize(text: str) -> Tokens:
    """
    Split an arithmetic expression into tokens.

    Numbers start with a digit, each of ``+ - * / ( )`` is an operator and
    every other character (whitespace included) is skipped.

    Examples:
        - "1 + 12.34" -> [1, +, 12.34]
        - "2a*b3" -> [2, *, 3]

    :param str text: Arithmetic expression as a string

    :return: List of tokens in order of appearance
    :rtype: Tokens
    """
    tokens: Tokens = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char.isdecimal():
            end = _scan_number(text, pos)
            # float() accepts any Unicode decimal digit
            tokens.append(NumberToken(value=float(text[pos:end])))
            pos = end
        elif char in OPERATOR_CHARS:
            tokens.append(OperatorToken(operator=Operator(char)))
            pos += 1
        else:
            pos += 1
    return tokens
