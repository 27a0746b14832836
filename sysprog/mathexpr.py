"""Tokens, tokenizer and expression tree for arithmetic expressions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Iterator, Optional, Union


class TokenKind(Enum):
    """Kinds of tokens in an arithmetic expression."""

    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    CARET = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    NUM = auto()
    EOF = auto()


class OperPrec(IntEnum):
    """Operator precedence levels, lowest to highest."""

    DEFAULT_ZERO = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    NEGATIVE = 4


_PRECEDENCE = {
    TokenKind.ADD: OperPrec.ADD_SUB,
    TokenKind.SUBTRACT: OperPrec.ADD_SUB,
    TokenKind.MULTIPLY: OperPrec.MUL_DIV,
    TokenKind.DIVIDE: OperPrec.MUL_DIV,
    TokenKind.CARET: OperPrec.POWER,
}

_SINGLE_CHAR_TOKENS = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUBTRACT,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "^": TokenKind.CARET,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


@dataclass(frozen=True)
class Token:
    """A token; ``value`` is set only for numbers."""

    kind: TokenKind
    value: Optional[float] = None

    def precedence(self) -> OperPrec:
        """Return the precedence of this token as an operator."""
        return _PRECEDENCE.get(self.kind, OperPrec.DEFAULT_ZERO)


class TokenizeError(ValueError):
    """Raised when an expression contains text that is not a valid token."""


class Tokenizer:
    """Iterator over the tokens of an expression, ending with a single EOF token."""

    def __init__(self, expression: str) -> None:
        self._text = expression
        self._pos = 0
        self._finished = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        if self._pos >= len(self._text):
            self._finished = True
            return Token(TokenKind.EOF)

        char = self._text[self._pos]
        if "0" <= char <= "9":
            return self._read_number()
        kind = _SINGLE_CHAR_TOKENS.get(char)
        if kind is None:
            self._finished = True
            raise TokenizeError(f"invalid character {char!r} at position {self._pos}")
        self._pos += 1
        return Token(kind)

    def _read_number(self) -> Token:
        start = self._pos
        end = start + 1
        while end < len(self._text) and (
            self._text[end].isnumeric() or self._text[end] == "."
        ):
            end += 1
        if end < len(self._text) and self._text[end] == "(":
            self._finished = True
            raise TokenizeError(f"number followed by '(' at position {end}")
        literal = self._text[start:end]
        try:
            value = float(literal)
        except ValueError as exc:
            self._finished = True
            raise TokenizeError(f"invalid number {literal!r}") from exc
        self._pos = end
        return Token(TokenKind.NUM, value)


class BinaryOperator(Enum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    CARET = "^"


@dataclass(frozen=True)
class Number:
    """A numeric literal."""

    value: float


@dataclass(frozen=True)
class Negative:
    """Arithmetic negation of an operand."""

    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    """A binary operation on two operands."""

    op: BinaryOperator
    left: "Node"
    right: "Node"


Node = Union[Number, Negative, BinaryOp]


def _odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def evaluate(node: Node) -> float:
    """Compute the value of an expression tree using IEEE float semantics."""
    match node:
        case Number(value=value):
            return float(value)
        case Negative(operand=operand):
            return -evaluate(operand)
        case BinaryOp(op=op, left=left, right=right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            match op:
                case BinaryOperator.ADD:
                    return lhs + rhs
                case BinaryOperator.SUBTRACT:
                    return lhs - rhs
                case BinaryOperator.MULTIPLY:
                    return lhs * rhs
                case BinaryOperator.DIVIDE:
                    return _divide(lhs, rhs)
                case BinaryOperator.CARET:
                    return _power(lhs, rhs)
    raise TypeError(f"not an expression node: {node!r}")