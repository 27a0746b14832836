import math

import pytest

from sysprog.mathexpr import (
    BinaryOp,
    BinaryOperator,
    Negative,
    Number,
    OperPrec,
    Token,
    TokenizeError,
    TokenKind,
    Tokenizer,
    evaluate,
)


def test_positive_integer():
    assert next(Tokenizer("34")) == Token(TokenKind.NUM, 34.0)


def test_decimal_number():
    assert next(Tokenizer("34.5")) == Token(TokenKind.NUM, 34.5)


def test_invalid_char():
    with pytest.raises(TokenizeError):
        next(Tokenizer("#$%"))


def test_full_token_stream():
    assert list(Tokenizer("1+(2)")) == [
        Token(TokenKind.NUM, 1.0),
        Token(TokenKind.ADD),
        Token(TokenKind.LEFT_PAREN),
        Token(TokenKind.NUM, 2.0),
        Token(TokenKind.RIGHT_PAREN),
        Token(TokenKind.EOF),
    ]


def test_empty_gives_single_eof():
    assert list(Tokenizer("")) == [Token(TokenKind.EOF)]


def test_number_followed_by_paren_is_error():
    with pytest.raises(TokenizeError):
        next(Tokenizer("2(3)"))


def test_malformed_number_is_error():
    with pytest.raises(TokenizeError):
        next(Tokenizer("1.2.3"))


def test_precedence_order():
    add = Token(TokenKind.ADD).precedence()
    mul = Token(TokenKind.MULTIPLY).precedence()
    caret = Token(TokenKind.CARET).precedence()
    paren = Token(TokenKind.LEFT_PAREN).precedence()
    assert paren == OperPrec.DEFAULT_ZERO
    assert paren < add < mul < caret < OperPrec.NEGATIVE
    assert Token(TokenKind.SUBTRACT).precedence() == add
    assert Token(TokenKind.DIVIDE).precedence() == mul


def test_expr1():
    # 1+2-3
    tree = BinaryOp(
        BinaryOperator.SUBTRACT,
        BinaryOp(BinaryOperator.ADD, Number(1.0), Number(2.0)),
        Number(3.0),
    )
    assert evaluate(tree) == 0.0


def test_expr2():
    # 3+2-1*5/4
    tree = BinaryOp(
        BinaryOperator.SUBTRACT,
        BinaryOp(BinaryOperator.ADD, Number(3.0), Number(2.0)),
        BinaryOp(
            BinaryOperator.DIVIDE,
            BinaryOp(BinaryOperator.MULTIPLY, Number(1.0), Number(5.0)),
            Number(4.0),
        ),
    )
    assert evaluate(tree) == 3.75


def test_negative_is_inverse():
    tree = BinaryOp(BinaryOperator.ADD, Number(3.75), Negative(Number(3.75)))
    assert evaluate(tree) == 0.0


def test_divide_by_zero_gives_infinity():
    assert evaluate(BinaryOp(BinaryOperator.DIVIDE, Number(1.0), Number(0.0))) == math.inf
    assert str(evaluate(BinaryOp(BinaryOperator.DIVIDE, Number(0.0), Number(0.0)))) == "nan"


def test_power_of_negative_base_fraction_is_nan():
    tree = BinaryOp(BinaryOperator.CARET, Number(-8.0), Number(0.5))
    result = evaluate(tree)
    assert str(result) == "nan"


def test_power_matches_repeated_multiplication():
    power = BinaryOp(BinaryOperator.CARET, Number(2.0), Number(3.0))
    product = BinaryOp(
        BinaryOperator.MULTIPLY,
        BinaryOp(BinaryOperator.MULTIPLY, Number(2.0), Number(2.0)),
        Number(2.0),
    )
    assert evaluate(power) == evaluate(product)
    assert evaluate(power) == 8.0


def test_evaluate_rejects_non_node():
    with pytest.raises(TypeError):
        evaluate("1+2")