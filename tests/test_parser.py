import pytest

from parsemaths.parser import (
    BinaryOperation,
    BinaryOperator,
    Expression,
    InvalidOperator,
    Parser,
    ParserError,
    Precedence,
    UnableToParse,
    UnaryOperation,
    UnaryOperator,
    parse,
)
from parsemaths.tokenizer import MalformedNumberError, Token, Tokenizer, TokenType


def add(a: Expression, b: Expression) -> BinaryOperation:
    return BinaryOperation(BinaryOperator.ADD, a, b)


def sub(a: Expression, b: Expression) -> BinaryOperation:
    return BinaryOperation(BinaryOperator.SUB, a, b)


def mul(a: Expression, b: Expression) -> BinaryOperation:
    return BinaryOperation(BinaryOperator.MUL, a, b)


def pow_(a: Expression, b: Expression) -> BinaryOperation:
    return BinaryOperation(BinaryOperator.POW, a, b)


def neg(a: Expression) -> UnaryOperation:
    return UnaryOperation(UnaryOperator.NEG, a)


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("1+2", add(1.0, 2.0)),
        pytest.param("1+2*3", add(1.0, mul(2.0, 3.0))),
        pytest.param("1*2+3", add(mul(1.0, 2.0), 3.0)),
        pytest.param("1-2+3", add(sub(1.0, 2.0), 3.0)),
        pytest.param("2^3^2", pow_(2.0, pow_(3.0, 2.0))),
        pytest.param("-2^2", pow_(neg(2.0), 2.0)),
        pytest.param("-(2^2)", neg(pow_(2.0, 2.0))),
        pytest.param("(2)(3)", mul(2.0, 3.0)),
        pytest.param("((1))", 1.0),
    ],
)
def test_parse(code: str, expected_ast: Expression) -> None:
    assert parse(code) == expected_ast


def test_trailing_tokens_are_left_unexamined() -> None:
    parser = Parser(Tokenizer("1+2)3"))
    assert parser.parse() == add(1.0, 2.0)
    assert str(parser.current_token) == "<BRACKET_CLOSE>)"


@pytest.mark.parametrize(
    "code, error_type",
    [
        pytest.param("(1+2", InvalidOperator, id="unclosed bracket"),
        pytest.param("", UnableToParse, id="empty input"),
        pytest.param("*2", UnableToParse),
        pytest.param("1+", UnableToParse),
        pytest.param(")", UnableToParse),
        pytest.param("a", InvalidOperator, id="invalid character on first token"),
        pytest.param("1+a", InvalidOperator, id="invalid character later"),
        pytest.param("1+3(4)", InvalidOperator, id="number followed by bracket"),
    ],
)
def test_parse_errors(code: str, error_type: type[ParserError]) -> None:
    with pytest.raises(error_type):
        parse(code)


def test_malformed_number_is_not_a_parser_error() -> None:
    with pytest.raises(MalformedNumberError):
        parse("1.2.3+1")


def test_parser_error_str() -> None:
    assert str(InvalidOperator("Invalid character")) == "Parser error: Invalid character"


def test_precedence_order() -> None:
    assert Precedence.DEFAULT < Precedence.ADDITIVE < Precedence.MULTIPLICATIVE < Precedence.POWER
    assert Precedence.POWER < Precedence.NEGATIVE
    assert Precedence.POWER.lower() is Precedence.MULTIPLICATIVE
    assert Precedence.DEFAULT.lower() is Precedence.DEFAULT


@pytest.mark.parametrize(
    "code, expected_error_str",
    [
        pytest.param("*2", "Parser error: Unable to parse <STAR>*\n*\n^"),
        pytest.param("1+*2", "Parser error: Unable to parse <STAR>*\n1 + *\n    ^"),
        pytest.param("(1+2", "Parser error: Expected BRACKET_CLOSE, got EXPR_END\n(1 + 2\n       ^"),
        pytest.param("1+a", "Parser error: Invalid character\n1 +\n    ^"),
    ],
)
def test_parser_error_points_at_token(code: str, expected_error_str: str) -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(code)
    assert str(exc_info.value) == expected_error_str


class _FixedTokens:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = iter(tokens)

    def next_token(self) -> Token:
        return next(self._tokens)


def test_number_token_without_value() -> None:
    parser = Parser(_FixedTokens([Token(TokenType.NUMBER, "1"), Token(TokenType.EXPR_END, "")]))  # type: ignore
    with pytest.raises(UnableToParse):
        parser.parse()


def test_lower_keeps_enum_type() -> None:
    assert isinstance(Precedence.ADDITIVE.lower(), Precedence)
