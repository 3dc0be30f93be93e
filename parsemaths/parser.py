import enum
import logging
from dataclasses import dataclass, field

from parsemaths.tokenizer import Token, Tokenizer, TokenType, untokenize
from parsemaths.utils import OrderedEnum, PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token] = field(default_factory=list)
    error_token_idx: int = 0

    def __str__(self) -> str:
        if not self.tokens:
            return f"Parser error: {self.errmsg}"
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * (len(untokenize(parsed_tokens)) + 1) if parsed_tokens else ""
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


class UnableToParse(ParserError):
    """Token that can not start a primary expression"""


class InvalidOperator(ParserError):
    """Missing or unexpected operator, bracket mismatch or tokenizer exhaustion"""


class Precedence(OrderedEnum):
    DEFAULT = enum.auto()
    ADDITIVE = enum.auto()
    MULTIPLICATIVE = enum.auto()
    POWER = enum.auto()
    NEGATIVE = enum.auto()


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    POW = enum.auto()


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


class UnaryOperator(PrintableEnum):
    NEG = enum.auto()


@dataclass(frozen=True)
class UnaryOperation:
    operator: UnaryOperator
    operand: "Expression"


Expression = float | BinaryOperation | UnaryOperation


BINARY_OPERATOR_TOKENS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
    TokenType.CARET: BinaryOperator.POW,
}


def get_token_precedence(token: Token) -> Precedence:
    return {
        TokenType.PLUS: Precedence.ADDITIVE,
        TokenType.MINUS: Precedence.ADDITIVE,
        TokenType.STAR: Precedence.MULTIPLICATIVE,
        TokenType.SLASH: Precedence.MULTIPLICATIVE,
        TokenType.CARET: Precedence.POWER,
    }.get(token.type, Precedence.DEFAULT)


def is_rtl_op(op: BinaryOperator) -> bool:
    return op is BinaryOperator.POW


class Parser:
    """Precedence climbing parser with a single token of lookahead.

    1+2*3 => ADD(1, MUL(2, 3))
    1*2+3 => ADD(MUL(1, 2), 3)
    2^3^2 => POW(2, POW(3, 2))
    -2^2  => POW(NEG(2), 2), unary minus binds tighter than any binary operator
    (2)(3) => MUL(2, 3)
    """

    def __init__(self, tokenizer: Tokenizer) -> None:
        self._tokenizer = tokenizer
        self.tokens: list[Token] = []
        self.current_token = self._next_token()

    def parse(self) -> Expression:
        return self.generate_ast(Precedence.DEFAULT)

    def generate_ast(self, min_precedence: Precedence) -> Expression:
        left = self._parse_primary()
        while min_precedence < get_token_precedence(self.current_token):
            if self.current_token.type is TokenType.EXPR_END:
                break
            left = self._convert_token_to_node(left)
        return left

    def _parse_primary(self) -> Expression:
        token = self.current_token
        if token.type is TokenType.MINUS:
            self._advance()
            operand = self.generate_ast(Precedence.NEGATIVE)
            return UnaryOperation(operator=UnaryOperator.NEG, operand=operand)
        elif token.type is TokenType.NUMBER and token.value is not None:
            self._advance()
            return token.value
        elif token.type is TokenType.BRACKET_OPEN:
            self._advance()
            expr = self.generate_ast(Precedence.DEFAULT)
            self._expect(TokenType.BRACKET_CLOSE)
            if self.current_token.type is TokenType.BRACKET_OPEN:
                # (a)(b) is a product
                right = self.generate_ast(Precedence.MULTIPLICATIVE)
                return BinaryOperation(operator=BinaryOperator.MUL, left=expr, right=right)
            return expr
        else:
            raise self._error(UnableToParse, f"Unable to parse {token}")

    def _convert_token_to_node(self, left: Expression) -> Expression:
        operator_token = self.current_token
        operator = BINARY_OPERATOR_TOKENS.get(operator_token.type)
        if operator is None:
            raise self._error(InvalidOperator, f"Please enter a valid operator, found {operator_token.type}")
        self._advance()
        precedence = get_token_precedence(operator_token)
        if is_rtl_op(operator):
            precedence = precedence.lower()
        right = self.generate_ast(precedence)
        return BinaryOperation(operator=operator, left=left, right=right)

    def _expect(self, token_type: TokenType) -> None:
        if self.current_token.type is not token_type:
            raise self._error(InvalidOperator, f"Expected {token_type}, got {self.current_token.type}")
        self._advance()

    def _advance(self) -> None:
        self.current_token = self._next_token()

    def _next_token(self) -> Token:
        token = self._tokenizer.next_token()
        if token is None:
            # points past the last token read
            raise InvalidOperator("Invalid character", tokens=list(self.tokens), error_token_idx=len(self.tokens))
        self.tokens.append(token)
        return token

    def _error(self, error_type: type[ParserError], errmsg: str) -> ParserError:
        """Error pointing at the current token"""
        return error_type(errmsg, tokens=list(self.tokens), error_token_idx=len(self.tokens) - 1)


def parse(code: str) -> Expression:
    """Whitespace must already be removed from code"""
    ast = Parser(Tokenizer(code)).parse()
    logger.debug("Generated AST for %r: %s", code, ast)
    return ast
