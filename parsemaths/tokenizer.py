import enum
import re
from dataclasses import dataclass
from typing import Optional

from parsemaths.utils import PrintableEnum


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class MalformedNumberError(TokenizerError):
    """Numeric literal that is not a valid float, e.g. 1.2.3"""


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    CARET = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    EXPR_END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    value: Optional[float] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def _is_valid_number_start(s: str) -> bool:
    return s in "0123456789"


def _is_valid_in_number(s: str) -> bool:
    return s.isdigit() or s == "."


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


class Tokenizer:
    """Lazy token source over an expression with whitespace already removed.

    next_token() returns None when no token can be produced: for an unknown
    character, and for a numeric literal immediately followed by an opening
    bracket ("3(" is rejected here, only "(a)(b)" is implicit multiplication).
    The end marker is produced once; asking for more after it is not supported.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self.position = 0

    def next_token(self) -> Optional[Token]:
        if self.position >= len(self.code):
            return Token(type=TokenType.EXPR_END, lexeme="")

        start_idx = self.position
        char = self.code[start_idx]
        self.position += 1

        if _is_valid_number_start(char):
            while self.position < len(self.code):
                next_char = self.code[self.position]
                if _is_valid_in_number(next_char):
                    self.position += 1
                elif next_char == "(":
                    return None
                else:
                    break
            lexeme = self.code[start_idx : self.position]
            try:
                value = float(lexeme)
            except ValueError:
                raise MalformedNumberError(
                    f"Malformed number: {lexeme!r}", code=self.code, error_char_idx=start_idx
                ) from None
            return Token(type=TokenType.NUMBER, lexeme=lexeme, value=value)
        elif char in SINGLE_CHAR_TOKENS:
            return Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char)
        else:
            return None


def tokenize(code: str) -> list[Token]:
    tokenizer = Tokenizer(code)
    tokens: list[Token] = []
    while True:
        token_start_idx = tokenizer.position
        token = tokenizer.next_token()
        if token is None:
            if _is_valid_number_start(code[token_start_idx]):
                raise TokenizerError(
                    "Number directly followed by a bracket", code=code, error_char_idx=tokenizer.position
                )
            raise TokenizerError(
                f"Unexpected character: {code[token_start_idx]!r}", code=code, error_char_idx=token_start_idx
            )
        tokens.append(token)
        if token.type is TokenType.EXPR_END:
            return tokens


def strip_whitespace(code: str) -> str:
    return "".join(code.split())


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens).strip()

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
