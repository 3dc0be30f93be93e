from parsemaths.parser import InvalidOperator, ParserError, UnableToParse, parse
from parsemaths.runtime import CalcRuntimeError, calculate, evaluate
from parsemaths.tokenizer import MalformedNumberError, TokenizerError, strip_whitespace, tokenize

__version__ = "0.1.0"

__all__ = [
    "CalcRuntimeError",
    "InvalidOperator",
    "MalformedNumberError",
    "ParserError",
    "TokenizerError",
    "UnableToParse",
    "calculate",
    "evaluate",
    "parse",
    "strip_whitespace",
    "tokenize",
]
