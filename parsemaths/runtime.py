import math
from dataclasses import dataclass
from typing import Callable

from parsemaths.parser import BinaryOperation, BinaryOperator, Expression, UnaryOperation, UnaryOperator, parse
from parsemaths.tokenizer import strip_whitespace


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Runtime error: {self.errmsg}"


def calculate(code: str) -> float:
    return evaluate(parse(strip_whitespace(code)))


def evaluate(expression: Expression) -> float:
    if isinstance(expression, float):
        return expression
    elif isinstance(expression, BinaryOperation):
        left_res = evaluate(expression.left)
        right_res = evaluate(expression.right)
        binary_impl = BINARY_OPERATION_IMPLS.get(expression.operator)
        if binary_impl is None:
            raise CalcRuntimeError(f"Unexpected binary operator: {expression.operator}")
        return binary_impl(left_res, right_res)
    elif isinstance(expression, UnaryOperation):
        operand = evaluate(expression.operand)
        unary_impl = UNARY_OPERATION_IMPLS.get(expression.operator)
        if unary_impl is None:
            raise CalcRuntimeError(f"Unexpected unary operator: {expression.operator}")
        return unary_impl(operand)
    else:
        raise CalcRuntimeError(f"Unexpected expression type: {expression!r}")


def _is_odd_integer(v: float) -> bool:
    return math.isfinite(v) and v.is_integer() and v % 2 == 1


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _pow(a: float, b: float) -> float:
    # math.pow raises where IEEE 754 pow returns inf or nan
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


BinaryOperationImpl = Callable[[float, float], float]
UnaryOperationImpl = Callable[[float], float]

BINARY_OPERATION_IMPLS: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _div,
    BinaryOperator.POW: _pow,
}

UNARY_OPERATION_IMPLS: dict[UnaryOperator, UnaryOperationImpl] = {
    UnaryOperator.NEG: lambda a: -a,
}
