import typing

from .exceptions import CalcMistakeError, InternalEvaluatorError
from .tokens import BINARY_OPERATORS, Token, TokenType
from .values import WORD_BITS, CalcValue, calc_int, is_calc_value

__all__ = ["Machine"]


class Machine:
    """
    Stack machine which reduces a postfix token sequence to a single value.
    """

    _stack: list[CalcValue]

    def __init__(self):
        self._stack = []

    def run(self, postfix: typing.Iterable[Token]) -> CalcValue:
        self._stack = []
        for token in postfix:
            match token.type:
                case TokenType.NUMBER:
                    assert is_calc_value(token.value)
                    self._stack.append(token.value)
                case TokenType.BANG | TokenType.TWOS_COMPLEMENT:
                    self._stack.append(_apply_unary(token, self._pop(token)))
                case token_type if token_type in BINARY_OPERATORS:
                    rhs = self._pop(token)
                    lhs = self._pop(token)
                    self._stack.append(_apply_binary(token, lhs, rhs))
                case _:
                    raise InternalEvaluatorError(
                        f"Unexpected token in postfix sequence: {token.type.name}", token=token
                    )

        if len(self._stack) != 1:
            raise InternalEvaluatorError(
                f"Evaluation left {len(self._stack)} values on the stack"
            )
        return self._stack.pop()

    def _pop(self, token: Token) -> CalcValue:
        try:
            return self._stack.pop()
        except IndexError as e:
            raise InternalEvaluatorError(
                f"Missing operand for {token.type.name}", token=token
            ) from e


def _apply_unary(token: Token, operand: CalcValue) -> CalcValue:
    value = int(operand)
    match token.type:
        case TokenType.BANG:
            return calc_int(~value)
        case TokenType.TWOS_COMPLEMENT:
            return calc_int(~value + 1)
        case _:  # pragma: no cover
            raise InternalEvaluatorError(f"Unknown unary operator: {token.type.name}", token=token)


def _apply_binary(token: Token, lhs: CalcValue, rhs: CalcValue) -> CalcValue:
    # Work on Python integers and wrap the result back into 64 bits.
    left, right = int(lhs), int(rhs)
    match token.type:
        case TokenType.PLUS:
            result = left + right
        case TokenType.MINUS:
            result = left - right
        case TokenType.AND:
            result = left & right
        case TokenType.OR:
            result = left | right
        case TokenType.NOR:
            result = ~(left | right)
        case TokenType.XOR:
            result = left ^ right
        case TokenType.SHIFT_LEFT:
            _check_shift(token, right)
            result = left << min(right, WORD_BITS)
        case TokenType.SHIFT_RIGHT:
            # Arithmetic shift: Python's >> keeps the sign and saturates at 0 or -1.
            _check_shift(token, right)
            result = left >> min(right, WORD_BITS)
        case TokenType.MULT:
            result = left * right
        case TokenType.MODULO:
            if right == 0:
                raise CalcMistakeError("Modulo by zero", token=token)
            # Remainder takes the sign of the left operand.
            result = abs(left) % abs(right)
            if left < 0:
                result = -result
        case _:  # pragma: no cover
            raise InternalEvaluatorError(
                f"Unknown binary operator: {token.type.name}", token=token
            )
    return calc_int(result)


def _check_shift(token: Token, count: int):
    if count < 0:
        raise CalcMistakeError(f"Negative shift count: {count}", token=token)
