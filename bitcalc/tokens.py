import dataclasses
import enum
import typing

from .values import CalcValue

__all__ = ["TokenType", "Token", "BINARY_OPERATORS", "PREFIX_OPERATORS"]


class TokenType(enum.Enum):
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()

    # Binary operators
    PLUS = enum.auto()
    MINUS = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    NOR = enum.auto()
    XOR = enum.auto()
    SHIFT_LEFT = enum.auto()
    SHIFT_RIGHT = enum.auto()
    MULT = enum.auto()
    MODULO = enum.auto()

    # Unary prefix operators
    BANG = enum.auto()
    TWOS_COMPLEMENT = enum.auto()

    NUMBER = enum.auto()

    EOF = enum.auto()
    ERROR = enum.auto()
    KEYWORD_NOT_FOUND = enum.auto()


BINARY_OPERATORS = frozenset(
    {
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.AND,
        TokenType.OR,
        TokenType.NOR,
        TokenType.XOR,
        TokenType.SHIFT_LEFT,
        TokenType.SHIFT_RIGHT,
        TokenType.MULT,
        TokenType.MODULO,
    }
)

# MINUS doubles as a prefix operator when it appears where an operand is expected.
PREFIX_OPERATORS = frozenset({TokenType.MINUS, TokenType.BANG, TokenType.TWOS_COMPLEMENT})


@dataclasses.dataclass(frozen=True)
class Token:
    type: TokenType

    # Location of the token within the source text.
    start: int
    length: int

    # The slice of source text the token was scanned from.
    text: str = ""

    # Decoded value and radix of NUMBER tokens.
    value: typing.Optional[CalcValue] = None
    radix: typing.Optional[int] = None
