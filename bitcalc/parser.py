"""
Parser for bitcalc expressions.

Expressions are parsed by precedence climbing straight off the scanner and come out as a flat list
of tokens in postfix order, ready to be fed to the evaluator.
"""
import types
import typing

import structlog

from .exceptions import CalcLexicalError, CalcSyntaxError, CalcUnknownIdentifierError
from .scanner import Scanner
from .tokens import BINARY_OPERATORS, PREFIX_OPERATORS, Token, TokenType

__all__ = ["Parser", "parse", "BINDING_POWERS"]

LOG = structlog.get_logger()

# Left and right binding powers of the binary operators. Higher binds tighter. Each right power
# is one more than the left, making every operator left-associative.
BINDING_POWERS: typing.Mapping[TokenType, tuple[int, int]] = types.MappingProxyType(
    {
        TokenType.MULT: (13, 14),
        TokenType.MODULO: (13, 14),
        TokenType.PLUS: (11, 12),
        TokenType.MINUS: (11, 12),
        TokenType.SHIFT_RIGHT: (9, 10),
        TokenType.SHIFT_LEFT: (9, 10),
        TokenType.AND: (7, 8),
        TokenType.XOR: (5, 6),
        TokenType.NOR: (3, 4),
        TokenType.OR: (1, 2),
    }
)

# Prefix operators take only the primary expression which follows them.
PREFIX_BINDING_POWER = 255

# Each level of parentheses, prefix operators or operator precedence costs one Python stack frame
# while parsing.
MAX_NESTING_DEPTH = 256


class Parser:
    _scanner: Scanner

    # Number of _parse_expression calls currently active.
    _depth: int

    def __init__(self, source: str):
        self._scanner = Scanner(source)
        self._depth = 0

    def parse(self) -> list[Token]:
        """
        Parse the entire source as one expression and return its tokens in postfix order.
        """
        postfix = self._parse_expression(0)
        trailing = self._scanner.next()
        if trailing.type is TokenType.RIGHT_PAREN:
            raise CalcSyntaxError("Unmatched ')'", token=trailing)
        if trailing.type is not TokenType.EOF:
            raise CalcSyntaxError(f"Unexpected {trailing.text!r} after expression", token=trailing)
        LOG.debug("parsed expression", postfix=" ".join(t.text for t in postfix))
        return postfix

    def _parse_expression(self, min_bp: int) -> list[Token]:
        token = self._scanner.next()
        _check_scanned(token)
        if self._depth >= MAX_NESTING_DEPTH:
            raise CalcSyntaxError("Expression nested too deeply", token=token)
        self._depth += 1

        match token.type:
            case TokenType.NUMBER:
                lhs = [token]
            case TokenType.LEFT_PAREN:
                lhs = self._parse_expression(0)
                closing = self._scanner.next()
                _check_scanned(closing)
                if closing.type is not TokenType.RIGHT_PAREN:
                    raise CalcSyntaxError("Missing ')'", token=closing)
            case token_type if token_type in PREFIX_OPERATORS:
                lhs = self._parse_expression(PREFIX_BINDING_POWER)
                if token_type is TokenType.MINUS:
                    # Prefix minus is negation; MINUS in postfix output is always subtraction.
                    token = Token(
                        type=TokenType.TWOS_COMPLEMENT,
                        start=token.start,
                        length=token.length,
                        text=token.text,
                    )
                lhs.append(token)
            case TokenType.EOF:
                raise CalcSyntaxError("Unexpected end of input, expected operand", token=token)
            case _:
                raise CalcSyntaxError(f"Expected operand, found {token.text!r}", token=token)

        while True:
            op = self._scanner.peek()
            _check_scanned(op)
            if op.type in {TokenType.EOF, TokenType.RIGHT_PAREN}:
                break
            if op.type not in BINARY_OPERATORS:
                raise CalcSyntaxError(f"Expected operator, found {op.text!r}", token=op)

            l_bp, r_bp = BINDING_POWERS[op.type]
            if l_bp < min_bp:
                break

            self._scanner.next()
            rhs = self._parse_expression(r_bp)
            lhs.extend(rhs)
            lhs.append(op)

        self._depth -= 1
        return lhs


def _check_scanned(token: Token):
    """Raise if the scanner reported malformed input."""
    match token.type:
        case TokenType.ERROR:
            raise CalcLexicalError(f"Unrecognised input: {token.text!r}", token=token)
        case TokenType.KEYWORD_NOT_FOUND:
            raise CalcUnknownIdentifierError(f"Unknown keyword: {token.text!r}", token=token)


def parse(source: str) -> list[Token]:
    return Parser(source).parse()
