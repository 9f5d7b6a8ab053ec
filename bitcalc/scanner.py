"""
Scanner for bitcalc expressions.

The scanner hands out one token at a time. Malformed input does not raise; it produces ERROR or
KEYWORD_NOT_FOUND tokens and it is up to the caller to decide what to do with them.
"""
import types
import typing

from .tokens import Token, TokenType
from .values import calc_int

__all__ = ["Scanner", "KEYWORDS", "DELIMITERS"]

# Keywords and the symbolic aliases which share their lookup. Keys are lower case.
KEYWORDS: typing.Mapping[str, TokenType] = types.MappingProxyType(
    {
        "and": TokenType.AND,
        "or": TokenType.OR,
        "nor": TokenType.NOR,
        "xor": TokenType.XOR,
        "mod": TokenType.MODULO,
        "&": TokenType.AND,
        "|": TokenType.OR,
        "^": TokenType.XOR,
        "%": TokenType.MODULO,
    }
)

_SINGLE_CHARACTER_TOKENS = types.MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "!": TokenType.BANG,
        "~": TokenType.TWOS_COMPLEMENT,
        "*": TokenType.MULT,
    }
)

# Characters which end a digit or keyword run. Whitespace also ends a run.
DELIMITERS = frozenset("()><+-&|~!^*%")

_BINARY_DIGITS = frozenset("01")
_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _is_delimiter(char: str) -> bool:
    return char in DELIMITERS or char.isspace()


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Scanner:
    # Text being scanned.
    _source: str

    # Offset of the next unread character.
    _current: int

    # Offset of the first character of the token being scanned.
    _start: int

    # Token handed out by peek() which the next call to next() must return.
    _lookahead: typing.Optional[Token]

    def __init__(self, source: str):
        self._source = source
        self._current = 0
        self._start = 0
        self._lookahead = None

    def __iter__(self) -> typing.Iterator[Token]:
        """
        Iterate over tokens up to and including the first EOF, ERROR or KEYWORD_NOT_FOUND.
        """
        while True:
            token = self.next()
            yield token
            if token.type in {TokenType.EOF, TokenType.ERROR, TokenType.KEYWORD_NOT_FOUND}:
                return

    def peek(self) -> Token:
        """
        Return the next token without consuming it.
        """
        if self._lookahead is None:
            self._lookahead = self._scan()
        return self._lookahead

    def next(self) -> Token:
        """
        Consume and return the next token. Once the input is exhausted every call returns EOF.
        """
        if self._lookahead is not None:
            token, self._lookahead = self._lookahead, None
            return token
        return self._scan()

    def _scan(self) -> Token:
        self._skip_whitespace()
        self._start = self._current

        char = self._advance()
        if char is None:
            return self._make_token(TokenType.EOF)

        if char in _SINGLE_CHARACTER_TOKENS:
            return self._make_token(_SINGLE_CHARACTER_TOKENS[char])
        if char in KEYWORDS:
            return self._make_token(KEYWORDS[char])

        match char:
            case "<":
                # The second "<" is optional; a lone "<" is also a left shift.
                self._match("<")
                return self._make_token(TokenType.SHIFT_LEFT)
            case ">":
                self._match(">")
                return self._make_token(TokenType.SHIFT_RIGHT)
            case "0":
                return self._scan_base_prefix()

        if char in _DECIMAL_DIGITS:
            return self._scan_number(_DECIMAL_DIGITS, radix=10)
        if _is_letter(char):
            return self._scan_keyword()
        return self._make_token(TokenType.ERROR)

    def _scan_base_prefix(self) -> Token:
        prefix = self._peek_char()
        if prefix is None or _is_delimiter(prefix):
            return self._make_number(0, radix=10)

        self._advance()
        match prefix:
            case "b":
                return self._scan_number(_BINARY_DIGITS, radix=2)
            case "x":
                return self._scan_number(_HEX_DIGITS, radix=16)
            case _:
                return self._scan_error_run()

    def _scan_number(self, digits: typing.AbstractSet[str], *, radix: int) -> Token:
        # Decimal numbers arrive here with their first digit already consumed. Binary and hex
        # numbers arrive with only their prefix consumed.
        digits_start = self._start if radix == 10 else self._start + 2
        while (char := self._peek_char()) is not None and not _is_delimiter(char):
            if char not in digits:
                return self._scan_error_run()
            self._advance()

        digit_run = self._source[digits_start : self._current]
        if digit_run == "":
            return self._make_token(TokenType.ERROR)
        return self._make_number(int(digit_run, base=radix), radix=radix)

    def _scan_keyword(self) -> Token:
        while (char := self._peek_char()) is not None and not _is_delimiter(char):
            if not _is_letter(char):
                return self._scan_error_run()
            self._advance()

        keyword = self._source[self._start : self._current].lower()
        try:
            return self._make_token(KEYWORDS[keyword])
        except KeyError:
            return self._make_token(TokenType.KEYWORD_NOT_FOUND)

    def _scan_error_run(self) -> Token:
        # Swallow the rest of the malformed run so that the error covers all of it.
        while (char := self._peek_char()) is not None and not _is_delimiter(char):
            self._advance()
        return self._make_token(TokenType.ERROR)

    def _skip_whitespace(self):
        while (char := self._peek_char()) is not None and char.isspace():
            self._current += 1

    def _peek_char(self) -> typing.Optional[str]:
        try:
            return self._source[self._current]
        except IndexError:
            return None

    def _advance(self) -> typing.Optional[str]:
        char = self._peek_char()
        if char is not None:
            self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._peek_char() != expected:
            return False
        self._current += 1
        return True

    def _make_token(self, token_type: TokenType) -> Token:
        return Token(
            type=token_type,
            start=self._start,
            length=self._current - self._start,
            text=self._source[self._start : self._current],
        )

    def _make_number(self, magnitude: int, *, radix: int) -> Token:
        return Token(
            type=TokenType.NUMBER,
            start=self._start,
            length=self._current - self._start,
            text=self._source[self._start : self._current],
            value=calc_int(magnitude),
            radix=radix,
        )
