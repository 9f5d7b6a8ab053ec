import typing

from .tokens import Token

__all__ = [
    "CalcError",
    "CalcLexicalError",
    "CalcUnknownIdentifierError",
    "CalcSyntaxError",
    "CalcMistakeError",
    "InternalEvaluatorError",
]


class CalcError(RuntimeError):
    def __init__(self, message: str, *, token: typing.Optional[Token] = None):
        super().__init__(message)
        self.token = token

    def describe(self, source: str) -> str:
        """
        Return the error message followed, if the error has a location, by the offending source
        line and a caret marker underneath the offending span.
        """
        if self.token is None:
            return str(self)
        line_start = source.rfind("\n", 0, self.token.start) + 1
        line_end = source.find("\n", self.token.start)
        if line_end == -1:
            line_end = len(source)
        column = self.token.start - line_start
        marker = " " * column + "^" * max(1, self.token.length)
        return f"{self}\n{source[line_start:line_end]}\n{marker}"


class CalcLexicalError(CalcError):
    """
    Raised when the scanner could not make sense of some input characters.
    """


class CalcUnknownIdentifierError(CalcError):
    """
    Raised when a run of letters is not a known keyword.
    """


class CalcSyntaxError(CalcError):
    """
    Raised when the tokens do not form a complete expression.
    """


class CalcMistakeError(CalcError):
    """
    Raised when an operation has no 64-bit result.
    """


class InternalEvaluatorError(CalcError):
    """
    Raised when the evaluator is handed a postfix sequence which the parser should never have
    produced.
    """
