from .parser import Parser
from .values import CalcValue
from .vm import Machine

__all__ = ["evaluate"]


def evaluate(source: str) -> CalcValue:
    """
    Evaluate a single expression and return its value.

    Raises a subclass of CalcError if the source is not a valid expression or if its value cannot
    be computed.
    """
    postfix = Parser(source).parse()
    return Machine().run(postfix)
