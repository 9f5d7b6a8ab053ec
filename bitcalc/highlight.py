"""
Syntax highlighting for the interactive prompt.
"""
import re

from pygments.lexer import RegexLexer, words
from pygments.token import Error, Number, Operator, Punctuation, Whitespace

__all__ = ["BitcalcLexer"]


class BitcalcLexer(RegexLexer):
    name = "bitcalc"
    aliases = ["bitcalc"]
    filenames = ["*.calc"]

    tokens = {
        "root": [
            (r"\s+", Whitespace),
            (r"0b[01]+", Number.Bin),
            (r"0x[0-9a-fA-F]+", Number.Hex),
            (r"[1-9][0-9]*|0", Number.Integer),
            (words(("and", "or", "nor", "xor", "mod"), suffix=r"\b"), Operator.Word),
            (r"<<?|>>?|[-+&|^!~*%]", Operator),
            (r"[()]", Punctuation),
            (r".", Error),
        ]
    }
    flags = re.MULTILINE | re.IGNORECASE
