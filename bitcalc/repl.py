"""
Read-eval-print loop for bitcalc.
"""
import sys
import typing

import structlog
from better_exceptions import format_exception
from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.styles import Style
from prompt_toolkit.styles.pygments import style_from_pygments_cls
from pygments.styles import get_style_by_name

from .calculator import evaluate
from .exceptions import CalcError
from .highlight import BitcalcLexer
from .values import format_value

LOG = structlog.get_logger()


class ReplSession:
    style = Style.from_dict(
        {
            "error": "red",
        }
    )

    def __init__(
        self,
        *,
        prompt_session: typing.Optional[PromptSession] = None,
        history_path: typing.Optional[str] = None,
        style_name: str = "solarized-dark",
    ):
        self._prompt_session = prompt_session
        self._history_path = history_path
        self._style_name = style_name

    def evaluate_file(self, path: str) -> bool:
        """
        Evaluate the entire contents of a file as one expression and print the result. Errors in
        the expression are reported with their location in the file and False is returned.
        """
        with open(path) as f:
            source = f.read()
        try:
            value = evaluate(source)
        except CalcError as err:
            self._print_error(err.describe(source))
            return False
        print(format_value(value))
        return True

    def start_interactive(self):
        if self._prompt_session is None:
            history = FileHistory(self._history_path) if self._history_path is not None else None
            self._prompt_session = PromptSession(history=history)
        style = style_from_pygments_cls(get_style_by_name(self._style_name))
        while True:
            try:
                prompt_line = self._prompt_session.prompt(
                    ">>> ",
                    lexer=PygmentsLexer(BitcalcLexer),
                    style=style,
                    include_default_pygments_style=False,
                    auto_suggest=AutoSuggestFromHistory(),
                )
                if prompt_line.strip() == "":
                    continue
                LOG.debug("evaluating prompt line", line=prompt_line)
                print(format_value(evaluate(prompt_line)))
            except CalcError as err:
                self._print_error(err.describe(prompt_line))
            except (EOFError, KeyboardInterrupt):
                # Exit from REPL on SIGINT or on end of input.
                break
            except Exception:
                self._print_error("Unexpected Python error:")
                for line in format_exception(*sys.exc_info()):
                    sys.stderr.write(line)

    def _print_error(self, error_message: str):
        print_formatted_text(
            FormattedText([("class:error", error_message)]), style=self.style, file=sys.stderr
        )
