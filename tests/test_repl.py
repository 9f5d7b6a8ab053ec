import pytest
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from prompt_toolkit.shortcuts import PromptSession

from bitcalc.repl import ReplSession


@pytest.fixture
def pipe_input():
    with create_pipe_input() as inp:
        yield inp


@pytest.fixture
def repl_session(pipe_input) -> ReplSession:
    prompt_session = PromptSession(input=pipe_input, output=DummyOutput())
    return ReplSession(prompt_session=prompt_session)


def test_no_input(repl_session, pipe_input):
    pipe_input.send_text("\x03")  # == Ctrl-C
    repl_session.start_interactive()


def test_evaluate_immediate(repl_session, pipe_input, capsys):
    pipe_input.send_text("(1 + 1) << 5\n")
    pipe_input.send_text("\x03")  # == Ctrl-C
    repl_session.start_interactive()
    captured = capsys.readouterr()
    assert captured.out == "64  0x40  0b1000000\n"


def test_blank_line(repl_session, pipe_input, capsys):
    pipe_input.send_text("\n")
    pipe_input.send_text("  \n")
    pipe_input.send_text("~1\n")
    pipe_input.send_text("\x03")  # == Ctrl-C
    repl_session.start_interactive()
    captured = capsys.readouterr()
    assert captured.out == "-1  0xffffffffffffffff  0b" + "1" * 64 + "\n"


def test_syntax_error(repl_session, pipe_input, mocker, capsys):
    mock_print = mocker.patch("bitcalc.repl.print_formatted_text")
    pipe_input.send_text("(1 + 1\n")
    pipe_input.send_text("2 * 5\n")
    pipe_input.send_text("\x03")  # == Ctrl-C
    repl_session.start_interactive()
    mock_print.assert_called()
    captured = capsys.readouterr()
    assert captured.out == "10  0xa  0b1010\n"


def test_internal_error(repl_session, pipe_input, mocker):
    """An internal error in the calculator is handled gracefully."""
    mock_print = mocker.patch("bitcalc.repl.print_formatted_text")
    mock_evaluate = mocker.patch("bitcalc.repl.evaluate", side_effect=RuntimeError)
    pipe_input.send_text("1\n")
    pipe_input.send_text("\x03")  # == Ctrl-C
    repl_session.start_interactive()
    mock_evaluate.assert_called()
    mock_print.assert_called()


def test_history_file(mocker, tmp_path):
    prompt_session_class = mocker.patch("bitcalc.repl.PromptSession")
    prompt_session_class.return_value.prompt.side_effect = EOFError
    history_path = tmp_path / "history"
    ReplSession(history_path=str(history_path)).start_interactive()
    history = prompt_session_class.call_args.kwargs["history"]
    assert isinstance(history, FileHistory)


def test_evaluate_file(tmp_path, capsys):
    source_path = tmp_path / "expression.calc"
    source_path.write_text("(1 + 1)\n  << 5\n")
    ReplSession().evaluate_file(str(source_path))
    captured = capsys.readouterr()
    assert captured.out == "64  0x40  0b1000000\n"


def test_evaluate_file_error(tmp_path, mocker, capsys):
    mock_print = mocker.patch("bitcalc.repl.print_formatted_text")
    source_path = tmp_path / "expression.calc"
    source_path.write_text("1 +\n  (2 $ 3)\n")
    assert not ReplSession().evaluate_file(str(source_path))
    assert mock_print.call_args.args[0] == FormattedText(
        [("class:error", "Unrecognised input: '$'\n  (2 $ 3)\n     ^")]
    )
    assert capsys.readouterr().out == ""
