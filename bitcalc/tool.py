"""
Evaluate 64-bit integer arithmetic and bitwise expressions.

Usage:
    {cmd} [-v | --verbose] [--history=<file>] [--style=<name>]
    {cmd} [-v | --verbose] <file>
    {cmd} (-h | --help)

Options:
    -h, --help          Show a brief usage summary.
    -v, --verbose       Log debugging information.
    --history=<file>    Interactive prompt history file [default: ~/.bitcalc_history].
    --style=<name>      Pygments style used to highlight the prompt [default: solarized-dark].

    <file>              Evaluate the contents of a file as a single expression.
"""
import logging
import os
import sys

import docopt
import structlog

from .repl import ReplSession


def main():
    opts = docopt.docopt(__doc__.format(cmd=os.path.basename(sys.argv[0])))

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if opts["--verbose"] else logging.WARNING
        )
    )

    if opts["<file>"] is not None:
        if not ReplSession().evaluate_file(opts["<file>"]):
            sys.exit(1)
        return

    session = ReplSession(
        history_path=os.path.expanduser(opts["--history"]), style_name=opts["--style"]
    )
    session.start_interactive()
