# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
ui.py - User interface constructs.
"""

from asdl import format as fmt
from asdl import pretty
from frontend.id_kind import Id, Id_t, Id_str, DisplayName
from frontend.syntax_asdl import Token
from mycpp import mylib
from mycpp.mylib import log

from typing import Optional, Any, TYPE_CHECKING
if TYPE_CHECKING:
    from core.error import _ErrorWithLocation

_ = log


def PrettyId(id_):
    # type: (Id_t) -> str
    """For displaying type errors in the UI."""

    # Displays 'Id.Op_Semi' for now
    return Id_str(id_)


def PrettyToken(tok):
    # type: (Token) -> str
    """Returns a readable token value for the user.

    For syntax errors: literals are shown quoted, and everything else by its
    display name, e.g. EOF, newline or &&.
    """
    if tok.id == Id.Lit_Chars:
        return pretty.EncodeString(tok.tval)
    return DisplayName(tok.id)


def _PrintCodeExcerpt(line, col, length, f):
    # type: (str, int, int, mylib.Writer) -> None
    """
    Args:
      col: 1-based column of the caret
    """
    buf = mylib.BufWriter()

    buf.write('  ')
    buf.write(line.rstrip())

    buf.write('\n  ')
    # preserve tabs
    for c in line[:col - 1]:
        buf.write('\t' if c == '\t' else ' ')
    buf.write('^')
    buf.write('~' * (length - 1))
    buf.write('\n')

    # Do this all in a single write() call so it's less likely to be
    # interleaved.
    f.write(buf.getvalue())


def _PrintWithLocation(prefix, msg, blame_tok, f):
    # type: (str, str, Optional[Token], mylib.Writer) -> None
    if blame_tok is None or blame_tok.line is None:
        f.write('[??? no location ???] %s%s\n' % (prefix, msg))
        return

    src_line = blame_tok.line
    if len(src_line.content):
        # the caret covers the whole token, but only on its first line
        length = len(blame_tok.tval.split('\n')[0])
        _PrintCodeExcerpt(src_line.content, blame_tok.col, max(length, 1), f)

    f.write('%s:%d:%d: %s%s\n' % (src_line.src, src_line.line_num,
                                  blame_tok.col, prefix, msg))


class ErrorFormatter(object):
    """Print errors with code excerpts.

    There should be zero or one code quotation when the program exits
    non-zero.  Showing the same line twice is noisy.
    """

    def __init__(self, f=None):
        # type: (Optional[mylib.Writer]) -> None
        self.f = f if f else mylib.Stderr()

    def PrettyPrintError(self, err, prefix=''):
        # type: (_ErrorWithLocation, str) -> None
        """Print an exception that was caught, with a code quotation.

        At EOF there may be no line to quote, so only the position is shown.
        """
        _PrintWithLocation(prefix, err.UserErrorString(), err.location, self.f)


def PrintAst(node, f=None):
    # type: (Any, Optional[mylib.Writer]) -> None
    """Print the syntax tree of a parsed program, as an S-expression."""
    f = f if f else mylib.Stdout()
    fmt.HNodePrettyPrint(node.PrettyTree(), f)
    f.write('\n')
