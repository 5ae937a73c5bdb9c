# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
lexer.py - Library for lexing.

The Lexer pulls lines from a reader and hands out one Token per Read() call.
It works a character at a time, with a single character of pushback, because
whether a character starts an operator depends on the quoting state and on
whether it's the first character of a token.  See frontend/lexer_def.py.
"""

from core import error
from frontend.id_kind import Id, Id_t
from frontend import lexer_def
from frontend.syntax_asdl import Token, SourceLine
from mycpp.mylib import log

from typing import Any, List, Optional, TYPE_CHECKING
if TYPE_CHECKING:
    from core.alloc import Arena
    from frontend.reader import _Reader

_ = log


class ctx_Unquoted(object):
    """Lex the body of $( ) as if the enclosing quote weren't open.

    echo "x $(echo ')') y"
    """

    def __init__(self, lexer):
        # type: (Lexer) -> None
        self.lexer = lexer
        self.saved = lexer.quote
        lexer.quote = ''

    def __enter__(self):
        # type: () -> None
        pass

    def __exit__(self, type, value, traceback):
        # type: (Any, Any, Any) -> None
        self.lexer.quote = self.saved


class Lexer(object):
    """Read tokens from a line reader.

    Invariants:
    - (line_num, col) is the 1-based position of the NEXT character.
    - After the first read fault, every Read() returns Eof_Real, and the
      fault is in self.err.
    """

    def __init__(self, line_reader, arena):
        # type: (_Reader, Arena) -> None
        self.line_reader = line_reader
        self.arena = arena

        self.src_line = None  # type: Optional[SourceLine]
        self.line = ''  # content of src_line
        self.line_pos = 0

        self.line_num = 1
        self.col = 1
        # position before the last _ReadRune(), for _UnreadRune()
        self.b_line_num = 1
        self.b_col = 1

        self.at_eof = False
        self.err = None  # type: Optional[error._ErrorWithLocation]

        # Whether space or tab preceded the last token
        self.spaced = False

        # The quote char of a region that's still open, or ''.  A region stays
        # open across $, so "$x" is lexed as " $ x"
        self.quote = ''

    def _CursorToken(self, id_):
        # type: (Id_t) -> Token
        """A token at the next character, e.g. for EOF."""
        if self.src_line is not None and self.line_num == self.src_line.line_num:
            line = self.src_line
        else:
            line = self.arena.EofLine(self.line_num)
        return self.arena.NewToken(id_, self.col, line, '')

    def EofToken(self):
        # type: () -> Token
        """For errors at EOF, which point at the final cursor position."""
        return self._CursorToken(Id.Eof_Real)

    def _ReadRune(self):
        # type: () -> str
        """Returns the next character, or '' at EOF or after a read fault."""
        if self.at_eof or self.err is not None:
            return ''

        if self.line_pos == len(self.line):
            try:
                src_line = self.line_reader.GetLine()
            except (OSError, UnicodeDecodeError) as e:
                self.err = error.ReadError(e, self._CursorToken(Id.Eof_Real))
                return ''
            if src_line is None:
                self.at_eof = True
                return ''
            self.src_line = src_line
            self.line = src_line.content
            self.line_pos = 0

        c = self.line[self.line_pos]
        self.line_pos += 1

        self.b_line_num = self.line_num
        self.b_col = self.col
        if c == '\n':
            self.line_num += 1
            self.col = 1
        else:
            self.col += 1
        return c

    def _UnreadRune(self):
        # type: () -> None
        """Push back the character returned by the last _ReadRune()."""
        assert self.line_pos > 0, 'Nothing to unread'
        self.line_pos -= 1
        self.line_num = self.b_line_num
        self.col = self.b_col

    def _ReadOnly(self, wanted):
        # type: (str) -> bool
        """Consume the next character only if it's 'wanted'."""
        c = self._ReadRune()
        if c == wanted:
            return True
        if len(c):
            self._UnreadRune()
        return False

    def ReadOnly(self, wanted):
        # type: (str) -> bool
        """For the parser: after $, is the next character { or ( ?"""
        return self._ReadOnly(wanted)

    def ReadUntil(self, end):
        # type: (str) -> Optional[str]
        """Read raw characters up to and including 'end'.

        Returns the characters before 'end', or None if EOF came first.  No
        quoting or escaping applies, e.g. for ${...}.
        """
        chars = []  # type: List[str]
        while True:
            c = self._ReadRune()
            if len(c) == 0:
                return None
            if c == end:
                return ''.join(chars)
            chars.append(c)

    def _ReadComment(self):
        # type: () -> str
        """Rest of the line after #.  The newline is left for the next token."""
        chars = []  # type: List[str]
        while True:
            c = self._ReadRune()
            if len(c) == 0:
                break
            if c == '\n':
                self._UnreadRune()
                break
            chars.append(c)
        return ''.join(chars)

    def _ReadLit(self, c):
        # type: (str) -> str
        """Read a literal whose first character c was already consumed.

        Quotes are kept in the text, and so are escapes like \\x.  An escaped
        newline is removed.
        """
        chars = []  # type: List[str]
        while True:
            q = self.quote
            if q != "'" and c == '\\':
                c = self._ReadRune()
                if len(c) == 0:
                    # a trailing backslash is kept
                    chars.append('\\')
                elif c != '\n':
                    chars.append('\\')
                    chars.append(c)

            elif q != "'" and c == '$':  # end of literal
                self._UnreadRune()
                break

            elif len(q):
                if c == q:
                    self.quote = ''
                chars.append(c)

            elif lexer_def.IsQuote(c):
                self.quote = c
                chars.append(c)

            elif lexer_def.IsReserved(c) or lexer_def.IsSpace(c):
                self._UnreadRune()
                break

            else:
                chars.append(c)

            c = self._ReadRune()
            if len(c) == 0:
                break

        return ''.join(chars)

    def _UnterminatedQuote(self):
        # type: () -> None
        if self.err is None and len(self.quote):
            error.p_die('reached EOF without closing quote %s' % self.quote,
                        self._CursorToken(Id.Eof_Real))

    def Read(self):
        # type: () -> Token
        """Return the next token.

        Raises error.Parse for an unterminated quote.  A read fault is NOT
        raised; it's latched in self.err and Eof_Real is returned.
        """
        self.spaced = False

        if len(self.quote):
            # Continue a region that was open before $, e.g. the x" in "$x"
            c = self._ReadRune()
            if len(c) == 0:
                self._UnterminatedQuote()
                return self._CursorToken(Id.Eof_Real)

            line, col = self.src_line, self.b_col
            if c == '$':
                return self.arena.NewToken(Id.Left_DollarSign, col, line, c)

            tval = self._ReadLit(c)
            if self.at_eof:
                self._UnterminatedQuote()
            return self.arena.NewToken(Id.Lit_Chars, col, line, tval)

        while True:
            c = self._ReadRune()
            if len(c) == 0:
                return self._CursorToken(Id.Eof_Real)

            if lexer_def.IsSpace(c):
                self.spaced = True
                continue

            if c == '\\' and self._ReadOnly('\n'):  # line continuation
                continue

            break

        line, col = self.src_line, self.b_col

        if c == '#':
            tval = self._ReadComment()
            return self.arena.NewToken(Id.Ignored_Comment, col, line, tval)

        if lexer_def.IsReserved(c) or lexer_def.IsStarter(c):
            id_ = lexer_def.OPS[c]
            tval = c
            if c in lexer_def.TWO_CHAR_OPS and self._ReadOnly(c):
                id_ = lexer_def.TWO_CHAR_OPS[c]
                tval = c + c
            return self.arena.NewToken(id_, col, line, tval)

        tval = self._ReadLit(c)
        if self.at_eof:
            self._UnterminatedQuote()
        return self.arena.NewToken(Id.Lit_Chars, col, line, tval)
