"""
alloc.py - strategies for managing SourceLine and Token

"""

from frontend.syntax_asdl import Token, SourceLine
from frontend.id_kind import Id_t
from mycpp.mylib import log

from typing import List, Any

_ = log


class ctx_SourceCode(object):

    def __init__(self, arena, src):
        # type: (Arena, str) -> None
        arena.PushSource(src)
        self.arena = arena

    def __enter__(self):
        # type: () -> None
        pass

    def __exit__(self, type, value, traceback):
        # type: (Any, Any, Any) -> None
        self.arena.PopSource()


class Arena(object):
    """Manages source names, SourceLine, Token.

    A source name is shown in error messages, e.g. 'foo.sh' or '<stdin>'.
    """

    def __init__(self, save_tokens=False):
        # type: (bool) -> None

        self.save_tokens = save_tokens

        self.tokens = []  # type: List[Token]

        # All lines that haven't been discarded.
        self.lines_list = []  # type: List[SourceLine]

        self.source_instances = []  # type: List[str]

    def SaveTokens(self):
        # type: () -> None
        """Used by sh_parse.py -v, and tests."""
        self.save_tokens = True

    def PushSource(self, src):
        # type: (str) -> None
        self.source_instances.append(src)

    def PopSource(self):
        # type: () -> None
        self.source_instances.pop()

    def CurrentSource(self):
        # type: () -> str
        if len(self.source_instances):
            return self.source_instances[-1]
        return '<unknown>'

    def AddLine(self, line, line_num):
        # type: (str, int) -> SourceLine
        """Save a physical line and return it.

        The line number is 1-based.
        """
        src_line = SourceLine(line_num, line, self.CurrentSource())
        self.lines_list.append(src_line)
        return src_line

    def EofLine(self, line_num):
        # type: (int) -> SourceLine
        """An empty line to point at when input runs out.

        It's not saved in lines_list.
        """
        return SourceLine(line_num, '', self.CurrentSource())

    def DiscardLines(self):
        # type: () -> None
        """Remove references to lines we've accumulated.

        The TOKENS still reference some lines.
        """
        del self.lines_list[:]

    def NewToken(self, id_, col, src_line, tval):
        # type: (Id_t, int, SourceLine, str) -> Token
        tok = Token(id_, col, src_line, tval)
        if self.save_tokens:
            self.tokens.append(tok)
        return tok
