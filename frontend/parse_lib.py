"""
parse_lib.py - Consolidate various parser instantiations here.
"""

from core import alloc
from frontend import lexer
from frontend import reader
from mycpp import mylib
from osh import cmd_parse

from typing import Optional, Tuple, TYPE_CHECKING
if TYPE_CHECKING:
    from core.alloc import Arena
    from core.error import _ErrorWithLocation
    from frontend.lexer import Lexer
    from frontend.reader import _Reader
    from frontend.syntax_asdl import Program
    from mycpp.mylib import LineReader
    from osh.cmd_parse import CommandParser


class ParseContext(object):
    """Context shared by the parsers of one source file.

    In contrast, STATE is stored in the Lexer and CommandParser instances.
    """

    def __init__(self, arena):
        # type: (Arena) -> None
        self.arena = arena

    def MakeLexer(self, line_reader):
        # type: (_Reader) -> Lexer
        # Take Arena from LineReader
        return lexer.Lexer(line_reader, line_reader.arena)

    def MakeParser(self, line_reader):
        # type: (_Reader) -> CommandParser
        lx = self.MakeLexer(line_reader)
        return cmd_parse.CommandParser(self, lx, line_reader)


def ParseWholeFile(c_parser):
    # type: (CommandParser) -> Tuple[Program, Optional[_ErrorWithLocation]]
    """Parse until EOF, or the first error."""
    return c_parser.ParseProgram()


def ParseFile(f, source_name, arena=None):
    # type: (LineReader, str, Optional[Arena]) -> Tuple[Program, Optional[_ErrorWithLocation]]
    """Parse a file-like object with readline().

    Args:
      f: the input
      source_name: for error messages, e.g. foo.sh:1:5: ...

    Returns:
      The Program, and the first error or None.  str(err) looks like

        foo.sh:1:5: unexpected token ; - wanted literal
    """
    arena = arena if arena else alloc.Arena()
    parse_ctx = ParseContext(arena)
    line_reader = reader.FileLineReader(f, arena)

    with alloc.ctx_SourceCode(arena, source_name):
        c_parser = parse_ctx.MakeParser(line_reader)
        return ParseWholeFile(c_parser)


def ParseString(code_str, source_name='<string>', arena=None):
    # type: (str, str, Optional[Arena]) -> Tuple[Program, Optional[_ErrorWithLocation]]
    """Like ParseFile, for code in a string, e.g. sh_parse.py -c."""
    return ParseFile(mylib.BufLineReader(code_str), source_name, arena=arena)
