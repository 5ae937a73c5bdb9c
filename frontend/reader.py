# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
reader.py - Read lines of input.
"""

from mycpp import mylib
from mycpp.mylib import log

from typing import Optional, TYPE_CHECKING
if TYPE_CHECKING:
    from frontend.syntax_asdl import SourceLine
    from core.alloc import Arena

_ = log


class _Reader(object):

    def __init__(self, arena):
        # type: (Arena) -> None
        self.arena = arena
        self.line_num = 1  # physical line numbers start from 1

    def _GetLine(self):
        # type: () -> Optional[str]
        raise NotImplementedError()

    def GetLine(self):
        # type: () -> Optional[SourceLine]
        """Returns the next line, or None at EOF.

        I/O and decoding errors propagate to the caller.
        """
        line_str = self._GetLine()
        if line_str is None:
            return None

        src_line = self.arena.AddLine(line_str, self.line_num)
        self.line_num += 1
        return src_line


class FileLineReader(_Reader):
    """For files and stdin."""

    def __init__(self, f, arena):
        # type: (mylib.LineReader, Arena) -> None
        _Reader.__init__(self, arena)
        self.f = f

    def _GetLine(self):
        # type: () -> Optional[str]
        line = self.f.readline()
        if len(line) == 0:
            return None

        return line


def StringLineReader(s, arena):
    # type: (str, Arena) -> FileLineReader
    return FileLineReader(mylib.BufLineReader(s), arena)

