"""
word_.py - Utility functions for words.
"""

import re

from frontend.syntax_asdl import (
    CompoundWord,
    word_part,
    word_part_e,
    word_part_t,
    word_part_str,
)
from mycpp.mylib import tagswitch, log

from typing import Tuple, List, cast

_ = log

# Names of shell functions, and for loop variables
_IDENTIFIER_RE = re.compile(r'[a-zA-Z_][a-zA-Z0-9_]*\Z')


def _EvalWordPart(part):
    # type: (word_part_t) -> Tuple[bool, str]
    """Evaluate a WordPart at PARSE TIME.

    Returns:
      ok: False if the part has a substitution
      value: a string
    """
    UP_part = part
    with tagswitch(part) as case:
        if case(word_part_e.Literal):
            part = cast(word_part.Literal, UP_part)
            return True, part.tval

        elif case(word_part_e.ParamExpansion, word_part_e.CommandSub):
            return False, ''

        else:
            raise AssertionError(word_part_str(part.tag()))


def StaticEval(w):
    # type: (CompoundWord) -> Tuple[bool, str]
    """Evaluate a CompoundWord at PARSE TIME."""
    strs = []  # type: List[str]
    for part in w.parts:
        ok, s = _EvalWordPart(part)
        if not ok:
            return False, ''
        strs.append(s)
    return True, ''.join(strs)


def IsValidFuncName(s):
    # type: (str) -> bool
    return bool(_IDENTIFIER_RE.match(s))


def ShFunctionName(w):
    # type: (CompoundWord) -> str
    """Returns a valid shell function name, or the empty string."""
    ok, s = StaticEval(w)
    if not ok or not IsValidFuncName(s):
        return ''
    return s


def Pretty(w):
    # type: (CompoundWord) -> str
    """Shell-like text of a word, for error messages."""
    strs = []  # type: List[str]
    for part in w.parts:
        UP_part = part
        with tagswitch(part) as case:
            if case(word_part_e.Literal):
                part = cast(word_part.Literal, UP_part)
                strs.append(part.tval)

            elif case(word_part_e.ParamExpansion):
                part = cast(word_part.ParamExpansion, UP_part)
                strs.append('${%s}' % part.text)

            elif case(word_part_e.CommandSub):
                strs.append('$(...)')

            else:
                raise AssertionError(word_part_str(part.tag()))
    return ''.join(strs)
