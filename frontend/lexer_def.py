"""
lexer_def.py -- Character classes and operator tables for the lexer.

The lexer in frontend/lexer.py works one character at a time, so instead of
a series of regexes per lexer mode, it consults the tables below.

Reserved characters end a literal and are lexed as operators:

    newline  &  >  <  |  ;  (  )  $

Starter characters { } # are only special at the START of a token.  In the
middle of a literal they're ordinary characters:

    echo foo{bar}  # one literal foo{bar}, then a comment
"""

from frontend.id_kind import Id, Id_t

from typing import Dict, Tuple, List

RESERVED = '\n&><|;()$'

STARTERS = '{}#'

# Space and tab separate tokens and set the 'spaced' flag on the next one.
# Other whitespace like \r is part of literals.
SPACES = ' \t'

QUOTES = '"\'`'

OPS = {
    '\n': Id.Op_Newline,
    ';': Id.Op_Semi,
    '&': Id.Op_Amp,
    '|': Id.Op_Pipe,
    '(': Id.Op_LParen,
    ')': Id.Op_RParen,
    '>': Id.Redir_Great,
    '<': Id.Redir_Less,
    '$': Id.Left_DollarSign,
    '{': Id.Lit_LBrace,
    '}': Id.Lit_RBrace,
}  # type: Dict[str, Id_t]

# An operator char followed by the same char.  The lexer probes the second
# char without consuming it unless it matches.
TWO_CHAR_OPS = {
    '&': Id.Op_DAmp,
    '|': Id.Op_DPipe,
    '>': Id.Redir_DGreat,
}  # type: Dict[str, Id_t]

# The lexer never produces these Ids.  A literal token spelled like a keyword
# is only a keyword where the parser expects one.
KEYWORDS = [
    ('if', Id.KW_If),
    ('then', Id.KW_Then),
    ('elif', Id.KW_Elif),
    ('else', Id.KW_Else),
    ('fi', Id.KW_Fi),
    ('while', Id.KW_While),
    ('for', Id.KW_For),
    ('in', Id.KW_In),
    ('do', Id.KW_Do),
    ('done', Id.KW_Done),
]  # type: List[Tuple[str, Id_t]]

_KEYWORD_LOOKUP = dict(KEYWORDS)  # type: Dict[str, Id_t]


def IsReserved(c):
    # type: (str) -> bool
    return len(c) == 1 and c in RESERVED


def IsStarter(c):
    # type: (str) -> bool
    return len(c) == 1 and c in STARTERS


def IsSpace(c):
    # type: (str) -> bool
    return len(c) == 1 and c in SPACES


def IsQuote(c):
    # type: (str) -> bool
    return len(c) == 1 and c in QUOTES


def KeywordId(s):
    # type: (str) -> Id_t
    """Returns the KW Id spelled s, or Id.Undefined_Tok."""
    return _KEYWORD_LOOKUP.get(s, Id.Undefined_Tok)
