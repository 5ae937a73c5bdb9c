#!/usr/bin/env python3
"""
sh_parse.py - Parse a shell program and print its syntax tree.

Usage:
  sh_parse.py [-n] [-v] [FILE]    # parse FILE, or stdin
  sh_parse.py [-n] [-v] -c CODE   # parse a string

  -n  parse only; don't print the tree
  -v  log each token to stderr

Exits 0 on success, 2 on a syntax error, and 1 on usage and I/O errors.
"""

import sys

from core import alloc
from core import error
from core import ui
from frontend import parse_lib
from mycpp import mylib
from mycpp.mylib import log, print_stderr

from typing import List, Optional


class _Flags(object):

    def __init__(self):
        # type: () -> None
        self.pretty_print = True
        self.verbose = False
        self.code = None  # type: Optional[str]
        self.path = None  # type: Optional[str]


def ParseFlags(argv):
    # type: (List[str]) -> _Flags
    """Parse argv[1:].  Raises error.Usage."""
    flags = _Flags()
    i = 1
    n = len(argv)
    while i < n:
        arg = argv[i]
        if arg == '-n':
            flags.pretty_print = False
        elif arg == '-v':
            flags.verbose = True
        elif arg == '-c':
            if i + 1 == n:
                error.e_usage('-c expects an argument')
            flags.code = argv[i + 1]
            i += 1
        elif arg.startswith('-') and arg != '-':
            error.e_usage('invalid flag %r' % arg)
        else:
            if flags.path is not None:
                error.e_usage('too many arguments')
            flags.path = arg
        i += 1

    if flags.code is not None and flags.path is not None:
        error.e_usage("can't pass both -c and FILE")
    return flags


def main(argv):
    # type: (List[str]) -> int
    try:
        flags = ParseFlags(argv)
    except error.Usage as e:
        print_stderr('sh_parse: %s' % e.msg)
        return 1

    arena = alloc.Arena()
    if flags.verbose:
        arena.SaveTokens()
    errfmt = ui.ErrorFormatter()

    if flags.code is not None:
        node, err = parse_lib.ParseString(flags.code, '[ -c flag ]', arena=arena)

    elif flags.path is None or flags.path == '-':
        node, err = parse_lib.ParseFile(mylib.Stdin(), '<stdin>', arena=arena)

    else:
        try:
            f = mylib.open(flags.path)
        except OSError as e:
            print_stderr("sh_parse: couldn't open %r: %s" %
                         (flags.path, e.strerror))
            return 1
        with f:
            node, err = parse_lib.ParseFile(f, flags.path, arena=arena)

    if flags.verbose:
        for tok in arena.tokens:
            log('%s:%d %s %r', tok.line.line_num, tok.col, ui.PrettyId(tok.id),
                tok.tval)

    if err is not None:
        errfmt.PrettyPrintError(err)
        if isinstance(err, error.ReadError):
            return 1
        return 2

    if flags.pretty_print:
        ui.PrintAst(node)

    return 0


if __name__ == '__main__':
    try:
        sys.exit(main(sys.argv))
    except RuntimeError as e:
        print('FATAL: %s' % e, file=sys.stderr)
        sys.exit(1)
