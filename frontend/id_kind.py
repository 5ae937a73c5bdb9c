#!/usr/bin/env python3
# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
id_kind.py - Id and Kind definitions, used for Token and Nodes.

Ids are small integers grouped into Kinds.  The lexer produces tokens whose
Id has Kind Eof, Lit, Ignored, Op, Redir or Left.  The KW Ids are never
produced by the lexer: a keyword is a Lit_Chars token whose text happens to
be spelled like one, and only the parser decides whether it counts.
"""

from typing import List, Tuple, Dict, Optional


class IdSpec(object):
    """Identifiers that form the "spine" of the shell program representation."""

    def __init__(self, kind_lookup):
        # type: (Dict[int, int]) -> None
        self.id_str2int = {}  # type: Dict[str, int]
        self.kind_str2int = {}  # type: Dict[str, int]

        self.kind_lookup = kind_lookup  # Id int -> Kind int
        self.kind_name_list = []  # type: List[str]
        self.kind_sizes = []  # type: List[int]  # optional stats

        # Id int -> string shown to the user, e.g. '&&' or 'newline'
        self.display_names = {}  # type: Dict[int, str]

        # Incremented on each method call
        # IMPORTANT: 1-based indices, so 0 is never a valid Id
        self.id_index = 1
        self.kind_index = 1

    def _AddId(self, id_name, kind=None):
        # type: (str, Optional[int]) -> int
        """
        Args:
          id_name: e.g. Op_DAmp
          kind: override autoassignment
        """
        t = self.id_index

        self.id_str2int[id_name] = t

        if kind is None:
            kind = self.kind_index
        self.kind_lookup[t] = kind

        self.id_index += 1  # mutate last
        return t  # the index we used

    def _AddKind(self, kind_name):
        # type: (str) -> None
        self.kind_str2int[kind_name] = self.kind_index
        self.kind_index += 1
        self.kind_name_list.append(kind_name)

    def AddKind(self, kind_name, tokens):
        # type: (str, List[Tuple[str, str]]) -> None
        """
        Args:
          kind_name: e.g. 'Op'
          tokens: (name, display name) pairs, e.g. ('DAmp', '&&')
        """
        assert isinstance(tokens, list), tokens

        for name, display in tokens:
            id_name = '%s_%s' % (kind_name, name)
            id_int = self._AddId(id_name)
            self.display_names[id_int] = display

        # Must be after adding Id
        self._AddKind(kind_name)
        self.kind_sizes.append(len(tokens))  # debug info


def AddKinds(spec):
    # type: (IdSpec) -> None
    spec.AddKind('Undefined', [('Tok', 'undefined')])  # for initial state

    spec.AddKind('Eof', [('Real', 'EOF')])

    spec.AddKind('Ignored', [('Comment', 'comment')])

    spec.AddKind('Lit', [
        ('Chars', 'literal'),
        # Only at the start of a token; otherwise they're part of Lit_Chars
        ('LBrace', '{'),
        ('RBrace', '}'),
    ])

    spec.AddKind('Op', [
        ('Newline', 'newline'),  # mostly equivalent to SEMI
        ('Semi', ';'),
        ('Amp', '&'),
        ('DAmp', '&&'),
        ('DPipe', '||'),
        ('Pipe', '|'),
        ('LParen', '('),
        ('RParen', ')'),
    ])

    spec.AddKind('Redir', [
        ('Great', '>'),  # > stdout
        ('DGreat', '>>'),  # >> append stdout
        ('Less', '<'),  # < stdin
    ])

    # $ introduces ${...}, $(...) and $name
    spec.AddKind('Left', [('DollarSign', '$')])

    # Spellings are in frontend/lexer_def.py.  The display name is the
    # spelling.
    spec.AddKind('KW', [
        ('If', 'if'),
        ('Then', 'then'),
        ('Elif', 'elif'),
        ('Else', 'else'),
        ('Fi', 'fi'),
        ('While', 'while'),
        ('For', 'for'),
        ('In', 'in'),
        ('Do', 'do'),
        ('Done', 'done'),
    ])


_KIND_LOOKUP = {}  # type: Dict[int, int]
ID_SPEC = IdSpec(_KIND_LOOKUP)
AddKinds(ID_SPEC)


class Id(object):
    """Namespace of token Ids, e.g. Id.Op_DAmp.  Filled in below."""
    pass


class Kind(object):
    """Namespace of Kinds, e.g. Kind.Op.  Filled in below."""
    pass


for _name, _i in ID_SPEC.id_str2int.items():
    setattr(Id, _name, _i)

for _name, _i in ID_SPEC.kind_str2int.items():
    setattr(Kind, _name, _i)

_ID_STR = dict((i, name) for name, i in ID_SPEC.id_str2int.items())
_KIND_STR = dict((i, name) for name, i in ID_SPEC.kind_str2int.items())

Id_t = int
Kind_t = int


def Id_str(id_):
    # type: (Id_t) -> str
    return 'Id.%s' % _ID_STR[id_]


def Kind_str(kind):
    # type: (Kind_t) -> str
    return 'Kind.%s' % _KIND_STR[kind]


def GetKind(id_):
    # type: (Id_t) -> Kind_t
    """To make coarse-grained parsing decisions."""
    return _KIND_LOOKUP[id_]


def DisplayName(id_):
    # type: (Id_t) -> str
    """The name used in syntax errors, e.g. 'newline' or '&&'."""
    return ID_SPEC.display_names[id_]
