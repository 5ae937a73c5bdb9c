"""
syntax_asdl.py - Types for the shell syntax tree.

The layout follows ASDL conventions, as if generated from this schema:

  module syntax {
    SourceLine = (int line_num, string content, string src)
    Token = (id id, int col, SourceLine? line, string tval)

    word_part =
      Literal(string tval)
    | ParamExpansion(string text)
    | CommandSub(command* children)

    CompoundWord = (word_part* parts)
    Redir = (id op, CompoundWord target)

    # an argument of a simple command
    arg = CompoundWord | Redir

    Elif = (command cond, command* then_children)

    command =
      Simple(arg* args, bool background)
    | Subshell(command* children)
    | BraceGroup(command* children)
    | If(command cond, command* then_children, Elif* elifs,
         command*? else_children)
    | WhileLoop(command cond, command* body)
    | ForEach(string name, CompoundWord* iter_words, command* body)
    | ShFunction(string name, command body)
    | Binary(id op, command left, command right)
    | Comment(string text)

    Program = (command* children)
  }

- Sum types have a _e class of integer tags, a _t base class, and a namespace
  class holding the variants, e.g. command_e.Simple, command_t, command.Simple.
- CreateNull() makes an empty node that the parser fills in through the
  builder stack in osh/builder.py.
"""

from asdl import pybase
from asdl.runtime import NewRecord, NewLeaf, NewArray, Field, color_e
from asdl.runtime import TRUE_STR, FALSE_STR
from asdl.runtime import hnode_t
from frontend.id_kind import Id_str, Id_t

from typing import Optional, List, Union, Any


class SourceLine(pybase.CompoundObj):
    __slots__ = ('line_num', 'content', 'src')

    def __init__(self, line_num, content, src):
        # type: (int, str, str) -> None
        self.line_num = line_num
        self.content = content
        self.src = src

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('SourceLine')
        L = out_node.fields
        L.append(Field('line_num', NewLeaf(str(self.line_num),
                                           color_e.OtherConst)))
        L.append(Field('src', NewLeaf(self.src, color_e.StringConst)))
        return out_node


class Token(pybase.CompoundObj):
    """A token, with the position of its first character.

    col is 1-based, like line.line_num.
    """
    __slots__ = ('id', 'col', 'line', 'tval')

    def __init__(self, id, col, line, tval):
        # type: (Id_t, int, Optional[SourceLine], str) -> None
        self.id = id
        self.col = col
        self.line = line
        self.tval = tval

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('Token')
        L = out_node.fields
        L.append(Field('id', NewLeaf(Id_str(self.id), color_e.UserType)))
        L.append(Field('col', NewLeaf(str(self.col), color_e.OtherConst)))
        L.append(Field('tval', NewLeaf(self.tval, color_e.StringConst)))
        return out_node


#
# word_part
#


class word_part_e(object):
    Literal = 1
    ParamExpansion = 2
    CommandSub = 3


_word_part_str = {
    1: 'Literal',
    2: 'ParamExpansion',
    3: 'CommandSub',
}


def word_part_str(tag, dot=True):
    # type: (int, bool) -> str
    v = _word_part_str[tag]
    if dot:
        return "word_part.%s" % v
    else:
        return v


class word_part_t(pybase.CompoundObj):

    def tag(self):
        # type: () -> int
        return self._type_tag


class word_part__Literal(word_part_t):
    _type_tag = 1
    __slots__ = ('tval',)

    def __init__(self, tval):
        # type: (str) -> None
        self.tval = tval

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('word_part.Literal')
        L = out_node.fields
        L.append(Field('tval', NewLeaf(self.tval, color_e.StringConst)))
        return out_node


class word_part__ParamExpansion(word_part_t):
    _type_tag = 2
    __slots__ = ('text',)

    def __init__(self, text):
        # type: (str) -> None
        self.text = text

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('word_part.ParamExpansion')
        L = out_node.fields
        L.append(Field('text', NewLeaf(self.text, color_e.StringConst)))
        return out_node


class word_part__CommandSub(word_part_t):
    _type_tag = 3
    __slots__ = ('children',)

    def __init__(self, children):
        # type: (List[command_t]) -> None
        self.children = children

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> word_part__CommandSub
        return word_part__CommandSub([] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('word_part.CommandSub')
        L = out_node.fields
        L.append(Field('children', NewArray(self.children)))
        return out_node


class word_part(object):
    Literal = word_part__Literal
    ParamExpansion = word_part__ParamExpansion
    CommandSub = word_part__CommandSub


class CompoundWord(pybase.CompoundObj):
    """A word: 1 or more parts, with no space between them."""
    __slots__ = ('parts',)

    def __init__(self, parts):
        # type: (List[word_part_t]) -> None
        self.parts = parts

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> CompoundWord
        return CompoundWord([] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('CompoundWord')
        L = out_node.fields
        L.append(Field('parts', NewArray(self.parts)))
        return out_node


class Redir(pybase.CompoundObj):
    __slots__ = ('op', 'target')

    def __init__(self, op, target):
        # type: (Id_t, CompoundWord) -> None
        self.op = op
        self.target = target

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> Redir
        return Redir(-1, None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('Redir')
        L = out_node.fields
        L.append(Field('op', NewLeaf(Id_str(self.op), color_e.UserType)))
        assert self.target is not None
        L.append(Field('target', self.target.PrettyTree()))
        return out_node


arg_t = Union[CompoundWord, Redir]

#
# command
#


class command_e(object):
    Simple = 1
    Subshell = 2
    BraceGroup = 3
    If = 4
    WhileLoop = 5
    ForEach = 6
    ShFunction = 7
    Binary = 8
    Comment = 9


class command_t(pybase.CompoundObj):

    def tag(self):
        # type: () -> int
        return self._type_tag


def _CondTree(cond):
    # type: (Optional[command_t]) -> hnode_t
    if cond is None:  # only in a partial tree
        return NewLeaf(None, color_e.OtherConst)
    return cond.PrettyTree()


class Elif(pybase.CompoundObj):
    __slots__ = ('cond', 'then_children')

    def __init__(self, cond, then_children):
        # type: (command_t, List[command_t]) -> None
        self.cond = cond
        self.then_children = then_children

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> Elif
        return Elif(None, [] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('Elif')
        L = out_node.fields
        L.append(Field('cond', _CondTree(self.cond)))
        L.append(Field('then_children', NewArray(self.then_children)))
        return out_node


class command__Simple(command_t):
    _type_tag = 1
    __slots__ = ('args', 'background')

    def __init__(self, args, background):
        # type: (List[arg_t], bool) -> None
        self.args = args
        self.background = background

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__Simple
        return command__Simple([] if alloc_lists else None, False)

    def Words(self):
        # type: () -> List[CompoundWord]
        """The arguments without the redirects."""
        return [a for a in self.args if isinstance(a, CompoundWord)]

    def Redirects(self):
        # type: () -> List[Redir]
        return [a for a in self.args if isinstance(a, Redir)]

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.Simple')
        L = out_node.fields
        L.append(Field('args', NewArray(self.args)))
        L.append(Field('background', NewLeaf(
            TRUE_STR if self.background else FALSE_STR, color_e.OtherConst)))
        return out_node


class command__Subshell(command_t):
    _type_tag = 2
    __slots__ = ('children',)

    def __init__(self, children):
        # type: (List[command_t]) -> None
        self.children = children

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__Subshell
        return command__Subshell([] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.Subshell')
        L = out_node.fields
        L.append(Field('children', NewArray(self.children)))
        return out_node


class command__BraceGroup(command_t):
    _type_tag = 3
    __slots__ = ('children',)

    def __init__(self, children):
        # type: (List[command_t]) -> None
        self.children = children

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__BraceGroup
        return command__BraceGroup([] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.BraceGroup')
        L = out_node.fields
        L.append(Field('children', NewArray(self.children)))
        return out_node


class command__If(command_t):
    _type_tag = 4
    __slots__ = ('cond', 'then_children', 'elifs', 'else_children')

    def __init__(self, cond, then_children, elifs, else_children):
        # type: (command_t, List[command_t], List[Elif], Optional[List[command_t]]) -> None
        self.cond = cond
        self.then_children = then_children
        self.elifs = elifs
        self.else_children = else_children  # None when there's no else

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__If
        return command__If(None, [] if alloc_lists else None,
                           [] if alloc_lists else None, None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.If')
        L = out_node.fields
        L.append(Field('cond', _CondTree(self.cond)))
        L.append(Field('then_children', NewArray(self.then_children)))
        L.append(Field('elifs', NewArray(self.elifs)))
        if self.else_children is not None:  # Optional
            L.append(Field('else_children', NewArray(self.else_children)))
        return out_node


class command__WhileLoop(command_t):
    _type_tag = 5
    __slots__ = ('cond', 'body')

    def __init__(self, cond, body):
        # type: (command_t, List[command_t]) -> None
        self.cond = cond
        self.body = body

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__WhileLoop
        return command__WhileLoop(None, [] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.WhileLoop')
        L = out_node.fields
        L.append(Field('cond', _CondTree(self.cond)))
        L.append(Field('body', NewArray(self.body)))
        return out_node


class command__ForEach(command_t):
    _type_tag = 6
    __slots__ = ('name', 'iter_words', 'body')

    def __init__(self, name, iter_words, body):
        # type: (str, List[CompoundWord], List[command_t]) -> None
        self.name = name
        self.iter_words = iter_words
        self.body = body

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__ForEach
        return command__ForEach('', [] if alloc_lists else None,
                                [] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.ForEach')
        L = out_node.fields
        L.append(Field('name', NewLeaf(self.name, color_e.StringConst)))
        L.append(Field('iter_words', NewArray(self.iter_words)))
        L.append(Field('body', NewArray(self.body)))
        return out_node


class command__ShFunction(command_t):
    _type_tag = 7
    __slots__ = ('name', 'body')

    def __init__(self, name, body):
        # type: (str, command_t) -> None
        self.name = name
        self.body = body

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__ShFunction
        return command__ShFunction('', None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.ShFunction')
        L = out_node.fields
        L.append(Field('name', NewLeaf(self.name, color_e.StringConst)))
        L.append(Field('body', _CondTree(self.body)))
        return out_node


class command__Binary(command_t):
    """a && b, a || b, a | b.

    Right associative: 'a && b || c' is Binary(&&, a, Binary(||, b, c)).
    """
    _type_tag = 8
    __slots__ = ('op', 'left', 'right')

    def __init__(self, op, left, right):
        # type: (Id_t, command_t, command_t) -> None
        self.op = op
        self.left = left
        self.right = right

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> command__Binary
        return command__Binary(-1, None, None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.Binary')
        L = out_node.fields
        L.append(Field('op', NewLeaf(Id_str(self.op), color_e.UserType)))
        L.append(Field('left', _CondTree(self.left)))
        L.append(Field('right', _CondTree(self.right)))
        return out_node


class command__Comment(command_t):
    _type_tag = 9
    __slots__ = ('text',)

    def __init__(self, text):
        # type: (str) -> None
        self.text = text

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('command.Comment')
        L = out_node.fields
        L.append(Field('text', NewLeaf(self.text, color_e.StringConst)))
        return out_node


class command(object):
    Simple = command__Simple
    Subshell = command__Subshell
    BraceGroup = command__BraceGroup
    If = command__If
    WhileLoop = command__WhileLoop
    ForEach = command__ForEach
    ShFunction = command__ShFunction
    Binary = command__Binary
    Comment = command__Comment


class Program(pybase.CompoundObj):
    """The top level statements of a file."""
    __slots__ = ('children',)

    def __init__(self, children):
        # type: (List[command_t]) -> None
        self.children = children

    @staticmethod
    def CreateNull(alloc_lists=False):
        # type: (bool) -> Program
        return Program([] if alloc_lists else None)

    def PrettyTree(self):
        # type: () -> hnode_t
        out_node = NewRecord('Program')
        L = out_node.fields
        L.append(Field('children', NewArray(self.children)))
        return out_node


# Any node that the builder stack can hold
node_t = Any
