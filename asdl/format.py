"""
format.py -- Pretty print an ASDL data structure.

Each node is printed on a single line if it fits in max_width.  Otherwise its
fields are printed one per line, indented by 2 spaces past the column where
the node starts:

    (command.Simple
      args:[
             (CompoundWord parts:[(word_part.Literal tval:echo)])
             (CompoundWord parts:[(word_part.Literal tval:hi)])
           ]
      background:F
    )
"""
from asdl import pretty
from asdl.runtime import hnode, hnode_e, hnode_t, color_e
from mycpp import mylib
from mycpp.mylib import log, tagswitch

from typing import Any, List, Optional, cast

_ = log

INDENT = 2


def PrettyPrint(obj, f=None):
    # type: (Any, Optional[mylib.Writer]) -> None
    """Print the tree of an ASDL object.  For unit tests and tools."""
    f = f if f else mylib.Stdout()
    HNodePrettyPrint(obj.PrettyTree(), f)
    f.write('\n')


def _EncodeLeaf(h):
    # type: (hnode.Leaf) -> str
    if h.color == color_e.StringConst:
        return pretty.EncodeString(h.s, unquoted_ok=True)
    return h.s


def _SingleLine(h):
    # type: (hnode_t) -> str
    UP_h = h
    with tagswitch(h) as case:
        if case(hnode_e.Leaf):
            h = cast(hnode.Leaf, UP_h)
            return _EncodeLeaf(h)

        elif case(hnode_e.Array):
            h = cast(hnode.Array, UP_h)
            return '[%s]' % ' '.join(_SingleLine(c) for c in h.children)

        elif case(hnode_e.Record):
            h = cast(hnode.Record, UP_h)
            parts = []  # type: List[str]
            if len(h.node_type):
                parts.append(h.node_type)
            if h.unnamed_fields is not None:
                for child in h.unnamed_fields:
                    parts.append(_SingleLine(child))
            for field in h.fields:
                parts.append('%s:%s' % (field.name, _SingleLine(field.val)))
            return '%s%s%s' % (h.left, ' '.join(parts), h.right)

        else:
            raise AssertionError()


def _PrintNode(h, f, indent, max_width):
    # type: (hnode_t, mylib.Writer, int, int) -> None
    """Print h starting at the current column, which is 'indent'."""
    line = _SingleLine(h)
    if indent + len(line) <= max_width:
        f.write(line)
        return

    ind = ' ' * (indent + INDENT)

    UP_h = h
    with tagswitch(h) as case:
        if case(hnode_e.Leaf):
            f.write(line)  # can't be broken

        elif case(hnode_e.Array):
            h = cast(hnode.Array, UP_h)
            f.write('[\n')
            for child in h.children:
                f.write(ind)
                _PrintNode(child, f, indent + INDENT, max_width)
                f.write('\n')
            f.write(' ' * indent)
            f.write(']')

        elif case(hnode_e.Record):
            h = cast(hnode.Record, UP_h)
            f.write(h.left)
            f.write(h.node_type)
            f.write('\n')
            if h.unnamed_fields is not None:
                for child in h.unnamed_fields:
                    f.write(ind)
                    _PrintNode(child, f, indent + INDENT, max_width)
                    f.write('\n')
            for field in h.fields:
                prefix = '%s:' % field.name
                f.write(ind)
                f.write(prefix)
                _PrintNode(field.val, f, indent + INDENT + len(prefix),
                           max_width)
                f.write('\n')
            f.write(' ' * indent)
            f.write(h.right)

        else:
            raise AssertionError()


def HNodePrettyPrint(node, f, max_width=80):
    # type: (hnode_t, mylib.Writer, int) -> None
    """Print an hnode tree.  There's no trailing newline."""
    buf = mylib.BufWriter()
    _PrintNode(node, buf, 0, max_width)
    f.write(buf.getvalue())
