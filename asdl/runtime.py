"""runtime.py.

- Nodes for pretty printing ("homogeneous nodes")
- Helpers used by the PrettyTree() methods of syntax nodes
"""

from typing import Any, List, Optional


class color_e(object):
    TypeName = 1
    StringConst = 2
    OtherConst = 3
    UserType = 4
    External = 5


class hnode_e(object):
    Record = 1
    Array = 2
    Leaf = 3


class hnode_t(object):
    _type_tag = 0

    def tag(self):
        # type: () -> int
        return self._type_tag


class Field(object):
    __slots__ = ('name', 'val')

    def __init__(self, name, val):
        # type: (str, hnode_t) -> None
        self.name = name
        self.val = val


class hnode__Record(hnode_t):
    _type_tag = 1
    __slots__ = ('node_type', 'left', 'right', 'fields', 'unnamed_fields')

    def __init__(self, node_type, left, right, fields, unnamed_fields):
        # type: (str, str, str, List[Field], Optional[List[hnode_t]]) -> None
        self.node_type = node_type
        self.left = left
        self.right = right
        self.fields = fields
        self.unnamed_fields = unnamed_fields


class hnode__Array(hnode_t):
    _type_tag = 2
    __slots__ = ('children',)

    def __init__(self, children):
        # type: (List[hnode_t]) -> None
        self.children = children


class hnode__Leaf(hnode_t):
    _type_tag = 3
    __slots__ = ('s', 'color')

    def __init__(self, s, color):
        # type: (str, int) -> None
        self.s = s
        self.color = color


class hnode(object):
    Record = hnode__Record
    Array = hnode__Array
    Leaf = hnode__Leaf


def NewRecord(node_type):
    # type: (str) -> hnode.Record
    return hnode.Record(
        node_type,
        '(',
        ')',
        [],  # fields
        None,  # unnamed fields
    )


def NewLeaf(s, e_color):
    # type: (Optional[str], int) -> hnode.Leaf
    # for None fields, e.g. If.else_children when there's no else
    if s is None:
        return hnode.Leaf('_', color_e.OtherConst)
    else:
        return hnode.Leaf(s, e_color)


def NewArray(nodes):
    # type: (List[Any]) -> hnode.Array
    """Pretty print a list of ASDL objects."""
    return hnode.Array([n.PrettyTree() for n in nodes])


# Constants to avoid 'StrFromC("T")' in ASDL-generated code
TRUE_STR = 'T'
FALSE_STR = 'F'
