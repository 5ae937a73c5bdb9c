"""
builder.py - A stack of destinations for syntax tree nodes.

Grammar rules don't return nodes.  A rule that starts a collection pushes a
slot, and every completed node is appended to the slot on top:

    cmd = command.Subshell.CreateNull(alloc_lists=True)
    stack.Push(ListSlot(cmd.children))
    ...                         # nested rules Append() into cmd.children
    stack.PopAndAppend(cmd)     # cmd lands in ITS parent

So a node can only end up in its syntactic parent, and only once.  Misuse of
the stack is a bug in the parser, so it raises AssertionError rather than a
parse error.
"""

from mycpp.mylib import log

from typing import Any, List

_ = log


class _Slot(object):

    def Add(self, node):
        # type: (Any) -> None
        raise NotImplementedError()


class ListSlot(_Slot):
    """Append to a list, e.g. Program.children or CompoundWord.parts."""

    def __init__(self, L):
        # type: (List[Any]) -> None
        assert L is not None
        self.L = L

    def Add(self, node):
        # type: (Any) -> None
        self.L.append(node)

    def __repr__(self):
        # type: () -> str
        return '<ListSlot %d>' % len(self.L)


class FieldSlot(_Slot):
    """Set a single field once, e.g. If.cond or ShFunction.body."""

    def __init__(self, obj, attr):
        # type: (Any, str) -> None
        self.obj = obj
        self.attr = attr

    def Add(self, node):
        # type: (Any) -> None
        if getattr(self.obj, self.attr) is not None:
            raise AssertionError('%s.%s set twice' %
                                 (self.obj.__class__.__name__, self.attr))
        setattr(self.obj, self.attr, node)

    def __repr__(self):
        # type: () -> str
        return '<FieldSlot %s>' % self.attr


class NodeStack(object):

    def __init__(self):
        # type: () -> None
        self.slots = []  # type: List[_Slot]

    def Depth(self):
        # type: () -> int
        return len(self.slots)

    def Push(self, slot):
        # type: (_Slot) -> None
        self.slots.append(slot)

    def Pop(self):
        # type: () -> None
        if len(self.slots) == 0:
            raise AssertionError('Pop() on empty NodeStack')
        self.slots.pop()

    def Append(self, node):
        # type: (Any) -> None
        """Insert a completed node into the slot on top."""
        if len(self.slots) == 0:
            raise AssertionError('Append() on empty NodeStack')
        self.slots[-1].Add(node)

    def PopAndAppend(self, node):
        # type: (Any) -> None
        """Close the current slot, then hand node to the parent's slot."""
        self.Pop()
        self.Append(node)


class ctx_Destination(object):
    """Push a slot for the duration of a rule.

    with ctx_Destination(self.stack, FieldSlot(node, 'cond')):
        self.ParseCommand()
    """

    def __init__(self, stack, slot):
        # type: (NodeStack, _Slot) -> None
        stack.Push(slot)
        self.stack = stack
        self.depth = stack.Depth()

    def __enter__(self):
        # type: () -> None
        pass

    def __exit__(self, type, value, traceback):
        # type: (Any, Any, Any) -> None
        if type is None and self.stack.Depth() != self.depth:
            raise AssertionError('Unbalanced NodeStack: %d != %d' %
                                 (self.stack.Depth(), self.depth))
        self.stack.Pop()
