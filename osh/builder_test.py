#!/usr/bin/env python3
"""
builder_test.py: Tests for builder.py
"""

import unittest

from frontend.syntax_asdl import command, CompoundWord, word_part
from osh import builder  # module under test
from osh.builder import NodeStack, ListSlot, FieldSlot, ctx_Destination


class NodeStackTest(unittest.TestCase):

    def testListSlot(self):
        stack = NodeStack()
        children = []
        stack.Push(ListSlot(children))

        stack.Append('a')
        stack.Append('b')
        self.assertEqual(['a', 'b'], children)

        stack.Pop()
        self.assertEqual(0, stack.Depth())

    def testFieldSlot(self):
        stack = NodeStack()
        node = command.WhileLoop.CreateNull(alloc_lists=True)
        stack.Push(FieldSlot(node, 'cond'))

        cond = command.Simple.CreateNull(alloc_lists=True)
        stack.Append(cond)
        self.assertIs(cond, node.cond)

        # A field can only be set once
        self.assertRaises(AssertionError, stack.Append, cond)

    def testPopAndAppend(self):
        stack = NodeStack()
        top = []
        stack.Push(ListSlot(top))

        # Like a rule that builds a word
        w = CompoundWord.CreateNull(alloc_lists=True)
        stack.Push(ListSlot(w.parts))
        stack.Append(word_part.Literal('echo'))
        stack.PopAndAppend(w)

        self.assertEqual(1, stack.Depth())
        self.assertEqual([w], top)
        self.assertEqual(1, len(w.parts))

    def testMisuse(self):
        stack = NodeStack()
        self.assertRaises(AssertionError, stack.Pop)
        self.assertRaises(AssertionError, stack.Append, 'x')

        stack.Push(ListSlot([]))
        # pops the only slot, then there's nowhere to append
        self.assertRaises(AssertionError, stack.PopAndAppend, 'x')

    def testCtxDestination(self):
        stack = NodeStack()
        node = command.If.CreateNull(alloc_lists=True)

        with ctx_Destination(stack, ListSlot(node.then_children)):
            self.assertEqual(1, stack.Depth())
            stack.Append('cmd')
        self.assertEqual(0, stack.Depth())
        self.assertEqual(['cmd'], node.then_children)

    def testCtxDestinationUnbalanced(self):
        stack = NodeStack()
        try:
            with ctx_Destination(stack, ListSlot([])):
                stack.Push(ListSlot([]))  # never popped
        except AssertionError as e:
            self.assertIn('Unbalanced', str(e))
        else:
            self.fail('Expected AssertionError')

    def testCtxDestinationPropagatesErrors(self):
        stack = NodeStack()
        with self.assertRaises(ValueError):
            with ctx_Destination(stack, ListSlot([])):
                raise ValueError()
        self.assertEqual(0, stack.Depth())

    def testRepr(self):
        self.assertEqual('<ListSlot 2>', repr(builder.ListSlot([1, 2])))
        self.assertEqual('<FieldSlot cond>',
                         repr(builder.FieldSlot(object(), 'cond')))


if __name__ == '__main__':
    unittest.main()
