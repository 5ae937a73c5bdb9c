#!/usr/bin/env python3
"""
cmd_parse_test.py: Tests for cmd_parse.py
"""

import io
import unittest

from core import error
from core import test_lib
from core import ui
from frontend.id_kind import Id
from frontend.syntax_asdl import command_e, word_part_e
from frontend import parse_lib
from mycpp import mylib
from osh import word_


def _ParseProgram(code_str):
    arena = test_lib.MakeArena('<cmd_parse_test>')
    c_parser = test_lib.InitCommandParser(code_str, arena=arena)
    prog, err = c_parser.ParseProgram()
    return c_parser, prog, err


def assertParseProgram(test, code_str):
    c_parser, prog, err = _ParseProgram(code_str)
    if err is not None:
        f = mylib.BufWriter()
        ui.ErrorFormatter(f).PrettyPrintError(err)
        test.fail('%r failed:\n%s' % (code_str, f.getvalue()))
    test.assertEqual(0, c_parser.stack.Depth())
    return prog


def assertParseError(test, code_str, msg, pos=None):
    _, prog, err = _ParseProgram(code_str)
    if err is None:
        test.fail('Expected %r to fail, got %s' %
                  (code_str, test_lib.TreeString(prog)))
    test.assertEqual(msg, err.msg)
    if pos is not None:
        test.assertEqual('<cmd_parse_test>:' + pos, err.Position())
    return prog, err


def assertOneCommand(test, code_str):
    prog = assertParseProgram(test, code_str)
    test.assertEqual(1, len(prog.children), prog.children)
    return prog.children[0]


def _Words(cmd):
    return [word_.Pretty(w) for w in cmd.Words()]


class SimpleCommandTest(unittest.TestCase):

    def testOnePerLine(self):
        prog = assertParseProgram(self, 'echo hi\nls -l\npwd\n')
        self.assertEqual(3, len(prog.children))
        for node in prog.children:
            self.assertEqual(command_e.Simple, node.tag())

        self.assertEqual(['echo', 'hi'], _Words(prog.children[0]))
        self.assertEqual(['ls', '-l'], _Words(prog.children[1]))
        self.assertEqual(['pwd'], _Words(prog.children[2]))

    def testSemicolons(self):
        prog = assertParseProgram(self, 'a;b ; c')
        self.assertEqual([['a'], ['b'], ['c']],
                         [_Words(node) for node in prog.children])

    def testBlankLines(self):
        prog = assertParseProgram(self, '\n\necho a\n\n')
        self.assertEqual(1, len(prog.children))

        prog = assertParseProgram(self, '')
        self.assertEqual([], prog.children)

    def testKeywordsAsArgs(self):
        node = assertOneCommand(self, 'echo if')
        self.assertEqual(command_e.Simple, node.tag())
        self.assertEqual(['echo', 'if'], _Words(node))

        node = assertOneCommand(self, 'echo then fi done')
        self.assertEqual(['echo', 'then', 'fi', 'done'], _Words(node))

    def testQuoting(self):
        # single quotes: backslash is kept
        node = assertOneCommand(self, "echo 'a\\nb'")
        self.assertEqual(['echo', "'a\\nb'"], _Words(node))

        # double quotes: escaped newline is removed
        node = assertOneCommand(self, 'echo "a\\\nb"')
        self.assertEqual(['echo', '"ab"'], _Words(node))

        # one word, several quoted regions
        node = assertOneCommand(self, 'echo "a b"\'c d\'e')
        self.assertEqual(['echo', '"a b"\'c d\'e'], _Words(node))

    def testRedirects(self):
        node = assertOneCommand(self, 'cat < in > out >> log')
        self.assertEqual(4, len(node.args))
        self.assertEqual(['cat'], _Words(node))

        redirects = node.Redirects()
        self.assertEqual([Id.Redir_Less, Id.Redir_Great, Id.Redir_DGreat],
                         [r.op for r in redirects])
        self.assertEqual(['in', 'out', 'log'],
                         [word_.Pretty(r.target) for r in redirects])

        # Redirects are interleaved with words, in source order
        node = assertOneCommand(self, 'echo a >f b')
        self.assertEqual(['echo', 'a', 'b'], _Words(node))
        self.assertEqual('Redir', node.args[2].__class__.__name__)

    def testRedirectWithoutWord(self):
        assertParseError(self, 'echo >', 'unexpected token EOF - wanted word',
                         '1:7')
        assertParseError(self, 'echo > ;', 'unexpected token ; - wanted word',
                         '1:8')

    def testBackground(self):
        prog = assertParseProgram(self, 'sleep 1 & echo done')
        self.assertEqual(2, len(prog.children))
        self.assertEqual(True, prog.children[0].background)
        self.assertEqual(False, prog.children[1].background)
        self.assertEqual(['echo', 'done'], _Words(prog.children[1]))

    def testUnexpectedAfterCommand(self):
        assertParseError(self, 'echo a )', 'unexpected token ) after command',
                         '1:8')
        assertParseError(self, 'echo a {', 'unexpected token { after command',
                         '1:8')

    def testTreeString(self):
        node = assertParseProgram(self, 'echo hi')
        self.assertEqual(
            '(Program children:[(command.Simple args:['
            '(CompoundWord parts:[(word_part.Literal tval:echo)]) '
            '(CompoundWord parts:[(word_part.Literal tval:hi)])'
            '] background:F)])',
            test_lib.TreeString(node))


class CommentTest(unittest.TestCase):

    def testComment(self):
        node = assertOneCommand(self, '# hello')
        self.assertEqual(command_e.Comment, node.tag())
        self.assertEqual(' hello', node.text)

    def testCommentOnItsOwnLine(self):
        prog = assertParseProgram(self, 'echo a\n# note\necho b')
        self.assertEqual(
            [command_e.Simple, command_e.Comment, command_e.Simple],
            [node.tag() for node in prog.children])
        self.assertEqual(['echo', 'a'], _Words(prog.children[0]))
        self.assertEqual(' note', prog.children[1].text)

        # ; ends the command first
        prog = assertParseProgram(self, 'echo a; # note')
        self.assertEqual([command_e.Simple, command_e.Comment],
                         [node.tag() for node in prog.children])

    def testCommentAfterArgs(self):
        prog, _ = assertParseError(self, 'echo a # note\necho b',
                                   'unexpected token comment after command',
                                   '1:8')
        self.assertEqual([], prog.children)

    def testHashInWord(self):
        node = assertOneCommand(self, 'echo a#b')
        self.assertEqual(['echo', 'a#b'], _Words(node))


class WordTest(unittest.TestCase):

    def testParamExpansion(self):
        node = assertOneCommand(self, 'echo ${HOME}/bin')
        w = node.Words()[1]
        self.assertEqual([word_part_e.ParamExpansion, word_part_e.Literal],
                         [p.tag() for p in w.parts])
        self.assertEqual('HOME', w.parts[0].text)
        self.assertEqual('/bin', w.parts[1].tval)

        # Raw text, no nesting or quoting
        node = assertOneCommand(self, 'echo ${a:-"x y"}')
        self.assertEqual('a:-"x y"', node.Words()[1].parts[0].text)

    def testUnterminatedParamExpansion(self):
        assertParseError(self, 'echo ${x', 'unexpected token EOF - wanted }',
                         '1:9')

    def testDollarName(self):
        node = assertOneCommand(self, 'echo $x')
        w = node.Words()[1]
        self.assertEqual(1, len(w.parts))
        self.assertEqual(word_part_e.Literal, w.parts[0].tag())
        self.assertEqual('$x', w.parts[0].tval)

        node = assertOneCommand(self, 'echo a$b')
        self.assertEqual(['a', '$b'], [p.tval for p in node.Words()[1].parts])

    def testBareDollar(self):
        assertParseError(self, 'echo $;', 'unexpected token ; - wanted literal',
                         '1:7')

    def testQuotedDollar(self):
        node = assertOneCommand(self, 'echo "$x"')
        w = node.Words()[1]
        self.assertEqual(['"', '$x"'], [p.tval for p in w.parts])

        node = assertOneCommand(self, 'echo "a $x b" c')
        self.assertEqual(['echo', '"a $x b"', 'c'], _Words(node))

    def testQuotedCommandSub(self):
        node = assertOneCommand(self, 'echo "$(date)"')
        w = node.Words()[1]
        self.assertEqual(
            [word_part_e.Literal, word_part_e.CommandSub, word_part_e.Literal],
            [p.tag() for p in w.parts])
        sub = w.parts[1]
        self.assertEqual(['date'], _Words(sub.children[0]))

        # The quote inside $( ) doesn't close the outer one
        node = assertOneCommand(self, 'echo "x $(echo \')\') y"')
        w = node.Words()[1]
        self.assertEqual('"x $(...) y"', word_.Pretty(w))
        sub = w.parts[1]
        self.assertEqual(['echo', "')'"], _Words(sub.children[0]))
        self.assertEqual(' y"', w.parts[2].tval)

    def testSingleQuotedDollar(self):
        node = assertOneCommand(self, "echo '$x'")
        w = node.Words()[1]
        self.assertEqual(1, len(w.parts))
        self.assertEqual("'$x'", w.parts[0].tval)

    def testUnterminatedQuote(self):
        assertParseError(self, "echo 'abc",
                         "reached EOF without closing quote '", '1:10')
        assertParseError(self, 'echo "$x',
                         'reached EOF without closing quote "', '1:9')


class CommandSubTest(unittest.TestCase):

    def testNested(self):
        node = assertOneCommand(self, '$( $( true ) )')
        self.assertEqual(command_e.Simple, node.tag())

        outer = node.Words()[0].parts[0]
        self.assertEqual(word_part_e.CommandSub, outer.tag())
        self.assertEqual(1, len(outer.children))

        middle = outer.children[0]
        self.assertEqual(command_e.Simple, middle.tag())
        inner = middle.Words()[0].parts[0]
        self.assertEqual(word_part_e.CommandSub, inner.tag())
        self.assertEqual(['true'], _Words(inner.children[0]))

    def testSeveralCommands(self):
        node = assertOneCommand(self, 'echo $(a; b\nc)')
        sub = node.Words()[1].parts[0]
        self.assertEqual([['a'], ['b'], ['c']],
                         [_Words(c) for c in sub.children])

    def testEmpty(self):
        node = assertOneCommand(self, 'echo $()')
        sub = node.Words()[1].parts[0]
        self.assertEqual(word_part_e.CommandSub, sub.tag())
        self.assertEqual([], sub.children)

    def testAdjacentText(self):
        node = assertOneCommand(self, 'echo a$(b)c d')
        self.assertEqual(['echo', 'a$(...)c', 'd'], _Words(node))

    def testUnmatched(self):
        assertParseError(self, 'echo $(true',
                         'unexpected token EOF - wanted )', '1:12')
        assertParseError(self, 'echo $( $( true )',
                         'unexpected token EOF - wanted )', '1:18')


class CompoundCommandTest(unittest.TestCase):

    def testSubshell(self):
        node = assertOneCommand(self, '(cd /tmp; ls)')
        self.assertEqual(command_e.Subshell, node.tag())
        self.assertEqual([['cd', '/tmp'], ['ls']],
                         [_Words(c) for c in node.children])

    def testSubshellBinary(self):
        # ) ends the right operand too
        node = assertOneCommand(self, '(a && b)')
        self.assertEqual(command_e.Subshell, node.tag())
        binary = node.children[0]
        self.assertEqual(command_e.Binary, binary.tag())
        self.assertEqual(['b'], _Words(binary.right))

    def testEmptySubshell(self):
        assertParseError(self, '( )', 'unexpected token ) - wanted command',
                         '1:3')

    def testBraceGroup(self):
        node = assertOneCommand(self, '{ echo a; echo b; }')
        self.assertEqual(command_e.BraceGroup, node.tag())
        self.assertEqual([['echo', 'a'], ['echo', 'b']],
                         [_Words(c) for c in node.children])

        node = assertOneCommand(self, '{\n  echo a\n}')
        self.assertEqual(1, len(node.children))

    def testEmptyBraceGroup(self):
        assertParseError(self, '{ }', 'unexpected token } - wanted command',
                         '1:3')

    def testIf(self):
        node = assertOneCommand(self, 'if true; then echo hi; fi')
        self.assertEqual(command_e.If, node.tag())
        self.assertEqual(['true'], _Words(node.cond))
        self.assertEqual([['echo', 'hi']],
                         [_Words(c) for c in node.then_children])
        self.assertEqual([], node.elifs)
        self.assertEqual(None, node.else_children)

    def testIfElifElse(self):
        node = assertOneCommand(
            self, 'if a; then b; elif c; then d; elif e; then f; else g; fi')
        self.assertEqual(['a'], _Words(node.cond))
        self.assertEqual(2, len(node.elifs))
        self.assertEqual(['c'], _Words(node.elifs[0].cond))
        self.assertEqual([['d']],
                         [_Words(c) for c in node.elifs[0].then_children])
        self.assertEqual(['e'], _Words(node.elifs[1].cond))
        self.assertEqual([['g']], [_Words(c) for c in node.else_children])

    def testIfMultiLine(self):
        node = assertOneCommand(self, """\
if test -f x
then
  # comment
  cat x
fi
""")
        self.assertEqual(['test', '-f', 'x'], _Words(node.cond))
        self.assertEqual([command_e.Comment, command_e.Simple],
                         [c.tag() for c in node.then_children])

    def testEmptyThen(self):
        assertParseError(self, 'if true; then fi',
                         'unexpected token "fi" - wanted command', '1:15')
        assertParseError(self, 'if true; then\n  fi',
                         'unexpected token "fi" - wanted command', '2:3')

    def testEmptyElse(self):
        assertParseError(self, 'if a; then b; else fi',
                         'unexpected token "fi" - wanted command', '1:20')

    def testMissingThen(self):
        assertParseError(self, 'if true; echo',
                         'unexpected token "echo" - wanted then', '1:10')

    def testMissingFi(self):
        assertParseError(self, 'if a; then b',
                         'unexpected token EOF - wanted fi', '1:13')

    def testWhile(self):
        node = assertOneCommand(self, 'while true; do echo x; done')
        self.assertEqual(command_e.WhileLoop, node.tag())
        self.assertEqual(['true'], _Words(node.cond))
        self.assertEqual([['echo', 'x']], [_Words(c) for c in node.body])

    def testEmptyWhile(self):
        assertParseError(self, 'while true; do done',
                         'unexpected token "done" - wanted command', '1:16')

    def testFor(self):
        node = assertOneCommand(self, 'for i in a b c; do echo $i; done')
        self.assertEqual(command_e.ForEach, node.tag())
        self.assertEqual('i', node.name)
        self.assertEqual(['a', 'b', 'c'],
                         [word_.Pretty(w) for w in node.iter_words])
        self.assertEqual([['echo', '$i']], [_Words(c) for c in node.body])

    def testForNewlines(self):
        node = assertOneCommand(self, 'for x in a b\ndo\n  echo $x\ndone\n')
        self.assertEqual('x', node.name)
        self.assertEqual(2, len(node.iter_words))
        self.assertEqual(1, len(node.body))

    def testForNoWords(self):
        node = assertOneCommand(self, 'for x in; do echo; done')
        self.assertEqual([], node.iter_words)

    def testForMissingIn(self):
        assertParseError(self, 'for x a; do echo; done',
                         'unexpected token "a" - wanted in', '1:7')


class FunctionTest(unittest.TestCase):

    def testFunction(self):
        node = assertOneCommand(self, 'foo() { echo hi; }')
        self.assertEqual(command_e.ShFunction, node.tag())
        self.assertEqual('foo', node.name)
        self.assertEqual(command_e.BraceGroup, node.body.tag())
        self.assertEqual([['echo', 'hi']],
                         [_Words(c) for c in node.body.children])

    def testBodyOnNextLine(self):
        node = assertOneCommand(self, 'f_1 ()\n{\n  echo; }')
        self.assertEqual('f_1', node.name)
        self.assertEqual(command_e.BraceGroup, node.body.tag())

    def testInvalidName(self):
        _, err = assertParseError(self, '123abc() { :; }',
                                  'invalid func name "123abc"', '1:1')
        self.assertEqual('<cmd_parse_test>:1:1: invalid func name "123abc"',
                         str(err))

        assertParseError(self, 'true\n  1x() { :; }',
                         'invalid func name "1x"', '2:3')
        assertParseError(self, '$x() { :; }', 'invalid func name "$x"', '1:1')

    def testMissingBody(self):
        assertParseError(self, 'f()', 'unexpected token EOF - wanted command',
                         '1:4')


class BinaryTest(unittest.TestCase):

    def testRightAssociative(self):
        node = assertOneCommand(self, 'a && b && c')
        self.assertEqual(command_e.Binary, node.tag())
        self.assertEqual(Id.Op_DAmp, node.op)
        self.assertEqual(['a'], _Words(node.left))

        right = node.right
        self.assertEqual(command_e.Binary, right.tag())
        self.assertEqual(Id.Op_DAmp, right.op)
        self.assertEqual(['b'], _Words(right.left))
        self.assertEqual(['c'], _Words(right.right))

    def testMixedOps(self):
        node = assertOneCommand(self, 'ls -l | wc || echo fail')
        self.assertEqual(Id.Op_Pipe, node.op)
        self.assertEqual(['ls', '-l'], _Words(node.left))
        self.assertEqual(Id.Op_DPipe, node.right.op)
        self.assertEqual(['echo', 'fail'], _Words(node.right.right))

    def testOperandAfterNewline(self):
        node = assertOneCommand(self, 'a &&\n  b')
        self.assertEqual(['b'], _Words(node.right))

    def testCompoundRight(self):
        node = assertOneCommand(self, 'test -d x || { echo no; }')
        self.assertEqual(command_e.BraceGroup, node.right.tag())

    def testMissingRight(self):
        assertParseError(self, 'a &&', 'unexpected token EOF - wanted command',
                         '1:5')

    def testTreeString(self):
        node = assertOneCommand(self, 'a | b')
        self.assertEqual(
            '(command.Binary op:Id.Op_Pipe '
            'left:(command.Simple args:[(CompoundWord parts:[(word_part.Literal tval:a)])] background:F) '
            'right:(command.Simple args:[(CompoundWord parts:[(word_part.Literal tval:b)])] background:F))',
            test_lib.TreeString(node))


class ErrorTest(unittest.TestCase):

    def testUnexpectedToken(self):
        assertParseError(self, ')', 'unexpected token ) - wanted command',
                         '1:1')
        assertParseError(self, 'echo a; ;',
                         'unexpected token ; - wanted command', '1:9')
        assertParseError(self, 'echo a\n&& b',
                         'unexpected token && - wanted command', '2:1')

    def testFirstErrorWins(self):
        c_parser, prog, err = _ParseProgram('echo ) ; )')
        self.assertEqual('unexpected token ) after command', err.msg)
        self.assertEqual('<cmd_parse_test>:1:6', err.Position())
        self.assertIs(err, c_parser.err)

    def testPartialProgram(self):
        prog, err = assertParseError(self, 'echo a\nfoo )\necho b',
                                     'unexpected token ) after command',
                                     '2:5')
        # Commands completed before the error are kept
        self.assertEqual(1, len(prog.children))
        self.assertEqual(['echo', 'a'], _Words(prog.children[0]))

    def testErrorFormatter(self):
        _, _, err = _ParseProgram('if true; then fi')
        f = mylib.BufWriter()
        ui.ErrorFormatter(f).PrettyPrintError(err)
        self.assertEqual(
            '  if true; then fi\n'
            '                ^~\n'
            '<cmd_parse_test>:1:15: unexpected token "fi" - wanted command\n',
            f.getvalue())


class _FailingFile(object):

    def __init__(self, lines):
        self.lines = lines

    def readline(self):
        if len(self.lines):
            return self.lines.pop(0)
        raise OSError('input/output error')


class ParseFileTest(unittest.TestCase):

    def testParseString(self):
        prog, err = parse_lib.ParseString('echo "$x"; ls', source_name='x.sh')
        self.assertEqual(None, err)
        self.assertEqual(2, len(prog.children))

    def testErrorPosition(self):
        prog, err = parse_lib.ParseFile(io.StringIO('echo a\necho $;\n'),
                                        'foo.sh')
        self.assertTrue(isinstance(err, error.Parse), err)
        self.assertEqual('foo.sh:2:7: unexpected token ; - wanted literal',
                         str(err))

    def testReadError(self):
        prog, err = parse_lib.ParseFile(_FailingFile(['echo a\n']), 'foo.sh')
        self.assertTrue(isinstance(err, error.ReadError), err)
        self.assertEqual('foo.sh:2:1: input/output error', str(err))
        self.assertEqual('input/output error', str(err.cause))


if __name__ == '__main__':
    unittest.main()
