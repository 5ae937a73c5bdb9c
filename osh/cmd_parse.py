# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
cmd_parse.py - Parse high level shell commands.
"""

from asdl import pretty
from core import error
from core import ui
from frontend.id_kind import Id, Id_t, Kind, GetKind, DisplayName
from frontend import lexer_def
from frontend.lexer import ctx_Unquoted
from frontend.syntax_asdl import (
    Token,
    Program,
    CompoundWord,
    Redir,
    Elif,
    command,
    word_part,
)
from mycpp.mylib import log
from osh import word_
from osh.builder import NodeStack, ListSlot, FieldSlot, ctx_Destination

from typing import Optional, Tuple, NoReturn, TYPE_CHECKING
if TYPE_CHECKING:
    from frontend.lexer import Lexer
    from frontend.parse_lib import ParseContext
    from frontend.reader import _Reader

_ = log

NO_STOP = ()  # type: Tuple[Id_t, ...]

_RPAREN_STOP = (Id.Op_RParen,)
_RBRACE_STOP = (Id.Lit_RBrace,)
_IF_STOP = (Id.KW_Fi, Id.KW_Elif, Id.KW_Else)
_FI_STOP = (Id.KW_Fi,)
_DONE_STOP = (Id.KW_Done,)

# && || | take one more command as the right operand
_BINARY_OPS = (Id.Op_DAmp, Id.Op_DPipe, Id.Op_Pipe)


class CommandParser(object):
    """Recursive descent parser for a small POSIX-like shell language.

    - We use regex-like iteration rather than recursive references
      ?  means  optional (0 or 1)
      *  means  0 or more
      +  means  1 or more

    - Keywords are spelled in Caps:
      If   Elif   Fi

    - Operator tokens are quoted:
      '('   '|'

    Methods in this class should ROUGHLY CORRESPOND to grammar productions, and
    the production should be in the method docstrings.

    Rules don't return nodes.  They hand each completed node to self.stack,
    which inserts it into the slot pushed by the enclosing rule.  See
    osh/builder.py.

    Keywords aren't tokens.  'if' is a Lit_Chars token, and it's only a
    keyword where _Peek(Id.KW_If) asks for one.  So 'echo if' is a command
    with 2 words.
    """

    def __init__(self, parse_ctx, lexer, line_reader):
        # type: (ParseContext, Lexer, _Reader) -> None
        self.parse_ctx = parse_ctx
        self.lexer = lexer
        self.line_reader = line_reader
        self.arena = line_reader.arena

        self.stack = NodeStack()

        # The first error.  Later ones can't replace it.
        self.err = None  # type: Optional[error._ErrorWithLocation]

        self.cur_tok = None  # type: Token  # lookahead
        self.prev_tok = None  # type: Token  # lookback, for func names
        self.spaced = False  # whether space preceded cur_tok

    def _Next(self):
        # type: () -> None
        """Advance to the next token, remembering the current one."""
        tok = self.lexer.Read()
        if self.lexer.err is not None:
            raise self.lexer.err

        if self.cur_tok is not None and self.cur_tok.id != Id.Eof_Real:
            self.prev_tok = self.cur_tok
        self.cur_tok = tok
        self.spaced = self.lexer.spaced

    def _Peek(self, id_):
        # type: (Id_t) -> bool
        """Is the current token id_?

        A literal spelled like a keyword counts as the keyword.
        """
        tok = self.cur_tok
        if tok.id == id_:
            return True
        return (tok.id == Id.Lit_Chars and
                lexer_def.KeywordId(tok.tval) == id_)

    def _PeekAny(self, ids):
        # type: (Tuple[Id_t, ...]) -> bool
        for id_ in ids:
            if self._Peek(id_):
                return True
        return False

    def _Got(self, id_):
        # type: (Id_t) -> bool
        """Consume the current token if it's id_."""
        if self._Peek(id_):
            self._Next()
            return True
        return False

    def _Want(self, id_):
        # type: (Id_t) -> None
        """Consume the current token, which must be id_."""
        if not self._Peek(id_):
            self._Wanted(DisplayName(id_))
        self._Next()

    def _AtEof(self):
        # type: () -> bool
        return self.cur_tok.id == Id.Eof_Real

    def _Die(self, msg, blame_tok):
        # type: (str, Token) -> NoReturn
        # A read fault in ReadOnly() or ReadUntil() came first
        if self.lexer.err is not None:
            raise self.lexer.err
        error.p_die(msg, blame_tok)

    def _Wanted(self, what, blame_tok=None):
        # type: (str, Optional[Token]) -> NoReturn
        tok = blame_tok if blame_tok else self.cur_tok
        self._Die('unexpected token %s - wanted %s' % (ui.PrettyToken(tok),
                                                       what), tok)

    def ParseProgram(self):
        # type: () -> Tuple[Program, Optional[error._ErrorWithLocation]]
        """
        program : command* Eof_Real

        Returns the Program, and the first error or None.  On error, the
        Program has the commands that were completed before it.
        """
        prog = Program.CreateNull(alloc_lists=True)
        try:
            with ctx_Destination(self.stack, ListSlot(prog.children)):
                self._Next()  # prime the lookahead
                self._ParseCommands(NO_STOP)
        except error._ErrorWithLocation as e:
            if self.err is None:
                self.err = e
        return prog, self.err

    def _ParseCommands(self, stop, propagate=False):
        # type: (Tuple[Id_t, ...], bool) -> int
        """
        commands : command* ; until a token in 'stop', or EOF

        Args:
          stop: tokens that end the list without being consumed
          propagate: also end simple commands at 'stop', so that ) ends
            'echo hi' in (echo hi)

        Returns the number of commands parsed.
        """
        cmd_stop = stop if propagate else NO_STOP
        count = 0
        while True:
            # blank lines between commands
            while self._Got(Id.Op_Newline):
                pass

            if self._AtEof() or self._PeekAny(stop):
                break

            self.ParseCommand(cmd_stop)
            count += 1
        return count

    def _ParseBody(self, stop, propagate=False):
        # type: (Tuple[Id_t, ...], bool) -> None
        """A compound command's body must have at least one command."""
        if self._ParseCommands(stop, propagate=propagate) == 0:
            self._Wanted('command')

    def ParseCommand(self, stop=NO_STOP):
        # type: (Tuple[Id_t, ...]) -> None
        """
        command : Comment
                | subshell | brace_group
                | if_clause | while_clause | for_clause
                | simple_command | function_def

        Newlines before the command are skipped.  A command is required, so
        EOF after them is an error.
        """
        while self._Got(Id.Op_Newline):
            pass

        if self._Got(Id.Ignored_Comment):
            self.stack.Append(command.Comment(self.prev_tok.tval))
            return

        if self._Peek(Id.Op_LParen):
            self.ParseSubshell()
            return

        if self._Peek(Id.Lit_LBrace):
            self.ParseBraceGroup()
            return

        if self._Peek(Id.KW_If):
            self.ParseIf()
            return

        if self._Peek(Id.KW_While):
            self.ParseWhile()
            return

        if self._Peek(Id.KW_For):
            self.ParseFor()
            return

        if self._Peek(Id.Lit_Chars) or self._Peek(Id.Left_DollarSign):
            self.ParseSimpleCommand(stop)
            return

        self._Wanted('command')

    def ParseSubshell(self):
        # type: () -> None
        """
        subshell : '(' command+ ')'

        Looking at Op_LParen
        """
        node = command.Subshell.CreateNull(alloc_lists=True)
        self._Next()  # skip past (

        self.stack.Push(ListSlot(node.children))
        self._ParseBody(_RPAREN_STOP, propagate=True)
        self._Want(Id.Op_RParen)
        self.stack.PopAndAppend(node)

    def ParseBraceGroup(self):
        # type: () -> None
        """
        brace_group : '{' command+ '}'

        Looking at Lit_LBrace
        """
        node = command.BraceGroup.CreateNull(alloc_lists=True)
        self._Next()  # skip past {

        self.stack.Push(ListSlot(node.children))
        self._ParseBody(_RBRACE_STOP)
        self._Want(Id.Lit_RBrace)
        self.stack.PopAndAppend(node)

    def ParseIf(self):
        # type: () -> None
        """
        if_clause : If command Then command+
                    (Elif command Then command+)*
                    (Else command+)?
                    Fi
        """
        if_node = command.If.CreateNull(alloc_lists=True)
        self._Next()  # past 'if'

        with ctx_Destination(self.stack, FieldSlot(if_node, 'cond')):
            self.ParseCommand()
        self._Want(Id.KW_Then)

        with ctx_Destination(self.stack, ListSlot(if_node.then_children)):
            self._ParseBody(_IF_STOP)

        with ctx_Destination(self.stack, ListSlot(if_node.elifs)):
            while self._Got(Id.KW_Elif):
                arm = Elif.CreateNull(alloc_lists=True)
                with ctx_Destination(self.stack, FieldSlot(arm, 'cond')):
                    self.ParseCommand()
                self._Want(Id.KW_Then)

                self.stack.Push(ListSlot(arm.then_children))
                self._ParseBody(_IF_STOP)
                self.stack.PopAndAppend(arm)

        if self._Got(Id.KW_Else):
            if_node.else_children = []
            with ctx_Destination(self.stack, ListSlot(if_node.else_children)):
                self._ParseBody(_FI_STOP)

        self._Want(Id.KW_Fi)
        self.stack.Append(if_node)

    def ParseWhile(self):
        # type: () -> None
        """
        while_clause : While command Do command+ Done
        """
        node = command.WhileLoop.CreateNull(alloc_lists=True)
        self._Next()  # past 'while'

        with ctx_Destination(self.stack, FieldSlot(node, 'cond')):
            self.ParseCommand()
        self._Want(Id.KW_Do)

        with ctx_Destination(self.stack, ListSlot(node.body)):
            self._ParseBody(_DONE_STOP)
        self._Want(Id.KW_Done)

        self.stack.Append(node)

    def ParseFor(self):
        # type: () -> None
        """
        for_clause : For Lit_Chars In word* (';' | newline)
                     Do command+ Done
        """
        node = command.ForEach.CreateNull(alloc_lists=True)
        self._Next()  # past 'for'

        self._Want(Id.Lit_Chars)
        node.name = self.prev_tok.tval
        self._Want(Id.KW_In)

        with ctx_Destination(self.stack, ListSlot(node.iter_words)):
            self._ParseWordList()
        self._Want(Id.KW_Do)

        with ctx_Destination(self.stack, ListSlot(node.body)):
            self._ParseBody(_DONE_STOP)
        self._Want(Id.KW_Done)

        self.stack.Append(node)

    def _ParseWordList(self):
        # type: () -> int
        """
        word_list : word* (';' | newline)

        The terminator is consumed.
        """
        count = 0
        while not self._AtEof():
            if self._Got(Id.Op_Semi) or self._Got(Id.Op_Newline):
                break
            self.ParseWord()
            count += 1
        return count

    def ParseSimpleCommand(self, stop):
        # type: (Tuple[Id_t, ...]) -> None
        """
        simple_command : word (word | redirect)* terminator?
                       | word ('&&' | '||' | '|') command
        function_def   : word '(' ')' command

        terminator     : ';' | newline | '&'

        Looking at Lit_Chars or Left_DollarSign
        """
        cmd = command.Simple.CreateNull(alloc_lists=True)
        self.stack.Push(ListSlot(cmd.args))

        name_tok = self.cur_tok
        self.ParseWord()

        if self._Got(Id.Op_LParen):
            self._Want(Id.Op_RParen)
            self.stack.Pop()  # the function name isn't an argument
            self._ParseFunctionBody(cmd.args[0], name_tok)
            return

        while not self._AtEof():
            if self._PeekAny(stop):
                break

            id_ = self.cur_tok.id
            if self._Peek(Id.Lit_Chars) or self._Peek(Id.Left_DollarSign):
                self.ParseWord()

            elif id_ in _BINARY_OPS:
                self._Next()
                self._ParseBinary(id_, cmd, stop)
                return

            elif GetKind(id_) == Kind.Redir:
                self.ParseRedirect()

            elif self._Got(Id.Op_Amp):
                cmd.background = True
                break

            elif self._Got(Id.Op_Semi) or self._Got(Id.Op_Newline):
                break

            else:
                self._Die('unexpected token %s after command' %
                          ui.PrettyToken(self.cur_tok), self.cur_tok)

        self.stack.PopAndAppend(cmd)

    def _ParseFunctionBody(self, name_word, name_tok):
        # type: (CompoundWord, Token) -> None
        """
        function_def : word '(' ')' command

        The name is checked after the parens, and blamed on the word.
        """
        name = word_.ShFunctionName(name_word)
        if len(name) == 0:
            self._Die('invalid func name %s' %
                      pretty.EncodeString(word_.Pretty(name_word)), name_tok)

        func = command.ShFunction.CreateNull()
        func.name = name
        with ctx_Destination(self.stack, FieldSlot(func, 'body')):
            self.ParseCommand()
        self.stack.Append(func)

    def _ParseBinary(self, op_id, left, stop):
        # type: (Id_t, command.Simple, Tuple[Id_t, ...]) -> None
        """
        Called after && || or |.  'left' is the command so far, and its args
        are still on the stack.

        a && b || c  =>  Binary(&&, a, Binary(||, b, c))
        """
        node = command.Binary.CreateNull()
        node.op = op_id
        with ctx_Destination(self.stack, FieldSlot(node, 'right')):
            self.ParseCommand(stop)
        node.left = left
        self.stack.PopAndAppend(node)  # pop left.args

    def ParseRedirect(self):
        # type: () -> None
        """
        redirect : ('>' | '>>' | '<') word
        """
        op_id = self.cur_tok.id
        assert GetKind(op_id) == Kind.Redir, self.cur_tok
        self._Next()

        r = Redir.CreateNull()
        r.op = op_id
        with ctx_Destination(self.stack, FieldSlot(r, 'target')):
            self.ParseWord()
        self.stack.Append(r)

    def ParseWord(self):
        # type: () -> None
        """
        word : (Lit_Chars | '$' expansion)+  ; with no space in between
        """
        w = CompoundWord.CreateNull(alloc_lists=True)
        with ctx_Destination(self.stack, ListSlot(w.parts)):
            while not self._AtEof():
                if len(w.parts) and self.spaced:
                    break

                if self._Got(Id.Lit_Chars):
                    self.stack.Append(word_part.Literal(self.prev_tok.tval))
                elif self._Peek(Id.Left_DollarSign):
                    self._ParseDollar()
                else:
                    break

            if len(w.parts) == 0:
                self._Wanted('word')

        self.stack.Append(w)

    def _ParseDollar(self):
        # type: () -> None
        """
        expansion : '{' raw text '}'
                  | '(' command* ')'
                  | Lit_Chars

        Looking at Left_DollarSign.  The lexer is just past the $, so we ask
        it for the next character directly.
        """
        if self.lexer.ReadOnly('{'):
            text = self.lexer.ReadUntil('}')
            if text is None:
                self._Wanted('}', self.lexer.EofToken())
            self.stack.Append(word_part.ParamExpansion(text))
            self._Next()
            return

        if self.lexer.ReadOnly('('):
            self.ParseCommandSub()
            return

        # $name is just a literal
        self._Next()
        self._Want(Id.Lit_Chars)
        self.stack.Append(word_part.Literal('$' + self.prev_tok.tval))

    def ParseCommandSub(self):
        # type: () -> None
        """
        command_sub : '$(' command* ')'

        Called just after $(.  The body is lexed as if outside of quotes, so
        the quote in "$(echo ')')" doesn't end anything.
        """
        node = word_part.CommandSub.CreateNull(alloc_lists=True)
        with ctx_Unquoted(self.lexer):
            self._Next()
            with ctx_Destination(self.stack, ListSlot(node.children)):
                self._ParseCommands(_RPAREN_STOP, propagate=True)
            if not self._Peek(Id.Op_RParen):
                self._Wanted(DisplayName(Id.Op_RParen))
        self._Next()  # past ), possibly back inside quotes
        self.stack.Append(node)
