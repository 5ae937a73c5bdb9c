""" core/error.py """

from typing import Optional, NoReturn, TYPE_CHECKING

if TYPE_CHECKING:
    from frontend.syntax_asdl import Token


class _ErrorWithLocation(Exception):
    """An error that can be formatted with its position.

    str(err) gives the one line form, e.g.

        foo.sh:3:9: unexpected token ; - wanted literal

    The form with a code excerpt is in ui.ErrorFormatter.
    """

    def __init__(self, msg, location):
        # type: (str, Optional[Token]) -> None
        Exception.__init__(self, msg)
        self.msg = msg
        self.location = location

    def HasLocation(self):
        # type: () -> bool
        return self.location is not None

    def UserErrorString(self):
        # type: () -> str
        return self.msg

    def Position(self):
        # type: () -> str
        """e.g. 'foo.sh:3:9', or '' if there's no location."""
        tok = self.location
        if tok is None:
            return ''
        if tok.line is None:
            return '%d' % tok.col
        return '%s:%d:%d' % (tok.line.src, tok.line.line_num, tok.col)

    def __str__(self):
        # type: () -> str
        pos = self.Position()
        if len(pos):
            return '%s: %s' % (pos, self.msg)
        return self.msg

    def __repr__(self):
        # type: () -> str
        return '<%s %r>' % (self.msg, self.location)


class Usage(_ErrorWithLocation):
    """For flag parsing errors in main()."""

    def __init__(self, msg, location=None):
        # type: (str, Optional[Token]) -> None
        _ErrorWithLocation.__init__(self, msg, location)


class Parse(_ErrorWithLocation):
    """Used in the lexer and parser."""

    def __init__(self, msg, location):
        # type: (str, Optional[Token]) -> None
        _ErrorWithLocation.__init__(self, msg, location)


class ReadError(_ErrorWithLocation):
    """Reading the input failed, e.g. an I/O error or invalid UTF-8.

    The message is the one from the underlying exception.
    """

    def __init__(self, cause, location):
        # type: (Exception, Optional[Token]) -> None
        _ErrorWithLocation.__init__(self, str(cause), location)
        self.cause = cause


def e_usage(msg, location=None):
    # type: (str, Optional[Token]) -> NoReturn
    """Convenience wrapper for arg parsing / validation errors.

    Caught by main() programs like bin/sh_parse.py, which exit with status 1.
    """
    raise Usage(msg, location)


def p_die(msg, location):
    # type: (str, Optional[Token]) -> NoReturn
    """Convenience wrapper for parse errors.

    Exits with status 2.  See bin/sh_parse.py.
    """
    raise Parse(msg, location)
