#!/usr/bin/env python3
"""asdl/pybase.py is a runtime library for ASDL in Python"""

from mycpp import mylib

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from asdl.runtime import hnode_t


class CompoundObj(object):
    # The tag is set for variant types, which are subclasses of sum types.
    # It's not set for product types.
    _type_tag = 0  # Starts at 1.  Zero is invalid

    def PrettyTree(self):
        # type: () -> hnode_t
        raise NotImplementedError(self.__class__.__name__)

    def __repr__(self):
        # type: () -> str
        """Print this ASDL object nicely."""

        # TODO: Break this circular dependency.
        from asdl import format as fmt

        f = mylib.BufWriter()
        fmt.HNodePrettyPrint(self.PrettyTree(), f)
        return f.getvalue()
