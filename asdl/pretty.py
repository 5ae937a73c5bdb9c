"""
pretty.py
"""
import json
import re

# Word characters, - and _, as well as path name characters . and /.
PLAIN_WORD_RE = r'[a-zA-Z0-9\-_./]+'

_PLAIN_WORD_RE = re.compile(PLAIN_WORD_RE + '$')


def IsPlainWord(s):
    # type: (str) -> bool
    if '\n' in s:  # account for the fact that $ matches the newline
        return False
    return bool(_PLAIN_WORD_RE.match(s))


def EncodeString(s, unquoted_ok=False):
    # type: (str, bool) -> str
    if unquoted_ok and IsPlainWord(s):
        return s
    return json.dumps(s)
