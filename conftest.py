"""
conftest.py - Run the *_test.py modules under pytest.

The packages are plain directories, imported from the repo root like
'from frontend import lexer', so the root must be on sys.path.
"""

import os
import sys

REPO_ROOT = os.path.dirname(os.path.abspath(__file__))

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
