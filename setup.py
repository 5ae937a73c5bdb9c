#!/usr/bin/env python3
"""
Build shfront as a Python application.

The packages are plain directories without __init__.py, imported from the
repo root, e.g. 'from frontend import lexer'.
"""
from setuptools import setup

setup(
    name="shfront",
    version="0.1",
    description="A single-pass lexer and parser for POSIX-like shell",
    packages=["asdl", "bin", "core", "frontend", "mycpp", "osh"],
    python_requires=">=3.6",
    extras_require={"test": ["pytest"]},
    scripts=["bin/sh_parse.py"],
)
