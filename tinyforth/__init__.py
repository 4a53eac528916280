"""
TinyForth - a tiny threaded Forth interpreter

Usage:
    from tinyforth import InteractiveForth
    forth = InteractiveForth()
    forth.execute(": square dup * ; 5 square .")
"""

from .core import (Bye, DivideByZeroError, EmptyStackError, ForthBase,
                   InterpretationError, MalformedDefinitionError,
                   UnknownWordError, tokenize)
from .dictionary import Compiled, Dictionary, Entry, Literal, Primitive
from .repl import Forth, ForthREPL, InteractiveForth

__all__ = [
    'Bye', 'Compiled', 'Dictionary', 'DivideByZeroError', 'EmptyStackError',
    'Entry', 'Forth', 'ForthBase', 'ForthREPL', 'InteractiveForth',
    'InterpretationError', 'Literal', 'MalformedDefinitionError',
    'Primitive', 'UnknownWordError', 'tokenize',
]
__version__ = '1.0.0'
