"""
TinyForth Core - Base class with fundamental infrastructure
- Exception classes
- Stack, dictionary and pending input management
- Tokenizer
- Word resolution and body execution
"""

import re
import sys
from collections import deque

from .dictionary import Compiled, Dictionary, Entry, Literal, Primitive
from .errors import (Bye, DivideByZeroError, EmptyStackError,
                     InterpretationError, MalformedDefinitionError,
                     UnknownWordError)

__all__ = [
    'Bye', 'DivideByZeroError', 'EmptyStackError', 'ForthBase',
    'InterpretationError', 'LINE_END', 'MalformedDefinitionError',
    'UnknownWordError', 'tokenize',
]

# Tokens never contain whitespace, so a newline cannot collide with a word.
LINE_END = '\n'

_INTEGER = re.compile(r'[+-]?[0-9]+')


def tokenize(text):
    """Split text into word tokens on whitespace"""
    return text.split()


class ForthBase:
    """Base mixin providing core infrastructure"""

    def __init__(self, output=None, line_reader=None, cell_bits=64):
        if cell_bits < 2:
            raise ValueError(f"cell_bits must be at least 2, got {cell_bits}")

        self.stack = []
        self.dictionary = Dictionary()
        self._pending = deque()

        self.output = output if output is not None else sys.stdout
        self.line_reader = line_reader if line_reader is not None else input

        self.cell_bits = cell_bits
        self._cell_modulus = 1 << cell_bits
        self.cell_max = (1 << (cell_bits - 1)) - 1
        self.cell_min = -(1 << (cell_bits - 1))

        self._defining = False
        self._current_name = None
        self._current_source = []

        self._register_core_words()

    def _register_core_words(self):
        """Register core words - to be extended by mixins"""
        pass

    def _primitive(self, name, func, immediate=False):
        return self.dictionary.define(name, Primitive(func), immediate)

    # -- pending input --

    def _queue_input(self, text):
        """Append the tokens of text, one line-end marker after each line"""
        for line in text.splitlines():
            self._pending.extend(tokenize(line))
            self._pending.append(LINE_END)

    def _read_word(self):
        """Remove and return the next pending token, or None when drained"""
        while self._pending:
            token = self._pending.popleft()
            if token != LINE_END:
                return token
        return None

    def _skip_line(self):
        """Drop pending tokens through the end of the current line"""
        while self._pending:
            if self._pending.popleft() == LINE_END:
                break

    @property
    def pending_tokens(self):
        return [token for token in self._pending if token != LINE_END]

    # -- resolution --

    def _parse_number(self, token):
        """Return the integer a token spells, or None"""
        if not _INTEGER.fullmatch(token):
            return None
        value = int(token)
        if not self.cell_min <= value <= self.cell_max:
            return None
        return value

    def _resolve(self, token):
        """Dictionary entries shadow literals; None when neither applies"""
        entry = self.dictionary.lookup(token)
        if entry is not None:
            return entry
        value = self._parse_number(token)
        if value is not None:
            return Entry(None, False, Literal(value))
        return None

    def _run(self, entry):
        self._run_body(entry.body)

    def _run_body(self, body):
        """Run a body; nested compiled bodies go on an explicit work stack"""
        frames = [iter((body,))]
        while frames:
            body = next(frames[-1], None)
            if body is None:
                frames.pop()
            elif isinstance(body, Literal):
                self.stack.append(body.value)
            elif isinstance(body, Compiled):
                frames.append(entry.body for entry in body.entries)
            else:
                body.func()

    # -- stack access --

    def _require(self, word, count):
        if len(self.stack) < count:
            raise EmptyStackError(word, count, len(self.stack))

    def _pop(self, word, count=1):
        """Pop count values after checking arity, returned bottom first"""
        self._require(word, count)
        values = self.stack[-count:]
        del self.stack[-count:]
        return values

    def _wrap(self, value):
        """Reduce value into the signed cell range"""
        value &= self._cell_modulus - 1
        if value > self.cell_max:
            value -= self._cell_modulus
        return value
