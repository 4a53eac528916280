"""
TinyForth REPL - Evaluator, interactive Read-Eval-Print Loop and DSL interface
"""

import logging
import os

from .core import (Bye, ForthBase, InterpretationError,
                   MalformedDefinitionError, UnknownWordError)
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .compiler import ForthCompiler
from .io_words import ForthIO

logger = logging.getLogger(__name__)

READY_PROMPT = 'ok> '
CONTINUE_PROMPT = '...> '


class Forth(ForthBase, ForthArithmetic, ForthStack, ForthCompiler, ForthIO):
    """Complete Forth interpreter combining all mixins"""

    def __init__(self, output=None, line_reader=None, cell_bits=64):
        super().__init__(output=output, line_reader=line_reader,
                         cell_bits=cell_bits)
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_stack_words()
        self._register_arithmetic_words()
        self._register_compiler_words()
        self._register_io_words()
        logger.debug("registered %d words", len(self.dictionary))

    def eval(self, text):
        """Queue text as pending input and interpret it word by word.

        Stops early, leaving the rest pending, when a colon-definition
        needs more input. Errors propagate after the failing word; the
        words already run keep their effects.
        """
        self._queue_input(text)
        if self._defining:
            self._continue_definition()
        while not self._defining:
            token = self._read_word()
            if token is None:
                break
            self._interpret(token)
        return self

    def _interpret(self, token):
        entry = self._resolve(token)
        if entry is None:
            logger.debug("unknown word %r", token)
            raise UnknownWordError(token)
        self._run(entry)

    def finish(self):
        """Declare the end of input. An open definition is malformed."""
        if not self._defining:
            return self
        name = self._current_name
        self._close_definition()
        if name is None:
            raise MalformedDefinitionError("Definition is missing a name")
        raise MalformedDefinitionError(f"Definition of '{name}' is missing ';'")

    def execute(self, text):
        """Interpret a complete program"""
        self.eval(text)
        return self.finish()

    def reset_input(self):
        """Drop pending input and any open definition"""
        self._pending.clear()
        self._close_definition()
        return self


class ForthREPL:
    """Mixin providing REPL functionality"""

    def _prompt(self):
        if self._defining:
            return CONTINUE_PROMPT
        return os.environ.get('TINYFORTH_PROMPT', READY_PROMPT)

    def repl(self, banner=True):
        """Start interactive REPL

        Args:
            banner: print the greeting before the first prompt.

        Returns the exit code requested with bye, 0 at end of input,
        1 if the input ended inside a definition.
        """
        if banner:
            self._write("TinyForth - a tiny threaded Forth\n")
            self._write("Type 'bye' to exit, '.D' to list words\n")

        while True:
            try:
                try:
                    line = self.line_reader(self._prompt())
                except EOFError:
                    break
                self.eval(line)
            except Bye as e:
                return e.code
            except InterpretationError as e:
                self._write(f"Error: {e.message}\n")
                self.reset_input()
            except KeyboardInterrupt:
                self._write("\n(Ctrl+C) Type 'bye' to exit\n")
                self.reset_input()

        try:
            self.finish()
        except MalformedDefinitionError as e:
            self._write(f"Error: {e.message}\n")
            return 1
        return 0


class InteractiveForth(Forth, ForthREPL):
    """Complete Interactive Forth with REPL and DSL support"""

    def __repr__(self):
        return f"{self.stack}"

    def __call__(self, *values):
        return self.push(*values)

    def push(self, *values):
        for v in values:
            self.stack.append(self._wrap(int(v)))
        return self

    def pop(self):
        return self.stack.pop() if self.stack else None

    def peek(self):
        return self.stack[-1] if self.stack else None
