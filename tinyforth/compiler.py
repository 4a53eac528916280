"""
TinyForth Compiler - Colon definitions and compile-time words

A definition is compiled in two passes over its body tokens: immediate
words run while compiling, every other word is captured by value into
the new word's body.
"""

import logging

from .core import UnknownWordError
from .dictionary import Compiled

logger = logging.getLogger(__name__)


class ForthCompiler:
    """Mixin providing word compilation and definition"""

    def _register_compiler_words(self):
        """Register compiler words"""
        self._primitive(':', self._colon)
        self._primitive('\\', self._line_comment, immediate=True)

        self._primitive('dot_d', self._dot_d)
        self.dictionary.alias('.D', 'dot_d')

    @property
    def defining(self):
        """True while a colon-definition waits for more input"""
        return self._defining

    def _colon(self):
        """Start a colon-definition"""
        self._defining = True
        self._current_name = None
        self._current_source = []
        self._continue_definition()

    def _continue_definition(self):
        """Collect the name and body tokens; compile once ; is read.

        If pending input runs out first the definition stays open and
        the next chunk of input resumes it.
        """
        if self._current_name is None:
            self._current_name = self._read_word()
            if self._current_name is None:
                logger.debug("definition waiting for a name")
                return

        while True:
            token = self._read_word()
            if token is None:
                logger.debug("definition of %s waiting for ;", self._current_name)
                return
            if token == ';':
                break
            self._current_source.append(token)

        name, tokens = self._current_name, self._current_source
        self._close_definition()
        self.define_word(name, tokens)

    def _close_definition(self):
        self._defining = False
        self._current_name = None
        self._current_source = []

    def define_word(self, name, tokens):
        """Compile body tokens and bind the new word to name"""
        entry = self.dictionary.define(name, self._compile_words(tokens))
        logger.debug("defined %s", entry.describe())
        return entry

    def _compile_words(self, tokens):
        entries = []
        for token in tokens:
            entry = self._resolve(token)
            if entry is None:
                logger.debug("unknown word %r while compiling", token)
                raise UnknownWordError(token)
            if entry.immediate:
                self._run(entry)
            else:
                entries.append(entry)
        return Compiled(tuple(entries))

    def _line_comment(self):
        """Drop the rest of the current line.

        Inside a definition the body is collected up to ; before any
        immediate word runs, so words between \\ and ; are still
        resolved and must exist; the line skipped is the text after ;.
        """
        self._skip_line()

    def _dot_d(self):
        for line in self.dictionary.dump():
            self._write(line + "\n")
