"""
TinyForth I/O - Output words and the exit request
"""

from .core import Bye


class ForthIO:
    """Mixin providing I/O operations"""

    def _register_io_words(self):
        """Register I/O words"""
        self._primitive('cr', self._cr)
        self._primitive('bye', self._bye)

    def _write(self, text):
        self.output.write(text)
        self.output.flush()

    def _cr(self):
        self._write("\n")

    def _bye(self):
        raise Bye(0)
