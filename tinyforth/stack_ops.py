"""
TinyForth Stack Operations - Stack manipulation words
"""


class ForthStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self._primitive('dup', self._dup)
        self._primitive('q_dup', self._qdup)
        self._primitive('drop', self._drop)
        self._primitive('swap', self._swap)
        self._primitive('over', self._over)
        self._primitive('rot', self._rot)

        self._primitive('dot', self._dot)
        self._primitive('dot_s', self._dot_s)

        self.dictionary.alias('?dup', 'q_dup')
        self.dictionary.alias('.', 'dot')
        self.dictionary.alias('.S', 'dot_s')

    def _dup(self):
        self._require('dup', 1)
        self.stack.append(self.stack[-1])

    def _qdup(self):
        self._require('?dup', 1)
        if self.stack[-1] != 0:
            self.stack.append(self.stack[-1])

    def _drop(self):
        self._pop('drop')

    def _swap(self):
        a, b = self._pop('swap', 2)
        self.stack.extend([b, a])

    def _over(self):
        self._require('over', 2)
        self.stack.append(self.stack[-2])

    def _rot(self):
        a, b, c = self._pop('rot', 3)
        self.stack.extend([b, c, a])

    def _dot(self):
        value, = self._pop('.')
        self._write(f"{value}\n")

    def _dot_s(self):
        self._write(f"{self.stack}\n")
