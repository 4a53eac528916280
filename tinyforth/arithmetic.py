"""
TinyForth Arithmetic - Cell arithmetic

Results wrap into the signed cell range. Division truncates toward zero.
"""

import operator

from .core import DivideByZeroError


class ForthArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self._primitive('plus', self._plus)
        self._primitive('subtract', self._minus)
        self._primitive('mult', self._mult)
        self._primitive('divide', self._div)

        self.dictionary.alias('+', 'plus')
        self.dictionary.alias('-', 'subtract')
        self.dictionary.alias('*', 'mult')
        self.dictionary.alias('/', 'divide')

    def _binary_op(self, word, op):
        """( a b -- a op b ), second-from-top is the left operand"""
        a, b = self._pop(word, 2)
        self.stack.append(self._wrap(op(a, b)))

    def _plus(self):
        self._binary_op('+', operator.add)

    def _minus(self):
        self._binary_op('-', operator.sub)

    def _mult(self):
        self._binary_op('*', operator.mul)

    def _div(self):
        self._require('/', 2)
        if self.stack[-1] == 0:
            raise DivideByZeroError()
        self._binary_op('/', _truncating_div)


def _truncating_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient
