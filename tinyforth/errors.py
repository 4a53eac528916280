"""
TinyForth Errors - Interpretation failures and the exit signal
"""


class InterpretationError(Exception):
    """Base class for every recoverable interpreter failure"""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class UnknownWordError(InterpretationError):
    """Token is neither a dictionary word nor an integer literal"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Unknown word '{token}'")


class MalformedDefinitionError(InterpretationError):
    """Colon-definition without a name or without its closing ;"""


class EmptyStackError(InterpretationError):
    """A word needed more operands than the stack holds"""

    def __init__(self, word, required, available):
        self.word = word
        self.required = required
        self.available = available
        super().__init__(
            f"Stack underflow in '{word}': needs {required}, has {available}")


class DivideByZeroError(InterpretationError):
    def __init__(self):
        super().__init__("Division by zero")


class Bye(Exception):
    """Raised by bye; the host decides whether to terminate"""

    def __init__(self, code=0):
        self.code = code
        super().__init__(f"BYE {code}")
