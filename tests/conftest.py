import io

import pytest

from tinyforth import InteractiveForth


class ScriptedLines:
    """Line reader fed from a list; raises EOFError once exhausted"""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=''):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError()
        return self.lines.pop(0)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def lines():
    return ScriptedLines()


@pytest.fixture
def forth(output, lines):
    return InteractiveForth(output=output, line_reader=lines)
