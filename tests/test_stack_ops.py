import pytest

from tinyforth import EmptyStackError, InterpretationError


@pytest.mark.parametrize('before, word, after', [
    ([1, 2], 'dup', [1, 2, 2]),
    ([3], '?dup', [3, 3]),
    ([0], '?dup', [0]),
    ([1, 2], 'drop', [1]),
    ([1, 2], 'swap', [2, 1]),
    ([1, 2], 'over', [1, 2, 1]),
    ([1, 2, 3], 'rot', [2, 3, 1]),
    ([9, 1, 2, 3], 'rot', [9, 2, 3, 1]),
])
def test_stack_words(forth, before, word, after):
    forth.push(*before).eval(word)
    assert forth.stack == after


@pytest.mark.parametrize('before, word', [
    ([], 'dup'),
    ([], '?dup'),
    ([], 'drop'),
    ([1], 'swap'),
    ([1], 'over'),
    ([1, 2], 'rot'),
    ([], '.'),
])
def test_underflow_is_recoverable_and_leaves_stack(forth, before, word):
    forth.push(*before)
    with pytest.raises(EmptyStackError):
        forth.eval(word)
    assert forth.stack == before


def test_underflow_details(forth):
    forth.push(1)
    with pytest.raises(EmptyStackError) as excinfo:
        forth.eval('rot')
    error = excinfo.value
    assert (error.word, error.required, error.available) == ('rot', 3, 1)
    assert isinstance(error, InterpretationError)


def test_dot_prints_and_pops(forth, output):
    forth.eval("7 .")
    assert output.getvalue() == "7\n"
    assert forth.stack == []


def test_dot_negative(forth, output):
    forth.eval("-12 dot")
    assert output.getvalue() == "-12\n"


def test_dot_on_empty_stack(forth, output):
    with pytest.raises(EmptyStackError):
        forth.eval(".")
    assert output.getvalue() == ""


def test_dot_s_leaves_stack(forth, output):
    forth.eval("1 2 3 .S")
    assert output.getvalue() == "[1, 2, 3]\n"
    assert forth.stack == [1, 2, 3]


def test_dot_s_empty(forth, output):
    forth.eval("dot_s")
    assert output.getvalue() == "[]\n"
