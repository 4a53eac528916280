import pytest

from tinyforth import InteractiveForth


@pytest.fixture(autouse=True)
def default_prompt(monkeypatch):
    monkeypatch.delenv('TINYFORTH_PROMPT', raising=False)


def test_repl_runs_lines_until_bye(forth, lines, output):
    lines.lines = ["1 2 +", ".", "bye", "never read"]
    assert forth.repl(banner=False) == 0
    assert output.getvalue() == "3\n"
    assert lines.lines == ["never read"]


def test_repl_ends_at_eof(forth, lines):
    lines.lines = ["7"]
    assert forth.repl(banner=False) == 0
    assert forth.stack == [7]


def test_repl_reports_errors_and_drops_the_line(forth, lines, output):
    lines.lines = ["1 foo 2", "3 .S"]
    assert forth.repl(banner=False) == 0
    assert output.getvalue() == "Error: Unknown word 'foo'\n[1, 3]\n"


def test_repl_continuation_prompt(forth, lines, output):
    lines.lines = [": sq", "dup * ;", "4 sq ."]
    forth.repl(banner=False)
    assert lines.prompts == ['ok> ', '...> ', 'ok> ', 'ok> ']
    assert output.getvalue() == "16\n"


def test_repl_eof_inside_definition(forth, lines, output):
    lines.lines = [": sq dup"]
    assert forth.repl(banner=False) == 1
    assert output.getvalue() == "Error: Definition of 'sq' is missing ';'\n"
    assert 'sq' not in forth.dictionary


def test_repl_prompt_from_environment(forth, lines, monkeypatch):
    monkeypatch.setenv('TINYFORTH_PROMPT', '> ')
    forth.repl(banner=False)
    assert lines.prompts == ['> ']


def test_repl_banner(forth, output):
    forth.repl()
    assert output.getvalue().startswith("TinyForth")


def test_repl_keyboard_interrupt(forth, output):
    replies = iter(["1 2", KeyboardInterrupt, "3"])

    def reader(prompt):
        reply = next(replies, None)
        if reply is None:
            raise EOFError()
        if reply is KeyboardInterrupt:
            raise KeyboardInterrupt()
        return reply

    forth.line_reader = reader
    assert forth.repl(banner=False) == 0
    assert "(Ctrl+C)" in output.getvalue()
    assert forth.stack == [1, 2, 3]


def test_push_and_pop():
    f = InteractiveForth()
    f.push(10, 20).execute("+")
    assert f.pop() == 30
    assert f.pop() is None


def test_call_pushes_and_peek():
    f = InteractiveForth()
    f(1, 2)(3)
    assert f.peek() == 3
    assert f.stack == [1, 2, 3]
    assert repr(f) == "[1, 2, 3]"


def test_push_wraps_into_cell():
    f = InteractiveForth(cell_bits=8)
    f.push(200)
    assert f.stack == [-56]
