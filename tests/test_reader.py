import io

import pytest

from lsh.reader import prompt, read_line


def test_read_line_strips_newline():
    stream = io.StringIO("ls -la\necho hi\n")
    assert read_line(stream) == "ls -la"
    assert read_line(stream) == "echo hi"


def test_read_line_empty_line_is_not_end_of_input():
    stream = io.StringIO("\nexit\n")
    assert read_line(stream) == ""
    assert read_line(stream) == "exit"


def test_read_line_raises_eof_on_empty_stream():
    with pytest.raises(EOFError):
        read_line(io.StringIO(""))


def test_read_line_drops_unterminated_last_line():
    stream = io.StringIO("ls\necho tail")
    assert read_line(stream) == "ls"
    with pytest.raises(EOFError):
        read_line(stream)


@pytest.mark.parametrize("size", [1023, 1024, 2000, 5000])
def test_read_line_long_lines_are_not_truncated(size):
    text = "".join(chr(ord("a") + i % 26) for i in range(size))
    stream = io.StringIO(text + "\nnext\n")
    assert read_line(stream) == text
    assert read_line(stream) == "next"


def test_read_line_keeps_other_whitespace():
    assert read_line(io.StringIO("  a\tb \r\n")) == "  a\tb \r"


def test_read_line_defaults_to_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("pwd\n"))
    assert read_line() == "pwd"


def test_read_line_allocation_failure_is_fatal(capsys):
    class Exhausted:
        def read(self, n):
            raise MemoryError

    with pytest.raises(SystemExit) as exc:
        read_line(Exhausted())

    assert exc.value.code == 1
    assert "lsh: allocation error" in capsys.readouterr().err


def test_prompt_is_written_and_flushed(capsys):
    prompt()
    assert capsys.readouterr().out == "> "
