import io

import pytest
from rich.console import Console

from tash.reader import StreamLineReader


def test_reads_lines_without_newline() -> None:
    reader = StreamLineReader(io.StringIO("ls -la\npwd\n"))
    assert reader.read_line("") == "ls -la"
    assert reader.read_line("") == "pwd"


def test_eof_on_first_read_raises() -> None:
    reader = StreamLineReader(io.StringIO(""))
    with pytest.raises(EOFError):
        reader.read_line("tash> ")


def test_empty_line_is_not_eof() -> None:
    reader = StreamLineReader(io.StringIO("\n"))
    assert reader.read_line("") == ""
    with pytest.raises(EOFError):
        reader.read_line("")


def test_unterminated_last_line_is_returned_then_eof() -> None:
    reader = StreamLineReader(io.StringIO("echo hi"))
    assert reader.read_line("") == "echo hi"
    with pytest.raises(EOFError):
        reader.read_line("")


def test_long_line_is_not_truncated() -> None:
    line = "x" * 5000
    reader = StreamLineReader(io.StringIO(line + "\n"))
    assert reader.read_line("") == line


def test_small_buffer_grows() -> None:
    reader = StreamLineReader(io.StringIO("abcdefghij\n"), buffer_size=2)
    assert reader.read_line("") == "abcdefghij"


def test_prompt_is_written_to_console() -> None:
    console = Console(file=io.StringIO(), color_system=None)
    reader = StreamLineReader(io.StringIO("exit\n"), console)
    assert reader.read_line("tash> ") == "exit"
    assert console.file.getvalue().startswith("tash>")
