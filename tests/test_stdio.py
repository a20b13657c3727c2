from __future__ import annotations

import io

import pytest

from adapters.stdio import StdinLineSource, StdoutLineSink, strip_terminator


@pytest.mark.parametrize(
    "raw, expected",
    [("abc\n", "abc"), ("abc\r\n", "abc"), ("abc", "abc"), ("\n", ""), ("a\rb\n", "a\rb")],
)
def test_strip_terminator(raw: str, expected: str):
    assert strip_terminator(raw) == expected


def test_piped_input_streams_every_line():
    source = StdinLineSource(io.StringIO("one\ntwo\n\nthree"))
    assert not source.interactive
    assert list(source) == ["one", "two", "", "three"]


def test_terminal_input_reads_a_single_line():
    source = StdinLineSource(io.StringIO("one\ntwo\n"), interactive=True)
    assert list(source) == ["one"]


def test_terminal_input_at_eof_yields_nothing():
    assert list(StdinLineSource(io.StringIO(""), interactive=True)) == []


def test_sink_terminates_every_line():
    out = io.StringIO()
    sink = StdoutLineSink(out)
    sink.write_line("Coding Challenge")
    sink.write_line("")
    sink.flush()
    assert out.getvalue() == "Coding Challenge\n\n"
