import io

import pytest

from monoopoly.console import CLEAR_SCREEN, Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_token_then_line_returns_rest_of_line():
    console, _ = make("add_player   Ann Lee\n")
    assert console.read_token() == "add_player"
    assert console.read_line() == "Ann Lee"


def test_line_after_last_token_is_empty():
    console, _ = make("start\nnext\n")
    assert console.read_token() == "start"
    assert console.read_line() == ""
    assert console.read_line() == "next"


def test_tokens_skip_blank_lines():
    console, _ = make("\n   \nfirst second\n")
    assert console.read_token() == "first"
    assert console.read_token() == "second"


def test_read_line_strips_only_leading_spaces():
    console, _ = make("   name with tail  \n")
    assert console.read_line() == "name with tail  "


def test_read_int_parses_numbers():
    console, _ = make("42 -7\n")
    assert console.read_int() == 42
    assert console.read_int() == -7


def test_read_int_rejects_words():
    console, _ = make("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_ask_yes_or_no_retries_until_valid():
    console, out = make("x\ny\n")
    assert console.ask_yes_or_no() is True
    assert "Invalid input! Only valid options are 'y' and 'n'" in out.getvalue()


def test_ask_yes_or_no_accepts_no():
    console, _ = make("n\n")
    assert console.ask_yes_or_no() is False


def test_end_of_input_raises_eof():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_token()
    with pytest.raises(EOFError):
        console.read_line()


def test_write_and_clear_reach_output():
    console, out = make("")
    console.write("hello")
    console.clear()
    assert out.getvalue() == "hello" + CLEAR_SCREEN


def test_pause_does_not_consume_scripted_input():
    console, out = make("go\n")
    console.pause()
    assert console.read_token() == "go"
    assert "Press any key to continue" in out.getvalue()