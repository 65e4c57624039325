import pytest

from fancyzonegen.services.selection_service import parse_index, select_layout

from tests.conftest import canvas_layout


def feed(*lines):
    it = iter(lines)
    return lambda: next(it)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", 1),
        (" 3 \n", 3),
        ("0", None),
        ("4", None),
        ("-1", None),
        ("abc", None),
        ("", None),
        ("1.5", None),
        ("1_0", None),
    ("\u0662", None),
    ("\uff11", None),
    ],
)
def test_parse_index(text, expected):
    assert parse_index(text, 3) == expected


def test_single_layout_selected_without_prompt(capsys):
    layout = canvas_layout("Only")

    def fail():
        raise AssertionError("should not prompt")

    assert select_layout([layout], input_func=fail) is layout
    assert capsys.readouterr().out == ""


def test_second_layout_selected(capsys):
    layouts = [canvas_layout("First"), canvas_layout("Second")]
    assert select_layout(layouts, input_func=feed("2")) is layouts[1]

    out = capsys.readouterr().out
    assert "[1] First\n[2] Second\n" in out
    assert out.endswith("Which layout to fill? [1-2] > ")


def test_invalid_input_reprompts(capsys):
    layouts = [canvas_layout("First"), canvas_layout("Second")]
    assert select_layout(layouts, input_func=feed("abc", "5", "1")) is layouts[0]

    out = capsys.readouterr().out
    assert out.count("Which layout to fill?") == 3
    assert out.count("[2] Second") == 3


def test_end_of_input_propagates():
    layouts = [canvas_layout("First"), canvas_layout("Second")]

    def eof():
        raise EOFError

    with pytest.raises(EOFError):
        select_layout(layouts, input_func=eof)
