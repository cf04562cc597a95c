import io

import pytest

from miniprintf.printf import FormatArgumentError, format_string, printf


def test_plain_text_unchanged():
    assert format_string("hello, world") == "hello, world"


def test_empty_format():
    assert format_string("") == ""


def test_double_percent():
    assert format_string("%%") == "%"


def test_trailing_percent_kept():
    assert format_string("abc%") == "abc%"


def test_unknown_conversion_dropped():
    assert format_string("%q rest") == " rest"


def test_unknown_conversion_consumes_no_argument():
    assert format_string("%q%s", "kept") == "kept"


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
@pytest.mark.parametrize("spec", ["d", "i"])
def test_signed_round_trip(spec, n):
    assert int(format_string("%" + spec, n)) == n


def test_unsigned_round_trip():
    assert int(format_string("%u", 3000000000)) == 3000000000


@pytest.mark.parametrize("n", [0, 1, 255, 0xCAFE])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert lower.upper() == upper


def test_char_and_string():
    assert format_string("%c%s", "a", "bc") == "abc"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", None) == "0x0"


def test_pointer_round_trip():
    text = format_string("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text, 16) == 0x1234ABCD


def test_mixed_conversions():
    assert format_string("[%s|%c|%%]", "str", "c") == "[str|c|%]"


def test_extra_arguments_ignored():
    assert format_string("x", 1, 2) == "x"


def test_missing_argument_raises():
    with pytest.raises(FormatArgumentError):
        format_string("%d")


def test_wrong_type_raises():
    with pytest.raises(FormatArgumentError):
        format_string("%d", "not a number")


def test_format_argument_error_is_type_error():
    with pytest.raises(TypeError):
        format_string("%s", 5)


def test_printf_to_stream_returns_length():
    stream = io.StringIO()
    written = printf("%s-%d%%", "abc", -7, stream=stream)
    assert stream.getvalue() == format_string("%s-%d%%", "abc", -7)
    assert written == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    written = printf("value %s", "here")
    captured = capsys.readouterr()
    assert captured.out == "value here"
    assert written == len(captured.out)


def test_printf_error_writes_nothing():
    stream = io.StringIO()
    with pytest.raises(FormatArgumentError):
        printf("start %d", stream=stream)
    assert stream.getvalue() == ""