import pytest

from pushswap.formatter import format_string, printf


def test_plain_text_unchanged():
    assert format_string("pa\n") == "pa\n"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_char_from_string_and_code():
    assert format_string("%c%c", "q", ord("r")) == "qr"


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


@pytest.mark.parametrize("number", [0, 5, -17, 2147483647, -2147483648])
def test_decimal_round_trip(number):
    assert int(format_string("%d", number)) == number
    assert format_string("%i", number) == format_string("%d", number)


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2147483648) == "-2147483648"


def test_unsigned_is_non_negative_and_congruent():
    out = int(format_string("%u", -1))
    assert 0 <= out < 2 ** 32
    assert out % 2 ** 32 == -1 % 2 ** 32


@pytest.mark.parametrize("number", [0, 10, 255, 48879, 2 ** 32 - 1])
def test_hex_round_trip(number):
    lower = format_string("%x", number)
    upper = format_string("%X", number)
    assert int(lower, 16) == number
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_pointer_prefix_and_value():
    out = format_string("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_unknown_conversion_produces_nothing():
    assert format_string("a%qb") == "ab"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_string("%d")


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_string("abc%")


def test_string_conversion_rejects_number():
    with pytest.raises(TypeError):
        format_string("%s", 3)


def test_printf_writes_and_counts(capsys):
    count = printf("stack a : %d -> %s\n", 3, None)
    out = capsys.readouterr().out
    assert out == "stack a : 3 -> (null)\n"
    assert count == len(out)