import pytest

from pushswap.libft.printf import printf, render


def test_plain_text_unchanged():
    assert render("sa\n") == "sa\n"


def test_percent_literal():
    assert render("100%%") == "100%"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_null_pointer():
    assert render("%p", 0) == "(nil)"
    assert render("%p", None) == "(nil)"


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"


def test_string_and_char():
    assert render("[%s|%c]", "abc", "z") == "[abc|z]"


def test_char_from_code():
    assert render("%c", ord("Q")) == "Q"


@pytest.mark.parametrize("n", [0, 1, -1, 42, 2147483647, -2147483647])
def test_decimal_round_trip(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


def test_decimal_wraps_to_32_bits():
    assert int(render("%d", 2147483648)) == -2147483648


def test_unsigned_of_negative_is_complement():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = render("%x", n)
    upper = render("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_pointer_has_prefix_and_value():
    text = render("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_unknown_conversion_produces_nothing():
    assert render("a%qb") == "ab"


def test_trailing_percent_produces_nothing():
    assert render("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        render("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "n", 12)
    written = capsys.readouterr().out
    assert written == render("%s=%d\n", "n", 12)
    assert count == len(written)
    assert int(written.split("=")[1]) == 12