import pytest

from pipex.textutils import (
    atoi,
    atol,
    atol_checked,
    find_bounded,
    format_printf,
    getenv,
    is_space,
    itoa,
    split_on,
    split_space,
    trim,
)


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_c_whitespace(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "\x1c", "\u00a0", ""])
def test_is_space_rejects_others(ch):
    assert is_space(ch) is False


@pytest.mark.parametrize("n", [0, 1, -1, 42, -1920, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_space_and_stops_at_garbage():
    assert atoi(" \t\n+42abc") == 42
    assert atoi("  -7 8") == -7


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("--5") == 0
    assert atoi("abc") == 0


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == -2147483648


def test_atol_handles_values_beyond_int():
    assert atol("2147483648") == 2147483648
    assert atol("-2147483649") == -2147483649


def test_atol_checked_accepts_int_bounds():
    assert atol_checked("2147483647") == 2147483647
    assert atol_checked("-2147483648") == -2147483648
    assert atol_checked("  +12x") == 12


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999"])
def test_atol_checked_overflow_raises(text):
    with pytest.raises(OverflowError):
        atol_checked(text)


def test_split_on_drops_empty_words():
    assert split_on("::/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]
    assert split_on("", ":") == []
    assert split_on(":::", ":") == []


def test_split_on_join_round_trip():
    words = ["a", "bb", "ccc"]
    assert split_on(":".join(words), ":") == words


def test_split_space_uses_c_whitespace_only():
    assert split_space("  ls\t-l \n -a ") == ["ls", "-l", "-a"]
    assert split_space("a\u00a0b") == ["a\u00a0b"]
    assert split_space(" \t ") == []


def test_getenv_from_list():
    env = ["PATHX=no", "HOME=/home/u", "PATH=/usr/bin:/bin"]
    assert getenv("PATH", env) == "/usr/bin:/bin"
    assert getenv("HOME", env) == "/home/u"


def test_getenv_missing_or_none():
    assert getenv("PATH", ["PATHS=x"]) is None
    assert getenv(None, ["PATH=x"]) is None
    assert getenv("PATH", None) is None


def test_getenv_from_mapping():
    assert getenv("PATH", {"PATH": "/bin"}) == "/bin"
    assert getenv("NOPE", {"PATH": "/bin"}) is None


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_trim_strips_both_ends():
    assert trim("dedededdeDebora de Jesusdeddedde", "de") == "Debora de Jesus"


def test_trim_empty_charset_keeps_text():
    assert trim("  x  ", "") == "  x  "


def test_trim_everything():
    assert trim("aaaa", "a") == ""


def test_find_bounded_within_limit():
    big = "e esta tudo bem"
    assert find_bounded(big, "tudo", 16) == big.index("tudo")


def test_find_bounded_match_crossing_limit():
    big = "e esta tudo bem"
    end = big.index("tudo") + len("tudo")
    assert find_bounded(big, "tudo", end) == big.index("tudo")
    assert find_bounded(big, "tudo", end - 1) is None


def test_find_bounded_empty_needle():
    assert find_bounded("abc", "", 0) == 0


def test_printf_null_string_and_pointer():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%p", None) == "(nil)"


def test_printf_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 4294967295])
def test_printf_hex_round_trip(n):
    assert int(format_printf("%x", n), 16) == n
    assert int(format_printf("%X", n), 16) == n
    assert format_printf("%X", n) == format_printf("%x", n).upper()


def test_printf_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_printf_pointer_prefix():
    out = format_printf("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_printf_mixed_and_literal():
    result = format_printf("%c-%s-%i %%", "A", "word", 12)
    assert result == "A-word-12 %"


def test_printf_unknown_spec_and_trailing_percent():
    assert format_printf("%q") == "q"
    assert format_printf("ab%") == "ab"


def test_printf_too_few_arguments():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)