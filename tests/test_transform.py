import pytest

from pylibft.chars import toupper
from pylibft.transform import split, striteri, strjoin, strmapi, strtrim, substr


def test_substr_example():
    assert substr("Banana", 2, 3) == "nan"


def test_substr_whole_string():
    assert substr("Banana", 0, 6) == "Banana"


def test_substr_length_clamped():
    assert substr("Banana", 0, 100) == "Banana"


def test_substr_start_past_end_is_empty():
    assert substr("Banana", 6, 3) == ""
    assert substr("Banana", 50, 3) == ""


def test_substr_bytes_kind_preserved():
    assert substr(bytearray(b"Banana"), 0, 6) == b"Banana"
    assert isinstance(substr(bytearray(b"Banana"), 0, 6), bytes)


def test_substr_stops_at_nul():
    assert substr("Ban\0ana", 0, 10) == "Ban"


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("Banana", -1, 3)


def test_substr_none_raises():
    with pytest.raises(TypeError):
        substr(None, 0, 1)


def test_strjoin_concatenates():
    s1, s2 = "Flint &", "& Steel"
    joined = strjoin(s1, s2)
    assert joined.startswith(s1)
    assert joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_strjoin_empty_parts():
    assert strjoin("", "Banana") == "Banana"
    assert strjoin("Banana", "") == "Banana"


def test_strjoin_bytes():
    assert strjoin(b"Flint &", bytearray(b"& Steel")).startswith(b"Flint &")


def test_strjoin_mixed_raises():
    with pytest.raises(TypeError):
        strjoin("Flint", b"Steel")


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "Steel")


def test_strtrim_example():
    assert strtrim("dsidsiFLINT && STEELisdisds", "dis") == "FLINT && STEEL"


def test_strtrim_spaces():
    assert strtrim("   Banana   ", " ") == "Banana"
    assert strtrim("\n\t hello \t\n", " \n\t") == "hello"


def test_strtrim_nothing_to_trim():
    assert strtrim("hello", "xyz") == "hello"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  hello  ", "") == "  hello  "


def test_strtrim_none_set_raises():
    with pytest.raises(TypeError):
        strtrim("100% Null", None)


def test_split_example():
    assert split("^^^1^^2a,^^^^3^^^^--h^^^^", "^") == ["1", "2a,", "3", "--h"]


@pytest.mark.parametrize(
    "text, sep",
    [("  hello   world  ", " "), ("a,b,,c,", ","), ("nothing", "z"), ("", "a")],
)
def test_split_invariants(text, sep):
    parts = split(text, sep)
    assert all(parts)
    assert all(sep not in part for part in parts)
    assert "".join(parts) == text.replace(sep, "")


def test_split_empty_string():
    assert split("", "a") == []


def test_split_only_separators():
    assert split("^^^^", "^") == []


def test_split_int_separator_on_bytes():
    assert split(b"a b", ord(" ")) == [b"a", b"b"]


def test_split_nul_separator_gives_whole_string():
    assert split("Banana", "\0") == ["Banana"]


def test_split_none_raises():
    with pytest.raises(TypeError):
        split(None, " ")


def test_strmapi_uppercases():
    text = "Flint and Steel"
    assert strmapi(text, lambda i, ch: chr(toupper(ch))) == text.upper()


def test_strmapi_receives_indices():
    seen = []
    strmapi("abc", lambda i, ch: seen.append(i) or ch)
    assert seen == [0, 1, 2]


def test_strmapi_bytes():
    assert strmapi(b"Banana", lambda i, b: toupper(b)) == b"BANANA"


def test_strmapi_none_function_raises():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_in_place():
    buf = bytearray(b"Flint and Steel")
    striteri(buf, lambda i, b: toupper(b))
    assert buf == bytearray(b"Flint and Steel".upper())


def test_striteri_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    striteri(buf, lambda i, b: toupper(b))
    assert buf == bytearray(b"AB\0cd")


def test_striteri_none_result_leaves_byte():
    buf = bytearray(b"Banana")
    striteri(buf, lambda i, b: None)
    assert buf == bytearray(b"Banana")


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("Banana", lambda i, b: b)