import pytest

from splkit.strbuf import MAX_NUMBER_DIGITS, StringBuffer, printf_capacity

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_append_many_integers():
    sb = StringBuffer()
    sb.push_char("(")
    expected = "("
    for i in range(999):
        sb.append(str(i))
        expected += str(i)
    expected += ")"
    sb.push_char(")")
    assert str(sb) == expected
    assert sb.pop_char() == ")"
    sb.clear()
    assert str(sb) == ""


def test_printf_format():
    sb = StringBuffer()
    sb.printf("The answer is %d", 42)
    assert str(sb) == "The answer is 42"


def test_printf_appends_after_existing_text():
    sb = StringBuffer()
    sb.append("The answer")
    sb.printf(" is %d", 42)
    assert str(sb) == "The answer is 42"


def test_pop_char_on_empty_raises():
    sb = StringBuffer()
    with pytest.raises(IndexError):
        sb.pop_char()


def test_len_and_bool_track_contents():
    sb = StringBuffer()
    assert len(sb) == 0
    assert not sb
    sb.append("ABCDE")
    assert len(sb) == 5
    assert sb
    sb.pop_char()
    assert len(sb) == 4
    assert str(sb) == "ABCD"


def test_push_char_rejects_strings():
    sb = StringBuffer()
    with pytest.raises(ValueError):
        sb.push_char("ab")


@pytest.mark.parametrize(
    "fmt, args, expected",
    [
        ("ABCDE", (), 5),
        ("%%", (), 1),
        ("%d", (42,), MAX_NUMBER_DIGITS),
        ("%50d", (42,), 50),
        ("%*d", (50, 42), 50),
        ("%s", (ALPHABET,), 26),
        ("%10.10s", (ALPHABET,), 10),
        ("%50s", (ALPHABET,), 50),
    ],
)
def test_printf_capacity(fmt, args, expected):
    assert printf_capacity(fmt, *args) == expected


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("The answer is %d", (42,)),
        ("%s and %s", ("cat", "dog")),
        ("%c%c", ("a", "b")),
        ("%8.3f|%e", (3.14159, 1.5e10)),
        ("%*d", (40, -7)),
    ],
)
def test_capacity_covers_formatted_length(fmt, args):
    assert printf_capacity(fmt, *args) >= len(fmt % args)


def test_capacity_missing_argument_raises():
    with pytest.raises(ValueError):
        printf_capacity("%d")